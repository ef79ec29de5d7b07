"""Background tasks for the Safety Screening API."""

from safety_api.tasks.audit_tasks import write_moderation_audit

__all__ = ["write_moderation_audit"]
