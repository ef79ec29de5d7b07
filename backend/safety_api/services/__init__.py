"""Business logic services for the Safety Screening API."""

from safety_api.services.moderation_service import ModerationService

__all__ = ["ModerationService"]
