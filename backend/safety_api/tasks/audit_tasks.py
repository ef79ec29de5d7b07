"""
Celery tasks for the moderation audit trail.

Handles:
- Writing one audit row per moderation outcome (dispatched fire-and-forget)

Losing an audit row is acceptable, so failed inserts are logged and dropped
rather than retried.
"""

import logging
from typing import Any

from safety_api.core.celery_app import celery_app
from safety_api.core.config import get_settings
from safety_api.core.database import get_supabase

logger = logging.getLogger(__name__)


@celery_app.task(ignore_result=True)
def write_moderation_audit(row: dict[str, Any]) -> dict:
    """
    Insert a moderation audit row into the audit table.

    Args:
        row: Prepared audit row (see ModerationService.build_audit_row)

    Returns:
        Dict with whether the row was written
    """
    table = get_settings().audit_table
    try:
        get_supabase().table(table).insert(row).execute()
    except Exception as e:
        logger.error(
            "Failed to log moderation action for %s %s: %s",
            row.get("target_type"),
            row.get("target_id"),
            e,
        )
        return {"written": False}

    logger.debug(
        "Moderation audit written: %s %s", row.get("target_type"), row.get("target_id")
    )
    return {"written": True}
