"""
Moderation service built on the screening engine.

Handles:
- Best-effort audit logging of moderation outcomes (Celery, fire-and-forget)
- Message-send, profile-publish and review-submission screening gates
- User violation history for escalation decisions

The engine itself is pure; every side effect of moderation lives here.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Sequence, Union

from supabase import Client

from safety_api.core.config import get_settings
from safety_api.core.constants import (
    AUDIT_ACTION,
    AUDIT_ACTOR,
    BLOCKED_ATTEMPT_TARGET,
    HISTORY_RESTRICT_RECENT,
    HISTORY_RESTRICT_TOTAL,
    HISTORY_REVIEW_RECENT,
    HISTORY_REVIEW_TOTAL,
    HISTORY_WARNING_TOTAL,
    UNASSIGNED_TARGET,
)
from safety_api.core.database import get_supabase
from safety_api.models.moderation import (
    ContentBlockedError,
    ContentType,
    ModerationResult,
    ProfileReviewRequiredError,
    RecommendedAction,
    RiskLevel,
    UserViolationPattern,
)
from safety_api.screening import moderate_content, moderate_profile_content
from safety_api.tasks.audit_tasks import write_moderation_audit

logger = logging.getLogger(__name__)

REVIEW_CONTEXT = "review"
ESCALATED_LEVELS = {RiskLevel.HIGH.value, RiskLevel.CRITICAL.value}


class ModerationService:
    """Service for content screening side effects and history."""

    def __init__(self, supabase: Optional[Client] = None) -> None:
        self._supabase = supabase

    @property
    def supabase(self) -> Client:
        if self._supabase is None:
            self._supabase = get_supabase()
        return self._supabase

    # =========================================================================
    # Audit trail
    # =========================================================================

    @staticmethod
    def build_audit_row(
        content_type: Union[ContentType, str],
        content_id: str,
        result: ModerationResult,
        user_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Audit row describing one moderation outcome (JSON-serializable)."""
        return {
            "admin_id": AUDIT_ACTOR,
            "action": AUDIT_ACTION,
            "target_type": ContentType(content_type).value,
            "target_id": content_id,
            "details": {
                "risk_level": result.risk_level.value,
                "violations": [v.model_dump(mode="json") for v in result.violations],
                "auto_blocked": result.auto_block,
                "requires_review": result.requires_review,
                "user_id": user_id,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        }

    def log_moderation_action(
        self,
        content_type: Union[ContentType, str],
        content_id: str,
        result: ModerationResult,
        user_id: Optional[str] = None,
    ) -> None:
        """
        Queue an audit write for a moderation outcome.

        Never raises and never waits for the write: a dispatch failure is
        logged and the record is dropped.
        """
        try:
            row = self.build_audit_row(content_type, content_id, result, user_id)
            # Published once: a down broker raises here instead of retrying
            write_moderation_audit.apply_async((row,), retry=False)
        except Exception as e:
            logger.warning(
                "Failed to log moderation action: %s",
                e,
                extra={"user_id": user_id, "content_type": str(content_type)},
            )

    # =========================================================================
    # Screening gates
    # =========================================================================

    def screen_message(
        self,
        sender_id: str,
        content: str,
        message_id: Optional[str] = None,
    ) -> ModerationResult:
        """
        Gate an outgoing chat message.

        Returns the result whose filtered_content the caller should persist.

        Raises:
            ContentBlockedError: Message must not be sent or stored
        """
        result = moderate_content(content, ContentType.MESSAGE.value)

        if result.auto_block:
            self.log_moderation_action(
                ContentType.MESSAGE, BLOCKED_ATTEMPT_TARGET, result, sender_id
            )
            logger.info(
                "Message blocked: sender=%s phrases=%s",
                sender_id,
                result.phrases,
                extra={
                    "user_id": sender_id,
                    "content_type": ContentType.MESSAGE.value,
                    "risk_level": result.risk_level.value,
                    "phrases": result.phrases,
                },
            )
            raise ContentBlockedError(ContentType.MESSAGE.value, result)

        if not result.safe or result.requires_review:
            self.log_moderation_action(
                ContentType.MESSAGE, message_id or UNASSIGNED_TARGET, result, sender_id
            )
        return result

    def screen_profile(
        self,
        user_id: str,
        bio: Optional[str],
        services: Sequence[str],
        rate_text: Optional[str] = None,
    ) -> ModerationResult:
        """
        Gate a profile before it is published.

        Raises:
            ContentBlockedError: Profile contains auto-block phrases
            ProfileReviewRequiredError: Profile has other violations
        """
        result = moderate_profile_content(bio, services, rate_text)
        if result.safe:
            return result

        self.log_moderation_action(ContentType.PROFILE, user_id, result, user_id)
        logger.info(
            "Profile publish rejected: user=%s auto_block=%s phrases=%s",
            user_id,
            result.auto_block,
            result.phrases,
            extra={
                "user_id": user_id,
                "content_type": ContentType.PROFILE.value,
                "risk_level": result.risk_level.value,
                "phrases": result.phrases,
            },
        )
        if result.auto_block:
            raise ContentBlockedError(ContentType.PROFILE.value, result)
        raise ProfileReviewRequiredError(result)

    def screen_review(
        self,
        reviewer_id: str,
        booking_id: str,
        body: str,
    ) -> Optional[ModerationResult]:
        """
        Gate a review body for a booking. Blank bodies are not moderated.

        Raises:
            ContentBlockedError: Review must not be submitted
        """
        if not body.strip():
            return None

        result = moderate_content(body, REVIEW_CONTEXT)
        if result.auto_block:
            self.log_moderation_action(ContentType.BOOKING, booking_id, result, reviewer_id)
            raise ContentBlockedError(REVIEW_CONTEXT, result)
        return result

    # =========================================================================
    # Violation history
    # =========================================================================

    def check_user_violation_pattern(
        self, user_id: str, window_days: Optional[int] = None
    ) -> UserViolationPattern:
        """
        Summarize a user's audited moderation outcomes in the rolling window.

        A failed lookup is logged and reported as a clean history.
        """
        days = window_days if window_days is not None else get_settings().violation_history_days
        since = datetime.now(timezone.utc) - timedelta(days=days)

        try:
            result = (
                self.supabase.table(get_settings().audit_table)
                .select("details")
                .eq("action", AUDIT_ACTION)
                .gte("created_at", since.isoformat())
                .contains("details", {"user_id": user_id})
                .execute()
            )
        except Exception:
            logger.exception("Error checking user violation pattern for %s", user_id)
            return UserViolationPattern()

        rows = result.data or []
        violation_count = len(rows)
        recent_violations = sum(
            1 for row in rows if (row.get("details") or {}).get("risk_level") in ESCALATED_LEVELS
        )
        return summarize_violation_history(violation_count, recent_violations)


def summarize_violation_history(violation_count: int, recent_violations: int) -> UserViolationPattern:
    """Map history counts to a risk level and recommended action."""
    if recent_violations >= HISTORY_REVIEW_RECENT or violation_count >= HISTORY_REVIEW_TOTAL:
        level, action = RiskLevel.HIGH, RecommendedAction.REVIEW_REQUIRED
    elif recent_violations >= HISTORY_RESTRICT_RECENT or violation_count >= HISTORY_RESTRICT_TOTAL:
        level, action = RiskLevel.MEDIUM, RecommendedAction.TEMPORARY_RESTRICTION
    elif violation_count >= HISTORY_WARNING_TOTAL:
        level, action = RiskLevel.LOW, RecommendedAction.WARNING
    else:
        level, action = RiskLevel.LOW, RecommendedAction.NONE

    return UserViolationPattern(
        violation_count=violation_count,
        recent_violations=recent_violations,
        risk_level=level,
        recommend_action=action,
    )
