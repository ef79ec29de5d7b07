"""Pydantic models for the Safety Screening API."""

from safety_api.models.moderation import (
    ContentBlockedError,
    ContentType,
    MessageFilterResult,
    ModerationError,
    ModerationResult,
    ProfileReviewRequiredError,
    RecommendedAction,
    RiskLevel,
    UserViolationPattern,
    ViolationCategory,
    ViolationMatch,
    ViolationPattern,
)

__all__ = [
    # Engine value types
    "ViolationCategory",
    "ViolationPattern",
    "ViolationMatch",
    "RiskLevel",
    "ModerationResult",
    "MessageFilterResult",
    # Audit / history
    "ContentType",
    "RecommendedAction",
    "UserViolationPattern",
    # Exceptions
    "ModerationError",
    "ContentBlockedError",
    "ProfileReviewRequiredError",
]
