"""
Content screening models.

Value types produced by the screening engine (patterns, matches, results),
request/response schemas for the moderation router, and the domain
exceptions raised by the screening paths.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from safety_api.core.constants import (
    MAX_SEVERITY,
    MIN_SEVERITY,
    MODERATION_TEXT_MAX_LENGTH,
    PROFILE_MAX_SERVICES,
)

# ===========================================
# Enums
# ===========================================


class ViolationCategory(str, Enum):
    """Closed set of violation categories a catalog phrase can belong to."""

    UNSAFE_PRACTICE = "unsafe_practice"
    MINOR_REFERENCE = "minor_reference"
    COERCION = "coercion"
    ILLEGAL_SERVICE = "illegal_service"
    EXTERNAL_CONTACT = "external_contact"
    HARASSMENT = "harassment"
    SPAM = "spam"


class RiskLevel(str, Enum):
    """Aggregate risk of one classification call."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ContentType(str, Enum):
    """Audit target types."""

    MESSAGE = "message"
    PROFILE = "profile"
    BOOKING = "booking"


class RecommendedAction(str, Enum):
    """Action suggested by a user's recent violation history."""

    NONE = "none"
    WARNING = "warning"
    TEMPORARY_RESTRICTION = "temporary_restriction"
    REVIEW_REQUIRED = "review_required"


# ===========================================
# Engine Value Types
# ===========================================


class ViolationPattern(BaseModel):
    """One catalog entry. Immutable for the lifetime of the process."""

    model_config = ConfigDict(frozen=True)

    phrase: str = Field(..., min_length=1)
    category: ViolationCategory
    severity: int = Field(..., ge=MIN_SEVERITY, le=MAX_SEVERITY)
    auto_block: bool


class ViolationMatch(BaseModel):
    """A catalog pattern found in the screened text."""

    model_config = ConfigDict(frozen=True)

    category: ViolationCategory
    phrase: str
    severity: int
    auto_block: bool
    context: str


class ModerationResult(BaseModel):
    """Full outcome of classifying one piece of text."""

    model_config = ConfigDict(frozen=True)

    safe: bool
    risk_level: RiskLevel
    violations: list[ViolationMatch]
    filtered_content: str
    requires_review: bool
    auto_block: bool
    confidence_score: float = Field(..., ge=0.0, le=1.0)

    @property
    def phrases(self) -> list[str]:
        return [v.phrase for v in self.violations]


class MessageFilterResult(BaseModel):
    """Reduced result for the chat path; no severity detail."""

    model_config = ConfigDict(frozen=True)

    safe: bool
    filtered_content: str
    violations: list[str]
    requires_review: bool


class UserViolationPattern(BaseModel):
    """Summary of a user's moderation history in the rolling window."""

    violation_count: int = 0
    recent_violations: int = 0
    risk_level: RiskLevel = RiskLevel.LOW
    recommend_action: RecommendedAction = RecommendedAction.NONE


# ===========================================
# Request Models
# ===========================================


class ModerateContentRequest(BaseModel):
    """Free text to classify, with an optional context tag."""

    text: str = Field(..., max_length=MODERATION_TEXT_MAX_LENGTH)
    context: Optional[str] = Field(None, max_length=50)  # e.g. "message", "profile"


class FilterMessageRequest(BaseModel):
    text: str = Field(..., max_length=MODERATION_TEXT_MAX_LENGTH)


class ModerateProfileRequest(BaseModel):
    """Profile fields classified together as one unit."""

    bio: str = Field("", max_length=MODERATION_TEXT_MAX_LENGTH)
    services: list[str] = Field(default_factory=list, max_length=PROFILE_MAX_SERVICES)
    rate_text: Optional[str] = Field(None, max_length=MODERATION_TEXT_MAX_LENGTH)


class ScreenMessageRequest(BaseModel):
    """Outgoing chat message to gate before it is persisted."""

    sender_id: str
    content: str = Field(..., max_length=MODERATION_TEXT_MAX_LENGTH)
    message_id: Optional[str] = None


class ScreenProfileRequest(ModerateProfileRequest):
    """Profile about to be published."""

    user_id: str


class ScreenReviewRequest(BaseModel):
    """Review body about to be submitted for a booking."""

    reviewer_id: str
    booking_id: str
    body: str = Field("", max_length=MODERATION_TEXT_MAX_LENGTH)


# ===========================================
# Response Models
# ===========================================


class PatternListResponse(BaseModel):
    """The active violation catalog."""

    patterns: list[ViolationPattern]
    total: int


class ScreenReviewResponse(BaseModel):
    """Review screening outcome; result is None for blank bodies."""

    accepted: bool = True
    result: Optional[ModerationResult] = None


# ===========================================
# Exception Classes
# ===========================================


class ModerationError(Exception):
    """Base exception for moderation errors."""

    pass


class ContentBlockedError(ModerationError):
    """Content was auto-blocked and must not be stored."""

    def __init__(self, content_type: str, result: ModerationResult):
        self.content_type = content_type
        self.result = result
        super().__init__(
            f"{content_type} blocked: risk={result.risk_level.value} "
            f"phrases={', '.join(result.phrases)}"
        )


class ProfileReviewRequiredError(ModerationError):
    """Profile has non-blocking violations and cannot go live as-is."""

    def __init__(self, result: ModerationResult):
        self.result = result
        super().__init__(f"profile needs review: phrases={', '.join(result.phrases)}")
