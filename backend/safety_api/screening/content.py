"""
Public screening entry points.

Synchronous, pure and total: every string maps to a result, nothing is
logged or stored here. Audit writes belong to the moderation service.
"""

from typing import Optional, Sequence

from safety_api.models.moderation import MessageFilterResult, ModerationResult
from safety_api.screening.catalog import DEFAULT_CATALOG, PatternCatalog
from safety_api.screening.classifier import find_violations
from safety_api.screening.redactor import redact
from safety_api.screening.risk import assess

MESSAGE_CONTEXT = "message"
PROFILE_CONTEXT = "profile"


def moderate_content(
    text: str,
    context: Optional[str] = None,
    catalog: PatternCatalog = DEFAULT_CATALOG,
) -> ModerationResult:
    """Classify text, score the matches and redact them."""
    violations = find_violations(text, context, catalog)
    assessment = assess(violations)

    return ModerationResult(
        safe=not violations,
        risk_level=assessment.risk_level,
        violations=violations,
        filtered_content=redact(text, violations, catalog),
        requires_review=assessment.requires_review,
        auto_block=assessment.auto_block,
        confidence_score=assessment.confidence_score,
    )


def filter_message_content(text: str) -> MessageFilterResult:
    """Chat-path variant exposing only the matched phrases."""
    result = moderate_content(text, MESSAGE_CONTEXT)
    return MessageFilterResult(
        safe=result.safe,
        filtered_content=result.filtered_content,
        violations=result.phrases,
        requires_review=result.requires_review,
    )


def build_profile_text(
    bio: Optional[str], services: Sequence[str], rate_text: Optional[str] = None
) -> str:
    """Space-join the profile fields, skipping empty ones."""
    parts = [bio, *services, rate_text]
    return " ".join(part for part in parts if part)


def moderate_profile_content(
    bio: Optional[str],
    services: Sequence[str],
    rate_text: Optional[str] = None,
) -> ModerationResult:
    """Classify bio, services and rate text as a single unit."""
    return moderate_content(build_profile_text(bio, services, rate_text), PROFILE_CONTEXT)
