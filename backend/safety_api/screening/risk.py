"""
Risk aggregation.

Turns the matches of one classification call into a risk level, a block
decision, a review flag and a confidence score. Repetition of a phrase never
reaches this layer: it sees at most one match per pattern.
"""

from typing import NamedTuple, Sequence

from safety_api.core.constants import (
    CONFIDENCE_PER_SEVERITY,
    CONFIDENCE_PER_VIOLATION,
    CRITICAL_AVG_SEVERITY,
    HIGH_AVG_SEVERITY,
    HIGH_VIOLATION_COUNT,
    MEDIUM_AVG_SEVERITY,
    MEDIUM_VIOLATION_COUNT,
    REVIEW_MIN_VIOLATIONS,
)
from safety_api.models.moderation import RiskLevel, ViolationMatch


class RiskAssessment(NamedTuple):
    risk_level: RiskLevel
    auto_block: bool
    requires_review: bool
    confidence_score: float


def average_severity(violations: Sequence[ViolationMatch]) -> float:
    if not violations:
        return 0.0
    return sum(v.severity for v in violations) / len(violations)


def risk_level_for(count: int, avg_severity: float, blockers: int) -> RiskLevel:
    """Rules are checked in priority order; the first that applies wins."""
    if blockers > 0 or avg_severity >= CRITICAL_AVG_SEVERITY:
        return RiskLevel.CRITICAL
    if avg_severity >= HIGH_AVG_SEVERITY or count >= HIGH_VIOLATION_COUNT:
        return RiskLevel.HIGH
    if avg_severity >= MEDIUM_AVG_SEVERITY or count >= MEDIUM_VIOLATION_COUNT:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def confidence_for(count: int, avg_severity: float) -> float:
    if count == 0:
        return 0.0
    return min(1.0, count * CONFIDENCE_PER_VIOLATION + avg_severity * CONFIDENCE_PER_SEVERITY)


def assess(violations: Sequence[ViolationMatch]) -> RiskAssessment:
    """Aggregate a set of matches into the block/review decision."""
    count = len(violations)
    avg = average_severity(violations)
    blockers = sum(1 for v in violations if v.auto_block)

    level = risk_level_for(count, avg, blockers)
    auto_block = blockers > 0 or level == RiskLevel.CRITICAL
    requires_review = level == RiskLevel.HIGH or (
        level == RiskLevel.MEDIUM and count >= REVIEW_MIN_VIOLATIONS
    )

    return RiskAssessment(
        risk_level=level,
        auto_block=auto_block,
        requires_review=requires_review,
        confidence_score=confidence_for(count, avg),
    )
