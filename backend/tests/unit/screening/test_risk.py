"""Unit tests for risk aggregation thresholds."""

import pytest

from safety_api.models.moderation import RiskLevel, ViolationCategory, ViolationMatch
from safety_api.screening.risk import (
    assess,
    average_severity,
    confidence_for,
    risk_level_for,
)


def _match(severity: int, auto_block: bool = False, phrase: str = "x") -> ViolationMatch:
    return ViolationMatch(
        category=ViolationCategory.SPAM,
        phrase=phrase,
        severity=severity,
        auto_block=auto_block,
        context="general",
    )


class TestRiskLevelFor:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "count,avg,blockers,expected",
        [
            (0, 0.0, 0, RiskLevel.LOW),
            (1, 4.0, 0, RiskLevel.LOW),
            (1, 5.0, 0, RiskLevel.MEDIUM),
            (2, 4.0, 0, RiskLevel.MEDIUM),
            (1, 7.0, 0, RiskLevel.HIGH),
            (3, 4.0, 0, RiskLevel.HIGH),
            (1, 9.0, 0, RiskLevel.CRITICAL),
            (1, 4.0, 1, RiskLevel.CRITICAL),
        ],
    )
    def test_thresholds(self, count, avg, blockers, expected) -> None:
        assert risk_level_for(count, avg, blockers) == expected


class TestAssess:
    @pytest.mark.unit
    def test_no_violations(self) -> None:
        result = assess([])
        assert result.risk_level == RiskLevel.LOW
        assert result.auto_block is False
        assert result.requires_review is False
        assert result.confidence_score == 0.0

    @pytest.mark.unit
    def test_blocker_forces_critical_and_block(self) -> None:
        result = assess([_match(2, auto_block=True)])
        assert result.risk_level == RiskLevel.CRITICAL
        assert result.auto_block is True

    @pytest.mark.unit
    def test_high_average_without_blocker_still_blocks(self) -> None:
        result = assess([_match(9)])
        assert result.risk_level == RiskLevel.CRITICAL
        assert result.auto_block is True

    @pytest.mark.unit
    def test_high_requires_review(self) -> None:
        result = assess([_match(7)])
        assert result.risk_level == RiskLevel.HIGH
        assert result.requires_review is True
        assert result.auto_block is False

    @pytest.mark.unit
    def test_single_medium_does_not_require_review(self) -> None:
        result = assess([_match(6)])
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.requires_review is False

    @pytest.mark.unit
    def test_two_medium_requires_review(self) -> None:
        result = assess([_match(5, phrase="a"), _match(5, phrase="b")])
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.requires_review is True

    @pytest.mark.unit
    def test_order_does_not_matter(self) -> None:
        matches = [_match(5, phrase="a"), _match(9, True, phrase="b"), _match(6, phrase="c")]
        assert assess(matches) == assess(list(reversed(matches)))


class TestConfidence:
    @pytest.mark.unit
    def test_single_severity_six(self) -> None:
        assert confidence_for(1, 6.0) == pytest.approx(0.9)

    @pytest.mark.unit
    def test_capped_at_one(self) -> None:
        assert confidence_for(4, 10.0) == 1.0

    @pytest.mark.unit
    def test_zero_when_no_violations(self) -> None:
        assert confidence_for(0, 0.0) == 0.0

    @pytest.mark.unit
    def test_average_severity(self) -> None:
        assert average_severity([_match(5), _match(8)]) == 6.5
        assert average_severity([]) == 0.0
