"""Shared pytest fixtures for test suite."""

import os

# Settings are read at import time by several core modules; provide the
# required secrets before any safety_api import happens.
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from safety_api.models.moderation import (  # noqa: E402
    ModerationResult,
    RiskLevel,
    ViolationCategory,
    ViolationMatch,
)

# =============================================================================
# Mock Supabase Client
# =============================================================================


@pytest.fixture
def mock_supabase():
    """Create a mock Supabase client for database operations."""
    mock = MagicMock()
    mock.table.return_value = mock
    mock.select.return_value = mock
    mock.eq.return_value = mock
    mock.gte.return_value = mock
    mock.contains.return_value = mock
    mock.insert.return_value = mock
    mock.execute.return_value = MagicMock(data=None)
    return mock


# =============================================================================
# Moderation Result Fixtures
# =============================================================================


@pytest.fixture
def blocked_result() -> ModerationResult:
    """A critical, auto-blocked outcome for 'bareback'."""
    return ModerationResult(
        safe=False,
        risk_level=RiskLevel.CRITICAL,
        violations=[
            ViolationMatch(
                category=ViolationCategory.UNSAFE_PRACTICE,
                phrase="bareback",
                severity=10,
                auto_block=True,
                context="message",
            )
        ],
        filtered_content="I want [FILTERED]",
        requires_review=False,
        auto_block=True,
        confidence_score=1.0,
    )


@pytest.fixture
def clean_result() -> ModerationResult:
    """A safe outcome with no violations."""
    return ModerationResult(
        safe=True,
        risk_level=RiskLevel.LOW,
        violations=[],
        filtered_content="Hello there",
        requires_review=False,
        auto_block=False,
        confidence_score=0.0,
    )
