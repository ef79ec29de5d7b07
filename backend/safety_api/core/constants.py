"""
Application constants for the safety screening service.

Centralizes the classification thresholds and limits used by the
screening engine and the moderation services.
"""

# Redaction
FILTER_PLACEHOLDER = "[FILTERED]"
DEFAULT_CONTEXT = "general"

# Risk aggregation thresholds (average severity on the 1-10 scale)
CRITICAL_AVG_SEVERITY = 9
HIGH_AVG_SEVERITY = 7
MEDIUM_AVG_SEVERITY = 5
HIGH_VIOLATION_COUNT = 3
MEDIUM_VIOLATION_COUNT = 2
REVIEW_MIN_VIOLATIONS = 2

# Confidence score weights
CONFIDENCE_PER_VIOLATION = 0.3
CONFIDENCE_PER_SEVERITY = 0.1

# Pattern severity bounds
MIN_SEVERITY = 1
MAX_SEVERITY = 10

# Audit trail
AUDIT_ACTOR = "system"
AUDIT_ACTION = "content_moderation"
BLOCKED_ATTEMPT_TARGET = "blocked_attempt"
UNASSIGNED_TARGET = "unassigned"

# User violation history (rolling window over the audit trail)
VIOLATION_HISTORY_DAYS = 30
HISTORY_REVIEW_RECENT = 3  # high/critical entries before review is required
HISTORY_REVIEW_TOTAL = 10
HISTORY_RESTRICT_RECENT = 2
HISTORY_RESTRICT_TOTAL = 5
HISTORY_WARNING_TOTAL = 2

# Request limits
MODERATION_TEXT_MAX_LENGTH = 10000
PROFILE_MAX_SERVICES = 50
