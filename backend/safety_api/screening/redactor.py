"""Redaction of matched phrases in the caller's original text."""

from typing import Sequence

from safety_api.core.constants import FILTER_PLACEHOLDER
from safety_api.models.moderation import ViolationMatch
from safety_api.screening.catalog import DEFAULT_CATALOG, PatternCatalog


def redact(
    text: str,
    violations: Sequence[ViolationMatch],
    catalog: PatternCatalog = DEFAULT_CATALOG,
    placeholder: str = FILTER_PLACEHOLDER,
) -> str:
    """
    Replace every occurrence of each matched phrase with the placeholder.

    Uses the same whole-word, case-insensitive matchers as detection, so
    the rest of the text keeps its original casing and spacing.
    """
    filtered = text
    for violation in violations:
        # Callable replacement: the placeholder is inserted literally
        filtered = catalog.matcher(violation.phrase).sub(lambda _: placeholder, filtered)
    return filtered
