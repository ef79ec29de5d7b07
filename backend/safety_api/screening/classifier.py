"""Phrase scanner: finds which catalog patterns occur in a piece of text."""

from typing import Optional

from safety_api.core.constants import DEFAULT_CONTEXT
from safety_api.models.moderation import ViolationMatch
from safety_api.screening.catalog import DEFAULT_CATALOG, PatternCatalog


def normalize(text: str) -> str:
    """
    Trimmed copy of the text used for matching.

    Case is handled by the matchers themselves (re.IGNORECASE), the same
    ones the redactor runs, so anything detected here is also redactable.
    """
    return text.strip()


def find_violations(
    text: str,
    context: Optional[str] = None,
    catalog: PatternCatalog = DEFAULT_CATALOG,
) -> list[ViolationMatch]:
    """
    Return one match per catalog pattern found in the text, in catalog order.

    A phrase occurring several times still yields a single match.
    """
    normalized = normalize(text)
    if not normalized:
        return []

    tag = context or DEFAULT_CONTEXT
    return [
        ViolationMatch(
            category=pattern.category,
            phrase=pattern.phrase,
            severity=pattern.severity,
            auto_block=pattern.auto_block,
            context=tag,
        )
        for pattern, matcher in catalog
        if matcher.search(normalized)
    ]
