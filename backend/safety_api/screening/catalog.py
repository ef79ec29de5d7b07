"""
Violation pattern catalog.

The rule table is kept in logical groups for readability only; the
classifier sees one flat, read-only collection built once at import time.
Each phrase gets a single precompiled whole-word, case-insensitive matcher
that is reused by every classification call.
"""

import re
from typing import Iterable, Iterator, Optional

from safety_api.core.constants import FILTER_PLACEHOLDER
from safety_api.models.moderation import ViolationCategory, ViolationPattern

_C = ViolationCategory


def _p(phrase: str, category: ViolationCategory, severity: int, auto_block: bool) -> ViolationPattern:
    return ViolationPattern(
        phrase=phrase, category=category, severity=severity, auto_block=auto_block
    )


# ===========================================
# Critical violations
# ===========================================

CRITICAL_PATTERNS: tuple[ViolationPattern, ...] = (
    # Unsafe sexual practices
    _p("no condom", _C.UNSAFE_PRACTICE, 10, True),
    _p("without condom", _C.UNSAFE_PRACTICE, 10, True),
    _p("bareback", _C.UNSAFE_PRACTICE, 10, True),
    _p("bb", _C.UNSAFE_PRACTICE, 9, True),
    _p("raw", _C.UNSAFE_PRACTICE, 9, True),
    _p("unprotected", _C.UNSAFE_PRACTICE, 10, True),
    _p("skin to skin", _C.UNSAFE_PRACTICE, 8, True),
    _p("natural", _C.UNSAFE_PRACTICE, 7, False),  # context dependent
    # Age-related concerns
    _p("young", _C.MINOR_REFERENCE, 9, True),
    _p("teen", _C.MINOR_REFERENCE, 10, True),
    _p("schoolgirl", _C.MINOR_REFERENCE, 10, True),
    _p("barely legal", _C.MINOR_REFERENCE, 10, True),
    _p("just turned 18", _C.MINOR_REFERENCE, 8, True),
    # Coercion and trafficking indicators
    _p("forced", _C.COERCION, 10, True),
    _p("must", _C.COERCION, 6, False),
    _p("no choice", _C.COERCION, 9, True),
    _p("have to", _C.COERCION, 5, False),
    _p("need money", _C.COERCION, 7, False),
    # Illegal services
    _p("drugs", _C.ILLEGAL_SERVICE, 10, True),
    _p("cocaine", _C.ILLEGAL_SERVICE, 10, True),
    _p("meth", _C.ILLEGAL_SERVICE, 10, True),
    _p("party favors", _C.ILLEGAL_SERVICE, 8, True),
    _p("pills", _C.ILLEGAL_SERVICE, 7, False),
    # External contact attempts
    _p("whatsapp", _C.EXTERNAL_CONTACT, 6, False),
    _p("telegram", _C.EXTERNAL_CONTACT, 6, False),
    _p("my number", _C.EXTERNAL_CONTACT, 5, False),
    _p("call me", _C.EXTERNAL_CONTACT, 5, False),
    _p("cash only", _C.EXTERNAL_CONTACT, 7, False),
)

# ===========================================
# Medium risk (review)
# ===========================================

MEDIUM_RISK_PATTERNS: tuple[ViolationPattern, ...] = (
    _p("special service", _C.UNSAFE_PRACTICE, 6, False),
    _p("anything goes", _C.UNSAFE_PRACTICE, 7, False),
    _p("no limits", _C.UNSAFE_PRACTICE, 8, True),
    _p("extreme", _C.UNSAFE_PRACTICE, 6, False),
    _p("rough", _C.HARASSMENT, 5, False),
    _p("degrading", _C.HARASSMENT, 8, True),
    _p("submit", _C.HARASSMENT, 6, False),
)

# ===========================================
# Harassment and abuse
# ===========================================

HARASSMENT_PATTERNS: tuple[ViolationPattern, ...] = (
    _p("worthless", _C.HARASSMENT, 9, True),
    _p("slut", _C.HARASSMENT, 7, False),  # context dependent
    _p("whore", _C.HARASSMENT, 7, False),  # context dependent
    _p("bitch", _C.HARASSMENT, 6, False),
    _p("shut up", _C.HARASSMENT, 7, False),
    _p("kill yourself", _C.HARASSMENT, 10, True),
    _p("deserve to die", _C.HARASSMENT, 10, True),
)

# ===========================================
# Spam and scams
# ===========================================

SPAM_PATTERNS: tuple[ViolationPattern, ...] = (
    _p("click here", _C.SPAM, 6, False),
    _p("visit my website", _C.SPAM, 7, False),
    _p("free money", _C.SPAM, 8, True),
    _p("guaranteed", _C.SPAM, 5, False),
    _p("limited time", _C.SPAM, 5, False),
)


def compile_matcher(phrase: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive matcher for a literal phrase."""
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


class PatternCatalog:
    """Read-only collection of violation patterns with their matchers.

    Safe to share between threads: nothing is mutated after __init__.
    """

    __slots__ = ("_entries", "_by_phrase")

    def __init__(self, patterns: Iterable[ViolationPattern]) -> None:
        entries: list[tuple[ViolationPattern, re.Pattern[str]]] = []
        by_phrase: dict[str, tuple[ViolationPattern, re.Pattern[str]]] = {}

        for pattern in patterns:
            key = pattern.phrase.casefold()
            if key in by_phrase:
                raise ValueError(f"Duplicate catalog phrase: {pattern.phrase!r}")

            matcher = compile_matcher(pattern.phrase)
            if matcher.search(FILTER_PLACEHOLDER):
                raise ValueError(
                    f"Catalog phrase {pattern.phrase!r} matches the redaction placeholder"
                )

            entry = (pattern, matcher)
            entries.append(entry)
            by_phrase[key] = entry

        self._entries = tuple(entries)
        self._by_phrase = by_phrase

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[ViolationPattern, re.Pattern[str]]]:
        return iter(self._entries)

    def __contains__(self, phrase: object) -> bool:
        return isinstance(phrase, str) and phrase.casefold() in self._by_phrase

    @property
    def patterns(self) -> tuple[ViolationPattern, ...]:
        return tuple(pattern for pattern, _ in self._entries)

    def get(self, phrase: str) -> Optional[ViolationPattern]:
        entry = self._by_phrase.get(phrase.casefold())
        return entry[0] if entry else None

    def matcher(self, phrase: str) -> re.Pattern[str]:
        """Matcher for a catalog phrase; KeyError if the phrase is unknown."""
        return self._by_phrase[phrase.casefold()][1]

    def by_category(self, category: ViolationCategory) -> tuple[ViolationPattern, ...]:
        return tuple(p for p, _ in self._entries if p.category == category)


def build_catalog(*groups: Iterable[ViolationPattern]) -> PatternCatalog:
    """Flatten pattern groups into a catalog, in the order given."""
    return PatternCatalog(pattern for group in groups for pattern in group)


DEFAULT_CATALOG = build_catalog(
    CRITICAL_PATTERNS,
    MEDIUM_RISK_PATTERNS,
    HARASSMENT_PATTERNS,
    SPAM_PATTERNS,
)
