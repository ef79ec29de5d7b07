"""Rule-based content risk classification engine."""

from safety_api.screening.catalog import DEFAULT_CATALOG, PatternCatalog, build_catalog
from safety_api.screening.content import (
    filter_message_content,
    moderate_content,
    moderate_profile_content,
)

__all__ = [
    "DEFAULT_CATALOG",
    "PatternCatalog",
    "build_catalog",
    "moderate_content",
    "filter_message_content",
    "moderate_profile_content",
]
