"""Configuration management for the ingestion pipeline."""

from .source_mappings import FACEBOOK_POST_MAP, OWNER_MAPPING_MAP
from .enum_maps import POST_TYPE_KEYWORDS, VIEWS_POST_TYPES, EARNINGS_COLUMN_LABELS
from .constants import DATE_FORMATS, EARNINGS_CUTOVER, NULL_TOKENS

__all__ = [
    "FACEBOOK_POST_MAP",
    "OWNER_MAPPING_MAP",
    "POST_TYPE_KEYWORDS",
    "VIEWS_POST_TYPES",
    "EARNINGS_COLUMN_LABELS",
    "DATE_FORMATS",
    "EARNINGS_CUTOVER",
    "NULL_TOKENS",
]
