"""Row transformation modules for different export sources."""

from .base import BaseTransformer
from .facebook_post import FacebookPostTransform, select_earnings, select_views
from .owner_mapping import OwnerMappingTransform, assign_artists

__all__ = [
    "BaseTransformer",
    "FacebookPostTransform",
    "OwnerMappingTransform",
    "assign_artists",
    "select_earnings",
    "select_views",
]
