"""Base transformation class that enforces the row contract."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping

from .utils import map_fields

logger = logging.getLogger(__name__)


class BaseTransformer(ABC):
    """
    An abstract base class for all row transformations.

    `transform` defines a fixed pipeline: rename the raw row strictly through
    the input mapping, then hand the mapped row to the source-specific logic.

    Subclasses must implement:
    - get_input_rename_map: source column names and their internal names.
    - _apply_transform(): the derivations for one mapped row.
    """

    @property
    @abstractmethod
    def get_input_rename_map(self) -> Mapping[str, str]:
        """Return the mapping from source column names to standardized internal names."""
        pass

    @property
    def metric_fields(self) -> List[str]:
        """Internal numeric fields reported in the coverage log."""
        return []

    @abstractmethod
    def _apply_transform(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Core transformation logic to be implemented by subclasses."""
        pass

    def transform(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        """Map and transform a single raw row."""
        mapped = map_fields(row, self.get_input_rename_map)
        return self._apply_transform(mapped)

    def transform_all(self, rows: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """Transform every row and log metric coverage."""
        transformed = [self.transform(row) for row in rows]

        metrics_non_null_counts = {
            field: sum(1 for r in transformed if r.get(field) is not None)
            for field in self.metric_fields
        }
        logger.info(
            f"[{self.__class__.__name__}] rows={len(transformed)}, "
            f"metric non-null counts {metrics_non_null_counts}"
        )
        return transformed
