"""Main ingestion pipeline."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .analysis import aggregate_posts, date_range
from .diagnostics import log_aggregate_coverage, log_column_analysis
from .readers import CSVReader, ReaderRegistry, registry as reader_registry
from .readers.base import Source
from .transforms import FacebookPostTransform, OwnerMappingTransform

logger = logging.getLogger(__name__)


class FacebookCSVProcessor:
    """Decode, map, transform and aggregate one post performance export."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.reader_registry: ReaderRegistry = reader_registry
        self.transform = FacebookPostTransform()

    def _reader_for(self, source: Source) -> CSVReader:
        if isinstance(source, (str, Path)):
            reader_class = self.reader_registry.detect_reader(source)
            if reader_class is not None:
                return reader_class(self.config)
        return CSVReader(self.config)

    def process_rows(self, raw_rows: Iterable[Dict[str, Any]], source: str = "<rows>") -> Dict[str, Any]:
        """Run mapping, transformation and aggregation over decoded rows."""
        raw_rows = list(raw_rows)
        log_column_analysis(raw_rows[0] if raw_rows else None)

        transformed: List[Dict[str, Any]] = self.transform.transform_all(raw_rows)
        aggregated, dropped = aggregate_posts(transformed)
        log_aggregate_coverage(aggregated)

        metadata = {
            "source": source,
            "total_rows": len(transformed),
            "unique_posts": len(aggregated),
            "dropped_rows": dropped,
            "date_range": date_range(transformed),
        }
        logger.info(
            f"Processed {source}: rows={metadata['total_rows']}, "
            f"posts={metadata['unique_posts']}, dropped={dropped}"
        )
        return {"raw": transformed, "aggregated": aggregated, "metadata": metadata}

    def process_file(self, source: Source) -> Dict[str, Any]:
        """Process one export end to end.

        Raises ParseError for malformed delimited text; nothing is returned
        for a file that fails to decode.
        """
        if isinstance(source, (str, Path)):
            label = str(source)
        else:
            label = getattr(source, "name", type(source).__name__)
        reader = self._reader_for(source)
        raw_rows = list(reader.iter_records(source))
        return self.process_rows(raw_rows, source=str(label))

    def load_owner_mapping(self, source: Source) -> List[Dict[str, Any]]:
        """Read an owner mapping export into artist assignments."""
        reader = self._reader_for(source)
        return OwnerMappingTransform().assignments(reader.iter_records(source))
