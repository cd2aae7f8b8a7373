"""Base reader interface and registry."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Dict, Iterator, Optional, Type, Union

import polars as pl

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, BinaryIO]


class BaseReader(ABC):
    """Base interface for all data readers."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @abstractmethod
    def read(self, source: Source, **kwargs) -> pl.DataFrame:
        """Read data from a path or binary stream and return a DataFrame."""
        pass

    @abstractmethod
    def iter_records(self, source: Source, **kwargs) -> Iterator[Dict[str, Any]]:
        """Yield one decoded record per input row."""
        pass

    def validate_path(self, path: str) -> bool:
        """Validate if reader can handle this path."""
        return True


class ReaderRegistry:
    """Registry for file readers."""

    EXTENSION_MAP = {
        ".csv": "csv",
        ".txt": "csv",
    }

    def __init__(self):
        self._readers: Dict[str, Type[BaseReader]] = {}

    def register(self, file_type: str, reader_class: Type[BaseReader]):
        """Register a reader for specific file type."""
        self._readers[file_type] = reader_class

    def get_reader(self, file_type: str) -> Optional[Type[BaseReader]]:
        """Get reader for file type."""
        return self._readers.get(file_type)

    def detect_reader(self, path: Union[str, Path]) -> Optional[Type[BaseReader]]:
        """Pick a reader from the file extension, tolerating upload suffixes.

        Handles both ``export.csv`` and ``export.csv~upload-1234``.
        """
        basename = os.path.basename(str(path)).lower()
        for ext, file_type in self.EXTENSION_MAP.items():
            ext_pos = basename.find(ext)
            if ext_pos == -1:
                continue
            next_char_pos = ext_pos + len(ext)
            if next_char_pos >= len(basename) or basename[next_char_pos] in " .~":
                return self._readers.get(file_type)
        logger.warning(f"No reader registered for {basename}")
        return None
