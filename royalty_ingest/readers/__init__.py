"""Data readers for different file formats and sources."""

from .base import BaseReader, ReaderRegistry
from .csv_reader import CSVReader, decode_rows

__all__ = [
    "BaseReader",
    "ReaderRegistry",
    "CSVReader",
    "decode_rows",
    "registry",
]

registry = ReaderRegistry()
registry.register("csv", CSVReader)
