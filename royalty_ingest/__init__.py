"""Post performance ingestion and royalty analysis package."""

from .processor import FacebookCSVProcessor
from .readers import ReaderRegistry, CSVReader, decode_rows
from .errors import IngestError, ParseError
from .config import FACEBOOK_POST_MAP

__all__ = [
    "FacebookCSVProcessor",
    "ReaderRegistry",
    "CSVReader",
    "decode_rows",
    "IngestError",
    "ParseError",
    "FACEBOOK_POST_MAP",
]
