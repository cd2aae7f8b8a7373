"""Exceptions raised by the ingestion pipeline."""


class IngestError(Exception):
    """Base class for ingestion failures."""


class ParseError(IngestError):
    """Delimited text could not be decoded; the whole file is rejected."""
