"""CSV file reader."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List

import polars as pl

from ..cleaning.value_caster import cast_value, sanitize_cells
from ..errors import ParseError
from .base import BaseReader, Source

logger = logging.getLogger(__name__)


def _blank_line(columns: List[str]) -> pl.Expr:
    """Rows produced by physically empty lines."""
    first = pl.col(columns[0])
    blank = first.is_null() | (first == "")
    if len(columns) > 1:
        blank = blank & pl.all_horizontal(pl.col(columns[1:]).is_null())
    return blank


class CSVReader(BaseReader):
    """Reader for comma-separated exports with a header row."""

    def read(self, source: Source, **kwargs) -> pl.DataFrame:
        """Read the whole file as text columns using polars.

        Every column is kept as a string so casting can be decided per cell.
        Records with more or fewer fields than the header are rejected, and
        physically empty lines are skipped.
        """
        read_config = {
            "has_header": True,
            "separator": ",",
            "quote_char": '"',
            "infer_schema_length": 0,
            "truncate_ragged_lines": False,
            "missing_utf8_is_empty_string": True,
            **kwargs,
        }

        if isinstance(source, (str, Path)) and not Path(source).exists():
            raise FileNotFoundError(f"CSV source not found: {source}")

        try:
            df = pl.read_csv(source, **read_config)
        except pl.exceptions.NoDataError:
            logger.warning("CSV source is empty; no rows decoded")
            return pl.DataFrame()
        except pl.exceptions.PolarsError as e:
            raise ParseError(f"Malformed CSV: {e}") from e

        renames = {c: c.lstrip("\ufeff").strip() for c in df.columns}
        renames = {old: new for old, new in renames.items() if old != new}
        if renames:
            df = df.rename(renames)

        if df.width:
            df = df.filter(~_blank_line(df.columns))
            # Empty cells read as "", so nulls only come from short records
            short = df.filter(pl.any_horizontal(pl.all().is_null())).height
            if short:
                raise ParseError(
                    f"Malformed CSV: {short} records have fewer fields than the header ({df.width})"
                )

        return sanitize_cells(df)

    def iter_records(self, source: Source, **kwargs) -> Iterator[Dict[str, Any]]:
        """Yield raw rows with numeric/currency cells cast.

        The source is fully parsed before the first row is produced, so a
        parse failure never leaves a partial result behind.
        """
        df = self.read(source, **kwargs)
        logger.info(f"Decoded CSV: rows={df.height}, columns={df.width}")
        for record in df.iter_rows(named=True):
            yield {col: cast_value(value) for col, value in record.items()}

    def validate_path(self, path: str) -> bool:
        """Validate CSV file path."""
        return path.lower().endswith((".csv", ".txt"))


def decode_rows(source: Source, **kwargs) -> Iterator[Dict[str, Any]]:
    """Decode a delimited source into a single-pass sequence of raw rows."""
    return CSVReader().iter_records(source, **kwargs)
