"""Cell cleaning and numeric casting for decoded CSV values."""

import math
from typing import Any, Optional, Set, Union

import polars as pl

from ..config.constants import NULL_TOKENS, NUMERIC_LOOKING_RE, NUMERIC_STRIP_RE


def sanitize_cells(
    df: pl.DataFrame,
    bad_tokens: Set[str] = NULL_TOKENS,
) -> pl.DataFrame:
    """Trim every string cell and null out placeholder tokens.

    Header names are left untouched.
    """
    exprs = []
    for col, dtype in df.schema.items():
        if dtype != pl.Utf8:
            continue
        trimmed = pl.col(col).str.strip_chars()
        exprs.append(
            pl.when(trimmed.is_in(list(bad_tokens)))
            .then(None)
            .otherwise(trimmed)
            .alias(col)
        )
    if not exprs:
        return df
    return df.with_columns(exprs)


def cast_value(value: Any) -> Optional[Union[str, int, float]]:
    """Cast a single decoded cell.

    Numeric-looking text (digits, sign, decimal point, ``$`` and ``,``) that
    parses to a finite number becomes ``int`` or ``float``; anything else is
    returned as trimmed text. Placeholders become ``None``.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    text = value.strip()
    if text in NULL_TOKENS:
        return None
    if not NUMERIC_LOOKING_RE.match(text):
        return text

    stripped = NUMERIC_STRIP_RE.sub("", text)
    try:
        number = float(stripped)
    except ValueError:
        return text
    if not math.isfinite(number):
        return text
    if "." not in stripped:
        return int(stripped)
    return number
