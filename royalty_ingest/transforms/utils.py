"""Common utilities for row transformation modules."""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from ..config.constants import DATE_FORMATS, QUARTER_RE
from ..config.enum_maps import POST_TYPE_KEYWORDS

logger = logging.getLogger(__name__)


def map_fields(row: Mapping[str, Any], mapping: Mapping[str, str]) -> Dict[str, Any]:
    """Rename source columns to internal names.

    Columns outside the mapping are dropped and mapped columns missing from
    the row are omitted; no value is defaulted here.
    """
    return {target: row[src] for src, target in mapping.items() if src in row}


def to_number(value: Any) -> Optional[float]:
    """Return a finite float for numeric values, otherwise None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_date(value: Any) -> Optional[datetime]:
    """Best-effort parser for export timestamps (single cell).

    Known export formats are tried first, then ISO-8601. Never raises.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable date value: {text!r}")
        return None
    # Offsets are folded into naive UTC so all timestamps stay comparable.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def normalize_post_type(value: Any) -> Any:
    """Collapse platform post-type labels to Video/Reel/Photo.

    Unrecognized labels are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    lowered = value.lower()
    for keyword, label in POST_TYPE_KEYWORDS:
        if keyword in lowered:
            return label
    return value


def extract_quarter(raw_date: Any) -> Optional[str]:
    """Derive a ``YYYY-Qn`` label from the first ``YYYY-MM`` in the raw text.

    Works on the unparsed report date, so it can succeed where date parsing
    fails and vice versa.
    """
    if not isinstance(raw_date, str):
        return None
    match = QUARTER_RE.search(raw_date)
    if not match:
        return None
    year, month = match.group(1), int(match.group(2))
    return f"{year}-Q{math.ceil(month / 3)}"
