"""Diagnostics helpers (on by default, switched off with INGEST_DIAG=0).

Keep diagnostics separate from core logic. Never mutate inputs.
Failures are logged as errors and do not raise.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..config.constants import EARNINGS_HEADER_KEYWORDS, VIEWS_HEADER_KEYWORD
from ..config.settings import diagnostics_enabled

logger = logging.getLogger(__name__)


def earnings_headers(headers: Sequence[str]) -> list[str]:
    return [h for h in headers if any(k in h.lower() for k in EARNINGS_HEADER_KEYWORDS)]


def views_headers(headers: Sequence[str]) -> list[str]:
    return [h for h in headers if VIEWS_HEADER_KEYWORD in h.lower()]


def log_column_analysis(first_row: Mapping[str, Any] | None) -> None:
    """Log which earnings and views columns the export carries."""
    if not diagnostics_enabled() or not first_row:
        return
    try:
        headers = list(first_row.keys())
        logger.info(f"CSV column analysis: total columns={len(headers)}")

        found = earnings_headers(headers)
        if found:
            sample = {col: first_row.get(col) for col in found}
            logger.info(f"Earnings columns found: {found}; first row values: {sample}")
        else:
            logger.warning("No standard earnings columns found")

        found = views_headers(headers)
        if found:
            logger.info(f"Views columns found: {found}")
            if "Views" in headers:
                logger.info('Using "Views" column for video/reel view counts')
            elif "1-Minute Video Views" in headers:
                logger.warning('"Views" column not found, using "1-Minute Video Views" as fallback')
    except Exception as e:
        logger.error(f"Column analysis failed: {e}", exc_info=True)


def log_aggregate_coverage(aggregated: Mapping[Any, Mapping[str, Any]]) -> None:
    """Log snapshot depth and how many posts carry earnings at all."""
    if not diagnostics_enabled():
        return
    try:
        depths = [len(agg.get("snapshots", [])) for agg in aggregated.values()]
        earning = sum(1 for agg in aggregated.values() if agg.get("lifetime_earnings"))
        logger.info(
            f"Aggregate diag: posts={len(depths)}, max snapshots={max(depths, default=0)}, "
            f"posts with earnings={earning}"
        )
    except Exception as e:
        logger.error(f"Aggregate diagnostics failed: {e}", exc_info=True)
