"""Royalty owed per artist, computed from snapshot deltas."""

import logging
from typing import Any, Mapping, Optional, Tuple

import polars as pl

from ..config.constants import DEFAULT_CURRENCY
from ..config.settings import house_owner
from ..transforms.utils import to_number

logger = logging.getLogger(__name__)


def SAFE_PCT(amount: pl.Expr, rate: pl.Expr) -> pl.Expr:
    return (amount * rate / 100.0).fill_nan(0.0).fill_null(0.0)


def owners_frame(aggregated: Mapping[Any, Mapping[str, Any]]) -> pl.DataFrame:
    records = [
        {
            "post_id": str(post_id),
            "artist_name": aggregate.get("artist_name"),
            "royalty_rate": to_number(aggregate.get("royalty_rate")),
        }
        for post_id, aggregate in aggregated.items()
    ]
    return pl.DataFrame(
        records,
        schema={"post_id": pl.Utf8, "artist_name": pl.Utf8, "royalty_rate": pl.Float64},
    )


def compute_royalties(
    deltas: pl.DataFrame,
    aggregated: Mapping[Any, Mapping[str, Any]],
    period: Optional[Tuple[int, int]] = None,
) -> pl.DataFrame:
    """Royalty owed per artist from snapshot deltas.

    Posts with no assigned artist are reported under the house owner at a
    zero rate. ``period`` restricts deltas to a ``(year, month)`` by their
    ``to_date``. Only artists with positive earnings are returned.
    """
    lf = deltas.lazy()
    if period is not None:
        year, month = period
        lf = lf.filter(
            (pl.col("to_date").dt.year() == year) & (pl.col("to_date").dt.month() == month)
        )

    house = house_owner()
    lf = lf.join(owners_frame(aggregated).lazy(), on="post_id", how="left").with_columns(
        pl.col("artist_name").fill_null(house),
        pl.when(pl.col("artist_name").is_null())
        .then(0.0)
        .otherwise(pl.col("royalty_rate").fill_null(0.0))
        .alias("royalty_rate"),
    )

    report = (
        lf.group_by("artist_name")
        .agg(
            pl.col("royalty_rate").first().alias("royalty_rate"),
            pl.col("earnings_delta").sum().alias("total_earnings"),
            pl.col("qualified_views_delta").sum().alias("total_views"),
            pl.col("post_id").n_unique().alias("post_count"),
        )
        .with_columns(
            SAFE_PCT(pl.col("total_earnings"), pl.col("royalty_rate")).alias("royalty_owed"),
            pl.lit(DEFAULT_CURRENCY).alias("currency"),
        )
        .filter(pl.col("total_earnings") > 0)
        .sort(["royalty_owed", "artist_name"], descending=[True, False])
        .collect()
    )

    logger.info(
        f"Royalty report: artists={report.height}, "
        f"total_owed={float(report['royalty_owed'].sum() or 0.0):.2f}"
    )
    return report
