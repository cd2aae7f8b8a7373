"""Period-over-period changes between post snapshots."""

from typing import Any, Dict, Mapping, Optional

import polars as pl

from ..config.constants import SNAPSHOT_METRICS
from ..transforms.utils import to_number

SNAPSHOT_SCHEMA = {
    "post_id": pl.Utf8,
    "date": pl.Datetime("us"),
    "earnings": pl.Float64,
    "qualified_views": pl.Float64,
    "seconds_viewed": pl.Float64,
}

DELTA_COLUMNS = [f"{m}_delta" for m in SNAPSHOT_METRICS]


def snapshots_frame(aggregated: Mapping[Any, Mapping[str, Any]]) -> pl.DataFrame:
    """Flatten every post's snapshots into one frame keyed by post id."""
    records = [
        {
            "post_id": str(post_id),
            "date": snapshot.get("date"),
            **{m: to_number(snapshot.get(m)) for m in SNAPSHOT_METRICS},
        }
        for post_id, aggregate in aggregated.items()
        for snapshot in aggregate.get("snapshots", [])
    ]
    return pl.DataFrame(records, schema=SNAPSHOT_SCHEMA)


def compute_deltas(
    aggregated: Mapping[Any, Mapping[str, Any]], latest_only: bool = True
) -> pl.DataFrame:
    """Differences between consecutive dated snapshots of each post.

    With ``latest_only`` only the newest pair per post is kept, which is what
    a fresh upload contributes. Pairs where neither earnings nor qualified
    views moved are dropped.
    """
    df = (
        snapshots_frame(aggregated)
        .drop_nulls("date")
        .with_columns([pl.col(m).fill_null(0.0) for m in SNAPSHOT_METRICS])
        .sort(["post_id", "date"], maintain_order=True)
    )

    df = df.with_columns(
        [pl.col("date").shift(1).over("post_id").alias("from_date")]
        + [
            (pl.col(m) - pl.col(m).shift(1).over("post_id")).alias(f"{m}_delta")
            for m in SNAPSHOT_METRICS
        ]
    ).rename({"date": "to_date"})

    df = df.drop_nulls("from_date")
    if latest_only:
        df = df.group_by("post_id", maintain_order=True).last()

    df = df.filter((pl.col("earnings_delta") != 0) | (pl.col("qualified_views_delta") != 0))
    return df.select(["post_id", "from_date", "to_date", *DELTA_COLUMNS])


def latest_snapshot(aggregate: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """The snapshot with the newest report date.

    Undated snapshots only win when no snapshot carries a date.
    """
    snapshots = aggregate.get("snapshots") or []
    dated = [s for s in snapshots if s.get("date") is not None]
    if dated:
        return max(dated, key=lambda s: s["date"])
    return snapshots[-1] if snapshots else None
