"""Aggregation and reporting over transformed post rows."""

from .aggregation import aggregate_posts, build_snapshot, date_range
from .deltas import compute_deltas, latest_snapshot, snapshots_frame
from .royalties import compute_royalties

__all__ = [
    "aggregate_posts",
    "build_snapshot",
    "date_range",
    "compute_deltas",
    "latest_snapshot",
    "snapshots_frame",
    "compute_royalties",
]
