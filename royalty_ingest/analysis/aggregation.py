"""Fold transformed rows into one aggregate per post."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..config.constants import LIFETIME_FIELDS
from ..transforms.utils import to_number

logger = logging.getLogger(__name__)


def _has_post_id(post_id: Any) -> bool:
    if post_id is None:
        return False
    if isinstance(post_id, str):
        return bool(post_id.strip())
    return True


def build_snapshot(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "date": row.get("report_date"),
        "earnings": row.get("earnings"),
        "qualified_views": row.get("qualified_views"),
        "seconds_viewed": row.get("seconds_viewed"),
        "engagement": {
            "reactions": row.get("reactions"),
            "comments": row.get("comments"),
            "shares": row.get("shares"),
        },
    }


def aggregate_posts(rows: Iterable[Mapping[str, Any]]) -> Tuple[Dict[Any, Dict[str, Any]], int]:
    """Group rows by post id in a single left-to-right pass.

    Header fields follow the most recent row for the post, every row adds a
    snapshot, and lifetime metrics keep the running maximum (never a sum).
    Rows without a post id are skipped; their count is returned alongside
    the aggregates.
    """
    groups: Dict[Any, Dict[str, Any]] = {}
    dropped = 0

    for row in rows:
        post_id = row.get("post_id")
        if not _has_post_id(post_id):
            dropped += 1
            continue

        group = groups.get(post_id)
        if group is None:
            group = {"snapshots": [], **{field: 0 for field in LIFETIME_FIELDS.values()}}
            groups[post_id] = group

        group.update(row)
        group["snapshots"].append(build_snapshot(row))

        for metric, lifetime_field in LIFETIME_FIELDS.items():
            group[lifetime_field] = max(group[lifetime_field], to_number(row.get(metric)) or 0)

    if dropped:
        logger.warning(f"Skipped {dropped} rows without a post id")

    return groups, dropped


def date_range(rows: Iterable[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Earliest and latest report date, or None when no row has one."""
    dates: List[Any] = [r["report_date"] for r in rows if r.get("report_date") is not None]
    if not dates:
        return None
    return {"start": min(dates), "end": max(dates)}
