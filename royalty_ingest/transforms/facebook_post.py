"""Facebook post performance transformation."""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config import EARNINGS_COLUMN_LABELS, EARNINGS_CUTOVER, FACEBOOK_POST_MAP, VIEWS_POST_TYPES
from .base import BaseTransformer
from .utils import extract_quarter, normalize_post_type, parse_date, to_number


def select_earnings(row: Mapping[str, Any]) -> Tuple[float, Optional[str]]:
    """Pick the earnings figure that applies to the post.

    Posts published after the monetization cutover report through the
    approximate content monetization column only. Older posts prefer the
    estimated column and fall back to the approximate one. Zero, missing and
    non-numeric values fall through to the next candidate.

    Returns the amount and the internal name of the column it came from.
    """
    publish_time = row.get("publish_time")
    if publish_time is not None and publish_time > EARNINGS_CUTOVER:
        candidates = ("approximate_earnings",)
    else:
        candidates = ("estimated_earnings", "approximate_earnings")

    for column in candidates:
        amount = to_number(row.get(column))
        if amount:
            return amount, column
    return 0.0, None


def select_views(row: Mapping[str, Any]) -> Tuple[Any, str]:
    """Views for video content: the Views column, else 1-minute views."""
    if row.get("views") is not None:
        return row["views"], "views"
    if row.get("one_minute_views") is not None:
        return row["one_minute_views"], "1-minute"
    return 0, "none"


class FacebookPostTransform(BaseTransformer):
    """Transform a Facebook post export row to standardized format."""

    @property
    def get_input_rename_map(self) -> Mapping[str, str]:
        return FACEBOOK_POST_MAP

    @property
    def metric_fields(self) -> List[str]:
        return ["earnings", "qualified_views", "seconds_viewed", "reactions", "comments", "shares"]

    def _apply_transform(self, row: Dict[str, Any]) -> Dict[str, Any]:
        raw_report_date = row.get("report_date")

        row["publish_time"] = parse_date(row.get("publish_time"))
        row["report_date"] = parse_date(raw_report_date)

        earnings, column = select_earnings(row)
        row["earnings"] = earnings
        row["earnings_column"] = EARNINGS_COLUMN_LABELS.get(column)

        if "post_type" in row:
            row["post_type"] = normalize_post_type(row["post_type"])

        if row.get("post_type") in VIEWS_POST_TYPES:
            row["views"], row["views_source"] = select_views(row)

        row["quarter_range"] = extract_quarter(raw_report_date)
        return row


def create_facebook_post_transform() -> FacebookPostTransform:
    """Factory function to create the post transformer."""
    return FacebookPostTransform()
