from datetime import datetime
from itertools import permutations

import pytest

from royalty_ingest.analysis import aggregate_posts, date_range


def _row(post_id, day, qualified_views=None, earnings=0.0, seconds_viewed=None, **extra):
    return {
        "post_id": post_id,
        "report_date": datetime(2025, 5, day) if day else None,
        "qualified_views": qualified_views,
        "earnings": earnings,
        "seconds_viewed": seconds_viewed,
        **extra,
    }


@pytest.mark.parametrize("order", list(permutations([100, 50, 200])))
def test_lifetime_max_is_order_independent(order):
    rows = [_row("P1", i + 1, qualified_views=v) for i, v in enumerate(order)]
    aggregated, _ = aggregate_posts(rows)
    assert aggregated["P1"]["lifetime_qualified_views"] == 200


def test_lifetime_metrics_are_max_not_sum():
    rows = [
        _row("P1", 1, qualified_views=10, earnings=1.5, seconds_viewed=60),
        _row("P1", 2, qualified_views=20, earnings=1.0, seconds_viewed=90),
    ]
    aggregated, _ = aggregate_posts(rows)
    post = aggregated["P1"]
    assert post["lifetime_qualified_views"] == 20
    assert post["lifetime_earnings"] == 1.5
    assert post["lifetime_seconds_viewed"] == 90


def test_lifetime_metrics_never_decrease_while_folding():
    values = [30, 10, 45, 20]
    seen = []
    for i in range(1, len(values) + 1):
        aggregated, _ = aggregate_posts([_row("P1", d + 1, qualified_views=v) for d, v in enumerate(values[:i])])
        seen.append(aggregated["P1"]["lifetime_qualified_views"])
    assert seen == sorted(seen)
    assert seen[-1] == max(values)


def test_non_numeric_metrics_count_as_zero():
    aggregated, _ = aggregate_posts([_row("P1", 1, qualified_views="n/a")])
    assert aggregated["P1"]["lifetime_qualified_views"] == 0


def test_snapshots_keep_input_order_and_engagement():
    rows = [
        _row("P1", 3, qualified_views=5, reactions=1, comments=2, shares=3),
        _row("P1", 1, qualified_views=2),
    ]
    aggregated, _ = aggregate_posts(rows)
    snapshots = aggregated["P1"]["snapshots"]
    assert [s["date"].day for s in snapshots] == [3, 1]
    assert snapshots[0]["engagement"] == {"reactions": 1, "comments": 2, "shares": 3}
    assert snapshots[1]["engagement"] == {"reactions": None, "comments": None, "shares": None}


def test_header_fields_follow_latest_row():
    rows = [_row("P1", 1, title="Old title"), _row("P1", 2, title="New title")]
    aggregated, _ = aggregate_posts(rows)
    assert aggregated["P1"]["title"] == "New title"


@pytest.mark.parametrize("missing", [None, "", "   "])
def test_rows_without_post_id_are_dropped(missing):
    rows = [_row(missing, 1, qualified_views=99), _row("P1", 1, qualified_views=1)]
    aggregated, dropped = aggregate_posts(rows)
    assert list(aggregated) == ["P1"]
    assert dropped == 1


def test_numeric_post_id_zero_is_kept():
    aggregated, dropped = aggregate_posts([_row(0, 1)])
    assert 0 in aggregated
    assert dropped == 0


def test_date_range():
    rows = [_row("P1", 5), _row("P2", 2), _row("P3", None), _row("P1", 9)]
    assert date_range(rows) == {"start": datetime(2025, 5, 2), "end": datetime(2025, 5, 9)}


def test_date_range_without_dates_is_none():
    assert date_range([_row("P1", None)]) is None
    assert date_range([]) is None
