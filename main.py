#!/usr/bin/env python3
"""
Command-line entry point for the post ingestion pipeline.

Processes one Facebook post performance export, optionally applies an owner
mapping, and prints (or saves) a JSON summary with deltas and royalties.
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

from royalty_ingest import FacebookCSVProcessor, IngestError
from royalty_ingest.analysis import compute_deltas, compute_royalties
from royalty_ingest.transforms import assign_artists

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def json_date_serializer(obj):
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    raise TypeError(f"Type {type(obj)} not serializable")


def parse_period(value: Optional[str]) -> Optional[Tuple[int, int]]:
    """Parse ``YYYY-MM`` into ``(year, month)``."""
    if not value:
        return None
    try:
        year, month = value.split("-", 1)
        return int(year), int(month)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid period {value!r}, expected YYYY-MM")


def build_summary(
    csv_path: str,
    owners_path: Optional[str] = None,
    period: Optional[Tuple[int, int]] = None,
) -> Dict[str, Any]:
    processor = FacebookCSVProcessor()
    result = processor.process_file(csv_path)
    aggregated = result["aggregated"]

    assigned = 0
    if owners_path:
        assignments = processor.load_owner_mapping(owners_path)
        assigned = assign_artists(aggregated, assignments)
        logger.info(f"Owner mapping applied: assignments={len(assignments)}, posts updated={assigned}")

    deltas = compute_deltas(aggregated)
    royalties = compute_royalties(deltas, aggregated, period=period)

    return {
        "metadata": {**result["metadata"], "posts_with_artist": assigned},
        "posts": {
            str(post_id): {
                "title": agg.get("title"),
                "post_type": agg.get("post_type"),
                "snapshots": len(agg["snapshots"]),
                "lifetime_earnings": agg["lifetime_earnings"],
                "lifetime_qualified_views": agg["lifetime_qualified_views"],
                "lifetime_seconds_viewed": agg["lifetime_seconds_viewed"],
                "artist_name": agg.get("artist_name"),
            }
            for post_id, agg in aggregated.items()
        },
        "deltas": deltas.to_dicts(),
        "royalties": royalties.to_dicts(),
    }


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Post performance ingestion")
    parser.add_argument("csv", type=str, help="Post performance export (CSV)")
    parser.add_argument("--owners", type=str, help="Owner mapping CSV")
    parser.add_argument("--period", type=parse_period, help="Royalty period as YYYY-MM")
    parser.add_argument("--output", type=str, help="Write the JSON summary to this path")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        summary = build_summary(args.csv, args.owners, args.period)
    except (IngestError, FileNotFoundError) as e:
        logger.error(f"Processing failed: {e}")
        sys.exit(1)

    payload = json.dumps(summary, default=json_date_serializer, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.info(f"Summary saved to {args.output}")
    else:
        print(payload)


if __name__ == "__main__":
    main()
