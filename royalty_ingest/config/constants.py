"""Constants shared across the ingestion pipeline."""

import re
from datetime import datetime

# Cell values decoded as null.
NULL_TOKENS = {"", "N/A"}

# Characters stripped before a numeric cast.
NUMERIC_STRIP_RE = re.compile(r"[$,]")
NUMERIC_LOOKING_RE = re.compile(r"^[\d$,.-]+$")

# Tried in order, first match wins.
DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)

QUARTER_RE = re.compile(r"(\d{4})-(\d{2})")

# Posts published strictly after this instant are paid from the approximate
# content monetization column. Naive local time.
EARNINGS_CUTOVER = datetime(2025, 4, 1)

# Header keywords used by the column analysis log.
EARNINGS_HEADER_KEYWORDS = ("earning", "revenue", "monetization")
VIEWS_HEADER_KEYWORD = "view"

SNAPSHOT_METRICS = ("earnings", "qualified_views", "seconds_viewed")

LIFETIME_FIELDS = {
    "earnings": "lifetime_earnings",
    "qualified_views": "lifetime_qualified_views",
    "seconds_viewed": "lifetime_seconds_viewed",
}

DEFAULT_CURRENCY = "USD"
