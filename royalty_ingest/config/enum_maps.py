"""Enum mappings for standardizing categorical data."""

# Checked in order; the first keyword contained in the lowercased value wins.
POST_TYPE_KEYWORDS = (
    ("video", "Video"),
    ("reel", "Reel"),
    ("photo", "Photo"),
)

# Post types that carry a views count.
VIEWS_POST_TYPES = {"Video", "Reel"}

EARNINGS_COLUMN_LABELS = {
    "approximate_earnings": "approximate",
    "estimated_earnings": "estimated",
}
