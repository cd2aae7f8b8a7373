"""Field mappings for different export sources.

Only the mapping from original source column names to the internal
standard English names lives here.
"""

from types import MappingProxyType

FACEBOOK_POST_MAP = MappingProxyType({
    "Post ID": "post_id",
    "Page ID": "page_id",
    "Page name": "page_name",
    "Title": "title",
    "Description": "description",
    "Duration (sec)": "duration",
    "Publish time": "publish_time",
    "Caption type": "caption_type",
    "Permalink": "permalink",
    "Post type": "post_type",
    "Custom labels": "asset_tag",
    "Date": "report_date",
    "Reactions, Comments and Shares": "total_engagement",
    "Reactions": "reactions",
    "Comments": "comments",
    "Shares": "shares",
    "Seconds viewed": "seconds_viewed",
    "Average Seconds viewed": "avg_seconds_viewed",
    "Estimated earnings (USD)": "estimated_earnings",
    "Approximate content monetization earnings": "approximate_earnings",
    "Qualified Views": "qualified_views",
    "3-Second Video Views": "three_second_views",
    "1-Minute Video Views": "one_minute_views",
    "Views": "views",
})

OWNER_MAPPING_MAP = MappingProxyType({
    "Artist / Rights Owner": "artist_name",
    "Royalty Rate (%)": "royalty_rate",
    "Asset Tag": "asset_tag",
    "Asset / Post ID": "post_id",
})
