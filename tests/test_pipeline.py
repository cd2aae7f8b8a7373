import io
from datetime import datetime

import pytest

from royalty_ingest import FacebookCSVProcessor, ParseError

HEADER = (
    "Post ID,Page name,Title,Publish time,Post type,Date,Custom labels,"
    "Reactions,Comments,Shares,Seconds viewed,"
    "Estimated earnings (USD),Approximate content monetization earnings,Qualified Views\n"
)


def test_end_to_end_single_post(write_csv):
    path = write_csv(
        HEADER
        + '101,Page,"Cat, the movie",2025-03-01 09:00:00,Videos,2025-05-01,tag-1,1,0,0,"1,000",$1.00,,10\n'
        + '101,Page,"Cat, the movie",2025-03-01 09:00:00,Videos,2025-05-02,tag-1,2,1,0,"2,500",$2.50,,20\n'
        + '101,Page,"Cat, the movie",2025-03-01 09:00:00,Videos,2025-05-03,tag-1,4,1,1,"4,000",$3.75,,35\n'
    )

    result = FacebookCSVProcessor().process_file(path)

    post = result["aggregated"][101]
    assert len(post["snapshots"]) == 3
    assert [s["qualified_views"] for s in post["snapshots"]] == [10, 20, 35]
    assert post["lifetime_qualified_views"] == 35
    assert post["lifetime_earnings"] == pytest.approx(3.75)
    assert post["lifetime_seconds_viewed"] == 4000
    assert post["title"] == "Cat, the movie"
    assert post["post_type"] == "Video"
    assert post["asset_tag"] == "tag-1"
    assert post["quarter_range"] == "2025-Q2"

    metadata = result["metadata"]
    assert metadata["total_rows"] == 3
    assert metadata["unique_posts"] == 1
    assert metadata["dropped_rows"] == 0
    assert metadata["date_range"] == {"start": datetime(2025, 5, 1), "end": datetime(2025, 5, 3)}
    assert metadata["source"] == str(path)


def test_rows_without_post_id_count_in_total_only(write_csv):
    path = write_csv(
        "Post ID,Title,Date,Qualified Views\n"
        "1,a,2025-05-01,5\n"
        ",orphan,2025-05-02,7\n"
        "2,b,2025-05-03,9\n"
    )
    result = FacebookCSVProcessor().process_file(path)
    assert set(result["aggregated"]) == {1, 2}
    assert result["metadata"]["total_rows"] == 3
    assert result["metadata"]["unique_posts"] == 2
    assert result["metadata"]["dropped_rows"] == 1
    assert len(result["raw"]) == 3
    # The orphan row still contributes to the date range
    assert result["metadata"]["date_range"]["end"] == datetime(2025, 5, 3)


@pytest.mark.parametrize("record", [",", "N/A,N/A"])
def test_placeholder_only_records_count_as_dropped(write_csv, record):
    path = write_csv(f"Post ID,Title\n{record}\n1,a\n")
    metadata = FacebookCSVProcessor().process_file(path)["metadata"]
    assert metadata["total_rows"] == 2
    assert metadata["unique_posts"] == 1
    assert metadata["dropped_rows"] == 1


def test_process_binary_stream():
    data = io.BytesIO(b"Post ID,Qualified Views\n9,1\n9,4\n")
    result = FacebookCSVProcessor().process_file(data)
    assert result["aggregated"][9]["lifetime_qualified_views"] == 4


def test_no_dates_gives_null_range(write_csv):
    path = write_csv("Post ID,Qualified Views\n1,3\n")
    assert FacebookCSVProcessor().process_file(path)["metadata"]["date_range"] is None


def test_malformed_csv_aborts_without_result(write_csv):
    path = write_csv("Post ID,Title\n1,a\n2,b,c,d\n")
    with pytest.raises(ParseError):
        FacebookCSVProcessor().process_file(path)


def test_earnings_policy_through_the_pipeline(write_csv):
    path = write_csv(
        "Post ID,Publish time,Estimated earnings (USD),Approximate content monetization earnings\n"
        "1,2025-04-02,3.00,5.00\n"
        "2,2025-03-02,3.00,5.00\n"
        "3,2025-03-02,,5.00\n"
    )
    raw = FacebookCSVProcessor().process_file(path)["raw"]
    assert [r["earnings"] for r in raw] == [5.0, 3.0, 5.0]


def test_owner_mapping_is_loaded_through_processor(write_csv):
    path = write_csv(
        "Artist / Rights Owner,Royalty Rate (%),Asset Tag,Asset / Post ID\n"
        "Jane Doe,50,tag-1,\n"
        "Comedy Genius,0,tag-2,\n",
        name="owners.csv",
    )
    assignments = FacebookCSVProcessor().load_owner_mapping(path)
    assert [a["artist_name"] for a in assignments] == ["Jane Doe"]
