from royalty_ingest.transforms import OwnerMappingTransform, assign_artists


ROWS = [
    {"Artist / Rights Owner": "Jane Doe", "Royalty Rate (%)": 40, "Asset Tag": "tag-1", "Asset / Post ID": None},
    {"Artist / Rights Owner": "John Roe", "Royalty Rate (%)": None, "Asset Tag": None, "Asset / Post ID": 303},
    {"Artist / Rights Owner": "House", "Royalty Rate (%)": 0, "Asset Tag": "tag-2", "Asset / Post ID": None},
    {"Artist / Rights Owner": None, "Royalty Rate (%)": 10, "Asset Tag": "tag-3", "Asset / Post ID": None},
]


def test_assignments_skip_house_and_blank_artists():
    assignments = OwnerMappingTransform(house="House").assignments(ROWS)
    assert [a["artist_name"] for a in assignments] == ["Jane Doe", "John Roe"]
    assert assignments[0]["royalty_rate"] == 40.0
    assert assignments[1]["royalty_rate"] == 0.0


def test_house_owner_comes_from_env(monkeypatch):
    monkeypatch.setenv("INGEST_HOUSE_OWNER", "Jane Doe")
    assignments = OwnerMappingTransform().assignments(ROWS)
    assert "Jane Doe" not in [a["artist_name"] for a in assignments]


def test_assign_artists_by_asset_tag_and_post_id():
    aggregated = {
        101: {"asset_tag": "tag-1"},
        102: {"asset_tag": "tag-1"},
        303: {"asset_tag": None},
        404: {"asset_tag": "tag-9"},
    }
    assignments = OwnerMappingTransform(house="House").assignments(ROWS)

    updated = assign_artists(aggregated, assignments)

    assert updated == 3
    assert aggregated[101]["artist_name"] == "Jane Doe"
    assert aggregated[102]["royalty_rate"] == 40.0
    assert aggregated[303]["artist_name"] == "John Roe"
    assert "artist_name" not in aggregated[404]


def test_post_id_match_ignores_type_differences():
    aggregated = {"303": {}}
    assign_artists(aggregated, [{"artist_name": "A", "royalty_rate": 1.0, "asset_tag": None, "post_id": 303}])
    assert aggregated["303"]["artist_name"] == "A"
