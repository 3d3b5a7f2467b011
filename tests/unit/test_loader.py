"""
Unit tests for the listing CSV loader.
"""

import pytest

from citymatch.aggregation import loader
from citymatch.aggregation.loader import (
    load_and_aggregate,
    load_city_rows,
    read_listing_rows,
)
from citymatch.exceptions import DataNotFoundError, ProcessingError


class TestReadListingRows:
    """Tests for read_listing_rows function."""

    def test_reads_rows_as_strings(self, test_config, data_dir):
        rows = read_listing_rows(data_dir / "amsterdam_weekdays.csv")
        assert len(rows) == 2
        assert rows[0]["realSum"] == "200"
        assert rows[0]["room_type"] == "Private room"
        assert all(isinstance(v, str) for v in rows[0].values())

    def test_bom_is_stripped_from_header(self, test_config, data_dir):
        rows = read_listing_rows(data_dir / "amsterdam_weekends.csv")
        assert len(rows) == 2
        assert "realSum" in rows[0]
        assert not any(key.startswith("\ufeff") for key in rows[0])

    def test_empty_cells_stay_empty_strings(self, test_config, data_dir):
        rows = read_listing_rows(data_dir / "amsterdam_weekends.csv")
        assert rows[0]["cleanliness_rating"] == ""
        assert rows[1]["room_type"] == ""

    def test_missing_file_returns_empty(self, test_config, data_dir):
        assert read_listing_rows(data_dir / "nowhere.csv") == []

    def test_zero_byte_file_returns_empty(self, test_config, data_dir):
        assert read_listing_rows(data_dir / "berlin_weekdays.csv") == []

    def test_skips_blank_lines(self, test_config, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("realSum,room_type\n100,Private room\n\n200,Shared room\n")
        rows = read_listing_rows(path)
        assert [row["realSum"] for row in rows] == ["100", "200"]


class TestLoadCityRows:
    """Tests for load_city_rows function."""

    def test_loads_weekday_and_weekend(self, test_config):
        weekday, weekend = load_city_rows("amsterdam")
        assert len(weekday) == 2
        assert len(weekend) == 2

    def test_city_id_case_insensitive(self, test_config):
        weekday, weekend = load_city_rows("Rome")
        assert len(weekday) == 1
        assert weekend == []

    def test_explicit_data_dir(self, test_config, tmp_path):
        weekday, weekend = load_city_rows("amsterdam", data_dir=str(tmp_path))
        assert weekday == []
        assert weekend == []

    def test_unknown_city(self, test_config):
        with pytest.raises(DataNotFoundError):
            load_city_rows("../etc/passwd")


class TestLoadAndAggregate:
    """Tests for load_and_aggregate function."""

    def test_aggregates_city(self, test_config):
        record = load_and_aggregate("amsterdam")
        assert record.weekday_rows == 2
        assert record.weekend_rows == 2
        assert record.avg_cost.combined == pytest.approx(375.0)

    def test_weekday_only_city(self, test_config):
        record = load_and_aggregate("rome")
        assert record.weekend_rows == 0
        assert record.avg_cost.weekend is None
        assert record.avg_cleanliness.combined == pytest.approx(9.5)

    def test_no_data_raises_not_found(self, test_config):
        with pytest.raises(DataNotFoundError):
            load_and_aggregate("berlin")

    def test_unexpected_failure_wrapped(self, test_config, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(loader, "aggregate_listings", broken)
        with pytest.raises(ProcessingError) as exc_info:
            load_and_aggregate("amsterdam")
        assert "disk on fire" in exc_info.value.message
        assert exc_info.value.city_id == "amsterdam"
