"""
Unit tests for the city matching engine.
"""

import pytest

from citymatch.core.constants import CAPACITY_BOUNDS, DISTANCE_BOUNDS, PRICE_BOUNDS
from citymatch.core.models import CityStats, Criterion, PreferenceInput
from citymatch.exceptions import ConfigurationError
from citymatch.matching.engine import (
    get_city_match,
    importance_divisor,
    score_city,
    score_range,
    score_superhost,
    score_threshold,
)

ALL_FIVES = {criterion: 5 for criterion in Criterion}


def make_preferences(**overrides) -> PreferenceInput:
    values = dict(
        weekday=True,
        price_range=(100.0, 300.0),
        cleanliness_min=9.0,
        distance_range=(0.2, 1.0),
        capacity_range=(2.0, 4.0),
        satisfaction_min=90.0,
        superhost_preference="all_listings",
        importance=dict(ALL_FIVES),
    )
    values.update(overrides)
    return PreferenceInput(**values)


def make_stats(**overrides) -> CityStats:
    values = dict(
        price=200.0, cleanliness=9.5, satisfaction=95.0,
        distance=0.5, capacity=3.0, superhost_pct=25.0,
    )
    values.update(overrides)
    return CityStats(**values)


class TestScoreThreshold:
    """Tests for score_threshold function."""

    def test_meets_minimum(self):
        assert score_threshold(9.5, 9.0, 5) == 5

    def test_exactly_at_minimum(self):
        assert score_threshold(9.0, 9.0, 5) == 5

    def test_partial_credit_below(self):
        assert score_threshold(4.5, 9.0, 5) == pytest.approx(2.5)

    def test_zero_minimum_gives_full_credit(self):
        assert score_threshold(0.0, 0.0, 4) == 4


class TestScoreRange:
    """Tests for score_range function."""

    def test_inside_range(self):
        assert score_range(5.0, (4.0, 6.0), 4, (0.0, 10.0)) == 4

    def test_range_boundaries_inclusive(self):
        assert score_range(100.0, (100.0, 300.0), 5, PRICE_BOUNDS) == 5
        assert score_range(300.0, (100.0, 300.0), 5, PRICE_BOUNDS) == 5

    def test_below_range_falls_toward_lowest(self):
        assert score_range(2.0, (4.0, 6.0), 4, (0.0, 10.0)) == pytest.approx(2.0)

    def test_above_range_falls_toward_highest(self):
        assert score_range(8.0, (4.0, 6.0), 4, (0.0, 10.0)) == pytest.approx(2.0)

    def test_at_global_extreme_scores_zero(self):
        assert score_range(0.0, (4.0, 6.0), 4, (0.0, 10.0)) == 0.0
        assert score_range(10.0, (4.0, 6.0), 4, (0.0, 10.0)) == 0.0

    def test_full_domain_range(self):
        lowest, highest = CAPACITY_BOUNDS
        assert score_range(lowest, CAPACITY_BOUNDS, 3, CAPACITY_BOUNDS) == 3
        assert score_range(highest, CAPACITY_BOUNDS, 3, CAPACITY_BOUNDS) == 3
        assert score_range(2.79, DISTANCE_BOUNDS, 3, DISTANCE_BOUNDS) == 3

    def test_zero_width_falloff_scores_zero(self):
        assert score_range(1.0, (2.0, 4.0), 5, (2.0, 6.0)) == 0.0
        assert score_range(7.0, (2.0, 6.0), 5, (2.0, 6.0)) == 0.0


class TestScoreSuperhost:
    """Tests for score_superhost function."""

    def test_superhost_only(self):
        assert score_superhost(make_stats(superhost_pct=30.0), "superhost_only", 2) == 60.0

    def test_other_preferences_score_nothing(self):
        stats = make_stats(superhost_pct=30.0)
        assert score_superhost(stats, "all_listings", 5) == 0.0
        assert score_superhost(stats, "", 5) == 0.0


class TestImportanceDivisor:
    """Tests for importance_divisor function."""

    def test_all_listings_excludes_superhost(self):
        assert importance_divisor(make_preferences()) == 25

    def test_superhost_only_includes_superhost(self):
        assert importance_divisor(make_preferences(superhost_preference="superhost_only")) == 30

    def test_room_type_never_counts(self):
        prefs = make_preferences(room_type_importance=5)
        assert importance_divisor(prefs) == 25

    def test_unset_weights_count_zero(self):
        prefs = make_preferences(importance={Criterion.PRICE: 4, Criterion.SATISFACTION: 2})
        assert importance_divisor(prefs) == 6


class TestScoreCity:
    """Tests for score_city function."""

    def test_perfect_fit(self):
        assert score_city(make_stats(), make_preferences()) == pytest.approx(25.0)

    def test_unset_criterion_contributes_nothing(self):
        prefs = make_preferences(importance={Criterion.CLEANLINESS: 3})
        assert score_city(make_stats(price=5000.0, distance=9.0), prefs) == pytest.approx(3.0)


class TestGetCityMatch:
    """Tests for get_city_match function."""

    def test_zero_divisor_raises(self):
        prefs = make_preferences(importance={Criterion.SUPERHOST: 5}, room_type_importance=4)
        with pytest.raises(ConfigurationError):
            get_city_match(prefs)

    def test_returns_top_three(self):
        matches = get_city_match(make_preferences())
        assert len(matches) == 3
        raw_scores = [m.raw_score for m in matches]
        assert raw_scores == sorted(raw_scores, reverse=True)

    def test_weekday_ties_keep_table_order(self):
        # Athens, Barcelona, Berlin, Lisbon, Rome and Vienna all fit perfectly
        matches = get_city_match(make_preferences())
        assert [m.city for m in matches] == ["Athens", "Barcelona", "Berlin"]
        assert [m.score for m in matches] == [100, 100, 100]

    def test_weekend_table(self):
        # Barcelona's weekend price (300.28) sits just above the range
        matches = get_city_match(make_preferences(weekday=False))
        assert [m.city for m in matches] == ["Athens", "Berlin", "Budapest"]

    def test_superhost_only_favours_superhost_share(self):
        matches = get_city_match(make_preferences(superhost_preference="superhost_only"))
        assert matches[0].city == "Athens"
        assert matches[0].raw_score == pytest.approx(25 + 43.08 * 5)
        assert matches[0].score == int(matches[0].raw_score / 30 * 100)

    def test_scores_truncate(self):
        table = {"weekdays": {"Solo": make_stats(cleanliness=6.0)}}
        prefs = make_preferences(importance={Criterion.CLEANLINESS: 3})
        matches = get_city_match(prefs, table=table)
        # 6 / 9 * 3 = 2.0 raw -> 66.67% -> 66
        assert matches[0].score == 66

    def test_stable_ties_on_custom_table(self):
        same = make_stats()
        table = {"weekdays": {
            "Worse": make_stats(cleanliness=1.0),
            "First": same,
            "Second": same,
            "Third": same,
        }}
        matches = get_city_match(make_preferences(), table=table)
        assert [m.city for m in matches] == ["First", "Second", "Third"]

    def test_top_n_override(self):
        assert len(get_city_match(make_preferences(), top_n=5)) == 5

    def test_fewer_cities_than_top_n(self):
        table = {"weekdays": {"Only": make_stats()}}
        matches = get_city_match(make_preferences(), table=table)
        assert len(matches) == 1
        assert matches[0].to_dict() == {"city": "Only", "score": 100}
