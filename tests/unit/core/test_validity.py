"""
Unit tests for the usability check.
"""

from climatrack.core.retrieval import RawObservationSet, is_usable, usable_dates


class TestIsUsable:
    def test_absent_primary_series(self):
        observations = RawObservationSet(precipitation={"20240615": 1.0})
        assert is_usable(observations) is False

    def test_empty_primary_series(self):
        assert is_usable(RawObservationSet(temperature={})) is False

    def test_only_sentinel_values(self):
        observations = RawObservationSet(
            temperature={"20240614": -999.0, "20240615": -999}
        )
        assert is_usable(observations) is False

    def test_only_null_values(self):
        observations = RawObservationSet(temperature={"20240615": None})
        assert is_usable(observations) is False

    def test_one_real_value_is_enough(self):
        observations = RawObservationSet(
            temperature={"20240614": -999.0, "20240615": 14.2}
        )
        assert is_usable(observations) is True

    def test_zero_degrees_is_an_observation(self):
        assert is_usable(RawObservationSet(temperature={"20240115": 0.0}))

    def test_other_parameters_do_not_count(self):
        observations = RawObservationSet(
            temperature={"20240615": -999.0},
            precipitation={"20240615": 3.2},
            wind_speed={"20240615": 4.0},
        )
        assert is_usable(observations) is False

    def test_custom_sentinel(self):
        observations = RawObservationSet(temperature={"20240615": -9999.0})
        assert is_usable(observations) is True
        assert is_usable(observations, sentinel=-9999.0) is False


def test_usable_dates_skips_placeholders():
    observations = RawObservationSet(
        temperature={
            "20240613": 12.0,
            "20240614": -999.0,
            "20240615": None,
            "20240616": 13.5,
        }
    )
    assert usable_dates(observations) == ["20240613", "20240616"]
