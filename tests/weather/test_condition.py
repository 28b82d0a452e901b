# ABOUTME: Tests for temperature to weather condition classification
# ABOUTME: Validates band boundaries and condition display labels

import pytest

from weatherwatch.weather.condition import classify, describe, CONDITION_LABELS
from weatherwatch.weather.models import Condition


class TestClassify:
    """Tests for classify() bands"""

    def test_exactly_25_is_cloudy(self):
        """Upper boundary belongs to the colder band"""
        assert classify(25.0) == Condition.CLOUDY

    def test_just_above_25_is_sunny(self):
        assert classify(25.0001) == Condition.SUNNY

    def test_exactly_15_is_rainy(self):
        assert classify(15.0) == Condition.RAINY

    def test_exactly_zero_is_snowy(self):
        assert classify(0.0) == Condition.SNOWY

    def test_below_zero_is_snowy(self):
        assert classify(-5) == Condition.SNOWY

    @pytest.mark.parametrize("temperature,expected", [
        (39.9, Condition.SUNNY),
        (22.0, Condition.CLOUDY),
        (15.0001, Condition.CLOUDY),
        (10.0, Condition.RAINY),
        (0.0001, Condition.RAINY),
        (-10.0, Condition.SNOWY),
    ])
    def test_bands(self, temperature, expected):
        assert classify(temperature) == expected


def test_every_condition_has_a_label():
    """Each condition maps to a display label"""
    assert set(CONDITION_LABELS) == set(Condition)


def test_describe_formats_label():
    assert describe(Condition.SUNNY) == "Weather: Sunny"
    assert describe(Condition.SNOWY) == "Weather: Snowy"
