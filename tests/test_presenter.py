# ABOUTME: Tests for measurement and condition rendering
# ABOUTME: Validates scale suffixes, Kelvin formatting and unknown-scale fallback

import pytest

from weatherwatch.presenter import render, render_condition, NO_DATA_TEXT
from weatherwatch.weather.models import Scale
from weatherwatch.weather.store import MeasurementStore


@pytest.fixture
def store():
    store = MeasurementStore()
    store.update(0.0, 50, 1013)
    return store


class TestRender:
    """Tests for render()"""

    def test_kelvin(self, store):
        """0°C renders as 273.15K"""
        assert "273.15K" in render(store, "Kelvin")

    def test_celsius_lines(self, store):
        assert render(store, "Celsius") == (
            "Temperature: 0.0°C\n"
            "Humidity: 50.0%\n"
            "Pressure: 1013.0 hPa"
        )

    def test_fahrenheit(self, store):
        assert "Temperature: 32.0°F" in render(store, Scale.FAHRENHEIT)

    def test_values_rounded_to_two_places(self):
        store = MeasurementStore()
        store.update(21.456789, 63.333333, 1017.98765)

        output = render(store, "Celsius")

        assert "Temperature: 21.46°C" in output
        assert "Humidity: 63.33%" in output
        assert "Pressure: 1017.99 hPa" in output

    def test_unknown_scale_falls_back_to_celsius(self, store):
        """Unknown scale never raises; a notice precedes Celsius output"""
        output = render(store, "Unknown")
        lines = output.splitlines()

        assert lines[0] == "Unknown temperature scale 'Unknown', falling back to Celsius."
        assert lines[1] == "Temperature: 0.0°C"

    def test_no_data_yet(self):
        assert render(MeasurementStore(), "Celsius") == NO_DATA_TEXT

    def test_no_data_with_unknown_scale_still_shows_notice(self):
        output = render(MeasurementStore(), "Rankine")

        assert "falling back to Celsius" in output
        assert NO_DATA_TEXT in output


class TestRenderCondition:
    """Tests for render_condition()"""

    def test_condition_label(self):
        store = MeasurementStore()
        store.update(22.0, 60.0, 1015.0)

        assert render_condition(store) == "Weather: Cloudy"

    def test_no_data_yet(self):
        assert render_condition(MeasurementStore()) == NO_DATA_TEXT
