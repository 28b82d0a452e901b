# ABOUTME: Formats the stored measurement and condition as display text
# ABOUTME: Unknown display scales fall back to Celsius with a visible notice instead of failing

import logging

from weatherwatch.errors import InvalidArgumentError
from weatherwatch.weather.condition import describe
from weatherwatch.weather.conversion import from_celsius
from weatherwatch.weather.models import Scale
from weatherwatch.weather.store import MeasurementStore

log = logging.getLogger(__name__)

NO_DATA_TEXT = "No weather data collected yet."


def _fmt(value: float) -> str:
    return str(round(value, 2))


def render(store: MeasurementStore, scale) -> str:
    """
    Render the latest measurement in the requested temperature scale.

    Args:
        store: Store to read from
        scale: Scale member or name; unknown names render in Celsius

    Returns:
        Multi-line text, e.g. "Temperature: 273.15K\\nHumidity: 50.0%\\nPressure: 1013.0 hPa"
    """
    lines = []
    try:
        target = Scale.parse(scale)
    except InvalidArgumentError:
        log.warning(f"Unknown display scale {scale!r}, using Celsius")
        lines.append(f"Unknown temperature scale '{scale}', falling back to Celsius.")
        target = Scale.CELSIUS

    measurement = store.current_measurement()
    if measurement is None:
        lines.append(NO_DATA_TEXT)
        return "\n".join(lines)

    temperature = from_celsius(measurement.temperature_c, target)
    lines.append(f"Temperature: {_fmt(temperature)}{target.suffix}")
    lines.append(f"Humidity: {_fmt(measurement.humidity_pct)}%")
    lines.append(f"Pressure: {_fmt(measurement.pressure_hpa)} hPa")
    return "\n".join(lines)


def render_condition(store: MeasurementStore) -> str:
    condition = store.current_condition()
    if condition is None:
        return NO_DATA_TEXT
    return describe(condition)
