# ABOUTME: Temperature conversion between Celsius, Fahrenheit and Kelvin
# ABOUTME: Celsius is the pivot unit for any conversion not touching Celsius directly

from weatherwatch.weather.models import Scale

KELVIN_OFFSET = 273.15


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9 / 5 + 32


def celsius_to_kelvin(c: float) -> float:
    return c + KELVIN_OFFSET


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32) * 5 / 9


def kelvin_to_celsius(k: float) -> float:
    return k - KELVIN_OFFSET


_TO_CELSIUS = {
    Scale.CELSIUS: lambda value: value,
    Scale.FAHRENHEIT: fahrenheit_to_celsius,
    Scale.KELVIN: kelvin_to_celsius,
}

_FROM_CELSIUS = {
    Scale.CELSIUS: lambda value: value,
    Scale.FAHRENHEIT: celsius_to_fahrenheit,
    Scale.KELVIN: celsius_to_kelvin,
}


def to_celsius(value: float, scale) -> float:
    """Convert a value in `scale` to Celsius."""
    return _TO_CELSIUS[Scale.parse(scale)](value)


def from_celsius(c: float, scale) -> float:
    """Convert a Celsius value to `scale`."""
    return _FROM_CELSIUS[Scale.parse(scale)](c)


def convert(value: float, from_scale, to_scale) -> float:
    """
    Convert a temperature between two scales.

    Same-scale conversions return the value untouched. Anything else goes
    through Celsius, which is a single step when either end already is Celsius.

    Args:
        value: Temperature in `from_scale`
        from_scale: Scale member or scale name
        to_scale: Scale member or scale name

    Returns:
        Temperature in `to_scale`

    Raises:
        InvalidArgumentError: if either scale name is not recognized
    """
    source = Scale.parse(from_scale)
    target = Scale.parse(to_scale)

    if source == target:
        return value

    return from_celsius(to_celsius(value, source), target)
