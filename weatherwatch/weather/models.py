# ABOUTME: Data models for measurements, weather conditions and temperature scales
# ABOUTME: Celsius is the only stored unit, other scales are derived on demand

from dataclasses import dataclass
from enum import Enum

from weatherwatch.errors import InvalidArgumentError


@dataclass(frozen=True)
class Measurement:
    """One weather reading, temperature always in Celsius"""
    temperature_c: float
    humidity_pct: float
    pressure_hpa: float

    def __str__(self) -> str:
        return (
            f"Temp: {self.temperature_c:.1f}°C, "
            f"Humidity: {self.humidity_pct:.1f}%, "
            f"Pressure: {self.pressure_hpa:.1f} hPa"
        )


class Condition(Enum):
    """Discrete weather condition derived from temperature"""
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"


class Scale(Enum):
    """Temperature scale with its display name and unit suffix"""
    CELSIUS = ("Celsius", "°C")
    FAHRENHEIT = ("Fahrenheit", "°F")
    KELVIN = ("Kelvin", "K")

    def __init__(self, display_name: str, suffix: str):
        self.display_name = display_name
        self.suffix = suffix

    @classmethod
    def parse(cls, name) -> "Scale":
        """
        Resolve a scale from a Scale member or a name.

        Accepts the display name in any case ("celsius", "KELVIN") and the
        single-letter forms "C", "F" and "K".

        Raises:
            InvalidArgumentError: if the name matches no scale
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower()
        for scale in cls:
            if key in (scale.display_name.lower(), scale.display_name[0].lower()):
                return scale

        raise InvalidArgumentError(f"Unknown temperature scale: {name!r}")
