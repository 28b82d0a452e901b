# ABOUTME: Classifies a Celsius temperature into a weather condition
# ABOUTME: Boundary temperatures (25, 15, 0) fall into the colder band

from weatherwatch.weather.models import Condition

SUNNY_ABOVE_C = 25.0
CLOUDY_ABOVE_C = 15.0
RAINY_ABOVE_C = 0.0

CONDITION_LABELS = {
    Condition.SUNNY: "Sunny",
    Condition.CLOUDY: "Cloudy",
    Condition.RAINY: "Rainy",
    Condition.SNOWY: "Snowy",
}


def classify(temperature_c: float) -> Condition:
    """
    Map a temperature to a weather condition.

    Bands:
        > 25      Sunny
        (15, 25]  Cloudy
        (0, 15]   Rainy
        <= 0      Snowy
    """
    if temperature_c > SUNNY_ABOVE_C:
        return Condition.SUNNY
    elif temperature_c > CLOUDY_ABOVE_C:
        return Condition.CLOUDY
    elif temperature_c > RAINY_ABOVE_C:
        return Condition.RAINY
    return Condition.SNOWY


def describe(condition: Condition) -> str:
    return f"Weather: {CONDITION_LABELS[condition]}"
