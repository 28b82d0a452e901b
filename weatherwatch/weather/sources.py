# ABOUTME: Synthetic weather data sources selectable as "remote" (API-like) or "local" (sensor-like)
# ABOUTME: Both variants generate bounded random readings and push them into a MeasurementStore

import logging
import random
from enum import Enum
from typing import Optional

from weatherwatch.config import Config
from weatherwatch.errors import InvalidArgumentError
from weatherwatch.weather.models import Measurement
from weatherwatch.weather.store import MeasurementStore

log = logging.getLogger(__name__)


class SourceKind(Enum):
    REMOTE = "remote"
    LOCAL = "local"


# "api" and "sensor" are accepted as menu synonyms
SOURCE_ALIASES = {
    "remote": SourceKind.REMOTE,
    "api": SourceKind.REMOTE,
    "local": SourceKind.LOCAL,
    "sensor": SourceKind.LOCAL,
}


class SyntheticSource:
    """
    Random-but-bounded weather generator.

    There is no real API or sensor behind either kind; the tag only records
    which one the user picked.
    """

    def __init__(self, kind: SourceKind, rng: Optional[random.Random] = None):
        self.kind = kind
        self.rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self.kind.value

    def _sample(self, bounds: tuple) -> float:
        # random() is in [0, 1), so the upper bound is never reached
        low, high = bounds
        return low + self.rng.random() * (high - low)

    def read(self) -> Measurement:
        """Generate one reading without storing it."""
        return Measurement(
            temperature_c=self._sample(Config.TEMPERATURE_RANGE_C),
            humidity_pct=self._sample(Config.HUMIDITY_RANGE_PCT),
            pressure_hpa=self._sample(Config.PRESSURE_RANGE_HPA),
        )

    def collect(self, store: MeasurementStore) -> list[str]:
        """
        Generate one reading and push it into the store.

        Returns:
            Warning messages fired by the store's listeners
        """
        reading = self.read()
        log.info(f"{self.name} source collected {reading}")
        return store.update(reading.temperature_c, reading.humidity_pct, reading.pressure_hpa)

    def __repr__(self) -> str:
        return f"SyntheticSource({self.name})"


def select_source(name: str, rng: Optional[random.Random] = None) -> SyntheticSource:
    """
    Pick a data source by name.

    Args:
        name: "remote"/"api" or "local"/"sensor", case-insensitive
        rng: Optional random generator, mainly for tests

    Raises:
        InvalidArgumentError: for any other name
    """
    kind = SOURCE_ALIASES.get(str(name).strip().lower())
    if kind is None:
        raise InvalidArgumentError(f"Unknown data source: {name!r}. Choose 'remote' or 'local'.")
    return SyntheticSource(kind, rng=rng)
