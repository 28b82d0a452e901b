# ABOUTME: Session orchestrator coordinating source, store, alerts and presentation
# ABOUTME: Holds the session-wide display scale and the currently selected data source

import logging
import math
import random
import re
from typing import Optional

from weatherwatch.config import Config
from weatherwatch.debug import debug_log
from weatherwatch.errors import InvalidArgumentError
from weatherwatch.presenter import render, render_condition
from weatherwatch.weather.models import Scale
from weatherwatch.weather.sources import SyntheticSource, select_source
from weatherwatch.weather.store import AlertListener, MeasurementStore

log = logging.getLogger(__name__)

# "7,5" style decimal comma; exactly three digits after it could be a thousands separator
DECIMAL_COMMA = re.compile(r"^([+-]?\d+),(\d{1,2}|\d{4,})$")


def parse_threshold(raw_value) -> float:
    """
    Parse a threshold typed by the user.

    A single comma is read as a decimal point ("7,5" -> 7.5). Other comma
    usage, like "1,000" or "1,000.5", is ambiguous and rejected.

    Raises:
        InvalidArgumentError: if the text isn't a finite number
    """
    text = str(raw_value).strip()
    if "," in text:
        match = DECIMAL_COMMA.match(text)
        if match is None:
            raise InvalidArgumentError(f"Ambiguous threshold {raw_value!r}, use '.' as the decimal point")
        text = f"{match.group(1)}.{match.group(2)}"

    try:
        threshold = float(text)
    except ValueError:
        raise InvalidArgumentError(f"Threshold must be a number, got {raw_value!r}")

    if not math.isfinite(threshold):
        raise InvalidArgumentError(f"Threshold must be a finite number, got {raw_value!r}")
    return threshold


class WeatherSession:
    """Orchestrates one monitoring session from data collection to display"""

    def __init__(
        self,
        source_name: Optional[str] = None,
        display_scale: Optional[str] = None,
        rng: Optional[random.Random] = None
    ):
        self.rng = rng
        self.store = MeasurementStore()
        self.source: SyntheticSource = select_source(source_name or Config.DEFAULT_SOURCE, rng=rng)
        # Stored as given; an invalid name only surfaces when rendering
        self.display_scale: str = display_scale or Config.DEFAULT_SCALE

    # ==================== Data collection ====================

    def select_source(self, name: str) -> SyntheticSource:
        """
        Switch the active data source.

        Raises:
            InvalidArgumentError: on an unknown name, leaving the current source in place
        """
        self.source = select_source(name, rng=self.rng)
        debug_log(f"Source switched to {self.source.name}")
        return self.source

    def collect(self, source_name: Optional[str] = None) -> list[str]:
        """
        Collect one reading, optionally switching source first.

        Returns:
            Alert warnings fired by this reading
        """
        if source_name is not None:
            self.select_source(source_name)

        warnings = self.source.collect(self.store)
        debug_log(f"Collected {self.store.current_measurement()} with {len(warnings)} warning(s)")
        return warnings

    # ==================== Settings ====================

    def set_threshold(self, raw_value, unit=None) -> AlertListener:
        """
        Register a new alert threshold.

        Args:
            raw_value: Threshold as typed by the user (str or number)
            unit: Scale of the threshold; defaults to the display scale when it
                  is a valid scale, else Celsius

        Raises:
            InvalidArgumentError: if the value isn't numeric or the unit is unknown
        """
        threshold = parse_threshold(raw_value)

        if unit is None:
            unit = self.threshold_unit()

        listener = self.store.register_listener(threshold, unit)
        debug_log(f"Threshold set: {listener!r}")
        return listener

    def set_display_scale(self, name: str) -> None:
        """Set the session display scale without validating it."""
        self.display_scale = name
        debug_log(f"Display scale set to {name!r}")

    def threshold_unit(self) -> Scale:
        try:
            return Scale.parse(self.display_scale)
        except InvalidArgumentError:
            return Scale.CELSIUS

    # ==================== Display ====================

    def report(self) -> str:
        return render(self.store, self.display_scale)

    def condition_report(self) -> str:
        return render_condition(self.store)

    def check_alerts(self) -> list[str]:
        """Re-check every alert threshold against the latest reading."""
        return self.store.check_alerts()
