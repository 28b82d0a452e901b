# ABOUTME: Measurement store holding the latest reading and its derived condition
# ABOUTME: Notifies registered listeners synchronously, in registration order, on every update

import logging
import math
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from weatherwatch.errors import InvalidArgumentError
from weatherwatch.weather.condition import classify
from weatherwatch.weather.conversion import to_celsius
from weatherwatch.weather.models import Condition, Measurement, Scale

log = logging.getLogger(__name__)

# Listener signature: (measurement, condition) -> optional warning text
Listener = Callable[[Measurement, Condition], Optional[str]]


@dataclass(frozen=True)
class _Snapshot:
    measurement: Measurement
    condition: Condition


class AlertListener:
    """
    Temperature alert that warns whenever a reading drops below its threshold.

    The threshold is converted to Celsius once, at creation, so changing the
    display scale later never moves it. Warnings repeat on every low reading.
    """

    def __init__(self, threshold, unit=Scale.CELSIUS):
        self.unit = Scale.parse(unit)
        try:
            self.threshold = float(threshold)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Threshold must be a number, got {threshold!r}")
        if not math.isfinite(self.threshold):
            raise InvalidArgumentError(f"Threshold must be a finite number, got {threshold!r}")
        self.threshold_c = to_celsius(self.threshold, self.unit)

    def check(self, measurement: Measurement) -> Optional[str]:
        """
        Compare a measurement against the threshold.

        Returns:
            Warning text if the temperature is below the threshold, else None
        """
        if measurement.temperature_c < self.threshold_c:
            return f"Temperature below {round(self.threshold, 2)}{self.unit.suffix}. Warning!"
        return None

    def __call__(self, measurement: Measurement, condition: Condition) -> Optional[str]:
        return self.check(measurement)

    def __repr__(self) -> str:
        return f"AlertListener(threshold={self.threshold}{self.unit.suffix}, threshold_c={self.threshold_c:.2f})"


class MeasurementStore:
    """Latest measurement plus condition, with change notification"""

    def __init__(self):
        self._snapshot: Optional[_Snapshot] = None
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    # ==================== Updates ====================

    def update(self, temperature_c: float, humidity_pct: float, pressure_hpa: float) -> list[str]:
        """
        Store a new reading and notify every listener.

        Measurement and condition are swapped in together, so no reader sees
        one without the other.

        Args:
            temperature_c: Temperature in Celsius
            humidity_pct: Relative humidity in percent
            pressure_hpa: Pressure in hectopascals

        Returns:
            Warning messages emitted by listeners during this update
        """
        measurement = Measurement(
            temperature_c=float(temperature_c),
            humidity_pct=float(humidity_pct),
            pressure_hpa=float(pressure_hpa),
        )

        with self._lock:
            snapshot = _Snapshot(measurement=measurement, condition=classify(measurement.temperature_c))
            self._snapshot = snapshot
            log.debug(f"Stored {measurement} -> {snapshot.condition.name}")
            return self._notify(snapshot)

    def _notify(self, snapshot: _Snapshot) -> list[str]:
        # Listeners added during this pass wait for the next update
        warnings = []
        for listener in tuple(self._listeners):
            try:
                message = listener(snapshot.measurement, snapshot.condition)
            except Exception:
                log.exception(f"Listener {listener!r} failed, continuing with the rest")
                continue
            if message:
                log.info(message)
                warnings.append(message)
        return warnings

    # ==================== Listeners ====================

    def subscribe(self, callback: Listener) -> Listener:
        """Append a listener callable, called after every update."""
        with self._lock:
            self._listeners.append(callback)
        return callback

    def register_listener(self, threshold, unit=Scale.CELSIUS) -> AlertListener:
        """
        Register a low-temperature alert.

        Args:
            threshold: Threshold value expressed in `unit`
            unit: Scale member or scale name the threshold is given in

        Returns:
            The registered AlertListener

        Raises:
            InvalidArgumentError: if the unit or threshold is invalid
        """
        listener = AlertListener(threshold, unit)
        self.subscribe(listener)
        log.info(f"Registered {listener!r}")
        return listener

    @property
    def listeners(self) -> tuple:
        return tuple(self._listeners)

    # ==================== Reads ====================

    @property
    def has_data(self) -> bool:
        return self._snapshot is not None

    def current_measurement(self) -> Optional[Measurement]:
        snapshot = self._snapshot
        return snapshot.measurement if snapshot else None

    def current_condition(self) -> Optional[Condition]:
        snapshot = self._snapshot
        return snapshot.condition if snapshot else None

    def check_alerts(self) -> list[str]:
        """
        Run every alert listener once against the current reading.

        Nothing is stored and other subscribers are not called.

        Returns:
            Warning messages, empty when there is no reading yet
        """
        snapshot = self._snapshot
        if snapshot is None:
            return []
        warnings = []
        for listener in self.listeners:
            if isinstance(listener, AlertListener):
                message = listener.check(snapshot.measurement)
                if message:
                    warnings.append(message)
        return warnings
