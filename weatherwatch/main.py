# ABOUTME: Interactive command-line menu for the weather monitoring session
# ABOUTME: Collects synthetic readings, sets alert thresholds and displays data in the chosen scale

import argparse
import logging
from typing import Callable, Optional

from weatherwatch.config import Config
from weatherwatch.errors import InvalidArgumentError
from weatherwatch.orchestrator import WeatherSession

log = logging.getLogger(__name__)

BANNER = "Weather monitoring and alert system"
QUIT_HINT = "Enter 'q' to quit."
MENU = """<==================== Welcome ====================>
Menu:
1. Get weather data
2. Set temperature alert threshold
3. Change data source (remote/local)
4. Display weather data
5. Display weather condition
6. Set display temperature scale"""
CHOICE_PROMPT = "Choose an action: "
SOURCE_PROMPT = "Choose data source (remote/local): "
SCALE_PROMPT = "Choose temperature scale (Celsius/Fahrenheit/Kelvin): "
INVALID_CHOICE = "Invalid choice. Please pick a menu item."


class WeatherCLI:
    """Menu loop reading from `input_fn` and writing to `output_fn`"""

    def __init__(
        self,
        session: WeatherSession,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.session = session
        self.input = input_fn
        self.output = output_fn
        self.actions = {
            "1": self.collect,
            "2": self.set_threshold,
            "3": self.change_source,
            "4": self.show_data,
            "5": self.show_condition,
            "6": self.set_scale,
        }

    def run(self) -> None:
        self.output(BANNER)
        self.output(QUIT_HINT)

        while True:
            self.output(MENU)
            try:
                choice = self.input(CHOICE_PROMPT).strip()
            except EOFError:
                break

            if choice.lower() == "q":
                break

            action = self.actions.get(choice)
            if action is None:
                self.output(INVALID_CHOICE)
                continue

            try:
                action()
            except InvalidArgumentError as e:
                log.info(f"Rejected input: {e}")
                self.output(f"Invalid input: {e}")

    # ==================== Menu actions ====================

    def _print_warnings(self, warnings: list[str]) -> None:
        for warning in warnings:
            self.output(warning)

    def collect(self) -> None:
        name = self.input(SOURCE_PROMPT)
        self._print_warnings(self.session.collect(source_name=name))

    def change_source(self) -> None:
        # Switching source also takes a fresh reading
        self.collect()

    def set_threshold(self) -> None:
        unit = self.session.threshold_unit()
        raw = self.input(f"Enter new temperature threshold ({unit.suffix}): ")
        listener = self.session.set_threshold(raw, unit)
        self.output(f"Alert set below {round(listener.threshold, 2)}{listener.unit.suffix}.")

    def show_data(self) -> None:
        self.output("Latest weather data:")
        self.output(self.session.report())

    def show_condition(self) -> None:
        self.output(self.session.condition_report())

    def set_scale(self) -> None:
        name = self.input(SCALE_PROMPT).strip()
        self.session.set_display_scale(name)
        self.output(f"Display scale set to {name}.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Synthetic weather monitoring and alerts")
    parser.add_argument("--source", "-s", default=Config.DEFAULT_SOURCE,
                        help="Initial data source: remote or local")
    parser.add_argument("--scale", default=Config.DEFAULT_SCALE,
                        help="Display temperature scale: Celsius, Fahrenheit or Kelvin")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        Config.DEBUG = True
    level = logging.DEBUG if args.debug else getattr(logging, Config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        session = WeatherSession(source_name=args.source, display_scale=args.scale)
    except InvalidArgumentError as e:
        print(f"Invalid input: {e}")
        return 2

    WeatherCLI(session).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
