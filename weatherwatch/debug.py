# ABOUTME: Debug output helper gated by the DEBUG env var
# ABOUTME: Prints trace lines to stdout only when debug mode is on

from weatherwatch.config import Config


def debug_log(message: str) -> None:
    """Print a debug line when Config.DEBUG is enabled."""
    if Config.DEBUG:
        print(f"[DEBUG] {message}")
