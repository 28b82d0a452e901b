# ABOUTME: Application configuration for the weather monitoring session
# ABOUTME: Default source, display scale, logging level and synthetic data ranges

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Data source used until the user picks another one ("remote" or "local")
    DEFAULT_SOURCE = os.getenv("WEATHER_SOURCE", "remote")

    # Display scale is not validated here, the presenter falls back at render time
    DEFAULT_SCALE = os.getenv("WEATHER_SCALE", "Celsius")

    # Synthetic reading ranges, lower bound inclusive, upper bound exclusive
    TEMPERATURE_RANGE_C = (-10.0, 40.0)
    HUMIDITY_RANGE_PCT = (50.0, 100.0)
    PRESSURE_RANGE_HPA = (1013.0, 1023.0)

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
