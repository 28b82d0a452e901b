# ABOUTME: Tests for application configuration
# ABOUTME: Validates defaults, env overrides and synthetic data ranges

import os
from importlib import reload
from unittest.mock import patch

from weatherwatch.config import Config


def _reload_config(env: dict):
    """Reload config under `env`, without letting a local .env leak in"""
    import dotenv
    import weatherwatch.config
    with patch.object(dotenv, "load_dotenv", lambda *args, **kwargs: None), \
         patch.dict(os.environ, env, clear=True):
        reload(weatherwatch.config)
    return weatherwatch.config.Config


def test_config_has_synthetic_ranges():
    """Both sources share the same bounded ranges"""
    assert Config.TEMPERATURE_RANGE_C == (-10.0, 40.0)
    assert Config.HUMIDITY_RANGE_PCT == (50.0, 100.0)
    assert Config.PRESSURE_RANGE_HPA == (1013.0, 1023.0)


class TestEnvironmentConfig:
    """Tests for settings read from the environment"""

    def test_defaults(self):
        config = _reload_config({})

        assert config.DEFAULT_SOURCE == "remote"
        assert config.DEFAULT_SCALE == "Celsius"
        assert config.LOG_LEVEL == "WARNING"
        assert config.DEBUG is False

    def test_source_and_scale_from_environment(self):
        config = _reload_config({"WEATHER_SOURCE": "local", "WEATHER_SCALE": "Kelvin"})

        assert config.DEFAULT_SOURCE == "local"
        assert config.DEFAULT_SCALE == "Kelvin"

    def test_log_level_is_uppercased(self):
        config = _reload_config({"LOG_LEVEL": "debug"})

        assert config.LOG_LEVEL == "DEBUG"

    def test_scale_is_not_validated(self):
        """Invalid display scales are kept and only caught when rendering"""
        config = _reload_config({"WEATHER_SCALE": "Unknown"})

        assert config.DEFAULT_SCALE == "Unknown"
