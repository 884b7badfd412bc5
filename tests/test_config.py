import logging

import pytest
from pydantic import ValidationError

from config import Settings
from model import TemperatureUnit
from state import ChartStyle
from utils.logging import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    for name in ("SEED", "DEFAULT_HOUR", "DEFAULT_UNIT", "DEFAULT_CHART_STYLE", "DARK_MODE",
                 "CHART_HEIGHT", "LOG_LEVEL"):
        monkeypatch.delenv(f"AMBIENT_DASHBOARD_{name}", raising=False)


def test_defaults():
    settings = Settings()
    assert settings.seed is None
    assert settings.default_hour == 12
    assert settings.default_unit is TemperatureUnit.CELSIUS
    assert settings.default_chart_style is ChartStyle.LINEAR
    assert settings.dark_mode is False
    assert settings.chart_height == 400
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AMBIENT_DASHBOARD_SEED", "42")
    monkeypatch.setenv("AMBIENT_DASHBOARD_DEFAULT_UNIT", "fahrenheit")
    monkeypatch.setenv("AMBIENT_DASHBOARD_DEFAULT_CHART_STYLE", "curved")
    monkeypatch.setenv("AMBIENT_DASHBOARD_DARK_MODE", "true")
    monkeypatch.setenv("AMBIENT_DASHBOARD_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.seed == 42
    assert settings.default_unit is TemperatureUnit.FAHRENHEIT
    assert settings.default_chart_style is ChartStyle.CURVED
    assert settings.dark_mode is True
    assert settings.log_level == "DEBUG"


def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("AMBIENT_DASHBOARD_DEFAULT_HOUR=6\n", encoding="utf-8")
    assert Settings().default_hour == 6


@pytest.mark.parametrize(
    "field, value",
    [("default_hour", 24), ("chart_height", 50), ("log_level", "loud"), ("default_unit", "kelvin")],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_setup_logging_does_not_stack_handlers():
    setup_logging("INFO")
    logger = setup_logging("DEBUG")
    assert logger.name == LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    # Module loggers are children of the dashboard logger
    assert logging.getLogger("ambient_dashboard.model").parent is logger
