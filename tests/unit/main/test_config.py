from __future__ import annotations

import pytest
from pydantic import ValidationError

from power_terminal.domain.entities.styles import DisplayMode
from power_terminal.main.config import AppSettings, DisplaySettings, get_settings
from power_terminal.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults() -> None:
    settings = get_settings()

    assert settings.home_assistant.url == "http://homeassistant.local:8123"
    assert settings.home_assistant.token == "test-token"
    assert settings.home_assistant.timeout == 10.0
    assert settings.entities.grid_power == "sensor.active_power"
    assert settings.entities.car_charger_switch == "switch.car_charger"
    assert (settings.display.width, settings.display.height) == (800, 480)
    assert settings.display.mode is DisplayMode.COLOR
    assert settings.display.timezone == "UTC"
    assert settings.chart.max_points == 288
    assert (settings.server.host, settings.server.port) == ("0.0.0.0", 3000)
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("HA_URL", "http://ha.lan:8123/")
    monkeypatch.setenv("HA_ENTITY_PV_POWER", "sensor.solar")
    monkeypatch.setenv("DISPLAY_MODE", "monochrome")
    monkeypatch.setenv("DISPLAY_WIDTH", "1024")
    monkeypatch.setenv("TZ", "Europe/Berlin")
    monkeypatch.setenv("CHART_MAX_POINTS", "144")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.home_assistant.url == "http://ha.lan:8123"
    assert settings.entities.pv_power == "sensor.solar"
    assert settings.display.mode is DisplayMode.MONOCHROME
    assert settings.display.width == 1024
    assert settings.display.timezone == "Europe/Berlin"
    assert settings.chart.max_points == 144
    assert settings.logging.level.value == "DEBUG"


def test_display_timezone_wins_over_tz(monkeypatch) -> None:
    monkeypatch.setenv("TZ", "Europe/Berlin")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "America/New_York")

    assert DisplaySettings().timezone == "America/New_York"


def test_token_file_is_resolved(monkeypatch, tmp_path) -> None:
    token_file = tmp_path / "token"
    token_file.write_text("from-file\n", encoding="utf-8")
    monkeypatch.delenv("HA_TOKEN", raising=False)
    monkeypatch.setenv("HA_TOKEN_FILE", str(token_file))

    assert get_settings().home_assistant.token == "from-file"


def test_missing_url_is_rejected(monkeypatch) -> None:
    monkeypatch.delenv("HA_URL", raising=False)

    with pytest.raises(ValidationError):
        AppSettings()


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("DISPLAY_WIDTH", "120"),
        ("DISPLAY_MODE", "sepia"),
        ("DISPLAY_TIMEZONE", "Mars/Olympus_Mons"),
        ("CHART_MAX_POINTS", "0"),
    ],
)
def test_invalid_display_values_are_rejected(monkeypatch, key, value) -> None:
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        AppSettings()
