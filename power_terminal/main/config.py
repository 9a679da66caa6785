"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from power_terminal.domain.entities.styles import DisplayMode
from power_terminal.domain.services.downsampler import DEFAULT_MAX_POINTS
from power_terminal.shared import EnumEnvironment, EnumLogLevel
from power_terminal.shared.env import load_secret_file_variables


class HomeAssistantSettings(BaseSettings):
    """Home Assistant connection settings."""

    url: str = Field(
        min_length=1, description="Base URL of Home Assistant, e.g. http://ha:8123"
    )
    token: str = Field(min_length=1, description="Long-lived access token")
    timeout: float = Field(
        default=10.0, gt=0, description="Request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="HA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class EntitySettings(BaseSettings):
    """Home Assistant entity ids for every tracked quantity."""

    pv_power: str = Field(default="sensor.pv_power", description="Solar power (W)")
    battery_soc: str = Field(
        default="sensor.battery_state_of_charge",
        description="Battery state of charge (%)",
    )
    grid_power: str = Field(
        default="sensor.active_power",
        description="Grid power (W), negative while exporting",
    )
    house_consumption: str = Field(
        default="sensor.house_consumption", description="House consumption (W)"
    )
    car_charger_power: str = Field(
        default="sensor.car_charger_power", description="Car charger power (W)"
    )
    car_charger_switch: str = Field(
        default="switch.car_charger", description="Car charger on/off switch"
    )

    model_config = SettingsConfigDict(
        env_prefix="HA_ENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class DisplaySettings(BaseSettings):
    """Display geometry, colour mode and timezone."""

    width: int = Field(default=800, ge=200, description="Display width in pixels")
    height: int = Field(default=480, ge=200, description="Display height in pixels")
    mode: DisplayMode = Field(
        default=DisplayMode.COLOR, description="color, grayscale or monochrome"
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used for clock and axis labels",
        validation_alias=AliasChoices("DISPLAY_TIMEZONE", "TZ"),
    )

    model_config = SettingsConfigDict(
        env_prefix="DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value


class ChartSettings(BaseSettings):
    """Chart rendering settings."""

    max_points: int = Field(
        default=DEFAULT_MAX_POINTS,
        ge=1,
        description="Maximum points per series after downsampling",
    )

    model_config = SettingsConfigDict(
        env_prefix="CHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class ServerSettings(BaseSettings):
    """HTTP server settings."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    home_assistant: HomeAssistantSettings = Field(
        default_factory=HomeAssistantSettings
    )
    entities: EntitySettings = Field(default_factory=EntitySettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    chart: ChartSettings = Field(default_factory=ChartSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    ``KEY_FILE`` secrets are resolved into the environment first so that
    ``HA_TOKEN_FILE`` can stand in for ``HA_TOKEN``.
    """
    load_secret_file_variables()
    return AppSettings()
