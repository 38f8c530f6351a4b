"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (vehicles) read config consistently.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.vehicle_kind import VehicleKind


class AppSettings(BaseSettings):
    """Central application configuration.

    Every field can be overridden with a `DELEGATE_PLAYGROUND_<FIELD>` env var
    or a line in `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DELEGATE_PLAYGROUND_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    default_owner_name: str = Field(
        default="Janet",
        min_length=1,
        description="Name given to the person when none is passed on the CLI.",
    )
    car_sound: str = Field(
        default="vroom vroom",
        min_length=1,
        description="Line printed by `Car.start_car`.",
    )
    default_vehicle: VehicleKind = Field(
        default=VehicleKind.default(),
        description="Vehicle built when none is passed on the CLI.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before the demo.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
