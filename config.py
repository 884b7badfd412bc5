"""
Dashboard settings loaded from AMBIENT_DASHBOARD_* environment variables or
a local .env file.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from model import TemperatureUnit
from state import ChartStyle


class Settings(BaseSettings):
    seed: Optional[int] = Field(
        default=None, description="Seed for the random source; unset means nondeterministic"
    )
    default_hour: int = Field(default=12, ge=0, le=23, description="Hour selected at startup")
    default_unit: TemperatureUnit = Field(default=TemperatureUnit.CELSIUS)
    default_chart_style: ChartStyle = Field(default=ChartStyle.LINEAR)
    dark_mode: bool = Field(default=False, description="Start with the dark theme")
    chart_height: int = Field(default=400, ge=200, le=1200, description="Chart height in pixels")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="AMBIENT_DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {sorted(valid)}")
        return upper
