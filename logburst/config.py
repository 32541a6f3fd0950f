"""
logburst/config.py

Scan configuration via Pydantic Settings.
All values can be overridden with LOGBURST_-prefixed environment variables
or a .env file; command-line flags override both.

Quick start: create a .env file in your working directory:
    LOGBURST_LOG_PATTERN=/var/log/nginx/access.log*
    LOGBURST_MATCH=wp-login.php
    LOGBURST_STATUS=200
    LOGBURST_PERIOD=5m
"""

from __future__ import annotations

from datetime import timedelta
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .durations import check_period, parse_duration


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOGBURST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input
    LOG_PATTERN: str = "/var/log/nginx/access.log"

    # Line filter: empty STATUS disables the status check
    MATCH: str = "wp-admin"
    STATUS: str = "200"

    # Aggregation
    PERIOD: timedelta = timedelta(minutes=10)
    LIMIT: int = 10

    # Output
    OUTPUT_FORMAT: Literal["table", "json"] = "table"

    # Logging
    LOG_LEVEL: str = "WARNING"

    @field_validator("PERIOD", mode="before")
    @classmethod
    def parse_period(cls, v):
        if isinstance(v, str):
            return parse_duration(v)
        return v

    @field_validator("PERIOD")
    @classmethod
    def period_in_range(cls, v: timedelta) -> timedelta:
        return check_period(v)

    @field_validator("STATUS", mode="before")
    @classmethod
    def strip_status(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.upper()
