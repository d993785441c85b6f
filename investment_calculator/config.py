"""Environment-driven settings for the API process."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from investment_calculator.models import ThemeMode

ENV_PREFIX = "INVESTCALC_"

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    data_dir: Optional[Path] = None
    locale: str = "en_US"
    currency: str = "USD"
    theme_mode: ThemeMode = "light"
    cors_origins: List[str] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def scenarios_path(self) -> Optional[Path]:
        return self.data_dir / "scenarios.json" if self.data_dir else None

    @property
    def theme_path(self) -> Optional[Path]:
        return self.data_dir / "theme.json" if self.data_dir else None


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """
    Read INVESTCALC_* values from a .env file and the process environment.

    Real environment variables win over the file; os.environ is never modified.
    """
    env = {**dotenv_values(env_file or find_dotenv(usecwd=True)), **os.environ}

    raw = {}
    for field in ("data_dir", "locale", "currency", "theme_mode", "log_level"):
        value = env.get(ENV_PREFIX + field.upper())
        if value:
            raw[field] = value

    origins = env.get(ENV_PREFIX + "CORS_ORIGINS")
    if origins:
        raw["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings.model_validate(raw)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
