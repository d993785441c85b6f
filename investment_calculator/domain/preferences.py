"""Theme preferences held as an explicit object instead of ambient state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from investment_calculator.domain.storage import write_json_atomic
from investment_calculator.models import ThemeConfig, ThemeMode

logger = logging.getLogger(__name__)


class ThemePreferences:
    def __init__(self, path: Optional[Path] = None, default_mode: ThemeMode = "light"):
        self.path = Path(path) if path is not None else None
        self.default = ThemeConfig(mode=default_mode)
        self.theme = self.default

    def load(self) -> ThemeConfig:
        """Read saved preferences; anything missing or unreadable falls back to the default."""
        self.theme = self.default
        if self.path is None or not self.path.exists():
            return self.theme

        try:
            self.theme = ThemeConfig.model_validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.warning("ignoring unreadable theme file %s: %s", self.path, exc)
        return self.theme

    def save(self) -> None:
        if self.path is None:
            return
        write_json_atomic(self.path, self.theme.model_dump())

    def update_theme(
        self,
        mode: Optional[ThemeMode] = None,
        primary_color: Optional[str] = None,
        accent_color: Optional[str] = None,
    ) -> ThemeConfig:
        """Apply all given changes at once; nothing is saved if any of them is invalid."""
        changes = {}
        if mode is not None:
            changes["mode"] = mode
        if primary_color is not None:
            changes["primaryColor"] = primary_color
        if accent_color is not None:
            changes["accentColor"] = accent_color

        # round-trip through validation so bad colors are rejected
        self.theme = ThemeConfig.model_validate({**self.theme.model_dump(), **changes})
        self.save()
        return self.theme

    def toggle_theme(self) -> ThemeConfig:
        return self.update_theme(mode="light" if self.theme.mode == "dark" else "dark")

    def set_theme_mode(self, mode: ThemeMode) -> ThemeConfig:
        return self.update_theme(mode=mode)

    def update_theme_colors(
        self,
        primary_color: Optional[str] = None,
        accent_color: Optional[str] = None,
    ) -> ThemeConfig:
        return self.update_theme(primary_color=primary_color, accent_color=accent_color)
