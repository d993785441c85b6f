"""Per-application state shared by the API routes."""

from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from investment_calculator.config import Settings
from investment_calculator.core.formatting import CurrencyFormatter
from investment_calculator.domain.preferences import ThemePreferences
from investment_calculator.domain.scenarios import ScenarioStore

EXTENSION_KEY = "investment_calculator"


@dataclass
class AppState:
    settings: Settings
    formatter: CurrencyFormatter
    scenarios: ScenarioStore
    theme: ThemePreferences


def get_state() -> AppState:
    return current_app.extensions[EXTENSION_KEY]
