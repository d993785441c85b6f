"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investment_calculator.app.api.routes import api_bp
from investment_calculator.app.state import EXTENSION_KEY, AppState
from investment_calculator.config import Settings, load_settings
from investment_calculator.core.formatting import CurrencyFormatter
from investment_calculator.domain.preferences import ThemePreferences
from investment_calculator.domain.scenarios import ScenarioStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance and load persisted state once."""
    settings = settings or load_settings()

    app = Flask(__name__)
    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    theme = ThemePreferences(settings.theme_path, default_mode=settings.theme_mode)
    theme.load()
    app.extensions[EXTENSION_KEY] = AppState(
        settings=settings,
        formatter=CurrencyFormatter(settings.locale, settings.currency),
        scenarios=ScenarioStore(settings.scenarios_path).load(),
        theme=theme,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(
        "investment calculator API ready (locale=%s, currency=%s, data_dir=%s)",
        settings.locale,
        settings.currency,
        settings.data_dir or "<memory>",
    )
    return app
