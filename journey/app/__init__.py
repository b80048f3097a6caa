"""Application factory and app-wide configuration."""

from typing import Optional

import structlog
from flask import Flask
from flask_cors import CORS

from journey.app.api.routes import api_bp
from journey.config import Settings, get_settings
from journey.log import configure_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json=settings.log_json)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info(
        "app_created",
        target_amount=settings.target_amount_usd,
        target_date=settings.target_date.isoformat(),
        default_growth_rate=settings.default_growth_rate,
    )
    return app
