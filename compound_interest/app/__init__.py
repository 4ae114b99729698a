"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from compound_interest.app.api.routes import api_bp
from compound_interest.core.config import Settings, get_settings
from compound_interest.core.history import HistoryStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.extensions["history_store"] = HistoryStore(
        max_items=settings.history_max_items,
        path=settings.history_path,
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("%s ready (history cap %d)", settings.app_name, settings.history_max_items)
    return app
