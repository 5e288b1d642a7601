"""Flask entry point for the SIP projection service."""

import logging
from typing import Optional, Union

from flask import Flask
from flask_cors import CORS

from sip_projection.app.api.routes import api_bp
from sip_projection.config import Config


def create_app(config_object: Optional[Union[str, type]] = None) -> Flask:
    """Create the projection API with config, logging and CORS applied."""
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.from_prefixed_env("SIP_PROJECTION")

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
