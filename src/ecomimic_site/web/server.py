from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Flask, jsonify, request
from flask_cors import CORS

from ecomimic_site.core.config import SiteConfig
from ecomimic_site.utils.log import log_event

TOKEN_ROUTE = "/api/get-coze-token"
STATIC_URL_PATH = "/site"


def default_static_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "static"


def token_blueprint(config: SiteConfig) -> Blueprint:
    """Read-only endpoint handing the configured assistant token to the page."""
    bp = Blueprint("token_api", __name__)
    api_key = config.api_key

    @bp.get(TOKEN_ROUTE)
    def get_coze_token():
        log_event("token", f"served token to {request.remote_addr or 'unknown'}", config.log_path)
        return jsonify(token=api_key)

    return bp


def create_server(config: SiteConfig) -> Flask:
    """Build the Flask server that the Dash page is mounted on.

    Files under the document root are served at ``/site/<path>``; anything
    missing there is a plain 404.
    """
    static_dir = config.static_dir or default_static_dir()
    server = Flask(
        __name__,
        static_folder=str(static_dir),
        static_url_path=STATIC_URL_PATH,
    )
    CORS(server, resources={r"/api/*": {"origins": config.cors_resource}})
    server.register_blueprint(token_blueprint(config))
    return server
