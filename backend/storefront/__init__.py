from __future__ import annotations

from collections.abc import Mapping

from flask import Flask, jsonify

from storefront.config import Config, is_production
from storefront.errors import register_error_handlers
from storefront.extensions import cors
from storefront.segments_loader import register_all_segment_blueprints
from storefront.utils.template_helpers import register_template_helpers


def create_app(config: Mapping | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    env = (app.config.get("ENV") or "dev").strip().lower()
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Production safety checks
    if is_production(env):
        secret = (app.config.get("SECRET_KEY") or "").strip()
        if len(secret) < 16 or secret == "dev-secret":
            raise RuntimeError("SECRET_KEY must be set and at least 16 chars in production")

    # Keep "₦" readable in JSON bodies
    app.json.ensure_ascii = False

    # CORS configuration
    origins = list(app.config.get("CORS_ORIGINS") or [])
    if not origins and not is_production(env):
        origins = ["*"]
    cors.init_app(app, resources={r"/api/*": {"origins": origins}})

    register_error_handlers(app)
    register_template_helpers(app)
    register_all_segment_blueprints(app)

    @app.get("/api/health")
    def health():
        return jsonify({"ok": True, "service": "storefront-backend", "env": env})

    app.logger.info("storefront app created (env=%s)", env)
    return app
