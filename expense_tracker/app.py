# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from expense_tracker.container import Container, container
from expense_tracker.infrastructure.db import init_db
from expense_tracker.shared.config import load_config
from expense_tracker.shared.logging import logger, setup_logging
from expense_tracker.shared.middleware.error_handler import configure_error_handling
from expense_tracker.shared.middleware.request_logger import configure_request_logging


def create_app(deps: Container | None = None) -> Flask:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)
    init_db()

    deps = deps or container

    app = Flask(__name__)
    app.json.sort_keys = False
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Authorization", "Content-Type"],
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(deps.misc_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())
    app.register_blueprint(deps.expenses_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def main() -> None:
    create_app().run(host="0.0.0.0", port=8080)


if __name__ == "__main__":
    main()
