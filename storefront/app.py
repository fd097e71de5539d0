# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys

from flask import Flask
from flask_cors import CORS

from storefront.infrastructure.container import container
from storefront.infrastructure.db import init_db
from storefront.interfaces.http.controllers.misc_controller import MiscController
from storefront.shared.config import load_config
from storefront.shared.errors import register_error_handler
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.request_logger import configure_request_logging


_config = load_config()


def create_app() -> Flask:
    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    app = Flask(__name__)
    register_error_handler(app)
    configure_request_logging(app)

    app.json.sort_keys = False

    CORS(app, resources={r"/*": {"origins": _config.security.allowed_origins}})
    app.register_blueprint(MiscController().as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.product_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={_config.app_env})")
    return app


def main() -> None:
    try:
        app = create_app()
    except Exception:
        logger.exception("Failed to start server: database unavailable or misconfigured")
        sys.exit(1)

    logger.info(f"Server is running on port {_config.port}")
    app.run(host=_config.host, port=_config.port)


if __name__ == "__main__":
    main()
