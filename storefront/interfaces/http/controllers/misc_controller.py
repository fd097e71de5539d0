# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from storefront.infrastructure.health import check_tables
from storefront.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            tables = check_tables()
        except SQLAlchemyError as exc:
            logger.error(f"health: database connection failed: {type(exc).__name__}")
            return jsonify({"ok": False, "database": "unreachable"}), 503

        ok = all(state == "ok" for state in tables.values())
        status = {"ok": ok, "database": "ok" if ok else "degraded", "tables": tables}
        return jsonify(status), 200 if ok else 503
