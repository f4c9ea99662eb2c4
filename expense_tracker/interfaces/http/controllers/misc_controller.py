# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from expense_tracker.infrastructure.health import check_database
from expense_tracker.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            status["database"] = check_database()
        except Exception as exc:
            logger.exception("health: database check failed")
            status["ok"] = False
            status["database"] = {"ok": False, "error": type(exc).__name__}
        return jsonify(status), 200 if status["ok"] else 503
