from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, session

from ..core.enums import Role
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Please sign in first"}), 401

            if session.get("role") != Role.ADMIN.value:
                return jsonify({"success": False, "message": "Admin access required"}), 403

            return view(*args, **kwargs)

        return wrapper

    @app.route("/admin/distribution/redistribute", methods=["POST"], endpoint="admin_distribution_redistribute")
    @admin_required
    def admin_distribution_redistribute():
        try:
            report = container.hourly_sweep.manual_redistribute()
        except Exception:
            logger.exception("Manual redistribution failed")
            return jsonify({"success": False, "message": "Redistribution failed"}), 500
        return jsonify(report.to_dict())

    @app.route("/admin/distribution/summary", methods=["GET"], endpoint="admin_distribution_summary")
    @admin_required
    def admin_distribution_summary():
        try:
            summary = container.summary_reporter.get_distribution_summary()
        except Exception:
            logger.exception("Building distribution summary failed")
            return jsonify({"success": False, "message": "System error while loading summary"}), 500
        return jsonify({"success": True, "summary": [s.to_dict() for s in summary]})
