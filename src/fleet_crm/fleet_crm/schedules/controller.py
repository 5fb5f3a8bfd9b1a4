from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
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

    @app.route("/admin/distribution/schedules", methods=["GET", "POST"], endpoint="admin_distribution_schedules")
    @admin_required
    def admin_distribution_schedules():
        if request.method == "POST":
            data = request.get_json(silent=True) or {}
            try:
                entry = container.schedule_service.create_hour_schedule(
                    current_role=Role(session.get("role")),
                    hour_start=data.get("hour_start"),
                    hour_end=data.get("hour_end"),
                    task_id=data.get("task_id"),
                    client_id=data.get("client_id"),
                    assigned_to=data.get("assigned_to") or "",
                    created_by=str(session["user_id"]),
                    is_recurring=bool(data.get("is_recurring", True)),
                )
            except AuthorizationError as e:
                return jsonify({"success": False, "message": str(e)}), 403
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Creating schedule failed")
                return jsonify({"success": False, "message": "System error while creating schedule"}), 500

            return jsonify({"success": True, "message": "Schedule created", "id": entry.schedule_id}), 201

        try:
            schedules = container.schedule_service.get_all_schedules()
        except Exception:
            logger.exception("Listing schedules failed")
            return jsonify({"success": False, "message": "System error while loading schedules"}), 500
        return jsonify({"success": True, "schedules": list(schedules)})

    @app.route(
        "/admin/distribution/schedules/<schedule_id>/delete",
        methods=["POST"],
        endpoint="admin_distribution_schedules_delete",
    )
    @admin_required
    def admin_distribution_schedules_delete(schedule_id: str):
        try:
            container.schedule_service.delete_schedule(current_role=Role(session.get("role")), schedule_id=schedule_id)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Deleting schedule %s failed", schedule_id)
            return jsonify({"success": False, "message": "System error while deleting schedule"}), 500

        return jsonify({"success": True, "message": "Schedule deleted"})
