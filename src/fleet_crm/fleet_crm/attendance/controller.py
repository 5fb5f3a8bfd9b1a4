from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Please sign in first"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/attendance/sign-in", methods=["POST"], endpoint="attendance_sign_in")
    @login_required
    def attendance_sign_in():
        data = request.get_json(silent=True) or {}
        try:
            result = container.attendance_service.sign_in(
                str(session["user_id"]),
                scheduled_time=data.get("scheduled_time") or session.get("shift_start"),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Sign-in failed")
            return jsonify({"success": False, "message": "System error while signing in"}), 500

        late = result.late_minutes
        return jsonify(
            {
                "success": True,
                "message": f"Late by {late} minutes" if late > 0 else "On time",
                "status": result.record.status.value,
                "late_by_minutes": late,
                "sign_in_time": result.record.sign_in_time.isoformat(),
            }
        )

    @app.route("/attendance/sign-out", methods=["POST"], endpoint="attendance_sign_out")
    @login_required
    def attendance_sign_out():
        try:
            record = container.attendance_service.sign_out(str(session["user_id"]))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Sign-out failed")
            return jsonify({"success": False, "message": "System error while signing out"}), 500

        return jsonify({"success": True, "message": "Signed out", "sign_out_time": record.sign_out_time.isoformat()})

    @app.route("/attendance/status", methods=["GET"], endpoint="attendance_status")
    @login_required
    def attendance_status():
        status = container.attendance_service.get_sign_in_status(str(session["user_id"]))
        if status is None:
            return jsonify({"success": True, "is_signed_in": False, "signed_in_today": False})

        return jsonify(
            {
                "success": True,
                "is_signed_in": status.is_signed_in,
                "signed_in_today": True,
                "is_late": status.is_late,
                "late_by_minutes": status.late_by_minutes,
                "sign_in_time": status.sign_in_time.isoformat() if status.sign_in_time else None,
                "sign_out_time": status.sign_out_time.isoformat() if status.sign_out_time else None,
            }
        )

    @app.route("/attendance/my-assignments", methods=["GET"], endpoint="attendance_my_assignments")
    @login_required
    def attendance_my_assignments():
        rows = container.summary_reporter.get_my_assignments(str(session["user_id"]))
        return jsonify(
            {
                "success": True,
                "tasks": [
                    {"task_id": r.entity_id, "hour_slot": r.hour_slot, "temporary": r.is_temporary}
                    for r in rows["tasks"]
                ],
                "clients": [
                    {"client_id": r.entity_id, "hour_slot": r.hour_slot, "temporary": r.is_temporary}
                    for r in rows["clients"]
                ],
            }
        )
