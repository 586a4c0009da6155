from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import success
from ..container import Container
from ..core.enums import Capability
from ..security.guard import current_identity


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_history")
    @guard.required(Capability.ATTENDANCE)
    def attendance_history():
        records = container.attendance_service.history(current_identity().id)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @guard.required(Capability.ATTENDANCE)
    def checkin():
        container.attendance_service.check_in(current_identity().id)
        return success()

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @guard.required(Capability.ATTENDANCE)
    def checkout():
        container.attendance_service.check_out(current_identity().id)
        return success()
