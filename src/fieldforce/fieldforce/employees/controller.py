from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import form_body, success
from ..container import Container
from ..core.enums import Capability
from .model import CreateEmployeeRequest


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @guard.required(Capability.VIEW_DIRECTORY)
    def list_employees():
        return jsonify(list(container.employee_service.list_employees()))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @guard.required(Capability.MANAGE_EMPLOYEES)
    def create_employee():
        container.employee_service.create_employee(
            CreateEmployeeRequest.from_payload(form_body()),
            {"photo": request.files.get("photo"), "resume": request.files.get("resume")},
        )
        return success()
