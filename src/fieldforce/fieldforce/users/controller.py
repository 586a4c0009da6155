from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, success
from ..container import Container
from ..core.enums import Capability
from .model import CreateUserRequest, LoginRequest, SetStatusRequest


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        result = container.auth_service.login(LoginRequest.from_payload(json_body()))
        return jsonify(result.to_dict())

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @guard.required(Capability.MANAGE_USERS)
    def list_users():
        return jsonify(list(container.user_service.list_users()))

    @app.route("/api/users", methods=["POST"], endpoint="create_user")
    @guard.required(Capability.MANAGE_USERS)
    def create_user():
        container.user_service.create_user(CreateUserRequest.from_payload(json_body()))
        return success()

    @app.route("/api/users/<int:id>/status", methods=["PATCH"], endpoint="set_user_status")
    @guard.required(Capability.MANAGE_USERS)
    def set_user_status(id: int):
        container.user_service.set_status(id, SetStatusRequest.from_payload(json_body()))
        return success()

    @app.route("/api/users/<int:id>", methods=["DELETE"], endpoint="delete_user")
    @guard.required(Capability.MANAGE_USERS)
    def delete_user(id: int):
        container.user_service.delete_user(id)
        return success()
