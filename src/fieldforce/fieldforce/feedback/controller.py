from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import form_body, json_body, success
from ..container import Container
from ..core.enums import Capability
from ..security.guard import current_identity
from .model import CreateFeedbackRequest, FeedbackFields


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/feedback", methods=["GET"], endpoint="list_feedback")
    @guard.required(Capability.FIELD_FEEDBACK)
    def list_feedback():
        return jsonify(list(container.feedback_service.list_feedback()))

    @app.route("/api/feedback", methods=["POST"], endpoint="create_feedback")
    @guard.required(Capability.FIELD_FEEDBACK)
    def create_feedback():
        payload = form_body() or json_body()
        container.feedback_service.create_feedback(
            current_identity(),
            CreateFeedbackRequest.from_payload(payload),
            request.files.get("photo"),
        )
        return success()

    @app.route("/api/feedback/<int:feedback_id>", methods=["PUT"], endpoint="update_feedback")
    @guard.required(Capability.FIELD_FEEDBACK)
    def update_feedback(feedback_id: int):
        container.feedback_service.update_feedback(feedback_id, FeedbackFields.from_payload(json_body()))
        return success()

    @app.route("/api/feedback/<int:feedback_id>", methods=["DELETE"], endpoint="delete_feedback")
    @guard.required(Capability.FIELD_FEEDBACK)
    def delete_feedback(feedback_id: int):
        container.feedback_service.delete_feedback(feedback_id)
        return success()
