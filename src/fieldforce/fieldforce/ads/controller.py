from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import form_body, json_body, success
from ..container import Container
from ..core.enums import Capability
from .model import CreateAdRequest


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/ads", methods=["GET"], endpoint="list_ads")
    @guard.required(Capability.VIEW_ADS)
    def list_ads():
        return jsonify(list(container.ad_service.list_active()))

    @app.route("/api/ads", methods=["POST"], endpoint="create_ad")
    @guard.required(Capability.MANAGE_ADS)
    def create_ad():
        req = CreateAdRequest.from_payload(form_body() or json_body())
        container.ad_service.create_ad(req, request.files.get("ad_image"))
        return success()

    @app.route("/api/ads/<int:ad_id>/toggle", methods=["PATCH"], endpoint="toggle_ad")
    @guard.required(Capability.MANAGE_ADS)
    def toggle_ad(ad_id: int):
        container.ad_service.toggle(ad_id)
        return success()

    @app.route("/api/ads/<int:ad_id>", methods=["DELETE"], endpoint="delete_ad")
    @guard.required(Capability.MANAGE_ADS)
    def delete_ad(ad_id: int):
        container.ad_service.delete_ad(ad_id)
        return success()
