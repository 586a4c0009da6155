from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, success
from ..container import Container
from ..core.enums import Capability
from .model import AllocateRequest, CustomerQuery, DeallocateRequest


def register(app: Flask, container: Container) -> None:
    guard = container.guard

    @app.route("/api/customers", methods=["GET"], endpoint="list_customers")
    @guard.required(Capability.VIEW_DIRECTORY)
    def list_customers():
        rows = container.customer_service.list_customers(CustomerQuery.from_args(request.args))
        return jsonify(list(rows))

    @app.route("/api/customers/import", methods=["POST"], endpoint="import_customers")
    @guard.required(Capability.ALLOCATE_CUSTOMERS)
    def import_customers():
        imported = container.customer_service.import_csv(request.files.get("csv"))
        return success(imported=imported)

    @app.route("/api/customers/allocate", methods=["PATCH"], endpoint="allocate_customer")
    @guard.required(Capability.ALLOCATE_CUSTOMERS)
    def allocate_customer():
        container.customer_service.allocate(AllocateRequest.from_payload(json_body()))
        return success()

    @app.route("/api/customers/deallocate", methods=["PATCH"], endpoint="deallocate_customer")
    @guard.required(Capability.ALLOCATE_CUSTOMERS)
    def deallocate_customer():
        container.customer_service.deallocate(DeallocateRequest.from_payload(json_body()))
        return success()
