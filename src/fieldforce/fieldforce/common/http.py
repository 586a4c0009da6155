from __future__ import annotations

from typing import Any, Dict

from flask import jsonify, request


def json_body() -> Dict[str, Any]:
    """The request's JSON object, or an empty dict when absent or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def form_body() -> Dict[str, Any]:
    return request.form.to_dict()


def success(**extra: Any):
    return jsonify({"success": True, **extra})
