from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import MissingData


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(payload: Mapping[str, Any], *names: str, message: str | None = None) -> None:
    """Presence-only check: every name must map to a non-blank value."""
    for name in names:
        if is_blank(payload.get(name)):
            raise MissingData(message)


def optional(payload: Mapping[str, Any], name: str) -> Any:
    value = payload.get(name)
    return None if is_blank(value) else value
