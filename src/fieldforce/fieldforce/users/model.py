from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional, require_fields
from ..core.enums import Role
from ..core.exceptions import MissingData, ValidationError


@dataclass(frozen=True)
class User:
    """Credential store row.

    Note: the plaintext password never reaches this object, only its hash.
    """

    id: int
    user_id: str
    password_hash: str
    role: Role
    full_name: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class LoginRequest:
    user_id: str
    password: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LoginRequest":
        require_fields(payload, "user_id", "password", message="Missing credentials")
        return cls(user_id=str(payload["user_id"]).strip(), password=str(payload["password"]))


@dataclass(frozen=True)
class CreateUserRequest:
    user_id: str
    password: str
    role: Role = Role.EMPLOYEE
    full_name: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateUserRequest":
        require_fields(payload, "user_id", "password")
        role_s = optional(payload, "role")
        try:
            role = Role(str(role_s).upper()) if role_s else Role.EMPLOYEE
        except ValueError:
            raise ValidationError("Invalid role")
        full_name = optional(payload, "full_name")
        return cls(
            user_id=str(payload["user_id"]).strip(),
            password=str(payload["password"]),
            role=role,
            full_name=str(full_name) if full_name is not None else None,
        )


@dataclass(frozen=True)
class SetStatusRequest:
    is_active: bool

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SetStatusRequest":
        if "is_active" not in payload or payload["is_active"] is None:
            raise MissingData()
        value = payload["is_active"]
        if isinstance(value, str):
            value = value.strip().lower() in {"1", "true", "yes", "on"}
        return cls(is_active=bool(value))
