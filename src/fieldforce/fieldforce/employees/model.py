from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..common.validators import optional


@dataclass(frozen=True)
class CreateEmployeeRequest:
    """Multipart text fields of an employee submission; every field is optional."""

    emp_id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    designation: Optional[str] = None
    manager: Optional[str] = None
    dob: Optional[str] = None
    join_date: Optional[str] = None
    relieve_date: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateEmployeeRequest":
        return cls(**{f.name: optional(payload, f.name) for f in fields(cls)})
