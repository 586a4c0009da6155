from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional, require_fields
from ..core.exceptions import ValidationError


def _as_int(value: Any, field_name: str) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}")


@dataclass(frozen=True)
class CustomerQuery:
    """Ids pass through as given; the parameterized statement compares them."""

    employee_id: Optional[Any] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "CustomerQuery":
        return cls(employee_id=optional(args, "employee_id"))


@dataclass(frozen=True)
class AllocateRequest:
    customer_id: Any
    employee_id: Any

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AllocateRequest":
        require_fields(payload, "customer_id", "employee_id")
        return cls(
            customer_id=payload["customer_id"],
            employee_id=payload["employee_id"],
        )


@dataclass(frozen=True)
class DeallocateRequest:
    customer_id: Any

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DeallocateRequest":
        require_fields(payload, "customer_id")
        return cls(customer_id=payload["customer_id"])


@dataclass(frozen=True)
class CustomerRow:
    """One customer parsed from an import file."""

    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    assigned_to: Optional[int] = None

    @classmethod
    def from_csv(cls, record: Mapping[str, Any]) -> "CustomerRow":
        assigned = optional(record, "assigned_to")
        phone = optional(record, "phone")
        address = optional(record, "address")
        return cls(
            name=str(record["name"]).strip(),
            phone=str(phone).strip() if phone is not None else None,
            address=str(address).strip() if address is not None else None,
            assigned_to=_as_int(assigned, "assigned_to") if assigned is not None else None,
        )
