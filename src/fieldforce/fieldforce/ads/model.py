from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_fields


@dataclass(frozen=True)
class CreateAdRequest:
    title: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateAdRequest":
        require_fields(payload, "title")
        return cls(title=str(payload["title"]).strip())
