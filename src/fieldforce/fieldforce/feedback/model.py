from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import optional


@dataclass(frozen=True)
class FeedbackFields:
    """Editable part of a feedback entry; coordinates pass through untouched."""

    notes: Optional[str] = None
    lat: Optional[Any] = None
    lng: Optional[Any] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FeedbackFields":
        return cls(notes=optional(payload, "notes"), lat=optional(payload, "lat"), lng=optional(payload, "lng"))


@dataclass(frozen=True)
class CreateFeedbackRequest:
    customer: Optional[str]
    fields: FeedbackFields

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CreateFeedbackRequest":
        return cls(customer=optional(payload, "customer"), fields=FeedbackFields.from_payload(payload))
