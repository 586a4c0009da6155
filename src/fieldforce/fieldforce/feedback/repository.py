from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CreateFeedbackRequest, FeedbackFields


class FeedbackRepository(Protocol):
    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def create(self, *, author_id: int, req: CreateFeedbackRequest, photo: Optional[str]) -> None:
        raise NotImplementedError

    def update(self, feedback_id: int, fields: FeedbackFields) -> bool:
        raise NotImplementedError

    def delete_by_id(self, feedback_id: int) -> bool:
        raise NotImplementedError
