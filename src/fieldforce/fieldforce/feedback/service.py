from __future__ import annotations

from typing import Optional

from werkzeug.datastructures import FileStorage

from ..security.tokens import Identity
from ..storage.blob_router import BlobPlacementRouter
from .model import CreateFeedbackRequest, FeedbackFields
from .repository import FeedbackRepository


class FeedbackService:
    def __init__(self, feedback: FeedbackRepository, blobs: BlobPlacementRouter):
        self._feedback = feedback
        self._blobs = blobs

    def list_feedback(self):
        return self._feedback.list_all()

    def create_feedback(self, author: Identity, req: CreateFeedbackRequest, photo: Optional[FileStorage]) -> None:
        # The author always comes from the session, never from the body.
        with self._blobs.staged({"photo": photo}) as stored:
            self._feedback.create(author_id=author.id, req=req, photo=stored["photo"])

    def update_feedback(self, feedback_id: int, fields: FeedbackFields) -> None:
        self._feedback.update(feedback_id, fields)

    def delete_feedback(self, feedback_id: int) -> None:
        self._feedback.delete_by_id(feedback_id)
