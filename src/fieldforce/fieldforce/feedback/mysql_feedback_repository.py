from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, json_rows
from .model import CreateFeedbackRequest, FeedbackFields
from .repository import FeedbackRepository


class MySQLFeedbackRepository(FeedbackRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM feedback ORDER BY id DESC")
            return json_rows(fetchall(cur))

    def create(self, *, author_id: int, req: CreateFeedbackRequest, photo: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO feedback(user_id, customer, notes, photo, lat, lng)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (author_id, req.customer, req.fields.notes, photo, req.fields.lat, req.fields.lng),
            )

    def update(self, feedback_id: int, fields: FeedbackFields) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE feedback SET notes=%s, lat=%s, lng=%s WHERE id=%s",
                (fields.notes, fields.lat, fields.lng, feedback_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, feedback_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM feedback WHERE id=%s", (feedback_id,))
            return cur.rowcount > 0
