from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, json_rows
from .repository import AdRepository


class MySQLAdRepository(AdRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM ads WHERE is_active=1 ORDER BY id DESC")
            return json_rows(fetchall(cur))

    def create(self, *, title: str, image: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO ads(title, image, is_active) VALUES(%s,%s,1)", (title, image))

    def toggle(self, ad_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE ads SET is_active = NOT is_active WHERE id=%s", (ad_id,))
            return cur.rowcount > 0

    def delete_by_id(self, ad_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM ads WHERE id=%s", (ad_id,))
            return cur.rowcount > 0
