from __future__ import annotations

import logging
from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.enums import Role
from ..core.exceptions import Conflict
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, json_rows
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def role_from_db(value) -> Role:
    """Unknown stored roles get the least privileged role instead of failing the login."""
    try:
        return Role(str(value).strip().upper())
    except ValueError:
        logger.warning("unknown role %r in users table, treating as %s", value, Role.EMPLOYEE.value)
        return Role.EMPLOYEE


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, password_hash, full_name, role, is_active
                FROM users
                WHERE user_id=%s
                """,
                (user_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return User(
                id=int(row["id"]),
                user_id=row["user_id"],
                password_hash=row["password_hash"],
                role=role_from_db(row["role"]),
                full_name=row.get("full_name"),
                is_active=bool(row.get("is_active", True)),
            )

    def list_all(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, user_id, role, is_active FROM users ORDER BY id DESC")
            return json_rows(fetchall(cur))

    def create_user(
        self,
        *,
        user_id: str,
        password_hash: str,
        role: Role,
        full_name: Optional[str] = None,
    ) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(user_id, password_hash, full_name, role, is_active)
                    VALUES(%s,%s,%s,%s,1)
                    """,
                    (user_id, password_hash, full_name, role.value),
                )
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise Conflict("User already exists")
            raise

    def set_active(self, id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET is_active=%s WHERE id=%s", (1 if is_active else 0, id))
            return cur.rowcount > 0

    def delete_by_id(self, id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s", (id,))
            return cur.rowcount > 0
