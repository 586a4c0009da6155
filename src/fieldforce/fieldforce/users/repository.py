from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for the credential store.

    Services depend on this interface, never on a concrete database.
    """

    def get_by_user_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        user_id: str,
        password_hash: str,
        role: Role,
        full_name: Optional[str] = None,
    ) -> None:
        raise NotImplementedError

    def set_active(self, id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def delete_by_id(self, id: int) -> bool:
        raise NotImplementedError
