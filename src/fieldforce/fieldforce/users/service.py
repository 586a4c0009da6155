from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import InvalidCredentials
from ..security.tokens import Identity, TokenCodec
from .model import CreateUserRequest, LoginRequest, SetStatusRequest
from .repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """What the client gets back after a successful login."""

    token: str
    role: Role
    full_name: Optional[str]

    def to_dict(self) -> dict:
        return {"token": self.token, "role": self.role.value, "full_name": self.full_name}


class AuthService:
    """Use case: authenticate a user and mint a session token."""

    def __init__(self, users: UserRepository, tokens: TokenCodec):
        self._users = users
        self._tokens = tokens

    def login(self, req: LoginRequest) -> LoginResult:
        user = self._users.get_by_user_id(req.user_id)
        if not user or not user.is_active:
            logger.info("login rejected for %r", req.user_id)
            raise InvalidCredentials()

        try:
            ok = check_password_hash(user.password_hash, req.password)
        except (ValueError, TypeError):
            # e.g. placeholder hashes or a method werkzeug does not know
            ok = False

        if not ok:
            logger.info("login rejected for %r", req.user_id)
            raise InvalidCredentials()

        token = self._tokens.issue(Identity(id=user.id, role=user.role, user_id=user.user_id))
        return LoginResult(token=token, role=user.role, full_name=user.full_name)


class UserService:
    """Use case: manage user accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self):
        return self._users.list_all()

    def create_user(self, req: CreateUserRequest) -> None:
        self._users.create_user(
            user_id=req.user_id,
            password_hash=generate_password_hash(req.password),
            role=req.role,
            full_name=req.full_name,
        )

    def set_status(self, id: int, req: SetStatusRequest) -> None:
        self._users.set_active(id, is_active=req.is_active)

    def delete_user(self, id: int) -> None:
        self._users.delete_by_id(id)
