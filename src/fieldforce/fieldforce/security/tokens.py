from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import TOKEN_ALGORITHM, TOKEN_TTL_HOURS
from ..core.enums import Role
from ..core.exceptions import InvalidToken


@dataclass(frozen=True)
class Identity:
    """Verified claims attached to a request."""

    id: int
    role: Role
    user_id: str


class TokenCodec:
    """Signs and verifies session tokens (HS256, fixed lifetime)."""

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = timedelta(hours=TOKEN_TTL_HOURS),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or now_utc

    def issue(self, identity: Identity) -> str:
        issued_at = self._clock()
        payload = {
            "id": int(identity.id),
            "role": identity.role.value,
            "user_id": identity.user_id,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: str) -> Identity:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                options={"require": ["exp", "id", "role", "user_id"]},
            )
            return Identity(id=int(claims["id"]), role=Role(claims["role"]), user_id=str(claims["user_id"]))
        except (jwt.PyJWTError, ValueError, TypeError):
            raise InvalidToken()
