from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import g, request

from ..core.enums import ROLE_CAPABILITIES, Capability
from ..core.exceptions import AuthorizationError, MissingToken
from .tokens import Identity, TokenCodec

logger = logging.getLogger(__name__)

_BEARER = "Bearer "


class AccessGuard:
    """Bearer-token gate in front of every protected view.

    Role gating is only applied when ``enforce_roles`` is set; otherwise any
    authenticated caller may use any endpoint.
    """

    def __init__(self, tokens: TokenCodec, *, enforce_roles: bool = False):
        self._tokens = tokens
        self._enforce_roles = bool(enforce_roles)
        if not self._enforce_roles:
            logger.warning("role gating disabled: every authenticated role may call every endpoint")

    def authenticate(self, header: Optional[str]) -> Identity:
        header = header or ""
        token = header[len(_BEARER):].strip() if header.startswith(_BEARER) else ""
        if not token:
            raise MissingToken()
        return self._tokens.decode(token)

    def authorize(self, identity: Identity, capability: Optional[Capability]) -> None:
        if capability is None or not self._enforce_roles:
            return
        if capability not in ROLE_CAPABILITIES.get(identity.role, frozenset()):
            raise AuthorizationError()

    def required(self, capability: Optional[Capability] = None):
        def decorator(view):
            @wraps(view)
            def wrapper(*args, **kwargs):
                identity = self.authenticate(request.headers.get("Authorization"))
                self.authorize(identity, capability)
                g.identity = identity
                return view(*args, **kwargs)

            return wrapper

        return decorator


def current_identity() -> Identity:
    return g.identity
