from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.fieldforce.fieldforce.core.enums import Capability, Role
from src.fieldforce.fieldforce.core.exceptions import AuthorizationError, InvalidToken, MissingToken
from src.fieldforce.fieldforce.security.guard import AccessGuard
from src.fieldforce.fieldforce.security.tokens import Identity, TokenCodec

ALICE = Identity(id=7, role=Role.EMPLOYEE, user_id="alice")


def test_token_round_trip(tokens):
    assert tokens.decode(tokens.issue(ALICE)) == ALICE


def test_token_lifetime_is_eight_hours(tokens):
    claims = jwt.decode(tokens.issue(ALICE), "test-secret", algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 8 * 3600


def test_expired_token_is_rejected():
    issued = datetime.now(timezone.utc) - timedelta(hours=9)
    old = TokenCodec("test-secret", clock=lambda: issued)

    with pytest.raises(InvalidToken):
        old.decode(old.issue(ALICE))


def test_token_signed_with_other_key_is_rejected(tokens):
    foreign = TokenCodec("someone-else").issue(ALICE)
    with pytest.raises(InvalidToken):
        tokens.decode(foreign)


def test_tampered_token_is_rejected(tokens):
    header, payload, signature = tokens.issue(ALICE).split(".")
    forged_signature = ("A" if signature[0] != "A" else "B") + signature[1:]
    with pytest.raises(InvalidToken):
        tokens.decode(".".join([header, payload, forged_signature]))


def test_token_missing_identity_claims_is_rejected(tokens):
    token = jwt.encode(
        {"user_id": "alice", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "test-secret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        tokens.decode(token)


def test_malformed_token_is_rejected(tokens):
    with pytest.raises(InvalidToken):
        tokens.decode("not-a-jwt")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic abc"])
def test_guard_requires_bearer_header(tokens, header):
    with pytest.raises(MissingToken):
        AccessGuard(tokens).authenticate(header)


def test_guard_returns_identity(tokens):
    assert AccessGuard(tokens).authenticate(f"Bearer {tokens.issue(ALICE)}") == ALICE


def test_roles_not_gated_by_default(tokens):
    AccessGuard(tokens).authorize(ALICE, Capability.MANAGE_USERS)


def test_enforced_roles_reject_missing_capability(tokens):
    guard = AccessGuard(tokens, enforce_roles=True)

    guard.authorize(ALICE, Capability.ATTENDANCE)
    with pytest.raises(AuthorizationError):
        guard.authorize(ALICE, Capability.MANAGE_USERS)

    guard.authorize(Identity(id=1, role=Role.ADMIN, user_id="root"), Capability.MANAGE_USERS)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenCodec("")
