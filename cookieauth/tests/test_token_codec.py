from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from cookieauth.domain.sessions.entities import SessionClaims
from cookieauth.domain.sessions.exceptions import InvalidTokenError
from cookieauth.infrastructure.tokens.jwt_codec import PyJwtTokenCodec

# HS512 needs a 64-byte key.
SECRET = "codec-secret-" + "0123456789abcdef" * 4


def _claims(issued_at: datetime, ttl: timedelta = timedelta(hours=1)) -> SessionClaims:
    issued_at = issued_at.replace(microsecond=0)
    return SessionClaims(username="admin", issued_at=issued_at, expires_at=issued_at + ttl)


def test_encode_produces_hs256_jwt_with_standard_claims() -> None:
    codec = PyJwtTokenCodec(secret=SECRET)
    claims = _claims(datetime.now(UTC))

    token = codec.encode(claims)

    assert jwt.get_unverified_header(token)["alg"] == "HS256"
    payload = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["sub"] == "admin"
    assert payload["exp"] - payload["iat"] == 3600
    assert payload["iat"] == int(claims.issued_at.timestamp())


def test_decode_round_trips_claims() -> None:
    codec = PyJwtTokenCodec(secret=SECRET)
    claims = _claims(datetime.now(UTC))

    assert codec.decode(codec.encode(claims)) == claims


def test_decode_rejects_other_algorithm() -> None:
    signer = PyJwtTokenCodec(secret=SECRET, algorithm="HS512")
    verifier = PyJwtTokenCodec(secret=SECRET, algorithm="HS256")
    token = signer.encode(_claims(datetime.now(UTC)))

    with pytest.raises(InvalidTokenError):
        verifier.decode(token)


def test_decode_rejects_unsigned_token() -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "admin", "iat": now, "exp": now + timedelta(hours=1)},
        key=None,
        algorithm="none",
    )

    with pytest.raises(InvalidTokenError):
        PyJwtTokenCodec(secret=SECRET).decode(token)


@pytest.mark.parametrize("missing", ["sub", "iat", "exp"])
def test_decode_requires_every_claim(missing: str) -> None:
    now = datetime.now(UTC)
    payload = {"sub": "admin", "iat": now, "exp": now + timedelta(hours=1)}
    payload.pop(missing)
    token = jwt.encode(payload, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        PyJwtTokenCodec(secret=SECRET).decode(token)


def test_decode_rejects_empty_subject() -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "", "iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256"
    )

    with pytest.raises(InvalidTokenError):
        PyJwtTokenCodec(secret=SECRET).decode(token)


def test_leeway_tolerates_recent_expiry() -> None:
    issued_at = datetime.now(UTC) - timedelta(hours=1, seconds=10)
    token = PyJwtTokenCodec(secret=SECRET).encode(_claims(issued_at))

    strict = PyJwtTokenCodec(secret=SECRET)
    lenient = PyJwtTokenCodec(secret=SECRET, leeway=timedelta(minutes=1))

    with pytest.raises(InvalidTokenError):
        strict.decode(token)
    assert lenient.decode(token).username == "admin"


def test_empty_secret_is_refused() -> None:
    with pytest.raises(ValueError):
        PyJwtTokenCodec(secret="")
