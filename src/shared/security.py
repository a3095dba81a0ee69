"""Bearer tokens for the dashboard API.

Tokens are HS256 JWTs signed with ``JWT_SECRET`` and valid for
``JWT_TTL_HOURS`` (24 by default). The ``sub`` claim carries the user id;
``username`` and ``role`` ride along for the dashboard's convenience.
"""

import os
from datetime import UTC, datetime, timedelta

import jwt
from fastapi import Header

from shared.exceptions import AuthenticationError

ALGORITHM = "HS256"
DEFAULT_TTL_HOURS = 24


def _secret() -> str:
    return os.environ.get("JWT_SECRET", "fallback-secret-key")


def _ttl() -> timedelta:
    try:
        hours = int(os.environ.get("JWT_TTL_HOURS", DEFAULT_TTL_HOURS))
    except ValueError:
        hours = DEFAULT_TTL_HOURS
    return timedelta(hours=hours)


def issue_access_token(user_id: str, username: str | None = None, role: str | None = None) -> str:
    now = datetime.now(UTC)
    payload = {"sub": str(user_id), "iat": now, "exp": now + _ttl()}
    if username is not None:
        payload["username"] = username
    if role is not None:
        payload["role"] = role
    return jwt.encode(payload, _secret(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    try:
        claims = jwt.decode(token, _secret(), algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError({"token": ["Token has expired. Please login again."]}) from None
    except jwt.InvalidTokenError:
        raise AuthenticationError({"token": ["Invalid token"]}) from None

    if not claims.get("sub"):
        raise AuthenticationError({"token": ["Invalid token"]})
    return claims


def bearer_token(authorization: str | None) -> str:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError({"token": ["Authorization token required"]})
    return token.strip()


async def current_user_id(authorization: str | None = Header(default=None)) -> str:
    """FastAPI dependency: the verified user id from the ``Authorization`` header."""
    return decode_access_token(bearer_token(authorization))["sub"]
