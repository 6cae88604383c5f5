"""Access token helpers.

Tokens are minted by the site's login flow. This service verifies them to
learn who is commenting and whether they may moderate; ``create_token`` exists
for scripts and tests that need a valid token.
"""

from datetime import datetime, timedelta, timezone
from typing import Literal

import jwt
from pydantic import BaseModel

from inkwell.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: str
    name: str | None = None
    role: Literal["user", "admin"] = "user"
    exp: datetime


class JWTError(Exception):
    """Token missing required claims, badly signed, or expired."""


def create_token(
    user_id: str,
    name: str | None,
    role: str,
    settings: AuthSettings,
    expires_in: timedelta | None = None,
) -> str:
    """Sign an access token.

    Args:
        user_id: User ID
        name: Display name shown on the user's comments
        role: Site role ("user" or "admin")
        settings: Authentication settings
        expires_in: Lifetime; defaults to ``settings.jwt_expiry_days``

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "name": name,
        "role": role,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a token's signature and expiry and return its claims.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Token payload

    Raises:
        JWTError: If the token is invalid, expired or lacks a user
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**claims)
    except ValueError:
        raise JWTError("Token claims are malformed")
