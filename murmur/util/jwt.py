"""JWT token utilities for admin sessions."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from murmur.config import AuthSettings


class TokenPayload(BaseModel):
    """Admin token payload."""

    email: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(email: str, settings: AuthSettings) -> str:
    """Create a signed admin token.

    Args:
        email: Admin email claim
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.token_expiry_days)

    payload = {
        "email": email,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.admin_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an admin token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.admin_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")
