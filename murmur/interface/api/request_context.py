"""Per-request helpers shared by the routers."""

from fastapi import HTTPException, Request, status

import logfire

from murmur.config import Settings
from murmur.domain.error import AccessDeniedError, AuthError
from murmur.domain.service import AdminTokenService
from murmur.util.jwt import TokenPayload

DEFAULT_CLIENT_IP = "127.0.0.1"


def client_ip(request: Request, settings: Settings) -> str:
    """Client IP from the proxy header, else the socket peer."""
    forwarded = request.headers.get(settings.client_ip_header)
    if forwarded:
        return forwarded.strip()
    if request.client and request.client.host:
        return request.client.host
    return DEFAULT_CLIENT_IP


def require_admin(
    authorization: str | None, token_service: AdminTokenService
) -> TokenPayload:
    """Authenticate an admin bearer token or abort the request.

    Raises:
        HTTPException: 401 for a missing/invalid token, 403 for a valid
            token whose email is no longer an admin
    """
    try:
        return token_service.authenticate(authorization)
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except AuthError as e:
        logfire.warn("Admin authentication failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
