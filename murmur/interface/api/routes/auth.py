"""Admin login routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from murmur.adapter.error import ProviderError
from murmur.application.usecase.auth import (
    SendCodeRequest,
    SendCodeResponse,
    SendCodeUseCase,
    VerifyCodeRequest,
    VerifyCodeResponse,
    VerifyCodeUseCase,
)
from murmur.config import Settings
from murmur.domain.error import AccessDeniedError, RateLimitError, ValidationError
from murmur.domain.service import EmailDeliveryError
from murmur.interface.api.request_context import client_ip
from murmur.util.error import ConfigurationError

router = APIRouter(prefix="/api/auth", tags=["auth"], route_class=DishkaRoute)


class SendCodeAPIRequest(BaseModel):
    """API request for a login code."""

    email: str | None = None
    turnstile_token: str | None = None


@router.post("/send-code", response_model=SendCodeResponse)
async def send_code(
    request: SendCodeAPIRequest,
    http_request: Request,
    send_code_use_case: FromDishka[SendCodeUseCase],
    settings: FromDishka[Settings],
) -> SendCodeResponse:
    """Email a one-time login code.

    The response is the same whether or not the address is an admin.

    Raises:
        HTTPException: On bot-check failure or if the code cannot be sent
    """
    try:
        return await send_code_use_case.execute(
            SendCodeRequest(
                email=request.email,
                turnstile_token=request.turnstile_token,
                client_ip=client_ip(http_request, settings),
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except EmailDeliveryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    except ConfigurationError as e:
        logfire.error("Login code rejected: server misconfigured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server configuration error",
        )
    except ProviderError as e:
        logfire.error("Login code rejected: bot-check unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Bot-check service unavailable",
        )


@router.post("/verify", response_model=VerifyCodeResponse)
async def verify_code(
    request: VerifyCodeRequest,
    verify_code_use_case: FromDishka[VerifyCodeUseCase],
) -> VerifyCodeResponse:
    """Exchange a login code for an admin bearer token (valid 7 days).

    Raises:
        HTTPException: If the code is wrong or expired, the email is not
            an admin, or the email made too many attempts
    """
    try:
        return await verify_code_use_case.execute(request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except RateLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(e.window_seconds)},
        )
