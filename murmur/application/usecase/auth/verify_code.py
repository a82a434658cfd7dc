"""Verify login code use case."""

from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.service import AuthService


class VerifyCodeRequest(BaseModel):
    """Verify login code request."""

    email: str | None = None
    code: str | None = None


class VerifyCodeResponse(BaseModel):
    """Verify login code response."""

    success: bool = True
    token: str


class VerifyCodeUseCase(BaseUseCase[VerifyCodeRequest, VerifyCodeResponse]):
    """Use case for exchanging a login code for an admin token."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize verify code use case.

        Args:
            auth_service: Login code domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: VerifyCodeRequest) -> VerifyCodeResponse:
        """Execute verify code flow.

        Raises:
            ValidationError: If email or code is missing
            AccessDeniedError: If the code is wrong/expired or the email is
                not an admin
            RateLimitError: If the email used up its verification attempts
        """
        token = await self.auth_service.verify_code(request.email, request.code)
        return VerifyCodeResponse(token=token)
