"""Send login code use case."""

from pydantic import BaseModel

from murmur.application.usecase.base import BaseUseCase
from murmur.domain.error import ValidationError
from murmur.domain.service import AuthService, BotCheckService


class SendCodeRequest(BaseModel):
    """Send login code request."""

    email: str | None = None
    turnstile_token: str | None = None
    client_ip: str


class SendCodeResponse(BaseModel):
    """Send login code response.

    Identical for admin and non-admin addresses.
    """

    success: bool = True
    message: str = "Code sent (if email is valid)"


class SendCodeUseCase(BaseUseCase[SendCodeRequest, SendCodeResponse]):
    """Use case for the first step of admin login."""

    def __init__(
        self, bot_check_service: BotCheckService, auth_service: AuthService
    ) -> None:
        """Initialize send code use case.

        Args:
            bot_check_service: Bot-check domain service
            auth_service: Login code domain service
        """
        self.bot_check_service = bot_check_service
        self.auth_service = auth_service

    async def execute(self, request: SendCodeRequest) -> SendCodeResponse:
        """Execute send code flow.

        Raises:
            ValidationError: If email or bot-check token is missing
            BotCheckFailedError: If the bot-check rejected the token
            EmailDeliveryError: If the code could not be emailed
        """
        await self.bot_check_service.require_human(
            request.turnstile_token, request.client_ip
        )
        if not request.email or not request.email.strip():
            raise ValidationError("Email required")

        await self.auth_service.send_code(request.email)
        return SendCodeResponse()
