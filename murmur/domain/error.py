"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing or malformed input."""

    pass


class AuthError(DomainError):
    """Missing, malformed, or expired admin credentials."""

    pass


class AccessDeniedError(AuthError):
    """Credentials were understood but do not grant access."""

    pass


class BotCheckFailedError(AccessDeniedError):
    """The bot-check challenge was rejected."""

    def __init__(self) -> None:
        super().__init__("Turnstile validation failed")


class RateLimitError(DomainError):
    """Raised when a client exceeds its submission window."""

    def __init__(self, limit: int, window_seconds: int):
        self.limit = limit
        self.window_seconds = window_seconds
        super().__init__("Too many requests. Please try again later.")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
