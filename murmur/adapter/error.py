"""Errors raised by outbound provider adapters."""


class AdapterError(Exception):
    """Base error for calls to third-party services."""

    pass


class ProviderError(AdapterError):
    """A provider could not be reached or sent an unreadable answer."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
