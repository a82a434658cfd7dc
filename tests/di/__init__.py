"""Mock providers for testing."""

from .avatar import MockAvatarProvider
from .email import MockEmailProvider
from .persistence import MockPersistenceProvider
from .turnstile import MockTurnstileProvider
from .container import build_test_container

__all__ = [
    "MockAvatarProvider",
    "MockEmailProvider",
    "MockPersistenceProvider",
    "MockTurnstileProvider",
    "build_test_container",
]
