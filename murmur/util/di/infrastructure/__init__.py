"""Infrastructure providers."""

# Import bases
from .avatar import AvatarComponentProvider
from .email import EmailProvider
from .persistence import PersistenceProvider
from .turnstile import TurnstileProvider

# Import implementations (needed for __subclasses__())
from .avatar import ProdAvatarProvider  # noqa: F401
from .email import ProdEmailProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .turnstile import ProdTurnstileProvider  # noqa: F401

__all__ = [
    "AvatarComponentProvider",
    "EmailProvider",
    "PersistenceProvider",
    "ProdAvatarProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
    "ProdTurnstileProvider",
    "TurnstileProvider",
]
