"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from murmur.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every component uses its production provider: PostgreSQL and Redis
    for persistence, Turnstile, the HTTP email API and the QQ/Gravatar
    avatar sources. Settings are loaded from the environment on first use.

    Returns:
        Configured DI container
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the application.

    Args:
        app: FastAPI application
        container: DI container; stored on ``app.state.dishka_container``
    """
    setup_dishka(container, app)


async def close_di(app: FastAPI) -> None:
    """Close the application's container, releasing APP-scoped clients."""
    await app.state.dishka_container.close()
