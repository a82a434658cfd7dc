"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: validates input and orchestrates domain services.

    Use cases own the transaction boundary and schedule post-response work;
    routers only translate HTTP to requests and errors to status codes.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
