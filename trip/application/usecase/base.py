"""Base use case.

Use cases are the engine boundary. Each one runs its domain service calls
inside a unit of work and turns domain errors into a failed response, so a
caller only ever sees ``success``/``error``/``message`` and never a domain
exception. Cancellation and timeouts still propagate after the transaction
has rolled back.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Optional, TypeVar

import logfire
from pydantic import BaseModel

from trip.config import EngineSettings
from trip.domain.error import DomainError
from trip.domain.repository import UnitOfWork
from trip.domain.value import ErrorKind


class UseCaseResponse(BaseModel):
    """Outcome shared by every use case response."""

    success: bool = True
    error: Optional[ErrorKind] = None
    message: Optional[str] = None


RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=UseCaseResponse)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """Base use case for orchestrating domain services."""

    name: ClassVar[str] = "use_case"
    response_type: ClassVar[type[UseCaseResponse]] = UseCaseResponse

    def __init__(self, unit_of_work: UnitOfWork, settings: EngineSettings) -> None:
        self.unit_of_work = unit_of_work
        self.settings = settings

    async def execute(self, request: RequestT) -> ResponseT:
        """Run the use case and report domain failures as a response.

        Raises:
            TimeoutError: If the configured operation timeout elapses
            asyncio.CancelledError: If the caller cancels the operation
        """
        with logfire.span(f"usecase.{self.name}"):
            try:
                async with asyncio.timeout(self.settings.operation_timeout_seconds):
                    return await self._execute(request)
            except DomainError as e:
                logfire.warn(
                    "Use case failed",
                    use_case=self.name,
                    error=e.kind.value,
                    message=str(e),
                )
                return self.response_type(  # type: ignore[return-value]
                    success=False, error=e.kind, message=str(e)
                )

    @abstractmethod
    async def _execute(self, request: RequestT) -> ResponseT:
        pass
