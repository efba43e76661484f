"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Transaction boundary for one engine operation.

    Usage:
        async with unit_of_work.transaction():
            await service.do_something(...)

    Leaving the block normally commits. Leaving it with any exception,
    cancellation included, rolls back every write made inside it.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        pass
