"""Single-pending-request guard for the AI screens."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from lansky.core.exceptions import RequestInFlightError


class InFlightGuard:
    """Allows at most one pending request per operation name."""

    def __init__(self) -> None:
        self._pending: set[str] = set()

    def is_pending(self, operation: str) -> bool:
        return operation in self._pending

    @asynccontextmanager
    async def hold(self, operation: str) -> AsyncIterator[None]:
        """
        Mark operation as pending for the duration of the block.

        Raises:
            RequestInFlightError: if the operation is already pending
        """
        if operation in self._pending:
            raise RequestInFlightError(operation)
        self._pending.add(operation)
        try:
            yield
        finally:
            self._pending.discard(operation)


# Shared guard for the API process
_guard: InFlightGuard | None = None


def get_in_flight_guard() -> InFlightGuard:
    global _guard
    if _guard is None:
        _guard = InFlightGuard()
    return _guard
