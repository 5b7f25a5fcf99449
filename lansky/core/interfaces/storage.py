"""Abstract interface for key-value persistence."""

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """String-keyed document store holding JSON text values."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get the value stored under key, or None when absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a single value."""
        pass

    @abstractmethod
    async def set_many(self, values: dict[str, str]) -> None:
        """Store several values atomically."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key. Returns True if it existed."""
        pass

    @abstractmethod
    async def keys(self) -> list[str]:
        """List stored keys."""
        pass
