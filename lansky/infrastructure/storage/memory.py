"""In-process key-value store, for tests and throwaway sessions."""

from lansky.core.interfaces.storage import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Dict-backed store with the same semantics as the SQLite one."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value

    async def set_many(self, values: dict[str, str]) -> None:
        self.data.update(values)

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None

    async def keys(self) -> list[str]:
        return sorted(self.data)
