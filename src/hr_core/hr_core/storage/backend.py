from __future__ import annotations

from typing import Optional, Protocol


class StorageBackend(Protocol):
    """String key-value store in the shape of browser local storage.

    Implementations raise StorageError on any access fault; masking is the
    adapter's job, not the backend's.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryBackend(StorageBackend):
    """Process-local backend, used by tests and the testing settings."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._items)
