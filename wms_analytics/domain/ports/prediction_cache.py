"""Domain port for caching computed prediction responses."""

from __future__ import annotations

from typing import Any, Optional, Protocol


class IPredictionCache(Protocol):
    """Key/value store with per-entry expiry."""

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when missing or expired."""
        ...

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store ``value`` for ``ttl_seconds``."""
        ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...
