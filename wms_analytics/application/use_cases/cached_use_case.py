"""
Application Use Case - Response caching

Decorates a prediction use case with a cache keyed by the request payload.
The heuristics stay pure; memoisation lives entirely in this wrapper.
"""

from __future__ import annotations

import hashlib
from typing import Any, Protocol

import structlog
from pydantic import BaseModel

from wms_analytics.domain.ports.prediction_cache import IPredictionCache

logger = structlog.get_logger(__name__)


class _PredictionUseCase(Protocol):
    async def execute(self, request: Any) -> Any: ...


def cache_key(namespace: str, request: BaseModel) -> str:
    payload = request.model_dump_json(exclude_none=True)
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()
    return f"{namespace}:{digest}"


class CachedPredictionUseCase:
    """Serve repeated identical requests from ``cache`` for ``ttl_seconds``."""

    def __init__(
        self,
        inner: _PredictionUseCase,
        cache: IPredictionCache,
        namespace: str,
        ttl_seconds: float,
        enabled: bool = True,
    ) -> None:
        self.inner = inner
        self.cache = cache
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self.enabled = enabled and ttl_seconds > 0

    async def execute(self, request: BaseModel) -> Any:
        if not self.enabled:
            return await self.inner.execute(request)

        key = cache_key(self.namespace, request)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("prediction.cache.hit", namespace=self.namespace)
            return cached

        response = await self.inner.execute(request)
        self.cache.set(key, response, self.ttl_seconds)
        logger.debug("prediction.cache.store", namespace=self.namespace)
        return response
