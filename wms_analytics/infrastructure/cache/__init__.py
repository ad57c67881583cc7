"""Cache implementations for prediction responses."""

from .in_memory_prediction_cache import InMemoryPredictionCache

__all__ = ["InMemoryPredictionCache"]
