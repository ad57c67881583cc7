"""Domain services implementing the warehouse analytics heuristics."""

from .batch_predictor import predict_duration_batch
from .demand_forecaster import DemandForecaster, moving_average
from .duration_predictor import predict_order_duration
from .route_optimizer import optimize_pick_route

__all__ = [
    "predict_order_duration",
    "predict_duration_batch",
    "DemandForecaster",
    "moving_average",
    "optimize_pick_route",
]
