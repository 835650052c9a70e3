"""Execution modules for turn-by-turn play."""

from .route_executor import RouteExecutor
from .strategies import (
    STRATEGIES,
    BaseStrategy,
    ClosestFruitStrategy,
    FruitStrategy,
    RarestFruitStrategy,
    WaypointStrategy,
    create_strategy,
)
from .session import GameSession

__all__ = [
    "RouteExecutor",
    "FruitStrategy",
    "BaseStrategy",
    "ClosestFruitStrategy",
    "RarestFruitStrategy",
    "WaypointStrategy",
    "STRATEGIES",
    "create_strategy",
    "GameSession",
]
