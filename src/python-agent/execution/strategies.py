"""
Strategy variants - a closed set chosen once per episode.

Every variant shares fruit bookkeeping (scan on the first turn, prune
afterwards) and differs only in decide_move():

- closest:  step toward the nearest fruit of any type
- rarest:   step toward the nearest fruit of the rarest undecided type
- waypoint: route through several fruit toward the rarest type
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Optional, Protocol, Type

from constants import Action
from planning.fruit_stash import FruitStash
from planning.geometry import calculate_move_direction
from planning.models import Point
from planning.reachability import RefinementCache

from .route_executor import RouteExecutor

if TYPE_CHECKING:
    from host_client import BoardSnapshot

logger = logging.getLogger(__name__)


class FruitStrategy(Protocol):
    """Observe the board, then produce exactly one action."""
    def update_state(self, snapshot: "BoardSnapshot") -> None: ...
    def decide_move(self) -> Action: ...


class BaseStrategy:
    name = "base"

    def __init__(self):
        self.stash: Optional[FruitStash] = None
        self.snapshot: Optional["BoardSnapshot"] = None

    def update_state(self, snapshot: "BoardSnapshot") -> None:
        self.snapshot = snapshot
        if self.stash is None:
            self.stash = FruitStash.from_snapshot(snapshot)
        else:
            self.stash.update(snapshot)

    def decide_move(self) -> Action:
        raise NotImplementedError

    def _step_toward(self, target: Optional[Point]) -> Action:
        if target is None:
            return Action.PASS
        return calculate_move_direction(target, self.snapshot.me) or Action.PASS

    def _standing_on_fruit(self) -> bool:
        return bool(self.snapshot.fruit_at(self.snapshot.me))


class ClosestFruitStrategy(BaseStrategy):
    name = "closest"

    def decide_move(self) -> Action:
        if self._standing_on_fruit():
            return Action.TAKE
        return self._step_toward(self.stash.closest_any(self.snapshot.me))


class RarestFruitStrategy(BaseStrategy):
    name = "rarest"

    def decide_move(self) -> Action:
        if self._standing_on_fruit():
            return Action.TAKE
        if self.stash.is_empty():
            return Action.PASS
        return self._step_toward(self.stash.closest_location(self.stash.types[0], self.snapshot.me))


class WaypointStrategy(BaseStrategy):
    name = "waypoint"

    def __init__(self, cache: Optional[RefinementCache] = None):
        super().__init__()
        self.executor = RouteExecutor(cache)

    def decide_move(self) -> Action:
        # Cells on the plan are taken by the executor when reached
        if self._standing_on_fruit() and self.snapshot.me not in self.executor.plan:
            return Action.TAKE
        return self.executor.next_action(self.snapshot, self.stash)


STRATEGIES: Dict[str, Type[BaseStrategy]] = {
    ClosestFruitStrategy.name: ClosestFruitStrategy,
    RarestFruitStrategy.name: RarestFruitStrategy,
    WaypointStrategy.name: WaypointStrategy,
}


def create_strategy(name: str) -> BaseStrategy:
    """Instantiate a strategy by name. Raises ValueError for unknown names."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown strategy {name!r}; choose from {sorted(STRATEGIES)}") from None
    logger.info(f"Strategy: {name}")
    return strategy_cls()
