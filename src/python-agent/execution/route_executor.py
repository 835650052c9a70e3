"""
Route Executor - follow a committed waypoint chain one step per turn.

Sits between the fruit stash and the host:
    FruitStash → RouteExecutor → Action

The plan is the chosen chain with reached waypoints popped off its head.
It stays committed until the fruit at its destination disappears (taken by
either player) or the destination is reached; then a new chain is planned
toward the nearest fruit of the rarest remaining type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from constants import Action
from planning.fruit_stash import FruitStash
from planning.geometry import calculate_move_direction, canonical_box, nodes_in_box
from planning.models import Plan, Point
from planning.paths import PathEnumerator
from planning.reachability import ReachabilityGraphBuilder, RefinementCache
from planning.selector import PathSelector

if TYPE_CHECKING:
    from host_client import BoardSnapshot

logger = logging.getLogger(__name__)


class RouteExecutor:
    """
    Owns the current plan and turns it into one action per turn.

    Usage:
        executor = RouteExecutor(RefinementCache())
        action = executor.next_action(snapshot, stash)
    """

    def __init__(self, cache: Optional[RefinementCache] = None):
        self.cache = cache if cache is not None else RefinementCache()
        self.enumerator = PathEnumerator(ReachabilityGraphBuilder(self.cache))
        self.selector = PathSelector()
        self.plan: Plan = []
        self.replans = 0

    @property
    def destination(self) -> Optional[Point]:
        return self.plan[-1] if self.plan else None

    def is_stale(self, snapshot: "BoardSnapshot") -> bool:
        """True when there is no plan or its destination fruit is gone."""
        return not self.plan or not snapshot.fruit_at(self.plan[-1])

    def next_action(self, snapshot: "BoardSnapshot", stash: FruitStash) -> Action:
        if not self.is_stale(snapshot):
            action = self._advance(snapshot)
            if action is not None:
                return action
        elif self.plan:
            logger.info(f"Destination {self.destination} emptied, replanning")

        return self._replan(snapshot, stash)

    def _advance(self, snapshot: "BoardSnapshot") -> Optional[Action]:
        """Step toward the plan head; None when the plan ran out."""
        position = snapshot.me
        if self.plan[0] == position:
            self.plan.pop(0)
            if snapshot.fruit_at(position):
                return Action.TAKE
        if not self.plan:
            return None
        return calculate_move_direction(self.plan[0], position)

    def _replan(self, snapshot: "BoardSnapshot", stash: FruitStash) -> Action:
        self.plan = []
        if stash.is_empty():
            return Action.PASS

        position = snapshot.me
        rarest = stash.types[0]
        target = stash.closest_location(rarest, position)
        if target is None:
            return Action.PASS
        if target == position:
            return Action.TAKE if snapshot.fruit_at(position) else Action.PASS

        box = canonical_box(position, target)
        waypoints = nodes_in_box(box, stash.all_locations(), lambda p: p != position)
        chains = self.enumerator.possible_paths(position, target, waypoints)
        best = self.selector.select(chains, stash.node_fruit_map(), stash.types)
        if best is None:
            return Action.PASS

        self.plan = list(best)
        self.replans += 1
        logger.info(
            f"Planned route to type {rarest} at {target}: {len(waypoints)} waypoints, "
            f"{len(chains)} chains, chose {' -> '.join(str(p) for p in best)}"
        )
        action = self._advance(snapshot)
        return action if action is not None else Action.PASS
