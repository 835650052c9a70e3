"""
Fruit Stash - per-episode record of known fruit, grouped by type.

The board is scanned once at the start of an episode. Later turns only
prune: a location is dropped as soon as its cell reads empty, and a type is
dropped once its category is decided (someone holds more than half of it).

Types are kept rarest first, i.e. ascending win count.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from .geometry import distance
from .models import FruitType, NodeFruitMap, Point

if TYPE_CHECKING:
    from host_client import BoardSnapshot

logger = logging.getLogger(__name__)


@dataclass
class FruitStash:
    locations: Dict[FruitType, List[Point]] = field(default_factory=dict)
    win_counts: Dict[FruitType, float] = field(default_factory=dict)
    types: List[FruitType] = field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: "BoardSnapshot") -> "FruitStash":
        """Scan the whole board, column by column."""
        stash = cls()
        for col, column in enumerate(snapshot.board):
            for row, fruit_type in enumerate(column):
                if fruit_type:
                    stash.locations.setdefault(fruit_type, []).append(Point(col, row))

        for fruit_type, points in stash.locations.items():
            total = snapshot.total_counts.get(fruit_type) or len(points)
            stash.win_counts[fruit_type] = total / 2

        # Stable sort keeps first-seen order between equally rare types
        stash.types = sorted(stash.locations, key=lambda t: stash.win_counts[t])
        stash._drop_decided(snapshot)
        logger.info(
            f"Fruit stash: {sum(len(p) for p in stash.locations.values())} fruit "
            f"in {len(stash.types)} types, rarity order {stash.types}"
        )
        return stash

    def update(self, snapshot: "BoardSnapshot") -> None:
        """Forget fruit that has been taken and categories that are settled."""
        for fruit_type, points in self.locations.items():
            self.locations[fruit_type] = [p for p in points if snapshot.fruit_at(p)]
        self._drop_decided(snapshot)

    def _drop_decided(self, snapshot: "BoardSnapshot") -> None:
        remaining = []
        for fruit_type in self.types:
            win = self.win_counts[fruit_type]
            mine = snapshot.my_counts.get(fruit_type, 0)
            theirs = snapshot.opponent_counts.get(fruit_type, 0)
            if not self.locations.get(fruit_type):
                logger.debug(f"Type {fruit_type} exhausted")
            elif mine > win or theirs > win:
                logger.debug(f"Type {fruit_type} decided ({mine} vs {theirs}, need {win})")
            else:
                remaining.append(fruit_type)
                continue
            self.locations.pop(fruit_type, None)
        self.types = remaining

    def closest_location(self, fruit_type: FruitType, position: Point) -> Optional[Point]:
        """Nearest known location of that type; ties go to the earlier one."""
        closest = None
        min_distance = None
        for location in self.locations.get(fruit_type, []):
            d = distance(position, location)
            if min_distance is None or d < min_distance:
                closest = location
                min_distance = d
        return closest

    def closest_any(self, position: Point) -> Optional[Point]:
        """Nearest known fruit of any undecided type."""
        return min(self.all_locations(), key=lambda p: distance(position, p), default=None)

    def all_locations(self) -> List[Point]:
        return [p for fruit_type in self.types for p in self.locations[fruit_type]]

    def node_fruit_map(self) -> NodeFruitMap:
        return {p: fruit_type for fruit_type in self.types for p in self.locations[fruit_type]}

    def is_empty(self) -> bool:
        return not self.types
