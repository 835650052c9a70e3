"""
Path selector - rank candidate chains by fruit coverage, rarest type first.

Two chains are compared on how many fruit of the rarest type they visit;
ties fall through to the next-rarest type, and so on. Chains tied on every
type keep their enumeration order, so the first one wins.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .models import Chain, FruitType, NodeFruitMap

logger = logging.getLogger(__name__)


def fruit_count(chain: Chain, node_fruit: NodeFruitMap) -> Dict[FruitType, int]:
    """Fruit per type along the chain; cells missing from the map add nothing."""
    return Counter(node_fruit[node] for node in chain if node in node_fruit)


def coverage_key(
    chain: Chain,
    node_fruit: NodeFruitMap,
    rarity_order: Sequence[FruitType],
) -> Tuple[int, ...]:
    counts = fruit_count(chain, node_fruit)
    return tuple(counts.get(fruit_type, 0) for fruit_type in rarity_order)


class PathSelector:
    """Picks the chain that is lexicographically best on rarity-ordered counts."""

    def select(
        self,
        chains: Iterable[Chain],
        node_fruit: NodeFruitMap,
        rarity_order: Sequence[FruitType],
    ) -> Optional[Chain]:
        candidates: List[Chain] = list(chains)
        if not candidates:
            return None
        # max() keeps the first of equal keys
        best = max(candidates, key=lambda c: coverage_key(c, node_fruit, rarity_order))
        logger.debug(
            f"Selected chain of {len(best)} nodes from {len(candidates)} candidates: "
            f"{coverage_key(best, node_fruit, rarity_order)}"
        )
        return best
