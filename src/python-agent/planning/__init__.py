"""
Route Planning Module - visit several fruit on the way instead of chasing one.

Provides:
- Point, Box: grid cells and canonical bounding boxes
- geometry: Manhattan distance, canonical_box, nodes_in_box
- ReachabilityGraphBuilder: pruned dominance graph toward a destination
- PathEnumerator: maximal waypoint chains over that graph
- PathSelector: rarity-weighted chain ranking
- FruitStash: known fruit per type, rarest first

Each refinement step is memoized in a RefinementCache that lives exactly as
long as one episode.
"""

from .models import Box, Chain, DominanceGraph, NodeFruitMap, Point
from .geometry import (
    InvalidPathRequest,
    calculate_move_direction,
    canonical_box,
    distance,
    nodes_in_box,
)
from .reachability import ReachabilityGraphBuilder, RefinementCache
from .paths import PathEnumerator, extend_partial_path, extract_paths
from .selector import PathSelector, fruit_count
from .fruit_stash import FruitStash

__all__ = [
    # Geometry
    "Point",
    "Box",
    "Chain",
    "DominanceGraph",
    "NodeFruitMap",
    "InvalidPathRequest",
    "distance",
    "canonical_box",
    "nodes_in_box",
    "calculate_move_direction",
    # Planning
    "RefinementCache",
    "ReachabilityGraphBuilder",
    "PathEnumerator",
    "extend_partial_path",
    "extract_paths",
    "PathSelector",
    "fruit_count",
    "FruitStash",
]
