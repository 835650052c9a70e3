"""
Reachability graph builder - dominance graph over waypoint candidates.

Enumerating every monotone lattice walk between two cells is combinatorial
in their distance. Instead each waypoint keeps only its immediate successors
toward the destination: a candidate v is dropped from u's successors when v
also lies in the box of another candidate w, since v stays reachable via w.

    builder = ReachabilityGraphBuilder(RefinementCache())
    graph = builder.construct_restricted_paths(me, target, waypoints)

Refinement steps are memoized per (destination, node set) in a
RefinementCache, which belongs to a single episode.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Set, Tuple

from .geometry import InvalidPathRequest, canonical_box, nodes_in_box
from .models import DominanceGraph, Point

logger = logging.getLogger(__name__)

CacheKey = Tuple[Point, Tuple[Point, ...]]


@dataclass
class Refinement:
    """Result of refine(): two-step-reachable nodes and per-node candidates."""
    reachable_in_two_steps: Set[Point] = field(default_factory=set)
    refined_graph: Dict[Point, Tuple[Point, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class RefinementStep:
    """Nodes left as immediate successors, plus the candidates of every node."""
    filtered_nodes: Tuple[Point, ...]
    graph: Dict[Point, Tuple[Point, ...]]


class RefinementCache:
    """Memo table for refinement steps, scoped to one episode."""

    def __init__(self):
        self._entries: Dict[CacheKey, RefinementStep] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(end: Point, nodes: Iterable[Point]) -> CacheKey:
        return (end, tuple(sorted(set(nodes))))

    def get(self, end: Point, nodes: Iterable[Point]) -> Optional[RefinementStep]:
        step = self._entries.get(self.key(end, nodes))
        if step is None:
            self.misses += 1
        else:
            self.hits += 1
        return step

    def put(self, end: Point, nodes: Iterable[Point], step: RefinementStep) -> None:
        self._entries[self.key(end, nodes)] = step

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)


def canonical_nodes(end: Point, nodes: Iterable[Point]) -> Tuple[Point, ...]:
    """Deduplicate, add the destination, and sort into a stable order."""
    return tuple(sorted(set(nodes) | {end}))


def refine(end: Point, nodes: Tuple[Point, ...]) -> Refinement:
    """
    For every node, collect the other nodes inside its box toward end.

    The destination itself has no box toward end and never gets an entry.
    """
    result = Refinement()
    for node in nodes:
        if node == end:
            continue
        box = canonical_box(node, end)
        candidates = nodes_in_box(box, nodes, lambda other, node=node: other != node)
        if candidates:
            result.refined_graph[node] = tuple(candidates)
            result.reachable_in_two_steps.update(candidates)
    return result


class ReachabilityGraphBuilder:
    """Builds pruned successor graphs, memoizing refinement steps."""

    def __init__(self, cache: Optional[RefinementCache] = None):
        self.cache = cache if cache is not None else RefinementCache()

    def single_refinement_step(self, end: Point, nodes: Tuple[Point, ...]) -> RefinementStep:
        cached = self.cache.get(end, nodes)
        if cached is not None:
            logger.debug(f"Refinement cache hit: end={end} nodes={len(nodes)}")
            return cached

        refinement = refine(end, nodes)
        filtered = tuple(n for n in nodes if n not in refinement.reachable_in_two_steps)
        step = RefinementStep(filtered_nodes=filtered, graph=refinement.refined_graph)
        self.cache.put(end, nodes, step)
        return step

    def construct_restricted_paths(
        self,
        start: Point,
        end: Point,
        nodes: Iterable[Point],
    ) -> DominanceGraph:
        """
        Dominance graph over {start} plus nodes, every edge pointing toward end.

        Nodes are expected inside canonical_box(start, end) and must not
        contain start. The destination is added when missing.

        Raises:
            InvalidPathRequest: start and end are the same cell
        """
        if start == end:
            raise InvalidPathRequest(f"path request from {start} to itself")
        graph: DominanceGraph = {}
        self._expand(start, end, canonical_nodes(end, nodes), graph)
        return graph

    def _expand(
        self,
        start: Point,
        end: Point,
        nodes: Tuple[Point, ...],
        graph: DominanceGraph,
    ) -> None:
        step = self.single_refinement_step(end, nodes)
        if not step.graph:
            # Every candidate already is a frontier node
            graph[start] = nodes
            return

        graph[start] = step.filtered_nodes
        for key in step.graph:
            # A node's candidates are all nodes in its box, so its subgraph
            # is the same whichever layer reaches it first
            if key in graph:
                continue
            self._expand(key, end, step.graph[key], graph)
