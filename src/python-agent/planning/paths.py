"""Path enumeration over a dominance graph."""

from typing import Iterable, List, Optional

from .models import Chain, DominanceGraph, Point
from .reachability import ReachabilityGraphBuilder, RefinementCache


def extend_partial_path(path: Chain, graph: DominanceGraph) -> List[Chain]:
    """One extension per successor of the last node, or [path] when terminal."""
    successors = graph.get(path[-1])
    if not successors:
        return [path]
    return [path + (successor,) for successor in successors]


def extract_paths(partials: List[Chain], graph: DominanceGraph) -> List[Chain]:
    """Grow every partial chain until none of them can be extended."""
    done: List[Chain] = []
    while partials:
        grown: List[Chain] = []
        for path in partials:
            extensions = extend_partial_path(path, graph)
            if extensions == [path]:
                done.append(path)
            else:
                grown.extend(extensions)
        partials = grown
    return done


class PathEnumerator:
    """Every maximal waypoint chain from a start to a destination."""

    def __init__(self, builder: Optional[ReachabilityGraphBuilder] = None):
        self.builder = builder or ReachabilityGraphBuilder(RefinementCache())

    def possible_paths(self, start: Point, end: Point, nodes: Iterable[Point]) -> List[Chain]:
        graph = self.builder.construct_restricted_paths(start, end, nodes)
        return extract_paths([(start,)], graph)
