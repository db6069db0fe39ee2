import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Iterable, Optional, List, Set, Mapping, FrozenSet

from .constants import Constants
from .graph import Graph, Edge, RepInvariantError

logger = logging.getLogger(__name__)

class ConcreteEdgesGraph(Graph):
    """
    Weighted directed graph stored as a set of vertex labels plus a flat
    list of edges.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[str]] = None,
        check_rep: Optional[bool] = None
    ):
        super().__init__()

        self._vertices: Set[str] = set()
        self._edges: List[Edge] = []
        self.checking: bool = Constants.check_rep_enabled() if check_rep is None else check_rep

        if vertices:
            for label in vertices:
                self.add(label)

    def __str__(self) -> str:
        lines = [f"Vertices: {len(self._vertices)} vertices", "Edges:"]
        lines.extend(str(e) for e in self._edges)
        return "\n".join(lines) + "\n"

    def add(self, vertex: str) -> bool:
        if vertex in self._vertices:
            return False

        self._vertices.add(vertex)
        logger.debug("Added vertex %s", vertex)
        self._verify()
        return True

    def set(self, source: str, target: str, weight: int) -> int:
        try:
            self.validate_weight(weight)
        except ValueError:
            logger.warning("Rejected weight %s for edge %s -> %s", weight, source, target)
            raise

        self.add(source)
        self.add(target)

        previous = 0
        for i, e in enumerate(self._edges):
            if e.source == source and e.target == target:
                previous = e.weight
                if weight == 0:
                    del self._edges[i]
                else:
                    self._edges[i] = replace(e, weight=weight)
                break
        else:
            if weight > 0:
                self._edges.append(Edge(source, target, weight))

        logger.debug("Set edge %s -> %s from %s to %s", source, target, previous, weight)
        self._verify()
        return previous

    def remove(self, vertex: str) -> bool:
        if vertex not in self._vertices:
            return False

        self._vertices.remove(vertex)
        self._edges = [e for e in self._edges if e.source != vertex and e.target != vertex]

        logger.debug("Removed vertex %s", vertex)
        self._verify()
        return True

    def vertices(self) -> FrozenSet[str]:
        return frozenset(self._vertices)

    def sources(self, target: str) -> Mapping[str, int]:
        return MappingProxyType({e.source: e.weight for e in self._edges if e.target == target})

    def targets(self, source: str) -> Mapping[str, int]:
        return MappingProxyType({e.target: e.weight for e in self._edges if e.source == source})

    def empty(self) -> bool:
        # No edges can exist without vertices, so the vertex set decides.
        return not self._vertices

    def check_rep(self):
        pairs = set()
        for e in self._edges:
            if e.source not in self._vertices:
                raise RepInvariantError(f"Edge source {e.source} is not a vertex")
            if e.target not in self._vertices:
                raise RepInvariantError(f"Edge target {e.target} is not a vertex")
            if isinstance(e.weight, bool) or not isinstance(e.weight, int) or e.weight <= 0:
                raise RepInvariantError(f"Edge {e} has invalid weight")
            if (e.source, e.target) in pairs:
                raise RepInvariantError(f"Duplicate edge {e.source} -> {e.target}")
            pairs.add((e.source, e.target))

    def _verify(self):
        if self.checking:
            self.check_rep()
