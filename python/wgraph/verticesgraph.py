import logging
from types import MappingProxyType
from typing import Iterable, Optional, List, Dict, Mapping, FrozenSet

from .constants import Constants
from .graph import Graph, Vertex, RepInvariantError

logger = logging.getLogger(__name__)

class ConcreteVerticesGraph(Graph):
    """
    Weighted directed graph stored as a list of vertices plus an adjacency
    map from each source label to its (target label -> weight) map.

    Every vertex label has an adjacency entry, possibly empty, and every
    adjacency key is a vertex label.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[str]] = None,
        check_rep: Optional[bool] = None
    ):
        super().__init__()

        self._vertices: List[Vertex] = []
        self._adjacency: Dict[str, Dict[str, int]] = {}
        self.checking: bool = Constants.check_rep_enabled() if check_rep is None else check_rep

        if vertices:
            for label in vertices:
                self.add(label)

    def __str__(self) -> str:
        lines = [f"Vertices: {len(self._vertices)} vertices", "Edges:"]
        for v in self._vertices:
            for target, weight in self._adjacency[v.label].items():
                lines.append(f"{v} -> {target}: {weight}")
        return "\n".join(lines) + "\n"

    def add(self, vertex: str) -> bool:
        for v in self._vertices:
            if v.label == vertex:
                return False

        self._vertices.append(Vertex(vertex))
        self._adjacency[vertex] = {}
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

        out_edges = self._adjacency[source]
        previous = out_edges.get(target, 0)

        if weight == 0:
            out_edges.pop(target, None)
        else:
            out_edges[target] = weight

        logger.debug("Set edge %s -> %s from %s to %s", source, target, previous, weight)
        self._verify()
        return previous

    def remove(self, vertex: str) -> bool:
        if vertex not in self._adjacency:
            return False

        del self._adjacency[vertex]
        for out_edges in self._adjacency.values():
            out_edges.pop(vertex, None)
        self._vertices = [v for v in self._vertices if v.label != vertex]

        logger.debug("Removed vertex %s", vertex)
        self._verify()
        return True

    def vertices(self) -> FrozenSet[str]:
        return frozenset(v.label for v in self._vertices)

    def sources(self, target: str) -> Mapping[str, int]:
        result = {}
        for source, out_edges in self._adjacency.items():
            if target in out_edges:
                result[source] = out_edges[target]
        return MappingProxyType(result)

    def targets(self, source: str) -> Mapping[str, int]:
        return MappingProxyType(dict(self._adjacency.get(source, {})))

    def empty(self) -> bool:
        return not self._vertices

    def check_rep(self):
        labels = [v.label for v in self._vertices]
        if len(labels) != len(set(labels)):
            raise RepInvariantError(f"Duplicate vertex labels: {labels}")

        if set(labels) != set(self._adjacency.keys()):
            raise RepInvariantError("Adjacency keys do not match vertex labels")

        for source, out_edges in self._adjacency.items():
            for target, weight in out_edges.items():
                if target not in self._adjacency:
                    raise RepInvariantError(f"Edge target {target} is not a vertex")
                if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                    raise RepInvariantError(f"Edge {source} -> {target} has invalid weight {weight}")

    def _verify(self):
        if self.checking:
            self.check_rep()
