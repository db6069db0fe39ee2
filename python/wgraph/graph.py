from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping, AbstractSet

class InvalidWeightError(ValueError):
    """Exception raised when an edge weight is negative."""
    pass

class RepInvariantError(AssertionError):
    """Exception raised when a graph's internal representation is inconsistent."""
    pass

@dataclass(frozen=True)
class Vertex:
    label: str

    def __str__(self) -> str:
        return f"{self.label}"

@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}: {self.weight}"

class Graph(ABC):
    """
    Weighted directed graph over string labels.

    Vertex labels are unique, every edge joins two existing vertices, every
    stored weight is positive and there is at most one edge per ordered
    (source, target) pair. A weight of zero means the edge does not exist.
    Containers handed out by the query methods never alias internal state.
    """

    @staticmethod
    def validate_weight(weight: int):
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise InvalidWeightError(f"Edge weight must be an integer: {weight!r}")
        if weight < 0:
            raise InvalidWeightError(f"Edge weight cannot be negative: {weight}")

    @abstractmethod
    def add(self, vertex: str) -> bool:
        """Add a vertex; return False if it was already present."""

    @abstractmethod
    def set(self, source: str, target: str, weight: int) -> int:
        """
        Add, update or remove the edge from source to target.

        Missing endpoints are created first. A weight of zero removes the
        edge. Returns the previous weight, or 0 if there was no such edge.

        Raises:
            InvalidWeightError: If weight is negative or not an integer. The
                graph is unchanged.
        """

    @abstractmethod
    def remove(self, vertex: str) -> bool:
        """Remove a vertex and every edge touching it; return False if absent."""

    @abstractmethod
    def vertices(self) -> AbstractSet[str]:
        """Return a snapshot of the vertex labels."""

    @abstractmethod
    def sources(self, target: str) -> Mapping[str, int]:
        """Return the vertices with an edge into target, mapped to its weight."""

    @abstractmethod
    def targets(self, source: str) -> Mapping[str, int]:
        """Return the vertices with an edge from source, mapped to its weight."""

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the graph has no vertices."""

    @abstractmethod
    def check_rep(self):
        """Raise RepInvariantError if the representation is inconsistent."""

    @abstractmethod
    def __str__(self) -> str:
        """Return a listing of the vertex count and every weighted edge."""
