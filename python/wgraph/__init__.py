from .graph import Graph, Vertex, Edge, InvalidWeightError, RepInvariantError
from .constants import Constants
from .verticesgraph import ConcreteVerticesGraph
from .edgesgraph import ConcreteEdgesGraph
