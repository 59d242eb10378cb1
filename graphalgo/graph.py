from typing import Iterator, List, NamedTuple, Optional, Union
import numpy as np
from .errors import GraphError, OutOfRangeError

Array = np.ndarray
Weight = Union[int, float]


class Edge(NamedTuple):
    """A weighted arc from `source` to `destination`."""
    source: int
    destination: int
    weight: Weight = 1

    def reversed(self) -> 'Edge':
        return Edge(self.destination, self.source, self.weight)

    def __repr__(self) -> str:
        return f"Edge({self.source}->{self.destination}, w={self.weight})"


class Graph:
    """
    Adjacency-list graph over the vertices 0..vertices-1.

    Undirected graphs store both arcs of every edge, so `edges_from` and `arcs`
    see each edge twice while `edges` returns every logical edge once, in
    insertion order. Unweighted graphs ignore repeated insertions of the same
    arc; weighted graphs keep parallel edges since their weights may differ.
    """

    def __init__(self, vertices: int, directed: bool = False, weighted: bool = False):
        if vertices < 0:
            raise ValueError(f'Vertex count must be non-negative, got {vertices}.')
        self.vertices: int = int(vertices)
        self.directed: bool = directed
        self.weighted: bool = weighted
        self._adj: List[List[Edge]] = [[] for _ in range(self.vertices)]
        self._edges: List[Edge] = []

    def check_vertex(self, v: int, role: str = 'Vertex'):
        if not 0 <= v < self.vertices:
            raise OutOfRangeError(f'{role} index {v} is out of bounds for {self.vertices} vertices.')

    def add_edge(self, source: int, destination: int, weight: Optional[Weight] = None) -> None:
        """Adds an edge, and its reverse arc when the graph is undirected."""
        self.check_vertex(source, 'Source')
        self.check_vertex(destination, 'Destination')

        if weight is None:
            weight = 1
        elif not self.weighted:
            raise GraphError('Edge weights require a graph built with weighted=True.')

        if not self.weighted:
            if any(e.destination == destination for e in self._adj[source]):
                return

        edge = Edge(source, destination, weight)
        self._edges.append(edge)
        self._adj[source].append(edge)
        if not self.directed and source != destination:
            self._adj[destination].append(edge.reversed())

    def neighbors(self, u: int) -> List[int]:
        self.check_vertex(u)
        return [e.destination for e in self._adj[u]]

    def edges_from(self, u: int) -> List[Edge]:
        self.check_vertex(u)
        return list(self._adj[u])

    def arcs(self) -> Iterator[Edge]:
        """Yields every stored arc, vertex by vertex."""
        for adj in self._adj:
            yield from adj

    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def has_negative_weights(self) -> bool:
        return any(e.weight < 0 for e in self._edges)

    def transpose(self) -> 'Graph':
        """Returns a new graph with every arc reversed."""
        transposed = Graph(self.vertices, directed=self.directed, weighted=self.weighted)
        for u in range(self.vertices):
            for e in self._adj[u]:
                transposed._adj[e.destination].append(e.reversed())
        transposed._edges = [e.reversed() for e in self._edges]
        return transposed

    def to_matrix(self, no_edge: float = 0.0) -> Array:
        """Dense weight matrix; parallel arcs keep their minimum weight."""
        A = np.full((self.vertices, self.vertices), no_edge, dtype=float)
        seen = np.zeros((self.vertices, self.vertices), dtype=bool)
        for e in self.arcs():
            if not seen[e.source, e.destination] or e.weight < A[e.source, e.destination]:
                A[e.source, e.destination] = e.weight
            seen[e.source, e.destination] = True
        return A

    @classmethod
    def from_matrix(cls, A: Array, directed: bool = True, weighted: bool = False) -> 'Graph':
        """
        Builds a graph from a square matrix whose non-zero entries are edges.

        For undirected graphs only the upper triangle (diagonal included) is
        read, so a symmetric matrix yields each edge once.
        """
        if A.ndim != 2 or A.shape[0] != A.shape[1]:
            raise ValueError(f'Expected a square matrix, got shape {A.shape}.')
        graph = cls(A.shape[0], directed=directed, weighted=weighted)
        for i in range(A.shape[0]):
            for j in range(i if not directed else 0, A.shape[0]):
                if A[i, j] != 0:
                    graph.add_edge(i, j, A[i, j].item() if weighted else None)
        return graph

    def __len__(self) -> int:
        return self.vertices

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        weights = "weighted" if self.weighted else "unweighted"
        return f"<Graph ({kind}, {weights}) vertices={self.vertices} edges={self.num_edges}>"
