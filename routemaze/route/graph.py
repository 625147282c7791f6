"""Directed graph of locations joined by routes carrying distance, time and cost."""

from __future__ import annotations

from dataclasses import dataclass, field

DISTANCE = 0
TIME = 1
COST = 2


class GraphError(Exception):
    """Raised when a vertex or edge that an operation needs is missing or duplicated."""


@dataclass(eq=False)
class Vertex:
    """A location identified by its id, with two coordinates."""

    id: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def coordinates(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return (self.latitude, self.longitude)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class Edge:
    """A directed route between two vertices with three weights."""

    source: str = ""
    destination: str = ""
    distance: float = 0.0
    time: float = 0.0
    cost: float = 0.0

    def weight(self, preference_type: int = DISTANCE) -> float:
        """Return the weight for 0 (distance), 1 (time) or 2 (cost); anything else gives distance."""
        if preference_type == TIME:
            return self.time
        if preference_type == COST:
            return self.cost
        return self.distance


@dataclass
class Graph:
    """A weighted directed graph keyed by vertex id."""

    _vertices: dict[str, Vertex] = field(default_factory=dict)
    _adjacency: dict[str, list[Edge]] = field(default_factory=dict)

    def add_vertex(self, vertex: Vertex) -> None:
        """Add a vertex; its id must not be in use."""
        if vertex.id in self._vertices:
            raise GraphError(f"Vertex with ID {vertex.id} already exists")
        self._vertices[vertex.id] = vertex
        self._adjacency[vertex.id] = []

    def remove_vertex(self, vertex_id: str) -> None:
        """Remove a vertex together with every edge leaving or entering it."""
        if vertex_id not in self._vertices:
            raise GraphError(f"Vertex with ID {vertex_id} not found")
        self._adjacency.pop(vertex_id, None)
        for source, edges in self._adjacency.items():
            self._adjacency[source] = [e for e in edges if e.destination != vertex_id]
        del self._vertices[vertex_id]

    def vertex(self, vertex_id: str) -> Vertex:
        """Return the vertex with the given id."""
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise GraphError(f"Vertex with ID {vertex_id} not found") from None

    def add_edge(self, edge: Edge) -> None:
        """Add an edge between two existing vertices."""
        if edge.source not in self._vertices or edge.destination not in self._vertices:
            raise GraphError("One or both vertices not found")
        self._adjacency.setdefault(edge.source, []).append(edge)

    def remove_edge(self, source: str, destination: str) -> None:
        """Remove every edge from ``source`` to ``destination``; unknown sources are ignored."""
        edges = self._adjacency.get(source)
        if edges is None:
            return
        self._adjacency[source] = [e for e in edges if e.destination != destination]

    def edge_weight(self, source: str, destination: str, preference_type: int = DISTANCE) -> float:
        """Return the chosen weight of the first edge from ``source`` to ``destination``."""
        edges = self._adjacency.get(source)
        if edges is None:
            raise GraphError("Source vertex not found")
        for edge in edges:
            if edge.destination == destination:
                return edge.weight(preference_type)
        raise GraphError("Edge not found")

    def neighbors(self, vertex_id: str) -> list[str]:
        """Return the destination ids of the edges leaving a vertex, in insertion order."""
        return [e.destination for e in self._adjacency.get(vertex_id, [])]

    def has_vertex(self, vertex_id: str) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, source: str, destination: str) -> bool:
        return any(e.destination == destination for e in self._adjacency.get(source, []))

    def vertices(self) -> list[Vertex]:
        """Return all vertices."""
        return list(self._vertices.values())

    def edges(self) -> list[Edge]:
        """Return all edges, grouped by source vertex."""
        return [edge for edges in self._adjacency.values() for edge in edges]