"""Directed weighted graph and an all-pairs shortest path router."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class Edge:
    """A directed edge from ``source`` to ``target`` with a weight."""

    source: int
    target: int
    weight: float


class DirectedWeightedGraph:
    """A graph with a fixed number of vertices and a growing list of edges."""

    def __init__(self, vertex_count: int = 0) -> None:
        self._edges: list[Edge] = []
        self._incidence: list[list[int]] = [[] for _ in range(vertex_count)]

    def add_edge(self, edge: Edge) -> int:
        """Add an edge and return its id."""
        self._check_vertex(edge.source)
        self._edges.append(edge)
        edge_id = len(self._edges) - 1
        self._incidence[edge.source].append(edge_id)
        return edge_id

    def vertex_count(self) -> int:
        return len(self._incidence)

    def edge_count(self) -> int:
        return len(self._edges)

    def get_edge(self, edge_id: int) -> Edge:
        if not 0 <= edge_id < len(self._edges):
            raise IndexError(f"edge {edge_id} is out of range")
        return self._edges[edge_id]

    def incident_edges(self, vertex: int) -> tuple[int, ...]:
        """Return the ids of the edges leaving ``vertex``."""
        self._check_vertex(vertex)
        return tuple(self._incidence[vertex])

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._incidence):
            raise IndexError(f"vertex {vertex} is out of range")


@dataclass
class RouteInfo:
    """Total weight of a route and the ids of the edges along it."""

    weight: float
    edges: list[int] = field(default_factory=list)


class _RouteData(NamedTuple):
    weight: float
    prev_edge: int | None


class Router:
    """Precomputes shortest routes between every pair of vertices."""

    def __init__(self, graph: DirectedWeightedGraph) -> None:
        self._graph = graph
        count = graph.vertex_count()
        data: list[list[_RouteData | None]] = [[None] * count for _ in range(count)]

        for vertex in range(count):
            data[vertex][vertex] = _RouteData(0, None)
            for edge_id in graph.incident_edges(vertex):
                edge = graph.get_edge(edge_id)
                if edge.weight < 0:
                    raise ValueError("Edges' weights should be non-negative")
                current = data[vertex][edge.target]
                if current is None or current.weight > edge.weight:
                    data[vertex][edge.target] = _RouteData(edge.weight, edge_id)

        for through in range(count):
            through_row = data[through]
            for row in data:
                route_from = row[through]
                if route_from is None:
                    continue
                for target, route_to in enumerate(through_row):
                    if route_to is None:
                        continue
                    candidate = route_from.weight + route_to.weight
                    current = row[target]
                    if current is None or candidate < current.weight:
                        prev = (
                            route_to.prev_edge
                            if route_to.prev_edge is not None
                            else route_from.prev_edge
                        )
                        row[target] = _RouteData(candidate, prev)

        self._data = data

    def build_route(self, start: int, finish: int) -> RouteInfo | None:
        """Return the shortest route from ``start`` to ``finish``, or None."""
        count = len(self._data)
        for vertex in (start, finish):
            if not 0 <= vertex < count:
                raise IndexError(f"vertex {vertex} is out of range")
        route = self._data[start][finish]
        if route is None:
            return None
        edges: list[int] = []
        edge_id = route.prev_edge
        while edge_id is not None:
            edges.append(edge_id)
            step = self._data[start][self._graph.get_edge(edge_id).source]
            edge_id = step.prev_edge if step is not None else None
        edges.reverse()
        return RouteInfo(route.weight, edges)