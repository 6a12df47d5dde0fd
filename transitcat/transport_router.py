"""Fastest-trip search over a transport catalogue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .graph import DirectedWeightedGraph, Edge, Router
from .transport_catalogue import Bus, Stop, TransportCatalogue


@dataclass
class RoutingSettings:
    """Waiting time at a stop in minutes and bus speed in km/h."""

    bus_wait_time: int = 0
    bus_velocity: float = 0.0


@dataclass
class WaitItem:
    stop_name: str
    time: float = 0.0


@dataclass
class BusItem:
    bus_name: str
    time: float = 0.0
    span_count: int = 0


@dataclass
class TripInfo:
    """Total time of a trip and its wait and ride steps."""

    total_time: float = 0.0
    items: list[Union[WaitItem, BusItem]] = field(default_factory=list)


@dataclass
class EdgeInfo:
    bus: Bus
    span_count: int = 0


class TransportRouter:
    """Builds a graph of bus rides between stops and finds fastest trips."""

    def __init__(self, catalogue: TransportCatalogue, settings: RoutingSettings) -> None:
        self._catalogue = catalogue
        self._settings = settings
        self._stop_to_vertex: dict[int, int] = {}
        self._vertex_to_stop: list[Stop] = []
        self._edges_info: list[EdgeInfo] = []
        self._build_graph()

    def _build_graph(self) -> None:
        for vertex, stop in enumerate(self._catalogue.stops()):
            self._stop_to_vertex[id(stop)] = vertex
            self._vertex_to_stop.append(stop)

        self._graph = DirectedWeightedGraph(len(self._vertex_to_stop))
        wait = self._settings.bus_wait_time
        distance = self._catalogue.get_distance

        for bus in self._catalogue.buses():
            stops = bus.stops
            for i, origin in enumerate(stops):
                forward = 0.0
                backward = 0.0
                origin_vertex = self._stop_to_vertex[id(origin)]
                for j in range(i + 1, len(stops)):
                    forward += distance(stops[j - 1].name, stops[j].name)
                    backward += distance(stops[j].name, stops[j - 1].name)
                    span_count = j - i
                    target_vertex = self._stop_to_vertex[id(stops[j])]

                    self._graph.add_edge(
                        Edge(origin_vertex, target_vertex, wait + self._ride_time(forward))
                    )
                    self._edges_info.append(EdgeInfo(bus, span_count))

                    if not bus.is_roundtrip:
                        self._graph.add_edge(
                            Edge(target_vertex, origin_vertex, wait + self._ride_time(backward))
                        )
                        self._edges_info.append(EdgeInfo(bus, span_count))

        self._router = Router(self._graph)

    def _ride_time(self, distance: float) -> float:
        """Minutes needed to cover ``distance`` metres."""
        return distance / (self._settings.bus_velocity * 1000.0 / 60.0)

    def find_route(self, start: Stop | None, finish: Stop | None) -> TripInfo | None:
        """Return the fastest trip between two stops, or None if there is none."""
        if start is None or finish is None:
            return None
        start_vertex = self._stop_to_vertex.get(id(start))
        finish_vertex = self._stop_to_vertex.get(id(finish))
        if start_vertex is None or finish_vertex is None:
            return None

        route = self._router.build_route(start_vertex, finish_vertex)
        if route is None:
            return None

        wait = self._settings.bus_wait_time
        trip = TripInfo(total_time=route.weight)
        for edge_id in route.edges:
            edge = self._graph.get_edge(edge_id)
            info = self._edges_info[edge_id]
            trip.items.append(WaitItem(self._vertex_to_stop[edge.source].name, wait))
            trip.items.append(BusItem(info.bus.name, edge.weight - wait, info.span_count))
        return trip