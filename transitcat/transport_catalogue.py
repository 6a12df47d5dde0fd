"""Storage of stops, buses and road distances."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .geo import Coordinates, compute_distance


@dataclass
class RouteLength:
    """Length of a bus route: as the crow flies and along the roads."""

    geo: float = 0.0
    street: int = 0


@dataclass(eq=False)
class Stop:
    """A bus stop; ``buses`` holds the names of buses passing through it."""

    name: str
    coordinates: Coordinates
    buses: set[str] = field(default_factory=set)


@dataclass(eq=False)
class Bus:
    """A bus route through a sequence of stops."""

    name: str
    stops: list[Stop]
    is_roundtrip: bool = False
    route_length: RouteLength = field(default_factory=RouteLength)
    unique_stop_count: int = 0


class TransportCatalogue:
    """Holds stops and buses and answers lookups by name."""

    def __init__(self) -> None:
        self._buses: list[Bus] = []
        self._stops: list[Stop] = []
        self._bus_index: dict[str, Bus] = {}
        self._stop_index: dict[str, Stop] = {}
        self._distances: dict[tuple[str, str], int] = {}

    def add_bus(self, name: str, stop_names: Iterable[str], is_roundtrip: bool) -> None:
        """Add a bus; it is silently skipped if any stop is unknown."""
        stops: list[Stop] = []
        for stop_name in stop_names:
            stop = self._stop_index.get(stop_name)
            if stop is None:
                return
            stops.append(stop)

        length = RouteLength()
        factor = 1.0 if is_roundtrip else 2.0
        for prev, cur in zip(stops, stops[1:]):
            length.geo += factor * compute_distance(prev.coordinates, cur.coordinates)
            length.street += self.get_distance(prev.name, cur.name)
            if not is_roundtrip:
                length.street += self.get_distance(cur.name, prev.name)

        unique = {id(stop): stop for stop in stops}
        bus = Bus(name, stops, is_roundtrip, length, len(unique))
        self._buses.append(bus)
        self._bus_index.setdefault(name, bus)
        for stop in unique.values():
            stop.buses.add(name)

    def add_stop(self, name: str, coordinates: Coordinates) -> None:
        stop = Stop(name, coordinates)
        self._stops.append(stop)
        self._stop_index.setdefault(name, stop)

    def get_bus(self, name: str) -> Bus | None:
        return self._bus_index.get(name)

    def get_stop(self, name: str) -> Stop | None:
        return self._stop_index.get(name)

    def set_distance(self, stop_from: str, stop_to: str, length: int) -> None:
        """Record the road distance from one stop to another."""
        self._distances[(stop_from, stop_to)] = length

    def get_distance(self, stop_from: str, stop_to: str) -> int:
        """Road distance between stops, falling back to the reverse direction, else 0."""
        forward = self._distances.get((stop_from, stop_to))
        if forward is not None:
            return forward
        return self._distances.get((stop_to, stop_from), 0)

    def buses(self) -> list[Bus]:
        """All buses in the order they were added."""
        return list(self._buses)

    def stops(self) -> list[Stop]:
        """All stops in the order they were added."""
        return list(self._stops)