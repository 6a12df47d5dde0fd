import pytest

from transitcat.geo import Coordinates, compute_distance
from transitcat.transport_catalogue import TransportCatalogue


@pytest.fixture
def catalogue():
    cat = TransportCatalogue()
    cat.add_stop("A", Coordinates(55.611087, 37.20829))
    cat.add_stop("B", Coordinates(55.595884, 37.209755))
    cat.add_stop("C", Coordinates(55.632761, 37.333324))
    cat.set_distance("A", "B", 3900)
    cat.set_distance("B", "A", 4000)
    cat.set_distance("B", "C", 9900)
    return cat


def test_get_stop_and_missing(catalogue):
    stop = catalogue.get_stop("A")
    assert stop.name == "A"
    assert stop.coordinates == Coordinates(55.611087, 37.20829)
    assert catalogue.get_stop("Z") is None
    assert catalogue.get_bus("Z") is None


def test_distance_fallback(catalogue):
    assert catalogue.get_distance("A", "B") == 3900
    assert catalogue.get_distance("B", "A") == 4000
    assert catalogue.get_distance("C", "B") == 9900
    assert catalogue.get_distance("A", "C") == 0


def test_roundtrip_bus(catalogue):
    catalogue.add_bus("1", ["A", "B", "C", "A"], True)
    bus = catalogue.get_bus("1")
    assert bus.is_roundtrip
    assert bus.unique_stop_count == 3
    assert [s.name for s in bus.stops] == ["A", "B", "C", "A"]
    expected_street = (
        catalogue.get_distance("A", "B")
        + catalogue.get_distance("B", "C")
        + catalogue.get_distance("C", "A")
    )
    assert bus.route_length.street == expected_street
    a, b, c = (catalogue.get_stop(n).coordinates for n in "ABC")
    expected_geo = compute_distance(a, b) + compute_distance(b, c) + compute_distance(c, a)
    assert bus.route_length.geo == pytest.approx(expected_geo)


def test_linear_bus_counts_both_directions(catalogue):
    catalogue.add_bus("2", ["A", "B"], False)
    bus = catalogue.get_bus("2")
    assert bus.route_length.street == 3900 + 4000
    a, b = catalogue.get_stop("A").coordinates, catalogue.get_stop("B").coordinates
    assert bus.route_length.geo == pytest.approx(2 * compute_distance(a, b))


def test_bus_with_unknown_stop_is_skipped(catalogue):
    catalogue.add_bus("3", ["A", "Z"], True)
    assert catalogue.get_bus("3") is None
    assert catalogue.buses() == []
    assert catalogue.get_stop("A").buses == set()


def test_stops_learn_their_buses(catalogue):
    catalogue.add_bus("10", ["A", "B"], False)
    catalogue.add_bus("2", ["B", "C"], False)
    assert catalogue.get_stop("B").buses == {"10", "2"}
    assert catalogue.get_stop("A").buses == {"10"}
    assert catalogue.get_stop("C").buses == {"2"}


def test_listing_keeps_insertion_order(catalogue):
    catalogue.add_bus("x", ["A"], True)
    catalogue.add_bus("y", ["B"], True)
    assert [b.name for b in catalogue.buses()] == ["x", "y"]
    assert [s.name for s in catalogue.stops()] == ["A", "B", "C"]


def test_duplicate_stop_keeps_first_lookup(catalogue):
    catalogue.add_stop("A", Coordinates(0.0, 0.0))
    assert catalogue.get_stop("A").coordinates == Coordinates(55.611087, 37.20829)
    assert len(catalogue.stops()) == 4


def test_set_distance_overwrites(catalogue):
    catalogue.set_distance("A", "B", 100)
    assert catalogue.get_distance("A", "B") == 100