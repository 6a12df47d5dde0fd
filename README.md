# transitcat

A catalogue of public transport stops and bus routes. It answers questions
about stops and buses, finds the fastest trip between two stops, and draws
the route network as an SVG map. All input and output is JSON.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

`transitcat` reads a single JSON document from standard input and writes
the answers to its requests, as a JSON array, to standard output:

```
transitcat < requests.json
```

The command takes no options besides `--help`.

The input document must hold four sections:

- `base_requests` – the stops (`type` `"Stop"`, `name`, `latitude`,
  `longitude` and `road_distances` to other stops in metres) and the buses
  (`type` `"Bus"`, `name`, list of `stops`, `is_roundtrip`). All stops are
  added before any bus. A bus that names an unknown stop is left out.
- `render_settings` – `width`, `height`, `padding`, `line_width`,
  `stop_radius`, `bus_label_font_size`, `bus_label_offset`,
  `stop_label_font_size`, `stop_label_offset`, `underlayer_color`,
  `underlayer_width` and `color_palette`. A colour is a name string, an
  `[r, g, b]` array or an `[r, g, b, opacity]` array.
- `routing_settings` – `bus_wait_time` in minutes and `bus_velocity` in km/h.
- `stat_requests` – the questions to answer, each with an `id`:
  - `Bus` (`name`) – `curvature` (road length divided by straight-line
    length), `route_length`, `stop_count` and `unique_stop_count`. A bus
    that is not a round trip runs there and back, so its stop count is
    `2 * n - 1` and both lengths cover both directions.
  - `Stop` (`name`) – `buses`, the sorted names of buses through the stop.
  - `Map` – `map`, the SVG rendering of the whole network as a string.
  - `Route` (`from`, `to`) – the fastest trip as `items` (`Wait` items with
    `stop_name` and `time`, `Bus` items with `bus`, `span_count` and `time`)
    and `total_time`, in minutes.

Each answer carries the `request_id` of its request. Unknown buses or stops
and unreachable destinations are answered with `"error_message": "not found"`.
Keys in the output are sorted, and non-integer numbers are written with up to
six significant digits.

Road distances are looked up in the given direction first and in the
reverse direction if that is missing; a missing distance counts as 0.

## Library use

The building blocks can be used directly:

```python
from transitcat.geo import Coordinates, compute_distance
from transitcat.transport_catalogue import TransportCatalogue
from transitcat.transport_router import RoutingSettings, TransportRouter

catalogue = TransportCatalogue()
catalogue.add_stop("Harbour", Coordinates(55.611087, 37.20829))
catalogue.add_stop("Market", Coordinates(55.595884, 37.209755))
catalogue.set_distance("Harbour", "Market", 3900)
catalogue.add_bus("14", ["Harbour", "Market"], False)

bus = catalogue.get_bus("14")
print(bus.route_length.street, bus.unique_stop_count)

router = TransportRouter(catalogue, RoutingSettings(bus_wait_time=6, bus_velocity=40.0))
trip = router.find_route(catalogue.get_stop("Harbour"), catalogue.get_stop("Market"))
print(trip.total_time)
```

Modules:

- `transitcat.geo` – `Coordinates` and `compute_distance`, the
  great-circle distance in metres.
- `transitcat.transport_catalogue` – `TransportCatalogue` holding `Stop`
  and `Bus` records with their `RouteLength`.
- `transitcat.graph` – `DirectedWeightedGraph` of `Edge`s and `Router`,
  which precomputes shortest routes between all vertex pairs and returns a
  `RouteInfo` from `build_route`.
- `transitcat.transport_router` – `TransportRouter`, whose `find_route`
  returns a `TripInfo` of `WaitItem`s and `BusItem`s, or `None`.
- `transitcat.jsonio` – a JSON document model (`Node`, `Document`) with
  `load`, `loads`, `dump` and `dumps`; malformed text raises `ParsingError`.
- `transitcat.json_builder` – `Builder`, a chained builder for JSON nodes
  that raises `RuntimeError` on calls out of order.
- `transitcat.svg` – SVG primitives (`Circle`, `Polyline`, `Text`) and a
  `Document` that renders them.
- `transitcat.map_renderer` – `RenderSettings`, `SphereProjector` and
  `MapRenderer`, which draws the catalogue onto an SVG document.
- `transitcat.json_reader` – `JsonReader`, whose `read_json` processes a
  request document and returns the answers as a `Document`, and `main`,
  the command line entry point.