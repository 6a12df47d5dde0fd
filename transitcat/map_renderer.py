"""Rendering of a transport catalogue as an SVG map."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from . import svg
from .geo import Coordinates
from .transport_catalogue import Bus, TransportCatalogue

EPSILON = 1e-6


def is_zero(value: float) -> bool:
    """True if ``value`` is closer to zero than :data:`EPSILON`."""
    return abs(value) < EPSILON


@dataclass
class RenderSettings:
    """Sizes, offsets and colours used to draw the map."""

    width: float = 600.0
    height: float = 400.0
    padding: float = 50.0
    stop_radius: float = 5.0
    line_width: float = 14.0
    underlayer_width: float = 3.0
    bus_label_font_size: int = 20
    stop_label_font_size: int = 20
    bus_label_offset: svg.Point = field(default_factory=lambda: svg.Point(7, 15))
    stop_label_offset: svg.Point = field(default_factory=lambda: svg.Point(7, -3))
    underlayer_color: svg.Color = field(
        default_factory=lambda: svg.Rgba(255, 255, 255, 0.85)
    )
    color_palette: list[svg.Color] = field(default_factory=list)


class SphereProjector:
    """Projects geographic coordinates onto a flat picture of a given size."""

    def __init__(
        self,
        points: Iterable[Coordinates],
        max_width: float,
        max_height: float,
        padding: float,
    ) -> None:
        self._padding = padding
        self._min_lon = 0.0
        self._max_lat = 0.0
        self._zoom = 0.0

        points = list(points)
        if not points:
            return

        self._min_lon = min(p.lng for p in points)
        max_lon = max(p.lng for p in points)
        min_lat = min(p.lat for p in points)
        self._max_lat = max(p.lat for p in points)

        width_zoom = None
        if not is_zero(max_lon - self._min_lon):
            width_zoom = (max_width - 2 * padding) / (max_lon - self._min_lon)

        height_zoom = None
        if not is_zero(self._max_lat - min_lat):
            height_zoom = (max_height - 2 * padding) / (self._max_lat - min_lat)

        if width_zoom is not None and height_zoom is not None:
            self._zoom = min(width_zoom, height_zoom)
        elif width_zoom is not None:
            self._zoom = width_zoom
        elif height_zoom is not None:
            self._zoom = height_zoom

    def __call__(self, coords: Coordinates) -> svg.Point:
        return svg.Point(
            (coords.lng - self._min_lon) * self._zoom + self._padding,
            (self._max_lat - coords.lat) * self._zoom + self._padding,
        )


def _label_base(
    pos: svg.Point, offset: svg.Point, font_size: int, font_weight: str, text: str
) -> svg.Text:
    return (
        svg.Text()
        .set_position(pos)
        .set_offset(svg.Point(offset.x, offset.y))
        .set_font_size(font_size)
        .set_font_family("Verdana")
        .set_font_weight(font_weight)
        .set_data(text)
    )


def _underlayer(label: svg.Text, settings: RenderSettings) -> svg.Text:
    label.set_fill_color(settings.underlayer_color)
    label.set_stroke_color(settings.underlayer_color)
    label.set_stroke_width(settings.underlayer_width)
    label.set_stroke_line_cap(svg.StrokeLineCap.ROUND)
    label.set_stroke_line_join(svg.StrokeLineJoin.ROUND)
    return label


def make_bus_label(
    settings: RenderSettings, color: svg.Color, pos: svg.Point, text: str
) -> tuple[svg.Text, svg.Text]:
    """Return the underlayer and the coloured label of a bus name."""
    back = _label_base(
        pos, settings.bus_label_offset, settings.bus_label_font_size, "bold", text
    )
    front = copy.deepcopy(back)
    _underlayer(back, settings)
    front.set_fill_color(color)
    return back, front


def make_stop_label(
    settings: RenderSettings, pos: svg.Point, text: str
) -> tuple[svg.Text, svg.Text]:
    """Return the underlayer and the black label of a stop name."""
    back = _label_base(
        pos, settings.stop_label_offset, settings.stop_label_font_size, "", text
    )
    front = copy.deepcopy(back)
    _underlayer(back, settings)
    front.set_fill_color("black")
    return back, front


class MapRenderer:
    """Draws bus routes, their names, stops and stop names into an SVG document."""

    def __init__(self, catalogue: TransportCatalogue, settings: RenderSettings) -> None:
        self._catalogue = catalogue
        self._settings = settings
        self._projector = SphereProjector(
            (stop.coordinates for bus in catalogue.buses() for stop in bus.stops),
            settings.width,
            settings.height,
            settings.padding,
        )

    def render_to(self, document: svg.Document) -> None:
        """Add the whole map to ``document``."""
        self._render_buses(document)
        self._render_stops(document)

    def _render_buses(self, document: svg.Document) -> None:
        settings = self._settings
        palette = settings.color_palette
        labels: list[svg.Text] = []
        color_index = 0

        for bus in sorted(self._catalogue.buses(), key=lambda b: b.name):
            if not bus.stops:
                continue
            if not palette:
                raise ValueError("color palette is empty")

            route, first_point, last_point = self._make_route(bus)
            color = palette[color_index % len(palette)]
            route.set_stroke_color(color)
            route.set_stroke_width(settings.line_width)
            route.set_stroke_line_cap(svg.StrokeLineCap.ROUND)
            route.set_stroke_line_join(svg.StrokeLineJoin.ROUND)
            route.set_fill_color(svg.NONE_COLOR)

            labels.extend(make_bus_label(settings, color, first_point, bus.name))
            if not bus.is_roundtrip and bus.stops[0] is not bus.stops[-1]:
                labels.extend(make_bus_label(settings, color, last_point, bus.name))

            document.add(route)
            color_index += 1

        for label in labels:
            document.add(label)

    def _make_route(self, bus: Bus) -> tuple[svg.Polyline, svg.Point, svg.Point]:
        points = [self._projector(stop.coordinates) for stop in bus.stops]
        route = svg.Polyline()
        for point in points:
            route.add_point(point)
        if not bus.is_roundtrip and len(points) >= 2:
            for point in reversed(points[:-1]):
                route.add_point(point)
        return route, points[0], points[-1]

    def _render_stops(self, document: svg.Document) -> None:
        settings = self._settings
        labels: list[svg.Text] = []
        for stop in sorted(self._catalogue.stops(), key=lambda s: s.name):
            if not stop.buses:
                continue
            center = self._projector(stop.coordinates)
            circle = (
                svg.Circle()
                .set_center(center)
                .set_radius(settings.stop_radius)
                .set_fill_color("white")
            )
            document.add(circle)
            labels.extend(make_stop_label(settings, center, stop.name))

        for label in labels:
            document.add(label)