"""Reads JSON requests, fills the catalogue and answers the stat queries."""

from __future__ import annotations

import argparse
import io
import math
import sys
from typing import TextIO

from . import svg
from .geo import Coordinates
from .json_builder import ArrayItemContext, Builder
from .jsonio import Document, Node, dumps, load
from .map_renderer import MapRenderer, RenderSettings
from .transport_catalogue import TransportCatalogue
from .transport_router import RoutingSettings, TransportRouter, WaitItem

NOT_FOUND = "not found"


def read_color(node: Node) -> svg.Color:
    """Turn a colour node (a name, an RGB or an RGBA array) into an SVG colour."""
    if node.is_string():
        return node.as_string()
    if node.is_array():
        parts = node.as_array()
        if len(parts) == 3:
            red, green, blue = (part.as_int() & 0xFF for part in parts)
            return svg.Rgb(red, green, blue)
        if len(parts) == 4:
            red, green, blue = (part.as_int() & 0xFF for part in parts[:3])
            return svg.Rgba(red, green, blue, parts[3].as_double())
    return svg.NONE_COLOR


def _read_point(node: Node) -> svg.Point:
    pair = node.as_array()
    return svg.Point(pair[0].as_double(), pair[1].as_double())


def _curvature(street: int, geo: float) -> float:
    if geo == 0:
        return math.nan if street == 0 else math.copysign(math.inf, street)
    return street / geo


class JsonReader:
    """Processes a JSON request document against a transport catalogue."""

    def __init__(self, catalogue: TransportCatalogue) -> None:
        self.catalogue = catalogue
        self._routing_settings = RoutingSettings()

    def read_json(self, stream: TextIO) -> Document:
        """Read the whole request document and return the answers to its stat requests."""
        document = load(stream)
        self._apply_base_requests(document.get_requests("base_requests"))

        settings = self._apply_render_settings(document.get_requests("render_settings"))
        svg_document = svg.Document()
        MapRenderer(self.catalogue, settings).render_to(svg_document)

        self._apply_routing_settings(document.get_requests("routing_settings"))
        return self._answer_stat_requests(document.get_requests("stat_requests"), svg_document)

    def _apply_base_requests(self, requests: Node) -> None:
        entries = [request.as_map() for request in requests.as_array()]
        for fields in entries:
            if fields["type"].as_string() != "Stop":
                continue
            name = fields["name"].as_string()
            self.catalogue.add_stop(
                name,
                Coordinates(fields["latitude"].as_double(), fields["longitude"].as_double()),
            )
            for other, length in fields["road_distances"].as_map().items():
                self.catalogue.set_distance(name, other, length.as_int())

        for fields in entries:
            if fields["type"].as_string() != "Bus":
                continue
            self.catalogue.add_bus(
                fields["name"].as_string(),
                [stop.as_string() for stop in fields["stops"].as_array()],
                fields["is_roundtrip"].as_bool(),
            )

    @staticmethod
    def _apply_render_settings(node: Node) -> RenderSettings:
        fields = node.as_map()
        return RenderSettings(
            width=fields["width"].as_double(),
            height=fields["height"].as_double(),
            padding=fields["padding"].as_double(),
            stop_radius=fields["stop_radius"].as_double(),
            line_width=fields["line_width"].as_double(),
            underlayer_width=fields["underlayer_width"].as_double(),
            bus_label_font_size=fields["bus_label_font_size"].as_int(),
            stop_label_font_size=fields["stop_label_font_size"].as_int(),
            bus_label_offset=_read_point(fields["bus_label_offset"]),
            stop_label_offset=_read_point(fields["stop_label_offset"]),
            underlayer_color=read_color(fields["underlayer_color"]),
            color_palette=[read_color(color) for color in fields["color_palette"].as_array()],
        )

    def _apply_routing_settings(self, node: Node) -> None:
        fields = node.as_map()
        self._routing_settings = RoutingSettings(
            bus_wait_time=fields["bus_wait_time"].as_int(),
            bus_velocity=fields["bus_velocity"].as_double(),
        )

    def _answer_stat_requests(self, requests: Node, svg_document: svg.Document) -> Document:
        answers = Builder().start_array()
        router = TransportRouter(self.catalogue, self._routing_settings)
        map_text: str | None = None

        for request in requests.as_array():
            fields = request.as_map()
            kind = fields["type"].as_string()
            if kind == "Route":
                self._answer_route(fields, answers, router)
            elif kind == "Map":
                if map_text is None:
                    buffer = io.StringIO()
                    svg_document.render(buffer)
                    map_text = buffer.getvalue()
                (
                    answers.start_dict()
                    .key("map").value(map_text)
                    .key("request_id").value(fields["id"].as_int())
                    .end_dict()
                )
            elif kind == "Stop":
                self._answer_stop(fields, answers)
            elif kind == "Bus":
                self._answer_bus(fields, answers)

        return Document(answers.end_array().build())

    def _answer_stop(self, fields: dict[str, Node], answers: ArrayItemContext) -> None:
        answer = answers.start_dict()
        answer.key("request_id").value(fields["id"].as_int())
        stop = self.catalogue.get_stop(fields["name"].as_string())
        if stop is None:
            answer.key("error_message").value(NOT_FOUND)
        else:
            buses = answer.key("buses").start_array()
            for name in sorted(stop.buses):
                buses.value(name)
            buses.end_array()
        answer.end_dict()

    def _answer_bus(self, fields: dict[str, Node], answers: ArrayItemContext) -> None:
        answer = answers.start_dict()
        answer.key("request_id").value(fields["id"].as_int())
        bus = self.catalogue.get_bus(fields["name"].as_string())
        if bus is None:
            answer.key("error_message").value(NOT_FOUND)
        else:
            count = len(bus.stops)
            stop_count = count if bus.is_roundtrip else count * 2 - 1
            length = bus.route_length
            answer.key("curvature").value(_curvature(length.street, length.geo))
            answer.key("route_length").value(length.street)
            answer.key("stop_count").value(stop_count)
            answer.key("unique_stop_count").value(bus.unique_stop_count)
        answer.end_dict()

    def _answer_route(
        self, fields: dict[str, Node], answers: ArrayItemContext, router: TransportRouter
    ) -> None:
        request_id = fields["id"].as_int()
        start = self.catalogue.get_stop(fields["from"].as_string())
        finish = self.catalogue.get_stop(fields["to"].as_string())
        trip = router.find_route(start, finish)

        if trip is None:
            (
                answers.start_dict()
                .key("request_id").value(request_id)
                .key("error_message").value(NOT_FOUND)
                .end_dict()
            )
            return

        items = answers.start_dict().key("items").start_array()
        for item in trip.items:
            if isinstance(item, WaitItem):
                (
                    items.start_dict()
                    .key("stop_name").value(item.stop_name)
                    .key("time").value(float(item.time))
                    .key("type").value("Wait")
                    .end_dict()
                )
            else:
                (
                    items.start_dict()
                    .key("bus").value(item.bus_name)
                    .key("span_count").value(item.span_count)
                    .key("time").value(float(item.time))
                    .key("type").value("Bus")
                    .end_dict()
                )
        (
            items.end_array()
            .key("request_id").value(request_id)
            .key("total_time").value(float(trip.total_time))
            .end_dict()
        )


def main(argv: list[str] | None = None) -> int:
    """Read requests from standard input and write the answers to standard output."""
    parser = argparse.ArgumentParser(
        prog="transitcat",
        description="Answer transport catalogue requests read as JSON from standard input.",
    )
    parser.parse_args(argv)
    reader = JsonReader(TransportCatalogue())
    answers = reader.read_json(sys.stdin)
    sys.stdout.write(dumps(answers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())