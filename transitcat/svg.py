"""Minimal SVG document model: circles, polylines and text."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO, Union


@dataclass(frozen=True)
class Rgb:
    """A colour given by red, green and blue components (0-255)."""

    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Rgba:
    """A colour given by red, green, blue components and an opacity."""

    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = 1.0


Color = Union[str, Rgb, Rgba, None]

NONE_COLOR: Color = "none"


def format_number(value: float) -> str:
    """Format a number the way SVG attributes are written: shortest general form."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def format_color(color: Color) -> str:
    """Return the SVG text of a colour; None means no colour."""
    if color is None:
        return "none"
    if isinstance(color, str):
        return color
    if isinstance(color, Rgba):
        return (
            f"rgba({int(color.red)},{int(color.green)},{int(color.blue)},"
            f"{format_number(color.opacity)})"
        )
    if isinstance(color, Rgb):
        return f"rgb({int(color.red)},{int(color.green)},{int(color.blue)})"
    raise TypeError(f"unsupported colour type: {type(color).__name__}")


class StrokeLineCap(Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class RenderContext:
    """Output stream together with the current indent and its step."""

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> RenderContext:
        """Return a context indented by one more step."""
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        self.out.write(" " * self.indent)


class Object(ABC):
    """An SVG element that can be written on its own line."""

    def render(self, context: RenderContext) -> None:
        context.render_indent()
        self._render_object(context)
        context.out.write("\n")

    @abstractmethod
    def _render_object(self, context: RenderContext) -> None:
        """Write the element's tag without indentation or line break."""


class PathProps:
    """Fill and stroke properties shared by drawable shapes.

    A property that was never set is not written.
    """

    def __init__(self) -> None:
        self._fill_color: Color | None = None
        self._fill_set = False
        self._stroke_color: Color | None = None
        self._stroke_set = False
        self._stroke_width: float | None = None
        self._stroke_linecap: StrokeLineCap | None = None
        self._stroke_linejoin: StrokeLineJoin | None = None

    def set_fill_color(self, color: Color):
        self._fill_color = color
        self._fill_set = True
        return self

    def set_stroke_color(self, color: Color):
        self._stroke_color = color
        self._stroke_set = True
        return self

    def set_stroke_width(self, width: float):
        self._stroke_width = width
        return self

    def set_stroke_line_cap(self, line_cap: StrokeLineCap):
        self._stroke_linecap = line_cap
        return self

    def set_stroke_line_join(self, line_join: StrokeLineJoin):
        self._stroke_linejoin = line_join
        return self

    def _attrs(self) -> str:
        parts = []
        if self._fill_set:
            parts.append(f' fill="{format_color(self._fill_color)}"')
        if self._stroke_set:
            parts.append(f' stroke="{format_color(self._stroke_color)}"')
        if self._stroke_width is not None:
            parts.append(f' stroke-width="{format_number(self._stroke_width)}"')
        if self._stroke_linecap is not None:
            parts.append(f' stroke-linecap="{self._stroke_linecap}"')
        if self._stroke_linejoin is not None:
            parts.append(f' stroke-linejoin="{self._stroke_linejoin}"')
        return "".join(parts)


class Circle(Object, PathProps):
    """The <circle> element."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._center = Point()
        self._radius = 1.0

    def set_center(self, center: Point) -> Circle:
        self._center = center
        return self

    def set_radius(self, radius: float) -> Circle:
        self._radius = radius
        return self

    def _render_object(self, context: RenderContext) -> None:
        context.out.write(
            f'<circle cx="{format_number(self._center.x)}" '
            f'cy="{format_number(self._center.y)}" '
            f'r="{format_number(self._radius)}"{self._attrs()}/>'
        )


class Polyline(Object, PathProps):
    """The <polyline> element."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._points: list[Point] = []

    def add_point(self, point: Point) -> Polyline:
        self._points.append(point)
        return self

    def _render_object(self, context: RenderContext) -> None:
        points = " ".join(
            f"{format_number(p.x)},{format_number(p.y)}" for p in self._points
        )
        context.out.write(f'<polyline points="{points}"{self._attrs()}/>')


_TEXT_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


class Text(Object, PathProps):
    """The <text> element."""

    def __init__(self) -> None:
        PathProps.__init__(self)
        self._pos = Point()
        self._offset = Point()
        self._font_size = 1
        self._font_family = ""
        self._font_weight = ""
        self._data = ""

    def set_position(self, pos: Point) -> Text:
        self._pos = pos
        return self

    def set_offset(self, offset: Point) -> Text:
        self._offset = offset
        return self

    def set_font_size(self, size: int) -> Text:
        if size < 0:
            raise ValueError("font size must not be negative")
        self._font_size = int(size)
        return self

    def set_font_family(self, font_family: str) -> Text:
        self._font_family = font_family
        return self

    def set_font_weight(self, font_weight: str) -> Text:
        self._font_weight = font_weight
        return self

    def set_data(self, data: str) -> Text:
        """Set the text content, escaping XML special characters."""
        for char, entity in _TEXT_ESCAPES:
            data = data.replace(char, entity)
        self._data = data
        return self

    def _render_object(self, context: RenderContext) -> None:
        parts = [
            "<text",
            self._attrs(),
            f' x="{format_number(self._pos.x)}" y="{format_number(self._pos.y)}"',
            f' dx="{format_number(self._offset.x)}" dy="{format_number(self._offset.y)}"',
            f' font-size="{self._font_size}"',
        ]
        if self._font_family:
            parts.append(f' font-family="{self._font_family}"')
        if self._font_weight:
            parts.append(f' font-weight="{self._font_weight}"')
        parts.append(">")
        parts.append(self._data)
        parts.append("</text>")
        context.out.write("".join(parts))


@dataclass
class Document:
    """An SVG document: an ordered collection of elements."""

    _objects: list[Object] = field(default_factory=list)

    def add(self, obj: Object) -> None:
        """Add a copy of ``obj``; later changes to ``obj`` do not affect the document."""
        if not isinstance(obj, Object):
            raise TypeError(f"cannot add {type(obj).__name__} to an SVG document")
        self._objects.append(copy.deepcopy(obj))

    def __len__(self) -> int:
        return len(self._objects)

    def render(self, out: TextIO) -> None:
        """Write the whole document as SVG text to ``out``."""
        context = RenderContext(out, indent=2)
        out.write('<?xml version="1.0" encoding="UTF-8" ?>\n')
        out.write('<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n')
        for obj in self._objects:
            obj.render(context)
        out.write("</svg>")