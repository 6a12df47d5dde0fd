"""A small JSON document model with a reader and a writer."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, TextIO, Union

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}

NodeValue = Union[None, str, int, float, bool, list, dict]


class ParsingError(ValueError):
    """Raised when JSON text cannot be parsed."""


def _normalize(value: Any) -> NodeValue:
    if value is None:
        return None
    if isinstance(value, Node):
        return value.value
    if isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [item if isinstance(item, Node) else Node(item) for item in value]
    if isinstance(value, Mapping):
        items = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"dictionary keys must be strings, not {type(key).__name__}")
            items.append((key, item if isinstance(item, Node) else Node(item)))
        return dict(sorted(items, key=lambda pair: pair[0]))
    raise TypeError(f"cannot store {type(value).__name__} in a JSON node")


class Node:
    """One JSON value: null, string, int, double, bool, array or map."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = None) -> None:
        self._value = _normalize(value)

    @property
    def value(self) -> NodeValue:
        return self._value

    def is_int(self) -> bool:
        return type(self._value) is int

    def is_double(self) -> bool:
        """True if the node holds an int or a double."""
        return type(self._value) in (int, float)

    def is_pure_double(self) -> bool:
        """True if the node holds a double."""
        return type(self._value) is float

    def is_bool(self) -> bool:
        return type(self._value) is bool

    def is_string(self) -> bool:
        return type(self._value) is str

    def is_null(self) -> bool:
        return self._value is None

    def is_array(self) -> bool:
        return type(self._value) is list

    def is_map(self) -> bool:
        return type(self._value) is dict

    def as_int(self) -> int:
        if not self.is_int():
            raise TypeError("node does not hold an int")
        return self._value  # type: ignore[return-value]

    def as_bool(self) -> bool:
        if not self.is_bool():
            raise TypeError("node does not hold a bool")
        return self._value  # type: ignore[return-value]

    def as_double(self) -> float:
        """Return the number held, converting an int to float."""
        if not self.is_double():
            raise TypeError("node does not hold a number")
        return float(self._value)  # type: ignore[arg-type]

    def as_string(self) -> str:
        if not self.is_string():
            raise TypeError("node does not hold a string")
        return self._value  # type: ignore[return-value]

    def as_array(self) -> list[Node]:
        if not self.is_array():
            raise TypeError("node does not hold an array")
        return self._value  # type: ignore[return-value]

    def as_map(self) -> dict[str, Node]:
        if not self.is_map():
            raise TypeError("node does not hold a map")
        return self._value  # type: ignore[return-value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return type(self._value) is type(other._value) and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node({self._value!r})"


class Document:
    """A JSON document with a single root node."""

    def __init__(self, root: Node) -> None:
        self.root = root if isinstance(root, Node) else Node(root)

    def get_requests(self, name: str) -> Node:
        """Return the value under ``name`` in the root map."""
        return self.root.as_map()[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self.root == other.root

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document({self.root!r})"


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _next_nonspace(self) -> str | None:
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            return None
        char = text[self._pos]
        self._pos += 1
        return char

    def load_node(self) -> Node:
        char = self._next_nonspace()
        if char is None:
            raise ParsingError("Unexpected end of input")
        if char == "[":
            return self._load_array()
        if char in "]}":
            raise ParsingError("Array parsing error")
        if char == "{":
            return self._load_dict()
        if char == '"':
            return Node(self._load_string())
        if char in "nN":
            return self._load_literal("ull", None, "Null parsing error")
        if char in "tT":
            return self._load_literal("rue", True, "True parsing error")
        if char in "fF":
            return self._load_literal("alse", False, "False parsing error")
        self._pos -= 1
        return Node(self._load_number())

    def _load_array(self) -> Node:
        result: list[Node] = []
        while True:
            char = self._next_nonspace()
            if char is None:
                raise ParsingError("Array parsing error")
            if char == "]":
                break
            if char != ",":
                self._pos -= 1
            result.append(self.load_node())
        return Node(result)

    def _load_dict(self) -> Node:
        result: dict[str, Node] = {}
        while True:
            char = self._next_nonspace()
            if char is None:
                raise ParsingError("Dict parsing error")
            if char == "}":
                break
            if char == "," and self._next_nonspace() is None:
                raise ParsingError("Dict parsing error")
            key = self._load_string()
            if not key:
                raise ParsingError("Dict parsing error")
            if self._next_nonspace() is None:
                raise ParsingError("Dict parsing error")
            result.setdefault(key, self.load_node())
        return Node(result)

    def _load_string(self) -> str:
        text = self._text
        parts: list[str] = []
        while True:
            if self._pos >= len(text):
                raise ParsingError("String parsing error")
            char = text[self._pos]
            self._pos += 1
            if char == '"':
                return "".join(parts)
            if char == "\\":
                if self._pos >= len(text):
                    raise ParsingError("String parsing error")
                escaped = text[self._pos]
                self._pos += 1
                if escaped not in _ESCAPES:
                    raise ParsingError(f"Unrecognized escape sequence \\{escaped}")
                parts.append(_ESCAPES[escaped])
            elif char in "\n\r":
                raise ParsingError("Unexpected end of line")
            else:
                parts.append(char)

    def _load_literal(self, rest: str, value: bool | None, message: str) -> Node:
        text = self._text
        for expected in rest:
            if self._pos >= len(text):
                raise ParsingError(message)
            char = text[self._pos]
            if char != expected and char != expected.upper():
                raise ParsingError(message)
            self._pos += 1
        while self._pos < len(text) and text[self._pos] not in ",]}":
            if text[self._pos] not in "\t \r\n":
                raise ParsingError(message)
            self._pos += 1
        return Node(value)

    def _load_number(self) -> int | float:
        start = self._pos

        def read_digits() -> None:
            if self._peek() is None or self._peek() not in _DIGITS:
                raise ParsingError("A digit is expected")
            while self._peek() is not None and self._peek() in _DIGITS:
                self._pos += 1

        if self._peek() == "-":
            self._pos += 1
        if self._peek() == "0":
            self._pos += 1
        else:
            read_digits()

        is_int = True
        if self._peek() == ".":
            self._pos += 1
            read_digits()
            is_int = False

        if self._peek() in ("e", "E"):
            self._pos += 1
            if self._peek() in ("+", "-"):
                self._pos += 1
            read_digits()
            is_int = False

        literal = self._text[start:self._pos]
        if is_int:
            number = int(literal)
            if _INT_MIN <= number <= _INT_MAX:
                return number
        result = float(literal)
        if math.isinf(result):
            raise ParsingError(f"Failed to convert {literal} to number")
        return result


def loads(text: str) -> Document:
    """Parse a JSON document from a string."""
    return Document(_Parser(text).load_node())


def load(stream: TextIO) -> Document:
    """Parse a JSON document from a text stream."""
    return loads(stream.read())


def _escape_string(value: str) -> str:
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _format_node(node: Node) -> str:
    value = node.value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _escape_string(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, list):
        if not value:
            return "[]"
        return "[\n" + ",\n".join(_format_node(item) for item in value) + "\n]"
    entries = ",\n".join(f'"{key}":{_format_node(item)}' for key, item in value.items())
    return "{\n" + entries + "\n}"


def dumps(document: Document | Node) -> str:
    """Render a document (or a bare node) as JSON text."""
    root = document.root if isinstance(document, Document) else document
    return _format_node(root)


def dump(document: Document | Node, stream: TextIO) -> None:
    """Write a document (or a bare node) as JSON text to a stream."""
    stream.write(dumps(document))