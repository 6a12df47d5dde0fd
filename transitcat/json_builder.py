"""A fluent builder for JSON nodes that checks the call order as it goes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .jsonio import Node


@dataclass
class _ArrayFrame:
    items: list[Node] = field(default_factory=list)


@dataclass
class _DictFrame:
    items: dict[str, Node] = field(default_factory=dict)
    pending_key: str | None = None


_Frame = Union[_ArrayFrame, _DictFrame]


class Builder:
    """Builds a :class:`Node` step by step.

    Misuse, such as a value in a dict without a key or closing the wrong
    container, raises :class:`RuntimeError`.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._stack: list[_Frame] = []

    def _check_not_finished(self) -> None:
        if self._root is not None and not self._stack:
            raise RuntimeError("Object is finished!")

    def _check_value_allowed(self) -> None:
        top = self._stack[-1] if self._stack else None
        if isinstance(top, _DictFrame) and top.pending_key is None:
            raise RuntimeError("Wrong value!")

    def _attach(self, node: Node) -> None:
        if not self._stack:
            self._root = node
            return
        top = self._stack[-1]
        if isinstance(top, _ArrayFrame):
            top.items.append(node)
        else:
            assert top.pending_key is not None
            top.items[top.pending_key] = node
            top.pending_key = None

    def value(self, value: Any) -> Builder:
        """Add a value at the top level, to the open array or under the pending key."""
        self._check_not_finished()
        self._check_value_allowed()
        self._attach(value if isinstance(value, Node) else Node(value))
        return self

    def start_dict(self) -> DictItemContext:
        self._check_not_finished()
        self._check_value_allowed()
        self._stack.append(_DictFrame())
        return DictItemContext(self)

    def end_dict(self) -> Builder:
        self._check_not_finished()
        top = self._stack[-1] if self._stack else None
        if not isinstance(top, _DictFrame):
            raise RuntimeError("No dict to end")
        if top.pending_key is not None:
            raise RuntimeError(f"Key {top.pending_key!r} has no value")
        self._stack.pop()
        self._attach(Node(top.items))
        return self

    def key(self, key: str) -> KeyItemContext:
        self._check_not_finished()
        top = self._stack[-1] if self._stack else None
        if not isinstance(top, _DictFrame):
            raise RuntimeError("Out of Dict")
        if top.pending_key is not None:
            raise RuntimeError("Insert double Key to Dict")
        top.pending_key = key
        return KeyItemContext(self)

    def start_array(self) -> ArrayItemContext:
        self._check_not_finished()
        self._check_value_allowed()
        self._stack.append(_ArrayFrame())
        return ArrayItemContext(self)

    def end_array(self) -> Builder:
        self._check_not_finished()
        top = self._stack[-1] if self._stack else None
        if not isinstance(top, _ArrayFrame):
            raise RuntimeError("No array to end")
        self._stack.pop()
        self._attach(Node(top.items))
        return self

    def build(self) -> Node:
        """Return the finished node and leave the builder empty."""
        if self._stack:
            raise RuntimeError("Array or Dict not finished!")
        if self._root is None:
            raise RuntimeError("Stack is empty!")
        root, self._root = self._root, None
        return root


class _Context:
    __slots__ = ("_builder",)

    def __init__(self, builder: Builder) -> None:
        self._builder = builder


class DictItemContext(_Context):
    """Inside a dict, where only a key or the end of the dict may follow."""

    __slots__ = ()

    def key(self, key: str) -> KeyItemContext:
        return self._builder.key(key)

    def end_dict(self) -> Builder:
        return self._builder.end_dict()


class KeyItemContext(_Context):
    """After a key, where a value or a new container must follow."""

    __slots__ = ()

    def value(self, value: Any) -> ValueItemContextAfterKey:
        self._builder.value(value)
        return ValueItemContextAfterKey(self._builder)

    def start_array(self) -> ArrayItemContext:
        return self._builder.start_array()

    def start_dict(self) -> DictItemContext:
        return self._builder.start_dict()


class ArrayItemContext(_Context):
    """Inside an array."""

    __slots__ = ()

    def value(self, value: Any) -> ArrayItemContext:
        self._builder.value(value)
        return ArrayItemContext(self._builder)

    def start_array(self) -> ArrayItemContext:
        return self._builder.start_array()

    def start_dict(self) -> DictItemContext:
        return self._builder.start_dict()

    def end_array(self) -> Builder:
        return self._builder.end_array()


class ValueItemContextAfterKey(_Context):
    """After a key's value, where another key or the end of the dict may follow."""

    __slots__ = ()

    def key(self, key: str) -> KeyItemContext:
        return self._builder.key(key)

    def end_dict(self) -> Builder:
        return self._builder.end_dict()