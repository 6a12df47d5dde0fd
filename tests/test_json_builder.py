import pytest

from transitcat.json_builder import Builder
from transitcat.jsonio import Node, loads


def test_scalar_root():
    assert Builder().value(42).build() == Node(42)
    assert Builder().value("text").build() == Node("text")
    assert Builder().value(1.5).build() == Node(1.5)


def test_flat_dict():
    node = (
        Builder()
        .start_dict()
        .key("request_id").value(7)
        .key("error_message").value("not found")
        .end_dict()
        .build()
    )
    assert node == Node({"request_id": 7, "error_message": "not found"})


def test_array_of_values():
    node = Builder().start_array().value(1).value("a").value(2.5).end_array().build()
    assert node.as_array() == [Node(1), Node("a"), Node(2.5)]


def test_nested_structure_matches_parsed_text():
    node = (
        Builder()
        .start_dict()
        .key("items")
        .start_array()
        .start_dict().key("stop_name").value("A").key("time").value(6).end_dict()
        .start_array().value(1).end_array()
        .end_array()
        .key("inner").start_dict().key("x").value(1).end_dict()
        .key("request_id").value(3)
        .end_dict()
        .build()
    )
    expected = loads(
        '{"items": [{"stop_name": "A", "time": 6}, [1]],'
        ' "inner": {"x": 1}, "request_id": 3}'
    ).root
    assert node == expected


def test_empty_containers():
    assert Builder().start_array().end_array().build() == Node([])
    assert Builder().start_dict().end_dict().build() == Node({})


def test_duplicate_key_keeps_last_value():
    node = (
        Builder().start_dict().key("k").value(1).key("k").value(2).end_dict().build()
    )
    assert node.as_map()["k"] == Node(2)


def test_value_after_finished_object_raises():
    builder = Builder()
    builder.value(1)
    with pytest.raises(RuntimeError, match="finished"):
        builder.value(2)
    with pytest.raises(RuntimeError, match="finished"):
        builder.start_array()


def test_value_in_dict_without_key_raises():
    builder = Builder()
    builder.start_dict()
    with pytest.raises(RuntimeError, match="Wrong value"):
        builder.value(1)
    with pytest.raises(RuntimeError, match="Wrong value"):
        builder.start_array()


def test_key_outside_dict_raises():
    with pytest.raises(RuntimeError, match="Out of Dict"):
        Builder().key("a")
    builder = Builder()
    builder.start_array()
    with pytest.raises(RuntimeError, match="Out of Dict"):
        builder.key("a")


def test_double_key_raises():
    builder = Builder()
    builder.start_dict().key("a")
    with pytest.raises(RuntimeError, match="double Key"):
        builder.key("b")


def test_mismatched_end_raises():
    builder = Builder()
    builder.start_array()
    with pytest.raises(RuntimeError):
        builder.end_dict()
    other = Builder()
    other.start_dict()
    with pytest.raises(RuntimeError):
        other.end_array()


def test_build_errors():
    with pytest.raises(RuntimeError, match="empty"):
        Builder().build()
    builder = Builder()
    builder.start_array().value(1)
    with pytest.raises(RuntimeError, match="not finished"):
        builder.build()


def test_build_twice_raises():
    builder = Builder()
    builder.value(1)
    assert builder.build() == Node(1)
    with pytest.raises(RuntimeError, match="empty"):
        builder.build()


def test_key_context_value_returns_after_key_context():
    builder = Builder()
    ctx = builder.start_dict().key("a").value(1)
    result = ctx.key("b").value("x").end_dict().build()
    assert result == Node({"a": 1, "b": "x"})


def test_key_context_starts_containers():
    builder = Builder()
    dict_ctx = builder.start_dict()
    dict_ctx.key("arr").start_array().value(1).end_array()
    dict_ctx.key("map").start_dict().end_dict()
    node = dict_ctx.end_dict().build()
    assert node.as_map()["arr"] == Node([1])
    assert node.as_map()["map"] == Node({})