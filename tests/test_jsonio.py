import io

import pytest

from transitcat.jsonio import Document, Node, ParsingError, dump, dumps, load, loads


def test_parse_int():
    root = loads("42").root
    assert root.is_int()
    assert root.as_int() == 42
    assert root.is_double()
    assert not root.is_pure_double()


def test_parse_negative_double():
    root = loads("-3.5").root
    assert root.is_pure_double()
    assert root.as_double() == -3.5


def test_parse_exponent_is_double():
    root = loads("1e2").root
    assert root.is_pure_double()
    assert root.as_double() == float("1e2")


def test_int_limit_kept_as_int():
    root = loads("2147483647").root
    assert root.is_int()
    assert root.as_int() == 2147483647


def test_int_overflow_becomes_double():
    root = loads("3000000000").root
    assert root.is_pure_double()
    assert root.as_double() == 3000000000.0


def test_number_out_of_range_raises():
    with pytest.raises(ParsingError):
        loads("1e999")


def test_missing_digit_raises():
    with pytest.raises(ParsingError):
        loads("-x")


def test_string_escapes():
    assert loads('"a\\nb\\t\\"c\\\\"').root.as_string() == 'a\nb\t"c\\'


def test_unknown_escape_raises():
    with pytest.raises(ParsingError):
        loads('"a\\qb"')


def test_raw_newline_in_string_raises():
    with pytest.raises(ParsingError):
        loads('"a\nb"')


def test_unterminated_string_raises():
    with pytest.raises(ParsingError):
        loads('"abc')


@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("FALSE", False), ("True", True), ("false ", False)],
)
def test_bool_literals(text, expected):
    root = loads(text).root
    assert root.is_bool()
    assert root.as_bool() is expected


def test_null_literal_mixed_case():
    assert loads("nUlL").root.is_null()


@pytest.mark.parametrize("text", ["tru", "true x", "nul", "falsy", "nulL1"])
def test_bad_literals_raise(text):
    with pytest.raises(ParsingError):
        loads(text)


def test_array():
    root = loads("[1, 2, 3]").root
    assert root.as_array() == [Node(1), Node(2), Node(3)]


def test_empty_array():
    assert loads(" [ ] ").root.as_array() == []


def test_nested_array_with_literals():
    root = loads("[true, null, [\"x\"]]").root
    assert root == Node([True, None, ["x"]])


def test_dict_keys_sorted():
    root = loads('{"b": 1, "a": "x"}').root
    assert list(root.as_map()) == ["a", "b"]
    assert root.as_map()["a"].as_string() == "x"
    assert root.as_map()["b"].as_int() == 1


def test_dict_duplicate_key_first_wins():
    root = loads('{"k": 1, "k": 2}').root
    assert root.as_map()["k"].as_int() == 1


def test_empty_dict():
    assert loads("{}").root.as_map() == {}


def test_empty_key_raises():
    with pytest.raises(ParsingError):
        loads('{"": 1}')


@pytest.mark.parametrize("text", ["[1, 2", "]", "}", "{\"a\": 1", "", "   "])
def test_structural_errors(text):
    with pytest.raises(ParsingError):
        loads(text)


def test_node_equality_respects_type():
    assert Node(1) != Node(1.0)
    assert Node(True) != Node(1)
    assert Node([1, 2]) == Node([Node(1), Node(2)])
    assert Node({"a": 1}) == Node({"a": Node(1)})
    assert Node(None) == Node()


def test_wrong_type_access_raises():
    node = Node("text")
    with pytest.raises(TypeError):
        node.as_int()
    with pytest.raises(TypeError):
        node.as_map()
    with pytest.raises(TypeError):
        Node(True).as_double()


def test_as_double_converts_int():
    value = Node(7).as_double()
    assert isinstance(value, float)
    assert value == 7.0


def test_bool_is_not_int():
    node = Node(True)
    assert not node.is_int()
    assert not node.is_double()
    assert node.is_bool()


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        Node(object())


def test_document_get_requests():
    doc = loads('{"base_requests": [1], "other": 2}')
    assert doc.get_requests("base_requests") == Node([1])
    with pytest.raises(KeyError):
        doc.get_requests("missing")


def test_document_equality():
    assert loads("[1, 2]") == Document(Node([1, 2]))
    assert loads("[1, 2]") != loads("[2, 1]")


@pytest.mark.parametrize(
    "value, text",
    [([], "[]"), (None, "null"), (True, "true"), (False, "false")],
)
def test_dump_scalars(value, text):
    assert dumps(Document(Node(value))) == text


def test_dump_string_escapes():
    assert dumps(Document(Node('a"b\\c\n'))) == '"a\\"b\\\\c\\n"'


def test_dump_array_layout():
    assert dumps(Document(Node([1, 2]))) == "[\n1,\n2\n]"


def test_dump_dict_layout():
    assert dumps(Document(Node({"a": 1}))) == '{\n"a":1\n}'


def test_dump_whole_double_has_no_fraction():
    assert dumps(Node(1.0)) == "1"


def test_round_trip():
    original = Document(
        Node({"name": "x\ty", "items": [1, 2.5, None, True, {"k": "v"}], "empty": []})
    )
    assert loads(dumps(original)) == original


def test_stream_round_trip():
    out = io.StringIO()
    original = loads('{"requests": [{"id": 1, "type": "Bus"}]}')
    dump(original, out)
    out.seek(0)
    assert load(out) == original