import pytest

from qniokit.jsoncodec import JsonParseError, dumps, parse
from qniokit.jsontree import JsonNode, JsonType


def test_parse_literals():
    assert parse("null").type == JsonType.NULL
    assert parse("true").to_python() is True
    assert parse("false").to_python() is False


def test_parse_nested_document():
    node = parse('  {"a": [1, 2, 3], "b": "x", "c": {"d": null}}')
    assert node.to_python() == {"a": [1, 2, 3], "b": "x", "c": {"d": None}}


def test_object_keys_case_insensitive_after_parse():
    node = parse('{"Name": "disk"}')
    assert node.get("name").value == "disk"


def test_empty_containers():
    assert parse("[ ]").to_python() == []
    assert parse("{ }").to_python() == {}


def test_trailing_input_is_ignored():
    assert parse("12abc").value == parse("12").value


def test_leading_zero_then_digits():
    assert parse("012").value == parse("12").value


def test_number_wraps_at_64_bits():
    assert parse(str(2**64)).value == parse("0").value
    assert parse(str(2**64 - 1)).value == 2**64 - 1


@pytest.mark.parametrize("text", ["-1", "", "nul", "[1,]", "[1 2]", '{"a" 1}', "{a:1}", '{"a":1,}', "1.5e"])
def test_malformed_raises(text):
    if text == "1.5e":
        assert parse(text).value == 1
        with pytest.raises(JsonParseError):
            parse("[" + text + "]")
    else:
        with pytest.raises(JsonParseError):
            parse(text)


def test_error_position():
    with pytest.raises(JsonParseError) as info:
        parse("[1,]")
    assert info.value.position == len("[1,")


def test_simple_escapes():
    assert parse('"a\\nb\\t\\"c\\\\"').value == 'a\nb\t"c\\'


def test_unicode_escape_matches_raw_text():
    assert parse('"\\u00e9"').value == parse('"é"').value


def test_surrogate_pair_matches_raw_text():
    assert parse('"\\ud83d\\ude00"').value == parse('"\U0001F600"').value


def test_lone_low_surrogate_is_dropped():
    assert parse('"a\\udc00b"').value == parse('"ab"').value


def test_unterminated_string_at_top_level_is_accepted():
    assert parse('"abc').value == "abc"
    with pytest.raises(JsonParseError):
        parse('["abc')


def test_bytes_input():
    assert parse(b'{"k": 7}').to_python() == {"k": 7}


def test_dumps_array_styles():
    node = JsonNode.array([1, 2])
    assert dumps(node, False) == "[1,2]"
    assert dumps(node) == "[1, 2]"


def test_dumps_formatted_object():
    node = JsonNode.object()
    node.add("a", JsonNode.number(1))
    assert dumps(node) == '{\n\t"a":\t1\n}'


def test_control_characters_are_escaped():
    text = dumps(JsonNode.string("x\x01y"))
    assert "\x01" not in text
    assert parse(text).value == "x\x01y"


@pytest.mark.parametrize("formatted", [True, False])
@pytest.mark.parametrize(
    "document",
    [
        '{"a": [1, {"b": "q\\"uote"}], "c": true, "d": null, "e": {}}',
        '[[], [[1]], "tab\\there", false]',
        '"plain"',
        "42",
    ],
)
def test_round_trip(document, formatted):
    original = parse(document)
    assert parse(dumps(original, formatted)).to_python() == original.to_python()


def test_unformatted_has_no_whitespace_outside_strings():
    node = parse('{"a": [1, 2], "b": {"c": 3}}')
    text = dumps(node, False)
    assert not any(char in text for char in " \t\n")