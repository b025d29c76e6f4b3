"""Text encoding and decoding of JSON document trees."""

from typing import Tuple, Union

from .jsontree import JsonNode, JsonType

_DIGITS = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_UNESCAPES = {"b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_UINT64_MASK = (1 << 64) - 1


class JsonParseError(ValueError):
    """Raised when text is not a JSON value; ``position`` is where parsing stopped."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.position = position


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text

    def char(self, pos: int) -> str:
        return self.text[pos] if 0 <= pos < len(self.text) else ""

    def skip(self, pos: int) -> int:
        text = self.text
        while pos < len(text) and ord(text[pos]) <= 32:
            pos += 1
        return pos

    def value(self, pos: int) -> Tuple[JsonNode, int]:
        text = self.text
        if text.startswith("null", pos):
            return JsonNode.null(), pos + 4
        if text.startswith("false", pos):
            return JsonNode.false(), pos + 5
        if text.startswith("true", pos):
            return JsonNode.true(), pos + 4
        char = self.char(pos)
        if char == '"':
            return self.string(pos)
        if char in _DIGITS:
            return self.number(pos)
        if char == "[":
            return self.array(pos)
        if char == "{":
            return self.object(pos)
        raise JsonParseError("unexpected input", pos)

    def number(self, pos: int) -> Tuple[JsonNode, int]:
        result = 0
        if self.char(pos) == "0":
            pos += 1
        if self.char(pos) in _NONZERO_DIGITS:
            while self.char(pos) in _DIGITS:
                result = (result * 10 + int(self.text[pos])) & _UINT64_MASK
                pos += 1
        return JsonNode.number(result), pos

    def _hex4(self, pos: int) -> int:
        digits = []
        for offset in range(4):
            char = self.char(pos + offset)
            if char not in _HEX_DIGITS:
                break
            digits.append(char)
        return int("".join(digits), 16) if digits else 0

    def _unicode_escape(self, pos: int, out: list) -> int:
        """Decode the escape whose 'u' is at ``pos``; return the position of its last char."""
        code = self._hex4(pos + 1)
        pos += 4
        if 0xDC00 <= code <= 0xDFFF or code == 0:
            return pos
        if 0xD800 <= code <= 0xDBFF:
            if self.char(pos + 1) != "\\" or self.char(pos + 2) != "u":
                return pos
            low = self._hex4(pos + 3)
            pos += 6
            if not 0xDC00 <= low <= 0xDFFF:
                return pos
            code = 0x10000 | ((code & 0x3FF) << 10) | (low & 0x3FF)
        out.append(chr(code))
        return pos

    def string_value(self, pos: int) -> Tuple[str, int]:
        if self.char(pos) != '"':
            raise JsonParseError("expected a string", pos)
        text = self.text
        end = len(text)
        out: list = []
        pos += 1
        while pos < end and text[pos] != '"':
            char = text[pos]
            if char != "\\":
                out.append(char)
                pos += 1
                continue
            pos += 1
            escaped = self.char(pos)
            if not escaped:
                break
            if escaped in _UNESCAPES:
                out.append(_UNESCAPES[escaped])
            elif escaped == "u":
                pos = self._unicode_escape(pos, out)
            else:
                out.append(escaped)
            pos += 1
        if self.char(pos) == '"':
            pos += 1
        return "".join(out), min(pos, end)

    def string(self, pos: int) -> Tuple[JsonNode, int]:
        value, pos = self.string_value(pos)
        return JsonNode.string(value), pos

    def array(self, pos: int) -> Tuple[JsonNode, int]:
        node = JsonNode.array()
        pos = self.skip(pos + 1)
        if self.char(pos) == "]":
            return node, pos + 1
        child, pos = self.value(self.skip(pos))
        node.append(child)
        pos = self.skip(pos)
        while self.char(pos) == ",":
            child, pos = self.value(self.skip(pos + 1))
            node.append(child)
            pos = self.skip(pos)
        if self.char(pos) == "]":
            return node, pos + 1
        raise JsonParseError("expected ',' or ']'", pos)

    def _member(self, node: JsonNode, pos: int) -> int:
        name, pos = self.string_value(self.skip(pos))
        pos = self.skip(pos)
        if self.char(pos) != ":":
            raise JsonParseError("expected ':'", pos)
        child, pos = self.value(self.skip(pos + 1))
        node.add(name, child)
        return self.skip(pos)

    def object(self, pos: int) -> Tuple[JsonNode, int]:
        node = JsonNode.object()
        pos = self.skip(pos + 1)
        if self.char(pos) == "}":
            return node, pos + 1
        pos = self._member(node, pos)
        while self.char(pos) == ",":
            pos = self._member(node, pos + 1)
        if self.char(pos) == "}":
            return node, pos + 1
        raise JsonParseError("expected ',' or '}'", pos)


def parse(text: Union[str, bytes, bytearray, memoryview]) -> JsonNode:
    """Parse the first JSON value in ``text``; anything after it is ignored.

    Numbers are unsigned integers only. Raises ``JsonParseError`` on
    malformed input.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("utf-8")
    text = text.split("\0", 1)[0]
    parser = _Parser(text)
    node, _ = parser.value(parser.skip(0))
    return node


def _quote(text) -> str:
    if text is None:
        return ""
    parts = ['"']
    for char in text.split("\0", 1)[0]:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif ord(char) < 32:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def _render_object(node: JsonNode, depth: int, formatted: bool) -> str:
    depth += 1
    entries = []
    for child in node:
        separator = ":\t" if formatted else ":"
        entries.append(_quote(child.name) + separator + _render(child, depth, formatted))
    if not formatted:
        return "{" + ",".join(entries) + "}"
    indent = "\t" * depth
    lines = []
    last = len(entries) - 1
    for position, entry in enumerate(entries):
        comma = "," if position != last else ""
        lines.append(indent + entry + comma + "\n")
    return "{\n" + "".join(lines) + "\t" * (depth - 1) + "}"


def _render(node: JsonNode, depth: int, formatted: bool) -> str:
    kind = node.type
    if kind == JsonType.NULL:
        return "null"
    if kind == JsonType.FALSE:
        return "false"
    if kind == JsonType.TRUE:
        return "true"
    if kind == JsonType.NUMBER:
        return str(node.value & _UINT64_MASK)
    if kind == JsonType.STRING:
        return _quote(node.value)
    if kind == JsonType.ARRAY:
        separator = ", " if formatted else ","
        return "[" + separator.join(_render(child, depth + 1, formatted) for child in node) + "]"
    return _render_object(node, depth, formatted)


def dumps(node: JsonNode, formatted: bool = True) -> str:
    """Render ``node`` as JSON text, indented with tabs when ``formatted``."""
    return _render(node, 0, formatted)