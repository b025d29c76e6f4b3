"""Base64 encoding and a strict decoder for text carried in protocol messages."""

import binascii

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_WHITESPACE = " \t\n\v\f\r"


def encode(data) -> str:
    """Encode bytes-like ``data`` as padded base64 text."""
    return binascii.b2a_base64(bytes(data), newline=False).decode("ascii")


def decode(text) -> bytes:
    """Decode base64 ``text`` into bytes.

    Leading and trailing whitespace is ignored. Decoding stops at the first
    padding sequence. Any character outside the alphabet, including
    whitespace inside the text, or a truncated final group raises
    ``ValueError``.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    src = text.strip(_WHITESPACE)
    out = bytearray()
    pos = 0

    def take() -> int:
        nonlocal pos
        if pos >= len(src):
            raise ValueError("truncated base64 input")
        char = src[pos]
        value = _INDEX.get(char)
        if value is None:
            raise ValueError(f"invalid base64 character {char!r} at offset {pos}")
        pos += 1
        return value

    def peek(offset: int = 0) -> str:
        at = pos + offset
        return src[at] if at < len(src) else ""

    remaining = len(src)
    while remaining > 0:
        remaining -= 4
        first = take()
        second = take()
        out.append(((first << 2) | ((second & 0x30) >> 4)) & 0xFF)
        if peek() == "=" and peek(1) == "=":
            break
        third = take()
        out.append((((second << 4) & 0xF0) | ((third & 0x3C) >> 2)) & 0xFF)
        if peek() == "=":
            break
        fourth = take()
        out.append((((third << 6) & 0xC0) | fourth) & 0xFF)
    return bytes(out)