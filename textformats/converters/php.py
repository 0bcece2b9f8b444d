"""Decoder for the PHP serialize() wire format.

The decoder is a recursive descent over the UTF-8 bytes of the input. Every
parse function takes the buffer, the current byte position and the nesting
depth, and returns the decoded value with the position just past it. No
state is shared between calls.

Grammar (one-letter type tags, lengths count bytes):

    N;
    b:0;  b:1;
    i:<int>;
    d:<float>;
    s:<len>:"<len bytes>";
    a:<count>:{<key><value>...}
    O:<len>:"<class name>":<count>:{<key><value>...}

Keys inside arrays and objects are i or s entries.
"""

import json
import re
from typing import Any, Callable

from ..base import BaseConverter
from ..config import DEFAULT_SETTINGS, resolve_settings
from ..enums import FormatTag
from ..exceptions import DecodeError, EmptyContentError, TruncatedInputError, UnrecognizedTagError
from ..registry import register_converter
from ..value_objects import (
    DecodedValue,
    PhpArray,
    PhpBool,
    PhpFloat,
    PhpInt,
    PhpNull,
    PhpObject,
    PhpString,
    to_json_value,
)

INTEGER = re.compile(rb"[+-]?\d+")
FLOAT = re.compile(rb"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?|[+-]?INF|NAN")
LENGTH = re.compile(rb"\d+")


def _expect(buf: bytes, pos: int, token: bytes) -> int:
    """Consume a literal token, returning the position after it."""
    end = pos + len(token)
    if buf[pos:end] == token:
        return end
    if end > len(buf) and token.startswith(buf[pos:]):
        raise TruncatedInputError(f"Input ended while expecting {token.decode()!r}", pos)
    raise DecodeError(f"Expected {token.decode()!r}", pos)


def _read_until(buf: bytes, pos: int, delimiter: bytes) -> tuple[bytes, int]:
    """Return the bytes up to delimiter and the position after the delimiter."""
    end = buf.find(delimiter, pos)
    if end == -1:
        raise TruncatedInputError(f"Missing {delimiter.decode()!r} terminator", pos)
    return buf[pos:end], end + len(delimiter)


def _read_length(buf: bytes, pos: int, what: str) -> tuple[int, int]:
    """Read a decimal length or count header terminated by ':'."""
    raw, after = _read_until(buf, pos, b":")
    if not LENGTH.fullmatch(raw):
        raise DecodeError(f"Invalid {what} {raw.decode('latin-1')!r}", pos)
    return int(raw), after


def _read_bytes(buf: bytes, pos: int, length: int, what: str) -> tuple[bytes, int]:
    """Read exactly length bytes."""
    end = pos + length
    if end > len(buf):
        raise TruncatedInputError(
            f"{what} length {length} exceeds the {len(buf) - pos} bytes remaining", pos
        )
    return buf[pos:end], end


def _parse_null(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpNull, int]:
    return PhpNull(), _expect(buf, pos, b";")


def _parse_bool(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpBool, int]:
    pos = _expect(buf, pos, b":")
    raw, after = _read_until(buf, pos, b";")
    if raw not in (b"0", b"1"):
        raise DecodeError(f"Invalid boolean {raw.decode('latin-1')!r}", pos)
    return PhpBool(raw == b"1"), after


def _parse_int(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpInt, int]:
    pos = _expect(buf, pos, b":")
    raw, after = _read_until(buf, pos, b";")
    if not INTEGER.fullmatch(raw):
        raise DecodeError(f"Invalid integer {raw.decode('latin-1')!r}", pos)
    return PhpInt(int(raw)), after


def _parse_float(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpFloat, int]:
    pos = _expect(buf, pos, b":")
    raw, after = _read_until(buf, pos, b";")
    if not FLOAT.fullmatch(raw):
        raise DecodeError(f"Invalid float {raw.decode('latin-1')!r}", pos)
    return PhpFloat(float(raw.decode("ascii"))), after


def _parse_string(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpString, int]:
    pos = _expect(buf, pos, b":")
    length, pos = _read_length(buf, pos, "string length")
    pos = _expect(buf, pos, b'"')
    raw, pos = _read_bytes(buf, pos, length, "String")
    # A length ending inside a multi-byte character fails here, before decoding
    pos = _expect(buf, pos, b'";')
    return PhpString(raw.decode("utf-8")), pos


def _parse_key(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[int | str, int]:
    tag = buf[pos : pos + 1]
    if tag == b"i":
        key, pos = _parse_int(buf, pos + 1, depth, max_depth)
    elif tag == b"s":
        key, pos = _parse_string(buf, pos + 1, depth, max_depth)
    elif not tag:
        raise TruncatedInputError("Input ended while expecting a key", pos)
    else:
        raise DecodeError(f"Invalid key type {tag.decode('latin-1')!r}", pos)
    return key.value, pos


def _parse_pairs(
    buf: bytes, pos: int, count: int, depth: int, max_depth: int
) -> tuple[tuple[tuple[int | str, DecodedValue], ...], int]:
    pos = _expect(buf, pos, b"{")
    pairs = []
    for _ in range(count):
        key, pos = _parse_key(buf, pos, depth, max_depth)
        value, pos = parse_value(buf, pos, depth, max_depth)
        pairs.append((key, value))
    return tuple(pairs), _expect(buf, pos, b"}")


def _parse_array(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpArray, int]:
    pos = _expect(buf, pos, b":")
    count, pos = _read_length(buf, pos, "array count")
    items, pos = _parse_pairs(buf, pos, count, depth, max_depth)
    return PhpArray(items), pos


def _parse_object(buf: bytes, pos: int, depth: int, max_depth: int) -> tuple[PhpObject, int]:
    pos = _expect(buf, pos, b":")
    name_length, pos = _read_length(buf, pos, "class name length")
    pos = _expect(buf, pos, b'"')
    raw_name, pos = _read_bytes(buf, pos, name_length, "Class name")
    pos = _expect(buf, pos, b'":')
    class_name = raw_name.decode("utf-8")
    count, pos = _read_length(buf, pos, "property count")
    fields, pos = _parse_pairs(buf, pos, count, depth, max_depth)
    return PhpObject(class_name, fields), pos


_PARSERS: dict[bytes, Callable[[bytes, int, int, int], tuple[Any, int]]] = {
    b"N": _parse_null,
    b"b": _parse_bool,
    b"i": _parse_int,
    b"d": _parse_float,
    b"s": _parse_string,
    b"a": _parse_array,
    b"O": _parse_object,
}


def parse_value(
    buf: bytes, pos: int, depth: int = 0, max_depth: int = DEFAULT_SETTINGS.max_depth
) -> tuple[DecodedValue, int]:
    """Decode the value starting at pos.

    Args:
        buf: Serialized bytes
        pos: Byte offset of the value's type tag
        depth: Nesting depth of this value (0 for the top level)
        max_depth: Deepest nesting accepted

    Returns:
        (value, position just past the value)

    Raises:
        DecodeError: On any malformed, truncated or too deeply nested input
    """
    if depth > max_depth:
        raise DecodeError(f"Nesting deeper than {max_depth} levels", pos)
    tag = buf[pos : pos + 1]
    if not tag:
        raise TruncatedInputError("Input ended while expecting a value", pos)
    parser = _PARSERS.get(tag)
    if parser is None:
        raise UnrecognizedTagError(tag.decode("latin-1"), pos)
    return parser(buf, pos + 1, depth + 1, max_depth)


def unserialize(text: str, max_depth: int = DEFAULT_SETTINGS.max_depth) -> DecodedValue:
    """Decode a complete PHP serialized value.

    Surrounding whitespace is ignored; anything else after the value is an
    error.

    Raises:
        EmptyContentError: If text is empty or whitespace only
        DecodeError: If text is not a single well-formed serialized value
        UnicodeEncodeError: If text holds lone surrogates
    """
    stripped = text.strip()
    if not stripped:
        raise EmptyContentError()
    buf = stripped.encode("utf-8")
    value, pos = parse_value(buf, 0, 0, max_depth)
    if pos != len(buf):
        raise DecodeError("Unexpected trailing data", pos)
    return value


@register_converter(FormatTag.PHP_SERIALIZED)
class PhpSerializedToJSONConverter(BaseConverter):
    """Decode PHP serialized data and render it as indented JSON.

    Arrays keyed 0..n-1 become JSON arrays, other arrays become objects, and
    PHP objects become JSON objects with the class name under "__className".
    """

    def render(self, text: str, **context: Any) -> str:
        settings = resolve_settings(context)
        tree = unserialize(text, max_depth=settings.max_depth)
        return json.dumps(to_json_value(tree), indent=settings.json_indent, ensure_ascii=False)


__all__ = ["parse_value", "unserialize", "PhpSerializedToJSONConverter"]
