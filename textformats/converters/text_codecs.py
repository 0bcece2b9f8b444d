"""Base64 and percent-encoding converters.

Each decode/encode pair is an exact inverse on input the decoder accepts.
"""

import base64
import binascii
import re
from typing import Any
from urllib.parse import quote, unquote

from ..base import BaseConverter
from ..config import resolve_settings
from ..enums import FormatTag
from ..exceptions import InvalidEncodingError
from ..registry import register_converter

BASE64_ALPHABET = re.compile(r"[A-Za-z0-9+/]*={0,2}")
BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters left alone by JavaScript's encodeURIComponent; quote() already
# keeps letters, digits and "_.-~"
URL_SAFE_CHARACTERS = "!*'()"


def b64decode_strict(text: str) -> bytes:
    """Decode canonical Base64 only.

    Rejects characters outside the alphabet, bad padding, and encodings
    whose unused trailing bits are set (those would not re-encode to the
    same text).

    Raises:
        InvalidEncodingError: On any violation
    """
    if len(text) % 4 or not BASE64_ALPHABET.fullmatch(text):
        raise InvalidEncodingError("Invalid Base64 string")
    try:
        data = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise InvalidEncodingError("Invalid Base64 string") from e
    if base64.b64encode(data).decode("ascii") != text:
        raise InvalidEncodingError("Invalid Base64 string")
    return data


@register_converter(FormatTag.BASE64_DECODE)
class Base64DecodeConverter(BaseConverter):
    """Decode Base64 to text using the configured charset (Latin-1 by default)."""

    error_message = "Invalid Base64 string"

    def render(self, text: str, **context: Any) -> str:
        settings = resolve_settings(context)
        return b64decode_strict(text).decode(settings.base64_charset)


@register_converter(FormatTag.BASE64_ENCODE)
class Base64EncodeConverter(BaseConverter):
    """Encode text as Base64.

    Fails on characters the configured charset cannot represent; with the
    default Latin-1 that is anything above U+00FF.
    """

    def render(self, text: str, **context: Any) -> str:
        settings = resolve_settings(context)
        return base64.b64encode(text.encode(settings.base64_charset)).decode("ascii")


@register_converter(FormatTag.URL_DECODE)
class URLDecodeConverter(BaseConverter):
    """Decode percent-escapes as UTF-8. "+" is left as is."""

    error_message = "Invalid URL encoded string"

    def render(self, text: str, **context: Any) -> str:
        if BAD_PERCENT_ESCAPE.search(text):
            raise InvalidEncodingError("Invalid URL encoded string")
        return unquote(text, encoding="utf-8", errors="strict")


@register_converter(FormatTag.URL_ENCODE)
class URLEncodeConverter(BaseConverter):
    """Percent-encode everything outside the URI unreserved set."""

    def render(self, text: str, **context: Any) -> str:
        return quote(text, safe=URL_SAFE_CHARACTERS, encoding="utf-8", errors="strict")


__all__ = [
    "b64decode_strict",
    "Base64DecodeConverter",
    "Base64EncodeConverter",
    "URLDecodeConverter",
    "URLEncodeConverter",
]
