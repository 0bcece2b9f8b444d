"""Format tag enumeration for text transformations.

This module defines every format the engine can detect or convert to as an
enum, so registration, dispatch and display never depend on bare strings.
"""

from enum import Enum


class FormatTag(str, Enum):
    """Closed set of recognized text formats.

    Using str as the mixin allows tags to be compared with and serialized as
    their plain values ("json", "xml", ...) while keeping enum safety.
    """

    RAW = "raw"

    # Structured formats
    JSON = "json"
    JSON_MINIFIED = "json-minified"
    PHP_SERIALIZED = "legacy-serialized"  # PHP serialize() wire format
    XML = "xml"

    # Transport encodings
    BASE64_DECODE = "base64-decode"
    BASE64_ENCODE = "base64-encode"
    URL_DECODE = "url-decode"
    URL_ENCODE = "url-encode"

    @classmethod
    def _missing_(cls, value):
        # Older clients name the PHP format after the function that writes it
        if value == "php-serialize":
            return cls.PHP_SERIALIZED
        return None


FORMAT_LABELS: dict[FormatTag, str] = {
    FormatTag.RAW: "Raw",
    FormatTag.JSON: "JSON (Formatted)",
    FormatTag.JSON_MINIFIED: "JSON (Minified)",
    FormatTag.PHP_SERIALIZED: "PHP Serialize",
    FormatTag.XML: "XML",
    FormatTag.BASE64_DECODE: "Base64 Decode",
    FormatTag.BASE64_ENCODE: "Base64 Encode",
    FormatTag.URL_DECODE: "URL Decode",
    FormatTag.URL_ENCODE: "URL Encode",
}


__all__ = ["FormatTag", "FORMAT_LABELS"]
