"""Format sniffing: propose candidate formats for a piece of text.

Sniffing is a cheap prefix/suffix test, not a parse. A candidate only means
the matching converter is worth offering; apply() decides whether it works.
"""

import re

from .enums import FormatTag

PHP_SERIALIZED_HEADER = re.compile(r"^((a|O|s|i|d|b):\d+[:;]|N;)")
XML_START = re.compile(r"^<[a-zA-Z]")
BASE64_TEXT = re.compile(r"^[A-Za-z0-9+/]+=*$")


def looks_like_json(trimmed: str) -> bool:
    return (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )


def looks_like_xml(trimmed: str) -> bool:
    return trimmed.startswith("<?xml") or XML_START.match(trimmed) is not None


def detect(text: str) -> list[FormatTag]:
    """Return the formats text could plausibly be written in.

    Args:
        text: Any string; empty and whitespace-only input is fine

    Returns:
        De-duplicated list of FormatTag values, always starting with
        FormatTag.RAW. Empty input yields only FormatTag.RAW.
    """
    formats = [FormatTag.RAW]
    if not text:
        return formats

    trimmed = text.strip()

    if looks_like_json(trimmed):
        formats += [FormatTag.JSON, FormatTag.JSON_MINIFIED]

    if PHP_SERIALIZED_HEADER.match(trimmed):
        formats.append(FormatTag.PHP_SERIALIZED)

    if looks_like_xml(trimmed):
        formats.append(FormatTag.XML)

    if trimmed and BASE64_TEXT.match(trimmed):
        formats.append(FormatTag.BASE64_DECODE)
    formats.append(FormatTag.BASE64_ENCODE)

    if "%" in trimmed:
        formats.append(FormatTag.URL_DECODE)
    formats.append(FormatTag.URL_ENCODE)

    # dict.fromkeys keeps first-seen order
    return list(dict.fromkeys(formats))


__all__ = ["detect", "looks_like_json", "looks_like_xml"]
