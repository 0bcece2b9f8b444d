"""Converters that re-serialize JSON text."""

import json
from typing import Any

from ..base import BaseConverter
from ..config import resolve_settings
from ..enums import FormatTag
from ..registry import register_converter


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def parse_json(text: str) -> Any:
    """Parse strict JSON.

    Python's parser also accepts NaN, Infinity and -Infinity; those are not
    JSON and are rejected here.

    Raises:
        json.JSONDecodeError: On malformed JSON (a ValueError subclass)
        ValueError: On a non-standard numeric literal
    """
    return json.loads(text, parse_constant=_reject_constant)


@register_converter(FormatTag.JSON)
class PrettyJSONConverter(BaseConverter):
    """Re-indent JSON with a fixed indent (2 spaces unless configured)."""

    def render(self, text: str, **context: Any) -> str:
        settings = resolve_settings(context)
        return json.dumps(parse_json(text), indent=settings.json_indent, ensure_ascii=False)


@register_converter(FormatTag.JSON_MINIFIED)
class MinifiedJSONConverter(BaseConverter):
    """Re-serialize JSON without any insignificant whitespace."""

    def render(self, text: str, **context: Any) -> str:
        return json.dumps(parse_json(text), separators=(",", ":"), ensure_ascii=False)


__all__ = ["parse_json", "PrettyJSONConverter", "MinifiedJSONConverter"]
