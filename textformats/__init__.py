"""Structured-text format detection and conversion.

Given a value pulled from a database cell or key-value store, this package
guesses which formats the text could be written in and converts it between
raw text, JSON, PHP serialize() data, XML, Base64 and percent-encoding.

Public API
----------
The main entry points are:

    from textformats import detect, apply, label, FormatTag

    # Candidate formats, FormatTag.RAW first
    tags = detect('a:1:{s:3:"key";s:3:"val";}')

    # Convert; never raises for bad input
    outcome = apply(text, FormatTag.PHP_SERIALIZED)
    if outcome.success:
        print(outcome.content)
    else:
        print(outcome.error)

    # Display name for a picker
    label(FormatTag.JSON)  # "JSON (Formatted)"

Converter settings can be overridden per call:

    from textformats import FormatterSettings

    apply(text, FormatTag.JSON, settings=FormatterSettings(json_indent=4))

Adding New Converters
---------------------
    from textformats import register_converter, FormatTag
    from textformats.base import BaseConverter

    @register_converter(FormatTag.SOME_TAG)
    class MyConverter(BaseConverter):
        def render(self, text, **context):
            return text.upper()
"""

# Import converters to trigger registration
from . import converters  # noqa: F401

# Export public API
from .config import FormatterSettings
from .enums import FORMAT_LABELS, FormatTag
from .registry import (
    apply,
    get_registered_formats,
    has_converter,
    label,
    register_converter,
)
from .sniffer import detect
from .value_objects import ConversionOutcome

__all__ = [
    # Main API
    "detect",
    "apply",
    "label",
    "register_converter",
    "has_converter",
    "get_registered_formats",
    # Types
    "FormatTag",
    "FORMAT_LABELS",
    "ConversionOutcome",
    "FormatterSettings",
]
