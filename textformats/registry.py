"""Converter registry and format dispatcher.

This module provides the core infrastructure for registering and invoking
text converters. It supports:

- Factory-based registration (a fresh converter is built for every call)
- Type-safe FormatTag keys, with plain string values accepted at the edge
- Identity fallback for raw text and for tags nothing is registered for
"""

import logging
from typing import Any, Callable, Optional

from .base import Converter
from .enums import FORMAT_LABELS, FormatTag
from .value_objects import ConversionOutcome

logger = logging.getLogger(__name__)

# Can be either a class or a callable that returns a Converter instance
ConverterFactory = Callable[[], Converter]

_REGISTRY: dict[FormatTag, ConverterFactory] = {}


def register_converter(
    tag: FormatTag,
    *,
    factory: Optional[ConverterFactory] = None,
) -> Callable:
    """Decorator to register a converter factory for a format tag.

    Args:
        tag: The format the converter produces
        factory: Optional factory callable. If None, uses the decorated class.
            The factory should return a new converter each time it's called.

    Returns:
        The decorator function

    Raises:
        ValueError: If a converter is already registered for the tag
        TypeError: If the factory is not callable or the tag is not a FormatTag

    Examples:
        @register_converter(FormatTag.JSON)
        class PrettyJSONConverter(BaseConverter):
            def render(self, text, **context):
                return json.dumps(json.loads(text), indent=2)
    """
    if not isinstance(tag, FormatTag):
        raise TypeError(f"tag must be a FormatTag enum value, got {type(tag).__name__}: {tag}")

    def decorator(cls_or_factory: Any) -> Any:
        actual_factory = factory if factory is not None else cls_or_factory

        if not callable(actual_factory):
            raise TypeError(f"Converter factory must be callable, got {type(actual_factory)}")

        if tag in _REGISTRY:
            raise ValueError(
                f"Converter already registered for {tag.value}. "
                f"Each format tag can only be registered once."
            )
        _REGISTRY[tag] = actual_factory
        return cls_or_factory

    return decorator


def resolve_tag(tag: FormatTag | str) -> Optional[FormatTag]:
    """Map a tag or its string value to a FormatTag, or None if unknown."""
    if isinstance(tag, FormatTag):
        return tag
    try:
        return FormatTag(tag)
    except ValueError:
        return None


def apply(text: str, tag: FormatTag | str, **context: Any) -> ConversionOutcome:
    """Convert text to the requested format.

    This is the main public API for performing conversions. Raw text, and
    any tag without a registered converter, comes back unchanged.

    Args:
        text: The text to convert
        tag: Target format, as a FormatTag or its string value
        **context: Passed through to the converter (e.g. settings=...)

    Returns:
        ConversionOutcome. Never raises for bad input.

    Examples:
        from textformats import apply, FormatTag

        outcome = apply('{"a":1}', FormatTag.JSON)
        if outcome.success:
            print(outcome.content)
    """
    resolved = resolve_tag(tag)
    if resolved is None:
        logger.warning(f"Unknown format tag {tag!r}, returning text unchanged")
        return ConversionOutcome.ok(text)
    if resolved is FormatTag.RAW:
        return ConversionOutcome.ok(text)

    factory = _REGISTRY.get(resolved)
    if factory is None:
        logger.warning(f"No converter registered for {resolved.value}, returning text unchanged")
        return ConversionOutcome.ok(text)

    logger.debug(f"Applying {resolved.value} to {len(text)} characters")
    try:
        return factory().convert(text, **context)
    except Exception as e:
        logger.exception(f"Converter for {resolved.value} raised unexpectedly")
        return ConversionOutcome.failed(text, str(e) or type(e).__name__)


def label(tag: FormatTag | str) -> str:
    """Get the human-readable name for a format tag.

    Unknown values are returned as their own string form.
    """
    resolved = resolve_tag(tag)
    if resolved is not None:
        return FORMAT_LABELS.get(resolved, resolved.value)
    return str(tag)


def has_converter(tag: FormatTag) -> bool:
    """Check if a converter is registered for the given tag."""
    return tag in _REGISTRY


def get_registered_formats() -> list[FormatTag]:
    """Get all tags that have a registered converter, in declaration order."""
    return [tag for tag in FormatTag if tag in _REGISTRY]


def clear_registry() -> None:
    """Clear all registered converters.

    Primarily useful for testing. In production, converters are registered
    at import time and remain registered for the process lifetime.
    """
    _REGISTRY.clear()


__all__ = [
    "register_converter",
    "resolve_tag",
    "apply",
    "label",
    "has_converter",
    "get_registered_formats",
    "clear_registry",
]
