"""Base classes and protocols for text format converters.

This module provides the interface every converter implements, along with a
base class that turns internal errors into failed ConversionOutcome values so
that no exception crosses the engine boundary.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol

from .exceptions import TextFormatError
from .value_objects import ConversionOutcome

logger = logging.getLogger(__name__)

# Errors a converter may raise while parsing or encoding untrusted text.
# Anything else is a programming error and is left to the dispatcher.
CONVERSION_ERRORS = (TextFormatError, ValueError, UnicodeError, RecursionError)


class Converter(Protocol):
    """Protocol defining the converter interface.

    All converters implement convert(), which accepts the input text and
    optional context kwargs and returns a ConversionOutcome.
    """

    def convert(self, text: str, **context: Any) -> ConversionOutcome:
        """Convert text to the converter's target format.

        Args:
            text: Input text, typically a single database cell or key value
            **context: Optional keyword arguments. Converters currently read:
                - settings: FormatterSettings overriding the defaults

        Returns:
            ConversionOutcome with the converted content, or the original
            text and an error message
        """
        ...


class BaseConverter(ABC):
    """Abstract base class for converters.

    Subclasses implement render(), which returns the converted text or raises.
    convert() catches the expected failure types and degrades them to a
    failed outcome that carries the original input.
    """

    #: Message used instead of the exception text, if set
    error_message: str | None = None

    def convert(self, text: str, **context: Any) -> ConversionOutcome:
        try:
            return ConversionOutcome.ok(self.render(text, **context))
        except CONVERSION_ERRORS as e:
            message = self.describe_error(e)
            logger.debug(f"{type(self).__name__} failed: {message}")
            return ConversionOutcome.failed(text, message)

    def describe_error(self, error: Exception) -> str:
        """Turn a caught exception into the message reported to the caller."""
        if self.error_message:
            return self.error_message
        if isinstance(error, RecursionError):
            return "Input is nested too deeply"
        return str(error) or type(error).__name__

    @abstractmethod
    def render(self, text: str, **context: Any) -> str:
        """Return the converted text, raising on malformed input."""
        pass


__all__ = ["Converter", "BaseConverter", "CONVERSION_ERRORS"]
