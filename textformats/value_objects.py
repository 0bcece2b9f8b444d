"""Value objects produced by the formatter engine.

ConversionOutcome is the single result type every converter returns. The
Php* dataclasses form the tagged union built by the PHP serialize decoder;
they only live long enough to be flattened into JSON.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of a detection-independent conversion.

    Attributes:
        success: Whether the conversion produced output
        content: Transformed text on success, the untouched input on failure
        error: Human-readable failure message, None on success
    """

    success: bool
    content: str
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and self.error is not None:
            raise ValueError("A successful outcome cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("A failed outcome needs an error message")

    @classmethod
    def ok(cls, content: str) -> "ConversionOutcome":
        return cls(success=True, content=content)

    @classmethod
    def failed(cls, original: str, error: str) -> "ConversionOutcome":
        return cls(success=False, content=original, error=error)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success, "content": self.content}
        if self.error is not None:
            result["error"] = self.error
        return result


@dataclass(frozen=True)
class PhpNull:
    pass


@dataclass(frozen=True)
class PhpBool:
    value: bool


@dataclass(frozen=True)
class PhpInt:
    value: int


@dataclass(frozen=True)
class PhpFloat:
    value: float


@dataclass(frozen=True)
class PhpString:
    value: str


@dataclass(frozen=True)
class PhpArray:
    """A PHP array: ordered (key, value) pairs with int or str keys."""

    items: tuple[tuple[Union[int, str], "DecodedValue"], ...]

    def is_list(self) -> bool:
        """True when keys are exactly 0..n-1 in encounter order."""
        return all(key == index and isinstance(key, int) for index, (key, _) in enumerate(self.items))


@dataclass(frozen=True)
class PhpObject:
    """A serialized PHP object: class name plus ordered property pairs."""

    class_name: str
    fields: tuple[tuple[Union[int, str], "DecodedValue"], ...]


DecodedValue = Union[PhpNull, PhpBool, PhpInt, PhpFloat, PhpString, PhpArray, PhpObject]

CLASS_NAME_KEY = "__className"


def _pairs_to_dict(pairs, into: dict[str, Any]) -> dict[str, Any]:
    for key, value in pairs:
        into[str(key)] = to_json_value(value)
    return into


def to_json_value(value: DecodedValue) -> Any:
    """Flatten a decoded tree into plain JSON-compatible Python values.

    Args:
        value: Root of a tree built by the PHP serialize decoder

    Returns:
        None, bool, int, float, str, list or dict. Non-finite floats become
        None since JSON has no literal for them.

    Raises:
        TypeError: If the tree contains something that is not a DecodedValue
    """
    if isinstance(value, PhpNull):
        return None
    if isinstance(value, PhpBool):
        return value.value
    if isinstance(value, PhpInt):
        return value.value
    if isinstance(value, PhpFloat):
        return value.value if math.isfinite(value.value) else None
    if isinstance(value, PhpString):
        return value.value
    if isinstance(value, PhpArray):
        if value.is_list():
            return [to_json_value(item) for _, item in value.items]
        return _pairs_to_dict(value.items, {})
    if isinstance(value, PhpObject):
        return _pairs_to_dict(value.fields, {CLASS_NAME_KEY: value.class_name})
    raise TypeError(f"Not a decoded value: {type(value).__name__}")


__all__ = [
    "ConversionOutcome",
    "DecodedValue",
    "PhpNull",
    "PhpBool",
    "PhpInt",
    "PhpFloat",
    "PhpString",
    "PhpArray",
    "PhpObject",
    "CLASS_NAME_KEY",
    "to_json_value",
]
