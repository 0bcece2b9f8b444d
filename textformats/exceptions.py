"""Exception hierarchy for text format conversions.

These never escape `apply()`: converters raise them internally and the
converter base class turns them into failed ConversionOutcome values.
"""


class TextFormatError(Exception):
    """Base exception for all conversion errors."""

    pass


class EmptyContentError(TextFormatError):
    """Raised when a converter that needs content receives none."""

    def __init__(self, message: str = "Empty content"):
        super().__init__(message)


class DecodeError(TextFormatError):
    """Raised when serialized input does not match the expected grammar."""

    def __init__(self, message: str, offset: int | None = None):
        if offset is not None:
            message = f"{message} at offset {offset}"
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(DecodeError):
    """Raised when a length or count header claims more data than remains."""

    pass


class UnrecognizedTagError(DecodeError):
    """Raised when the decoder meets a type tag outside the known set."""

    def __init__(self, tag: str, offset: int):
        super().__init__(f"Unrecognized type tag {tag!r}", offset)
        self.tag = tag


class InvalidEncodingError(TextFormatError):
    """Raised when Base64 or percent-encoded input is malformed."""

    pass
