"""
Custom exception classes for marshalkit.

Every failure kind has its own class with a fixed message, so callers can
catch precisely the kind they care about. All of them derive from
``ValueError`` which lets pydantic report them as validation errors when the
value types are used as model fields.
"""


class MarshalError(ValueError):
    """Base exception class for all marshalkit exceptions."""

    message = "marshal error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class InvalidFormatError(MarshalError):
    """Raised when a byte size or checkbox value cannot be parsed."""

    message = "invalid format"


class InvalidDurationError(MarshalError):
    """
    Raised when a JSON duration is not a non-empty string.

    Grammar errors in the text itself are reported by the more specific
    ``DurationSyntaxError``.
    """

    message = "invalid duration"


class DurationSyntaxError(InvalidDurationError):
    """
    Raised when duration text does not match the duration grammar.

    Unlike the other errors the message embeds the offending input:

        >>> raise DurationSyntaxError("time: invalid duration 1x")
    """


class InvalidOctalModeError(MarshalError):
    """Raised when a file mode is out of range or not an octal numeral."""

    message = "invalid octal mode"


class InvalidURLError(MarshalError):
    """Raised when a URL is malformed, empty or not a string."""

    message = "invalid url"
