"""icureport exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

    IcuReportError
    ├── IcuSyntaxError
    ├── IcuReferenceError
    │   ├── UnsupportedLocaleError
    │   ├── MessageNotFoundError
    │   └── UnknownMessageError
    ├── IcuValueError
    │   ├── MissingValueError
    │   ├── ValueTypeMismatchError
    │   └── UnusedValueError
    ├── IcuFormatError
    │   └── FormattingError
    ├── PathEncodingError
    └── InvalidInputTypeError (also TypeError)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "FormattingError",
    "IcuFormatError",
    "IcuReferenceError",
    "IcuReportError",
    "IcuSyntaxError",
    "IcuValueError",
    "InvalidInputTypeError",
    "MessageNotFoundError",
    "MissingValueError",
    "PathEncodingError",
    "UnknownMessageError",
    "UnsupportedLocaleError",
    "UnusedValueError",
    "ValueTypeMismatchError",
]


class IcuReportError(Exception):
    """Base exception for all icureport errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize IcuReportError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class IcuSyntaxError(IcuReportError):
    """ICU template could not be parsed.

    The diagnostic span points at the offending character.
    """


class IcuReferenceError(IcuReportError):
    """A locale, message id or UI string could not be found."""


class UnsupportedLocaleError(IcuReferenceError):
    """Requested locale has no message table at all."""


class MessageNotFoundError(IcuReferenceError):
    """Message id absent from the locale table with no usable fallback text."""


class UnknownMessageError(IcuReferenceError):
    """Literal UI string not found in a module's merged string table."""


class IcuValueError(IcuReportError):
    """Supplied message values do not fit the template's placeholders."""


class MissingValueError(IcuValueError):
    """Placeholder referenced in the template has no supplied value."""


class ValueTypeMismatchError(IcuValueError):
    """Numeric placeholder received a non-numeric value."""


class UnusedValueError(IcuValueError):
    """Supplied value has no corresponding placeholder (errorCode exempt)."""


class IcuFormatError(IcuReportError):
    """Runtime failure while rendering a template or walking a document."""


class FormattingError(IcuFormatError):
    """Raised when locale-aware number formatting fails.

    Attributes:
        fallback_value: Plain string form of the value that failed to format
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Plain string form of the value
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class PathEncodingError(IcuReportError):
    """Document property name cannot be rendered as a path segment."""


class InvalidInputTypeError(IcuReportError, TypeError):
    """get_formatted() called with neither a message reference nor a string."""
