"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (locales, message ids, UI strings)
        2000-2999: Value errors (placeholder values supplied by callers)
        3000-3999: Syntax errors (ICU template parser failures)
        4000-4999: Formatting errors (rendering, document walk)
        5000-5199: Validation errors and warnings (locale data checks)
    """

    # Reference errors (1000-1999)
    UNSUPPORTED_LOCALE = 1001
    MESSAGE_NOT_FOUND = 1002
    UNKNOWN_MESSAGE = 1003
    STALE_TRANSLATION = 1004

    # Value errors (2000-2999)
    MISSING_VALUE = 2001
    TYPE_MISMATCH = 2002
    UNUSED_VALUE = 2003

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_CHARACTER = 3002
    UNSUPPORTED_ARGUMENT_TYPE = 3003
    MISSING_OTHER_OPTION = 3004
    DUPLICATE_OPTION = 3005
    PARSE_NESTING_DEPTH_EXCEEDED = 3006

    # Formatting errors (4000-4999)
    FORMATTING_FAILED = 4001
    PATH_ENCODING = 4002
    INVALID_INPUT_TYPE = 4003
    MAX_DEPTH_EXCEEDED = 4004
    CYCLIC_DOCUMENT = 4005

    # Validation errors (5000-5099)
    VALIDATION_PARSE_ERROR = 5001
    VALIDATION_PLACEHOLDER_MISMATCH = 5002

    # Validation warnings (5100-5199)
    VALIDATION_UNKNOWN_ID = 5101
    VALIDATION_MISSING_DEFAULT_LOCALE = 5102


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Template location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line/column
                is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Template location (syntax errors only)
        hint: Suggestion for fixing the error
        message_id: Message id or template the error relates to
        placeholder: Placeholder name that caused the error
        locale_code: Locale in effect when the error occurred
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    message_id: str | None = None
    placeholder: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_VALUE]: ICU message "..." contains a value reference ("x") ...
              = placeholder: x
              = help: Pass a value for every placeholder in the message

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
