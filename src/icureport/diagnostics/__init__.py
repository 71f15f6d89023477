"""Diagnostic system for icureport errors.

Provides structured error diagnostics with codes, spans and hints, the
exception hierarchy, and validation result types.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    FormattingError,
    IcuFormatError,
    IcuReferenceError,
    IcuReportError,
    IcuSyntaxError,
    IcuValueError,
    InvalidInputTypeError,
    MessageNotFoundError,
    MissingValueError,
    PathEncodingError,
    UnknownMessageError,
    UnsupportedLocaleError,
    UnusedValueError,
    ValueTypeMismatchError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "IcuFormatError",
    "IcuReferenceError",
    "IcuReportError",
    "IcuSyntaxError",
    "IcuValueError",
    "InvalidInputTypeError",
    "MessageNotFoundError",
    "MissingValueError",
    "OutputFormat",
    "PathEncodingError",
    "SourceSpan",
    "UnknownMessageError",
    "UnsupportedLocaleError",
    "UnusedValueError",
    "ValidationResult",
    "ValueTypeMismatchError",
]
