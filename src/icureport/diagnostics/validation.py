"""Validation result for locale data checks.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of validating locale data.

    Attributes:
        errors: Diagnostics that make the data unusable for formatting
        warnings: Informational diagnostics (do not affect validity)

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[Diagnostic, ...]
    warnings: tuple[Diagnostic, ...]

    @property
    def is_valid(self) -> bool:
        """True if no errors were found. Warnings do not affect validity."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, include_warnings: bool = True) -> str:
        """Format result as human-readable text, one diagnostic per line.

        Args:
            include_warnings: If True (default), include warnings in output.

        Returns:
            Summary line followed by the individual diagnostics
        """
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        if self.is_valid:
            parts = ["Validation passed"]
        else:
            parts = [
                f"Validation failed: {self.error_count} error(s), "
                f"{self.warning_count} warning(s)"
            ]
        parts.extend(f"  {formatter.format(error)}" for error in self.errors)
        if include_warnings:
            parts.extend(f"  {formatter.format(warning)}" for warning in self.warnings)
        return "\n".join(parts)
