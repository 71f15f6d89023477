"""Locale-aware number formatting for ICU number arguments.

Named number styles map to NumberFormatOptions, which build a Babel number
pattern. Values are rounded half away from zero before Babel sees them, so
"2.5 ms" style ties render the way browser number formatting renders them
rather than with Babel's default banker's rounding.

Python 3.13+. Uses Babel for CLDR number symbols and grouping.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext
from types import MappingProxyType
from typing import TYPE_CHECKING

from babel import numbers as babel_numbers

from icureport.diagnostics import ErrorTemplate, FormattingError
from icureport.enums import NumberStyle

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BUILTIN_NUMBER_STYLES",
    "DEFAULT_NUMBER_FORMATS",
    "DEFAULT_NUMBER_OPTIONS",
    "NumberFormatOptions",
    "format_number",
    "is_number",
    "resolve_number_options",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberFormatOptions:
    """Immutable options for rendering one number.

    Attributes:
        minimum_fraction_digits: Fraction digits always shown (default: 0)
        maximum_fraction_digits: Fraction digits shown at most (default: 3)
        style: Decimal or percent (percent multiplies by 100)
        use_grouping: Use the locale's thousands separator (default: True)

    Example:
        >>> NumberFormatOptions(minimum_fraction_digits=1, maximum_fraction_digits=1).pattern
        '#,##0.0'
    """

    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 3
    style: NumberStyle = NumberStyle.DECIMAL
    use_grouping: bool = True

    def __post_init__(self) -> None:
        """Validate fraction digit bounds.

        Raises:
            ValueError: If a bound is negative or minimum exceeds maximum
        """
        if self.minimum_fraction_digits < 0 or self.maximum_fraction_digits < 0:
            msg = "fraction digits must be non-negative"
            raise ValueError(msg)
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            msg = (
                f"minimum_fraction_digits ({self.minimum_fraction_digits}) exceeds "
                f"maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ValueError(msg)

    @property
    def pattern(self) -> str:
        """Babel number pattern for these options.

        '#,##0' = integer with grouping
        '#,##0.0##' = 1-3 decimal places with grouping
        '0.00' = exactly 2 decimal places, no grouping
        """
        integer_part = "#,##0" if self.use_grouping else "0"
        if self.maximum_fraction_digits == 0:
            pattern = integer_part
        else:
            required = "0" * self.minimum_fraction_digits
            optional = "#" * (self.maximum_fraction_digits - self.minimum_fraction_digits)
            pattern = f"{integer_part}.{required}{optional}"
        if self.style is NumberStyle.PERCENT:
            pattern += "%"
        return pattern


# Plain {value, number}: matches the conventional 0-3 fraction digits.
DEFAULT_NUMBER_OPTIONS: NumberFormatOptions = NumberFormatOptions()

# Styles every ICU implementation understands.
BUILTIN_NUMBER_STYLES: Mapping[str, NumberFormatOptions] = MappingProxyType(
    {
        "integer": NumberFormatOptions(maximum_fraction_digits=0),
        "percent": NumberFormatOptions(maximum_fraction_digits=0, style=NumberStyle.PERCENT),
    }
)

# Report-specific styles. Byte and millisecond values arrive preformatted
# (KiB, rounded to 10 ms) and render as integers; seconds are forced to the
# tenths place for limited output and ease of scanning.
DEFAULT_NUMBER_FORMATS: Mapping[str, NumberFormatOptions] = MappingProxyType(
    {
        "bytes": NumberFormatOptions(maximum_fraction_digits=0),
        "milliseconds": NumberFormatOptions(maximum_fraction_digits=0),
        "seconds": NumberFormatOptions(minimum_fraction_digits=1, maximum_fraction_digits=1),
        "extendedPercent": NumberFormatOptions(
            maximum_fraction_digits=2, style=NumberStyle.PERCENT
        ),
    }
)


def is_number(value: object) -> bool:
    """True for int, float and Decimal values; bool is not a number here.

    Example:
        >>> is_number(1.5), is_number("1.5"), is_number(True)
        (True, False, False)
    """
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def resolve_number_options(
    style: str | None,
    formats: Mapping[str, NumberFormatOptions] = DEFAULT_NUMBER_FORMATS,
) -> NumberFormatOptions:
    """Map a number argument's style name to formatting options.

    Lookup order: named formats, built-in styles, then the default decimal
    options (unknown names are logged and rendered as plain numbers).
    """
    if style is None:
        return DEFAULT_NUMBER_OPTIONS
    if style in formats:
        return formats[style]
    if style in BUILTIN_NUMBER_STYLES:
        return BUILTIN_NUMBER_STYLES[style]
    logger.debug("Unknown number style '%s', using default number format", style)
    return DEFAULT_NUMBER_OPTIONS


def _quantize(value: Decimal, digits: int) -> Decimal:
    """Round half away from zero to a fixed number of fraction digits."""
    if not value.is_finite():
        return value
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def format_number(
    value: int | float | Decimal,
    locale: Locale,
    options: NumberFormatOptions = DEFAULT_NUMBER_OPTIONS,
) -> str:
    """Format number with locale-specific separators.

    Args:
        value: Number to format (int, float, or Decimal)
        locale: Babel locale supplying CLDR symbols
        options: Fraction digits, style and grouping

    Returns:
        Formatted number string

    Raises:
        FormattingError: If Babel cannot format the value

    Examples:
        >>> format_number(1234.5, Locale.parse("en"))
        '1,234.5'
        >>> format_number(1234.5, Locale.parse("de_DE"))
        '1.234,5'
        >>> format_number(0.12345, Locale.parse("en"), DEFAULT_NUMBER_FORMATS["extendedPercent"])
        '12.35%'
    """
    try:
        # str() keeps the shortest round-tripping repr of floats (0.1 -> "0.1")
        exact = value if isinstance(value, Decimal) else Decimal(str(value))
        digits = options.maximum_fraction_digits
        # Large values need every integer digit plus the kept fraction digits
        precision = max(getcontext().prec, exact.adjusted() + digits + 3)
        with localcontext(prec=precision):
            if options.style is NumberStyle.PERCENT:
                rounded = _quantize(exact * 100, digits) / 100
                return str(
                    babel_numbers.format_percent(rounded, format=options.pattern, locale=locale)
                )
            rounded = _quantize(exact, digits)
            return str(
                babel_numbers.format_decimal(rounded, format=options.pattern, locale=locale)
            )
    except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
        raise FormattingError(
            ErrorTemplate.formatting_failed(value, str(locale), str(e)),
            fallback_value=str(value),
        ) from e
