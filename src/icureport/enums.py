"""Enumerations for icureport type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FormatType(StrEnum):
    """Kind of format descriptor attached to an ICU argument element.

    StrEnum provides automatic string conversion: str(FormatType.NUMBER) == "numberFormat"
    """

    NUMBER = "numberFormat"
    """Number argument: {value, number, bytes}"""

    PLURAL = "pluralFormat"
    """Plural or selectordinal argument: {count, plural, =1{...} other{...}}"""

    SELECT = "selectFormat"
    """Select argument: {kind, select, script{...} other{...}}"""


class NumberStyle(StrEnum):
    """Rendering style of a formatted number."""

    DECIMAL = "decimal"
    """Plain decimal number: 1,234.5"""

    PERCENT = "percent"
    """Percentage (value multiplied by 100): 12.34%"""


class ArgumentType(StrEnum):
    """Argument type keyword as written in an ICU template."""

    NUMBER = "number"
    PLURAL = "plural"
    SELECTORDINAL = "selectordinal"
    SELECT = "select"


__all__ = [
    "ArgumentType",
    "FormatType",
    "NumberStyle",
]
