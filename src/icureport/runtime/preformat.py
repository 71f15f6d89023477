"""Value preformatting: convert raw report numbers to each placeholder's unit.

Reports carry raw measurements (bytes, milliseconds). Templates declare how
a placeholder is shown ({wastedBytes, number, bytes}), so before rendering
each value is rescaled and rounded for its declared style:

    milliseconds   rounded to the nearest 10
    seconds        timeInMs only: milliseconds -> seconds, nearest 0.1
    bytes          bytes -> KiB (rounding left to the number format)
    other styles   unchanged

Also checks that values and placeholders match one-to-one, so a report
never silently renders a template with a missing or misspelled value.

Python 3.13+.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal

from icureport.constants import ERROR_CODE_KEY, SECONDS_PLACEHOLDER_ID
from icureport.diagnostics import (
    ErrorTemplate,
    MissingValueError,
    UnusedValueError,
    ValueTypeMismatchError,
)
from icureport.runtime.number_format import is_number
from icureport.syntax import ArgumentElement, NumberFormat

__all__ = ["MessageValue", "MessageValues", "preformat_values"]

type MessageValue = str | int | float | Decimal
"""A single placeholder value."""

type MessageValues = Mapping[str, MessageValue]
"""Placeholder name -> value, as supplied with a message reference."""


def _round_half_up(value: int | float | Decimal) -> int | float | Decimal:
    """Round to the nearest integer, ties toward +infinity.

    NaN and infinities have no integer neighbour and are returned unchanged.
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            return value
        return math.floor(value + Decimal("0.5"))
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _convert(style: str | None, placeholder: str, value: int | float | Decimal) -> MessageValue:
    if style == "milliseconds":
        return _round_half_up(value / 10) * 10
    if style == "seconds" and placeholder == SECONDS_PLACEHOLDER_ID:
        return _round_half_up(value / 100) / 10
    if style == "bytes":
        return value / 1024
    return value


def preformat_values(
    argument_elements: Mapping[str, ArgumentElement],
    values: MessageValues,
    icu_message: str,
) -> dict[str, MessageValue]:
    """Return a copy of values formatted for how the template uses them.

    The original mapping is unchanged.

    Args:
        argument_elements: Placeholders collected from the template
        values: Raw values supplied with the message reference
        icu_message: Template text, used for error context

    Returns:
        New mapping of placeholder name to preformatted value. The errorCode
        key is carried through even when no placeholder references it.

    Raises:
        MissingValueError: A placeholder has no value
        ValueTypeMismatchError: A number placeholder received a non-number
        UnusedValueError: A value has no placeholder (errorCode exempt)

    Example:
        >>> ast = parse_message("Potential savings of {wastedBytes, number, bytes}\\xa0KB")
        >>> elements = collect_argument_elements(ast.elements)
        >>> preformat_values(elements, {"wastedBytes": 151552}, "...")
        {'wastedBytes': 148.0}
    """
    formatted_values: dict[str, MessageValue] = {}

    for placeholder, element in argument_elements.items():
        if placeholder not in values:
            raise MissingValueError(ErrorTemplate.missing_value(icu_message, placeholder))

        value = values[placeholder]

        # Direct {id} replacement, plural and select selectors pass through
        if not isinstance(element.format, NumberFormat):
            formatted_values[placeholder] = value
            continue

        if not is_number(value):
            raise ValueTypeMismatchError(
                ErrorTemplate.type_mismatch(icu_message, placeholder, value)
            )
        formatted_values[placeholder] = _convert(element.format.style, placeholder, value)  # type: ignore[arg-type]

    for value_id in values:
        if value_id in formatted_values:
            continue

        # errorCode is a special case always allowed for error reporting call sites
        if value_id == ERROR_CODE_KEY:
            formatted_values[ERROR_CODE_KEY] = values[ERROR_CODE_KEY]
            continue

        raise UnusedValueError(ErrorTemplate.unused_value(icu_message, value_id))

    return formatted_values
