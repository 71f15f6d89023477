"""Runtime: template rendering, number formatting and value preformatting.

Public API:
    MessageFormatter - Render a parsed ICU template for a locale
    preformat_values - Rescale raw report values for their placeholders
    format_number - Babel-backed number formatting
    select_plural_category - CLDR plural category selection

Python 3.13+. Uses Babel for CLDR data.
"""

from .formatter import MessageFormatter
from .number_format import (
    BUILTIN_NUMBER_STYLES,
    DEFAULT_NUMBER_FORMATS,
    DEFAULT_NUMBER_OPTIONS,
    NumberFormatOptions,
    format_number,
    is_number,
    resolve_number_options,
)
from .plural_rules import select_plural_category
from .preformat import MessageValue, MessageValues, preformat_values

__all__ = [
    "BUILTIN_NUMBER_STYLES",
    "DEFAULT_NUMBER_FORMATS",
    "DEFAULT_NUMBER_OPTIONS",
    "MessageFormatter",
    "MessageValue",
    "MessageValues",
    "NumberFormatOptions",
    "format_number",
    "is_number",
    "preformat_values",
    "resolve_number_options",
    "select_plural_category",
]
