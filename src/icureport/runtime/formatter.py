"""ICU template formatter: render a parsed template with values for a locale.

MessageFormatter binds a template to a locale and a set of named number
formats, then renders value mappings into strings:

    >>> formatter = MessageFormatter("{n, plural, =1{# file} other{# files}}", "en")
    >>> formatter.format({"n": 1200})
    '1,200 files'

Babel supplies plural rules and number symbols. A locale Babel does not know
falls back to the default locale with a warning, mirroring how unknown
locales degrade elsewhere in the stack.

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from icureport.constants import DEFAULT_LOCALE
from icureport.diagnostics import ErrorTemplate, MissingValueError, ValueTypeMismatchError
from icureport.locale_utils import get_babel_locale
from icureport.runtime.number_format import (
    DEFAULT_NUMBER_FORMATS,
    DEFAULT_NUMBER_OPTIONS,
    NumberFormatOptions,
    format_number,
    is_number,
    resolve_number_options,
)
from icureport.runtime.plural_rules import select_plural_category
from icureport.runtime.preformat import MessageValue, MessageValues
from icureport.syntax import (
    ArgumentElement,
    MessageAst,
    NumberFormat,
    PluralFormat,
    PluralOption,
    PoundElement,
    SelectFormat,
    TextElement,
    parse_message,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["MessageFormatter"]

logger = logging.getLogger(__name__)


def _stringify(value: MessageValue) -> str:
    """Plain substitution text for {id} arguments.

    Integral floats drop their ".0" (148.0 -> "148").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class MessageFormatter:
    """Renders one ICU template for one locale.

    Immutable after construction and safe to share between threads.

    Attributes:
        template: The ICU source text
        locale: Locale code used for plural rules and number symbols
    """

    __slots__ = ("_ast", "_babel_locale", "_formats", "locale", "template")

    def __init__(
        self,
        template: str,
        locale: str,
        formats: Mapping[str, NumberFormatOptions] = DEFAULT_NUMBER_FORMATS,
    ) -> None:
        """Parse template and bind it to locale.

        Args:
            template: ICU MessageFormat template
            locale: Locale code (BCP-47 or POSIX)
            formats: Named number styles available to {x, number, style}

        Raises:
            IcuSyntaxError: If the template is malformed
        """
        self.template = template
        self.locale = locale
        self._formats = formats
        self._ast = parse_message(template)
        self._babel_locale = self._load_babel_locale(locale)

    @staticmethod
    def _load_babel_locale(locale: str) -> Locale:
        try:
            return get_babel_locale(locale)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale, e, DEFAULT_LOCALE
            )
            return get_babel_locale(DEFAULT_LOCALE)

    def get_ast(self) -> MessageAst:
        """Parsed template tree (used to collect placeholders)."""
        return self._ast

    def format(self, values: MessageValues | None = None) -> str:
        """Render the template.

        Args:
            values: Placeholder values (already preformatted)

        Returns:
            Rendered string

        Raises:
            MissingValueError: A placeholder has no value
            ValueTypeMismatchError: A number/plural placeholder got a non-number
            FormattingError: Babel could not format a number
        """
        return self._render(self._ast, values or {}, None)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render(
        self,
        ast: MessageAst,
        values: MessageValues,
        pound_value: int | float | Decimal | None,
    ) -> str:
        parts: list[str] = []
        for element in ast.elements:
            match element:
                case TextElement(value=text):
                    parts.append(text)
                case PoundElement():
                    if pound_value is None:
                        parts.append("#")
                    else:
                        parts.append(
                            format_number(pound_value, self._babel_locale, DEFAULT_NUMBER_OPTIONS)
                        )
                case ArgumentElement():
                    parts.append(self._render_argument(element, values, pound_value))
        return "".join(parts)

    def _render_argument(
        self,
        element: ArgumentElement,
        values: MessageValues,
        pound_value: int | float | Decimal | None,
    ) -> str:
        if element.id not in values:
            raise MissingValueError(ErrorTemplate.missing_value(self.template, element.id))
        value = values[element.id]

        match element.format:
            case None:
                return _stringify(value)
            case NumberFormat(style=style):
                number = self._require_number(element, value)
                options = resolve_number_options(style, self._formats)
                return format_number(number, self._babel_locale, options)
            case PluralFormat():
                number = self._require_number(element, value)
                option = self._select_plural(element.format, number)
                return self._render(option.value, values, number - element.format.offset)
            case SelectFormat():
                option = element.format.get_option(_stringify(value)) or element.format.get_option(
                    "other"
                )
                # Parser guarantees an "other" option
                assert option is not None
                return self._render(option.value, values, pound_value)

    def _require_number(
        self, element: ArgumentElement, value: MessageValue
    ) -> int | float | Decimal:
        if not is_number(value):
            raise ValueTypeMismatchError(
                ErrorTemplate.type_mismatch(self.template, element.id, value)
            )
        return value  # type: ignore[return-value]

    def _select_plural(
        self, plural: PluralFormat, number: int | float | Decimal
    ) -> PluralOption:
        """Exact =N match first, then the CLDR category, then 'other'."""
        exact = Decimal(str(number))
        for option in plural.options:
            if option.key.startswith("="):
                try:
                    if Decimal(option.key[1:]) == exact:
                        return option
                except ArithmeticError:
                    continue

        category = select_plural_category(
            number - plural.offset, str(self._babel_locale), ordinal=plural.ordinal
        )
        option = plural.get_option(category) or plural.get_option("other")
        # Parser guarantees an "other" option
        assert option is not None
        return option
