"""Message formatting: render a message reference for a locale.

Looks up the reference's template in the locale table, falling back to the
text the reference was minted from, then preformats the values and renders
the template with Babel-backed number and plural formatting.

Python 3.13+. Uses Babel (via icureport.runtime) for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from icureport.constants import DEFAULT_LOCALE, PSEUDO_LOCALE_NUMERAL_DONORS
from icureport.diagnostics import (
    ErrorTemplate,
    InvalidInputTypeError,
    MessageNotFoundError,
    UnsupportedLocaleError,
)
from icureport.introspection import collect_argument_elements
from icureport.localization.message import IcuMessage, is_icu_message, to_icu_message
from icureport.localization.store import get_default_store
from icureport.runtime import DEFAULT_NUMBER_FORMATS, MessageFormatter, preformat_values

if TYPE_CHECKING:
    from icureport.localization.store import LocaleDataStore
    from icureport.localization.types import LocaleCode

__all__ = ["format_icu_message", "get_formatted", "get_numeral_locale"]

logger = logging.getLogger(__name__)


def get_numeral_locale(locale: LocaleCode) -> LocaleCode:
    """Locale whose numeral conventions are used to render locale.

    Pseudo-locales keep their own (accented) text but borrow a real locale's
    number formatting so separators are visibly non-English.

    Example:
        >>> get_numeral_locale("en-XA")
        'de-DE'
        >>> get_numeral_locale("es")
        'es'
    """
    return PSEUDO_LOCALE_NUMERAL_DONORS.get(locale, locale)


def _resolve_template(store: LocaleDataStore, locale: LocaleCode, icu_message: IcuMessage) -> str:
    if locale not in store:
        raise UnsupportedLocaleError(ErrorTemplate.unsupported_locale(locale))

    template = store.get_message(locale, icu_message.id)

    # Better an English message than no message at all; for many numeric
    # messages the difference does not even show.
    if not template and icu_message.ui_string_message:
        template = icu_message.ui_string_message
        if template != store.get_message(DEFAULT_LOCALE, icu_message.id):
            diagnostic = ErrorTemplate.stale_translation(icu_message.id, DEFAULT_LOCALE)
            logger.debug(diagnostic.message)

    if not template:
        raise MessageNotFoundError(ErrorTemplate.message_not_found(icu_message.id, locale))
    return template


def format_icu_message(
    locale: LocaleCode,
    icu_message: IcuMessage | Mapping[str, Any],
    *,
    store: LocaleDataStore | None = None,
) -> str:
    """Render a message reference in locale.

    Args:
        locale: Locale with a table in the store (see lookup_locale)
        icu_message: Reference to render (typed or plain mapping)
        store: Locale data (default: bundled store)

    Returns:
        The localized string

    Raises:
        UnsupportedLocaleError: The store has no table for locale
        MessageNotFoundError: No template and no fallback text
        MissingValueError: The template uses a placeholder without a value
        ValueTypeMismatchError: A number placeholder received a non-number
        UnusedValueError: A value matches no placeholder (errorCode exempt)
        IcuSyntaxError: The template is malformed

    Example:
        >>> format_icu_message("en", {"id": "icureport/localization/registry.py | ms",
        ...                           "values": {"timeInMs": 127}})
        '130\\xa0ms'
    """
    store = store if store is not None else get_default_store()
    reference = to_icu_message(icu_message)
    template = _resolve_template(store, locale, reference)

    formatter = MessageFormatter(template, get_numeral_locale(locale), DEFAULT_NUMBER_FORMATS)
    argument_elements = collect_argument_elements(formatter.get_ast().elements)
    values = preformat_values(argument_elements, reference.values_or_empty, template)
    return formatter.format(values)


def get_formatted(
    value: IcuMessage | Mapping[str, Any] | str,
    locale: LocaleCode,
    *,
    store: LocaleDataStore | None = None,
) -> str:
    """Render a message reference, or pass a plain string through.

    Raises:
        InvalidInputTypeError: value is neither a reference nor a string
    """
    if is_icu_message(value, store):
        return format_icu_message(locale, value, store=store)
    if isinstance(value, str):
        return value
    raise InvalidInputTypeError(ErrorTemplate.invalid_input_type(value))
