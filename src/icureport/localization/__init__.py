"""Localization: locale data, message references and document rendering.

Public API:
    LocaleDataStore, get_default_store, register_locale_data - Locale tables
    IcuMessage, is_icu_message - Message references
    make_reference_factory, UI_STRINGS - Mint references from UI strings
    format_icu_message, get_formatted - Render one reference
    replace_icu_message_instance_ids - Render every reference in a document
    get_renderer_formatted_strings - Raw renderer templates for a locale

Python 3.13+. Uses Babel (via icureport.runtime) for CLDR data.
"""

from .document import format_path_as_string, localize_document, replace_icu_message_instance_ids
from .formatting import format_icu_message, get_formatted, get_numeral_locale
from .message import IcuMessage, is_icu_message, to_icu_message
from .registry import (
    PROJECT_ROOT,
    UI_STRINGS,
    MessageReferenceFactory,
    format_message_id,
    make_reference_factory,
)
from .renderer import RENDERER_UI_STRINGS, get_renderer_formatted_strings
from .store import BUNDLED_LOCALES_DIR, LocaleDataStore, get_default_store, register_locale_data
from .types import LocaleCode, LocaleMessage, LocaleMessages, MessageId, PathEntry, PathMessages

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale data
    "BUNDLED_LOCALES_DIR",
    "LocaleDataStore",
    "get_default_store",
    "register_locale_data",
    # References
    "IcuMessage",
    "is_icu_message",
    "to_icu_message",
    "PROJECT_ROOT",
    "UI_STRINGS",
    "MessageReferenceFactory",
    "format_message_id",
    "make_reference_factory",
    # Formatting
    "format_icu_message",
    "get_formatted",
    "get_numeral_locale",
    "format_path_as_string",
    "localize_document",
    "replace_icu_message_instance_ids",
    "RENDERER_UI_STRINGS",
    "get_renderer_formatted_strings",
    # Types
    "LocaleCode",
    "LocaleMessage",
    "LocaleMessages",
    "MessageId",
    "PathEntry",
    "PathMessages",
]
