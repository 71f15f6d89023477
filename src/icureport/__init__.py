"""icureport - ICU MessageFormat localization for report documents.

Resolves a requested language tag to an available locale, renders message
references ({id, values}) with locale-aware number and plural formatting, and
localizes whole report documents in place while recording which message
produced the text at every location.

Public API:
    lookup_locale - Closest available locale for a requested tag
    make_reference_factory - Mint message references from a module's UI strings
    format_icu_message - Render one message reference
    get_formatted - Render a reference or pass a plain string through
    replace_icu_message_instance_ids - Localize every reference in a document
    is_icu_message - Is a value a known message reference?
    register_locale_data - Add or replace a locale table
    get_renderer_formatted_strings - Raw renderer templates for a locale
    validate_locale_data - Check locale tables against the default locale

Exceptions:
    IcuReportError - Base exception class
    IcuSyntaxError - Malformed ICU templates
    IcuReferenceError - Unsupported locales, missing or unknown messages
    IcuValueError - Missing, mistyped or unused placeholder values

Submodules:
    icureport.syntax - ICU AST node types and parser
    icureport.introspection - Placeholder collection
    icureport.runtime - Value preformatting and template rendering
    icureport.localization - Locale data, references and document localization
    icureport.diagnostics - Error types, diagnostic codes and validation results
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    IcuReferenceError,
    IcuReportError,
    IcuSyntaxError,
    IcuValueError,
)
from .locale_utils import lookup_locale
from .localization import (
    UI_STRINGS,
    IcuMessage,
    LocaleDataStore,
    format_icu_message,
    get_formatted,
    get_renderer_formatted_strings,
    is_icu_message,
    localize_document,
    make_reference_factory,
    register_locale_data,
    replace_icu_message_instance_ids,
)
from .validation import validate_locale_data

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("icureport")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UI_STRINGS",
    "IcuMessage",
    "IcuReferenceError",
    "IcuReportError",
    "IcuSyntaxError",
    "IcuValueError",
    "LocaleDataStore",
    "__version__",
    "format_icu_message",
    "get_formatted",
    "get_renderer_formatted_strings",
    "is_icu_message",
    "localize_document",
    "lookup_locale",
    "make_reference_factory",
    "register_locale_data",
    "replace_icu_message_instance_ids",
    "validate_locale_data",
]
