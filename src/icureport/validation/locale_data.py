"""Locale data validation.

Standalone checks for CI pipelines and locale tooling, run over a whole
LocaleDataStore before it is used for formatting:

1. Syntax: every template of every locale parses (errors)
2. Placeholders: a translated template uses exactly the placeholders of the
   default-locale template with the same id (errors)
3. Coverage: translated ids missing from the default locale (warnings)

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from icureport.constants import DEFAULT_LOCALE
from icureport.diagnostics import Diagnostic, ErrorTemplate, IcuSyntaxError, ValidationResult
from icureport.introspection import extract_placeholders
from icureport.syntax import parse_message

if TYPE_CHECKING:
    from icureport.localization.store import LocaleDataStore
    from icureport.localization.types import LocaleCode, MessageId

__all__ = ["validate_locale_data"]

logger = logging.getLogger(__name__)


def _parse_placeholders(
    locale: LocaleCode,
    message_id: MessageId,
    template: str,
    errors: list[Diagnostic],
) -> frozenset[str] | None:
    """Placeholders of template, or None (with an error recorded) if it does not parse."""
    try:
        ast = parse_message(template)
    except IcuSyntaxError as e:
        errors.append(ErrorTemplate.validation_parse_error(locale, message_id, str(e)))
        return None
    return extract_placeholders(ast.elements)


def validate_locale_data(store: LocaleDataStore | None = None) -> ValidationResult:
    """Validate every locale table against the default locale.

    Args:
        store: Locale data to check (default: bundled store)

    Returns:
        ValidationResult with parse/placeholder errors and coverage warnings

    Example:
        >>> result = validate_locale_data()
        >>> if not result.is_valid:
        ...     print(result.format())
    """
    if store is None:
        from icureport.localization.store import get_default_store  # noqa: PLC0415

        store = get_default_store()

    errors: list[Diagnostic] = []
    warnings: list[Diagnostic] = []

    # Pass 1: default locale templates define the expected placeholders
    expected: dict[MessageId, frozenset[str]] = {}
    if DEFAULT_LOCALE in store:
        for message_id, entry in store[DEFAULT_LOCALE].items():
            placeholders = _parse_placeholders(DEFAULT_LOCALE, message_id, entry["message"], errors)
            if placeholders is not None:
                expected[message_id] = placeholders
    else:
        warnings.append(ErrorTemplate.validation_missing_default_locale(DEFAULT_LOCALE))

    # Pass 2: every other locale
    for locale in store:
        if locale == DEFAULT_LOCALE:
            continue
        default_table = store.get(DEFAULT_LOCALE, {})
        for message_id, entry in store[locale].items():
            found = _parse_placeholders(locale, message_id, entry["message"], errors)
            if message_id not in default_table:
                warnings.append(ErrorTemplate.validation_unknown_id(locale, message_id))
                continue
            if found is None or message_id not in expected:
                continue
            if found != expected[message_id]:
                errors.append(
                    ErrorTemplate.validation_placeholder_mismatch(
                        locale, message_id, expected[message_id], found
                    )
                )

    logger.debug(
        "Validated %d locales: %d errors, %d warnings", len(store), len(errors), len(warnings)
    )
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
