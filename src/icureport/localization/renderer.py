"""Strings used by the report renderer.

The renderer formats its own text client-side, so it receives raw templates
rather than rendered strings. get_renderer_formatted_strings() exports them
for one locale, keyed by key name.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from icureport.constants import MESSAGE_ID_SEPARATOR
from icureport.diagnostics import ErrorTemplate, UnsupportedLocaleError
from icureport.localization.registry import PROJECT_ROOT, format_message_id
from icureport.localization.store import get_default_store

if TYPE_CHECKING:
    from icureport.localization.store import LocaleDataStore
    from icureport.localization.types import LocaleCode

__all__ = ["RENDERER_MESSAGE_PREFIX", "RENDERER_UI_STRINGS", "get_renderer_formatted_strings"]

RENDERER_UI_STRINGS: Mapping[str, str] = MappingProxyType(
    {
        "varianceDisclaimer": "Values are estimated and may vary.",
        "opportunityResourceColumnLabel": "Opportunity",
        "opportunitySavingsColumnLabel": "Estimated Savings",
        "errorMissingAuditInfo": "Report error: no audit information",
        "errorLabel": "Error!",
        "warningHeader": "Warnings: ",
        "auditGroupExpandTooltip": "Show audits",
        "passedAuditsGroupTitle": "Passed audits",
        "notApplicableAuditsGroupTitle": "Not applicable",
        "manualAuditsGroupTitle": "Additional items to manually check",
        "toplevelWarningsMessage": "There were issues affecting this run of Lighthouse:",
        "crcInitialNavigation": "Initial Navigation",
        "crcLongestDurationLabel": "Maximum critical path latency:",
        "snippetExpandButtonLabel": "Expand snippet",
        "snippetCollapseButtonLabel": "Collapse snippet",
        "labDataTitle": "Lab Data",
        "thirdPartyResourcesLabel": "Show 3rd-party resources",
    }
)

# Ids of renderer strings all start with this module's path
RENDERER_MESSAGE_PREFIX: str = format_message_id(Path(__file__).resolve(), "", PROJECT_ROOT)


def get_renderer_formatted_strings(
    locale: LocaleCode, *, store: LocaleDataStore | None = None
) -> dict[str, str]:
    """Raw templates of every renderer string in locale, keyed by key name.

    Args:
        locale: Locale with a table in the store
        store: Locale data (default: bundled store)

    Returns:
        Key name -> template text. Keys the locale has not translated are absent.

    Raises:
        UnsupportedLocaleError: The store has no table for locale
    """
    store = store if store is not None else get_default_store()
    if locale not in store:
        raise UnsupportedLocaleError(ErrorTemplate.unsupported_locale(locale))

    strings: dict[str, str] = {}
    for message_id, entry in store[locale].items():
        if not message_id.startswith(RENDERER_MESSAGE_PREFIX):
            continue
        key = message_id.partition(MESSAGE_ID_SEPARATOR)[2]
        strings[key] = entry["message"]
    return strings
