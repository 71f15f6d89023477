"""Shared constants for icureport.

This module provides centralized configuration constants used across the
syntax, runtime and localization packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locales: default locale and pseudo-locale numeral donors
- Values: placeholder names with special handling
- Depth limits: Recursion protection for parsing and document walks
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locales
    "DEFAULT_LOCALE",
    "PSEUDO_LOCALE_NUMERAL_DONORS",
    # Values
    "ERROR_CODE_KEY",
    "SECONDS_PLACEHOLDER_ID",
    # Message ids
    "MESSAGE_ID_SEPARATOR",
    # Depth limits
    "MAX_DEPTH",
    "MAX_DOCUMENT_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "DEFAULT_CACHE_SIZE",
]

# ============================================================================
# LOCALES
# ============================================================================

# Locale every resolution falls back to. Its table is also the registry of
# known message ids: a message reference is only well-formed if its id is
# present here.
DEFAULT_LOCALE: str = "en"

# Accented and bidi pseudo-locales keep their placeholder text but borrow
# a real locale's numeral conventions, so separators visibly change.
PSEUDO_LOCALE_NUMERAL_DONORS: MappingProxyType[str, str] = MappingProxyType(
    {
        "en-XA": "de-DE",
        "en-XL": "de-DE",
    }
)

# ============================================================================
# VALUES
# ============================================================================

# Always accepted in message values, even without a matching placeholder.
# Generic error-reporting call sites pass it regardless of the template.
ERROR_CODE_KEY: str = "errorCode"

# The only placeholder converted from milliseconds for the "seconds" style.
SECONDS_PLACEHOLDER_ID: str = "timeInMs"

# ============================================================================
# MESSAGE IDS
# ============================================================================

# Message ids are "<relative/unix/path.py> | <key name>".
MESSAGE_ID_SEPARATOR: str = " | "

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum depth for recursion protection.
# Used by: ICU parser (nested plural/select branches).
# Templates rarely nest beyond 3 levels; 100 is clearly malformed.
MAX_DEPTH: int = 100

# Document walk limit. Cycles are detected separately; this only keeps deep
# but valid documents clear of RecursionError.
MAX_DOCUMENT_DEPTH: int = 500

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum memoized parsed templates.
# A full report references a few hundred distinct templates per locale.
DEFAULT_CACHE_SIZE: int = 1000
