"""Locale utilities: canonicalization, Babel access and closest-locale lookup.

Centralizes locale handling used throughout the codebase:
- BCP-47 canonical casing for requested tags ("EN-us" -> "en-US")
- BCP-47 to POSIX conversion for Babel ("en-US" -> "en_US")
- Cached Babel Locale objects
- Platform default locale detection
- RFC 4647 "lookup" of the closest available locale

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from icureport.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale",
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "lookup_closest_locale",
    "lookup_locale",
    "normalize_locale",
]

_LANGUAGE_SUBTAG = re.compile(r"[A-Za-z]{2,3}|[A-Za-z]{5,8}")
_SUBTAG = re.compile(r"[A-Za-z0-9]{1,8}")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def canonicalize_locale(locale_code: str) -> str:
    """Canonicalize a language tag's casing and separators.

    Casing follows BCP-47 conventions subtag by subtag, so the tag only needs
    to be well-formed, not backed by CLDR data: "xx-YY" canonicalizes fine.
    Extension and private-use sequences ("-u-co-phonebk", "-x-foo") and
    extended language subtags ("zh-cmn") are kept, lowercased. Encoding and
    modifier suffixes such as ".UTF-8" or "@euro" are dropped.

    Args:
        locale_code: Language tag with "-" or "_" separators

    Returns:
        Canonical BCP-47 tag: lowercase language, titlecase script,
        uppercase region, everything else lowercase

    Raises:
        ValueError: If the tag is not a well-formed language tag

    Example:
        >>> canonicalize_locale("EN_us")
        'en-US'
        >>> canonicalize_locale("zh-hant-tw")
        'zh-Hant-TW'
        >>> canonicalize_locale("de-DE-U-CO-PHONEBK")
        'de-DE-u-co-phonebk'
    """
    tag = locale_code.partition(".")[0].partition("@")[0].replace("_", "-")
    subtags = tag.split("-")
    if not _LANGUAGE_SUBTAG.fullmatch(subtags[0]) or not all(
        _SUBTAG.fullmatch(subtag) for subtag in subtags
    ):
        msg = f"{locale_code!r} is not a valid locale identifier"
        raise ValueError(msg)

    canonical = [subtags[0].lower()]
    in_extension = False
    for subtag in subtags[1:]:
        # Everything after a singleton belongs to an extension or private use
        in_extension = in_extension or len(subtag) == 1
        if in_extension:
            canonical.append(subtag.lower())
        elif len(subtag) == 2 and subtag.isalpha():
            canonical.append(subtag.upper())
        elif len(subtag) == 4 and subtag.isalpha():
            canonical.append(subtag.title())
        else:
            canonical.append(subtag.lower())
    if len(canonical[-1]) == 1:
        msg = f"{locale_code!r} ends with an empty extension"
        raise ValueError(msg)
    return "-".join(canonical)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("de-DE")
        >>> locale.territory
        'DE'
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales and strips encoding suffixes.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"


def lookup_closest_locale(locale_code: str, available_locales: Iterable[str]) -> str | None:
    """Find the closest available locale using the RFC 4647 lookup algorithm.

    Tries the full tag first, then progressively strips trailing subtags
    (dropping a singleton left dangling at the end) until one matches:
    "de-CH-1996" -> "de-CH" -> "de". Matching is case-insensitive; the
    returned value is the available locale exactly as given.

    Args:
        locale_code: Canonical requested tag
        available_locales: Candidate locale codes

    Returns:
        Matching available locale, or None if nothing matches

    Example:
        >>> lookup_closest_locale("de-CH-1996", ["en", "de"])
        'de'
        >>> lookup_closest_locale("xx-YY", ["en", "de"]) is None
        True
    """
    available = {code.lower(): code for code in available_locales}
    candidate = locale_code.lower()
    while candidate:
        if candidate in available:
            return available[candidate]
        candidate = candidate.rpartition("-")[0]
        # A trailing singleton ("x", "u") introduces an extension, never a locale
        if len(candidate) >= 2 and candidate[-2] == "-":
            candidate = candidate[:-2]
    return None


def lookup_locale(
    locale_code: str | None = None,
    available_locales: Iterable[str] | None = None,
) -> str:
    """Resolve a requested locale to the best available locale.

    Falls back through:
    - exact match
    - progressively shorter prefixes ("de-CH-1996" -> "de-CH" -> "de")
    - the default locale ("en") if no match is found

    Never raises: invalid tags resolve to the default locale.

    Args:
        locale_code: Requested tag. Defaults to the platform locale.
        available_locales: Candidate locales. Defaults to the locales of the
            bundled locale data store.

    Returns:
        A locale present in available_locales, or the default locale

    Example:
        >>> lookup_locale("de-CH-1996", ["de", "en"])
        'de'
        >>> lookup_locale("es-419-u-nu-latn", ["es", "en"])
        'es'
        >>> lookup_locale("xx-YY", ["de", "en"])
        'en'
    """
    if available_locales is None:
        from icureport.localization.store import get_default_store  # noqa: PLC0415

        available_locales = get_default_store().available_locales
    if locale_code is None:
        locale_code = get_system_locale()

    try:
        canonical = canonicalize_locale(locale_code)
    except ValueError:
        return DEFAULT_LOCALE

    return lookup_closest_locale(canonical, available_locales) or DEFAULT_LOCALE
