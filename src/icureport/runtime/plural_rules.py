"""CLDR plural rules implementation using Babel.

Provides cardinal and ordinal plural category selection for all locales
using Babel's CLDR data.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from babel.core import UnknownLocaleError

from icureport.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(
    n: int | float | Decimal, locale: str, *, ordinal: bool = False
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar-SA")
        ordinal: Use ordinal rules (1st, 2nd, 3rd) instead of cardinal rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en")
        'one'
        >>> select_plural_category(5, "ru")
        'many'
        >>> select_plural_category(2, "en", ordinal=True)
        'two'
        >>> select_plural_category(42, "ja")
        'other'

    If locale parsing fails, falls back to simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if not ordinal and abs(n) == 1 else "other"

    # 1.0 is "one" in en, as in browser plural rules; CLDR would count the
    # visible ".0" fraction digit
    if isinstance(n, float) and n.is_integer():
        n = int(n)

    plural_rule = locale_obj.ordinal_form if ordinal else locale_obj.plural_form
    return plural_rule(n)
