"""Tests for number formatting options, Babel number rendering and plural rules.

Python 3.13+.
"""

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from icureport.diagnostics import FormattingError
from icureport.enums import NumberStyle
from icureport.locale_utils import get_babel_locale
from icureport.runtime import (
    BUILTIN_NUMBER_STYLES,
    DEFAULT_NUMBER_FORMATS,
    DEFAULT_NUMBER_OPTIONS,
    NumberFormatOptions,
    format_number,
    is_number,
    resolve_number_options,
    select_plural_category,
)

EN = get_babel_locale("en")
DE = get_babel_locale("de-DE")


class TestNumberFormatOptions:
    """Option validation and Babel patterns."""

    @pytest.mark.parametrize(
        ("options", "pattern"),
        [
            (NumberFormatOptions(), "#,##0.###"),
            (NumberFormatOptions(maximum_fraction_digits=0), "#,##0"),
            (NumberFormatOptions(minimum_fraction_digits=1, maximum_fraction_digits=1), "#,##0.0"),
            (NumberFormatOptions(minimum_fraction_digits=2, maximum_fraction_digits=2, use_grouping=False), "0.00"),
            (NumberFormatOptions(maximum_fraction_digits=2, style=NumberStyle.PERCENT), "#,##0.##%"),
        ],
    )
    def test_pattern(self, options: NumberFormatOptions, pattern: str) -> None:
        assert options.pattern == pattern

    def test_negative_digits_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            NumberFormatOptions(minimum_fraction_digits=-1)

    def test_minimum_above_maximum_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            NumberFormatOptions(minimum_fraction_digits=3, maximum_fraction_digits=1)


class TestResolveNumberOptions:
    """Style name lookup."""

    def test_no_style_is_default(self) -> None:
        assert resolve_number_options(None) is DEFAULT_NUMBER_OPTIONS

    @pytest.mark.parametrize("style", ["bytes", "milliseconds", "seconds", "extendedPercent"])
    def test_report_styles(self, style: str) -> None:
        assert resolve_number_options(style) is DEFAULT_NUMBER_FORMATS[style]

    def test_builtin_styles(self) -> None:
        assert resolve_number_options("percent") is BUILTIN_NUMBER_STYLES["percent"]

    def test_unknown_style_is_default(self) -> None:
        assert resolve_number_options("fancy") is DEFAULT_NUMBER_OPTIONS

    def test_custom_formats_take_precedence(self) -> None:
        custom = NumberFormatOptions(maximum_fraction_digits=5)
        assert resolve_number_options("percent", {"percent": custom}) is custom

    def test_fixed_report_styles(self) -> None:
        assert DEFAULT_NUMBER_FORMATS["bytes"].maximum_fraction_digits == 0
        assert DEFAULT_NUMBER_FORMATS["milliseconds"].maximum_fraction_digits == 0
        seconds = DEFAULT_NUMBER_FORMATS["seconds"]
        assert (seconds.minimum_fraction_digits, seconds.maximum_fraction_digits) == (1, 1)
        extended = DEFAULT_NUMBER_FORMATS["extendedPercent"]
        assert extended.maximum_fraction_digits == 2
        assert extended.style is NumberStyle.PERCENT


class TestIsNumber:
    """Numeric value detection."""

    @pytest.mark.parametrize("value", [0, -3, 1.5, Decimal("2.50")])
    def test_numbers(self, value: object) -> None:
        assert is_number(value)

    @pytest.mark.parametrize("value", ["12", None, True, False, [1]])
    def test_non_numbers(self, value: object) -> None:
        assert not is_number(value)


class TestFormatNumber:
    """Babel-backed rendering."""

    def test_grouping_en(self) -> None:
        assert format_number(1234.5, EN) == "1,234.5"

    def test_grouping_de(self) -> None:
        assert format_number(1234.5, DE) == "1.234,5"

    def test_integer_style(self) -> None:
        assert format_number(148.0, EN, DEFAULT_NUMBER_FORMATS["bytes"]) == "148"

    def test_seconds_always_one_fraction_digit(self) -> None:
        assert format_number(5, EN, DEFAULT_NUMBER_FORMATS["seconds"]) == "5.0"
        assert format_number(5.2, DE, DEFAULT_NUMBER_FORMATS["seconds"]) == "5,2"

    def test_ties_round_half_up(self) -> None:
        integer = DEFAULT_NUMBER_FORMATS["bytes"]
        assert format_number(2.5, EN, integer) == "3"
        assert format_number(0.5, EN, integer) == "1"

    def test_float_repr_is_used(self) -> None:
        """1.005 is stored below 1.005 but renders as typed."""
        two_digits = NumberFormatOptions(maximum_fraction_digits=2)
        assert format_number(1.005, EN, two_digits) == "1.01"

    def test_extended_percent(self) -> None:
        assert format_number(0.12345, EN, DEFAULT_NUMBER_FORMATS["extendedPercent"]) == "12.35%"

    def test_decimal_input(self) -> None:
        assert format_number(Decimal("1234567.891"), EN) == "1,234,567.891"

    @pytest.mark.parametrize(
        ("value", "digits"),
        [
            (10**40, str(10**40)),
            (Decimal("1E+40"), str(10**40)),
            (Decimal("123456789012345678901234567890123.5"), "123456789012345678901234567890124"),
        ],
    )
    def test_values_beyond_default_precision(self, value: int | Decimal, digits: str) -> None:
        rendered = format_number(value, EN, DEFAULT_NUMBER_FORMATS["bytes"])
        assert rendered.replace(",", "") == digits

    def test_babel_failure_wrapped(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            format_number("not a number", EN)  # type: ignore[arg-type]
        assert exc_info.value.fallback_value == "not a number"

    @given(st.integers(min_value=0, max_value=10**12))
    def test_integers_render_digits_only(self, value: int) -> None:
        """Property: grouping separators aside, integers render their digits."""
        rendered = format_number(value, EN, DEFAULT_NUMBER_FORMATS["milliseconds"])
        event(f"groups={rendered.count(',')}")
        assert rendered.replace(",", "") == str(value)


class TestSelectPluralCategory:
    """CLDR plural categories via Babel."""

    @pytest.mark.parametrize(
        ("n", "locale", "category"),
        [
            (1, "en", "one"),
            (2, "en", "other"),
            (1.0, "en", "one"),
            (0, "en", "other"),
            (5, "ru", "many"),
            (42, "ja", "other"),
            (1, "de-DE", "one"),
        ],
    )
    def test_cardinal(self, n: int | float, locale: str, category: str) -> None:
        assert select_plural_category(n, locale) == category

    @pytest.mark.parametrize(("n", "category"), [(1, "one"), (2, "two"), (3, "few"), (4, "other")])
    def test_ordinal_en(self, n: int, category: str) -> None:
        assert select_plural_category(n, "en", ordinal=True) == category

    def test_unknown_locale_falls_back_to_one_other(self) -> None:
        assert select_plural_category(1, "xx-invalid-locale") == "one"
        assert select_plural_category(3, "xx-invalid-locale") == "other"
