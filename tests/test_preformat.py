"""Tests for value preformatting (unit conversion and value/placeholder checks).

Python 3.13+.
"""

import math
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icureport.diagnostics import (
    DiagnosticCode,
    MissingValueError,
    UnusedValueError,
    ValueTypeMismatchError,
)
from icureport.introspection import collect_argument_elements
from icureport.runtime import preformat_values
from icureport.syntax import parse_message
from tests.strategies.icu import raw_measurements

MS = "{timeInMs, number, milliseconds}\xa0ms"
SECONDS = "{timeInMs, number, seconds}\xa0s"
BYTES = "Potential savings of {wastedBytes, number, bytes}\xa0KB"


def _preformat(template: str, values: dict[str, object]) -> dict[str, object]:
    elements = collect_argument_elements(parse_message(template).elements)
    return preformat_values(elements, values, template)  # type: ignore[arg-type]


class TestUnitConversion:
    """Numeric values rescaled per declared style."""

    def test_milliseconds_round_to_ten(self) -> None:
        assert _preformat(MS, {"timeInMs": 127}) == {"timeInMs": 130}

    def test_milliseconds_tie_rounds_up(self) -> None:
        assert _preformat(MS, {"timeInMs": 125}) == {"timeInMs": 130}

    def test_seconds_for_time_in_ms(self) -> None:
        assert _preformat(SECONDS, {"timeInMs": 5234}) == {"timeInMs": 5.2}

    def test_seconds_style_only_converts_time_in_ms(self) -> None:
        template = "{duration, number, seconds}\xa0s"
        assert _preformat(template, {"duration": 5234}) == {"duration": 5234}

    def test_bytes_to_kibibytes(self) -> None:
        assert _preformat(BYTES, {"wastedBytes": 151552}) == {"wastedBytes": 148}

    def test_bytes_not_rounded(self) -> None:
        assert _preformat(BYTES, {"wastedBytes": 1000}) == {"wastedBytes": 1000 / 1024}

    def test_decimal_values(self) -> None:
        assert _preformat(MS, {"timeInMs": Decimal("1234.5")}) == {"timeInMs": 1230}

    def test_other_number_styles_unchanged(self) -> None:
        assert _preformat("{ratio, number, percent}", {"ratio": 0.25}) == {"ratio": 0.25}

    def test_plain_and_plural_values_pass_through(self) -> None:
        template = "{url} has {n, plural, =1{one request} other{# requests}}"
        values = {"url": "https://example.com", "n": 3}
        assert _preformat(template, values) == values

    @pytest.mark.parametrize("template", [MS, SECONDS])
    @pytest.mark.parametrize("value", [math.inf, -math.inf, Decimal("Infinity")])
    def test_infinite_values_pass_through(self, template: str, value: float | Decimal) -> None:
        assert _preformat(template, {"timeInMs": value}) == {"timeInMs": value}

    @pytest.mark.parametrize("template", [MS, SECONDS, BYTES])
    def test_nan_passes_through(self, template: str) -> None:
        placeholder = "wastedBytes" if template is BYTES else "timeInMs"
        result = _preformat(template, {placeholder: math.nan})[placeholder]
        assert math.isnan(result)  # type: ignore[arg-type]

    def test_decimal_nan_passes_through(self) -> None:
        result = _preformat(MS, {"timeInMs": Decimal("NaN")})["timeInMs"]
        assert isinstance(result, Decimal)
        assert result.is_nan()

    @given(value=raw_measurements())
    def test_milliseconds_always_multiple_of_ten(self, value: int | float | Decimal) -> None:
        """Property: millisecond values become whole multiples of 10."""
        result = _preformat(MS, {"timeInMs": value})["timeInMs"]
        assert isinstance(result, int)
        assert result % 10 == 0
        assert abs(result - value) <= 5 + 1e-6


class TestValueChecks:
    """Missing, mistyped and unused values."""

    def test_missing_value(self) -> None:
        with pytest.raises(MissingValueError) as exc_info:
            _preformat(BYTES, {})
        diagnostic = exc_info.value.diagnostic
        assert diagnostic.code == DiagnosticCode.MISSING_VALUE
        assert diagnostic.placeholder == "wastedBytes"
        assert "wastedBytes" in str(exc_info.value)

    def test_non_numeric_for_number_style(self) -> None:
        with pytest.raises(ValueTypeMismatchError, match="not a number"):
            _preformat(MS, {"timeInMs": "127"})

    def test_bool_is_not_a_number(self) -> None:
        with pytest.raises(ValueTypeMismatchError):
            _preformat(MS, {"timeInMs": True})

    def test_unused_value(self) -> None:
        with pytest.raises(UnusedValueError) as exc_info:
            _preformat("Speed Index", {"extra": 1})
        assert exc_info.value.diagnostic.placeholder == "extra"

    def test_error_code_exempt_and_retained(self) -> None:
        assert _preformat("Speed Index", {"errorCode": "NO_FCP"}) == {"errorCode": "NO_FCP"}

    def test_error_code_alongside_placeholders(self) -> None:
        result = _preformat(MS, {"timeInMs": 14, "errorCode": "NO_LCP"})
        assert result == {"timeInMs": 10, "errorCode": "NO_LCP"}

    def test_input_values_not_mutated(self) -> None:
        values = {"timeInMs": 127}
        _preformat(MS, values)
        assert values == {"timeInMs": 127}

    @given(key=st.from_regex(r"[a-z]{1,10}", fullmatch=True).filter(lambda k: k != "timeInMs"))
    def test_any_other_unreferenced_key_rejected(self, key: str) -> None:
        with pytest.raises(UnusedValueError):
            _preformat(MS, {"timeInMs": 1, key: "x"})
