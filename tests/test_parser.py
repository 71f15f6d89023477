"""Tests for the ICU MessageFormat parser.

Covers literal text, simple/number/plural/selectordinal/select arguments,
apostrophe quoting, '#' handling, error diagnostics and parse caching.

Python 3.13+.
"""

import pytest
from hypothesis import given

from icureport.diagnostics import DiagnosticCode, IcuSyntaxError
from icureport.syntax import (
    ArgumentElement,
    IcuParser,
    MessageAst,
    NumberFormat,
    PluralFormat,
    PoundElement,
    SelectFormat,
    TextElement,
    clear_parse_cache,
    parse_message,
)
from tests.strategies.icu import literal_text, placeholder_names


def _syntax_code(source: str) -> DiagnosticCode:
    with pytest.raises(IcuSyntaxError) as exc_info:
        IcuParser().parse(source)
    assert exc_info.value.diagnostic is not None
    return exc_info.value.diagnostic.code


class TestLiteralText:
    """Templates without arguments."""

    def test_empty_template(self) -> None:
        assert parse_message("") == MessageAst(())

    def test_plain_text(self) -> None:
        assert parse_message("Speed Index").elements == (TextElement("Speed Index"),)

    def test_pound_outside_plural_is_text(self) -> None:
        assert parse_message("#1 result").elements == (TextElement("#1 result"),)

    @given(text=literal_text())
    def test_unquoted_text_round_trips(self, text: str) -> None:
        """Property: text without ICU syntax parses to itself."""
        ast = parse_message(text)
        assert "".join(e.value for e in ast.elements if isinstance(e, TextElement)) == text


class TestApostropheQuoting:
    """ICU apostrophe rules."""

    def test_double_apostrophe(self) -> None:
        assert parse_message("it''s").elements == (TextElement("it's"),)

    def test_lone_apostrophe_is_literal(self) -> None:
        assert parse_message("it's here").elements == (TextElement("it's here"),)

    def test_quoted_braces(self) -> None:
        assert parse_message("'{literal}' text").elements == (TextElement("{literal} text"),)

    def test_quoted_pound_in_plural(self) -> None:
        ast = parse_message("{n, plural, other{'#'# items}}")
        option = ast.elements[0].format.options[0]
        assert option.value.elements == (TextElement("#"), PoundElement(), TextElement(" items"))

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert parse_message("a '{b").elements == (TextElement("a {b"),)

    def test_doubled_apostrophe_inside_quote(self) -> None:
        assert parse_message("'{it''s}'").elements == (TextElement("{it's}"),)


class TestSimpleAndNumberArguments:
    """{id} and {id, number[, style]}."""

    def test_simple_argument(self) -> None:
        assert parse_message("Hello {name}!").elements == (
            TextElement("Hello "),
            ArgumentElement("name"),
            TextElement("!"),
        )

    def test_whitespace_inside_braces(self) -> None:
        assert parse_message("{ name }").elements == (ArgumentElement("name"),)

    def test_number_without_style(self) -> None:
        element = parse_message("{count, number}").elements[0]
        assert element == ArgumentElement("count", NumberFormat())
        assert element.is_number
        assert not element.is_plural

    def test_number_with_style(self) -> None:
        ast = parse_message("{timeInMs, number, milliseconds}\xa0ms")
        assert ast.elements == (
            ArgumentElement("timeInMs", NumberFormat("milliseconds")),
            TextElement("\xa0ms"),
        )

    @given(name=placeholder_names())
    def test_any_placeholder_name(self, name: str) -> None:
        assert parse_message(f"{{{name}}}").elements == (ArgumentElement(name),)


class TestPluralArguments:
    """{id, plural, ...} and {id, selectordinal, ...}."""

    def test_plural_options_in_order(self) -> None:
        element = parse_message("{n, plural, =1{one file} other{# files}}").elements[0]
        assert element.is_plural
        plural = element.format
        assert isinstance(plural, PluralFormat)
        assert [option.key for option in plural.options] == ["=1", "other"]
        assert plural.offset == 0
        assert not plural.ordinal
        assert plural.get_option("other").value.elements == (PoundElement(), TextElement(" files"))
        assert plural.get_option("few") is None

    def test_offset(self) -> None:
        plural = parse_message("{n, plural, offset:1 =0{nobody} other{# others}}").elements[0].format
        assert plural.offset == 1

    def test_selectordinal(self) -> None:
        plural = parse_message("{rank, selectordinal, one{#st} two{#nd} few{#rd} other{#th}}")
        assert plural.elements[0].format.ordinal

    def test_nested_arguments_in_branches(self) -> None:
        ast = parse_message("{n, plural, =1{{n} file in {dir}} other{{n} files in {dir}}}")
        other = ast.elements[0].format.get_option("other").value
        assert other.elements == (
            ArgumentElement("n"),
            TextElement(" files in "),
            ArgumentElement("dir"),
        )

    def test_pound_inside_select_inside_plural(self) -> None:
        ast = parse_message("{n, plural, other{{kind, select, a{# a} other{# b}}}}")
        select = ast.elements[0].format.get_option("other").value.elements[0].format
        assert isinstance(select, SelectFormat)
        assert select.get_option("a").value.elements[0] == PoundElement()


class TestSelectArguments:
    """{id, select, ...}."""

    def test_select(self) -> None:
        select = parse_message("{kind, select, script{Script} other{Resource}}").elements[0].format
        assert isinstance(select, SelectFormat)
        assert select.get_option("script").value.elements == (TextElement("Script"),)

    def test_pound_in_top_level_select_is_text(self) -> None:
        select = parse_message("{kind, select, other{#1}}").elements[0].format
        assert select.get_option("other").value.elements == (TextElement("#1"),)


class TestSyntaxErrors:
    """Malformed templates raise IcuSyntaxError with a diagnostic code."""

    @pytest.mark.parametrize("source", ["{name", "{n, plural, other{x}", "{n, number, bytes"])
    def test_unexpected_eof(self, source: str) -> None:
        assert _syntax_code(source) == DiagnosticCode.UNEXPECTED_EOF

    @pytest.mark.parametrize("source", ["closing } brace", "{}", "{a b}", "{n, plural other{x}}"])
    def test_unexpected_character(self, source: str) -> None:
        assert _syntax_code(source) == DiagnosticCode.UNEXPECTED_CHARACTER

    def test_unsupported_argument_type(self) -> None:
        assert _syntax_code("{when, date, short}") == DiagnosticCode.UNSUPPORTED_ARGUMENT_TYPE

    def test_missing_other(self) -> None:
        assert _syntax_code("{n, plural, one{x}}") == DiagnosticCode.MISSING_OTHER_OPTION

    def test_duplicate_option(self) -> None:
        assert _syntax_code("{n, plural, one{a} one{b} other{c}}") == DiagnosticCode.DUPLICATE_OPTION

    def test_nesting_depth_exceeded(self) -> None:
        source = "{n, plural, other{" * 3 + "x" + "}}" * 3
        with pytest.raises(IcuSyntaxError) as exc_info:
            IcuParser(max_nesting_depth=2).parse(source)
        assert exc_info.value.diagnostic.code == DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED

    def test_error_span_line_and_column(self) -> None:
        with pytest.raises(IcuSyntaxError) as exc_info:
            IcuParser().parse("first line\n{a b}")
        span = exc_info.value.diagnostic.span
        assert (span.line, span.column) == (2, 4)

    def test_parser_reusable_after_error(self) -> None:
        parser = IcuParser()
        with pytest.raises(IcuSyntaxError):
            parser.parse("{n, plural, other{" * 2)
        assert parser.parse("{n, plural, other{x}}").elements[0].is_plural


class TestParseCache:
    """parse_message memoization."""

    def test_same_ast_instance_returned(self) -> None:
        template = "{wastedMs, number, milliseconds}\xa0ms"
        assert parse_message(template) is parse_message(template)

    def test_clear_parse_cache(self) -> None:
        parse_message("cached")
        clear_parse_cache()
        assert parse_message.cache_info().currsize == 0
