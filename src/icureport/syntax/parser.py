"""Recursive-descent parser for ICU MessageFormat templates.

Supported syntax:
    literal text               Potential savings of
    simple argument            {url}
    number argument            {wastedBytes, number, bytes}
    plural argument            {count, plural, offset:1 =0{none} one{# item} other{# items}}
    selectordinal argument     {rank, selectordinal, one{#st} two{#nd} few{#rd} other{#th}}
    select argument            {kind, select, script{Script} other{Resource}}

Quoting follows ICU apostrophe rules (ApostropheMode.DOUBLE_OPTIONAL):
    ''         literal apostrophe
    '{...}'    quoted literal; an apostrophe opens a quote only right before
               '{', '}' or (inside a plural branch) '#'
    it's       any other apostrophe is literal text

Error Handling:
    The first problem raises IcuSyntaxError whose diagnostic carries the
    line/column span of the offending character. There is no recovery: a
    template is a single message.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools

from icureport.constants import DEFAULT_CACHE_SIZE, MAX_DEPTH
from icureport.core import DepthGuard
from icureport.diagnostics import ErrorTemplate, IcuSyntaxError
from icureport.enums import ArgumentType
from icureport.syntax.ast import (
    ArgumentElement,
    MessageAst,
    MessageElement,
    NumberFormat,
    PluralFormat,
    PluralOption,
    PoundElement,
    SelectFormat,
    TextElement,
)
from icureport.syntax.cursor import Cursor, ParseResult

__all__ = ["IcuParser", "clear_parse_cache", "parse_message"]

# Characters that end an argument name or option keyword
_NAME_TERMINATORS: frozenset[str] = frozenset(" \t\n\r{},#'\u200e\u200f\u2028\u2029")

_OFFSET_KEYWORD: str = "offset:"


class IcuParser:
    """ICU MessageFormat parser producing an immutable MessageAst.

    A parser instance carries the nesting depth guard for one parse call,
    so instances must not be shared between threads. Use parse_message()
    for cached, thread-safe parsing.

    Example:
        >>> ast = IcuParser().parse("{n, plural, =1{one file} other{# files}}")
        >>> ast.elements[0].id
        'n'
    """

    __slots__ = ("_guard",)

    def __init__(self, *, max_nesting_depth: int = MAX_DEPTH) -> None:
        """Initialize parser.

        Args:
            max_nesting_depth: Maximum nesting of plural/select branches
        """
        self._guard = DepthGuard(max_depth=max_nesting_depth)

    def parse(self, source: str) -> MessageAst:
        """Parse a template into a MessageAst.

        Args:
            source: ICU MessageFormat template

        Returns:
            Parsed AST

        Raises:
            IcuSyntaxError: If the template is malformed
        """
        self._guard.current_depth = 0
        result = self._parse_message(Cursor(source, 0), in_plural=False)
        if not result.cursor.is_eof:
            # Only an unbalanced '}' can stop the top-level message early
            raise result.cursor.error("end of message")
        return result.value

    # ------------------------------------------------------------------
    # Message bodies
    # ------------------------------------------------------------------

    def _parse_message(self, cursor: Cursor, *, in_plural: bool) -> ParseResult[MessageAst]:
        """Parse elements until EOF or an unquoted '}' (not consumed)."""
        elements: list[MessageElement] = []
        text: list[str] = []

        def flush() -> None:
            if text:
                elements.append(TextElement("".join(text)))
                text.clear()

        while not cursor.is_eof:
            char = cursor.current
            if char == "'":
                literal = self._parse_apostrophe(cursor, in_plural=in_plural)
                text.append(literal.value)
                cursor = literal.cursor
            elif char == "{":
                flush()
                argument = self._parse_argument(cursor, in_plural=in_plural)
                elements.append(argument.value)
                cursor = argument.cursor
            elif char == "}":
                break
            elif char == "#" and in_plural:
                flush()
                elements.append(PoundElement())
                cursor = cursor.advance()
            else:
                text.append(char)
                cursor = cursor.advance()

        flush()
        return ParseResult(MessageAst(tuple(elements)), cursor)

    @staticmethod
    def _parse_apostrophe(cursor: Cursor, *, in_plural: bool) -> ParseResult[str]:
        """Resolve an apostrophe at the cursor into literal text."""
        following = cursor.peek(1)
        if following == "'":
            return ParseResult("'", cursor.advance(2))
        if following not in ("{", "}") and not (in_plural and following == "#"):
            return ParseResult("'", cursor.advance())

        # Quoted literal: runs to the next lone apostrophe, or to the end
        cursor = cursor.advance()
        chars: list[str] = []
        while not cursor.is_eof:
            char = cursor.current
            if char == "'":
                if cursor.peek(1) == "'":
                    chars.append("'")
                    cursor = cursor.advance(2)
                    continue
                return ParseResult("".join(chars), cursor.advance())
            chars.append(char)
            cursor = cursor.advance()
        return ParseResult("".join(chars), cursor)

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def _parse_argument(self, cursor: Cursor, *, in_plural: bool) -> ParseResult[ArgumentElement]:
        """Parse '{' name [, type [, style | options]] '}'."""
        name = self._parse_name(cursor.advance().skip_whitespace(), "argument name")
        cursor = name.cursor.skip_whitespace()

        if (closed := cursor.expect("}")) is not None:
            return ParseResult(ArgumentElement(name.value), closed)
        if (after_comma := cursor.expect(",")) is None:
            raise cursor.error("',' or '}'")

        type_start = after_comma.skip_whitespace()
        type_name = self._parse_name(type_start, "argument type")
        cursor = type_name.cursor.skip_whitespace()

        try:
            argument_type = ArgumentType(type_name.value)
        except ValueError:
            raise IcuSyntaxError(
                ErrorTemplate.unsupported_argument_type(
                    type_name.value, type_start.span(len(type_name.value))
                )
            ) from None

        match argument_type:
            case ArgumentType.NUMBER:
                number = self._parse_number_style(cursor)
                return ParseResult(ArgumentElement(name.value, number.value), number.cursor)
            case ArgumentType.PLURAL | ArgumentType.SELECTORDINAL:
                plural = self._parse_plural(
                    cursor, name.value, ordinal=argument_type is ArgumentType.SELECTORDINAL
                )
                return ParseResult(ArgumentElement(name.value, plural.value), plural.cursor)
            case ArgumentType.SELECT:
                select = self._parse_select(cursor, name.value, in_plural=in_plural)
                return ParseResult(ArgumentElement(name.value, select.value), select.cursor)

    @staticmethod
    def _parse_name(cursor: Cursor, expected: str) -> ParseResult[str]:
        """Parse an argument name, type keyword or option key."""
        start = cursor
        while not cursor.is_eof and cursor.current not in _NAME_TERMINATORS:
            cursor = cursor.advance()
        if cursor.pos == start.pos:
            raise cursor.error(expected)
        return ParseResult(start.slice_to(cursor.pos), cursor)

    @staticmethod
    def _parse_number_style(cursor: Cursor) -> ParseResult[NumberFormat]:
        """Parse the optional ', style' of a number argument and the closing '}'."""
        if (closed := cursor.expect("}")) is not None:
            return ParseResult(NumberFormat(), closed)
        if (after_comma := cursor.expect(",")) is None:
            raise cursor.error("',' or '}'")

        start = after_comma
        cursor = after_comma
        while not cursor.is_eof and cursor.current not in ("{", "}"):
            cursor = cursor.advance()
        style = start.slice_to(cursor.pos).strip()
        if not style:
            raise cursor.error("number style")
        if (closed := cursor.expect("}")) is None:
            raise cursor.error("'}'")
        return ParseResult(NumberFormat(style), closed)

    def _parse_plural(
        self, cursor: Cursor, name: str, *, ordinal: bool
    ) -> ParseResult[PluralFormat]:
        """Parse ', [offset:N] options' of a plural argument and the closing '}'."""
        if (after_comma := cursor.expect(",")) is None:
            raise cursor.error("','")
        cursor = after_comma.skip_whitespace()

        offset = 0
        if cursor.slice_to(cursor.pos + len(_OFFSET_KEYWORD)) == _OFFSET_KEYWORD:
            cursor = cursor.advance(len(_OFFSET_KEYWORD)).skip_whitespace()
            start = cursor
            while not cursor.is_eof and cursor.current.isascii() and cursor.current.isdigit():
                cursor = cursor.advance()
            if cursor.pos == start.pos:
                raise cursor.error("plural offset")
            offset = int(start.slice_to(cursor.pos))

        options = self._parse_options(cursor, name, in_plural=True)
        return ParseResult(
            PluralFormat(options.value, offset=offset, ordinal=ordinal), options.cursor
        )

    def _parse_select(
        self, cursor: Cursor, name: str, *, in_plural: bool
    ) -> ParseResult[SelectFormat]:
        """Parse ', options' of a select argument and the closing '}'."""
        if (after_comma := cursor.expect(",")) is None:
            raise cursor.error("','")
        # '#' inside a select keeps referring to the enclosing plural
        options = self._parse_options(after_comma, name, in_plural=in_plural)
        return ParseResult(SelectFormat(options.value), options.cursor)

    def _parse_options(
        self, cursor: Cursor, name: str, *, in_plural: bool
    ) -> ParseResult[tuple[PluralOption, ...]]:
        """Parse 'key{message}' branches up to and including the closing '}'."""
        start = cursor
        options: list[PluralOption] = []
        seen: set[str] = set()

        while True:
            cursor = cursor.skip_whitespace()
            if (closed := cursor.expect("}")) is not None:
                cursor = closed
                break

            key_start = cursor
            key = self._parse_name(cursor, "option key")
            if key.value in seen:
                raise IcuSyntaxError(
                    ErrorTemplate.duplicate_option(
                        key.value, name, key_start.span(len(key.value))
                    )
                )
            seen.add(key.value)

            cursor = key.cursor.skip_whitespace()
            if (opened := cursor.expect("{")) is None:
                raise cursor.error("'{'")

            if self._guard.is_exceeded():
                raise IcuSyntaxError(
                    ErrorTemplate.nesting_depth_exceeded(self._guard.max_depth, opened.span())
                )
            with self._guard:
                body = self._parse_message(opened, in_plural=in_plural)

            if (closed := body.cursor.expect("}")) is None:
                raise body.cursor.error("'}'")
            options.append(PluralOption(key.value, body.value))
            cursor = closed

        if "other" not in seen:
            raise IcuSyntaxError(ErrorTemplate.missing_other_option(name, start.span()))
        return ParseResult(tuple(options), cursor)


@functools.lru_cache(maxsize=DEFAULT_CACHE_SIZE)
def parse_message(source: str) -> MessageAst:
    """Parse an ICU template, memoizing results.

    Thread-safe: a fresh IcuParser is used per cache miss and the returned
    AST is immutable.

    Args:
        source: ICU MessageFormat template

    Returns:
        Parsed AST

    Raises:
        IcuSyntaxError: If the template is malformed

    Example:
        >>> parse_message("{timeInMs, number, seconds}\\xa0s").elements[0].format.style
        'seconds'
    """
    return IcuParser().parse(source)


def clear_parse_cache() -> None:
    """Clear memoized parse results."""
    parse_message.cache_clear()
