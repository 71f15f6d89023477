"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from icureport.diagnostics import ErrorTemplate, IcuSyntaxError, SourceSpan

__all__ = ["Cursor", "ParseResult"]

# ICU Pattern_White_Space subset seen in real templates
_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\u200e\u200f\u2028\u2029")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            IcuSyntaxError: If at end of input
        """
        if self.is_eof:
            raise IcuSyntaxError(ErrorTemplate.unexpected_eof(self.pos, self.span()))
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns None ONLY when peeking beyond EOF.
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (original unchanged)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip ICU pattern whitespace characters.

        Example:
            >>> Cursor("  \\n hello", 0).skip_whitespace().pos
            4
        """
        c = self
        while not c.is_eof and c.source[c.pos] in _WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise."""
        if not self.is_eof and self.source[self.pos] == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute 1-indexed (line, column) for current position.

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span(self, length: int = 0) -> SourceSpan:
        """Source span starting at the current position."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=self.pos + length, line=line, column=col)

    def error(self, expected: str) -> IcuSyntaxError:
        """Build a syntax error for the character at the current position."""
        if self.is_eof:
            return IcuSyntaxError(ErrorTemplate.unexpected_eof(self.pos, self.span()))
        return IcuSyntaxError(
            ErrorTemplate.unexpected_character(self.current, expected, self.span(1))
        )


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every parser has signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo]

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult('h', cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
