"""ICU MessageFormat AST (Abstract Syntax Tree) node definitions.

A parsed template is a MessageAst: an ordered tuple of literal text,
argument elements and plural "#" markers. Argument elements may carry a
format descriptor; plural and select descriptors own one nested MessageAst
per option, so the tree is recursive.

All nodes are frozen and hashable, so parsed templates can be memoized and
shared between threads.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, TypeIs

from icureport.enums import FormatType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Root
    "MessageAst",
    # Elements
    "TextElement",
    "PoundElement",
    "ArgumentElement",
    # Format descriptors
    "NumberFormat",
    "PluralFormat",
    "SelectFormat",
    "PluralOption",
    # Type aliases
    "MessageElement",
    "ArgumentFormat",
]


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text between arguments (quotes already resolved)."""

    value: str


@dataclass(frozen=True, slots=True)
class PoundElement:
    """'#' inside a plural option: the plural value minus its offset."""


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """Number format descriptor: {id, number} or {id, number, style}.

    Attributes:
        style: Style name ("bytes", "milliseconds", "percent", ...) or None
    """

    type: ClassVar[FormatType] = FormatType.NUMBER

    style: str | None = None


@dataclass(frozen=True, slots=True)
class PluralOption:
    """One branch of a plural or select argument.

    Attributes:
        key: Selector ("=1", "one", "other", or a select keyword)
        value: Sub-template rendered when the branch is selected
    """

    key: str
    value: "MessageAst"


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """Plural format descriptor: {id, plural, ...} or {id, selectordinal, ...}.

    Attributes:
        options: Ordered branches; always include "other"
        offset: Subtracted from the value before category selection and "#"
        ordinal: True for selectordinal (ordinal plural rules)
    """

    type: ClassVar[FormatType] = FormatType.PLURAL

    options: tuple[PluralOption, ...]
    offset: int = 0
    ordinal: bool = False

    def get_option(self, key: str) -> PluralOption | None:
        """Return the option with the given key, or None."""
        for option in self.options:
            if option.key == key:
                return option
        return None


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """Select format descriptor: {id, select, key{...} other{...}}."""

    type: ClassVar[FormatType] = FormatType.SELECT

    options: tuple[PluralOption, ...]

    def get_option(self, key: str) -> PluralOption | None:
        """Return the option with the given key, or None."""
        for option in self.options:
            if option.key == key:
                return option
        return None


type ArgumentFormat = NumberFormat | PluralFormat | SelectFormat


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Placeholder node: {id} optionally followed by a format descriptor.

    Attributes:
        id: Placeholder name
        format: Format descriptor, or None for plain substitution
    """

    id: str
    format: ArgumentFormat | None = None

    @staticmethod
    def guard(node: object) -> TypeIs["ArgumentElement"]:
        """Type guard for ArgumentElement."""
        return isinstance(node, ArgumentElement)

    @property
    def is_number(self) -> bool:
        """True if the argument carries a number format."""
        return self.format is not None and self.format.type is FormatType.NUMBER

    @property
    def is_plural(self) -> bool:
        """True if the argument carries a plural (or selectordinal) format."""
        return self.format is not None and self.format.type is FormatType.PLURAL


type MessageElement = TextElement | PoundElement | ArgumentElement


@dataclass(frozen=True, slots=True)
class MessageAst:
    """Root of a parsed template.

    Attributes:
        elements: Top-level nodes in source order
    """

    elements: tuple[MessageElement, ...]
