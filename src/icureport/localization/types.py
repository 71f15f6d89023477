"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating locale data and provenance tables.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import NotRequired, TypedDict

from icureport.runtime.preformat import MessageValue

__all__ = [
    "LocaleCode",
    "LocaleMessage",
    "LocaleMessages",
    "MessageId",
    "PathEntry",
    "PathMessages",
]

type MessageId = str
"""Message identifier: '<relative file path> | <key name>'."""

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'es', 'en-XA')."""


class LocaleMessage(TypedDict):
    """One entry of a locale table: the translated ICU template."""

    message: str


type LocaleMessages = Mapping[MessageId, LocaleMessage]
"""A whole locale table, as loaded from '<locale>.json'."""


class PathEntry(TypedDict):
    """Provenance of one replaced document location."""

    id: MessageId
    values: NotRequired[Mapping[str, MessageValue]]


type PathMessages = dict[str, PathEntry]
"""Document path -> the message reference rendered there."""
