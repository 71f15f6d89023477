"""Document localization: replace message references inside a report tree.

Walks an arbitrary JSON-like document (dicts, lists, scalars), replaces every
message reference with its rendered string in place, and returns a table of
where each rendered string came from:

    >>> report = {"audits": {"my-audit": {"title": str_(UI_STRINGS["columnURL"])}}}
    >>> replace_icu_message_instance_ids(report, "en")
    {'audits[my-audit].title': {'id': 'icureport/localization/registry.py | columnURL'}}
    >>> report["audits"]["my-audit"]["title"]
    'URL'

Path keys are stable and may be persisted: letters-only property names are
dot-joined, everything else (list indexes, names with other characters) is
bracketed.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, MutableMapping, MutableSequence
from typing import TYPE_CHECKING, Any

from icureport.constants import MAX_DOCUMENT_DEPTH
from icureport.core import DepthGuard, DepthLimitExceededError
from icureport.diagnostics import ErrorTemplate, PathEncodingError
from icureport.localization.formatting import format_icu_message
from icureport.localization.message import is_icu_message, to_icu_message
from icureport.localization.store import get_default_store
from icureport.localization.types import PathEntry, PathMessages

if TYPE_CHECKING:
    from icureport.localization.store import LocaleDataStore
    from icureport.localization.types import LocaleCode

__all__ = [
    "format_path_as_string",
    "localize_document",
    "replace_icu_message_instance_ids",
]

_DOTTED_SEGMENT = re.compile(r"[a-zA-Z]+")
_UNENCODABLE_SEGMENT = re.compile(r"""[\]"'\s\ufeff]""")


def format_path_as_string(path: Iterable[str | int]) -> str:
    """Render a document path as 'a.b[0][my-key].c'.

    Args:
        path: Property names and list indexes from the document root

    Returns:
        Path string

    Raises:
        PathEncodingError: A segment contains ']', a quote or whitespace

    Example:
        >>> format_path_as_string(["audits", "my-audit", "details", 0, "url"])
        'audits[my-audit].details[0].url'
    """
    path_as_string = ""
    for segment in path:
        prop = str(segment)
        if _DOTTED_SEGMENT.fullmatch(prop):
            if path_as_string:
                path_as_string += "."
            path_as_string += prop
        else:
            if _UNENCODABLE_SEGMENT.search(prop):
                raise PathEncodingError(ErrorTemplate.path_encoding(prop))
            path_as_string += f"[{prop}]"
    return path_as_string


class _DocumentLocalizer:
    """One localization pass over one document."""

    __slots__ = ("_guard", "_locale", "_open_containers", "_paths", "_store")

    def __init__(self, locale: LocaleCode, store: LocaleDataStore) -> None:
        self._locale = locale
        self._store = store
        self._guard = DepthGuard(max_depth=MAX_DOCUMENT_DEPTH)
        # id() of every container on the current path
        self._open_containers: set[int] = set()
        self._paths: PathMessages = {}

    def run(self, document: object) -> PathMessages:
        self._replace_in_object(document, [])
        return self._paths

    def _replace_in_object(self, sub_object: object, path: list[str | int]) -> None:
        entries: list[tuple[Any, Any]]
        if isinstance(sub_object, MutableMapping):
            entries = list(sub_object.items())
        elif isinstance(sub_object, MutableSequence):
            entries = list(enumerate(sub_object))
        else:
            return

        marker = id(sub_object)
        if marker in self._open_containers:
            raise DepthLimitExceededError(ErrorTemplate.cyclic_document(len(path)))
        self._open_containers.add(marker)
        try:
            with self._guard:
                for prop, value in entries:
                    current_path = [*path, prop]

                    # A reference is replaced wholesale; its fields are not visited
                    if is_icu_message(value, self._store):
                        sub_object[prop] = format_icu_message(
                            self._locale, value, store=self._store
                        )
                        self._paths[format_path_as_string(current_path)] = _path_entry(value)
                    else:
                        self._replace_in_object(value, current_path)
        finally:
            self._open_containers.discard(marker)


def _path_entry(value: Any) -> PathEntry:
    """Provenance record: id and values, without the now-inlined UI string."""
    reference = to_icu_message(value)
    entry = PathEntry(id=reference.id)
    if reference.values is not None:
        entry["values"] = reference.values
    return entry


def replace_icu_message_instance_ids(
    document: object,
    locale: LocaleCode,
    *,
    store: LocaleDataStore | None = None,
) -> PathMessages:
    """Replace every message reference in document with its localized string.

    Mappings and lists are modified in place; other containers and scalars
    are left alone. Typical input is a full report or a config.

    Args:
        document: Root of the tree to localize
        locale: Locale to render in
        store: Locale data (default: bundled store)

    Returns:
        Path string -> {"id", "values"} for every replaced location

    Raises:
        PathEncodingError: A replaced location's path cannot be encoded
        DepthLimitExceededError: The document contains itself or nests deeper
            than MAX_DOCUMENT_DEPTH
        IcuReportError: Any formatting error of a reference
    """
    store = store if store is not None else get_default_store()
    return _DocumentLocalizer(locale, store).run(document)


localize_document = replace_icu_message_instance_ids
