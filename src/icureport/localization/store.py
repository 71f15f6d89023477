"""Locale data store: locale code -> table of translated ICU templates.

The store is an explicit handle rather than ambient global state. A default
store holding the bundled tables is created lazily on first use; callers that
need isolation (tests, hosts serving their own translations) construct their
own LocaleDataStore and pass it as ``store=`` to the public functions.

Components:
    LocaleDataStore - Read-only Mapping plus whole-locale registration
    get_default_store - Lazily loaded store over the bundled locale files
    register_locale_data - Register a table on the default store

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from threading import RLock
from types import MappingProxyType

from icureport.constants import DEFAULT_LOCALE
from icureport.localization.types import LocaleCode, LocaleMessage, LocaleMessages, MessageId

__all__ = [
    "BUNDLED_LOCALES_DIR",
    "LocaleDataStore",
    "get_default_store",
    "register_locale_data",
]

logger = logging.getLogger(__name__)

BUNDLED_LOCALES_DIR: Path = Path(__file__).resolve().parent.parent / "locales"
"""Directory of the '<locale>.json' tables shipped with the package."""


def _freeze_table(locale: LocaleCode, messages: LocaleMessages) -> Mapping[MessageId, LocaleMessage]:
    """Validate and copy a locale table into a read-only mapping.

    Raises:
        ValueError: If an entry is not a {"message": str} record
    """
    frozen: dict[MessageId, LocaleMessage] = {}
    for message_id, entry in messages.items():
        if not isinstance(message_id, str):
            msg = f"Locale '{locale}': message id must be a string, got {type(message_id).__name__}"
            raise ValueError(msg)
        if not isinstance(entry, Mapping) or not isinstance(entry.get("message"), str):
            msg = f"Locale '{locale}': entry for '{message_id}' must be a {{'message': str}} record"
            raise ValueError(msg)
        frozen[message_id] = LocaleMessage(message=entry["message"])
    return MappingProxyType(frozen)


class LocaleDataStore(Mapping[LocaleCode, Mapping[MessageId, LocaleMessage]]):
    """Mapping of locale code to its message table.

    Reads never mutate the store. register_locale_data() replaces one
    locale's entire table (never a partial merge); callers should not
    register a locale while it is being formatted on another thread.

    Example:
        >>> store = LocaleDataStore({"en": {"a.js | x": {"message": "Hello"}}})
        >>> store["en"]["a.js | x"]["message"]
        'Hello'
        >>> store.register_locale_data("es", {"a.js | x": {"message": "Hola"}})
        >>> sorted(store.available_locales)
        ['en', 'es']
    """

    __slots__ = ("_lock", "_tables")

    def __init__(self, tables: Mapping[LocaleCode, LocaleMessages] | None = None) -> None:
        """Create a store, optionally pre-populated.

        Args:
            tables: Initial locale tables

        Raises:
            ValueError: If a table entry is malformed
        """
        self._lock = RLock()
        self._tables: dict[LocaleCode, Mapping[MessageId, LocaleMessage]] = {}
        for locale, messages in (tables or {}).items():
            self._tables[locale] = _freeze_table(locale, messages)

    @classmethod
    def from_directory(cls, directory: str | Path) -> LocaleDataStore:
        """Load every '<locale>.json' file in directory.

        Args:
            directory: Folder containing locale tables

        Returns:
            New store with one table per file

        Raises:
            OSError: If the directory or a file cannot be read
            ValueError: If a file is not valid JSON or has malformed entries
        """
        store = cls()
        for path in sorted(Path(directory).glob("*.json")):
            with path.open(encoding="utf-8") as f:
                messages = json.load(f)
            if not isinstance(messages, Mapping):
                msg = f"{path}: locale table must be a JSON object"
                raise ValueError(msg)
            store._tables[path.stem] = _freeze_table(path.stem, messages)
            logger.debug("Loaded %d messages for locale '%s' from %s", len(messages), path.stem, path)
        return store

    # Mapping protocol

    def __getitem__(self, locale: LocaleCode) -> Mapping[MessageId, LocaleMessage]:
        return self._tables[locale]

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(tuple(self._tables))

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"LocaleDataStore(locales={sorted(self._tables)!r})"

    @property
    def available_locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes with a registered table."""
        return tuple(self._tables)

    def get_message(self, locale: LocaleCode, message_id: MessageId) -> str | None:
        """Template text for message_id in locale, or None if either is absent."""
        entry = self._tables.get(locale, {}).get(message_id)
        return entry["message"] if entry is not None else None

    def has_message_id(self, message_id: MessageId) -> bool:
        """True if message_id exists in the default ('en') table."""
        return message_id in self._tables.get(DEFAULT_LOCALE, {})

    def register_locale_data(self, locale: LocaleCode, messages: LocaleMessages) -> None:
        """Register (or replace) a whole locale table.

        Used when the host environment selects the locale and serves the
        intended locale data itself.

        Args:
            locale: Locale code the table belongs to
            messages: Complete table for that locale

        Raises:
            ValueError: If a table entry is malformed
        """
        table = _freeze_table(locale, messages)
        with self._lock:
            replaced = locale in self._tables
            self._tables[locale] = table
        logger.info(
            "%s locale data for '%s' (%d messages)",
            "Replaced" if replaced else "Registered",
            locale,
            len(table),
        )


# Module-level default store, loaded lazily on first access to avoid
# import-time file I/O.
_DEFAULT_STORE: LocaleDataStore | None = None
_DEFAULT_STORE_LOCK = RLock()


def get_default_store() -> LocaleDataStore:
    """Get the shared store over the bundled locale tables.

    The same instance is returned on every call, so locale data registered
    on it is visible to every function called without an explicit store.
    """
    # pylint: disable=global-statement
    global _DEFAULT_STORE  # noqa: PLW0603
    with _DEFAULT_STORE_LOCK:
        if _DEFAULT_STORE is None:
            _DEFAULT_STORE = LocaleDataStore.from_directory(BUNDLED_LOCALES_DIR)
        return _DEFAULT_STORE


def register_locale_data(locale: LocaleCode, messages: LocaleMessages) -> None:
    """Register a whole locale table on the default store."""
    get_default_store().register_locale_data(locale, messages)
