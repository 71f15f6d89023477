"""Message references: an id plus values standing in for a localized string.

IcuMessage is the typed form minted by the reference registry. Documents that
cross a serialization boundary carry the same data as plain mappings
({"id", "values", "uiStringMessage"}); is_icu_message() recognizes both.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeIs

from icureport.runtime.number_format import is_number
from icureport.runtime.preformat import MessageValue

if TYPE_CHECKING:
    from icureport.localization.store import LocaleDataStore
    from icureport.localization.types import MessageId

__all__ = ["IcuMessage", "is_icu_message", "to_icu_message"]

_EMPTY_VALUES: Mapping[str, MessageValue] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class IcuMessage:
    """Reference to a localizable message.

    Attributes:
        id: '<relative file path> | <key name>'
        values: Placeholder values, or None when the message takes none
        ui_string_message: The source-language text the reference was minted
            from; used as fallback when a locale table lacks the id

    Example:
        >>> ref = IcuMessage("core/audits/a.js | title", {"count": 2}, "{count} items")
        >>> ref.to_dict()["uiStringMessage"]
        '{count} items'
    """

    id: MessageId
    values: Mapping[str, MessageValue] | None = field(default=None)
    ui_string_message: str | None = None

    @property
    def values_or_empty(self) -> Mapping[str, MessageValue]:
        """Values, with None normalized to an empty mapping."""
        return self.values if self.values is not None else _EMPTY_VALUES

    def to_dict(self) -> dict[str, Any]:
        """JSON shape of the reference; absent optional fields are omitted."""
        result: dict[str, Any] = {"id": self.id}
        if self.values is not None:
            result["values"] = dict(self.values)
        if self.ui_string_message is not None:
            result["uiStringMessage"] = self.ui_string_message
        return result


def _is_plain_values(values: object) -> bool:
    if not isinstance(values, Mapping):
        return False
    return all(isinstance(v, str) or is_number(v) for v in values.values())


def _is_shaped_like_reference(obj: object) -> bool:
    """Structural part of the reference check (no locale data consulted)."""
    if isinstance(obj, IcuMessage):
        return isinstance(obj.id, str) and (obj.values is None or _is_plain_values(obj.values))
    if not isinstance(obj, Mapping):
        return False
    if not isinstance(obj.get("id"), str):
        return False
    # Optional fields: absent is fine, present must be well-typed (None included)
    if "values" in obj and not _is_plain_values(obj["values"]):
        return False
    return not ("uiStringMessage" in obj and not isinstance(obj["uiStringMessage"], str))


def is_icu_message(obj: object, store: LocaleDataStore | None = None) -> TypeIs[IcuMessage | Mapping[str, Any]]:
    """Check whether obj is a message reference known to the default locale.

    True iff obj is an IcuMessage or a mapping with a string "id", an optional
    "values" mapping of str/number values, an optional string
    "uiStringMessage", and an id present in the 'en' table. An object of the
    right shape whose id is unknown is ordinary data, not a reference.

    Args:
        obj: Candidate value
        store: Locale data to check the id against (default: bundled store)

    Example:
        >>> is_icu_message({"id": "not-a-real-id", "values": {}})
        False
    """
    if not _is_shaped_like_reference(obj):
        return False
    if store is None:
        from icureport.localization.store import get_default_store  # noqa: PLC0415

        store = get_default_store()
    message_id = obj.id if isinstance(obj, IcuMessage) else obj["id"]  # type: ignore[index]
    return store.has_message_id(message_id)


def to_icu_message(obj: IcuMessage | Mapping[str, Any]) -> IcuMessage:
    """Normalize a reference (typed or plain mapping) to an IcuMessage."""
    if isinstance(obj, IcuMessage):
        return obj
    return IcuMessage(
        id=obj["id"],
        values=obj.get("values"),
        ui_string_message=obj.get("uiStringMessage"),
    )
