"""Message reference registry: mint IcuMessage references from UI strings.

Each module that shows text declares a table of its UI strings and asks for
a reference factory:

    UI_STRINGS = {"title": "Uses efficient cache policy"}
    str_ = make_reference_factory(__file__, UI_STRINGS)
    title = str_(UI_STRINGS["title"])

The factory maps the literal back to its key and derives a stable id,
'<file path relative to the project root> | <key>'. Common strings shared by
every module live in the UI_STRINGS table of this module; their ids use this
module's path.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from icureport.constants import MESSAGE_ID_SEPARATOR
from icureport.diagnostics import ErrorTemplate, UnknownMessageError
from icureport.localization.message import IcuMessage

if TYPE_CHECKING:
    from icureport.localization.types import MessageId
    from icureport.runtime.preformat import MessageValue

__all__ = [
    "PROJECT_ROOT",
    "UI_STRINGS",
    "MessageReferenceFactory",
    "format_message_id",
    "make_reference_factory",
]

_THIS_FILE: Path = Path(__file__).resolve()

PROJECT_ROOT: Path = _THIS_FILE.parents[2]
"""Directory message ids are relative to (the one containing 'icureport/')."""

# Strings shared across report modules.
UI_STRINGS: Mapping[str, str] = MappingProxyType(
    {
        # Durations: {timeInMs} is shown in milliseconds (63 ms) or seconds (5.2 s)
        "ms": "{timeInMs, number, milliseconds}\xa0ms",
        "seconds": "{timeInMs, number, seconds}\xa0s",
        # Per-audit savings: {wastedBytes} shown in kilobytes, {wastedMs} in milliseconds
        "displayValueByteSavings": "Potential savings of {wastedBytes, number, bytes}\xa0KB",
        "displayValueMsSavings": "Potential savings of {wastedMs, number, milliseconds}\xa0ms",
        # Data table column headers
        "columnURL": "URL",
        "columnSize": "Size",
        "columnResourceSize": "Resource Size",
        "columnTransferSize": "Transfer Size",
        "columnCacheTTL": "Cache TTL",
        "columnWastedBytes": "Potential Savings",
        "columnWastedMs": "Potential Savings",
        "columnTimeSpent": "Time Spent",
        "columnLocation": "Location",
        "columnResourceType": "Resource Type",
        "columnRequests": "Requests",
        "columnName": "Name",
        "columnSource": "Source",
        "columnOverBudget": "Over Budget",
        # Data table rows, per resource type
        "totalResourceType": "Total",
        "documentResourceType": "Document",
        "scriptResourceType": "Script",
        "stylesheetResourceType": "Stylesheet",
        "imageResourceType": "Image",
        "mediaResourceType": "Media",
        "fontResourceType": "Font",
        "otherResourceType": "Other",
        "thirdPartyResourceType": "Third-party",
        # Metric names (keep within ~40 characters)
        "firstContentfulPaintMetric": "First Contentful Paint",
        "firstCPUIdleMetric": "First CPU Idle",
        "interactiveMetric": "Time to Interactive",
        "firstMeaningfulPaintMetric": "First Meaningful Paint",
        "estimatedInputLatencyMetric": "Estimated Input Latency",
        "totalBlockingTimeMetric": "Total Blocking Time",
        "maxPotentialFIDMetric": "Max Potential First Input Delay",
        "speedIndexMetric": "Speed Index",
    }
)


def format_message_id(filename: str | os.PathLike[str], key: str, root: str | os.PathLike[str]) -> MessageId:
    """Build '<unix-style path relative to root> | <key>'.

    Example:
        >>> format_message_id("/proj/core/audits/a.py", "title", "/proj")
        'core/audits/a.py | title'
    """
    relative = os.path.relpath(filename, root).replace("\\", "/")
    return f"{relative}{MESSAGE_ID_SEPARATOR}{key}"


class MessageReferenceFactory:
    """Callable minting references for one module's UI strings.

    Attributes:
        filename: Source file the module's own strings belong to
        file_strings: The module's UI strings table
        root: Directory ids are relative to
    """

    __slots__ = ("_merged_strings", "file_strings", "filename", "root")

    def __init__(
        self,
        filename: str | os.PathLike[str],
        file_strings: Mapping[str, str],
        *,
        root: str | os.PathLike[str] = PROJECT_ROOT,
    ) -> None:
        self.filename = filename
        self.file_strings = file_strings
        self.root = root
        # Module entries win over shared ones on key collision
        self._merged_strings: dict[str, str] = {**UI_STRINGS, **file_strings}

    def __call__(
        self, ui_string: str, values: Mapping[str, MessageValue] | None = None
    ) -> IcuMessage:
        """Reference for ui_string, which must be a value of the merged table.

        Raises:
            UnknownMessageError: ui_string is not in the merged table
        """
        key = next((k for k, v in self._merged_strings.items() if v == ui_string), None)
        if key is None:
            raise UnknownMessageError(ErrorTemplate.unknown_message(ui_string))

        source_file = self.filename if key in self.file_strings else _THIS_FILE
        return IcuMessage(
            id=format_message_id(source_file, key, self.root),
            values=values,
            ui_string_message=ui_string,
        )

    def __repr__(self) -> str:
        return f"MessageReferenceFactory(filename={str(self.filename)!r}, strings={len(self.file_strings)})"


def make_reference_factory(
    filename: str | os.PathLike[str],
    file_strings: Mapping[str, str],
    *,
    root: str | os.PathLike[str] = PROJECT_ROOT,
) -> MessageReferenceFactory:
    """Register a module's UI strings and return its reference factory.

    Args:
        filename: The module's source path (normally __file__)
        file_strings: The module's UI strings table
        root: Directory ids are relative to (default: the package parent)

    Returns:
        Factory turning a UI string (plus values) into an IcuMessage

    Example:
        >>> str_ = make_reference_factory(__file__, {})
        >>> str_(UI_STRINGS["ms"], {"timeInMs": 127}).id
        'icureport/localization/registry.py | ms'
    """
    return MessageReferenceFactory(filename, file_strings, root=root)
