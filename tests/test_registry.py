"""Tests for minting message references from UI string tables.

Python 3.13+.
"""

from pathlib import Path

import pytest

from icureport.diagnostics import UnknownMessageError
from icureport.localization import (
    PROJECT_ROOT,
    UI_STRINGS,
    IcuMessage,
    LocaleDataStore,
    format_message_id,
    make_reference_factory,
)

ROOT = Path("/proj")
AUDIT_FILE = ROOT / "core" / "audits" / "cache-policy.py"
AUDIT_STRINGS = {
    "title": "Uses efficient cache policy on static assets",
    "displayValue": "{itemCount, plural, =1{1 resource found} other{# resources found}}",
}


class TestFormatMessageId:
    """'<relative path> | <key>' ids."""

    def test_relative_path_and_key(self) -> None:
        assert format_message_id(AUDIT_FILE, "title", ROOT) == "core/audits/cache-policy.py | title"

    def test_string_paths(self) -> None:
        assert format_message_id("/proj/a.py", "x", "/proj") == "a.py | x"

    def test_project_root_contains_package(self) -> None:
        assert (PROJECT_ROOT / "icureport" / "localization" / "registry.py").is_file()


class TestMessageReferenceFactory:
    """The factory returned by make_reference_factory."""

    def test_module_string(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, AUDIT_STRINGS, root=ROOT)
        reference = str_(AUDIT_STRINGS["title"])
        assert reference == IcuMessage(
            "core/audits/cache-policy.py | title", None, AUDIT_STRINGS["title"]
        )

    def test_values_attached(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, AUDIT_STRINGS, root=ROOT)
        reference = str_(AUDIT_STRINGS["displayValue"], {"itemCount": 3})
        assert reference.id == "core/audits/cache-policy.py | displayValue"
        assert reference.values == {"itemCount": 3}
        assert reference.ui_string_message == AUDIT_STRINGS["displayValue"]

    def test_shared_string_uses_registry_path(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, AUDIT_STRINGS)
        reference = str_(UI_STRINGS["ms"], {"timeInMs": 10})
        assert reference.id == "icureport/localization/registry.py | ms"

    def test_shared_ids_exist_in_bundled_data(self, store: LocaleDataStore) -> None:
        str_ = make_reference_factory(AUDIT_FILE, {})
        for ui_string in UI_STRINGS.values():
            assert store.has_message_id(str_(ui_string).id)

    def test_module_entry_overrides_shared_key(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, {"columnURL": "Address"}, root=ROOT)
        assert str_("Address").id == "core/audits/cache-policy.py | columnURL"
        with pytest.raises(UnknownMessageError):
            str_("URL")

    def test_duplicate_text_resolves_to_first_key(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, {})
        reference = str_("Potential Savings")
        assert reference.id == "icureport/localization/registry.py | columnWastedBytes"

    def test_unknown_string(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, AUDIT_STRINGS, root=ROOT)
        with pytest.raises(UnknownMessageError, match="Not in any table"):
            str_("Not in any table")

    def test_repr(self) -> None:
        str_ = make_reference_factory(AUDIT_FILE, AUDIT_STRINGS, root=ROOT)
        assert "strings=2" in repr(str_)
