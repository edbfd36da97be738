"""Tests for the settings catalog and its entry schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.resolver.catalog import (
    CATALOG_SCHEMA_VERSION,
    SETTING_CATALOG,
    CatalogError,
    build_catalog,
    catalog_keys,
    find_entry,
)
from src.resolver.schema import ResolutionResult, SettingEntry, SettingType, parse_range


def test_catalog_keys_are_unique() -> None:
    keys = catalog_keys()
    assert len(keys) == len(set(keys)) == len(SETTING_CATALOG)


def test_catalog_entries_are_described() -> None:
    for entry in SETTING_CATALOG:
        assert entry.description, entry.key
        assert entry.keywords, entry.key
        assert entry.type is not None, entry.key


def test_catalog_schema_version() -> None:
    assert CATALOG_SCHEMA_VERSION == 2


def test_find_entry() -> None:
    entry = find_entry("website-chatbot-input-disabled")
    assert entry is not None
    assert entry.type == SettingType.boolean
    assert "chat input" in entry.keywords
    assert find_entry("no-such-key") is None


def test_catalog_entries_are_immutable() -> None:
    with pytest.raises(ValidationError):
        SETTING_CATALOG[0].key = "changed"  # type: ignore[misc]


def test_build_catalog_rejects_duplicate_keys() -> None:
    with pytest.raises(CatalogError, match="duplicate"):
        build_catalog([{"key": "language"}, {"key": "language"}])


def test_build_catalog_rejects_invalid_rows() -> None:
    with pytest.raises(CatalogError):
        build_catalog([{"key": ""}])
    with pytest.raises(CatalogError):
        build_catalog([{"key": "x", "unexpected": 1}])


def test_entry_optional_fields_default_to_absent() -> None:
    entry = SettingEntry(key="language")
    assert entry.description == ""
    assert entry.keywords == ()
    assert entry.type is None
    assert entry.range is None
    assert entry.searchable_fields == ("language", "")


def test_entry_keywords_are_an_ordered_set() -> None:
    entry = SettingEntry(key="popup", keywords=("popup", " pop-up ", "popup", ""))
    assert entry.keywords == ("popup", "pop-up")


def test_entry_range_rules() -> None:
    assert SettingEntry(key="font", type="number", range="8..32").range == "8..32"
    with pytest.raises(ValidationError):
        SettingEntry(key="font", type="text", range="8..32")
    with pytest.raises(ValidationError):
        SettingEntry(key="font", type="number", range="32..8")
    with pytest.raises(ValidationError):
        SettingEntry(key="font", type="number", range="big")


def test_parse_range() -> None:
    assert parse_range("0..1.5") == (0.0, 1.5)
    with pytest.raises(ValueError):
        parse_range("1-2")


def test_resolution_result_invariants() -> None:
    with pytest.raises(ValidationError):
        ResolutionResult(success=True, intent=None, key="language", message="ok")
    with pytest.raises(ValidationError):
        ResolutionResult(
            success=True, intent="get", key="language", message="ok", possible_matches=["language"]
        )
    with pytest.raises(ValidationError):
        ResolutionResult(success=False, confidence=-0.1, message="no")

    result = ResolutionResult(success=True, intent="get", key="language", confidence=1.1, message="ok")
    assert result.intent == "get"
    assert result.confidence == pytest.approx(1.1)
