from __future__ import annotations

from typing import Any

import pytest

from src.botsify.client import ApiResponse
from src.botsify.dispatch import DispatchError, coerce_value, execute_resolution
from src.resolver.schema import Intent, ResolutionResult


class _RecordingClient:
    def __init__(self, response: ApiResponse | None = None) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.response = response or ApiResponse(success=True, data={"value": "#112233"}, status=200)

    def get_setting(self, key: str) -> ApiResponse:
        self.calls.append(("get", key))
        return self.response

    def update_setting(self, key: str, value: str) -> ApiResponse:
        self.calls.append(("update", key, value))
        return self.response

    def delete_setting(self, key: str) -> ApiResponse:
        self.calls.append(("delete", key))
        return self.response


def _resolved(intent: Intent, key: str, value: str | None = None) -> ResolutionResult:
    return ResolutionResult(success=True, intent=intent, key=key, value=value, confidence=0.9, message="ok")


@pytest.mark.parametrize(
    ("intent", "expected_call", "message"),
    [
        (Intent.get, ("get", "website-chatbot-primary-color"), "Bot setting retrieved successfully"),
        (Intent.delete, ("delete", "website-chatbot-primary-color"), "Bot setting deleted successfully"),
    ],
)
def test_execute_get_and_delete(small_catalog, intent: Intent, expected_call: tuple, message: str) -> None:
    client = _RecordingClient()
    outcome = execute_resolution(_resolved(intent, "website-chatbot-primary-color"), client, small_catalog)

    assert client.calls == [expected_call]
    assert outcome.success
    assert outcome.message == message
    assert outcome.data == {"value": "#112233"}


def test_execute_update_coerces_value(small_catalog) -> None:
    client = _RecordingClient()
    outcome = execute_resolution(
        _resolved(Intent.update, "website-chatbot-primary-color", "112233"), client, small_catalog
    )

    assert client.calls == [("update", "website-chatbot-primary-color", "#112233")]
    assert outcome.message == "Bot setting updated successfully"


def test_execute_reports_api_failure(small_catalog) -> None:
    client = _RecordingClient(ApiResponse(success=False, status=401, error="Unauthorized - invalid API credentials"))
    outcome = execute_resolution(_resolved(Intent.get, "has_sound"), client, small_catalog)

    assert not outcome.success
    assert outcome.message == "Failed to retrieve bot setting: Unauthorized - invalid API credentials"


def test_execute_rejects_unresolved_results(small_catalog) -> None:
    client = _RecordingClient()
    failed = ResolutionResult(success=False, intent=Intent.update, message="Low confidence in key match")

    with pytest.raises(DispatchError):
        execute_resolution(failed, client, small_catalog)
    with pytest.raises(DispatchError, match="unknown setting key"):
        execute_resolution(_resolved(Intent.get, "not-in-catalog"), client, small_catalog)
    with pytest.raises(DispatchError, match="value is required"):
        execute_resolution(_resolved(Intent.update, "has_sound"), client, small_catalog)
    assert client.calls == []


def test_execute_rejects_invalid_value_before_calling(small_catalog) -> None:
    client = _RecordingClient()

    with pytest.raises(DispatchError):
        execute_resolution(_resolved(Intent.update, "website-chatbot-font-size", "64"), client, small_catalog)
    assert client.calls == []


@pytest.mark.parametrize(
    ("key", "value", "expected"),
    [
        ("has_sound", "On", "1"),
        ("has_sound", "disabled", "0"),
        ("website-chatbot-primary-color", "abc", "#abc"),
        ("website-chatbot-primary-color", "#112233", "#112233"),
        ("website-chatbot-primary-color", "dark blue", "dark blue"),
        ("website-chatbot-font-size", " 14 ", "14"),
        ("website-chatbot-font-size", "8", "8"),
        ("excluded-ips", "10.0.0.1", "10.0.0.1"),
    ],
)
def test_coerce_value(small_catalog, key: str, value: str, expected: str) -> None:
    entry = next(e for e in small_catalog if e.key == key)
    assert coerce_value(entry, value) == expected


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("has_sound", "maybe"),
        ("website-chatbot-font-size", "large"),
        ("website-chatbot-font-size", "33"),
        ("website-chatbot-font-size", "7.5"),
    ],
)
def test_coerce_value_rejects(small_catalog, key: str, value: str) -> None:
    entry = next(e for e in small_catalog if e.key == key)
    with pytest.raises(DispatchError):
        coerce_value(entry, value)
