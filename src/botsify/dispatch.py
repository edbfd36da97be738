"""Execution of resolved instructions against the Botsify settings API."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.botsify.client import ApiResponse, BotApiClient
from src.resolver.catalog import SETTING_CATALOG, find_entry
from src.resolver.schema import Intent, ResolutionResult, SettingEntry, SettingType, parse_range

logger = logging.getLogger(__name__)

_TRUE_WORDS = {"1", "true", "yes", "on", "enable", "enabled"}
_FALSE_WORDS = {"0", "false", "no", "off", "disable", "disabled"}
_BARE_HEX_RE = re.compile(r"[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?")

_VERBS: dict[Intent, tuple[str, str]] = {
    Intent.get: ("retrieve", "retrieved"),
    Intent.update: ("update", "updated"),
    Intent.delete: ("delete", "deleted"),
}


class DispatchError(ValueError):
    """Raised when a resolution cannot be turned into an API call."""


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of executing one resolution."""

    success: bool
    message: str
    data: Any = None


def coerce_value(entry: SettingEntry, value: str) -> str:
    """Normalize a value for the entry's declared type.

    Booleans become `"1"`/`"0"`, bare hex colours get a `#` prefix and numbers are checked against
    the entry's range. Untyped entries pass the value through.

    Raises:
        DispatchError: If the value does not fit the entry's type or range.
    """

    value = value.strip()
    if entry.type == SettingType.boolean:
        lowered = value.lower()
        if lowered in _TRUE_WORDS:
            return "1"
        if lowered in _FALSE_WORDS:
            return "0"
        raise DispatchError(f"{entry.key} expects on/off, got {value!r}")

    if entry.type == SettingType.color and _BARE_HEX_RE.fullmatch(value):
        return f"#{value}"

    if entry.type == SettingType.number:
        try:
            number = float(value)
        except ValueError as exc:
            raise DispatchError(f"{entry.key} expects a number, got {value!r}") from exc
        if entry.range is not None:
            low, high = parse_range(entry.range)
            if not low <= number <= high:
                raise DispatchError(f"{entry.key} must be within {entry.range}, got {value}")

    return value


def _outcome(intent: Intent, response: ApiResponse) -> DispatchOutcome:
    verb, past = _VERBS[intent]
    if response.success:
        return DispatchOutcome(success=True, message=f"Bot setting {past} successfully", data=response.data)
    return DispatchOutcome(
        success=False,
        message=f"Failed to {verb} bot setting: {response.error}",
        data=response.data,
    )


def execute_resolution(
        result: ResolutionResult,
        client: BotApiClient,
        catalog: Sequence[SettingEntry] = SETTING_CATALOG,
) -> DispatchOutcome:
    """Run the API call a successful resolution asks for.

    Raises:
        DispatchError: If the resolution was not successful, names an unknown key, or is an update
            without a (valid) value.
    """

    if not result.success or result.intent is None or result.key is None:
        raise DispatchError(f"cannot execute an unresolved instruction: {result.message}")

    entry = find_entry(result.key, catalog)
    if entry is None:
        raise DispatchError(f"unknown setting key: {result.key}")

    if result.intent == Intent.get:
        response = client.get_setting(entry.key)
    elif result.intent == Intent.update:
        if not result.value:
            raise DispatchError(f"a value is required to update {entry.key}")
        response = client.update_setting(entry.key, coerce_value(entry, result.value))
    else:
        response = client.delete_setting(entry.key)

    logger.info(
        "dispatched intent=%s key=%s success=%s status=%s",
        result.intent,
        entry.key,
        response.success,
        response.status,
    )
    return _outcome(result.intent, response)
