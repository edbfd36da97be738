"""Extraction of the value an update instruction assigns ("set the color to #112233")."""

from __future__ import annotations

import re

# `<capture>`: optional leading `#` (hex colours), then word characters, spaces and hyphens.
_CAPTURE = r"(#?[\w\s-]+)"

VALUE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r" to " + _CAPTURE, flags=re.IGNORECASE),
    re.compile(r"= " + _CAPTURE, flags=re.IGNORECASE),
    re.compile(r" as " + _CAPTURE, flags=re.IGNORECASE),
)

_MULTISPACE_RE = re.compile(r"\s+")


def extract_value(text: str | None) -> str | None:
    """Pull the assigned value out of an update instruction.

    Patterns are tried in order (`" to "`, `"= "`, `" as "`); the first one that yields a non-empty
    capture wins. Runs on the original text (whitespace collapsed) so the value keeps its case and a
    leading `#`. Returns `None` when no pattern matches; there is no last-word fallback.
    """

    value = _MULTISPACE_RE.sub(" ", text or "").strip()
    for pattern in VALUE_PATTERNS:
        match = pattern.search(value)
        if not match:
            continue
        captured = match.group(1).strip()
        if captured:
            return captured
    return None
