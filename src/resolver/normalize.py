"""Text normalization shared by intent detection, value extraction and key matching."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[-_]")
_NON_WORD_RE = re.compile(r"[^\w\s]+")
_MULTISPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Canonicalize text for matching.

    Steps, in order:
        - Lowercase.
        - Replace hyphens and underscores with spaces (`website-chatbot_popup` -> three words).
        - Drop every character that is neither a word character nor whitespace.
        - Collapse whitespace and trim.

    Total and pure: `None` or an empty string yields `""`.
    """

    value = (text or "").lower()
    value = _SEPARATOR_RE.sub(" ", value)
    value = _NON_WORD_RE.sub("", value)
    value = _MULTISPACE_RE.sub(" ", value).strip()
    return value


def word_set(normalized: str) -> set[str]:
    """Whitespace-delimited words of an already normalized text."""

    return set(normalized.split())
