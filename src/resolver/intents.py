"""Intent trigger phrases and first-match intent classification.

The table is an ordered sequence of `(intent, phrase)` pairs, not a mapping: the first phrase found
anywhere in the text decides the intent, so category order (get, update, delete) takes priority over
where the phrase appears. "show me how to delete this" is a `get`.
"""

from __future__ import annotations

from src.resolver.schema import Intent

INTENT_PHRASES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.get, ("what is", "get", "show me", "display", "see", "status", "current value")),
    (Intent.update, ("change", "set", "update", "make", "turn on", "turn off", "enable", "disable")),
    (Intent.delete, ("delete", "remove", "clear", "unset")),
)

INTENT_TRIGGERS: tuple[tuple[Intent, str], ...] = tuple(
    (intent, phrase) for intent, phrases in INTENT_PHRASES for phrase in phrases
)


def find_trigger(normalized_text: str) -> tuple[Intent, str] | None:
    """Return the first `(intent, phrase)` pair whose phrase occurs in the text."""

    for intent, phrase in INTENT_TRIGGERS:
        # Plain substring containment: "settings" triggers "set".
        if phrase in normalized_text:
            return intent, phrase
    return None


def classify_intent(normalized_text: str) -> Intent | None:
    """Classify normalized text as get/update/delete, or `None` if no trigger phrase occurs."""

    match = find_trigger(normalized_text)
    if match is None:
        return None
    return match[0]
