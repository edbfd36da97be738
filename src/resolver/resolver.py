"""Natural-language settings resolver.

Turns an instruction such as "turn off the chat input box" into a `ResolutionResult`:

    Start -> IntentResolved -> KeyResolved -> Done
    Start -> Failed(no intent)
    IntentResolved -> Failed(low confidence)

Blank input is a caller error and raises `ResolverInputError`. Ambiguous input is not an error: it
returns `success=False` with a message and, for low-confidence matches, up to three suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from src.resolver.catalog import SETTING_CATALOG
from src.resolver.intents import classify_intent
from src.resolver.matcher import KeyMatcher
from src.resolver.normalize import normalize_text
from src.resolver.schema import Intent, ResolutionResult, SettingEntry
from src.resolver.values import extract_value

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 0.5

MESSAGE_NO_INTENT = "Unable to determine user intent"
MESSAGE_LOW_CONFIDENCE = "Low confidence in key match"
MESSAGE_RESOLVED = "Key and value resolved successfully"


class ResolverInputError(ValueError):
    """Raised when the instruction text is missing or blank."""


class SettingsResolver:
    """Resolves free-text instructions against a fixed settings catalog.

    Instances hold only immutable data and are safe to share between threads.
    """

    def __init__(
            self,
            catalog: Sequence[SettingEntry] = SETTING_CATALOG,
            *,
            min_confidence: float = MIN_CONFIDENCE,
    ) -> None:
        self.catalog = tuple(catalog)
        self.min_confidence = min_confidence
        self.matcher = KeyMatcher(self.catalog)

    def resolve(self, text: str, value: str | None = None) -> ResolutionResult:
        """Resolve intent, key and value for one instruction.

        Args:
            text: Free-form instruction. Must contain non-whitespace characters.
            value: Explicit value; when given it is used as-is instead of extracting one.

        Raises:
            ResolverInputError: If `text` is empty or blank.
        """

        if not isinstance(text, str) or not text.strip():
            raise ResolverInputError("text is required")

        normalized = normalize_text(text)
        intent = classify_intent(normalized)
        if intent is None:
            return ResolutionResult(
                success=False,
                intent=None,
                key=None,
                value=None,
                confidence=0.0,
                message=MESSAGE_NO_INTENT,
            )

        # An empty explicit value counts as not supplied.
        resolved_value = value or None
        if intent == Intent.update and resolved_value is None:
            resolved_value = extract_value(text)

        outcome = self.matcher.match(text, normalized)
        best = outcome.best
        confidence = best.hybrid_score if best is not None else 0.0
        logger.debug(
            "matched intent=%s candidates=%d best=%s confidence=%.3f",
            intent,
            len(outcome.candidates),
            best.entry.key if best is not None else None,
            confidence,
        )

        if best is None or confidence < self.min_confidence:
            return ResolutionResult(
                success=False,
                intent=intent,
                key=None,
                value=resolved_value,
                confidence=confidence,
                message=MESSAGE_LOW_CONFIDENCE,
                possible_matches=list(outcome.possible_matches),
            )

        return ResolutionResult(
            success=True,
            intent=intent,
            key=best.entry.key,
            value=resolved_value,
            confidence=confidence,
            message=MESSAGE_RESOLVED,
        )


_DEFAULT_RESOLVER = SettingsResolver()


def resolve_instruction(text: str, value: str | None = None) -> ResolutionResult:
    """Resolve an instruction against the built-in catalog (convenience wrapper)."""

    return _DEFAULT_RESOLVER.resolve(text, value)
