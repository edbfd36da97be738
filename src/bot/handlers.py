"""aiogram message handlers.

Every text message is treated as a settings instruction: it is resolved against the catalog and, if
the resolution is confident, executed against the Botsify API. Every message gets exactly one
reply; internal errors are logged and answered with a generic failure text.
"""

from __future__ import annotations

import asyncio
import json
import logging
from time import monotonic

from aiogram.types import Message

from src.app import App
from src.botsify.dispatch import DispatchError, DispatchOutcome, execute_resolution
from src.resolver.catalog import catalog_keys
from src.resolver.resolver import ResolverInputError
from src.resolver.schema import Intent, ResolutionResult

logger = logging.getLogger(__name__)

USAGE_TEXT = (
    "Send me an instruction about your bot settings, for example:\n"
    "- show me the primary color\n"
    "- change the primary color to #112233\n"
    "- set the chat input to on\n"
    "- remove the popup message\n"
    "Use /keys to list every setting I know."
)
VALUE_HINT_TEXT = "Include the new value, for example: set the chat input to on."
FAILURE_TEXT ="Something went wrong while processing your request. Please try again later."
_MAX_DATA_CHARS = 1_000


def format_resolution_failure(result: ResolutionResult) -> str:
    """Reply for an instruction that could not be resolved confidently."""

    lines = [result.message + "."]
    if result.possible_matches:
        lines.append("Did you mean: " + ", ".join(result.possible_matches) + "?")
    elif result.intent is None:
        lines.append("Try starting with show, set, change or remove.")
    return "\n".join(lines)


def format_outcome(result: ResolutionResult, outcome: DispatchOutcome) -> str:
    """Reply for an executed instruction, including the API payload when there is one."""

    text = f"{outcome.message} ({result.key})."
    if outcome.data is not None:
        payload = json.dumps(outcome.data, ensure_ascii=False, default=str)
        if len(payload) > _MAX_DATA_CHARS:
            payload = payload[:_MAX_DATA_CHARS] + "..."
        text += "\n" + payload
    return text


def process_instruction(text: str, app: App) -> str:
    """Resolve and execute one instruction, returning the reply text (blocking)."""

    started = monotonic()
    try:
        result = app.resolver.resolve(text)
    except ResolverInputError:
        return USAGE_TEXT

    if not result.success:
        logger.info(
            "unresolved intent=%s confidence=%.3f latency_ms=%d",
            result.intent,
            result.confidence,
            int((monotonic() - started) * 1000),
        )
        return format_resolution_failure(result)

    try:
        outcome = execute_resolution(result, app.client, app.resolver.catalog)
    except DispatchError as exc:
        logger.info("not executed key=%s reason=%s", result.key, exc)
        reply = f"Resolved {result.intent} for {result.key}, but {exc}."
        if result.intent == Intent.update and not result.value:
            reply += "\n" + VALUE_HINT_TEXT
        return reply

    logger.info(
        "handled intent=%s key=%s confidence=%.3f success=%s latency_ms=%d",
        result.intent,
        result.key,
        result.confidence,
        outcome.success,
        int((monotonic() - started) * 1000),
    )
    return format_outcome(result, outcome)


async def handle_help(message: Message) -> None:
    """Reply to /start and /help."""

    await message.answer(USAGE_TEXT)


async def handle_keys(message: Message, app: App) -> None:
    """Reply to /keys with every catalog key."""

    await message.answer("Known settings:\n" + "\n".join(catalog_keys(app.resolver.catalog)))


async def handle_message(message: Message, app: App) -> None:
    """Handle any other incoming message with exactly one reply."""

    reply = FAILURE_TEXT

    # noinspection PyBroadException
    try:
        raw_text = message.text or message.caption or ""
        if not raw_text.strip() or raw_text.lstrip().startswith("/"):
            reply = USAGE_TEXT
        else:
            # Resolution is CPU-only but the API call blocks; keep both off the event loop.
            reply = await asyncio.to_thread(process_instruction, raw_text, app)
    except Exception:
        # Handler boundary: never leak internal details to the chat.
        logger.exception("handler failed")

    await message.answer(reply)
