"""Botsify bot settings API client.

All settings operations are `POST {base_url}/bot/settings` calls authenticated with a bearer token;
the bot's own API key travels in the JSON body as `apikey`. HTTP and connection failures are
returned as an unsuccessful `ApiResponse`, never raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from src.config.settings import Settings

logger = logging.getLogger(__name__)

SETTINGS_ENDPOINT = "/bot/settings"

_STATUS_MESSAGES: dict[int, str] = {
    400: "Bad request - invalid parameters provided",
    401: "Unauthorized - invalid API credentials",
    403: "Forbidden - insufficient permissions",
    404: "Resource not found",
    429: "Rate limit exceeded - please try again later",
    500: "Internal server error - please try again later",
    502: "Bad gateway - service temporarily unavailable",
    503: "Service unavailable - please try again later",
}


@dataclass(frozen=True)
class BotApiConfig:
    """Connection settings for the Botsify API."""

    base_url: str
    auth_key: str
    bot_api_key: str
    timeout_s: float = 60.0

    @classmethod
    def from_settings(cls, settings: Settings) -> BotApiConfig:
        return cls(
            base_url=settings.botsify_api_base_url,
            auth_key=settings.botsify_api_key,
            bot_api_key=settings.botsify_bot_id,
            timeout_s=settings.botsify_api_timeout_s,
        )


@dataclass(frozen=True)
class ApiResponse:
    """Outcome of one API call."""

    success: bool
    data: Any = None
    status: int | None = None
    status_text: str | None = None
    error: str | None = None


def error_message(status: int, data: Any = None) -> str:
    """User-facing message for an HTTP error status."""

    if status in _STATUS_MESSAGES:
        return _STATUS_MESSAGES[status]
    if isinstance(data, dict):
        detail = data.get("message") or data.get("error")
        if detail:
            return str(detail)
    return f"HTTP {status} error"


def _decode_body(body: bytes) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")


class BotApiClient:
    """Synchronous client for the Botsify settings endpoint."""

    def __init__(self, config: BotApiConfig) -> None:
        self.config = config

    def _url(self, endpoint: str) -> str:
        return self.config.base_url.rstrip("/") + endpoint

    def post(self, endpoint: str, data: dict[str, Any]) -> ApiResponse:
        """POST `data` (plus the bot api key) as JSON and decode the JSON reply."""

        payload = {**data, "apikey": self.config.bot_api_key}
        req = Request(
            self._url(endpoint),
            method="POST",
            headers={
                "Authorization": f"Bearer {self.config.auth_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            data=json.dumps(payload).encode(),
        )

        logger.info("api request endpoint=%s fields=%s", endpoint, sorted(data))
        try:
            with urlopen(req, timeout=self.config.timeout_s) as resp:  # noqa: S310 (configured Botsify URL)
                body = resp.read()
                status = resp.status
                reason = resp.reason
        except HTTPError as exc:
            data_out = _decode_body(exc.read() or b"")
            logger.error("api request failed endpoint=%s status=%s", endpoint, exc.code)
            return ApiResponse(
                success=False,
                data=data_out,
                status=exc.code,
                status_text=exc.reason,
                error=error_message(exc.code, data_out),
            )
        except (URLError, TimeoutError) as exc:
            logger.error("api request got no response endpoint=%s reason=%s", endpoint, exc)
            return ApiResponse(
                success=False,
                status=0,
                status_text="No Response",
                error="No response received from server",
            )

        return ApiResponse(success=True, data=_decode_body(body), status=status, status_text=reason)

    def get_setting(self, key: str) -> ApiResponse:
        return self.post(SETTINGS_ENDPOINT, {"key": key})

    def update_setting(self, key: str, value: str) -> ApiResponse:
        return self.post(SETTINGS_ENDPOINT, {"key": key, "value": value})

    def delete_setting(self, key: str) -> ApiResponse:
        """Delete a setting by storing a null value."""

        return self.post(SETTINGS_ENDPOINT, {"key": key, "value": None})

    def test_connection(self) -> ApiResponse:
        return self.post(SETTINGS_ENDPOINT, {"test": True})
