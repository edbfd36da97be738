"""Application composition root.

This module wires together configuration, the settings resolver and the Botsify API client.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.botsify.client import BotApiClient, BotApiConfig
from src.config.settings import Settings
from src.resolver.catalog import SETTING_CATALOG
from src.resolver.resolver import SettingsResolver


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings
    resolver: SettingsResolver
    client: BotApiClient


def create_app(settings: Settings) -> App:
    """Create the application container from validated settings."""

    resolver = SettingsResolver(SETTING_CATALOG, min_confidence=settings.resolver_min_confidence)
    client = BotApiClient(BotApiConfig.from_settings(settings))
    return App(settings=settings, resolver=resolver, client=client)
