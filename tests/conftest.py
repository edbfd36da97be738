"""Pytest configuration and shared fixtures.

The repository uses a flat `src/` layout; this conftest ensures tests can import from the `src.*`
namespace when running `pytest` without installing the package.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure `import src...` works when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from src.resolver.catalog import build_catalog  # noqa: E402
from src.resolver.schema import SettingEntry  # noqa: E402


@pytest.fixture
def small_catalog() -> tuple[SettingEntry, ...]:
    """A catalog whose keywords are distinct and free of intent trigger phrases."""

    return build_catalog(
        [
            {
                "key": "website-chatbot-primary-color",
                "description": "Primary color of the chatbot",
                "keywords": ("primary color", "main color"),
                "type": "color",
            },
            {
                "key": "website-chatbot-popup",
                "description": "Chatbot popup visibility",
                "keywords": ("popup", "pop-up"),
                "type": "boolean",
            },
            {
                "key": "has_sound",
                "description": "Sound for the chatbot",
                "keywords": ("sound", "chatbot sound"),
                "type": "boolean",
            },
            {
                "key": "website-chatbot-font-size",
                "description": "Font size for chatbot text",
                "keywords": ("font size", "text size"),
                "type": "number",
                "range": "8..32",
            },
            {
                "key": "excluded-ips",
                "description": "IP addresses excluded from chatbot",
                "keywords": ("excluded ips", "block ips"),
                "type": "list",
            },
        ]
    )
