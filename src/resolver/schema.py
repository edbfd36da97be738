"""Settings resolver schema (Pydantic models).

These models are the contract between the natural-language resolver and the dispatch layer that
executes a resolved instruction against the Botsify settings API.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Intent(StrEnum):
    """What the user wants done with a setting."""

    get = "get"
    update = "update"
    delete = "delete"


class SettingType(StrEnum):
    """Value type of a catalog entry (optional catalog metadata)."""

    boolean = "boolean"
    color = "color"
    number = "number"
    text = "text"
    url = "url"
    list = "list"
    secret = "secret"


def parse_range(value: str) -> tuple[float, float]:
    """Parse an inclusive `"<min>..<max>"` range into floats."""

    low, sep, high = value.partition("..")
    if not sep:
        raise ValueError(f"range must look like '<min>..<max>', got {value!r}")
    bounds = float(low), float(high)
    if bounds[0] > bounds[1]:
        raise ValueError("range minimum must be <= maximum")
    return bounds


class SettingEntry(BaseModel):
    """A known bot setting: its API key, a human description and synonym keywords."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    key: str = Field(min_length=1)
    description: str = ""
    keywords: tuple[str, ...] = ()
    type: SettingType | None = None
    range: str | None = None

    @field_validator("keywords")
    @classmethod
    def dedupe_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Keep keywords as an ordered set (first occurrence wins)."""

        return tuple(dict.fromkeys(k.strip() for k in value if k.strip()))

    @model_validator(mode="after")
    def validate_range(self) -> SettingEntry:
        """A range is only meaningful for numeric settings and must be well-formed."""

        if self.range is not None:
            if self.type != SettingType.number:
                raise ValueError("range is only supported for number settings")
            parse_range(self.range)
        return self

    @property
    def searchable_fields(self) -> tuple[str, ...]:
        """Texts the approximate matcher compares the instruction against."""

        return (self.key, self.description, *self.keywords)


class ResolutionResult(BaseModel):
    """Outcome of resolving one instruction.

    `success=False` encodes ambiguity (unknown intent or a low-confidence key match); it is a
    normal result, not an error.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: bool
    intent: Intent | None = None
    key: str | None = None
    value: str | None = None
    # Boosted hybrid scores are reported as computed and may exceed 1.0.
    confidence: float = Field(default=0.0, ge=0.0)
    message: str
    possible_matches: list[str] | None = None

    @model_validator(mode="after")
    def validate_semantics(self) -> ResolutionResult:
        """A successful resolution always names both the intent and the key."""

        if self.success and (self.intent is None or self.key is None):
            raise ValueError("successful resolutions require intent and key")
        if self.success and self.possible_matches is not None:
            raise ValueError("possible_matches is only reported on failure")
        return self
