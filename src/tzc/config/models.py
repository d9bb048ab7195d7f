"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tzc.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tzc.domain.zones import DEFAULT_ZONES


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    defaults: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ZONES))
    fallback: list[str] = Field(default_factory=list)

    @field_validator("defaults")
    @classmethod
    def _non_empty_defaults(cls, value: dict[str, str]) -> dict[str, str]:
        if not value:
            msg = "[zones] defaults must name at least one zone"
            raise ValueError(msg)
        return value


class PromptConfig(BaseModel):
    """[prompt] section."""

    model_config = {"frozen": True}

    columns: int = Field(default=3, ge=1)
    show_list: bool = True
