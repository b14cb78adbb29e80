"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bfn.toml only contains overrides.
An empty (or missing) bfn.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from bfn.domain.digest import DEFAULT_RANDOM_BYTES
from bfn.domain.text import CLOSE_MARK, OPEN_MARK


class TextConfig(BaseModel):
    """[text] section."""

    model_config = {"frozen": True}

    open_mark: str = OPEN_MARK
    close_mark: str = CLOSE_MARK


class DigestConfig(BaseModel):
    """[digest] section."""

    model_config = {"frozen": True}

    random_bytes: int = Field(default=DEFAULT_RANDOM_BYTES, ge=1, le=1024)


class CalendarConfig(BaseModel):
    """[calendar] section."""

    model_config = {"frozen": True}

    max_range_days: int = Field(default=36600, ge=1)


class UuidConfig(BaseModel):
    """[uuid] section."""

    model_config = {"frozen": True}

    max_batch: int = Field(default=1000, ge=1)


class BfnConfig(BaseModel):
    """Root config model — all TOML sections."""

    model_config = {"frozen": True}

    text: TextConfig = Field(default_factory=TextConfig)
    digest: DigestConfig = Field(default_factory=DigestConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    uuid: UuidConfig = Field(default_factory=UuidConfig)
