"""BfnSettings — one frozen object for CLI flags, env vars, and bfn.toml.

Highest priority first:

1. keyword arguments (the global CLI flags)
2. ``BFN_*`` environment variables, ``__`` for nested keys
   (``BFN_DIGEST__RANDOM_BYTES=16``)
3. the TOML file found by :func:`bfn.config.discovery.find_config`
4. defaults baked into the section models
"""

from __future__ import annotations

import logging
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bfn.config.discovery import find_config
from bfn.config.models import BfnConfig, CalendarConfig, DigestConfig, TextConfig, UuidConfig

logger = logging.getLogger(__name__)

# Set by BfnSettings.from_cli for the duration of one construction.
_toml_path: ContextVar[Path | None] = ContextVar("bfn_toml_path", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document.

    Top-level keys that are not settings fields are dropped with a warning
    so a stray key in ``bfn.toml`` does not abort every command.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self._data = self._read(path) if path is not None else {}

    def _read(self, path: Path) -> dict[str, Any]:
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

        known = self.settings_cls.model_fields
        for key in sorted(set(data) - set(known)):
            logger.warning("Ignoring unknown key %r in %s", key, path)
        data = {key: value for key, value in data.items() if key in known}

        try:
            BfnConfig.model_validate(data)
        except ValidationError as exc:
            msg = f"Invalid configuration in {path}: {exc}"
            raise click.ClickException(msg) from exc
        return data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


class BfnSettings(BaseSettings):
    """Resolved configuration handed to every service.

    Attributes:
        config_path: The TOML file that was read, or None when running on
            defaults and environment variables alone.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BFN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    text: TextConfig = Field(default_factory=TextConfig)
    digest: DigestConfig = Field(default_factory=DigestConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    uuid: UuidConfig = Field(default_factory=UuidConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_path.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> BfnSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* is used only if it names an existing file;
        otherwise the defaults apply. Without one, ``bfn.toml`` is looked up
        from *search_root* (default: cwd) upwards.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
            if toml_path is None:
                logger.debug("Config file %s not found; using defaults", candidate)
        else:
            toml_path = find_config(search_root)

        token = _toml_path.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            msg = f"Invalid configuration in BFN_* environment variables: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_path.reset(token)
