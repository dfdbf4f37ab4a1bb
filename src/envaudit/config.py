"""Configuration file loading for env-audit.

Settings are read from ``.env-audit.yaml`` (or ``.env-audit.yml``) in the
working directory:

    file: .env.production
    example: .env.example
    required: [DATABASE_URL, SECRET_KEY]
    ignore: [DEBUG]
    strict: true
    check_leaks: true
    quiet: false
    json: false
    github: false
    no_color: false

Values the file does not set can come from ``ENV_AUDIT_*`` environment
variables (e.g. ``ENV_AUDIT_STRICT=true``, ``ENV_AUDIT_REQUIRED=A,B`` or
``ENV_AUDIT_REQUIRED='["A","B"]'``).
Command-line flags take precedence over both.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict, SettingsError

from envaudit.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Supported config file names, in priority order
CONFIG_FILE_NAMES = (".env-audit.yaml", ".env-audit.yml")

ENV_PREFIX = "ENV_AUDIT_"

# File keys that differ from field names
_FILE_KEY_ALIASES = {"json": "json_output"}


class AuditSettings(BaseSettings):
    """Settings for an audit run."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="forbid")

    file: str | None = Field(default=None, description="Path to the .env file to scan")
    required: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Variables that must be set"
    )
    example: str | None = Field(default=None, description="Example file to compare against")
    ignore: Annotated[list[str], NoDecode] = Field(
        default_factory=list, description="Keys excluded from all checks"
    )
    strict: bool = Field(default=False, description="Treat warnings as errors")
    check_leaks: bool = Field(default=False, description="Analyze values for secret patterns")
    quiet: bool = Field(default=False, description="Suppress report output")
    json_output: bool = Field(default=False, description="Output results as JSON")
    github: bool = Field(default=False, description="Output GitHub Actions annotations")
    no_color: bool = Field(default=False, description="Disable colored output")

    @field_validator("required", "ignore", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        """Accept ``A, B`` and ``["A", "B"]`` strings as well as a YAML list."""
        if isinstance(value, str):
            if value.strip().startswith("["):
                try:
                    return json.loads(value)
                except json.JSONDecodeError as e:
                    raise ValueError(f"invalid JSON list: {e}") from e
            return parse_comma_separated(value)
        if value is None:
            return []
        return value

    def merge_cli(
        self,
        *,
        file: str | None = None,
        required: list[str] | None = None,
        example: str | None = None,
        ignore: list[str] | None = None,
        strict: bool = False,
        check_leaks: bool = False,
        quiet: bool = False,
        json_output: bool = False,
        github: bool = False,
        no_color: bool = False,
    ) -> AuditSettings:
        """Return a copy with command-line values applied.

        Values and lists given on the command line replace the configured
        ones. Flags can only be switched on from the command line, so a flag
        set in the file stays set.
        """
        return self.model_copy(
            update={
                "file": file or self.file,
                "required": required or self.required,
                "example": example or self.example,
                "ignore": ignore or self.ignore,
                "strict": strict or self.strict,
                "check_leaks": check_leaks or self.check_leaks,
                "quiet": quiet or self.quiet,
                "json_output": json_output or self.json_output,
                "github": github or self.github,
                "no_color": no_color or self.no_color,
            }
        )


def parse_comma_separated(value: str | None) -> list[str]:
    """Split ``"A, B,,C"`` into ``["A", "B", "C"]``."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def find_config(start_dir: Path | None = None) -> Path | None:
    """Find a config file in the given directory.

    Args:
        start_dir: Directory to look in (defaults to cwd)

    Returns:
        Path to the first config file found, or None
    """
    directory = start_dir or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | str | None = None, start_dir: Path | None = None) -> AuditSettings:
    """Load settings from a config file.

    Args:
        path: Explicit config file. When omitted, ``find_config`` is used
            and defaults are returned if nothing is found.
        start_dir: Directory for discovery when no path is given.

    Returns:
        AuditSettings with file values, environment overrides and defaults

    Raises:
        ConfigError: If an explicit file is missing, or any config file is
            unreadable, not valid YAML, not a mapping, or fails validation
    """
    if path is not None:
        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigError(f"Config file not found: {config_path}")
    else:
        config_path = find_config(start_dir)
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return _build_settings({}, source=None)

    logger.debug("Loading config from %s", config_path)

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    data = {_FILE_KEY_ALIASES.get(str(key), str(key)): value for key, value in data.items()}
    return _build_settings(data, source=config_path)


def _build_settings(data: dict[str, Any], source: Path | None) -> AuditSettings:
    try:
        return AuditSettings(**data)
    except (ValidationError, SettingsError) as e:
        where = f" in {source}" if source else ""
        raise ConfigError(f"Invalid configuration{where}: {e}") from e
