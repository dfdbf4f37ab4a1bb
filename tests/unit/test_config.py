"""Tests for configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from envaudit.config import (
    AuditSettings,
    find_config,
    load_config,
    parse_comma_separated,
)
from envaudit.exceptions import ConfigError, EnvAuditError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ENV_AUDIT_* variables from the host out of the tests."""
    for name in list(os.environ):
        if name.startswith("ENV_AUDIT_"):
            monkeypatch.delenv(name)


class TestParseCommaSeparated:
    """Tests for parse_comma_separated."""

    def test_splits_and_strips(self):
        """Whitespace and empty parts are dropped."""
        assert parse_comma_separated(" A, B,,C ,") == ["A", "B", "C"]

    def test_empty(self):
        """None and empty strings give an empty list."""
        assert parse_comma_separated(None) == []
        assert parse_comma_separated("") == []


class TestFindConfig:
    """Tests for find_config."""

    def test_not_found(self, tmp_path: Path):
        """No config file in the directory."""
        assert find_config(tmp_path) is None

    def test_yaml_preferred_over_yml(self, tmp_path: Path):
        """.env-audit.yaml wins over .env-audit.yml."""
        (tmp_path / ".env-audit.yml").write_text("strict: true\n")
        (tmp_path / ".env-audit.yaml").write_text("strict: true\n")

        assert find_config(tmp_path) == tmp_path / ".env-audit.yaml"

    def test_yml(self, tmp_path: Path):
        """.env-audit.yml is found on its own."""
        (tmp_path / ".env-audit.yml").write_text("strict: true\n")
        assert find_config(tmp_path) == tmp_path / ".env-audit.yml"


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, tmp_path: Path):
        """Defaults are used when nothing is found."""
        settings = load_config(start_dir=tmp_path)
        assert settings == AuditSettings()
        assert settings.file is None
        assert settings.required == []
        assert settings.strict is False

    def test_full_file(self, tmp_path: Path):
        """Every supported key is read."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text(
            """file: .env.production
example: .env.example
required: [DATABASE_URL, SECRET_KEY]
ignore: [DEBUG]
strict: true
check_leaks: true
quiet: true
json: true
github: true
no_color: true
"""
        )
        settings = load_config(config)

        assert settings.file == ".env.production"
        assert settings.example == ".env.example"
        assert settings.required == ["DATABASE_URL", "SECRET_KEY"]
        assert settings.ignore == ["DEBUG"]
        assert settings.strict is True
        assert settings.check_leaks is True
        assert settings.quiet is True
        assert settings.json_output is True
        assert settings.github is True
        assert settings.no_color is True

    def test_discovered_from_directory(self, tmp_path: Path):
        """The file in start_dir is used when no path is given."""
        (tmp_path / ".env-audit.yaml").write_text("required: [A]\n")
        assert load_config(start_dir=tmp_path).required == ["A"]

    def test_comma_separated_lists(self, tmp_path: Path):
        """Lists may be written as comma-separated strings."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("required: 'A, B'\nignore: C\n")
        settings = load_config(config)

        assert settings.required == ["A", "B"]
        assert settings.ignore == ["C"]

    def test_empty_file(self, tmp_path: Path):
        """An empty document means defaults."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("")
        assert load_config(config) == AuditSettings()

    def test_explicit_file_missing(self, tmp_path: Path):
        """An explicit path must exist."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        """Broken YAML is a config error."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("required: [A, B\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config)

    def test_not_a_mapping(self, tmp_path: Path):
        """The document must be a mapping."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(config)

    def test_unknown_key(self, tmp_path: Path):
        """Unknown keys are rejected."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("strcit: true\n")

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(config)

    def test_wrong_type(self, tmp_path: Path):
        """Values must have the right type."""
        config = tmp_path / ".env-audit.yaml"
        config.write_text("strict: sometimes\n")

        with pytest.raises(ConfigError):
            load_config(config)

    def test_config_error_is_env_audit_error(self):
        """ConfigError shares the package base exception."""
        assert issubclass(ConfigError, EnvAuditError)

    def test_environment_override(self, tmp_path: Path, monkeypatch):
        """ENV_AUDIT_* variables fill values the file does not set."""
        monkeypatch.setenv("ENV_AUDIT_STRICT", "true")
        monkeypatch.setenv("ENV_AUDIT_REQUIRED", '["A", "B"]')
        (tmp_path / ".env-audit.yaml").write_text("check_leaks: true\n")

        settings = load_config(start_dir=tmp_path)

        assert settings.strict is True
        assert settings.required == ["A", "B"]
        assert settings.check_leaks is True

    def test_environment_comma_separated_lists(self, tmp_path: Path, monkeypatch):
        """List variables accept the same comma form as --required."""
        monkeypatch.setenv("ENV_AUDIT_REQUIRED", "A, B")
        monkeypatch.setenv("ENV_AUDIT_IGNORE", "DEBUG")

        settings = load_config(start_dir=tmp_path)

        assert settings.required == ["A", "B"]
        assert settings.ignore == ["DEBUG"]

    @pytest.mark.parametrize(
        ("name", "value"),
        [("ENV_AUDIT_REQUIRED", '["A", '), ("ENV_AUDIT_STRICT", "sometimes")],
    )
    def test_invalid_environment_value(self, tmp_path: Path, monkeypatch, name, value):
        """Bad ENV_AUDIT_* values are config errors, not crashes."""
        monkeypatch.setenv(name, value)

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(start_dir=tmp_path)

    def test_file_wins_over_environment(self, tmp_path: Path, monkeypatch):
        """Values in the file take precedence over the environment."""
        monkeypatch.setenv("ENV_AUDIT_FILE", ".env.from-env")
        (tmp_path / ".env-audit.yaml").write_text("file: .env.from-file\n")

        assert load_config(start_dir=tmp_path).file == ".env.from-file"


class TestMergeCli:
    """Tests for AuditSettings.merge_cli."""

    def test_cli_values_win(self):
        """Values from the command line replace configured ones."""
        settings = AuditSettings(file=".env", required=["A"], example=".env.example")
        merged = settings.merge_cli(file=".env.local", required=["B", "C"])

        assert merged.file == ".env.local"
        assert merged.required == ["B", "C"]
        assert merged.example == ".env.example"

    def test_unset_cli_values_keep_config(self):
        """Empty command-line values leave the config alone."""
        settings = AuditSettings(required=["A"], ignore=["DEBUG"])
        merged = settings.merge_cli(required=[], ignore=None)

        assert merged.required == ["A"]
        assert merged.ignore == ["DEBUG"]

    def test_flags_are_combined(self):
        """A flag set in either place is on."""
        settings = AuditSettings(strict=True)
        merged = settings.merge_cli(check_leaks=True)

        assert merged.strict is True
        assert merged.check_leaks is True
        assert merged.json_output is False

    def test_original_unchanged(self):
        """Merging returns a copy."""
        settings = AuditSettings()
        settings.merge_cli(strict=True)
        assert settings.strict is False
