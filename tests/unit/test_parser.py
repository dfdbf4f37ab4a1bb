"""Tests for envaudit.core.parser."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from envaudit.core.classifier import REDACTED
from envaudit.core.parser import EnvParser, format_env, read_os_env
from envaudit.exceptions import EnvFileError


class TestEnvParser:
    """Tests for EnvParser."""

    def test_parse_file(self, tmp_env_file: Path):
        """Test parsing a valid env file."""
        result = EnvParser().parse(tmp_env_file)

        assert result.path == tmp_env_file
        assert len(result) == 5
        assert result.entries["DATABASE_URL"] == "postgres://localhost/db"
        assert result.entries["PORT"] == "8000"
        assert "DEBUG" in result
        assert result.duplicates == []

    def test_missing_file(self, tmp_path: Path):
        """Missing files raise EnvFileError."""
        with pytest.raises(EnvFileError, match="not found"):
            EnvParser().parse(tmp_path / "missing.env")

    def test_directory_is_not_a_file(self, tmp_path: Path):
        """Directories are rejected."""
        with pytest.raises(EnvFileError):
            EnvParser().parse(tmp_path)

    def test_undecodable_file(self, tmp_path: Path):
        """Binary content raises EnvFileError."""
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"KEY=\xff\xfe\xfa")

        with pytest.raises(EnvFileError, match="Cannot read"):
            EnvParser().parse(env_file)

    def test_comments_and_blank_lines(self):
        """Comments and blank lines are skipped."""
        result = EnvParser().parse_string("# comment\n\n   \nA=1\n  # indented\n")
        assert result.entries == {"A": "1"}

    def test_quotes_are_stripped(self):
        """Matching surrounding quotes are removed."""
        content = "A=\"double\"\nB='single'\nC=\"unbalanced\nD=\"\"\nE=x\"y\""
        result = EnvParser().parse_string(content)

        assert result.entries == {
            "A": "double",
            "B": "single",
            "C": '"unbalanced',
            "D": "",
            "E": 'x"y"',
        }

    def test_whitespace_and_equals_in_value(self):
        """Whitespace around key and value is trimmed; only the first = splits."""
        result = EnvParser().parse_string("  URL =  postgres://u:p@h/db?x=1  ")
        assert result.entries == {"URL": "postgres://u:p@h/db?x=1"}

    def test_empty_value(self):
        """KEY= yields an empty value."""
        assert EnvParser().parse_string("EMPTY=").entries == {"EMPTY": ""}

    def test_export_prefix(self):
        """Shell-style export lines are accepted."""
        assert EnvParser().parse_string("export TOKEN=abc").entries == {"TOKEN": "abc"}

    def test_any_key_before_first_equals(self):
        """Keys are kept as written, whatever characters they use."""
        result = EnvParser().parse_string("1ST_KEY=x\nMY KEY = y\nexportX=1\nA.B-C=z")
        assert result.entries == {"1ST_KEY": "x", "MY KEY": "y", "exportX": "1", "A.B-C": "z"}

    def test_malformed_lines_skipped_with_warning(self, caplog, monkeypatch):
        """Lines without = or without a key are skipped and reported."""
        monkeypatch.setattr(logging.getLogger("envaudit"), "propagate", True)

        with caplog.at_level(logging.WARNING, logger="envaudit.core.parser"):
            result = EnvParser().parse_string("not a pair\n=value\nGOOD=1")

        assert result.entries == {"GOOD": "1"}
        assert [record.getMessage() for record in caplog.records] == [
            "Skipping line 1: expected KEY=value",
            "Skipping line 2: expected KEY=value",
        ]

    def test_duplicates(self):
        """Repeated keys keep the last value and are recorded once."""
        content = "PORT=1\nHOST=a\nPORT=2\nPORT=3\nHOST=b\n"
        result = EnvParser().parse_string(content)

        assert result.entries == {"PORT": "3", "HOST": "b"}
        assert result.duplicates == ["PORT", "HOST"]


def test_read_os_env(monkeypatch):
    """The process environment is snapshotted as a plain dict."""
    monkeypatch.setenv("ENVAUDIT_TEST_VAR", "value")
    env = read_os_env()

    assert isinstance(env, dict)
    assert env["ENVAUDIT_TEST_VAR"] == "value"


class TestFormatEnv:
    """Tests for format_env."""

    def test_sorted_and_redacted(self):
        """Lines are sorted and sensitive values redacted."""
        output = format_env({"PORT": "80", "DB_PASSWORD": "pw", "APP": "x"})
        assert output.splitlines() == ["APP=x", f"DB_PASSWORD={REDACTED}", "PORT=80"]

    def test_unredacted(self):
        """Redaction can be switched off."""
        assert format_env({"DB_PASSWORD": "pw"}, redact=False) == "DB_PASSWORD=pw"

    def test_empty(self):
        """Empty snapshot renders as an empty string."""
        assert format_env({}) == ""
