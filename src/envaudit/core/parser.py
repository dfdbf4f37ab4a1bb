"""ENV file parser with duplicate tracking."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from envaudit.core.classifier import redact_value
from envaudit.exceptions import EnvFileError

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Parsed .env file.

    Attributes:
        entries: Key to value mapping; the last definition of a key wins.
        duplicates: Keys defined more than once, in order of first repetition.
        path: Source file, empty for parsed strings.
    """

    entries: dict[str, str] = field(default_factory=dict)
    duplicates: list[str] = field(default_factory=list)
    path: Path = field(default_factory=Path)

    def __contains__(self, name: str) -> bool:
        """Check if a variable exists."""
        return name in self.entries

    def __len__(self) -> int:
        """Return number of variables."""
        return len(self.entries)


class EnvParser:
    """Parse .env files.

    Handles:
    - Standard KEY=value, split at the first ``=``; any non-empty key is kept
    - Quoted values: KEY="value" or KEY='value'
    - Optional ``export`` prefix
    - Comments and blank lines (skipped)
    - Repeated keys (last value wins, key recorded as duplicate)
    """

    # Pattern to match KEY=value lines
    LINE_PATTERN = re.compile(r"^(?:export\s+)?([^=]*?)\s*=\s*(.*)$")

    def parse(self, path: Path | str) -> ParseResult:
        """Parse .env file and return structured data.

        Args:
            path: Path to the .env file

        Returns:
            ParseResult with parsed variables

        Raises:
            EnvFileError: If the file doesn't exist or cannot be read
        """
        path = Path(path)

        if not path.is_file():
            raise EnvFileError(f"ENV file not found: {path}")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileError(f"Cannot read ENV file {path}: {e}") from e

        result = self.parse_string(content)
        result.path = path
        logger.debug(
            "Parsed %s: %d variables, %d duplicates", path, len(result), len(result.duplicates)
        )

        return result

    def parse_string(self, content: str) -> ParseResult:
        """Parse .env content from string.

        Args:
            content: String content of .env file

        Returns:
            ParseResult with parsed variables
        """
        result = ParseResult()

        for line_num, line in enumerate(content.splitlines(), start=1):
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            match = self.LINE_PATTERN.match(line)
            if not match or not match.group(1):
                logger.warning("Skipping line %d: expected KEY=value", line_num)
                continue

            key = match.group(1)
            value = self._unquote(match.group(2).strip())

            if key in result.entries and key not in result.duplicates:
                result.duplicates.append(key)

            result.entries[key] = value

        return result

    def _unquote(self, value: str) -> str:
        """Remove surrounding quotes from a value.

        Handles:
        - Double quotes: "value"
        - Single quotes: 'value'
        """
        if len(value) >= 2:
            if (value.startswith('"') and value.endswith('"')) or (
                value.startswith("'") and value.endswith("'")
            ):
                return value[1:-1]
        return value


def read_os_env() -> dict[str, str]:
    """Snapshot the current process environment."""
    return dict(os.environ)


def format_env(entries: Mapping[str, str], redact: bool = True) -> str:
    """Render a snapshot as sorted KEY=VALUE lines.

    Args:
        entries: Snapshot to render.
        redact: Replace values of sensitive keys with the placeholder.
    """
    return "\n".join(
        f"{key}={redact_value(key, entries[key], redact)}" for key in sorted(entries)
    )
