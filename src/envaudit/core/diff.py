"""Snapshot diff engine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from envaudit.core.classifier import redact_value


class DiffType(Enum):
    """Type of difference between snapshots."""

    ADDED = "added"  # In env2 but not env1
    REMOVED = "removed"  # In env1 but not env2
    CHANGED = "changed"  # Different values


@dataclass
class DiffResult:
    """Result of comparing two snapshots.

    A key appears in at most one of the three mappings. Keys with equal
    values in both snapshots appear in none.
    """

    added: dict[str, str] = field(default_factory=dict)
    removed: dict[str, str] = field(default_factory=dict)
    changed: dict[str, tuple[str, str]] = field(default_factory=dict)

    @property
    def added_count(self) -> int:
        """Count of variables added in env2."""
        return len(self.added)

    @property
    def removed_count(self) -> int:
        """Count of variables removed from env1."""
        return len(self.removed)

    @property
    def changed_count(self) -> int:
        """Count of variables with different values."""
        return len(self.changed)

    @property
    def has_drift(self) -> bool:
        """Check if there are any differences."""
        return self.added_count + self.removed_count + self.changed_count > 0

    def to_dict(self, redact: bool = True) -> dict:
        """Convert to a dictionary for JSON output.

        Args:
            redact: Replace values of sensitive keys with the placeholder.

        Returns:
            Dictionary representation
        """
        differences = []
        for key in sorted(self.removed):
            differences.append(
                {
                    "name": key,
                    "type": DiffType.REMOVED.value,
                    "value_env1": redact_value(key, self.removed[key], redact),
                    "value_env2": None,
                }
            )
        for key in sorted(self.added):
            differences.append(
                {
                    "name": key,
                    "type": DiffType.ADDED.value,
                    "value_env1": None,
                    "value_env2": redact_value(key, self.added[key], redact),
                }
            )
        for key in sorted(self.changed):
            old, new = self.changed[key]
            differences.append(
                {
                    "name": key,
                    "type": DiffType.CHANGED.value,
                    "value_env1": redact_value(key, old, redact),
                    "value_env2": redact_value(key, new, redact),
                }
            )

        return {
            "summary": {
                "added": self.added_count,
                "removed": self.removed_count,
                "changed": self.changed_count,
                "has_drift": self.has_drift,
            },
            "differences": differences,
        }


def diff(env1: Mapping[str, str], env2: Mapping[str, str]) -> DiffResult:
    """Compare two snapshots.

    Args:
        env1: First snapshot (typically the older or reference one)
        env2: Second snapshot

    Returns:
        DiffResult with added, removed and changed variables
    """
    result = DiffResult()

    for key, value1 in env1.items():
        if key not in env2:
            result.removed[key] = value1
        elif env2[key] != value1:
            result.changed[key] = (value1, env2[key])

    for key, value2 in env2.items():
        if key not in env1:
            result.added[key] = value2

    return result


def format_diff(result: DiffResult | None, redact: bool = True) -> str:
    """Render a diff as ``-``/``+``/``~`` prefixed lines.

    Removed keys come first, then added, then changed; each group is
    sorted by key.

    Args:
        result: The diff to render.
        redact: Replace values of sensitive keys with the placeholder.

    Returns:
        The rendered diff, or an empty string when there is nothing to show.
    """
    if result is None:
        return ""

    lines: list[str] = []

    for key in sorted(result.removed):
        lines.append(f"- {key}={redact_value(key, result.removed[key], redact)}")

    for key in sorted(result.added):
        lines.append(f"+ {key}={redact_value(key, result.added[key], redact)}")

    for key in sorted(result.changed):
        old, new = result.changed[key]
        lines.append(
            f"~ {key}={redact_value(key, old, redact)} -> {redact_value(key, new, redact)}"
        )

    return "\n".join(lines)
