"""Comparison of a target snapshot against an example file."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass
class CompareResult:
    """Keys that drift between a target snapshot and its example."""

    missing: list[str] = field(default_factory=list)  # In example but not target
    extra: list[str] = field(default_factory=list)  # In target but not example

    @property
    def has_drift(self) -> bool:
        """Check if the target deviates from the example."""
        return bool(self.missing or self.extra)


def compare(target: Mapping[str, str], example: Mapping[str, str]) -> CompareResult:
    """Compare target keys against example keys.

    Only key names are compared; values are ignored.

    Returns:
        CompareResult with sorted missing and extra key lists
    """
    return CompareResult(
        missing=sorted(set(example) - set(target)),
        extra=sorted(set(target) - set(example)),
    )
