"""Example file generation from a snapshot."""

from __future__ import annotations

from collections.abc import Mapping

from envaudit.core.classifier import is_sensitive_key


def placeholder_for(key: str) -> str:
    """Placeholder value written for a non-sensitive key."""
    return f"your_{key.lower()}_here"


def generate_template(env: Mapping[str, str]) -> str:
    """Create .env.example content from a snapshot.

    Sensitive keys get empty values so no secret shape leaks into the
    example; other keys get a placeholder derived from the key name.

    Args:
        env: Snapshot to build the example from.

    Returns:
        KEY=VALUE lines sorted by key, or an empty string for an empty snapshot.
    """
    lines = []
    for key in sorted(env):
        if is_sensitive_key(key):
            lines.append(f"{key}=")
        else:
            lines.append(f"{key}={placeholder_for(key)}")
    return "\n".join(lines)
