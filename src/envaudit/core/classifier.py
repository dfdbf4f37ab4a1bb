"""Sensitive key classification.

A key is considered sensitive when its name suggests it holds a secret.
The classifier only looks at key names, never at values.
"""

from __future__ import annotations

# Matched anywhere in the key (case-insensitive)
SENSITIVE_PATTERNS: tuple[str, ...] = (
    "SECRET",
    "PASSWORD",
    "TOKEN",
    "API_KEY",
    "APIKEY",
    "CREDENTIAL",
    "PRIVATE",
    "AUTH",
)

# Matched only at the end of the key (STRIPE_KEY, not KEYRING)
SENSITIVE_SUFFIXES: tuple[str, ...] = ("KEY",)

REDACTED = "[REDACTED]"


def is_sensitive_key(key: str) -> bool:
    """Check whether a key name looks like it holds a secret.

    Args:
        key: The configuration key name.

    Returns:
        True if the key contains a sensitive pattern or ends with ``KEY``.
    """
    if not key:
        return False

    upper = key.upper()
    if any(pattern in upper for pattern in SENSITIVE_PATTERNS):
        return True
    return upper.endswith(SENSITIVE_SUFFIXES)


def redact_value(key: str, value: str, redact: bool = True) -> str:
    """Return the redaction placeholder for sensitive keys.

    Args:
        key: The configuration key name.
        value: The value to display.
        redact: Whether redaction is enabled.

    Returns:
        ``REDACTED`` if redaction is enabled and the key is sensitive,
        otherwise the value unchanged.
    """
    if redact and is_sensitive_key(key):
        return REDACTED
    return value
