"""Leaked credential detection.

Values are checked against known credential formats first. Values that
match no format are then checked for high Shannon entropy, which is
characteristic of randomly generated secrets. Typical entropy ranges:

- < 3.0: Low entropy (common words, patterns)
- 3.0-4.0: Medium entropy
- 4.0-5.0: High entropy (possible secrets)
- > 5.0: Very high entropy (likely secrets)

Entropy detection is a heuristic. Long random identifiers such as
base64-encoded IDs or digests can be reported even though they are not
secrets.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from envaudit.core.issues import Issue, IssueKind

DEFAULT_ENTROPY_THRESHOLD = 4.5
DEFAULT_MIN_LENGTH = 20

HIGH_ENTROPY_MESSAGE = "high entropy value (possible secret)"


@dataclass(frozen=True)
class LeakPattern:
    """A known credential format.

    Attributes:
        name: Display name used in issue messages (e.g., "GitHub Token").
        pattern: Compiled regex that must match the whole value.
    """

    name: str
    pattern: re.Pattern[str]

    def matches(self, value: str) -> bool:
        """Check if the whole value matches this format."""
        return self.pattern.fullmatch(value) is not None


# Checked in order, first match wins
KNOWN_PATTERNS: list[LeakPattern] = [
    LeakPattern("GitHub Token", re.compile(r"ghp_[a-zA-Z0-9]{36}")),
    LeakPattern("Stripe Live Key", re.compile(r"sk_live_[a-zA-Z0-9]+")),
    LeakPattern("Stripe Test Key", re.compile(r"sk_test_[a-zA-Z0-9]+")),
    LeakPattern("AWS Access Key", re.compile(r"AKIA[0-9A-Z]{16}")),
    LeakPattern(
        "JWT",
        re.compile(r"eyJ[a-zA-Z0-9_-]+\.eyJ[a-zA-Z0-9_-]+\.[a-zA-Z0-9_-]+"),
    ),
]


def matches_leak_pattern(
    value: str, patterns: Sequence[LeakPattern] = KNOWN_PATTERNS
) -> tuple[bool, str]:
    """Check a value against known credential formats.

    Args:
        value: The value to check.
        patterns: Formats to try, in order.

    Returns:
        ``(True, name)`` for the first matching format, ``(False, "")`` otherwise.
    """
    for leak_pattern in patterns:
        if leak_pattern.matches(value):
            return True, leak_pattern.name
    return False, ""


def calculate_entropy(text: str) -> float:
    """Calculate Shannon entropy of a string.

    Args:
        text: The string to analyze.

    Returns:
        Shannon entropy value (bits per character), 0.0 for an empty string.
    """
    if not text:
        return 0.0

    length = len(text)
    entropy = 0.0
    for count in Counter(text).values():
        prob = count / length
        entropy -= prob * math.log2(prob)

    return entropy


def is_high_entropy(
    value: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    threshold: float = DEFAULT_ENTROPY_THRESHOLD,
) -> bool:
    """Check if a value looks like a random secret.

    Short values are never flagged; entropy estimates from few characters
    carry little signal.

    Args:
        value: The value to check.
        min_length: Values must be longer than this.
        threshold: Entropy (bits per character) must exceed this.
    """
    if len(value) <= min_length:
        return False
    return calculate_entropy(value) > threshold


def check_leaks(
    env: Mapping[str, str],
    ignore: Iterable[str] | None = None,
    patterns: Sequence[LeakPattern] = KNOWN_PATTERNS,
    min_length: int = DEFAULT_MIN_LENGTH,
    threshold: float = DEFAULT_ENTROPY_THRESHOLD,
) -> list[Issue]:
    """Find values that look like leaked credentials.

    Messages are built from constant text and pattern names only, so the
    scanned value can never end up in an issue.

    Args:
        env: Configuration snapshot.
        ignore: Keys to skip.
        patterns: Known credential formats.
        min_length: Minimum length for entropy detection.
        threshold: Entropy threshold for entropy detection.

    Returns:
        At most one LEAK issue per key, sorted by key.
    """
    skip = set(ignore or ())
    issues: list[Issue] = []

    for key in sorted(env):
        if key in skip:
            continue
        value = env[key]

        matched, name = matches_leak_pattern(value, patterns)
        if matched:
            issues.append(Issue(IssueKind.LEAK, key, f"value matches {name} pattern"))
        elif is_high_entropy(value, min_length=min_length, threshold=threshold):
            issues.append(Issue(IssueKind.LEAK, key, HIGH_ENTROPY_MESSAGE))

    return issues
