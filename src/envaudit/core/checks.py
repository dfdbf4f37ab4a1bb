"""Individual audit checks over a configuration snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from envaudit.core.classifier import is_sensitive_key
from envaudit.core.issues import Issue, IssueKind

EMPTY_MESSAGE = "variable has empty value"
MISSING_MESSAGE = "required variable is missing"
SENSITIVE_MESSAGE = "key name looks sensitive"


def check_empty(env: Mapping[str, str], ignore: Iterable[str] | None = None) -> list[Issue]:
    """Find variables with empty values.

    Args:
        env: Configuration snapshot.
        ignore: Keys to skip.

    Returns:
        One EMPTY issue per non-ignored key whose value is empty, sorted by key.
    """
    skip = set(ignore or ())
    return [
        Issue(IssueKind.EMPTY, key, EMPTY_MESSAGE)
        for key in sorted(env)
        if key not in skip and env[key] == ""
    ]


def check_missing(
    env: Mapping[str, str],
    required: Iterable[str] | None,
    ignore: Iterable[str] | None = None,
) -> list[Issue]:
    """Find required variables that are not present.

    Args:
        env: Configuration snapshot.
        required: Required key names; repeated names are reported once.
        ignore: Keys to skip.

    Returns:
        One MISSING issue per absent required key, in required-list order.
    """
    skip = set(ignore or ())
    issues: list[Issue] = []
    seen: set[str] = set()

    for key in required or ():
        if key in seen:
            continue
        seen.add(key)
        if key in skip or key in env:
            continue
        issues.append(Issue(IssueKind.MISSING, key, MISSING_MESSAGE))

    return issues


def check_sensitive(env: Mapping[str, str], ignore: Iterable[str] | None = None) -> list[Issue]:
    """Find keys whose names match sensitive patterns."""
    skip = set(ignore or ())
    return [
        Issue(IssueKind.SENSITIVE, key, SENSITIVE_MESSAGE)
        for key in sorted(env)
        if key not in skip and is_sensitive_key(key)
    ]
