"""Scan orchestration - runs every check and decides the risk verdict.

The scan is responsible for:
- Running the empty, missing and sensitive checks
- Converting parser and example-comparison results into issues
- Running leak detection when enabled
- Building the per-kind summary and applying the escalation policy
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping

from envaudit.core.checks import check_empty, check_missing, check_sensitive
from envaudit.core.issues import Issue, IssueKind, Result, ScanOptions
from envaudit.core.leaks import check_leaks

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "duplicate key definition"
MISSING_FROM_EXAMPLE_MESSAGE = "variable from example file is missing"
EXTRA_MESSAGE = "variable not defined in example file"


def _issues_for(
    kind: IssueKind, keys: Iterable[str], message: str, ignore: set[str]
) -> list[Issue]:
    """Convert a list of key names into issues, one per distinct key."""
    return [
        Issue(kind, key, message)
        for key in sorted(set(keys))
        if key not in ignore
    ]


def has_risk_issues(issues: Iterable[Issue], strict: bool = False) -> bool:
    """Decide whether the issues should fail the audit.

    Sensitive-key findings are informational and never count. Errors
    (missing, leak) always count. Warnings (empty, duplicate, extra) only
    count in strict mode.

    Args:
        issues: Findings to evaluate.
        strict: Treat warnings as errors.

    Returns:
        True if any issue is a risk.
    """
    for issue in issues:
        if issue.kind is IssueKind.SENSITIVE:
            continue
        if not issue.kind.is_warning:
            return True
        if strict:
            return True
    return False


def scan(env: Mapping[str, str], options: ScanOptions | None = None) -> Result:
    """Run all checks and aggregate the findings.

    Issues are grouped in a fixed order: empty, missing (required),
    sensitive, duplicate, missing (from example), extra, leak.

    Args:
        env: Configuration snapshot.
        options: Scan options. Defaults to no required keys, no ignores,
            leak detection off, non-strict.

    Returns:
        Result with issues, summary and the risk verdict.
    """
    options = options or ScanOptions()
    ignore = set(options.ignore)

    issues: list[Issue] = []
    issues.extend(check_empty(env, ignore))
    issues.extend(check_missing(env, options.required, ignore))
    issues.extend(check_sensitive(env, ignore))
    issues.extend(
        _issues_for(IssueKind.DUPLICATE, options.duplicates, DUPLICATE_MESSAGE, ignore)
    )
    issues.extend(
        _issues_for(IssueKind.MISSING, options.missing, MISSING_FROM_EXAMPLE_MESSAGE, ignore)
    )
    issues.extend(_issues_for(IssueKind.EXTRA, options.extra, EXTRA_MESSAGE, ignore))

    if options.check_leaks:
        issues.extend(check_leaks(env, ignore))

    summary = dict(Counter(issue.kind for issue in issues))
    has_risks = has_risk_issues(issues, options.strict)

    logger.debug(
        "Scanned %d variables: %d issues, has_risks=%s (strict=%s)",
        len(env),
        len(issues),
        has_risks,
        options.strict,
    )

    return Result(issues=issues, has_risks=has_risks, summary=summary)
