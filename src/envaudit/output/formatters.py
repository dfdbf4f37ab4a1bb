"""Report formatters for scan results.

Formatters only read ``Issue.key`` and ``Issue.message``; values never
reach the output. Sensitive keys are shown with the redaction placeholder.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.text import Text

from envaudit.core.classifier import REDACTED
from envaudit.core.issues import Issue, IssueKind, Result, Severity

TITLE = "env-audit scan results"

# Display order and headings of issue groups
GROUP_ORDER: tuple[IssueKind, ...] = (
    IssueKind.EMPTY,
    IssueKind.MISSING,
    IssueKind.SENSITIVE,
    IssueKind.DUPLICATE,
    IssueKind.EXTRA,
    IssueKind.LEAK,
)

GROUP_TITLES: dict[IssueKind, str] = {
    IssueKind.EMPTY: "Empty Values",
    IssueKind.MISSING: "Missing Required",
    IssueKind.SENSITIVE: "Sensitive Keys Detected",
    IssueKind.DUPLICATE: "Duplicate Keys",
    IssueKind.EXTRA: "Extra Variables",
    IssueKind.LEAK: "Potential Leaks",
}

# GitHub annotations use error level for these kinds
GITHUB_ERROR_KINDS = frozenset({IssueKind.MISSING, IssueKind.LEAK, IssueKind.DUPLICATE})


def _issue_line(issue: Issue) -> str:
    if issue.kind is IssueKind.SENSITIVE:
        return f"  - {issue.key}: {REDACTED}"
    if issue.kind is IssueKind.LEAK:
        return f"  - {issue.key}: {issue.message}"
    return f"  - {issue.key}"


def _groups(result: Result) -> list[tuple[IssueKind, list[Issue]]]:
    return [(kind, result.by_kind(kind)) for kind in GROUP_ORDER if result.by_kind(kind)]


def format_text(result: Result | None) -> str:
    """Format a result as plain text grouped by issue kind."""
    header = f"{TITLE}\n{'=' * len(TITLE)}\n"
    if result is None or not result.issues:
        return f"{header}\nNo issues found.\n"

    lines = [header]
    for kind, issues in _groups(result):
        lines.append(f"\n{GROUP_TITLES[kind]} ({len(issues)}):\n")
        lines.extend(f"{_issue_line(issue)}\n" for issue in issues)

    lines.append(f"\nSummary: {len(result.issues)} issues found\n")
    return "".join(lines)


def render_text(result: Result | None) -> Text:
    """Build a styled Rich text of the report.

    Error-class groups are red, the others yellow, a clean run green.
    """
    text = Text()
    text.append(f"{TITLE}\n{'=' * len(TITLE)}\n", style="bold")

    if result is None or not result.issues:
        text.append("\nNo issues found.", style="green")
        return text

    for kind, issues in _groups(result):
        style = "red" if kind.severity is Severity.ERROR else "yellow"
        text.append(f"\n{GROUP_TITLES[kind]} ({len(issues)}):\n", style=f"bold {style}")
        for issue in issues:
            text.append(f"{_issue_line(issue)}\n", style=style)

    text.append(f"\nSummary: {len(result.issues)} issues found")
    return text


def print_result(result: Result | None, console: Console) -> None:
    """Print the styled report to a console."""
    console.print(render_text(result))


def format_json(result: Result | None) -> str:
    """Format a result as compact JSON.

    Shape: ``{"hasRisks": bool, "issues": [{type, key, message}],
    "summary": {type: count}}``.
    """
    output: dict = {"hasRisks": False, "issues": [], "summary": {}}

    if result is not None:
        output["hasRisks"] = result.has_risks
        output["issues"] = [
            {"type": issue.kind.value, "key": issue.key, "message": issue.message}
            for issue in result.issues
        ]
        output["summary"] = {kind.value: count for kind, count in result.summary.items()}

    return json.dumps(output, separators=(",", ":"))


def format_github(result: Result | None) -> str:
    """Format a result as GitHub Actions workflow commands."""
    if result is None or not result.issues:
        return ""

    lines = []
    for issue in result.issues:
        level = "error" if issue.kind in GITHUB_ERROR_KINDS else "warning"
        lines.append(f"::{level}::{issue.key}: {issue.message}")
    return "\n".join(lines)
