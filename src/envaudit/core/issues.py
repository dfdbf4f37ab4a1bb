"""Issue taxonomy and scan result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Severity class of an issue."""

    INFO = "info"  # Reported, never a risk
    WARNING = "warning"  # A risk only in strict mode
    ERROR = "error"  # Always a risk


class IssueKind(Enum):
    """Category of an audit finding."""

    EMPTY = "empty"
    MISSING = "missing"
    SENSITIVE = "sensitive"
    DUPLICATE = "duplicate"
    LEAK = "leak"
    EXTRA = "extra"

    @property
    def severity(self) -> Severity:
        """Severity class of this kind."""
        return _SEVERITIES[self]

    @property
    def is_warning(self) -> bool:
        """Check if this kind only escalates to a risk in strict mode."""
        return self.severity is Severity.WARNING


_SEVERITIES: dict[IssueKind, Severity] = {
    IssueKind.EMPTY: Severity.WARNING,
    IssueKind.MISSING: Severity.ERROR,
    IssueKind.SENSITIVE: Severity.INFO,
    IssueKind.DUPLICATE: Severity.WARNING,
    IssueKind.LEAK: Severity.ERROR,
    IssueKind.EXTRA: Severity.WARNING,
}


@dataclass(frozen=True)
class Issue:
    """A single audit finding.

    The message is fixed text and never contains the scanned value.
    """

    kind: IssueKind
    key: str
    message: str

    @property
    def severity(self) -> Severity:
        """Severity class of this issue."""
        return self.kind.severity


@dataclass
class ScanOptions:
    """Options for a single scan.

    Attributes:
        required: Keys that must be present.
        ignore: Keys excluded from every check.
        duplicates: Keys defined more than once (from the parser).
        missing: Keys present in the example file but not in the target.
        extra: Keys present in the target but not in the example file.
        check_leaks: Analyze values for leaked credentials.
        strict: Treat warnings as risks.
    """

    required: list[str] = field(default_factory=list)
    ignore: list[str] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)
    check_leaks: bool = False
    strict: bool = False


@dataclass
class Result:
    """Aggregated audit findings."""

    issues: list[Issue] = field(default_factory=list)
    has_risks: bool = False
    summary: dict[IssueKind, int] = field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        """Total number of issues."""
        return len(self.issues)

    def by_kind(self, kind: IssueKind) -> list[Issue]:
        """Get all issues of a kind, in report order."""
        return [issue for issue in self.issues if issue.kind is kind]
