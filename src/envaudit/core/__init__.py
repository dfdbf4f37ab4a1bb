"""Detection core: checks, leak detection, scan orchestration and diffing.

Everything in this package is a pure function over in-memory snapshots.
"""

from envaudit.core.checks import check_empty, check_missing, check_sensitive
from envaudit.core.classifier import REDACTED, is_sensitive_key, redact_value
from envaudit.core.compare import CompareResult, compare
from envaudit.core.diff import DiffResult, DiffType, diff, format_diff
from envaudit.core.issues import Issue, IssueKind, Result, ScanOptions, Severity
from envaudit.core.leaks import (
    KNOWN_PATTERNS,
    LeakPattern,
    calculate_entropy,
    check_leaks,
    is_high_entropy,
    matches_leak_pattern,
)
from envaudit.core.parser import EnvParser, ParseResult, format_env, read_os_env
from envaudit.core.scanner import has_risk_issues, scan
from envaudit.core.template import generate_template

__all__ = [
    "KNOWN_PATTERNS",
    "REDACTED",
    "CompareResult",
    "DiffResult",
    "DiffType",
    "EnvParser",
    "Issue",
    "IssueKind",
    "LeakPattern",
    "ParseResult",
    "Result",
    "ScanOptions",
    "Severity",
    "calculate_entropy",
    "check_empty",
    "check_leaks",
    "check_missing",
    "check_sensitive",
    "compare",
    "diff",
    "format_diff",
    "format_env",
    "generate_template",
    "has_risk_issues",
    "is_high_entropy",
    "is_sensitive_key",
    "matches_leak_pattern",
    "read_os_env",
    "redact_value",
    "scan",
]
