"""High-level API functions for env-audit."""

from __future__ import annotations

from pathlib import Path

from envaudit.core.compare import compare
from envaudit.core.diff import DiffResult
from envaudit.core.diff import diff as diff_snapshots
from envaudit.core.issues import Result, ScanOptions
from envaudit.core.parser import EnvParser, read_os_env
from envaudit.core.scanner import scan
from envaudit.core.template import generate_template


def audit(
    env_file: Path | str | None = None,
    required: list[str] | None = None,
    example: Path | str | None = None,
    ignore: list[str] | None = None,
    check_leaks: bool = False,
    strict: bool = False,
) -> Result:
    """Audit an .env file, or the process environment, for risks.

    Args:
        env_file: Path to the .env file. Reads the process environment if None.
        required: Variables that must be present
        example: Optional example file to check for missing and extra keys
        ignore: Keys excluded from every check
        check_leaks: Whether to analyze values for leaked credentials
        strict: Whether warnings count as risks

    Returns:
        Result with issues, per-kind summary and the risk verdict

    Raises:
        EnvFileError: If the env file or example file cannot be read
    """
    parser = EnvParser()

    if env_file is not None:
        parsed = parser.parse(env_file)
        env = parsed.entries
        duplicates = parsed.duplicates
    else:
        env = read_os_env()
        duplicates = []

    missing: list[str] = []
    extra: list[str] = []
    if example is not None:
        drift = compare(env, parser.parse(example).entries)
        missing = drift.missing
        extra = drift.extra

    return scan(
        env,
        ScanOptions(
            required=list(required or []),
            ignore=list(ignore or []),
            duplicates=duplicates,
            missing=missing,
            extra=extra,
            check_leaks=check_leaks,
            strict=strict,
        ),
    )


def diff(env1: Path | str, env2: Path | str) -> DiffResult:
    """Compare two .env files and return differences.

    Raises:
        EnvFileError: If either env file cannot be read
    """
    parser = EnvParser()
    return diff_snapshots(parser.parse(env1).entries, parser.parse(env2).entries)


def init(env_file: Path | str | None = None) -> str:
    """Build .env.example content from an .env file or the process environment."""
    if env_file is not None:
        env = EnvParser().parse(env_file).entries
    else:
        env = read_os_env()
    return generate_template(env)
