"""Exceptions raised by the env-audit I/O layer.

The detection core never raises; these cover reading files and
configuration before a scan starts.
"""

from __future__ import annotations


class EnvAuditError(Exception):
    """Base exception for env-audit errors."""

    pass


class EnvFileError(EnvAuditError):
    """An .env file could not be read."""

    pass


class ConfigError(EnvAuditError):
    """The configuration file could not be loaded or is invalid."""

    pass
