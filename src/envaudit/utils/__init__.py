"""Utility modules for env-audit."""

from envaudit.utils.logging import setup_logging

__all__ = ["setup_logging"]
