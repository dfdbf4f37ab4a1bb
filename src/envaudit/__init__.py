"""Audit .env files and environments for configuration risks.

env-audit helps you:
- Find empty, missing and duplicated variables
- Detect drift against an .env.example file
- Spot sensitive keys and values that look like leaked credentials
- Compare two env files with sensitive values redacted
"""

__version__ = "0.2.0"

from envaudit.api import audit, diff, init

__all__ = ["__version__", "audit", "diff", "init"]
