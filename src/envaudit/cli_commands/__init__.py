"""Command implementations registered on the env-audit CLI."""
