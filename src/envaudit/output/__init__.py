"""Output formatting for env-audit reports."""

from envaudit.output.formatters import (
    format_github,
    format_json,
    format_text,
    print_result,
    render_text,
)
from envaudit.output.rich import (
    console,
    make_console,
    print_error,
    print_success,
    print_warning,
    should_use_color,
)

__all__ = [
    "console",
    "format_github",
    "format_json",
    "format_text",
    "make_console",
    "print_error",
    "print_result",
    "print_success",
    "print_warning",
    "render_text",
    "should_use_color",
]
