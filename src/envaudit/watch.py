"""Watch mode - re-run the audit whenever the .env file changes."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from rich.console import Console

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0


class FileWatcher:
    """Poll a file's modification time and report changes.

    Example:
        watcher = FileWatcher(Path(".env"))
        for _ in watcher.changes():
            run_audit()
    """

    def __init__(
        self,
        path: Path,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the watcher.

        Args:
            path: File to watch.
            interval: Seconds between polls.
            sleep: Sleep function, replaceable in tests.
        """
        self.path = path
        self.interval = interval
        self._sleep = sleep
        self._last_mtime = self._mtime()

    def _mtime(self) -> int | None:
        try:
            return self.path.stat().st_mtime_ns
        except FileNotFoundError:
            return None

    def poll(self) -> bool:
        """Check once whether the file changed since the last poll."""
        current = self._mtime()
        if current == self._last_mtime:
            return False
        self._last_mtime = current
        return current is not None

    def changes(self, max_polls: int | None = None) -> Iterator[None]:
        """Yield once per detected change.

        Args:
            max_polls: Stop after this many polls (None polls forever).
        """
        polls = 0
        while max_polls is None or polls < max_polls:
            self._sleep(self.interval)
            polls += 1
            if self.poll():
                logger.debug("Change detected in %s", self.path)
                yield


def run_watch(
    path: Path,
    audit: Callable[[], int],
    console: Console,
    interval: float = DEFAULT_INTERVAL,
    max_polls: int | None = None,
) -> int:
    """Run the audit now and after every change until interrupted.

    Args:
        path: File to watch.
        audit: Callback running one audit and returning its exit code.
        console: Console for status messages.
        interval: Seconds between polls.
        max_polls: Stop after this many polls (None runs until Ctrl+C).

    Returns:
        Exit code 0 once watching stops.
    """
    watcher = FileWatcher(path, interval=interval)
    console.print(f"Watching {path} for changes... (Ctrl+C to stop)", markup=False)

    try:
        audit()
        for _ in watcher.changes(max_polls=max_polls):
            console.print("\n--- File changed ---")
            audit()
    except KeyboardInterrupt:
        console.print("\nStopping watch mode...")

    return 0
