from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel


def _stderr_console() -> Console:
    return Console(stderr=True)


@dataclass(slots=True)
class RichLogger:
    """Rich console logging on stderr with an optional persistent log file."""

    log_file: Optional[Path] = None
    console: Console = field(default_factory=_stderr_console)
    quiet: bool = False

    def log_text(self, message: str) -> None:
        if not self.quiet:
            self.console.print(message)
        self._write_line(message)

    def log_panel(self, message: str, title: str, style: str) -> None:
        if not self.quiet:
            panel = Panel(message, border_style=style, title=title)
            self.console.print(panel)
        self._write_line(f"{title}: {message}")

    def log_exception(self, error: Exception) -> None:
        # Errors are shown even in quiet mode.
        self.console.print(Panel(str(error), border_style="red", title="ERROR"))
        self._write_line(f"ERROR: {error}")
        tb = traceback.format_exc()
        self._write_line(tb)

    def _write_line(self, message: str) -> None:
        if self.log_file is None:
            return
        timestamp = datetime.now().isoformat(timespec="seconds")
        with self.log_file.open("a", encoding="utf-8") as handle:
            handle.write(f"{timestamp} - {message}\n")
