"""CLI display implementation using Rich library."""

import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)


class CLIDisplay:
    """Diagnostics on stderr; stdout stays reserved for link lines."""

    class ProgressContext:
        """Context manager for progress bars."""

        def __init__(self, display: "CLIDisplay", total: int, description: str = ""):
            self.display = display
            self.total = total
            self.description = description
            self.handle: Any | None = None

        def __enter__(self) -> "CLIDisplay.ProgressContext":
            self.handle = self.display.progress_start(self.total, self.description)
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if self.handle is not None:
                self.display.progress_finish(self.handle)
            return False

        def update(self, advance: int = 1) -> None:
            if self.handle is not None:
                self.display.progress_update(self.handle, advance=advance)

    def __init__(self, file=None):
        self.stderr_console = Console(file=file or sys.stderr)
        self._progress_contexts: dict[int, tuple[Progress, Any]] = {}

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def progress_start(self, total: int, description: str = "") -> int:
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeRemainingColumn(),
            console=self.stderr_console,
            transient=True,
        )
        progress.start()
        task_id = progress.add_task(description, total=total)

        handle = id(progress)
        self._progress_contexts[handle] = (progress, task_id)
        return handle

    def progress_update(self, handle: int, advance: int = 1) -> None:
        if handle not in self._progress_contexts:
            return
        progress, task_id = self._progress_contexts[handle]
        progress.update(task_id, advance=advance)

    def progress_finish(self, handle: int) -> None:
        if handle not in self._progress_contexts:
            return
        progress, _ = self._progress_contexts.pop(handle)
        progress.stop()

    def progress(self, total: int, description: str = "") -> "CLIDisplay.ProgressContext":
        """Context manager for progress bars."""
        return CLIDisplay.ProgressContext(self, total, description)
