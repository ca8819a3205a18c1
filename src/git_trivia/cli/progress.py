"""Progress display for the ownership pass."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class OwnershipProgress:
    """Progress bar fed by ``calculate(on_progress=...)``.

    Usage:
        with OwnershipProgress(console) as progress:
            stats = calculate(backend, registry, head, on_progress=progress.update)
    """

    def __init__(self, console: Console | None = None, enabled: bool = True):
        self.console = console or Console(stderr=True)
        self.enabled = enabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def start(self) -> None:
        if not self.enabled:
            return
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Blaming files", total=None)

    def update(self, processed: int, total: int) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(self._task_id, completed=processed, total=total)

    def stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None

    def __enter__(self) -> OwnershipProgress:
        self.start()
        return self

    def __exit__(self, *_exc) -> None:
        self.stop()
