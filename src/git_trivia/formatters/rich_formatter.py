"""Rich terminal formatter for ownership reports."""

import io
from typing import Iterable, Optional

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from ..ownership import OwnershipShare, OwnershipStatistics
from .base import UNAFFILIATED_LABEL, BaseFormatter


def _ranking_table(title: str, label: str, rows: Iterable[tuple[str, OwnershipShare]]) -> Table:
    table = Table(title=title, title_justify="left", title_style="bright_cyan")
    table.add_column("#", style="bold", justify="right")
    table.add_column(label, style="bold")
    table.add_column("Lines owned", justify="right")
    table.add_column("Percent of total", justify="right", style="green")

    for place, (name, share) in enumerate(rows, start=1):
        table.add_row(
            str(place),
            name,
            str(share.total_lines_owned),
            f"{share.percent_owned:6.2f}%",
        )
    return table


class RichFormatter(BaseFormatter):
    """Header, total line count, then people and team rankings as tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, statistics: OwnershipStatistics) -> None:
        self.console.print(Rule("Ownership details", style="cyan"))
        self.console.print(f"[bold]Total lines:[/bold] {statistics.total_lines()}")
        self.console.print()
        self.console.print(
            _ranking_table(
                "People",
                "Person",
                ((person.name, share) for person, share in statistics.people_toplist()),
            )
        )
        self.console.print()
        self.console.print(
            _ranking_table(
                "Teams",
                "Team",
                (
                    (team if team is not None else UNAFFILIATED_LABEL, share)
                    for team, share in statistics.teams_toplist()
                ),
            )
        )

    def format(self, statistics: OwnershipStatistics) -> str:
        console = Console(record=True, width=100, file=io.StringIO())
        RichFormatter(console).render(statistics)
        return console.export_text()

