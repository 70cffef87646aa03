"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The banner and the summary table are shared by both commands.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.variant import Variant


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Skipped when `MENAGERIE_SHOW_BANNER=false` (scripts, pipelines).
    """

    title = Text("MENAGERIE", style="bold cyan")
    subtitle = Text("Животные и фигуры • JSON / XML", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_entities_table(entities: Sequence[Variant], *, title: str) -> Table:
    """Table of reloaded entities in load order."""

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    for index, entity in enumerate(entities, start=1):
        table.add_row(str(index), entity.tag, entity.name)
    return table
