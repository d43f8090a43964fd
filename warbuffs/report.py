"""Rich rendering of who can see which tokens."""

from __future__ import annotations
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from warbuffs.systems.battlefield import Battlefield


def visibility_table(battlefield: "Battlefield", title: str = "Token Visibility") -> Table:
    """Build a table with one row per owner and one column per viewer."""
    armies = battlefield.list_armies()
    matrix = battlefield.visibility_matrix()

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Owner", style="cyan")
    for viewer in armies:
        table.add_column(f"seen by {viewer.id}")

    for owner in armies:
        row = [f"{owner.name} ({owner.id})"]
        for viewer in armies:
            ids = matrix[owner.id][viewer.id]
            row.append(", ".join(str(i) for i in ids) if ids else "[dim]-[/dim]")
        table.add_row(*row)

    return table
