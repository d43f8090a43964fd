"""Demo entry point - plays the four-army scenario and prints visibility."""

from __future__ import annotations
from datetime import datetime, timedelta, timezone

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from warbuffs.config import load_settings, setup_logging
from warbuffs.report import visibility_table
from warbuffs.scenarios import build_four_army_battlefield


console = Console()


def main() -> None:
    settings = load_settings()
    setup_logging(settings)

    start = datetime.now(timezone.utc)
    battlefield = build_four_army_battlefield(start)

    console.print(visibility_table(battlefield, title="Before combat"))

    battlefield.raise_event("battle")
    console.print(visibility_table(battlefield, title="After 'battle'"))

    battlefield.advance_to(start + timedelta(seconds=150))
    console.print(visibility_table(battlefield, title="After 150 seconds"))

    console.print(Panel(
        Text(battlefield.log.summary(settings.log_history)),
        title="Consumed",
        border_style="yellow",
    ))


if __name__ == "__main__":
    main()
