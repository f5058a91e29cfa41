"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of plate loads and weight lists.
"""

from rich.console import Console
from rich.table import Table

from ..core.models import Bar, PlateLoad
from ..core.selection import group_plates

console = Console()


def fmt_weight(weight: float) -> str:
    """Format a weight without trailing zeros (20.0 → "20", 1.25 → "1.25")."""
    return f"{weight:g}"


def print_plate_load(load: PlateLoad) -> None:
    """
    Print the plates for one side of the bar and the resulting total.

    Args:
        load: Plate selection summary
    """
    console.print()
    console.print(
        f"Target [bold]{fmt_weight(load.target)}[/bold] on a "
        f"[cyan]{fmt_weight(load.handle)}[/cyan] bar"
    )

    if not load.per_side:
        print_info("No plates needed." if load.shortfall <= 0 else "No plate fits.")
    else:
        table = Table(title="Per side", show_header=True, header_style="dim")
        table.add_column("Plate", justify="right", style="bold")
        table.add_column("Count", justify="right")
        for weight, count in group_plates(load.per_side):
            table.add_row(fmt_weight(weight), f"× {count}")
        console.print(table)

    console.print(f"Total on bar: [bold]{fmt_weight(load.achieved)}[/bold]")
    if not load.is_exact:
        print_warning(f"Off target by {fmt_weight(round(load.shortfall, 4))}")
    console.print()


def print_weight_list(title: str, weights: list[float], per_row: int = 10) -> None:
    """
    Print a list of weights as a compact grid.

    Args:
        title: Table title
        weights: Weights to show, ascending
        per_row: Number of weights per row
    """
    console.print()
    table = Table(title=f"{title} ({len(weights)})", show_header=False)
    for _ in range(min(per_row, max(len(weights), 1))):
        table.add_column(justify="right")
    for start in range(0, len(weights), per_row):
        row = [fmt_weight(w) for w in weights[start:start + per_row]]
        row += [""] * (len(table.columns) - len(row))
        table.add_row(*row)
    console.print(table)
    console.print()


def print_bar(bar: Bar) -> None:
    """Print a chosen bar."""
    console.print(
        f"Use [bold]{bar.name}[/bold] ({bar.bar_type}, {fmt_weight(bar.weight)})"
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
