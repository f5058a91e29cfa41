"""Bar commands: bar."""

import json
from typing import Annotated, Optional

import typer

from ...core.selection import choose_bar
from ...io.serializers import bar_to_dict
from .. import views
from ..app import JsonOption, app, get_config, require_finite


@app.command()
def bar(
    target: Annotated[float, typer.Argument(help="Total weight to lift")],
    bar_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Only consider bars of this type (barbell, dumbbell)"),
    ] = None,
    weight: Annotated[
        Optional[float],
        typer.Option("--weight", "-w", help="Prefer the bar with exactly this weight"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Choose which configured bar to use for a target weight.
    """
    require_finite(target, "target")
    chosen = choose_bar(get_config().bars, target, bar_type=bar_type, weight=weight)

    if json_out:
        print(json.dumps(bar_to_dict(chosen) if chosen is not None else None))
        return

    if chosen is None:
        views.print_error(f"No bar fits a target of {views.fmt_weight(target)}")
        raise typer.Exit(1)

    views.print_bar(chosen)
