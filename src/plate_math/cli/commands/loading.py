"""Loading commands: plates, combos, space, reachable, closest."""

import json
from typing import Annotated, Optional

import typer

from ...core.bar_loading import build_bar_load, determine_bars_weight_space
from ...core.models import Bar, Plate
from ...core.plate_math import determine_plate_combos, determine_weight_space
from ...core.selection import build_plate_load, closest_target, group_plates
from ...io.serializers import ValidationError, parse_plate_string, parse_weight_list
from .. import views
from ..app import HandleOption, JsonOption, app, get_config, require_finite


def _inventory(plates_str: str | None) -> list[Plate]:
    """Plates from --plates, or the configured inventory."""
    if plates_str is None:
        return get_config().plates
    try:
        return parse_plate_string(plates_str)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def _denominations(plates_str: str | None) -> list[float]:
    """Denominations from --plates, or the configured list."""
    if plates_str is None:
        return get_config().denominations
    try:
        return parse_weight_list(plates_str)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def _bar(name: str) -> Bar:
    """Configured bar by name (case-insensitive)."""
    bars = get_config().bars
    for bar in bars:
        if bar.name.lower() == name.lower():
            return bar
    views.print_error(f"Unknown bar '{name}'. Configured: {', '.join(b.name for b in bars)}")
    raise typer.Exit(1)


def _handle(handle: float | None) -> float:
    if handle is None:
        return get_config().handle
    require_finite(handle, "handle")
    if handle < 0:
        views.print_error(f"Handle weight must be non-negative, got {handle}")
        raise typer.Exit(1)
    return handle


@app.command()
def plates(
    target: Annotated[float, typer.Argument(help="Total weight to load, bar included")],
    handle: HandleOption = None,
    plates_str: Annotated[
        Optional[str],
        typer.Option(
            "--plates", "-P",
            help="Plate inventory as WEIGHTxCOUNT list, e.g. '25x2,10x2,5x4'",
        ),
    ] = None,
    bar_name: Annotated[
        Optional[str],
        typer.Option(
            "--bar", "-B",
            help="Load a configured bar by name, honouring its plate limits and max load",
        ),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show which plates to load on each side for a target weight.
    """
    require_finite(target, "target")
    if bar_name is not None and handle is not None:
        views.print_error("Use either --bar or --handle, not both")
        raise typer.Exit(1)

    inventory = _inventory(plates_str)
    if bar_name is not None:
        chosen = _bar(bar_name)
        if chosen.max_load is not None and target > chosen.max_load:
            views.print_error(
                f"{views.fmt_weight(target)} exceeds the {chosen.name} limit of "
                f"{views.fmt_weight(chosen.max_load)}"
            )
            raise typer.Exit(1)
        load = build_bar_load(target, chosen, inventory)
    else:
        load = build_plate_load(target, _handle(handle), inventory)

    if json_out:
        print(json.dumps({
            "target": load.target,
            "handle": load.handle,
            "per_side": load.per_side,
            "grouped": [{"weight": w, "count": c} for w, c in group_plates(load.per_side)],
            "achieved": load.achieved,
            "shortfall": load.shortfall,
        }, indent=2))
        return

    views.print_plate_load(load)


@app.command()
def combos(
    plates_str: Annotated[
        Optional[str],
        typer.Option("--plates", "-P", help="Plate denominations, e.g. '2.5,5,10'"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    List every plate load (both sides) the denominations can make.
    """
    loads = determine_plate_combos(_denominations(plates_str))

    if json_out:
        print(json.dumps(loads))
        return

    views.print_weight_list("Plate loads", loads)


@app.command()
def space(
    handle: HandleOption = None,
    plates_str: Annotated[
        Optional[str],
        typer.Option("--plates", "-P", help="Plate denominations, e.g. '2.5,5,10'"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    List every total weight reachable on the bar.
    """
    bar_weight = _handle(handle)
    weights = determine_weight_space(bar_weight, _denominations(plates_str))

    if json_out:
        print(json.dumps(weights))
        return

    views.print_weight_list(f"Weights on a {views.fmt_weight(bar_weight)} bar", weights)


@app.command()
def reachable(
    bar_type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", help="Only consider bars of this type (barbell, dumbbell)"),
    ] = None,
    plates_str: Annotated[
        Optional[str],
        typer.Option(
            "--plates", "-P",
            help="Plate inventory as WEIGHTxCOUNT list, e.g. '25x2,10x2,5x4'",
        ),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    List every total reachable on any configured bar with the counted inventory.
    """
    bars = get_config().bars
    if bar_type is not None:
        bars = [b for b in bars if b.bar_type == bar_type]
    weights = determine_bars_weight_space(bars, _inventory(plates_str))

    if json_out:
        print(json.dumps(weights))
        return

    if not bars:
        views.print_warning(f"No bars of type '{bar_type}' configured.")
        return
    views.print_weight_list(f"Weights across {len(bars)} bar(s)", weights)


@app.command()
def closest(
    target: Annotated[float, typer.Argument(help="Requested total weight")],
    handle: HandleOption = None,
    plates_str: Annotated[
        Optional[str],
        typer.Option("--plates", "-P", help="Plate denominations, e.g. '2.5,5,10'"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Snap a requested weight to the nearest reachable one.
    """
    require_finite(target, "target")
    bar_weight = _handle(handle)
    weights = determine_weight_space(bar_weight, _denominations(plates_str))
    nearest = closest_target(target, weights)

    if json_out:
        print(json.dumps({"target": target, "closest": nearest}))
        return

    if nearest is None:
        views.print_error(
            f"{views.fmt_weight(target)} is outside the reachable range "
            f"{views.fmt_weight(weights[0])}–{views.fmt_weight(weights[-1])}"
        )
        raise typer.Exit(1)

    if nearest == target:
        views.print_success(f"{views.fmt_weight(target)} is reachable exactly.")
    else:
        views.console.print(
            f"Closest to {views.fmt_weight(target)}: [bold]{views.fmt_weight(nearest)}[/bold]"
        )
