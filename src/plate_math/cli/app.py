"""Shared Typer app object, shared option types, and config utility."""

from typing import Annotated, Optional

import typer

from ..core.config_loader import InventoryConfig, load_inventory_config
from ..io.serializers import ValidationError, validate_finite
from . import views

# Shared options used across commands
HandleOption = Annotated[
    Optional[float],
    typer.Option("--handle", "-b", help="Bar weight (default: from plates.yaml)"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="plate-math",
    help="Barbell loading calculator: which plates to load and which weights are reachable.",
    no_args_is_help=True,
)


def get_config() -> InventoryConfig:
    """Load the equipment config, exiting with an error message if it is invalid."""
    try:
        return load_inventory_config()
    except (ValidationError, RuntimeError) as e:
        views.print_error(f"Invalid equipment config: {e}")
        raise typer.Exit(1)


def require_finite(value: float, name: str) -> float:
    """Exit with an error unless *value* is a finite number (Typer accepts "nan" and "inf")."""
    try:
        return validate_finite(value, name)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
