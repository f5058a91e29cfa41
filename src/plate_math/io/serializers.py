"""
Boundary layer: turn untyped input into core values.

The core trusts its inputs (ascending order, positive weights).  Everything
coming from JSON, YAML or the command line passes through here first.
"""

import json
import logging
import math
from typing import Any

from ..core.config import MAX_PLATE_COUNT
from ..core.models import Bar, Plate

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_non_negative(value: int | float, name: str) -> int | float:
    """
    Validate that a value is non-negative.

    Args:
        value: Value to validate
        name: Name for error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return value


def validate_positive(value: int | float, name: str) -> int | float:
    """
    Validate that a value is positive.

    Args:
        value: Value to validate
        name: Name for error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")
    return value


def validate_finite(value: float, name: str) -> float:
    """
    Validate that a value is a finite number (not NaN or infinity).

    Raises:
        ValidationError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    return value


def as_number(value: Any, name: str) -> float:
    """
    Validate that a raw value is a finite number and return it as float.

    Raises:
        ValidationError: If value is not a number, is a bool, or is not finite
    """
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    return validate_finite(float(value), name)


def plate_from_dict(data: dict[str, Any]) -> Plate:
    """
    Create a Plate from a {"weight": ..., "count": ...} mapping.

    count is clamped to MAX_PLATE_COUNT.

    Raises:
        ValidationError: If a field is missing or out of range
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Plate must be a mapping, got {data!r}")
    try:
        weight = as_number(data["weight"], "weight")
        count = data["count"]
    except KeyError as e:
        raise ValidationError(f"Plate is missing field {e}") from e

    if isinstance(count, bool) or not isinstance(count, int):
        raise ValidationError(f"count must be an integer, got {count!r}")

    avoid = data.get("avoid", False)
    if not isinstance(avoid, bool):
        raise ValidationError(f"avoid must be true or false, got {avoid!r}")

    validate_positive(weight, "weight")
    validate_non_negative(count, "count")
    return Plate(weight=weight, count=min(count, MAX_PLATE_COUNT), avoid=avoid)


def plate_to_dict(plate: Plate) -> dict[str, Any]:
    """Convert Plate to JSON-compatible dict."""
    data: dict[str, Any] = {"weight": plate.weight, "count": plate.count}
    if plate.avoid:
        data["avoid"] = True
    return data


def plates_from_list(data: Any, strict: bool = False) -> list[Plate]:
    """
    Parse a plate inventory, lightest first.

    Args:
        data: List of plate mappings
        strict: Raise on malformed input instead of falling back

    Returns:
        Plates sorted ascending by weight.  In non-strict mode malformed
        input yields an empty list.

    Raises:
        ValidationError: Only in strict mode
    """
    try:
        if not isinstance(data, list):
            raise ValidationError(f"Plates must be a list, got {type(data).__name__}")
        plates = [plate_from_dict(item) for item in data]
    except ValidationError as e:
        if strict:
            raise
        logger.warning("Ignoring malformed plate inventory: %s", e)
        return []
    return sorted(plates, key=lambda p: p.weight)


def plates_from_json(text: str, strict: bool = False) -> list[Plate]:
    """Parse a plate inventory from a JSON string.  See plates_from_list."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        if strict:
            raise ValidationError(f"Invalid JSON: {e}") from e
        logger.warning("Ignoring undecodable plate inventory: %s", e)
        return []
    return plates_from_list(data, strict=strict)


def plates_to_list(plates: list[Plate]) -> list[dict[str, Any]]:
    """Convert a plate inventory to a JSON-compatible list."""
    return [plate_to_dict(p) for p in plates]


def _optional_limit(data: dict[str, Any], key: str) -> float | None:
    if data.get(key) is None:
        return None
    return float(validate_positive(as_number(data[key], key), key))


def _plate_limits(raw: Any) -> dict[float, int]:
    """Parse {plate_weight: per_side_count}; YAML gives int or float keys."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError(f"plate_limits must be a mapping, got {raw!r}")
    limits: dict[float, int] = {}
    for weight, count in raw.items():
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValidationError(f"plate_limits count must be an integer, got {count!r}")
        # JSON object keys arrive as strings
        if isinstance(weight, str):
            try:
                weight = float(weight)
            except ValueError as e:
                raise ValidationError(f"Invalid plate_limits weight: {weight!r}") from e
        key = as_number(weight, "plate_limits weight")
        validate_positive(key, "plate_limits weight")
        limits[key] = int(validate_non_negative(count, "plate_limits count"))
    return limits


def bar_from_dict(data: dict[str, Any]) -> Bar:
    """
    Create a Bar from a mapping.

    Fields: weight (required), name, type, plate_threshold, max_load,
    plate_limits ({plate_weight: per_side_count}).

    Raises:
        ValidationError: If a field is missing or invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Bar must be a mapping, got {data!r}")
    if "weight" not in data:
        raise ValidationError("Bar is missing field 'weight'")

    weight = as_number(data["weight"], "bar weight")
    validate_non_negative(weight, "bar weight")
    bar_type = str(data.get("type", "barbell"))
    name = str(data.get("name") or f"{weight:g} {bar_type}")
    return Bar(
        name=name,
        weight=weight,
        bar_type=bar_type,
        plate_threshold=_optional_limit(data, "plate_threshold"),
        max_load=_optional_limit(data, "max_load"),
        plate_limits=_plate_limits(data.get("plate_limits")),
    )


def bars_from_list(data: Any) -> list[Bar]:
    """Parse a list of bar mappings, order kept."""
    if not isinstance(data, list):
        raise ValidationError(f"Bars must be a list, got {type(data).__name__}")
    return [bar_from_dict(item) for item in data]


def bars_from_mapping(data: Any) -> list[Bar]:
    """
    Parse bars keyed by name, e.g. {"Olympic barbell": {"weight": 20}}.

    Order follows the mapping.  A "name" field inside an entry is ignored;
    the key is the name.
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Bars must be a mapping, got {type(data).__name__}")
    bars: list[Bar] = []
    for name, entry in data.items():
        if not isinstance(entry, dict):
            raise ValidationError(f"Bar {name!r} must be a mapping, got {entry!r}")
        bars.append(bar_from_dict({**entry, "name": str(name)}))
    return bars


def bar_to_dict(bar: Bar) -> dict[str, Any]:
    """Convert Bar to JSON-compatible dict; unset constraints are left out."""
    data: dict[str, Any] = {"name": bar.name, "weight": bar.weight, "type": bar.bar_type}
    if bar.plate_threshold is not None:
        data["plate_threshold"] = bar.plate_threshold
    if bar.max_load is not None:
        data["max_load"] = bar.max_load
    if bar.plate_limits:
        data["plate_limits"] = {f"{w:g}": c for w, c in bar.plate_limits.items()}
    return data


def _parse_weight(token: str) -> float:
    try:
        weight = float(token)
    except ValueError as e:
        raise ValidationError(f"Invalid weight: {token!r}") from e
    validate_finite(weight, "weight")
    validate_positive(weight, "weight")
    return weight


def parse_plate_string(plates_str: str) -> list[Plate]:
    """
    Parse a compact inventory string.

    Format: comma-separated WEIGHTxCOUNT items; a bare WEIGHT means one plate.
    Example: "25x2, 10x2, 5x4, 2.5"

    Returns:
        Plates sorted ascending by weight

    Raises:
        ValidationError: If an item cannot be parsed
    """
    plates: list[Plate] = []
    for item in plates_str.split(","):
        item = item.strip().lower()
        if not item:
            continue
        weight_part, sep, count_part = item.partition("x")
        weight = _parse_weight(weight_part.strip())
        count = 1
        if sep:
            try:
                count = int(count_part.strip())
            except ValueError as e:
                raise ValidationError(f"Invalid plate count in {item!r}") from e
            validate_non_negative(count, "count")
        plates.append(Plate(weight=weight, count=min(count, MAX_PLATE_COUNT)))

    if not plates:
        raise ValidationError(f"No plates in {plates_str!r}")
    return sorted(plates, key=lambda p: p.weight)


def parse_weight_list(weights_str: str) -> list[float]:
    """
    Parse a comma-separated denomination list, e.g. "2.5,5,10".

    Returns:
        Weights sorted ascending

    Raises:
        ValidationError: If a weight cannot be parsed
    """
    weights = [_parse_weight(t.strip()) for t in weights_str.split(",") if t.strip()]
    return sorted(weights)
