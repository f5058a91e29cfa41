"""
Helpers built on top of the plate arithmetic.

- closest_target: snap a requested weight onto a weight space
- choose_bar: pick which bar to load for a target
- group_plates / build_plate_load: summarise a plate selection for display
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from .models import Bar, Plate, PlateLoad
from .plate_math import determine_plates


def closest_target(target: float, weights: Sequence[float]) -> float | None:
    """
    Return the achievable weight nearest to target.

    Args:
        target: Requested total weight
        weights: Weight space, ascending

    Returns:
        Nearest weight (the lighter one on a tie), or None if weights is
        empty or target is outside [weights[0], weights[-1]]
    """
    if not weights or target < weights[0] or target > weights[-1]:
        return None

    idx = bisect_left(weights, target)
    above = weights[idx]
    if above == target or idx == 0:
        return above
    below = weights[idx - 1]
    return below if target - below <= above - target else above


def choose_bar(
    bars: Sequence[Bar],
    target: float | None,
    bar_type: str | None = None,
    weight: float | None = None,
) -> Bar | None:
    """
    Pick the bar to load for a target.

    An exact weight match wins when weight is given; otherwise the heaviest
    bar not heavier than the target is chosen.  Bars whose max_load is below
    the target are never chosen.

    Args:
        bars: Available bars
        target: Desired total weight, or None
        bar_type: Only consider bars of this type (e.g. "dumbbell")
        weight: Preferred bar weight

    Returns:
        The chosen Bar, or None if nothing fits
    """
    if target is None or not bars:
        return None

    candidates = [
        b for b in bars
        if (bar_type is None or b.bar_type == bar_type)
        and (b.max_load is None or target <= b.max_load)
    ]

    if weight is not None:
        for bar in candidates:
            if bar.weight == weight:
                return bar

    best: Bar | None = None
    for bar in candidates:
        if bar.weight > target:
            continue
        if best is None or bar.weight > best.weight:
            best = bar
    return best


def group_plates(per_side: Sequence[float]) -> list[tuple[float, int]]:
    """Collapse runs of equal plates into (weight, count) pairs, order kept."""
    groups: list[tuple[float, int]] = []
    for weight in per_side:
        if groups and groups[-1][0] == weight:
            groups[-1] = (weight, groups[-1][1] + 1)
        else:
            groups.append((weight, 1))
    return groups


def build_plate_load(
    target: float | None,
    handle: float | None,
    plates: Sequence[Plate],
) -> PlateLoad | None:
    """Run the plate selector and wrap the result; None without target or handle."""
    if target is None or handle is None:
        return None
    return PlateLoad(
        target=target,
        handle=handle,
        per_side=determine_plates(target, handle, plates),
    )
