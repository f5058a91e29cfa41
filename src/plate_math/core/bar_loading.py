"""
Bar-aware loading on top of the plate arithmetic.

A Bar may restrict which plates it takes (plate_threshold), how many of a
given plate go on one side (plate_limits) and how heavy it may get in total
(max_load).  Plates may be marked avoid: they are left off unless the
target cannot be hit exactly without them.

Counted weight space
--------------------
  A plate with count c contributes c pairs, so the inventory expands into a
  denomination list with the weight repeated c times.  The merge in
  determine_plate_combos collapses the repeated sums.

Several bars
------------
  space(bars) = merge(space(bar_1), merge(space(bar_2), ...))
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Sequence

from .models import Bar, Plate, PlateLoad
from .plate_math import determine_plates, determine_weight_space, merge

logger = logging.getLogger(__name__)


def usable_plates(bar: Bar, plates: Sequence[Plate]) -> list[Plate]:
    """
    Apply a bar's plate constraints to an inventory.

    Args:
        bar: Bar with optional plate_threshold / plate_limits
        plates: Inventory ordered lightest first

    Returns:
        Plates the bar can take, order kept, zero-count plates dropped
    """
    result: list[Plate] = []
    for plate in plates:
        if bar.plate_threshold is not None and plate.weight > bar.plate_threshold:
            continue
        count = plate.count
        limit = bar.plate_limits.get(plate.weight)
        if limit is not None:
            count = min(count, limit)
        if count <= 0:
            continue
        result.append(Plate(weight=plate.weight, count=count, avoid=plate.avoid))
    return result


def expand_denominations(plates: Sequence[Plate]) -> list[float]:
    """Turn counted plates into one denomination entry per pair, lightest first."""
    return [plate.weight for plate in plates for _ in range(plate.count)]


def bar_weight_space(bar: Bar, plates: Sequence[Plate]) -> list[float]:
    """
    Every total reachable on one bar with a counted inventory.

    Args:
        bar: Bar to load
        plates: Inventory ordered lightest first; count = pairs available

    Returns:
        Ascending totals, capped at bar.max_load when set
    """
    weights = determine_weight_space(bar.weight, expand_denominations(usable_plates(bar, plates)))
    if bar.max_load is not None:
        weights = [w for w in weights if w <= bar.max_load]
    return weights


def determine_bars_weight_space(bars: Sequence[Bar], plates: Sequence[Plate]) -> list[float]:
    """
    Every total reachable on any of the bars, merged into one ascending list.

    Returns:
        Ascending, duplicate-free totals; empty when there are no bars
    """
    return reduce(merge, (bar_weight_space(bar, plates) for bar in bars), [])


def select_plates(target: float | None, bar: Bar, plates: Sequence[Plate]) -> list[float]:
    """
    Choose plates for one side of a bar, respecting its constraints.

    Plates marked avoid are tried last: the selection is first made without
    them and only redone with the full inventory when that misses the target.

    Returns:
        Plates for one side, heaviest first (see determine_plates)
    """
    available = usable_plates(bar, plates)
    if not any(p.avoid for p in available):
        return determine_plates(target, bar.weight, available)

    preferred = [p for p in available if not p.avoid]
    per_side = determine_plates(target, bar.weight, preferred)
    if target is not None and bar.weight + 2 * sum(per_side) == target:
        return per_side

    logger.debug("target %s not reachable without avoided plates", target)
    return determine_plates(target, bar.weight, available)


def build_bar_load(target: float | None, bar: Bar, plates: Sequence[Plate]) -> PlateLoad | None:
    """Run select_plates and wrap the result; None without a target."""
    if target is None:
        return None
    return PlateLoad(target=target, handle=bar.weight, per_side=select_plates(target, bar, plates))
