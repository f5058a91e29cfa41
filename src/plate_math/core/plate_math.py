"""
Plate arithmetic: which plates to load, and which totals are reachable.

Plate Selector
--------------
  weight_left = (target − handle) / 2        (one side of the bar)
  Walk the inventory from the heaviest denomination down.  Each plate
  unit is tested once: it is loaded when it still fits, and the
  denomination is left behind once all of its units have been tested.

Combination Enumerator
----------------------
  combos(pivot) = merge(combos(pivot + 1), combos(pivot + 1) + 2 × plate)

  pivot counts from the heaviest denomination.  Both halves are already
  sorted, so a linear merge (collapsing equal heads) keeps the result
  sorted and duplicate-free without re-sorting.

Weight Space
------------
  space = handle + combos(0)

All functions are pure.  Inputs are assumed ordered lightest first; that
is the caller's responsibility (see io/serializers.py).
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import Plate

logger = logging.getLogger(__name__)


def determine_plates(
    target: float | None,
    handle: float | None,
    plates: Sequence[Plate],
) -> list[float]:
    """
    Choose plates for one side of the bar, greedily, heaviest first.

    Args:
        target: Desired total weight (bar + plates), or None
        handle: Bar weight, or None
        plates: Inventory ordered lightest first

    Returns:
        Plates for one side, heaviest first.  Empty if target or handle is
        missing or there are no plates.  When the target cannot be reached
        the best greedy result is returned as-is.
    """
    if target is None or handle is None or not plates:
        return []

    plates_needed: list[float] = []
    weight_left = (target - handle) / 2.0

    i = len(plates) - 1
    weight = plates[i].weight
    count = plates[i].count

    while weight_left > 0.0:
        if count > 0 and weight <= weight_left:
            plates_needed.append(weight)
            weight_left -= weight
        if count <= 1:
            if i == 0:
                break
            i -= 1
            weight = plates[i].weight
            count = plates[i].count
        else:
            count -= 1

    if weight_left > 0.0:
        logger.debug(
            "target %s on handle %s: %s per side left unloaded", target, handle, weight_left
        )

    return plates_needed


def determine_plate_combos(plates: Sequence[float], pivot: int = 0) -> list[float]:
    """
    Enumerate every distinct plate load reachable from the denominations.

    Each denomination is loaded as a pair (one plate per side), so it
    contributes 2 × weight.  Denominations from index len − 1 − pivot down
    to 0 are considered.

    Args:
        plates: Denominations ordered lightest first
        pivot: Number of heaviest denominations to skip

    Returns:
        Strictly ascending plate loads, always starting with 0.0
    """
    if pivot >= len(plates):
        return [0.0]

    plate = plates[len(plates) - 1 - pivot]
    loaded = 2.0 * plate

    loads = determine_plate_combos(plates, pivot + 1)
    new_loads = [load + loaded for load in loads]
    return merge(loads, new_loads)


def determine_weight_space(handle: float | None, plates: Sequence[float]) -> list[float]:
    """
    Return every total weight reachable on the given handle.

    Args:
        handle: Bar weight, or None
        plates: Denominations ordered lightest first

    Returns:
        Ascending totals (handle + plate load); empty if handle is None
    """
    if handle is None:
        return []

    return [load + handle for load in determine_plate_combos(plates, 0)]


def merge(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """
    Merge two ascending sequences into one.

    When the next values of a and b are equal it is emitted once and both
    sides advance.  Repeats within one side are kept.
    """
    ai = 0
    bi = 0
    result: list[float] = []

    while ai < len(a) and bi < len(b):
        diff = a[ai] - b[bi]
        if diff <= 0.0:
            result.append(a[ai])
            ai += 1
            if diff == 0.0:
                bi += 1
        else:
            result.append(b[bi])
            bi += 1

    result.extend(a[ai:])
    result.extend(b[bi:])
    return result
