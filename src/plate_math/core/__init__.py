"""
Core plate arithmetic for plate-math.

Pure functions over plain values; no I/O.
"""

from .bar_loading import (
    bar_weight_space,
    build_bar_load,
    determine_bars_weight_space,
    expand_denominations,
    select_plates,
    usable_plates,
)
from .models import Bar, Plate, PlateLoad
from .plate_math import determine_plate_combos, determine_plates, determine_weight_space, merge
from .selection import build_plate_load, choose_bar, closest_target, group_plates

__all__ = [
    "Bar",
    "Plate",
    "PlateLoad",
    "bar_weight_space",
    "build_bar_load",
    "build_plate_load",
    "choose_bar",
    "closest_target",
    "determine_bars_weight_space",
    "determine_plate_combos",
    "determine_plates",
    "determine_weight_space",
    "expand_denominations",
    "group_plates",
    "merge",
    "select_plates",
    "usable_plates",
]
