"""
Configuration constants and defaults for plate-math.

These are the fallbacks used when plates.yaml (bundled or user override)
does not provide a value.  See core/config_loader.py.
"""

from typing import Final

from .models import Bar, Plate

# =============================================================================
# BAR
# =============================================================================

DEFAULT_HANDLE_KG: Final[float] = 20.0  # Standard Olympic barbell

DEFAULT_BARS: Final[tuple[Bar, ...]] = (
    Bar(name="Olympic barbell", weight=20.0, bar_type="barbell"),
    Bar(name="Women's barbell", weight=15.0, bar_type="barbell"),
    Bar(name="EZ curl bar", weight=10.0, bar_type="barbell", max_load=100.0),
    Bar(
        name="Dumbbell handle",
        weight=2.5,
        bar_type="dumbbell",
        plate_threshold=5.0,
        max_load=40.0,
        plate_limits={5.0: 2},
    ),
)

# =============================================================================
# PLATES
# =============================================================================

# Inventory, lightest first.  count = plates available per side.
DEFAULT_PLATES: Final[tuple[Plate, ...]] = (
    Plate(weight=1.25, count=2),
    Plate(weight=2.5, count=2),
    Plate(weight=5.0, count=2),
    Plate(weight=10.0, count=2),
    Plate(weight=15.0, count=1),
    Plate(weight=20.0, count=1),
    Plate(weight=25.0, count=4),
)

# One entry per plate pair, lightest first.
DEFAULT_DENOMINATIONS: Final[tuple[float, ...]] = (1.25, 2.5, 5.0, 10.0, 15.0, 20.0, 25.0)

# Plate counts cross the boundary as 16-bit unsigned integers.
MAX_PLATE_COUNT: Final[int] = 65535

# =============================================================================
# FILES
# =============================================================================

BUNDLED_CONFIG_NAME: Final[str] = "plates.yaml"
USER_CONFIG_DIR: Final[str] = ".plate-math"
CONFIG_ENV_VAR: Final[str] = "PLATE_MATH_CONFIG"
