"""
Data models for plate-math.

Plates and bars are immutable inputs; PlateLoad is the summary of a single
plate selection.  Validation of raw input happens at the boundary
(io/serializers.py), not here: the core trusts its callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Plate:
    """
    An available plate denomination.

    weight is per plate; count is how many plates of that weight may go
    on one side.  Inventories are ordered lightest first.
    """

    weight: float
    count: int
    avoid: bool = False  # only loaded when the target needs it


@dataclass(frozen=True)
class Bar:
    """
    A handle the plates are loaded onto (barbell, dumbbell handle, ...).

    Optional loading constraints:
      plate_threshold - plates heavier than this do not fit the bar
      max_load        - heaviest total the bar may carry (bar included)
      plate_limits    - per-side cap for individual plate weights
    """

    name: str
    weight: float
    bar_type: str = "barbell"
    plate_threshold: float | None = None
    max_load: float | None = None
    plate_limits: dict[float, int] = field(default_factory=dict)


@dataclass
class PlateLoad:
    """
    Result of loading a bar towards a target.

    per_side lists the plates for one side, heaviest first.  achieved is
    the total actually on the bar; shortfall is target - achieved (0 when
    the target is hit exactly, negative only when the target is lighter
    than the bare handle).
    """

    target: float
    handle: float
    per_side: list[float] = field(default_factory=list)

    @property
    def achieved(self) -> float:
        return self.handle + 2 * sum(self.per_side)

    @property
    def shortfall(self) -> float:
        return self.target - self.achieved

    @property
    def is_exact(self) -> bool:
        return self.shortfall == 0
