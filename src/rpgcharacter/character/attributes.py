"""Attribute value type.

An attribute is an immutable snapshot of one character stat: its current
progression, the baseline it decays toward, and the level system used to turn
progression into levels. Updates never mutate an attribute; they build a copy
with a new progression via :meth:`Attribute.with_progression`.
"""

import math
from dataclasses import dataclass, field, replace

from .levels import LevelSystem, zeroed


@dataclass(frozen=True)
class Attribute:
    """A single character attribute.

    Attributes:
        progression: Current value. Unconstrained at construction.
        baseline: Value that decay moves progression toward. Negative baselines
            are coerced to 0.
        level_system: Maps between progression and levels.
    """

    progression: float
    baseline: float = 0.0
    level_system: LevelSystem = field(default_factory=zeroed)

    def __post_init__(self) -> None:
        object.__setattr__(self, "baseline", max(0.0, self.baseline))

    @property
    def current_level(self) -> int:
        """The level for the current progression."""
        return self.level_system.level(self.progression)

    @property
    def is_defined(self) -> bool:
        """False once an out-of-domain update has left progression as NaN."""
        return not math.isnan(self.progression)

    def progression_at_level(self, level: int) -> float:
        """Progression required to reach ``level`` of this attribute."""
        return self.level_system.inverse_level(level)

    def with_progression(self, progression: float) -> "Attribute":
        """Copy this attribute with a different progression."""
        return replace(self, progression=progression)
