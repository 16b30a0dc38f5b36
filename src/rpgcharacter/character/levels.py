"""Level systems: mapping continuous progression to integer levels and back.

A level system built from a curve ``f`` with inverse ``g`` uses::

    level(progression) = 1 + floor(g(progression))
    inverse_level(level) = f(level - 1)

so level 1 starts at ``f(0)`` and level boundaries are closed on the low side:
a progression exactly equal to the requirement for level ``n`` is level ``n``.
Base values within ``Settings.tolerance`` of a boundary snap onto it, which
absorbs rounding in inverses such as logarithms.

Level 0 is the error/trivial level. :func:`zeroed` always returns it, and any
level system whose inverse yields NaN or infinity (an out-of-domain
configuration) reports level 0 for that progression instead of raising.
Progression below the level-1 requirement is also level 0; levels are never
negative.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass

from rpgcharacter.config import get_settings
from rpgcharacter.curves.pairs import (
    FunctionPair,
    exponential as exponential_pair,
    inverse_quadratic,
    power as power_pair,
    quadratic_function,
)

LevelFunction = Callable[[float], int]
InverseLevelFunction = Callable[[int], float]

ERROR_LEVEL = 0


@dataclass(frozen=True)
class LevelSystem:
    """A pair of functions mapping progression to level and level to progression."""

    level: LevelFunction
    inverse_level: InverseLevelFunction


def _level_from_base(base: float) -> int:
    """Quantize an abstract base value into a level, never below the error level.

    A base within ``Settings.tolerance`` of an integer counts as that integer,
    so an inexact inverse (``log(1000) / log(10)`` is just under 3) still puts a
    level's exact requirement on that level.
    """
    if math.isnan(base) or math.isinf(base):
        return ERROR_LEVEL
    nearest = round(base)
    if math.isclose(base, nearest, rel_tol=0.0, abs_tol=get_settings().tolerance):
        base = nearest
    return max(ERROR_LEVEL, 1 + math.floor(base))


def zeroed() -> LevelSystem:
    """Create a level system that always returns zero."""
    return LevelSystem(level=lambda _progression: 0, inverse_level=lambda _level: 0.0)


def linear(step: float, offset: float = 0.0) -> LevelSystem:
    """Create a level system where each level spans ``step`` progression.

    Args:
        step: Progression required per level
        offset: Progression at which level 1 starts

    Returns:
        A linear level system
    """

    def level(progression: float) -> int:
        if step == 0:
            return ERROR_LEVEL
        return _level_from_base((progression - offset) / step)

    def inverse_level(level_number: int) -> float:
        return ((level_number - 1) * step) + offset

    return LevelSystem(level=level, inverse_level=inverse_level)


def quadratic(a: float, b: float = 0.0, c: float = 0.0) -> LevelSystem:
    """Create a level system following ``a*x^2 + b*x + c``.

    A zero ``a`` is a linear curve and delegates to :func:`linear` with
    ``step=b`` and ``offset=c``.

    Args:
        a: Coefficient of the squared term
        b: Coefficient of the linear term
        c: Progression at which level 1 starts

    Returns:
        A quadratic level system
    """
    if a == 0:
        return linear(step=b, offset=c)

    base_at = inverse_quadratic(a, b, c)
    progression_at = quadratic_function(a, b, c)

    return LevelSystem(
        level=lambda progression: _level_from_base(base_at(progression)),
        inverse_level=lambda level_number: progression_at(level_number - 1),
    )


def from_function_pair(pair: FunctionPair) -> LevelSystem:
    """Create a level system from any curve and its inverse.

    Args:
        pair: ``f`` defines the level curve, ``g`` must satisfy ``g(f(x)) = x``

    Returns:
        A level system based on the provided pair
    """
    return LevelSystem(
        level=lambda progression: _level_from_base(pair.inverse(progression)),
        inverse_level=lambda level_number: pair.function(level_number - 1),
    )


def exponential(a: float = 1.0, base: float = math.e) -> LevelSystem:
    """Create a level system following ``a * base^x``."""
    return from_function_pair(exponential_pair(a, base))


def power(a: float, p: float) -> LevelSystem:
    """Create a level system following ``a * x^p``."""
    return from_function_pair(power_pair(a, p))
