"""Growth and decay update functions for attributes.

An update function takes an attribute and a step and returns a new attribute.
The step is measured in the curve's abstract base unit ("time"), not in
progression: a curve pair converts progression to time, the step is applied
there, and the result is converted back.

Growth:
    Moves progression along the curve by ``step`` in whichever direction the
    step's sign says. Growth is never clamped and can cross the baseline freely.

Decay:
    Always moves progression toward the attribute's baseline by ``abs(step)``,
    and never past it. Decay at the baseline leaves progression unchanged.

Every update function has a constant-step variant that binds the step at
construction and takes only the attribute. Linear growth/decay and quadratic
decay are closed-form and do not go through a :class:`FunctionPair`.
"""

import math
from collections.abc import Callable

from rpgcharacter.character.attributes import Attribute
from rpgcharacter.curves.pairs import (
    Calculation,
    FunctionPair,
    exponential,
    logarithmic,
    power,
    root,
)

AttributeUpdateFunction = Callable[[Attribute, float], Attribute]
AttributeConstantUpdateFunction = Callable[[Attribute], Attribute]


def clamp_to_baseline(current: float, updated: float, baseline: float) -> float:
    """Keep an updated progression on the same side of baseline as ``current``.

    Args:
        current: Progression before the update
        updated: Progression after the update
        baseline: The attribute's baseline

    Returns:
        ``updated``, or ``baseline`` if the update crossed it. NaN passes through.
    """
    if math.isnan(updated):
        return updated
    if current >= baseline:
        return max(baseline, updated)
    return min(baseline, updated)


def _constant(update: AttributeUpdateFunction, step: float) -> AttributeConstantUpdateFunction:
    """Bind ``step`` into an update function."""
    return lambda attribute: update(attribute, step)


# ============================================================================
# General (curve pair) growth and decay
# ============================================================================


def _grow(to_time: Calculation, to_progression: Calculation, attribute: Attribute, step: float) -> Attribute:
    time = to_time(attribute.progression)
    return attribute.with_progression(to_progression(time + step))


def _decay(to_time: Calculation, to_progression: Calculation, attribute: Attribute, step: float) -> Attribute:
    progression = attribute.progression
    baseline = attribute.baseline

    current_time = to_time(progression)
    baseline_time = to_time(baseline)
    magnitude = abs(step)

    if math.isnan(current_time) or math.isnan(baseline_time):
        # Without a baseline time there is nothing to compare in time space;
        # assume the curve increases and compare progression directly.
        direction = -1.0 if progression >= baseline else 1.0
        updated_time = current_time + magnitude * direction
    else:
        direction = -1.0 if current_time >= baseline_time else 1.0
        updated_time = current_time + magnitude * direction
        crossed = updated_time < baseline_time if direction < 0 else updated_time > baseline_time
        if crossed:
            return attribute.with_progression(baseline)

    updated = to_progression(updated_time)
    return attribute.with_progression(clamp_to_baseline(progression, updated, baseline))


def growth(pair: FunctionPair) -> AttributeUpdateFunction:
    """Create an unclamped growth function from a curve pair.

    Args:
        pair: Maps abstract time to progression, and back. Must be true inverses.

    Returns:
        A function taking an attribute and a step in time units
    """
    return lambda attribute, step: _grow(pair.inverse, pair.function, attribute, step)


def constant_growth(pair: FunctionPair, step: float) -> AttributeConstantUpdateFunction:
    """Create a growth function from a curve pair that always applies ``step``."""
    return _constant(growth(pair), step)


def decay(pair: FunctionPair) -> AttributeUpdateFunction:
    """Create a decay-to-baseline function from a curve pair.

    Whether to step forward or backward in time is decided by comparing the
    time of the current progression with the time of the baseline, so curves
    that decrease with time decay correctly too.

    Args:
        pair: Maps abstract time to progression, and back. Must be true inverses.

    Returns:
        A function taking an attribute and a step magnitude, returning an
        attribute no further from baseline than the input
    """
    return lambda attribute, step: _decay(pair.inverse, pair.function, attribute, step)


def constant_decay(pair: FunctionPair, step: float) -> AttributeConstantUpdateFunction:
    """Create a decay function from a curve pair that always applies ``step``."""
    return _constant(decay(pair), step)


# ============================================================================
# Linear closed forms
# ============================================================================


def linear_growth(coefficient: float) -> AttributeUpdateFunction:
    """Create a growth function that adds ``coefficient * step`` to progression."""

    def update(attribute: Attribute, step: float) -> Attribute:
        return attribute.with_progression(attribute.progression + (coefficient * step))

    return update


def constant_linear_growth(coefficient: float, step: float) -> AttributeConstantUpdateFunction:
    """Create a linear growth function that always applies ``step``."""
    return _constant(linear_growth(coefficient), step)


def linear_decay(slope: float) -> AttributeUpdateFunction:
    """Create a decay function that moves ``|slope * step|`` toward baseline.

    The sign of ``slope`` does not matter. A zero slope leaves progression
    unchanged, whereas ``decay(linear(0))`` yields NaN because a flat line
    has no inverse.

    Args:
        slope: Progression change per unit step

    Returns:
        A function taking an attribute and a step
    """

    def update(attribute: Attribute, step: float) -> Attribute:
        progression = attribute.progression
        direction = -1.0 if progression >= attribute.baseline else 1.0
        updated = progression + abs(slope * step) * direction
        return attribute.with_progression(
            clamp_to_baseline(progression, updated, attribute.baseline)
        )

    return update


def constant_linear_decay(slope: float, step: float) -> AttributeConstantUpdateFunction:
    """Create a linear decay function that always applies ``step``."""
    return _constant(linear_decay(slope), step)


# ============================================================================
# Quadratic closed form
# ============================================================================


def quadratic_decay(a: float, b: float = 0.0) -> AttributeUpdateFunction:
    """Create a decay function along ``y = a*x^2 + b*x``.

    Equivalent to ``decay(quadratic(a, b))`` but solved in closed form. A zero
    ``a`` decays linearly with slope ``b``.

    Args:
        a: Coefficient of the squared term
        b: Coefficient of the linear term

    Returns:
        A function taking an attribute and a step
    """
    if a == 0:
        return linear_decay(b)

    def to_time(progression: float) -> float:
        discriminant = (b * b) + (4 * a * progression)
        if discriminant < 0:
            return math.nan
        return (-b + math.sqrt(discriminant)) / (2 * a)

    def to_progression(time: float) -> float:
        return (a * time * time) + (b * time)

    return lambda attribute, step: _decay(to_time, to_progression, attribute, step)


def constant_quadratic_decay(a: float, b: float, step: float) -> AttributeConstantUpdateFunction:
    """Create a quadratic decay function that always applies ``step``."""
    return _constant(quadratic_decay(a, b), step)


# ============================================================================
# Convenience curves
# ============================================================================


def logarithmic_growth(a: float, base: float = math.e) -> AttributeUpdateFunction:
    """Growth along ``y = a * log_base(x)``."""
    return growth(logarithmic(a, base))


def constant_logarithmic_growth(a: float, base: float, step: float) -> AttributeConstantUpdateFunction:
    """Logarithmic growth that always applies ``step``."""
    return constant_growth(logarithmic(a, base), step)


def root_growth(a: float, r: float) -> AttributeUpdateFunction:
    """Growth along ``y = (a * x)^(1 / r)``."""
    return growth(root(a, r))


def constant_root_growth(a: float, r: float, step: float) -> AttributeConstantUpdateFunction:
    """Root growth that always applies ``step``."""
    return constant_growth(root(a, r), step)


def exponential_growth(a: float, base: float = math.e) -> AttributeUpdateFunction:
    """Growth along ``y = a * base^x``."""
    return growth(exponential(a, base))


def power_growth(a: float, p: float) -> AttributeUpdateFunction:
    """Growth along ``y = a * x^p``."""
    return growth(power(a, p))


def exponential_decay(a: float, base: float = math.e) -> AttributeUpdateFunction:
    """Decay toward baseline along ``y = a * base^x``."""
    return decay(exponential(a, base))


def power_decay(a: float, p: float) -> AttributeUpdateFunction:
    """Decay toward baseline along ``y = a * x^p``."""
    return decay(power(a, p))
