"""Invertible scalar curves used for attribute growth, decay and levels.

Every curve is a :class:`FunctionPair`: a forward function that maps an abstract
base value ("time") to progression, and its true mathematical inverse that maps
progression back to time. Growth and decay work by converting progression to
time, stepping in time, and converting back.

Remember that the inverse of a composition is the composition of the inverses in
reverse order, ``(f o g)^-1 = g^-1 o f^-1``. Any composition of the curves below
can therefore be used wherever a single curve can.

Out-of-domain inputs never raise. They produce ``math.nan``, which propagates
silently through later arithmetic; callers that care must check with
:func:`math.isnan`.
"""

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce, wraps

import structlog

from rpgcharacter.config import get_settings
from rpgcharacter.exceptions import InverseMismatchError

logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

Calculation = Callable[[float], float]

NAN = math.nan


def _undefined_on_error(calculation: Calculation) -> Calculation:
    """Map Python arithmetic failures inside a calculation to NaN."""

    @wraps(calculation)
    def guarded(x: float) -> float:
        try:
            result = calculation(x)
        except (ArithmeticError, ValueError):
            return NAN
        if isinstance(result, complex):
            return NAN
        return float(result)

    return guarded


def _identity(x: float) -> float:
    return x


def _chain(first: Calculation, second: Calculation) -> Calculation:
    """Return ``second o first``, i.e. apply ``first`` then ``second``."""
    return lambda x: second(first(x))


@dataclass(frozen=True)
class FunctionPair:
    """A forward function and its inverse.

    Contract: ``inverse(function(x))`` is ``x`` (within tolerance) for every
    ``x`` in the function's valid domain.
    """

    function: Calculation
    inverse: Calculation

    def __call__(self, x: float) -> float:
        return self.function(x)

    def invert(self, y: float) -> float:
        """Map a progression value back to abstract time."""
        return self.inverse(y)

    def inverted(self) -> "FunctionPair":
        """Return the pair with function and inverse swapped."""
        return FunctionPair(function=self.inverse, inverse=self.function)

    def round_trips(self, samples: Iterable[float], tolerance: float | None = None) -> bool:
        """Check the round-trip law over ``samples`` without raising.

        Args:
            samples: Inputs to feed through ``function`` then ``inverse``
            tolerance: Relative and absolute tolerance. Defaults to
                ``Settings.tolerance``.

        Returns:
            True if every defined sample round-trips
        """
        try:
            self.verify(samples, tolerance)
        except InverseMismatchError:
            return False
        return True

    def verify(self, samples: Iterable[float], tolerance: float | None = None) -> None:
        """Assert the round-trip law over ``samples``.

        Samples outside the forward function's domain (NaN forward value) are
        skipped.

        Args:
            samples: Inputs to feed through ``function`` then ``inverse``
            tolerance: Relative and absolute tolerance. Defaults to
                ``Settings.tolerance``.

        Raises:
            InverseMismatchError: On the first sample that does not round-trip
        """
        if tolerance is None:
            tolerance = get_settings().tolerance

        checked = 0
        for sample in samples:
            forward = self.function(sample)
            if math.isnan(forward):
                continue
            recovered = self.inverse(forward)
            if not math.isclose(recovered, sample, rel_tol=tolerance, abs_tol=tolerance):
                raise InverseMismatchError(sample, forward, recovered, tolerance)
            checked += 1

        logger.debug("function_pair_verified", samples_checked=checked, tolerance=tolerance)


def identity() -> FunctionPair:
    """The identity pair, ``f(x) = x``."""
    return FunctionPair(function=_identity, inverse=_identity)


def compose(pairs: Iterable[FunctionPair]) -> FunctionPair:
    """Compose function pairs left to right.

    ``compose([p1, p2])`` applies ``p1.function`` first and then
    ``p2.function``. Its inverse applies ``p2.inverse`` first and then
    ``p1.inverse``. This only makes sense if each function's codomain lies in
    the next one's domain.

    Args:
        pairs: Pairs to compose, in application order

    Returns:
        The composed pair. Composing nothing gives the identity pair.
    """
    pairs = list(pairs)
    function = reduce(_chain, (pair.function for pair in pairs), _identity)
    inverse = reduce(_chain, (pair.inverse for pair in reversed(pairs)), _identity)
    return FunctionPair(function=function, inverse=inverse)


# ============================================================================
# Linear: y = coefficient * x + offset
# ============================================================================


def linear_function(coefficient: float, offset: float = 0.0) -> Calculation:
    """Create ``y = coefficient * x + offset``."""
    return lambda x: coefficient * x + offset


def inverse_linear(coefficient: float, offset: float = 0.0) -> Calculation:
    """Create ``x = (y - offset) / coefficient``; NaN for a zero coefficient."""

    @_undefined_on_error
    def calculation(y: float) -> float:
        if coefficient == 0:
            return NAN
        return (y - offset) / coefficient

    return calculation


def linear(coefficient: float, offset: float = 0.0) -> FunctionPair:
    """Create the linear pair.

    Growth, decay and level systems have dedicated closed forms for linear
    curves and do not go through this pair; it is here for composition.
    """
    return FunctionPair(linear_function(coefficient, offset), inverse_linear(coefficient, offset))


# ============================================================================
# Quadratic: y = a * x^2 + b * x + c
# ============================================================================


def quadratic_function(a: float, b: float = 0.0, c: float = 0.0) -> Calculation:
    """Create ``y = a*x^2 + b*x + c``."""
    return lambda x: (a * x * x) + (b * x) + c


def inverse_quadratic(a: float, b: float = 0.0, c: float = 0.0) -> Calculation:
    """Create the quadratic formula ``x = (-b + sqrt(b^2 - 4a(c - y))) / 2a``.

    NaN when ``a`` is zero (use a linear curve instead) or when the
    discriminant is negative.
    """

    @_undefined_on_error
    def calculation(y: float) -> float:
        if a == 0:
            return NAN
        discriminant = (b * b) - (4 * a * (c - y))
        if discriminant < 0:
            return NAN
        return (-b + math.sqrt(discriminant)) / (2 * a)

    return calculation


def quadratic(a: float, b: float = 0.0, c: float = 0.0) -> FunctionPair:
    """Create the quadratic pair. The inverse is the positive root."""
    return FunctionPair(quadratic_function(a, b, c), inverse_quadratic(a, b, c))


# ============================================================================
# Exponential: y = a * base^x
# ============================================================================


def exponential_function(a: float, base: float = math.e) -> Calculation:
    """Create ``y = a * base^x``."""

    @_undefined_on_error
    def calculation(x: float) -> float:
        return a * math.pow(base, x)

    return calculation


def inverse_exponential(a: float, base: float = math.e) -> Calculation:
    """Create ``x = log_base(y / a)``.

    Defined only for ``base`` not 0 or 1 and ``y`` not 0 (and ``y / a``
    positive).
    """

    @_undefined_on_error
    def calculation(y: float) -> float:
        if base == 0 or base == 1 or y == 0:
            return NAN
        return math.log(y / a) / math.log(base)

    return calculation


def exponential(a: float, base: float = math.e) -> FunctionPair:
    """Create the exponential pair."""
    return FunctionPair(exponential_function(a, base), inverse_exponential(a, base))


# ============================================================================
# Logarithmic: y = a * log_base(x)
# ============================================================================


def logarithmic_function(a: float = 1.0, base: float = math.e) -> Calculation:
    """Create ``y = a * log_base(x)``; NaN for ``x`` of 0 or ``base`` of 0 or 1."""

    @_undefined_on_error
    def calculation(x: float) -> float:
        if base == 0 or base == 1 or x == 0:
            return NAN
        return a * (math.log(x) / math.log(base))

    return calculation


def inverse_logarithmic(a: float = 1.0, base: float = math.e) -> Calculation:
    """Create ``x = base^(y / a)``."""

    @_undefined_on_error
    def calculation(y: float) -> float:
        return math.pow(base, y / a)

    return calculation


def logarithmic(a: float = 1.0, base: float = math.e) -> FunctionPair:
    """Create the logarithmic pair."""
    return FunctionPair(logarithmic_function(a, base), inverse_logarithmic(a, base))


# ============================================================================
# Power: y = a * x^p
# ============================================================================


def power_function(a: float, p: float) -> Calculation:
    """Create ``y = a * x^p``."""

    @_undefined_on_error
    def calculation(x: float) -> float:
        return a * math.pow(x, p)

    return calculation


def inverse_power(a: float, p: float) -> Calculation:
    """Create ``x = (y / a)^(1 / p)``; defined for ``y >= 0``, ``a`` and ``p`` non-zero."""

    @_undefined_on_error
    def calculation(y: float) -> float:
        if p == 0 or a == 0 or y < 0:
            return NAN
        return math.pow(y / a, 1 / p)

    return calculation


def power(a: float, p: float) -> FunctionPair:
    """Create the power pair."""
    return FunctionPair(power_function(a, p), inverse_power(a, p))


# ============================================================================
# Root: y = (a * x)^(1 / r)
# ============================================================================


def root_function(a: float, r: float) -> Calculation:
    """Create ``y = (a * x)^(1 / r)``; defined for ``x >= 0`` and non-zero ``r``.

    Very close to :func:`inverse_power`; pick whichever reads better for the
    curve being described.
    """

    @_undefined_on_error
    def calculation(x: float) -> float:
        if r == 0 or x < 0:
            return NAN
        return math.pow(a * x, 1 / r)

    return calculation


def inverse_root(a: float, r: float) -> Calculation:
    """Create ``x = y^r / a``; NaN for a zero ``a``."""

    @_undefined_on_error
    def calculation(y: float) -> float:
        if a == 0:
            return NAN
        return math.pow(y, r) / a

    return calculation


def root(a: float, r: float) -> FunctionPair:
    """Create the root pair."""
    return FunctionPair(root_function(a, r), inverse_root(a, r))
