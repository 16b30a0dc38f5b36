"""Exceptions for rpgcharacter.

Core curve, level and update operations never raise: out-of-domain math yields
NaN and missing attributes are skipped. These exceptions exist for the opt-in
verification helpers a host can run against its own curve definitions.
"""


class RPGCharacterError(Exception):
    """Base class for all rpgcharacter errors."""


class InverseMismatchError(RPGCharacterError, ValueError):
    """Raised when a function pair's inverse does not undo its function."""

    def __init__(self, sample: float, forward: float, recovered: float, tolerance: float) -> None:
        self.sample = sample
        self.forward = forward
        self.recovered = recovered
        self.tolerance = tolerance
        super().__init__(
            f"inverse(function({sample!r})) = {recovered!r} "
            f"(function value {forward!r}) differs from {sample!r} by more than {tolerance!r}"
        )
