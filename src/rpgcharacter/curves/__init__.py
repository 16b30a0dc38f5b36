"""Invertible growth/decay curves."""

from .pairs import (
    NAN,
    Calculation,
    FunctionPair,
    compose,
    exponential,
    exponential_function,
    identity,
    inverse_exponential,
    inverse_linear,
    inverse_logarithmic,
    inverse_power,
    inverse_quadratic,
    inverse_root,
    linear,
    linear_function,
    logarithmic,
    logarithmic_function,
    power,
    power_function,
    quadratic,
    quadratic_function,
    root,
    root_function,
)

__all__ = [
    "NAN",
    "Calculation",
    "FunctionPair",
    "compose",
    "exponential",
    "exponential_function",
    "identity",
    "inverse_exponential",
    "inverse_linear",
    "inverse_logarithmic",
    "inverse_power",
    "inverse_quadratic",
    "inverse_root",
    "linear",
    "linear_function",
    "logarithmic",
    "logarithmic_function",
    "power",
    "power_function",
    "quadratic",
    "quadratic_function",
    "root",
    "root_function",
]
