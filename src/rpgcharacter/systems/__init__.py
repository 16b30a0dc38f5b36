"""Attribute progression and character update systems."""

from .progression import (
    AttributeConstantUpdateFunction,
    AttributeUpdateFunction,
    clamp_to_baseline,
    constant_decay,
    constant_growth,
    constant_linear_decay,
    constant_linear_growth,
    constant_logarithmic_growth,
    constant_quadratic_decay,
    constant_root_growth,
    decay,
    exponential_decay,
    exponential_growth,
    growth,
    linear_decay,
    linear_growth,
    logarithmic_growth,
    power_decay,
    power_growth,
    quadratic_decay,
    root_growth,
)
from .updates import (
    CharacterConstantUpdate,
    CharacterUpdate,
    ConstantUpdateAction,
    UpdateAction,
    apply_constant_update,
    apply_update,
)

__all__ = [
    "AttributeConstantUpdateFunction",
    "AttributeUpdateFunction",
    "CharacterConstantUpdate",
    "CharacterUpdate",
    "ConstantUpdateAction",
    "UpdateAction",
    "apply_constant_update",
    "apply_update",
    "clamp_to_baseline",
    "constant_decay",
    "constant_growth",
    "constant_linear_decay",
    "constant_linear_growth",
    "constant_logarithmic_growth",
    "constant_quadratic_decay",
    "constant_root_growth",
    "decay",
    "exponential_decay",
    "exponential_growth",
    "growth",
    "linear_decay",
    "linear_growth",
    "logarithmic_growth",
    "power_decay",
    "power_growth",
    "quadratic_decay",
    "root_growth",
]
