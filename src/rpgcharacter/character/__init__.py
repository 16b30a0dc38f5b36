"""Character-related value types: level systems and attributes.

The :class:`~rpgcharacter.character.model.Character` collection sits above the
update systems and is imported from ``rpgcharacter.character.model``.
"""

from . import levels
from .attributes import Attribute
from .levels import LevelSystem

__all__ = [
    "Attribute",
    "LevelSystem",
    "levels",
]
