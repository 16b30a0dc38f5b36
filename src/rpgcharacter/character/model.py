"""Character model: an immutable, named collection of attributes."""

from collections.abc import Iterator, Mapping
from concurrent.futures import Executor
from types import MappingProxyType

from rpgcharacter.systems.updates import (
    CharacterConstantUpdate,
    CharacterUpdate,
    apply_constant_update,
    apply_update,
)

from .attributes import Attribute


class Character(Mapping[str, Attribute]):
    """An RPG character, primarily a mapping of attribute names to attributes.

    Characters are snapshots. Updating one returns a new character and leaves
    the original untouched, so a simulation produces a sequence of independent
    generations.

    Examples:
        >>> from rpgcharacter.character import Attribute, levels
        >>> hero = Character({"stamina": Attribute(10.0, 1.0, levels.linear(step=10))})
        >>> hero.update(hero.linear_decay_update(slope=1), step=1)["stamina"].progression
        9.0
    """

    def __init__(self, attributes: Mapping[str, Attribute] | None = None) -> None:
        self._attributes = MappingProxyType(dict(attributes or {}))

    @property
    def attributes(self) -> Mapping[str, Attribute]:
        """Read-only view of the attributes by name."""
        return self._attributes

    def __getitem__(self, name: str) -> Attribute:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"Character({dict(self._attributes)!r})"

    def with_attribute(self, name: str, attribute: Attribute) -> "Character":
        """Copy this character with ``name`` added or replaced."""
        return Character({**self._attributes, name: attribute})

    def update(
        self, update: CharacterUpdate, step: float, executor: Executor | None = None
    ) -> "Character":
        """Run an update over this character's attributes.

        Attributes named in the update are replaced by the result of their
        action; all others are carried over unchanged. Actions for attributes
        this character does not have are ignored.

        Args:
            update: The update to perform
            step: The magnitude of the update, passed to every action
            executor: Optional executor for evaluating the actions concurrently

        Returns:
            A new character with the updated attribute values
        """
        return Character(apply_update(self._attributes, update, step, executor))

    def apply_constant_update(
        self, update: CharacterConstantUpdate, executor: Executor | None = None
    ) -> "Character":
        """Run an update whose step is prebaked into each action."""
        return Character(apply_constant_update(self._attributes, update, executor))

    def linear_decay_update(self, slope: float) -> CharacterUpdate:
        """Create a linear decay update covering all of this character's attributes."""
        return CharacterUpdate.linear_decay(self._attributes, slope)

    def quadratic_decay_update(self, a: float, b: float = 0.0) -> CharacterUpdate:
        """Create a quadratic decay update covering all of this character's attributes."""
        return CharacterUpdate.quadratic_decay(self._attributes, a, b)
