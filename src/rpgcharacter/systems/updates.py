"""Character updates and the batch update engine.

A :class:`CharacterUpdate` maps attribute names to the update function for that
attribute. Applying it to a character's attributes replaces every attribute
that has an action and keeps the rest as-is. Actions for attributes the
character does not have are ignored, never inserted.

Each action reads only its own attribute, so the per-attribute transforms can
run on an executor in any order. Results are merged back in the character's own
key order, so parallel and sequential application give identical output.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from concurrent.futures import Executor
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

import structlog

from rpgcharacter.character.attributes import Attribute
from rpgcharacter.config import get_settings

from .progression import (
    AttributeConstantUpdateFunction,
    AttributeUpdateFunction,
    linear_decay,
    quadratic_decay,
)

logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


@dataclass(frozen=True)
class UpdateAction:
    """The update applied to one attribute, given a step at update time."""

    attribute: str
    transform: AttributeUpdateFunction


@dataclass(frozen=True)
class ConstantUpdateAction:
    """The update applied to one attribute, with the step already bound."""

    attribute: str
    transform: AttributeConstantUpdateFunction


ActionT = TypeVar("ActionT", UpdateAction, ConstantUpdateAction)


class _ActionSet(Mapping[str, ActionT], Generic[ActionT]):
    """Immutable name -> action mapping; later actions for a name win."""

    def __init__(self, actions: Iterable[ActionT] = ()) -> None:
        collected: dict[str, ActionT] = {}
        for action in actions:
            collected[action.attribute] = action
        self._actions = MappingProxyType(collected)

    @property
    def actions(self) -> Mapping[str, ActionT]:
        return self._actions

    def __getitem__(self, name: str) -> ActionT:
        return self._actions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._actions)!r})"


class CharacterUpdate(_ActionSet[UpdateAction]):
    """A batch of per-attribute update functions, applied with a shared step."""

    @classmethod
    def for_attributes(
        cls, names: Iterable[str], transform: AttributeUpdateFunction
    ) -> "CharacterUpdate":
        """Create an update applying the same function to every named attribute."""
        return cls(UpdateAction(attribute=name, transform=transform) for name in names)

    @classmethod
    def linear_decay(cls, names: Iterable[str], slope: float) -> "CharacterUpdate":
        """Create a linear decay update for the named attributes."""
        return cls.for_attributes(names, linear_decay(slope))

    @classmethod
    def quadratic_decay(cls, names: Iterable[str], a: float, b: float = 0.0) -> "CharacterUpdate":
        """Create a quadratic decay update for the named attributes."""
        return cls.for_attributes(names, quadratic_decay(a, b))


class CharacterConstantUpdate(_ActionSet[ConstantUpdateAction]):
    """A batch of per-attribute update functions whose steps are prebaked."""

    @classmethod
    def for_attributes(
        cls, names: Iterable[str], transform: AttributeConstantUpdateFunction
    ) -> "CharacterConstantUpdate":
        """Create a constant update applying the same function to every named attribute."""
        return cls(ConstantUpdateAction(attribute=name, transform=transform) for name in names)


def _apply(
    attributes: Mapping[str, Attribute],
    actions: Mapping[str, Any],
    run: Callable[[Any, Attribute], Attribute],
    executor: Executor | None,
) -> dict[str, Attribute]:
    targeted = [
        (name, attribute, actions[name]) for name, attribute in attributes.items() if name in actions
    ]

    parallel = executor is not None and len(targeted) >= get_settings().parallel_update_threshold
    if parallel:
        futures = {
            name: executor.submit(run, action, attribute) for name, attribute, action in targeted
        }
        results = {name: future.result() for name, future in futures.items()}
    else:
        results = {name: run(action, attribute) for name, attribute, action in targeted}

    logger.debug(
        "character_attributes_updated",
        updated=len(results),
        unchanged=len(attributes) - len(results),
        ignored=len(actions) - len(results),
        parallel=parallel,
    )

    return {name: results.get(name, attribute) for name, attribute in attributes.items()}


def apply_update(
    attributes: Mapping[str, Attribute],
    update: CharacterUpdate,
    step: float,
    executor: Executor | None = None,
) -> dict[str, Attribute]:
    """Apply a character update to a set of attributes.

    Args:
        attributes: Current attributes by name
        update: Actions to run, keyed by attribute name
        step: Step passed to every action
        executor: Optional executor to fan the transforms out over. Only used
            once at least ``Settings.parallel_update_threshold`` attributes are
            targeted.

    Returns:
        New attributes by name, in the same key order. Untargeted attributes
        are the same objects as in ``attributes``.
    """
    return _apply(
        attributes,
        update.actions,
        lambda action, attribute: action.transform(attribute, step),
        executor,
    )


def apply_constant_update(
    attributes: Mapping[str, Attribute],
    update: CharacterConstantUpdate,
    executor: Executor | None = None,
) -> dict[str, Attribute]:
    """Apply a constant-step character update to a set of attributes.

    See :func:`apply_update`; the only difference is that each action already
    carries its own step.
    """
    return _apply(
        attributes,
        update.actions,
        lambda action, attribute: action.transform(attribute),
        executor,
    )
