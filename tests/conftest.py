"""Shared fixtures for all tests."""

import os

import pytest

from rpgcharacter.character import Attribute, levels
from rpgcharacter.character.model import Character
from rpgcharacter.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Ensure every test starts from default settings.

    Strips any RPGCHARACTER_* variables from the environment and clears the
    cached settings before and after the test, so a test that overrides
    configuration cannot leak it into the next one.
    """
    for key in list(os.environ):
        if key.startswith("RPGCHARACTER_"):
            monkeypatch.delenv(key)

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def override_settings(monkeypatch):
    """Set RPGCHARACTER_* environment overrides and refresh cached settings."""

    def _override(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"RPGCHARACTER_{key.upper()}", str(value))
        get_settings.cache_clear()
        return get_settings()

    return _override


@pytest.fixture
def linear_levels():
    """A level system with one level every 10 progression."""
    return levels.linear(step=10)


@pytest.fixture
def decaying_attribute(linear_levels):
    """An attribute well above its baseline (progression 10, baseline 1)."""
    return Attribute(progression=10.0, baseline=1.0, level_system=linear_levels)


@pytest.fixture
def test_character(linear_levels):
    """A character with three attributes at different distances from baseline."""
    return Character(
        {
            "stamina": Attribute(progression=10.0, baseline=1.0, level_system=linear_levels),
            "strength": Attribute(progression=25.0, baseline=5.0, level_system=linear_levels),
            "focus": Attribute(progression=2.0, baseline=8.0, level_system=linear_levels),
        }
    )
