"""
Shared fixtures for the game tests.
"""

import random

import pytest
from leafquest.core.content import ContentRepository
from leafquest.persistence.save_slot import InMemorySaveSlot
from leafquest.session import GameSession


@pytest.fixture
def repo():
    return ContentRepository()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def save_slot():
    return InMemorySaveSlot()


@pytest.fixture
def session(rng, save_slot):
    """A fresh session at stage 1 with a seeded random source."""
    return GameSession(save_slot=save_slot, rng=rng)
