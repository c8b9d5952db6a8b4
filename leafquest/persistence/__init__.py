"""
Persistence system module for the game.

This module serializes the session state into a single save slot and restores
it on load.
"""

from .persistence_controller import PersistenceController
from .save_slot import InMemorySaveSlot, JsonFileSaveSlot, SaveSlot
from .snapshot import CharacterSnapshot, SaveSnapshot

__all__ = [
    "PersistenceController",
    "InMemorySaveSlot",
    "JsonFileSaveSlot",
    "SaveSlot",
    "CharacterSnapshot",
    "SaveSnapshot",
]
