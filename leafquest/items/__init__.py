"""
Items system module for the game.

This module contains the immutable skill and item definitions loaded from the
catalogs in the data directory.
"""

from .item import Item
from .skill import Skill

__all__ = [
    "Item",
    "Skill",
]
