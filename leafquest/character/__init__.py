"""
Character system module for the game.

This module holds the mutable combat state of a fighter: HP, FP, status,
timed status effects and equipped gear.
"""

from .main import Character, CharacterView, SkillCast

__all__ = [
    "Character",
    "CharacterView",
    "SkillCast",
]
