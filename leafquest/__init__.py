"""
Leafquest: a turn-based, stage-based combat engine.

This package contains the headless core of the game: characters, skills and
items, status effects, enemy AI, stage progression and persistence. A
presentation layer drives it through GameSession.
"""

from .core.config import GameConfig, load_config
from .session import GameSession

__all__ = [
    "GameConfig",
    "GameSession",
    "load_config",
]
