"""
Core system module for the game.

This module contains the fundamental components shared by the rest of the
engine: enumerations, configuration, logging, action results and the combat
log. The content repository lives in core.content and is imported from there.
"""

from .combat_log import CombatLog
from .config import GameConfig, load_config
from .constants import (
    CharacterStatus,
    CharacterType,
    EquipmentSlot,
    ItemEffectKind,
    ItemId,
    ItemType,
    SkillId,
    StageType,
    StatusEffectKind,
)
from .results import ActionResult, ActionStatus, BattleOutcome

__all__ = [
    # Import from combat_log.py
    "CombatLog",
    # Import from config.py
    "GameConfig",
    "load_config",
    # Import from constants.py
    "CharacterStatus",
    "CharacterType",
    "EquipmentSlot",
    "ItemEffectKind",
    "ItemId",
    "ItemType",
    "SkillId",
    "StageType",
    "StatusEffectKind",
    # Import from results.py
    "ActionResult",
    "ActionStatus",
    "BattleOutcome",
]
