"""
Effects system module for the game.

This module contains the timed status effects (burn, freeze, shock, poison)
and the per-turn tick that applies and decays them.
"""

from .status_effect import (
    STATUS_EFFECT_RULES,
    StatusEffectRule,
    StatusTick,
    apply_status_effects,
)

__all__ = [
    "STATUS_EFFECT_RULES",
    "StatusEffectRule",
    "StatusTick",
    "apply_status_effects",
]
