"""
Progression system module for the game.

This module scales the enemy of each stage and runs the leaves economy:
rewards, level-ups, shop purchases and equipment upgrades.
"""

from .stage_controller import (
    STAGE_SCALING,
    StageController,
    StageScaling,
    classify_stage,
    create_enemy,
)

__all__ = [
    "STAGE_SCALING",
    "StageController",
    "StageScaling",
    "classify_stage",
    "create_enemy",
]
