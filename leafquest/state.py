"""
Session state module for the game.

Groups everything a session mutates (the player, the enemy of the current
stage, the progression and the combat log) together with the configuration,
the catalogs and the random source, so the controllers share one explicit
context instead of free-standing globals.
"""

import random

from pydantic import BaseModel, Field

from leafquest.character.main import Character
from leafquest.core.combat_log import CombatLog
from leafquest.core.config import GameConfig
from leafquest.core.constants import ItemId
from leafquest.core.content import ContentRepository


class ProgressionState(BaseModel):
    """
    Stage, currency and inventory of a session.
    """

    current_stage: int = Field(
        default=1,
        description="The stage being fought.",
        ge=1,
    )
    leaves: int = Field(
        default=0,
        description="Currency earned from stage victories.",
        ge=0,
    )
    level_up_cost: int = Field(
        default=50,
        description="Leaves required for the next level-up.",
        ge=0,
    )
    inventory: list[ItemId] = Field(
        default_factory=list,
        description="Owned item keys in acquisition order. Duplicates allowed.",
    )

    def count(self, key: ItemId) -> int:
        """Returns how many copies of an item are owned."""
        return self.inventory.count(key)

    def take(self, key: ItemId) -> bool:
        """Removes the first copy of an item, returning False if none is owned."""
        if key not in self.inventory:
            return False
        self.inventory.remove(key)
        return True


class SessionState:
    """
    The single context owned by a session.

    Attributes:
        config (GameConfig):
            Tunable constants.
        repo (ContentRepository):
            Skill and item catalogs.
        rng (random.Random):
            Source of every random draw.
        log (CombatLog):
            Append-only event log.
        player (Character):
            The player character, kept for the whole session.
        enemy (Character):
            The enemy of the current stage, replaced at every stage setup.
        progression (ProgressionState):
            Stage, leaves, level-up cost and inventory.

    """

    def __init__(
        self,
        config: GameConfig,
        repo: ContentRepository,
        rng: random.Random,
        player: Character,
        enemy: Character,
        progression: ProgressionState,
    ) -> None:
        self.config = config
        self.repo = repo
        self.rng = rng
        self.log = CombatLog()
        self.player = player
        self.enemy = enemy
        self.progression = progression
