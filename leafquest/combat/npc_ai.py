"""
Enemy AI module for the game.

The enemy picks one of four actions from a single uniform draw, with fixed
probabilities and no knowledge of the fight.
"""

import random

from leafquest.core.constants import NiceEnum, SkillId


class EnemyAction(NiceEnum):
    """The actions available to an enemy."""

    ATTACK = "ATTACK"
    FIREBALL = "FIREBALL"
    ICE_BLAST = "ICE_BLAST"
    REST = "REST"

    @property
    def skill_id(self) -> SkillId | None:
        """Returns the skill cast by this action, None for resting."""
        return {
            EnemyAction.ATTACK: SkillId.ATTACK,
            EnemyAction.FIREBALL: SkillId.FIREBALL,
            EnemyAction.ICE_BLAST: SkillId.ICE_BLAST,
        }.get(self)


# Upper bound (exclusive) of the draw selecting each action, in order.
ENEMY_ACTION_TABLE: list[tuple[float, EnemyAction]] = [
    (0.3, EnemyAction.ATTACK),
    (0.5, EnemyAction.FIREBALL),
    (0.7, EnemyAction.ICE_BLAST),
    (1.0, EnemyAction.REST),
]


def choose_enemy_action(draw: float) -> EnemyAction:
    """
    Maps a uniform draw in [0, 1) to an enemy action.

    Args:
        draw (float):
            The random draw.

    Returns:
        EnemyAction:
            Attack below 0.3, fireball below 0.5, ice blast below 0.7, and
            rest otherwise.

    """
    for upper_bound, action in ENEMY_ACTION_TABLE:
        if draw < upper_bound:
            return action
    return EnemyAction.REST


def roll_enemy_action(rng: random.Random) -> EnemyAction:
    """Draws once from the random source and picks the enemy action."""
    return choose_enemy_action(rng.random())
