"""
Status effect module for the game.

Defines the per-turn rule of each timed status effect and the tick that
applies and decays every active effect on a character.
"""

import math
import random

from pydantic import BaseModel, Field

from leafquest.character.main import Character
from leafquest.core.constants import CharacterStatus, StatusEffectKind
from leafquest.core.logging import log_debug


class StatusEffectRule(BaseModel):
    """
    What an active status effect does to its bearer each tick.
    """

    kind: StatusEffectKind = Field(
        description="The status effect this rule belongs to.",
    )
    max_hp_fraction: float = Field(
        default=0.0,
        description="Fraction of the bearer's max HP dealt as damage each tick.",
        ge=0.0,
        le=1.0,
    )
    freezes: bool = Field(
        default=False,
        description="Whether the effect may freeze its bearer each tick.",
    )

    def tick_damage(self, character: Character) -> int:
        """Returns the raw damage dealt to the character this tick."""
        return math.floor(character.max_hp * self.max_hp_fraction)


STATUS_EFFECT_RULES: dict[StatusEffectKind, StatusEffectRule] = {
    StatusEffectKind.BURN: StatusEffectRule(
        kind=StatusEffectKind.BURN, max_hp_fraction=0.20
    ),
    StatusEffectKind.FREEZE: StatusEffectRule(
        kind=StatusEffectKind.FREEZE, freezes=True
    ),
    StatusEffectKind.SHOCK: StatusEffectRule(
        kind=StatusEffectKind.SHOCK, max_hp_fraction=0.05
    ),
    StatusEffectKind.POISON: StatusEffectRule(
        kind=StatusEffectKind.POISON, max_hp_fraction=0.10
    ),
}


class StatusTick(BaseModel):
    """What a single tick did to a character."""

    damage: dict[StatusEffectKind, float] = Field(
        default_factory=dict,
        description="HP lost to each damaging effect.",
    )
    froze: bool = Field(
        default=False,
        description="Whether a freeze effect froze the character.",
    )
    expired: list[StatusEffectKind] = Field(
        default_factory=list,
        description="Effects that ran out and were removed.",
    )

    @property
    def total_damage(self) -> float:
        return sum(self.damage.values())


def apply_status_effects(
    character: Character,
    rng: random.Random,
    freeze_chance: float = 0.2,
) -> StatusTick:
    """
    Applies every active status effect on the character once and decrements
    its remaining turns.

    Effects with no remaining turns are skipped. An effect whose counter
    reaches zero during this tick is removed.

    Args:
        character (Character):
            The bearer of the effects.
        rng (random.Random):
            Source of the freeze proc draw.
        freeze_chance (float):
            Chance an active freeze effect freezes the bearer.

    Returns:
        StatusTick:
            The damage dealt, whether the bearer froze and which effects
            expired.

    """
    tick = StatusTick()
    for kind in list(character.status_effects):
        turns = character.status_effects[kind]
        if turns <= 0:
            continue
        rule = STATUS_EFFECT_RULES[kind]
        if rule.freezes:
            if rng.random() < freeze_chance:
                character.status = CharacterStatus.FROZEN
                tick.froze = True
        else:
            tick.damage[kind] = character.take_damage(rule.tick_damage(character))
        turns -= 1
        if turns == 0:
            del character.status_effects[kind]
            tick.expired.append(kind)
        else:
            character.status_effects[kind] = turns
    if tick.damage or tick.froze:
        log_debug(
            f"Status effects ticked on {character.name}",
            {"damage": tick.total_damage, "froze": tick.froze, "hp": character.hp},
        )
    return tick
