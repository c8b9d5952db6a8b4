"""
Skill module for the game.

Defines the immutable Skill model shared by the player and the enemy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from leafquest.core.constants import SkillId, StatusEffectKind


class Skill(BaseModel):
    """
    Represents a skill that costs FP and deals damage to a target.

    A negative damage value heals the caster instead. A skill may also carry a
    special effect that is inflicted on its target whether or not it hits.
    """

    model_config = ConfigDict(frozen=True)

    key: SkillId = Field(
        description="The catalog key of the skill.",
    )
    name: str = Field(
        description="The display name of the skill.",
    )
    fp_cost: int = Field(
        description="FP spent to cast the skill.",
        ge=0,
    )
    damage: int = Field(
        description="Damage dealt on a successful cast. Negative values heal.",
    )
    special_effect: StatusEffectKind | None = Field(
        default=None,
        description="Status effect inflicted on the target, if any.",
    )

    @property
    def is_healing(self) -> bool:
        return self.damage < 0

    @property
    def penalty(self) -> float:
        """HP lost by a caster who tries the skill without enough FP."""
        return self.fp_cost / 2

    def model_post_init(self, _: Any) -> None:
        if not self.name:
            raise ValueError("Skill name must not be empty.")
