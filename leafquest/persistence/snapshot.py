"""
Snapshot models for the game.

A SaveSnapshot is the flat serialization of the player, the enemy and the
progression of a session, written to the save slot as JSON.
"""

from typing import Any

from pydantic import BaseModel, Field

from leafquest.character.main import Character
from leafquest.core.constants import CharacterStatus, ItemId, StatusEffectKind
from leafquest.items.item import Item
from leafquest.state import ProgressionState, SessionState


class CharacterSnapshot(BaseModel):
    """Every persisted field of a character."""

    name: str
    hp: int | float = Field(ge=0)
    fp: int = Field(ge=0)
    max_hp: int = Field(ge=0)
    max_fp: int = Field(ge=0)
    status: CharacterStatus = CharacterStatus.NORMAL
    status_effects: dict[StatusEffectKind, int] = Field(default_factory=dict)
    equipped_weapon: Item | None = None
    equipped_armor: Item | None = None

    def model_post_init(self, _: Any) -> None:
        if self.hp > self.max_hp:
            raise ValueError(f"{self.name} has {self.hp} HP over a maximum of {self.max_hp}.")
        if self.fp > self.max_fp:
            raise ValueError(f"{self.name} has {self.fp} FP over a maximum of {self.max_fp}.")

    @classmethod
    def capture(cls, character: Character) -> "CharacterSnapshot":
        """Copies the persisted fields out of a live character."""
        return cls(
            name=character.name,
            hp=character.hp,
            fp=character.fp,
            max_hp=character.max_hp,
            max_fp=character.max_fp,
            status=character.status,
            status_effects=dict(character.status_effects),
            equipped_weapon=character.equipped_weapon,
            equipped_armor=character.equipped_armor,
        )

    def restore_into(self, character: Character) -> None:
        """Overwrites the persisted fields of a live character."""
        character.name = self.name
        character.hp = self.hp
        character.fp = self.fp
        character.max_hp = self.max_hp
        character.max_fp = self.max_fp
        character.status = self.status
        character.status_effects = dict(self.status_effects)
        character.equipped_weapon = self.equipped_weapon
        character.equipped_armor = self.equipped_armor


class SaveSnapshot(BaseModel):
    """The whole persisted state of a session."""

    player: CharacterSnapshot
    enemy: CharacterSnapshot
    current_stage: int = Field(ge=1)
    inventory: list[ItemId] = Field(default_factory=list)
    leaves: int = Field(ge=0)
    level_up_cost: int = Field(ge=0)

    @classmethod
    def capture(cls, state: SessionState) -> "SaveSnapshot":
        """Builds a snapshot of the live session state."""
        progression = state.progression
        return cls(
            player=CharacterSnapshot.capture(state.player),
            enemy=CharacterSnapshot.capture(state.enemy),
            current_stage=progression.current_stage,
            inventory=list(progression.inventory),
            leaves=progression.leaves,
            level_up_cost=progression.level_up_cost,
        )

    def progression(self) -> ProgressionState:
        """Returns the progression part of the snapshot as a fresh state."""
        return ProgressionState(
            current_stage=self.current_stage,
            leaves=self.leaves,
            level_up_cost=self.level_up_cost,
            inventory=list(self.inventory),
        )
