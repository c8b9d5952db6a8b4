"""
Item module for the game.

Defines the immutable Item model used for weapons, armor and potions.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from leafquest.core.constants import ItemEffectKind, ItemId, ItemType


class Item(BaseModel):
    """
    Represents an item that can be bought, dropped as a reward, equipped or
    consumed.

    The effect maps each kind of magnitude the item carries to its value,
    e.g. a sword carries {damage: 10} and a healing potion {heal: 30}.
    """

    model_config = ConfigDict(frozen=True)

    key: ItemId = Field(
        description="The catalog key of the item.",
    )
    name: str = Field(
        description="The display name of the item.",
    )
    item_type: ItemType = Field(
        description="Whether the item is a weapon, armor or potion.",
    )
    effect: dict[ItemEffectKind, int] = Field(
        default_factory=dict,
        description="Magnitude of each effect the item carries.",
    )
    cost: int = Field(
        description="Price of the item in leaves.",
        ge=0,
    )

    @property
    def damage(self) -> int:
        return self.effect.get(ItemEffectKind.DAMAGE, 0)

    @property
    def defense(self) -> int:
        return self.effect.get(ItemEffectKind.DEFENSE, 0)

    @property
    def is_equipment(self) -> bool:
        return self.item_type in (ItemType.WEAPON, ItemType.ARMOR)

    def with_bonus(self, kind: ItemEffectKind, bonus: int) -> "Item":
        """
        Returns a copy of the item with one of its effects increased.

        Args:
            kind (ItemEffectKind):
                The effect to increase.
            bonus (int):
                The amount added to the effect.

        Returns:
            Item:
                The upgraded copy. The original item is left untouched.

        """
        effect = dict(self.effect)
        effect[kind] = effect.get(kind, 0) + bonus
        return self.model_copy(update={"effect": effect})

    def model_post_init(self, _: Any) -> None:
        if not self.name:
            raise ValueError("Item name must not be empty.")
        if self.item_type == ItemType.WEAPON and ItemEffectKind.DAMAGE not in self.effect:
            raise ValueError(f"Weapon '{self.name}' must have a damage effect.")
        if self.item_type == ItemType.ARMOR and ItemEffectKind.DEFENSE not in self.effect:
            raise ValueError(f"Armor '{self.name}' must have a defense effect.")
