"""
Character management module for the game.

Defines the Character class holding the mutable combat state of the player and
of the enemy of the current stage: HP, FP, status, timed status effects and
equipped gear.
"""

from pydantic import BaseModel, ConfigDict, Field

from leafquest.core.constants import (
    CharacterStatus,
    CharacterType,
    EquipmentSlot,
    ItemType,
    StatusEffectKind,
)
from leafquest.core.logging import log_debug
from leafquest.core.utils import make_bar
from leafquest.items.item import Item
from leafquest.items.skill import Skill


class SkillCast(BaseModel):
    """The result of a character trying to cast a skill."""

    skill: Skill = Field(
        description="The skill that was attempted.",
    )
    succeeded: bool = Field(
        description="True if the caster had enough FP to cast the skill.",
    )
    damage: int = Field(
        default=0,
        description="Damage the skill deals, weapon bonus included.",
    )
    penalty: float = Field(
        default=0,
        description="HP the caster lost for trying without enough FP.",
    )


class CharacterView(BaseModel):
    """Read-only snapshot of a character for the presentation layer."""

    model_config = ConfigDict(frozen=True)

    name: str
    char_type: CharacterType
    hp: float
    fp: int
    max_hp: int
    max_fp: int
    status: CharacterStatus
    status_effects: dict[StatusEffectKind, int]

    def status_line(self) -> str:
        """Returns a rich-markup status line with HP and FP bars."""
        effects = " ".join(
            kind.colorize(f"{kind.emoji}{turns}")
            for kind, turns in self.status_effects.items()
        )
        line = (
            f"{self.char_type.emoji} {self.char_type.colorize(self.name)} "
            f"HP {make_bar(self.hp, self.max_hp, color='red')} {self.hp:g}/{self.max_hp} "
            f"FP {make_bar(self.fp, self.max_fp, color='blue')} {self.fp}/{self.max_fp} "
            f"[{self.status.value}]"
        )
        return f"{line} {effects}" if effects else line


class Character:
    """
    Represents a combatant: the player, or the enemy of the current stage.

    Attributes:
        name (str):
            The name of the character.
        char_type (CharacterType):
            The side the character fights on.
        hp (float):
            Current hit points, in [0, max_hp]. May be fractional after a
            half-cost FP penalty.
        fp (int):
            Current focus points, in [0, max_fp].
        max_hp (int):
            Maximum hit points.
        max_fp (int):
            Maximum focus points.
        status (CharacterStatus):
            Normal, or Frozen when the next action will be lost.
        status_effects (dict[StatusEffectKind, int]):
            Remaining turns of each timed effect.
        equipped_weapon (Item | None):
            The weapon adding its damage to every skill, if any.
        equipped_armor (Item | None):
            The armor subtracting its defense from every hit, if any.

    """

    def __init__(
        self,
        name: str,
        hp: int,
        fp: int,
        char_type: CharacterType = CharacterType.ENEMY,
    ) -> None:
        self.name = name
        self.char_type = char_type
        self.hp: float = hp
        self.fp: int = fp
        self.max_hp: int = hp
        self.max_fp: int = fp
        self.status = CharacterStatus.NORMAL
        self.status_effects: dict[StatusEffectKind, int] = {}
        self.equipped_weapon: Item | None = None
        self.equipped_armor: Item | None = None

    @property
    def colored_name(self) -> str:
        return self.char_type.colorize(self.name)

    @property
    def weapon_bonus(self) -> int:
        """Damage the equipped weapon adds to every skill."""
        return self.equipped_weapon.damage if self.equipped_weapon else 0

    @property
    def armor_defense(self) -> int:
        """Damage the equipped armor removes from every hit."""
        return self.equipped_armor.defense if self.equipped_armor else 0

    @property
    def is_frozen(self) -> bool:
        return self.status == CharacterStatus.FROZEN

    # ============================================================================
    # RESOURCES
    # ============================================================================

    def take_damage(self, amount: float) -> float:
        """
        Applies damage to the character after subtracting the armor defense.

        Args:
            amount (float):
                The raw damage.

        Returns:
            float:
                The HP actually lost.

        """
        effective = max(amount - self.armor_defense, 0)
        previous = self.hp
        self.hp = max(self.hp - effective, 0)
        log_debug(
            f"{self.name} takes {effective} damage",
            {"raw": amount, "defense": self.armor_defense, "hp": self.hp},
        )
        return previous - self.hp

    def heal(self, amount: float) -> float:
        """
        Increases the character's hp by the given amount, up to max_hp.

        Returns:
            float:
                The actual amount healed.

        """
        previous = self.hp
        self.hp = min(self.hp + max(amount, 0), self.max_hp)
        return self.hp - previous

    def use_fp(self, amount: int) -> bool:
        """
        Reduces the character's FP by the given amount, if there is enough.

        Returns:
            bool:
                True if the FP was spent, False otherwise. Nothing changes on
                failure.

        """
        if self.fp >= amount:
            self.fp -= amount
            return True
        return False

    def recover_fp(self, amount: int) -> int:
        """
        Increases the character's FP by the given amount, up to max_fp.

        Returns:
            int:
                The actual amount of FP recovered.

        """
        previous = self.fp
        self.fp = min(self.fp + amount, self.max_fp)
        return self.fp - previous

    def restore(self) -> None:
        """Refills HP and FP to their maximum."""
        self.hp = self.max_hp
        self.fp = self.max_fp

    def is_alive(self) -> bool:
        return self.hp > 0

    def is_dead(self) -> bool:
        return self.hp <= 0

    # ============================================================================
    # SKILLS AND EFFECTS
    # ============================================================================

    def cast_skill(self, skill: Skill) -> SkillCast:
        """
        Tries to cast a skill, paying its FP cost.

        Without enough FP the caster loses half the FP cost in HP instead, and
        the skill deals no damage.

        Args:
            skill (Skill):
                The skill to cast.

        Returns:
            SkillCast:
                Whether the cast succeeded, the damage it deals and the penalty
                paid.

        """
        if self.use_fp(skill.fp_cost):
            return SkillCast(
                skill=skill,
                succeeded=True,
                damage=skill.damage + self.weapon_bonus,
            )
        lost = self.take_damage(skill.penalty)
        return SkillCast(skill=skill, succeeded=False, damage=0, penalty=lost)

    def apply_skill(self, skill: Skill) -> int:
        """Casts a skill and returns only the damage it deals."""
        return self.cast_skill(skill).damage

    def add_status_effect(self, kind: StatusEffectKind, turns: int) -> None:
        """
        Sets the remaining turns of a status effect, replacing any previous
        count for the same kind.
        """
        self.status_effects[kind] = turns

    # ============================================================================
    # EQUIPMENT
    # ============================================================================

    def equip(self, item: Item) -> Item | None:
        """
        Puts a weapon or armor in its slot.

        Args:
            item (Item):
                The weapon or armor to equip.

        Raises:
            ValueError:
                If the item is a potion.

        Returns:
            Item | None:
                The item previously in the slot, if any.

        """
        if item.item_type == ItemType.WEAPON:
            previous, self.equipped_weapon = self.equipped_weapon, item
        elif item.item_type == ItemType.ARMOR:
            previous, self.equipped_armor = self.equipped_armor, item
        else:
            raise ValueError(f"Item '{item.name}' cannot be equipped.")
        return previous

    def equipped(self, slot: EquipmentSlot) -> Item | None:
        """Returns the item in the given slot."""
        if slot == EquipmentSlot.WEAPON:
            return self.equipped_weapon
        return self.equipped_armor

    def set_equipped(self, slot: EquipmentSlot, item: Item | None) -> None:
        """Replaces the item in the given slot."""
        if slot == EquipmentSlot.WEAPON:
            self.equipped_weapon = item
        else:
            self.equipped_armor = item

    def view(self) -> CharacterView:
        """Returns a read-only snapshot of the character."""
        return CharacterView(
            name=self.name,
            char_type=self.char_type,
            hp=self.hp,
            fp=self.fp,
            max_hp=self.max_hp,
            max_fp=self.max_fp,
            status=self.status,
            status_effects=dict(self.status_effects),
        )

    def __str__(self) -> str:
        return self.colored_name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', type={self.char_type})"
