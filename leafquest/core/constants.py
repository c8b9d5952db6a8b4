"""
Constants and enumerations for the game.

Defines the identities of every skill and item, the status effect kinds,
character and stage types, and the other core game elements used throughout
the combat engine.
"""

from enum import Enum


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class CharacterType(NiceEnum):
    """Defines the side a character fights on."""

    PLAYER = "PLAYER"
    ENEMY = "ENEMY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this character type."""
        return {
            CharacterType.PLAYER: "👤",
            CharacterType.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this character type."""
        return {
            CharacterType.PLAYER: "bold blue",
            CharacterType.ENEMY: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies character type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class CharacterStatus(NiceEnum):
    """The coarse status shown next to a character's bars."""

    NORMAL = "Normal"
    FROZEN = "Frozen"


class SkillId(NiceEnum):
    """Identity of every skill in the skill catalog."""

    ATTACK = "attack"
    SPECIAL = "special"
    FIREBALL = "fireball"
    HEAL = "heal"
    ICE_BLAST = "iceBlast"
    SHOCK = "shock"
    THUNDER_STRIKE = "thunderStrike"
    POISON_DART = "poisonDart"


class ItemId(NiceEnum):
    """Identity of every item sold in the shop or dropped as a reward."""

    SWORD = "sword"
    AXE = "axe"
    STAFF = "staff"
    SHIELD = "shield"
    HELMET = "helmet"
    ARMOR = "armor"
    HEALING_POTION = "healingPotion"
    MAGIC_POTION = "magicPotion"


class ItemType(NiceEnum):
    """Defines the category of an item."""

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this item type."""
        return {
            ItemType.WEAPON: "🗡️",
            ItemType.ARMOR: ":shield:",
            ItemType.POTION: "🧪",
        }.get(self, "❔")


class ItemEffectKind(NiceEnum):
    """The kinds of magnitude an item can carry."""

    DAMAGE = "damage"
    DEFENSE = "defense"
    MAGIC = "magic"
    HEAL = "heal"
    RECOVER_FP = "recoverFP"


class StatusEffectKind(NiceEnum):
    """Timed effects a skill can inflict on its target."""

    BURN = "burn"
    FREEZE = "freeze"
    SHOCK = "shock"
    POISON = "poison"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status effect."""
        return {
            StatusEffectKind.BURN: "🔥",
            StatusEffectKind.FREEZE: "❄️",
            StatusEffectKind.SHOCK: "⚡",
            StatusEffectKind.POISON: "☠️",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status effect."""
        return {
            StatusEffectKind.BURN: "bold red",
            StatusEffectKind.FREEZE: "bold cyan",
            StatusEffectKind.SHOCK: "bold yellow",
            StatusEffectKind.POISON: "bold green",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies status effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class StageType(NiceEnum):
    """The tier of enemy met at a given stage."""

    REGULAR = "REGULAR"
    MID_BOSS = "MID_BOSS"
    MAIN_BOSS = "MAIN_BOSS"
    LEGENDARY_BOSS = "LEGENDARY_BOSS"


class EquipmentSlot(NiceEnum):
    """The two slots a character can fill with gear."""

    WEAPON = "WEAPON"
    ARMOR = "ARMOR"
