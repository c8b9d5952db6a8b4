"""
Stage and progression module for the game.

Scales the enemy of each stage, grants victory rewards, advances the stage and
handles the leaves economy: level-ups, shop purchases, equipping and equipment
upgrades.
"""

import math

from pydantic import BaseModel, Field

from leafquest.character.main import Character
from leafquest.core.constants import (
    CharacterType,
    EquipmentSlot,
    ItemEffectKind,
    ItemId,
    StageType,
)
from leafquest.core.logging import log_info
from leafquest.core.results import ActionResult, ActionStatus
from leafquest.state import SessionState


class StageScaling(BaseModel):
    """Linear HP/FP scaling of the enemy of one stage tier."""

    name: str = Field(
        description="Enemy name. '{stage}' is replaced with the stage number.",
    )
    announcement: str = Field(
        description="Logged when the enemy appears.",
    )
    base_hp: int = Field(ge=1)
    hp_per_stage: int = Field(ge=0)
    base_fp: int = Field(ge=0)
    fp_per_stage: int = Field(ge=0)

    def hp_at(self, stage: int) -> int:
        return self.base_hp + self.hp_per_stage * stage

    def fp_at(self, stage: int) -> int:
        return self.base_fp + self.fp_per_stage * stage


STAGE_SCALING: dict[StageType, StageScaling] = {
    StageType.LEGENDARY_BOSS: StageScaling(
        name="Legendary Boss",
        announcement="A legendary boss appears!",
        base_hp=300,
        hp_per_stage=20,
        base_fp=100,
        fp_per_stage=10,
    ),
    StageType.MAIN_BOSS: StageScaling(
        name="Main Boss",
        announcement="A main boss appears!",
        base_hp=200,
        hp_per_stage=15,
        base_fp=80,
        fp_per_stage=8,
    ),
    StageType.MID_BOSS: StageScaling(
        name="Mid Boss",
        announcement="A mid boss appears!",
        base_hp=150,
        hp_per_stage=10,
        base_fp=60,
        fp_per_stage=6,
    ),
    StageType.REGULAR: StageScaling(
        name="Enemy {stage}",
        announcement="An enemy appears!",
        base_hp=100,
        hp_per_stage=5,
        base_fp=50,
        fp_per_stage=5,
    ),
}

UPGRADED_EFFECT: dict[EquipmentSlot, ItemEffectKind] = {
    EquipmentSlot.WEAPON: ItemEffectKind.DAMAGE,
    EquipmentSlot.ARMOR: ItemEffectKind.DEFENSE,
}


def classify_stage(stage: int) -> StageType:
    """
    Returns the enemy tier of a stage, highest tier first.

    Every tenth stage is a legendary boss, every other fifth stage a main
    boss, every other third stage a mid boss.
    """
    if stage % 10 == 0:
        return StageType.LEGENDARY_BOSS
    if stage % 5 == 0:
        return StageType.MAIN_BOSS
    if stage % 3 == 0:
        return StageType.MID_BOSS
    return StageType.REGULAR


def create_enemy(stage: int) -> Character:
    """Builds a fresh enemy scaled for the given stage."""
    scaling = STAGE_SCALING[classify_stage(stage)]
    return Character(
        name=scaling.name.format(stage=stage),
        hp=scaling.hp_at(stage),
        fp=scaling.fp_at(stage),
        char_type=CharacterType.ENEMY,
    )


class StageController:
    """
    Drives stage setup and the leaves economy of a session.

    Attributes:
        state (SessionState):
            The session context the controller mutates.

    """

    def __init__(self, state: SessionState) -> None:
        self.state = state

    # ============================================================================
    # STAGES
    # ============================================================================

    def setup_stage(self, stage: int) -> Character:
        """
        Replaces the enemy with a fresh one scaled for the given stage.

        Args:
            stage (int):
                The stage to set up.

        Returns:
            Character:
                The new enemy.

        """
        scaling = STAGE_SCALING[classify_stage(stage)]
        self.state.enemy = create_enemy(stage)
        self.state.log.add(f"Stage {stage}: {scaling.announcement}")
        return self.state.enemy

    def grant_reward(self) -> ItemId:
        """
        Adds one item, drawn uniformly from every catalog, to the inventory.

        Returns:
            ItemId:
                The key of the item received.

        """
        reward = self.state.rng.choice(self.state.repo.item_keys())
        self.state.progression.inventory.append(reward)
        self.state.log.add(f"{self.state.player.name} received a {reward.value} as a reward.")
        return reward

    def advance_stage(self) -> int:
        """
        Moves to the next stage, restores the player and pays the stage-clear
        reward.

        Returns:
            int:
                The new stage number.

        """
        progression = self.state.progression
        progression.current_stage += 1
        self.setup_stage(progression.current_stage)
        self.state.player.restore()
        progression.leaves += self.state.config.stage_clear_leaves
        self.state.log.add(
            f"{self.state.player.name} recovered full HP and FP. "
            f"Earned {self.state.config.stage_clear_leaves} leaves."
        )
        log_info(
            "Stage cleared",
            {"stage": progression.current_stage, "leaves": progression.leaves},
        )
        return progression.current_stage

    # ============================================================================
    # LEAVES ECONOMY
    # ============================================================================

    def level_up(self) -> ActionResult:
        """
        Spends leaves to raise the player's max HP and FP.

        Current HP and FP are not raised. Each level-up multiplies the next
        cost by the growth factor, rounded up.
        """
        progression = self.state.progression
        config = self.state.config
        player = self.state.player
        cost = progression.level_up_cost
        if progression.leaves < cost:
            return self._fail(
                ActionStatus.INSUFFICIENT_RESOURCE,
                f"Not enough leaves to level up. {cost} leaves required.",
            )
        progression.leaves -= cost
        progression.level_up_cost = math.ceil(cost * config.level_up_growth)
        player.max_hp += config.level_up_hp_bonus
        player.max_fp += config.level_up_fp_bonus
        message = self.state.log.add(
            f"{player.name} leveled up! Max HP and FP increased. "
            f"Next level up costs {progression.level_up_cost} leaves."
        )
        return ActionResult(status=ActionStatus.SUCCESS, message=message, amount=cost)

    def buy_item(self, key: ItemId | str) -> ActionResult:
        """
        Buys an item from the shop and appends it to the inventory.

        Args:
            key (ItemId | str):
                The catalog key of the item.

        """
        item = self.state.repo.get_item(key)
        if item is None:
            return self._fail(ActionStatus.NOT_FOUND, f"No item named {key} in the shop.")
        progression = self.state.progression
        if progression.leaves < item.cost:
            return self._fail(
                ActionStatus.INSUFFICIENT_RESOURCE,
                "Not enough leaves to buy this item.",
            )
        progression.leaves -= item.cost
        progression.inventory.append(item.key)
        message = self.state.log.add(f"Bought {item.name} for {item.cost} leaves.")
        return ActionResult(status=ActionStatus.SUCCESS, message=message, amount=item.cost)

    def equip_item(self, key: ItemId | str) -> ActionResult:
        """
        Moves a weapon or armor from the inventory into its slot.

        The previously equipped item goes back to the inventory.

        Args:
            key (ItemId | str):
                The catalog key of the item.

        """
        item = self.state.repo.get_item(key)
        progression = self.state.progression
        if item is None or item.key not in progression.inventory:
            return self._fail(ActionStatus.NOT_FOUND, "No such item in inventory.")
        if not item.is_equipment:
            return self._fail(ActionStatus.NOT_USABLE, f"{item.name} cannot be equipped.")
        progression.take(item.key)
        previous = self.state.player.equip(item)
        if previous is not None:
            progression.inventory.append(previous.key)
        message = self.state.log.add(f"{self.state.player.name} equipped a {item.name}.")
        return ActionResult(status=ActionStatus.SUCCESS, message=message)

    def upgrade_weapon(self) -> ActionResult:
        return self.upgrade_equipment(EquipmentSlot.WEAPON)

    def upgrade_armor(self) -> ActionResult:
        return self.upgrade_equipment(EquipmentSlot.ARMOR)

    def upgrade_equipment(self, slot: EquipmentSlot) -> ActionResult:
        """
        Spends leaves to raise the damage or defense of the equipped item.

        Args:
            slot (EquipmentSlot):
                The slot to upgrade.

        Returns:
            ActionResult:
                NOT_FOUND when the slot is empty, INSUFFICIENT_RESOURCE when
                leaves are short. Nothing changes on failure.

        """
        player = self.state.player
        config = self.state.config
        progression = self.state.progression
        noun = slot.display_name.lower()
        item = player.equipped(slot)
        if item is None:
            return self._fail(ActionStatus.NOT_FOUND, f"No {noun} equipped to upgrade.")
        if progression.leaves < config.upgrade_cost:
            return self._fail(
                ActionStatus.INSUFFICIENT_RESOURCE,
                f"Not enough leaves to upgrade {noun}.",
            )
        progression.leaves -= config.upgrade_cost
        kind = UPGRADED_EFFECT[slot]
        upgraded = item.with_bonus(kind, config.upgrade_bonus)
        player.set_equipped(slot, upgraded)
        message = self.state.log.add(
            f"{slot.display_name} upgraded! New {kind.value}: {upgraded.effect[kind]}"
        )
        return ActionResult(
            status=ActionStatus.SUCCESS, message=message, amount=config.upgrade_cost
        )

    def _fail(self, status: ActionStatus, message: str) -> ActionResult:
        self.state.log.add(message)
        return ActionResult(status=status, message=message)
