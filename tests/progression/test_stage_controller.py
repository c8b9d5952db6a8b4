"""
Tests for stage scaling, rewards and the leaves economy.
"""

import pytest
from leafquest.core.constants import CharacterType, ItemId, StageType
from leafquest.core.results import ActionStatus
from leafquest.progression.stage_controller import classify_stage, create_enemy


@pytest.fixture
def stages(session):
    return session.stages


@pytest.fixture
def progression(session):
    return session.state.progression


@pytest.mark.parametrize(
    "stage, expected",
    [
        (1, StageType.REGULAR),
        (3, StageType.MID_BOSS),
        (5, StageType.MAIN_BOSS),
        (9, StageType.MID_BOSS),
        (10, StageType.LEGENDARY_BOSS),
        (15, StageType.MAIN_BOSS),
        (30, StageType.LEGENDARY_BOSS),
    ],
)
def test_classify_stage(stage, expected):
    assert classify_stage(stage) == expected


@pytest.mark.parametrize(
    "stage, name, hp, fp",
    [
        (1, "Enemy 1", 105, 55),
        (7, "Enemy 7", 135, 85),
        (9, "Mid Boss", 240, 114),
        (10, "Legendary Boss", 500, 200),
        (15, "Main Boss", 425, 200),
    ],
)
def test_create_enemy_scales_with_stage(stage, name, hp, fp):
    enemy = create_enemy(stage)
    assert enemy.name == name
    assert enemy.hp == enemy.max_hp == hp
    assert enemy.fp == enemy.max_fp == fp
    assert enemy.char_type == CharacterType.ENEMY


def test_setup_stage_replaces_enemy(session, stages):
    old = session.enemy
    enemy = stages.setup_stage(5)
    assert session.enemy is enemy
    assert enemy is not old
    assert enemy.name == "Main Boss"
    assert session.log[-1] == "Stage 5: A main boss appears!"


def test_new_session_starts_at_stage_one(session):
    assert session.enemy.name == "Enemy 1"
    assert session.log == (
        "Stage 1: An enemy appears!",
        "No saved game data found.",
        "Game saved!",
    )


def test_grant_reward_appends_drawn_item(session, stages, progression, mocker):
    choice = mocker.patch.object(
        session.state.rng, "choice", return_value=ItemId.SWORD
    )
    assert stages.grant_reward() == ItemId.SWORD
    assert progression.inventory == [ItemId.SWORD]
    assert session.log[-1] == "Player received a sword as a reward."
    keys = choice.call_args.args[0]
    assert len(keys) == 8


def test_advance_stage(session, stages, progression):
    session.player.hp = 12
    session.player.fp = 3
    assert stages.advance_stage() == 2
    assert progression.current_stage == 2
    assert progression.leaves == 10
    assert session.player.hp == 100
    assert session.player.fp == 50
    assert session.enemy.name == "Enemy 2"


# ============================================================================
# LEVEL UP
# ============================================================================


def test_level_up_cost_grows(session, stages, progression):
    progression.leaves = 50 + 75 + 113
    costs = []
    for _ in range(3):
        result = stages.level_up()
        assert result.status == ActionStatus.SUCCESS
        costs.append(progression.level_up_cost)
    assert costs == [75, 113, 170]
    assert progression.leaves == 0
    assert session.player.max_hp == 130
    assert session.player.max_fp == 65


def test_level_up_does_not_raise_current_hp(session, stages, progression):
    progression.leaves = 50
    stages.level_up()
    assert session.player.max_hp == 110
    assert session.player.hp == 100


def test_level_up_without_enough_leaves(session, stages, progression):
    progression.leaves = 49
    result = stages.level_up()
    assert result.status == ActionStatus.INSUFFICIENT_RESOURCE
    assert result.message == "Not enough leaves to level up. 50 leaves required."
    assert progression.leaves == 49
    assert progression.level_up_cost == 50
    assert session.player.max_hp == 100


# ============================================================================
# SHOP AND EQUIPMENT
# ============================================================================


def test_buy_item(session, stages, progression):
    progression.leaves = 60
    result = stages.buy_item("sword")
    assert result.status == ActionStatus.SUCCESS
    assert result.message == "Bought Sword for 50 leaves."
    assert progression.leaves == 10
    assert progression.inventory == [ItemId.SWORD]


def test_buy_same_item_twice(stages, progression):
    progression.leaves = 40
    stages.buy_item("healingPotion")
    stages.buy_item("healingPotion")
    assert progression.count(ItemId.HEALING_POTION) == 2
    assert progression.leaves == 0


def test_buy_item_without_enough_leaves(stages, progression):
    progression.leaves = 49
    result = stages.buy_item("sword")
    assert result.status == ActionStatus.INSUFFICIENT_RESOURCE
    assert result.message == "Not enough leaves to buy this item."
    assert progression.inventory == []
    assert progression.leaves == 49


def test_buy_unknown_item(stages, progression):
    progression.leaves = 100
    assert stages.buy_item("bow").status == ActionStatus.NOT_FOUND
    assert progression.leaves == 100


def test_equip_item_swaps_with_inventory(session, stages, progression):
    progression.inventory = [ItemId.SWORD, ItemId.AXE]
    assert stages.equip_item("sword").status == ActionStatus.SUCCESS
    assert session.player.equipped_weapon.key == ItemId.SWORD
    assert progression.inventory == [ItemId.AXE]
    stages.equip_item("axe")
    assert session.player.equipped_weapon.key == ItemId.AXE
    assert progression.inventory == [ItemId.SWORD]


def test_equip_armor(session, stages, progression):
    progression.inventory = [ItemId.HELMET]
    stages.equip_item(ItemId.HELMET)
    assert session.player.armor_defense == 5


def test_equip_potion_is_refused(session, stages, progression):
    progression.inventory = [ItemId.HEALING_POTION]
    result = stages.equip_item("healingPotion")
    assert result.status == ActionStatus.NOT_USABLE
    assert progression.inventory == [ItemId.HEALING_POTION]


def test_equip_item_not_owned(stages):
    assert stages.equip_item("sword").status == ActionStatus.NOT_FOUND


def test_upgrade_weapon(session, stages, progression, repo):
    progression.inventory = [ItemId.SWORD]
    stages.equip_item("sword")
    progression.leaves = 30
    result = stages.upgrade_weapon()
    assert result.status == ActionStatus.SUCCESS
    assert result.message == "Weapon upgraded! New damage: 15"
    assert session.player.weapon_bonus == 15
    assert progression.leaves == 0
    assert repo.get_item(ItemId.SWORD).damage == 10


def test_upgrade_armor(session, stages, progression):
    progression.inventory = [ItemId.SHIELD]
    stages.equip_item("shield")
    progression.leaves = 60
    stages.upgrade_armor()
    stages.upgrade_armor()
    assert session.player.armor_defense == 20
    assert progression.leaves == 0


def test_upgrade_without_equipment(stages, progression):
    progression.leaves = 100
    result = stages.upgrade_weapon()
    assert result.status == ActionStatus.NOT_FOUND
    assert result.message == "No weapon equipped to upgrade."
    assert progression.leaves == 100


def test_upgrade_without_enough_leaves(session, stages, progression):
    progression.inventory = [ItemId.ARMOR]
    stages.equip_item("armor")
    progression.leaves = 29
    result = stages.upgrade_armor()
    assert result.status == ActionStatus.INSUFFICIENT_RESOURCE
    assert result.message == "Not enough leaves to upgrade armor."
    assert session.player.armor_defense == 15
