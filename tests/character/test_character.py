"""
Tests for the Character combat state.
"""

import pytest
from leafquest.character.main import Character
from leafquest.core.constants import (
    CharacterStatus,
    CharacterType,
    ItemId,
    SkillId,
    StatusEffectKind,
)


@pytest.fixture
def player():
    return Character(name="Player", hp=100, fp=50, char_type=CharacterType.PLAYER)


@pytest.fixture
def sword(repo):
    return repo.get_item(ItemId.SWORD)


@pytest.fixture
def shield(repo):
    return repo.get_item(ItemId.SHIELD)


def test_new_character_starts_full(player):
    assert player.hp == player.max_hp == 100
    assert player.fp == player.max_fp == 50
    assert player.status == CharacterStatus.NORMAL
    assert player.status_effects == {}
    assert player.equipped_weapon is None
    assert player.equipped_armor is None


def test_take_damage_unarmored(player):
    lost = player.take_damage(30)
    assert lost == 30
    assert player.hp == 70


def test_take_damage_reduced_by_armor(player, shield):
    player.equip(shield)
    lost = player.take_damage(30)
    assert lost == 20
    assert player.hp == 80


def test_take_damage_below_defense_does_nothing(player, shield):
    player.equip(shield)
    assert player.take_damage(8) == 0
    assert player.hp == 100


def test_take_damage_clamps_at_zero(player):
    player.take_damage(500)
    assert player.hp == 0
    assert player.is_dead()
    assert not player.is_alive()


def test_use_fp_success(player):
    assert player.use_fp(20)
    assert player.fp == 30


def test_use_fp_failure_leaves_fp_untouched(player):
    player.fp = 5
    assert not player.use_fp(10)
    assert player.fp == 5


def test_recover_fp_clamps_to_max(player):
    player.fp = 40
    assert player.recover_fp(20) == 10
    assert player.fp == 50


def test_heal_clamps_to_max(player):
    player.hp = 90
    assert player.heal(30) == 10
    assert player.hp == 100


def test_apply_skill_with_enough_fp(player, repo):
    special = repo.get_skill(SkillId.SPECIAL)
    damage = player.apply_skill(special)
    assert damage == 40
    assert player.fp == 30
    assert player.hp == 100


def test_apply_skill_adds_weapon_bonus(player, repo, sword):
    player.equip(sword)
    assert player.apply_skill(repo.get_skill(SkillId.ATTACK)) == 30


def test_apply_skill_without_enough_fp_costs_half_in_hp(player, repo):
    """
    Test that a failed cast costs exactly half the FP cost in HP, unrounded.
    """
    fireball = repo.get_skill(SkillId.FIREBALL)
    player.fp = 10
    damage = player.apply_skill(fireball)
    assert damage == 0
    assert player.fp == 10
    assert player.hp == 92.5


def test_apply_skill_penalty_floors_hp_at_zero(player, repo):
    player.fp = 0
    player.hp = 3
    player.apply_skill(repo.get_skill(SkillId.THUNDER_STRIKE))
    assert player.hp == 0


def test_cast_skill_reports_failure(player, repo):
    player.fp = 0
    cast = player.cast_skill(repo.get_skill(SkillId.SPECIAL))
    assert not cast.succeeded
    assert cast.damage == 0
    assert cast.penalty == 10


def test_penalty_reduced_by_armor(player, repo, shield):
    """
    The penalty goes through take_damage, so armor absorbs it.
    """
    player.equip(shield)
    player.fp = 0
    cast = player.cast_skill(repo.get_skill(SkillId.THUNDER_STRIKE))
    assert cast.penalty == 2.5
    assert player.hp == 97.5


def test_add_status_effect_overwrites(player):
    player.add_status_effect(StatusEffectKind.BURN, 3)
    player.add_status_effect(StatusEffectKind.BURN, 2)
    assert player.status_effects[StatusEffectKind.BURN] == 2


def test_equip_returns_previous_item(player, repo, sword):
    axe = repo.get_item(ItemId.AXE)
    assert player.equip(sword) is None
    assert player.equip(axe) == sword
    assert player.equipped_weapon == axe


def test_equip_potion_raises(player, repo):
    with pytest.raises(ValueError, match="cannot be equipped"):
        player.equip(repo.get_item(ItemId.HEALING_POTION))


def test_restore_refills_hp_and_fp(player):
    player.hp = 1
    player.fp = 0
    player.restore()
    assert player.hp == 100
    assert player.fp == 50


def test_view_is_a_detached_snapshot(player):
    view = player.view()
    player.take_damage(10)
    player.add_status_effect(StatusEffectKind.POISON, 3)
    assert view.hp == 100
    assert view.status_effects == {}
    assert player.view().hp == 90


def test_view_status_line(player):
    player.add_status_effect(StatusEffectKind.BURN, 2)
    line = player.view().status_line()
    assert "Player" in line
    assert "100/100" in line
    assert "50/50" in line
    assert "Normal" in line
