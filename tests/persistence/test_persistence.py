"""
Tests for saving and loading the session state.
"""

import json

import pytest
from leafquest.core.config import GameConfig
from leafquest.core.constants import (
    CharacterStatus,
    ItemEffectKind,
    ItemId,
    StatusEffectKind,
)
from leafquest.core.results import ActionStatus
from leafquest.persistence.save_slot import InMemorySaveSlot, JsonFileSaveSlot
from leafquest.persistence.snapshot import CharacterSnapshot, SaveSnapshot
from leafquest.session import GameSession


@pytest.fixture
def played(session, repo):
    """A session moved away from its starting state."""
    state = session.state
    state.progression.current_stage = 4
    state.progression.leaves = 35
    state.progression.level_up_cost = 75
    state.progression.inventory = [ItemId.HEALING_POTION, ItemId.AXE]
    state.player.hp = 62.5
    state.player.fp = 18
    state.player.max_hp = 110
    state.player.max_fp = 55
    state.player.status = CharacterStatus.FROZEN
    state.player.add_status_effect(StatusEffectKind.POISON, 2)
    state.player.equip(repo.get_item(ItemId.SWORD).with_bonus(ItemEffectKind.DAMAGE, 5))
    state.player.equip(repo.get_item(ItemId.SHIELD))
    session.stages.setup_stage(4)
    state.enemy.take_damage(30)
    state.enemy.add_status_effect(StatusEffectKind.BURN, 1)
    return session


def test_round_trip_restores_everything(played):
    before = SaveSnapshot.capture(played.state)
    assert played.save().status == ActionStatus.SUCCESS

    state = played.state
    state.player.restore()
    state.player.status = CharacterStatus.NORMAL
    state.player.status_effects = {}
    state.player.equipped_weapon = None
    state.player.equipped_armor = None
    state.progression.leaves = 0
    state.progression.inventory = []
    played.stages.setup_stage(9)

    result = played.load()
    assert result.status == ActionStatus.SUCCESS
    assert SaveSnapshot.capture(state) == before
    assert state.player.hp == 62.5
    assert state.player.weapon_bonus == 15
    assert state.enemy.name == "Enemy 4"
    assert state.enemy.hp == 90
    assert played.progression.inventory == [ItemId.HEALING_POTION, ItemId.AXE]
    assert played.log[-1] == "Game loaded!"


def test_save_overwrites_previous_snapshot(session, save_slot):
    session.save()
    session.state.progression.leaves = 20
    session.save()
    assert json.loads(save_slot.read())["leaves"] == 20


def test_load_without_save(session, save_slot):
    save_slot.clear()
    session.state.progression.leaves = 15
    result = session.load()
    assert result.status == ActionStatus.NOT_FOUND
    assert result.message == "No saved game data found."
    assert session.progression.leaves == 15


def test_load_corrupted_save(rng):
    session = GameSession(save_slot=InMemorySaveSlot('{"player": 3}'), rng=rng)
    assert session.start_result.status == ActionStatus.INVALID_DATA
    session.state.progression.leaves = 15
    result = session.load()
    assert result.status == ActionStatus.INVALID_DATA
    assert result.message == "Saved game data is corrupted."
    assert session.progression.leaves == 15


def test_load_unparseable_save(rng):
    session = GameSession(save_slot=InMemorySaveSlot("not json"), rng=rng)
    assert session.load().status == ActionStatus.INVALID_DATA


def test_load_save_file_that_is_not_utf8(tmp_path, rng):
    path = tmp_path / "save.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    session = GameSession(config=GameConfig(save_path=path), rng=rng)
    assert session.start_result.status == ActionStatus.INVALID_DATA
    session.state.progression.leaves = 15
    result = session.load()
    assert result.status == ActionStatus.INVALID_DATA
    assert result.message == "Saved game data is corrupted."
    assert session.progression.leaves == 15
    assert path.read_bytes() == b"\xff\xfe\x00garbage"


def test_load_when_slot_cannot_be_read(session, save_slot, mocker):
    mocker.patch.object(save_slot, "read", side_effect=PermissionError("denied"))
    session.player.hp = 40
    assert session.load().status == ActionStatus.INVALID_DATA
    assert session.player.hp == 40


def test_load_rejects_hp_over_maximum(session, save_slot):
    data = json.loads(save_slot.read())
    data["player"]["hp"] = 500
    save_slot.write(json.dumps(data))
    session.player.hp = 40
    assert session.load().status == ActionStatus.INVALID_DATA
    assert session.player.hp == 40


def test_snapshot_rejects_fp_over_maximum(session):
    data = CharacterSnapshot.capture(session.player).model_dump()
    data["fp"] = data["max_fp"] + 1
    with pytest.raises(ValueError, match="FP over a maximum"):
        CharacterSnapshot(**data)


def test_new_session_saves_when_slot_is_empty(session, save_slot):
    assert session.start_result.status == ActionStatus.NOT_FOUND
    assert save_slot.exists()
    assert session.log[-1] == "Game saved!"


def test_new_session_loads_existing_save(session, save_slot, rng):
    session.state.progression.leaves = 40
    session.save()
    fresh = GameSession(save_slot=save_slot, rng=rng)
    assert fresh.start_result.status == ActionStatus.SUCCESS
    assert fresh.progression.leaves == 40


def test_progression_property_is_a_copy(session):
    copy = session.progression
    copy.inventory.append(ItemId.SWORD)
    assert session.progression.inventory == []


# ============================================================================
# SAVE SLOTS
# ============================================================================


def test_in_memory_slot():
    slot = InMemorySaveSlot()
    assert slot.read() is None
    assert not slot.exists()
    slot.write("{}")
    assert slot.exists()
    slot.clear()
    assert slot.read() is None


def test_json_file_slot(tmp_path):
    slot = JsonFileSaveSlot(tmp_path / "saves" / "slot.json")
    assert slot.read() is None
    slot.write('{"a": 1}')
    assert (tmp_path / "saves" / "slot.json").is_file()
    assert slot.read() == '{"a": 1}'
    slot.clear()
    assert not slot.exists()
    slot.clear()


def test_session_with_save_path_writes_file(tmp_path, rng):
    path = tmp_path / "save.json"
    GameSession(config=GameConfig(save_path=path), rng=rng)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["current_stage"] == 1
    assert data["player"]["name"] == "Player"
    assert data["enemy"]["name"] == "Enemy 1"
