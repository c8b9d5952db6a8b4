"""
Game session module.

A GameSession owns the whole state of one play-through and is the only entry
point the presentation layer needs: it exposes read-only views of the
fighters, the progression and the combat log, and one method per action.
"""

import random

from leafquest.character.main import Character, CharacterView
from leafquest.combat.combat_manager import CombatManager
from leafquest.core.config import GameConfig
from leafquest.core.constants import CharacterType, ItemId, SkillId
from leafquest.core.content import ContentRepository
from leafquest.core.logging import setup_logging
from leafquest.core.results import ActionResult, ActionStatus
from leafquest.persistence.persistence_controller import PersistenceController
from leafquest.persistence.save_slot import InMemorySaveSlot, JsonFileSaveSlot, SaveSlot
from leafquest.progression.stage_controller import StageController, create_enemy
from leafquest.state import ProgressionState, SessionState


class GameSession:
    """
    One play-through: a player fighting through stages.

    Attributes:
        start_result (ActionResult):
            The result of the load attempted on construction.
        state (SessionState):
            The mutable context shared by the controllers.
        stages (StageController):
            Stage setup, rewards and the leaves economy.
        persistence (PersistenceController):
            Save and load of the single save slot.
        combat (CombatManager):
            Resolution of player actions and enemy turns.

    """

    def __init__(
        self,
        config: GameConfig | None = None,
        save_slot: SaveSlot | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Build a new session at the configured starting stage, then load the
        saved game if the slot holds one.

        Args:
            config (GameConfig | None):
                Tunable constants. Defaults are used when omitted.
            save_slot (SaveSlot | None):
                Where the session is saved. Defaults to a JSON file when the
                config names one, to memory otherwise.
            rng (random.Random | None):
                Source of every random draw. Pass a seeded instance for
                reproducible fights.

        """
        config = config or GameConfig()
        if config.log_level:
            setup_logging(config.log_level, config.combat_log_level)
        if save_slot is None:
            save_slot = (
                JsonFileSaveSlot(config.save_path)
                if config.save_path
                else InMemorySaveSlot()
            )
        player = Character(
            name=config.player_name,
            hp=config.player_hp,
            fp=config.player_fp,
            char_type=CharacterType.PLAYER,
        )
        progression = ProgressionState(
            current_stage=config.starting_stage,
            leaves=config.starting_leaves,
            level_up_cost=config.level_up_cost,
        )
        repo = ContentRepository(config.data_dir)
        if repo.data_dir != config.data_dir:
            repo.reload(config.data_dir)
        self.state = SessionState(
            config=config,
            repo=repo,
            rng=rng or random.Random(),
            player=player,
            enemy=create_enemy(config.starting_stage),
            progression=progression,
        )
        self.stages = StageController(self.state)
        self.persistence = PersistenceController(self.state, save_slot)
        self.combat = CombatManager(self.state, self.stages, self.persistence)
        self.stages.setup_stage(config.starting_stage)
        self.start_result = self.start()

    def start(self) -> ActionResult:
        """
        Loads the saved game, if any. Called once on construction.

        When the slot is empty the current state is saved right away and
        becomes the rollback point of the first defeat.
        """
        result = self.persistence.load()
        if result.status == ActionStatus.NOT_FOUND:
            self.persistence.save()
        return result

    # ============================================================================
    # READ-ONLY STATE
    # ============================================================================

    @property
    def player(self) -> Character:
        return self.state.player

    @property
    def enemy(self) -> Character:
        return self.state.enemy

    @property
    def player_view(self) -> CharacterView:
        return self.state.player.view()

    @property
    def enemy_view(self) -> CharacterView:
        return self.state.enemy.view()

    @property
    def progression(self) -> ProgressionState:
        """Returns a copy of the progression state."""
        return self.state.progression.model_copy(deep=True)

    @property
    def log(self) -> tuple[str, ...]:
        return self.state.log.entries

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def use_skill(self, key: SkillId | str) -> ActionResult:
        return self.combat.use_skill(key)

    def use_item(self, key: ItemId | str) -> ActionResult:
        return self.combat.use_item(key)

    def rest(self) -> ActionResult:
        return self.combat.rest()

    def level_up(self) -> ActionResult:
        return self.stages.level_up()

    def buy_item(self, key: ItemId | str) -> ActionResult:
        return self.stages.buy_item(key)

    def equip_item(self, key: ItemId | str) -> ActionResult:
        return self.stages.equip_item(key)

    def upgrade_weapon(self) -> ActionResult:
        return self.stages.upgrade_weapon()

    def upgrade_armor(self) -> ActionResult:
        return self.stages.upgrade_armor()

    def save(self) -> ActionResult:
        return self.persistence.save()

    def load(self) -> ActionResult:
        return self.persistence.load()
