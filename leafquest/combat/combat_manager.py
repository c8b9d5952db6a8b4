"""
Combat resolution module for the game.

Resolves the player's actions (skills, items, resting), runs the enemy turn
that answers each of them, and hands off to the stage controller on victory
and to the persistence controller on defeat.
"""

from leafquest.character.main import Character, SkillCast
from leafquest.core.constants import (
    CharacterStatus,
    ItemEffectKind,
    ItemId,
    ItemType,
    SkillId,
)
from leafquest.core.logging import log_debug
from leafquest.core.results import ActionResult, ActionStatus, BattleOutcome
from leafquest.effects.status_effect import apply_status_effects
from leafquest.items.skill import Skill
from leafquest.persistence.persistence_controller import PersistenceController
from leafquest.progression.stage_controller import StageController
from leafquest.state import SessionState

from .npc_ai import EnemyAction, roll_enemy_action


class CombatManager:
    """
    Manages the flow of a fight between the player and the enemy of the
    current stage.

    Every player action is answered by at most one enemy turn before control
    returns to the caller.
    """

    def __init__(
        self,
        state: SessionState,
        stages: StageController,
        persistence: PersistenceController,
    ) -> None:
        self.state = state
        self.stages = stages
        self.persistence = persistence

    # ============================================================================
    # PLAYER ACTIONS
    # ============================================================================

    def use_skill(self, key: SkillId | str) -> ActionResult:
        """
        Casts one of the player's skills on the enemy.

        Args:
            key (SkillId | str):
                The catalog key of the skill.

        Returns:
            ActionResult:
                SUCCESS when the skill was cast, INSUFFICIENT_RESOURCE when the
                player lacked FP and paid the HP penalty instead.

        """
        skill = self.state.repo.get_skill(key)
        if skill is None:
            return self._fail(ActionStatus.NOT_FOUND, f"No skill named {key}.")
        blocked = self._check_player_can_act()
        if blocked:
            return blocked

        player = self.state.player
        enemy = self.state.enemy
        cast = player.cast_skill(skill)
        status, amount, message = self._resolve_cast(player, enemy, cast)
        self._inflict(skill, enemy)
        return ActionResult(
            status=status,
            message=message,
            amount=amount,
            outcome=self._after_player_action(),
        )

    def use_item(self, key: ItemId | str) -> ActionResult:
        """
        Consumes one potion from the inventory.

        Args:
            key (ItemId | str):
                The catalog key of the item.

        Returns:
            ActionResult:
                NOT_FOUND when the item is not in the inventory, in which case
                the enemy does not act. NOT_USABLE when it is not a potion:
                nothing is consumed but the turn is spent and the enemy acts.

        """
        if self.state.player.is_dead():
            return self._fail(ActionStatus.NOT_USABLE, "The player cannot act.")
        item = self.state.repo.get_item(key)
        progression = self.state.progression
        if item is None or item.key not in progression.inventory:
            return self._fail(ActionStatus.NOT_FOUND, "No such item in inventory.")
        blocked = self._check_player_can_act()
        if blocked:
            return blocked
        if item.item_type != ItemType.POTION:
            message = self.state.log.add(f"{item.name} cannot be used in combat.")
            return ActionResult(
                status=ActionStatus.NOT_USABLE,
                message=message,
                outcome=self.enemy_turn(),
            )

        player = self.state.player
        progression.take(item.key)
        messages: list[str] = []
        amount: float = 0
        heal = item.effect.get(ItemEffectKind.HEAL)
        if heal:
            amount += player.heal(heal)
            messages.append(
                self.state.log.add(f"{player.name} used a {item.name}. Recovered {heal} HP.")
            )
        recover = item.effect.get(ItemEffectKind.RECOVER_FP)
        if recover:
            amount += player.recover_fp(recover)
            messages.append(
                self.state.log.add(
                    f"{player.name} used a {item.name}. Recovered {recover} FP."
                )
            )
        return ActionResult(
            status=ActionStatus.SUCCESS,
            message=" ".join(messages),
            amount=amount,
            outcome=self.enemy_turn(),
        )

    def rest(self) -> ActionResult:
        """Recovers a fixed amount of the player's FP, then the enemy acts."""
        blocked = self._check_player_can_act()
        if blocked:
            return blocked
        player = self.state.player
        rest_fp = self.state.config.rest_fp
        recovered = player.recover_fp(rest_fp)
        message = self.state.log.add(f"{player.name} recovered {rest_fp} FP.")
        return ActionResult(
            status=ActionStatus.SUCCESS,
            message=message,
            amount=recovered,
            outcome=self.enemy_turn(),
        )

    # ============================================================================
    # ENEMY TURN
    # ============================================================================

    def enemy_turn(self) -> BattleOutcome:
        """
        Runs the enemy's answer to a player action.

        Status effects tick on the enemy, the enemy acts unless frozen, then
        status effects tick on the player. A dead enemy does not act.

        Returns:
            BattleOutcome:
                VICTORY if the enemy died during its own turn, DEFEAT if the
                player died, ONGOING otherwise.

        """
        enemy = self.state.enemy
        player = self.state.player
        if enemy.is_dead():
            log_debug("Enemy turn skipped: enemy already defeated.")
            return BattleOutcome.ONGOING

        self._tick(enemy)
        if enemy.is_dead():
            return self._victory()

        if enemy.is_frozen:
            enemy.status = CharacterStatus.NORMAL
            self.state.log.add(f"{enemy.name} is frozen and cannot act.")
        else:
            self._enemy_act(roll_enemy_action(self.state.rng))
        if enemy.is_dead():
            return self._victory()

        self._tick(player)
        if player.is_dead():
            return self._defeat()
        return BattleOutcome.ONGOING

    def _enemy_act(self, action: EnemyAction) -> None:
        enemy = self.state.enemy
        player = self.state.player
        log_debug(f"{enemy.name} chose {action}")
        if action == EnemyAction.REST:
            rest_fp = self.state.config.rest_fp
            enemy.recover_fp(rest_fp)
            self.state.log.add(f"{enemy.name} recovered {rest_fp} FP.")
            return
        skill = self.state.repo.get_skill(action.skill_id)
        assert skill is not None, f"Enemy skill {action.skill_id} missing from catalog."
        cast = enemy.cast_skill(skill)
        self._resolve_cast(enemy, player, cast)
        self._inflict(skill, player)

    # ============================================================================
    # SHARED RESOLUTION
    # ============================================================================

    def _resolve_cast(
        self,
        caster: Character,
        target: Character,
        cast: SkillCast,
    ) -> tuple[ActionStatus, float, str]:
        """
        Applies the outcome of a cast and logs it.

        Returns:
            tuple[ActionStatus, float, str]:
                - The status of the cast
                - The HP lost by the target, healed by the caster, or lost by
                  the caster as a penalty
                - The logged message

        """
        name = cast.skill.name
        if not cast.succeeded:
            message = self.state.log.add(
                f"{caster.name} tried to use {name} but didn't have enough FP."
            )
            return ActionStatus.INSUFFICIENT_RESOURCE, cast.penalty, message
        if cast.damage > 0:
            dealt = target.take_damage(cast.damage)
            message = self.state.log.add(
                f"{caster.name} used {name}. {target.name} took {cast.damage} damage."
            )
            return ActionStatus.SUCCESS, dealt, message
        if cast.damage < 0:
            healed = caster.heal(-cast.damage)
            message = self.state.log.add(
                f"{caster.name} used {name}. Recovered {healed:g} HP."
            )
            return ActionStatus.SUCCESS, healed, message
        message = self.state.log.add(f"{caster.name} used {name}, but nothing happened.")
        return ActionStatus.SUCCESS, 0, message

    def _inflict(self, skill: Skill, target: Character) -> None:
        """Inflicts the skill's special effect, hit or miss."""
        if skill.special_effect is None:
            return
        turns = self.state.config.status_effect_turns
        target.add_status_effect(skill.special_effect, turns)
        self.state.log.add(
            f"{target.name} is afflicted with {skill.special_effect.value} for {turns} turns."
        )

    def _tick(self, character: Character) -> None:
        tick = apply_status_effects(
            character, self.state.rng, self.state.config.freeze_chance
        )
        for kind, lost in tick.damage.items():
            self.state.log.add(f"{character.name} suffers {lost:g} {kind.value} damage.")
        if tick.froze:
            self.state.log.add(f"{character.name} is frozen solid!")

    def _check_player_can_act(self) -> ActionResult | None:
        """
        Returns a result when the player cannot act this turn.

        A frozen player loses the action: the status thaws and the enemy
        takes its turn.
        """
        player = self.state.player
        if player.is_dead():
            return self._fail(ActionStatus.NOT_USABLE, "The player cannot act.")
        if not player.is_frozen:
            return None
        player.status = CharacterStatus.NORMAL
        message = self.state.log.add(f"{player.name} is frozen and cannot act.")
        return ActionResult(
            status=ActionStatus.FROZEN,
            message=message,
            outcome=self.enemy_turn(),
        )

    def _after_player_action(self) -> BattleOutcome:
        if self.state.enemy.is_dead():
            return self._victory()
        if self.state.player.is_dead():
            return self._defeat()
        return self.enemy_turn()

    def _victory(self) -> BattleOutcome:
        self.state.log.add(f"{self.state.enemy.name} defeated!")
        self.stages.grant_reward()
        self.stages.advance_stage()
        self.persistence.save()
        return BattleOutcome.VICTORY

    def _defeat(self) -> BattleOutcome:
        """
        Rolls the session back to the last snapshot.

        Without a readable snapshot the current stage restarts with a fresh
        enemy and a fully restored player.
        """
        player = self.state.player
        self.state.log.add(f"{player.name} is defeated. YOU DIE.")
        if self.persistence.load().succeeded:
            return BattleOutcome.DEFEAT
        player.restore()
        player.status = CharacterStatus.NORMAL
        player.status_effects.clear()
        stage = self.state.progression.current_stage
        self.stages.setup_stage(stage)
        self.state.log.add(f"Restarting stage {stage}.")
        return BattleOutcome.DEFEAT

    def _fail(self, status: ActionStatus, message: str) -> ActionResult:
        self.state.log.add(message)
        return ActionResult(status=status, message=message)
