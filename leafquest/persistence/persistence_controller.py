"""
Persistence controller for the game.

Saves the whole session state into the save slot after every victory and
reloads it at session start and after every player defeat.
"""

from pydantic import ValidationError

from leafquest.core.logging import log_error, log_info
from leafquest.core.results import ActionResult, ActionStatus
from leafquest.progression.stage_controller import create_enemy
from leafquest.state import SessionState

from .save_slot import SaveSlot
from .snapshot import SaveSnapshot


class PersistenceController:
    """
    Moves the session state in and out of a single save slot.

    Attributes:
        state (SessionState):
            The session context saved and overwritten.
        slot (SaveSlot):
            Where the snapshot is stored.

    """

    def __init__(self, state: SessionState, slot: SaveSlot) -> None:
        self.state = state
        self.slot = slot

    def has_save(self) -> bool:
        return self.slot.exists()

    def save(self) -> ActionResult:
        """Overwrites the slot with a snapshot of the current state."""
        snapshot = SaveSnapshot.capture(self.state)
        self.slot.write(snapshot.model_dump_json())
        log_info(
            "Game saved",
            {"stage": snapshot.current_stage, "leaves": snapshot.leaves},
        )
        message = self.state.log.add("Game saved!")
        return ActionResult(status=ActionStatus.SUCCESS, message=message)

    def load(self) -> ActionResult:
        """
        Overwrites the live state with the stored snapshot.

        Returns:
            ActionResult:
                NOT_FOUND when the slot is empty, INVALID_DATA when the stored
                snapshot cannot be read. The state is untouched in both cases.

        """
        try:
            data = self.slot.read()
        except (OSError, UnicodeDecodeError) as e:
            return self._corrupted(e, "slot_reading")
        if data is None:
            message = self.state.log.add("No saved game data found.")
            return ActionResult(status=ActionStatus.NOT_FOUND, message=message)
        try:
            snapshot = SaveSnapshot.model_validate_json(data)
        except ValueError as e:
            return self._corrupted(e, "snapshot_loading")

        snapshot.player.restore_into(self.state.player)
        enemy = create_enemy(snapshot.current_stage)
        snapshot.enemy.restore_into(enemy)
        self.state.enemy = enemy
        self.state.progression = snapshot.progression()

        log_info("Game loaded", {"stage": snapshot.current_stage})
        message = self.state.log.add("Game loaded!")
        return ActionResult(status=ActionStatus.SUCCESS, message=message)

    def _corrupted(self, error: Exception, stage: str) -> ActionResult:
        context: dict[str, object] = {"error": type(error).__name__, "context": stage}
        if isinstance(error, ValidationError):
            context["error_count"] = error.error_count()
        log_error(f"Failed to read saved game: {error}", context)
        message = self.state.log.add("Saved game data is corrupted.")
        return ActionResult(status=ActionStatus.INVALID_DATA, message=message)
