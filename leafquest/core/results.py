"""
Action results for the game.

Every player-facing operation reports its outcome through an ActionResult
rather than raising, so callers can tell a success from a failure caused by a
missing resource or a missing target.
"""

from pydantic import BaseModel, Field

from .constants import NiceEnum


class ActionStatus(NiceEnum):
    """How an action ended."""

    SUCCESS = "SUCCESS"
    INSUFFICIENT_RESOURCE = "INSUFFICIENT_RESOURCE"
    NOT_FOUND = "NOT_FOUND"
    NOT_USABLE = "NOT_USABLE"
    FROZEN = "FROZEN"
    INVALID_DATA = "INVALID_DATA"


class BattleOutcome(NiceEnum):
    """State of the fight once an action and its enemy response resolved."""

    ONGOING = "ONGOING"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class ActionResult(BaseModel):
    """The result of a single action."""

    status: ActionStatus = Field(
        description="How the action ended.",
    )
    message: str = Field(
        default="",
        description="The log line describing the action.",
    )
    amount: float = Field(
        default=0,
        description="Damage dealt, HP healed, FP recovered or leaves spent.",
    )
    outcome: BattleOutcome = Field(
        default=BattleOutcome.ONGOING,
        description="The state of the fight after the action.",
    )

    @property
    def succeeded(self) -> bool:
        return self.status == ActionStatus.SUCCESS
