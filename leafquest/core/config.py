"""
Game configuration module.

Holds every tunable constant of a session in a single validated model, so a
session can be started from the defaults or from a JSON file.
"""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class GameConfig(BaseModel):
    """
    Tunable constants for a game session.
    """

    player_name: str = Field(
        default="Player",
        description="Name shown for the player character.",
    )
    player_hp: int = Field(
        default=100,
        description="Maximum HP the player starts with.",
        gt=0,
    )
    player_fp: int = Field(
        default=50,
        description="Maximum FP the player starts with.",
        gt=0,
    )
    starting_stage: int = Field(
        default=1,
        description="The first stage of a new session.",
        ge=1,
    )
    starting_leaves: int = Field(
        default=0,
        description="Leaves owned at the start of a new session.",
        ge=0,
    )
    level_up_cost: int = Field(
        default=50,
        description="Leaves required for the first level-up.",
        ge=0,
    )
    level_up_growth: float = Field(
        default=1.5,
        description="Factor applied to the level-up cost after each level-up.",
        ge=1.0,
    )
    level_up_hp_bonus: int = Field(
        default=10,
        description="Max HP gained per level-up.",
        ge=0,
    )
    level_up_fp_bonus: int = Field(
        default=5,
        description="Max FP gained per level-up.",
        ge=0,
    )
    stage_clear_leaves: int = Field(
        default=10,
        description="Leaves awarded for clearing a stage.",
        ge=0,
    )
    rest_fp: int = Field(
        default=20,
        description="FP recovered by resting, for the player and the enemy.",
        ge=0,
    )
    status_effect_turns: int = Field(
        default=3,
        description="Turns a special effect lasts once inflicted.",
        ge=0,
    )
    freeze_chance: float = Field(
        default=0.2,
        description="Chance per tick that an active freeze effect freezes its target.",
        ge=0.0,
        le=1.0,
    )
    upgrade_cost: int = Field(
        default=30,
        description="Leaves required to upgrade the equipped weapon or armor.",
        ge=0,
    )
    upgrade_bonus: int = Field(
        default=5,
        description="Damage or defense added by one upgrade.",
        ge=0,
    )
    save_path: Path | None = Field(
        default=None,
        description="JSON file holding the save slot. None keeps the slot in memory.",
    )
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory holding the skill and item catalogs.",
    )
    log_level: LogLevel | None = Field(
        default=None,
        description="Level of the engine log channel. None leaves logging unconfigured.",
    )
    combat_log_level: LogLevel | None = Field(
        default=None,
        description="Level of the combat log channel. None follows log_level.",
    )


def load_config(filepath: Path) -> GameConfig:
    """
    Load a game configuration from a JSON file.

    Args:
        filepath (Path):
            The JSON file to read. Missing keys take their default value.

    Raises:
        ValueError:
            If the file is missing, is not a JSON object, or holds invalid
            values.

    Returns:
        GameConfig:
            The validated configuration.

    """
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected object in {filepath}, got {type(data).__name__}")
        return GameConfig(**data)
    except (json.JSONDecodeError, FileNotFoundError, ValidationError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}")
