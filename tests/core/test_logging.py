"""
Tests for the engine and combat log channels.
"""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler
from leafquest.core.combat_log import CombatLog
from leafquest.core.config import GameConfig
from leafquest.core.logging import combat_logger, log_info, logger, setup_logging
from leafquest.persistence.save_slot import InMemorySaveSlot
from leafquest.session import GameSession


@pytest.fixture
def output():
    """Captures what the game loggers print, then detaches them."""
    buffer = io.StringIO()
    yield buffer
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    combat_logger.setLevel(logging.NOTSET)


def capture_console(buffer):
    return Console(file=buffer, width=120, force_terminal=False)


def test_setup_logging_replaces_previous_handler(output):
    setup_logging(logging.INFO, console=capture_console(output))
    handler = setup_logging(logging.DEBUG, console=capture_console(output))
    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert rich_handlers == [handler]
    assert logger.level == logging.DEBUG
    assert not logger.propagate


def test_root_logger_is_left_alone(output):
    root_handlers = list(logging.getLogger().handlers)
    setup_logging(console=capture_console(output))
    assert logging.getLogger().handlers == root_handlers


def test_combat_entries_use_their_own_channel(output):
    setup_logging("WARNING", combat_level="INFO", console=capture_console(output))
    CombatLog().add("Player used Fireball. Enemy 1 took 30 damage.")
    log_info("Game saved")
    printed = output.getvalue()
    assert "Player used Fireball." in printed
    assert "Game saved" not in printed


def test_combat_channel_follows_engine_level_by_default(output):
    setup_logging("WARNING", console=capture_console(output))
    CombatLog().add("Enemy recovered 20 FP.")
    assert output.getvalue() == ""


def test_session_configures_logging_from_config(mocker):
    setup = mocker.patch("leafquest.session.setup_logging")
    config = GameConfig(log_level="DEBUG", combat_log_level="INFO")
    GameSession(config=config, save_slot=InMemorySaveSlot())
    setup.assert_called_once_with("DEBUG", "INFO")


def test_session_leaves_logging_alone_by_default(mocker):
    setup = mocker.patch("leafquest.session.setup_logging")
    GameSession(save_slot=InMemorySaveSlot())
    setup.assert_not_called()


def test_invalid_log_level_is_rejected():
    with pytest.raises(ValueError):
        GameConfig(log_level="LOUD")
