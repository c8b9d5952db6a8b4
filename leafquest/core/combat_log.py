"""
Combat log module.

An append-only, ordered record of human-readable event strings that the
presentation layer reads after each action.
"""

from collections.abc import Iterator

from .logging import log_combat


class CombatLog:
    """
    Append-only list of combat messages.

    Attributes:
        _entries (list[str]):
            The messages, in the order they were added.

    """

    def __init__(self) -> None:
        self._entries: list[str] = []

    def add(self, message: str) -> str:
        """
        Append a message to the log.

        Args:
            message (str):
                The message to append.

        Returns:
            str:
                The message itself, so callers can reuse it in a result.

        """
        self._entries.append(message)
        log_combat(message, {"entry": len(self._entries)})
        return message

    @property
    def entries(self) -> tuple[str, ...]:
        """Returns a read-only copy of every entry."""
        return tuple(self._entries)

    @property
    def last(self) -> str | None:
        """Returns the most recent entry, if any."""
        return self._entries[-1] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))
