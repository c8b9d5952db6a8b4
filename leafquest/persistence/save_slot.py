"""
Save slot module for the game.

A save slot is the single durable location holding one serialized snapshot:
read on load, overwritten on save.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from leafquest.core.logging import log_debug


class SaveSlot(ABC):
    """A single slot holding one serialized snapshot."""

    @abstractmethod
    def read(self) -> str | None:
        """Returns the stored snapshot, or None when the slot is empty."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Overwrites the slot with a new snapshot."""

    @abstractmethod
    def clear(self) -> None:
        """Empties the slot."""

    def exists(self) -> bool:
        return self.read() is not None


class InMemorySaveSlot(SaveSlot):
    """A slot that lives as long as the process."""

    def __init__(self, data: str | None = None) -> None:
        self._data = data

    def read(self) -> str | None:
        return self._data

    def write(self, data: str) -> None:
        self._data = data

    def clear(self) -> None:
        self._data = None


class JsonFileSaveSlot(SaveSlot):
    """
    A slot backed by a JSON file on disk.

    Attributes:
        path (Path):
            The file holding the snapshot. Missing parent directories are
            created on the first write.

    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> str | None:
        if not self.path.is_file():
            return None
        with open(self.path, encoding="utf-8") as f:
            return f.read()

    def write(self, data: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(data)
        log_debug("Snapshot written", {"path": str(self.path), "size": len(data)})

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
