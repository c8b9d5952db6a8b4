import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning

from leafquest.core.config import DEFAULT_DATA_DIR
from leafquest.core.constants import ItemId, ItemType, SkillId
from leafquest.core.logging import log_debug
from leafquest.core.utils import Singleton
from leafquest.items.item import Item
from leafquest.items.skill import Skill


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for every skill and item that needs fast by-key access.
    """

    data_dir: Path
    skills: dict[SkillId, Skill]
    weapons: dict[ItemId, Item]
    armors: dict[ItemId, Item]
    potions: dict[ItemId, Item]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing the catalog files. The bundled
                catalogs are used when omitted. Only the first call builds
                the instance; use reload() to switch directories afterwards.

        """
        self.reload(data_dir or DEFAULT_DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON catalogs from disk.

        Args:
            root (Path):
                The directory containing the catalog files.
        """
        self.data_dir = root
        self.skills = _load_json_file(
            root / "skills.json",
            self._load_skills,
            "skills",
        )
        self.weapons = _load_json_file(
            root / "weapons.json",
            lambda data: self._load_items(data, ItemType.WEAPON),
            "weapons",
        )
        self.armors = _load_json_file(
            root / "armors.json",
            lambda data: self._load_items(data, ItemType.ARMOR),
            "armors",
        )
        self.potions = _load_json_file(
            root / "potions.json",
            lambda data: self._load_items(data, ItemType.POTION),
            "potions",
        )

    @property
    def items(self) -> dict[ItemId, Item]:
        """Every item, weapons first, then armors, then potions."""
        return {**self.weapons, **self.armors, **self.potions}

    def item_keys(self) -> list[ItemId]:
        """Returns every item key in catalog order."""
        return list(self.items.keys())

    def get_skill(self, key: SkillId | str) -> Skill | None:
        """Get a skill by key, or None if not found."""
        skill_id = _as_enum(SkillId, key)
        if skill_id is None or skill_id not in self.skills:
            log_warning(
                f"Skill '{key}' not found in ContentRepository.",
                {"key": key, "available": [s.value for s in self.skills]},
            )
            return None
        return self.skills[skill_id]

    def get_item(self, key: ItemId | str) -> Item | None:
        """Get an item by key, or None if not found."""
        item_id = _as_enum(ItemId, key)
        item = self.items.get(item_id) if item_id else None
        if item is None:
            log_warning(
                f"Item '{key}' not found in ContentRepository.",
                {"key": key, "available": [i.value for i in self.items]},
            )
        return item

    @staticmethod
    def _load_skills(data: list[dict]) -> dict[SkillId, Skill]:
        """
        Load skills from JSON data.

        Args:
            data (list[dict]): List of skill data dictionaries.

        Returns:
            dict[SkillId, Skill]: Dictionary mapping skill keys to Skill objects.

        Raises:
            ValueError: If duplicate skill keys are found.

        """
        skills: dict[SkillId, Skill] = {}
        for skill_data in data:
            skill = Skill(**skill_data)
            if skill.key in skills:
                raise ValueError(f"Duplicate skill key: {skill.key.value}")
            skills[skill.key] = skill
        return skills

    @staticmethod
    def _load_items(data: list[dict], item_type: ItemType) -> dict[ItemId, Item]:
        """
        Load items of a single type from JSON data.

        Args:
            data (list[dict]): List of item data dictionaries.
            item_type (ItemType): The type every entry of the file must have.

        Returns:
            dict[ItemId, Item]: Dictionary mapping item keys to Item objects.

        Raises:
            ValueError: If duplicate keys or entries of another type are found.

        """
        items: dict[ItemId, Item] = {}
        for item_data in data:
            item = Item(**item_data)
            if item.item_type != item_type:
                raise ValueError(
                    f"Item '{item.name}' is a {item.item_type.value}, "
                    f"expected {item_type.value}"
                )
            if item.key in items:
                raise ValueError(f"Duplicate item key: {item.key.value}")
            items[item.key] = item
        return items


def _as_enum(enum_class: Any, key: Any) -> Any:
    """Converts a raw catalog key into its enum member, or None."""
    if isinstance(key, enum_class):
        return key
    try:
        return enum_class(key)
    except ValueError:
        return None


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[Any, Any]],
    description: str,
) -> dict[Any, Any]:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description} from {filepath.name}")
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}")
