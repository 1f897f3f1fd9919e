"""Game character prototypes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from creational.domain import CharacterClass, ValueModel

from .base import Prototype


class Stats(ValueModel):
    """Immutable attribute block; replace it wholesale with ``set_stats``."""

    health: Annotated[int, Field(ge=0)] = 100
    mana: Annotated[int, Field(ge=0)] = 50
    attack: Annotated[int, Field(ge=0)] = 10
    defense: Annotated[int, Field(ge=0)] = 5
    speed: Annotated[int, Field(ge=0)] = 10
    magic: Annotated[int, Field(ge=0)] = 5


class _ClassDefaults(ValueModel):
    label: str
    stats: Stats
    skills: tuple[str, ...]
    equipment: tuple[tuple[str, str], ...]


CLASS_DEFAULTS: Mapping[CharacterClass, _ClassDefaults] = {
    CharacterClass.WARRIOR: _ClassDefaults(
        label="Warrior",
        stats=Stats(health=150, mana=20, attack=15, defense=12, speed=8, magic=3),
        skills=("Sword Mastery", "Shield Block", "Berserker Rage"),
        equipment=(("weapon", "Iron Sword"), ("armor", "Chain Mail"), ("shield", "Wooden Shield")),
    ),
    CharacterClass.MAGE: _ClassDefaults(
        label="Mage",
        stats=Stats(health=80, mana=120, attack=6, defense=4, speed=12, magic=18),
        skills=("Fireball", "Ice Shard", "Heal", "Teleport"),
        equipment=(("weapon", "Magic Staff"), ("armor", "Robes"), ("accessory", "Spell Focus")),
    ),
    CharacterClass.ARCHER: _ClassDefaults(
        label="Archer",
        stats=Stats(health=100, mana=60, attack=12, defense=8, speed=16, magic=8),
        skills=("Precise Shot", "Multi-Shot", "Eagle Eye"),
        equipment=(("weapon", "Wooden Bow"), ("armor", "Leather Armor"), ("accessory", "Quiver")),
    ),
    CharacterClass.ROGUE: _ClassDefaults(
        label="Rogue",
        stats=Stats(health=90, mana=40, attack=10, defense=6, speed=18, magic=6),
        skills=("Stealth", "Backstab", "Lock Picking", "Poison Blade"),
        equipment=(
            ("weapon", "Dagger"),
            ("armor", "Leather Armor"),
            ("accessory", "Thieves' Tools"),
        ),
    ),
}


class Character(Prototype):
    """Character template; omitted stats, skills and equipment use class defaults."""

    kind: Literal["character"] = "character"
    character_class: CharacterClass
    level: Annotated[int, Field(ge=1)] = 1
    stats: Stats
    skills: list[str]
    equipment: dict[str, str]

    @model_validator(mode="before")
    @classmethod
    def apply_class_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping) or "character_class" not in data:
            return data
        defaults = CLASS_DEFAULTS[CharacterClass(data["character_class"])]
        filled = dict(data)
        filled.setdefault("stats", defaults.stats)
        filled.setdefault("skills", list(defaults.skills))
        filled.setdefault("equipment", dict(defaults.equipment))
        return filled

    @property
    def class_label(self) -> str:
        return CLASS_DEFAULTS[self.character_class].label

    def set_level(self, level: int) -> None:
        self.level = level

    def add_skill(self, skill: str) -> None:
        self.skills.append(skill)

    def set_equipment(self, slot: str, item: str) -> None:
        self.equipment[slot] = item

    def set_stats(self, stats: Stats) -> None:
        self.stats = stats


__all__ = ["CLASS_DEFAULTS", "Character", "Stats"]
