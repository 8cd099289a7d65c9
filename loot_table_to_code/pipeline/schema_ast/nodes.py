"""
Typed model of a loot table.

These nodes represent a decoded loot-table document. They are built once by
the parser and read once by the serializer; none of them is mutated after
construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY_ENTRY_TYPE = "minecraft:empty"
BOOK_ITEM = "minecraft:book"
ENCHANTED_BOOK_ITEM = "minecraft:enchanted_book"


# Rolls


@dataclass(frozen=True)
class ConstantRoll:
    """A pool that draws a fixed number of times."""

    value: int = 0


@dataclass(frozen=True)
class UniformRoll:
    """A pool that draws a uniformly random number of times in [min, max]."""

    min: float = 0.0
    max: float = 0.0


Roll = ConstantRoll | UniformRoll


# Functions


@dataclass(frozen=True)
class LootFunction:
    """Base class for all entry functions."""

    # Tag as it appears in the "function" field
    TAG = ""

    @property
    def kind(self) -> str:
        """Tag without its namespace (e.g. "set_count")."""
        return self.TAG.partition(":")[2]


@dataclass(frozen=True)
class ConstantSetCount(LootFunction):
    """set_count with a fixed stack size."""

    TAG = "minecraft:set_count"

    count: int = 0


@dataclass(frozen=True)
class UniformSetCount(LootFunction):
    """set_count with a uniformly random stack size."""

    TAG = "minecraft:set_count"

    min: float = 0.0
    max: float = 0.0


@dataclass(frozen=True)
class EnchantRandomlyFunction(LootFunction):
    TAG = "minecraft:enchant_randomly"


@dataclass(frozen=True)
class EnchantWithLevelsFunction(LootFunction):
    TAG = "minecraft:enchant_with_levels"


@dataclass(frozen=True)
class ExplorationMapFunction(LootFunction):
    TAG = "minecraft:exploration_map"


@dataclass(frozen=True)
class SetStewEffectFunction(LootFunction):
    TAG = "minecraft:set_stew_effect"


@dataclass(frozen=True)
class SetDamageFunction(LootFunction):
    TAG = "minecraft:set_damage"


# Payload-free functions, indexed by tag
MARKER_FUNCTIONS: dict[str, type[LootFunction]] = {
    cls.TAG: cls
    for cls in (
        EnchantRandomlyFunction,
        EnchantWithLevelsFunction,
        ExplorationMapFunction,
        SetStewEffectFunction,
        SetDamageFunction,
    )
}


# Entries


@dataclass(frozen=True)
class EmptyEntry:
    """An entry that yields nothing when drawn."""

    weight: int = 0


@dataclass(frozen=True)
class ItemEntry:
    """An entry that yields an item, optionally modified by functions."""

    item_name: str = ""

    # 0 means "not set" and is left out of the rendered call
    weight: int = 0

    functions: tuple[LootFunction, ...] = ()


Entry = EmptyEntry | ItemEntry


# Tables


@dataclass(frozen=True)
class LootPool:
    """A roll specification combined with the candidate entries."""

    rolls: Roll = field(default_factory=ConstantRoll)
    entries: tuple[Entry, ...] = ()


@dataclass(frozen=True)
class LootTable:
    """One decoded loot-table document."""

    name: str = ""
    pools: tuple[LootPool, ...] = ()


@dataclass(frozen=True)
class LootTableCollection:
    """Tables of one run, in discovery order."""

    tables: tuple[LootTable, ...] = ()

    def __len__(self) -> int:
        return len(self.tables)

    def __iter__(self):
        return iter(self.tables)
