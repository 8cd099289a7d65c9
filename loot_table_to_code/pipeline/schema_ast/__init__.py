"""
Schema AST module.

Contains the typed loot-table model and the parser that builds it.
"""

from __future__ import annotations

from .nodes import (
    ConstantRoll,
    ConstantSetCount,
    EmptyEntry,
    EnchantRandomlyFunction,
    EnchantWithLevelsFunction,
    Entry,
    ExplorationMapFunction,
    ItemEntry,
    LootFunction,
    LootPool,
    LootTable,
    LootTableCollection,
    Roll,
    SetDamageFunction,
    SetStewEffectFunction,
    UniformRoll,
    UniformSetCount,
)
from .parser import LootTableParser

__all__ = [
    "LootTable",
    "LootTableCollection",
    "LootPool",
    "Roll",
    "ConstantRoll",
    "UniformRoll",
    "Entry",
    "EmptyEntry",
    "ItemEntry",
    "LootFunction",
    "ConstantSetCount",
    "UniformSetCount",
    "EnchantRandomlyFunction",
    "EnchantWithLevelsFunction",
    "ExplorationMapFunction",
    "SetStewEffectFunction",
    "SetDamageFunction",
    "LootTableParser",
]
