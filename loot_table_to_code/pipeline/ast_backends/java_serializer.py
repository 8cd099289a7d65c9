"""
Java serializer for loot tables.

Converts the typed loot-table model to Java declarations. Each level is
rendered before it is embedded in its parent:
- Tables are indented one tab, pools three tabs, entries five tabs
- Pools and entries are separated by a comma and a newline
- Tables are separated by a blank line
- Functions are appended to their entry on the same line
"""

from __future__ import annotations

from ...utils import format_float_literal, item_constant_name
from ..schema_ast.nodes import (
    ConstantRoll,
    ConstantSetCount,
    EmptyEntry,
    Entry,
    ItemEntry,
    LootFunction,
    LootPool,
    LootTable,
    LootTableCollection,
    Roll,
    UniformRoll,
    UniformSetCount,
)


class JavaSerializer:
    """Serializes loot tables to Java source code."""

    INDENT = "\t"

    TABLE_INDENT = 1
    POOL_INDENT = 3
    ENTRY_INDENT = 5

    def __init__(self, item_namespace: str = "minecraft"):
        self.item_namespace = item_namespace

    def serialize(self, collection: LootTableCollection) -> str:
        """Serialize all tables of a run, separated by a blank line."""
        return "\n\n".join(self.serialize_table(table) for table in collection.tables)

    def serialize_table(self, table: LootTable) -> str:
        """Serialize one table as a static final field declaration."""
        prefix = self.INDENT * self.TABLE_INDENT
        pools = ",\n".join(self._serialize_pool(pool) for pool in table.pools)
        return f"{prefix}public static final LootTable {table.name.upper()} = new LootTable(\n{pools}\n{prefix});"

    def _serialize_pool(self, pool: LootPool) -> str:
        prefix = self.INDENT * self.POOL_INDENT
        entries = ",\n".join(self._serialize_entry(entry) for entry in pool.entries)
        return f"{prefix}new LootPool({self._serialize_roll(pool.rolls)},\n{entries})"

    def _serialize_roll(self, roll: Roll) -> str:
        match roll:
            case ConstantRoll(value=value):
                return f"new ConstantRoll({value})"
            case UniformRoll(min=low, max=high):
                return f"new UniformRoll({format_float_literal(low)}, {format_float_literal(high)})"
        raise TypeError(f"Unknown roll type: {type(roll).__name__}")

    def _serialize_entry(self, entry: Entry) -> str:
        prefix = self.INDENT * self.ENTRY_INDENT
        match entry:
            case EmptyEntry(weight=weight):
                return f"{prefix}new EmptyEntry({weight})"
            case ItemEntry(item_name=item_name, weight=weight, functions=functions):
                item = item_constant_name(item_name, self.item_namespace)
                weight_arg = f", {weight}" if weight != 0 else ""
                applied = "".join(self._serialize_function(function) for function in functions)
                return f"{prefix}new ItemEntry(Item.{item}{weight_arg}){applied}"
        raise TypeError(f"Unknown entry type: {type(entry).__name__}")

    def _serialize_function(self, function: LootFunction) -> str:
        match function:
            case ConstantSetCount(count=count):
                return f".apply(constant({count}))"
            case UniformSetCount(min=low, max=high):
                return f".apply(uniform({format_float_literal(low)}, {format_float_literal(high)}))"
        # Not translated yet, left as a readable marker
        return f" /* {function.kind} */ "
