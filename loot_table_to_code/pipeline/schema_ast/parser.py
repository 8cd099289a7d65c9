"""
Loot-table parser that builds the typed model.

Phase 1 of the pipeline: decode a generic JSON tree (as returned by
``json.load``) into a ``LootTable``. Variants are selected either by the
shape of a value (rolls, set_count) or by an explicit tag (entries,
functions).
"""

from __future__ import annotations

import logging
from typing import Any

from ...utils import to_single_precision
from ..errors import LootTableDecodeError, UnsupportedFunctionError
from .nodes import (
    BOOK_ITEM,
    EMPTY_ENTRY_TYPE,
    ENCHANTED_BOOK_ITEM,
    MARKER_FUNCTIONS,
    ConstantRoll,
    ConstantSetCount,
    EmptyEntry,
    EnchantRandomlyFunction,
    Entry,
    ItemEntry,
    LootFunction,
    LootPool,
    LootTable,
    Roll,
    UniformRoll,
    UniformSetCount,
)

logger = logging.getLogger(__name__)

_MISSING = object()


class LootTableParser:
    """Parses loot-table JSON documents into the typed model."""

    SET_COUNT_TAG = "minecraft:set_count"
    UNIFORM_DISTRIBUTION = "minecraft:uniform"

    def __init__(self):
        self._table_name = ""

    def parse(self, document: Any, table_name: str) -> LootTable:
        """
        Parse one loot-table document.

        Args:
            document: The decoded JSON document
            table_name: Name of the generated table (already upper-cased)

        Returns:
            LootTable with its pools in source order

        Raises:
            LootTableDecodeError: If the document does not match the grammar
            UnsupportedFunctionError: If an entry uses an unknown function
        """
        self._table_name = table_name
        table_object = self._expect_object(document, "#")
        pools = self._get_required(table_object, "pools", list, "#")

        table = LootTable(
            name=table_name,
            pools=tuple(self._parse_pool(pool, f"#/pools/{i}") for i, pool in enumerate(pools)),
        )
        logger.debug("Decoded %s with %d pool(s)", table_name, len(table.pools))
        return table

    def _parse_pool(self, value: Any, path: str) -> LootPool:
        """Parse a pool object."""
        pool_object = self._expect_object(value, path)
        rolls = self._parse_roll(self._get_required(pool_object, "rolls", object, path), f"{path}/rolls")

        entries = self._get_required(pool_object, "entries", list, path)
        if not entries:
            raise self._error("pool has no entries", f"{path}/entries")

        return LootPool(
            rolls=rolls,
            entries=tuple(self._parse_entry(entry, f"{path}/entries/{i}") for i, entry in enumerate(entries)),
        )

    def _parse_roll(self, value: Any, path: str) -> Roll:
        """Parse a roll: a bare number is constant, an object is uniform."""
        if isinstance(value, dict):
            return UniformRoll(
                min=self._get_float(value, "min", path),
                max=self._get_float(value, "max", path),
            )
        return ConstantRoll(value=self._to_int(value, path))

    def _parse_entry(self, value: Any, path: str) -> Entry:
        """Parse an entry, dispatching on its "type" field."""
        entry_object = self._expect_object(value, path)
        entry_type = self._get_required(entry_object, "type", str, path)

        if entry_type == EMPTY_ENTRY_TYPE:
            return EmptyEntry(weight=self._get_int(entry_object, "weight", path))

        item_name = self._get_required(entry_object, "name", str, path)
        weight = self._get_int(entry_object, "weight", path, default=0)
        functions = tuple(
            self._parse_function(function, f"{path}/functions/{i}")
            for i, function in enumerate(self._get_optional(entry_object, "functions", list, [], path))
        )

        # The game swaps a plain book for an enchanted one once it gets enchanted
        if item_name == BOOK_ITEM and any(isinstance(f, EnchantRandomlyFunction) for f in functions):
            item_name = ENCHANTED_BOOK_ITEM

        return ItemEntry(item_name=item_name, weight=weight, functions=functions)

    def _parse_function(self, value: Any, path: str) -> LootFunction:
        """Parse an entry function, dispatching on its "function" field."""
        function_object = self._expect_object(value, path)
        tag = self._get_required(function_object, "function", str, path)

        if tag == self.SET_COUNT_TAG:
            return self._parse_set_count(function_object, path)
        if tag in MARKER_FUNCTIONS:
            return MARKER_FUNCTIONS[tag]()
        raise UnsupportedFunctionError(tag, path, self._table_name)

    def _parse_set_count(self, function_object: dict[str, Any], path: str) -> LootFunction:
        """Parse set_count: a bare number is constant, an object names its distribution."""
        count = self._get_required(function_object, "count", object, path)
        count_path = f"{path}/count"

        if not isinstance(count, dict):
            return ConstantSetCount(count=self._to_int(count, count_path))

        distribution = self._get_required(count, "type", str, count_path)
        if distribution != self.UNIFORM_DISTRIBUTION:
            raise UnsupportedFunctionError(f"{self.SET_COUNT_TAG} ({distribution})", count_path, self._table_name)

        return UniformSetCount(
            min=self._get_float(count, "min", count_path),
            max=self._get_float(count, "max", count_path),
        )

    # Field accessors

    def _get_optional(self, obj: dict[str, Any], key: str, expected: type, default: Any, path: str) -> Any:
        """Read a field, returning ``default`` when it is absent.

        A field that is present with the wrong type is an error, never a default.
        """
        value = obj.get(key, _MISSING)
        if value is _MISSING:
            return default
        if not isinstance(value, expected):
            raise self._error(f"{key!r} should be {self._type_name(expected)}, got {self._type_name(type(value))}", f"{path}/{key}")
        return value

    def _get_required(self, obj: dict[str, Any], key: str, expected: type, path: str) -> Any:
        """Read a field that must be present."""
        value = self._get_optional(obj, key, expected, _MISSING, path)
        if value is _MISSING:
            raise self._error(f"missing required field {key!r}", path)
        return value

    def _get_int(self, obj: dict[str, Any], key: str, path: str, default: Any = _MISSING) -> int:
        """Read an integer field, optionally defaulted."""
        if default is not _MISSING and key not in obj:
            return default
        return self._to_int(self._get_required(obj, key, object, path), f"{path}/{key}")

    def _get_float(self, obj: dict[str, Any], key: str, path: str) -> float:
        """Read a required number field as a float."""
        value = self._get_required(obj, key, object, path)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._error(f"{key!r} should be a number, got {self._type_name(type(value))}", f"{path}/{key}")
        try:
            number = float(value)
            to_single_precision(number)
        except (OverflowError, ValueError) as e:
            raise self._error(f"{key!r} is out of range for a float: {e}", f"{path}/{key}") from e
        return number

    def _to_int(self, value: Any, path: str) -> int:
        """Convert a JSON number to an int, accepting integral floats such as 2.0."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise self._error(f"expected an integer, got {self._type_name(type(value))}", path)
        if isinstance(value, float):
            if not value.is_integer():
                raise self._error(f"expected an integer, got {value!r}", path)
            return int(value)
        return value

    def _expect_object(self, value: Any, path: str) -> dict[str, Any]:
        """Check that a value is a JSON object."""
        if not isinstance(value, dict):
            raise self._error(f"expected an object, got {self._type_name(type(value))}", path)
        return value

    def _error(self, message: str, path: str) -> LootTableDecodeError:
        return LootTableDecodeError(message, path, self._table_name)

    @staticmethod
    def _type_name(python_type: type) -> str:
        """JSON name of a Python type, for error messages."""
        return {
            dict: "an object",
            list: "an array",
            str: "a string",
            bool: "a boolean",
            int: "an integer",
            float: "a number",
            type(None): "null",
            object: "a value",
        }.get(python_type, python_type.__name__)
