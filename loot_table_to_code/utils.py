"""
Utility functions for the loot table to code generator.
"""

import math
import struct
from decimal import ROUND_HALF_UP, Decimal, localcontext
from pathlib import Path

_ONE_DECIMAL = Decimal("0.1")


def table_name_from_path(path: Path | str, suffix: str = "_CHEST") -> str:
    """Derive a Java constant name from a loot-table file name.

    Examples:
        "small.json" -> "SMALL_CHEST"
        "chests/village/village_armorer.json" -> "VILLAGE_ARMORER_CHEST"

    Args:
        path: Path of the source document
        suffix: Text appended in place of the ".json" extension

    Returns:
        Upper-cased constant name
    """
    file_name = Path(path).name
    if file_name.endswith(".json"):
        file_name = file_name[: -len(".json")]
    return f"{file_name}{suffix}".upper()


def item_constant_name(item_name: str, namespace: str = "minecraft") -> str:
    """Convert a namespaced item id to its enum constant name.

    Examples:
        "minecraft:golden_apple" -> "GOLDEN_APPLE"
        "golden_apple" -> "GOLDEN_APPLE"
    """
    prefix = f"{namespace}:"
    if item_name.startswith(prefix):
        item_name = item_name[len(prefix) :]
    return item_name.upper()


def to_single_precision(value: float) -> float:
    """Round a float to the nearest single-precision value.

    Raises:
        ValueError: If the value is not finite or overflows single precision
    """
    if not math.isfinite(value):
        raise ValueError(f"{value!r} is not a finite number")
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as e:
        raise ValueError(f"{value!r} does not fit in a single-precision float") from e


def format_float_literal(value: float) -> str:
    """Format a bound as a Java float literal with exactly one fractional digit.

    The value is narrowed to single precision, then rounded half-up on its
    shortest decimal representation.

    Examples:
        1.0 -> "1.0F"
        2.75 -> "2.8F"
        0.05 -> "0.1F"
        1e30 -> "1000000015047466200000000000000.0F"
    """
    # Default context precision (28 digits) cannot hold the largest floats
    with localcontext() as ctx:
        ctx.prec = 60
        rounded = Decimal(repr(to_single_precision(value))).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{rounded}F"
