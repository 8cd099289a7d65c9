"""Loot Table to Code Generator

A Python package for converting Minecraft loot-table JSON documents into
Java declarations that can be compiled into a runtime library.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    LootTableDecodeError,
    LootTableError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    UnsupportedFunctionError,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "LootTableError",
    "LootTableDecodeError",
    "UnsupportedFunctionError",
    "AtomicWriter",
]
