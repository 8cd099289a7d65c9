"""
Pipeline - loot-table JSON to Java generator.

This module converts loot-table documents in phases:

1. Phase 1 (Parser): Decode each JSON document into the typed model
2. Phase 2 (Serializer): Render the model as Java declarations
3. Phase 3 (Templates): Wrap the declarations (comment, package, class)
4. Phase 4 (Writer): Atomically write the output file
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import (
    LootTableDecodeError,
    LootTableError,
    OutputExistsError,
    OutputValidationError,
    SourceReadError,
    UnsupportedFunctionError,
)
from .generator import PipelineGenerator

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "LootTableError",
    "LootTableDecodeError",
    "UnsupportedFunctionError",
    "SourceReadError",
    "OutputExistsError",
    "OutputValidationError",
]
