"""
Configuration for the loot table generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Default: overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    atomic_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Appended to the file name in place of ".json" to name each table
    table_name_suffix: str = "_CHEST"

    # Namespace stripped from item ids (minecraft:apple -> APPLE)
    item_namespace: str = "minecraft"

    # Maximum directory depth searched for source documents
    max_depth: int = 3

    # Add generation comment at top of file
    add_generation_comment: bool = False

    # Java package declaration (empty = none)
    java_package: str = ""

    # Wrap the tables in a class with this name (empty = bare declarations)
    java_class_name: str = ""

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "table_name_suffix": self.table_name_suffix,
            "item_namespace": self.item_namespace,
            "max_depth": self.max_depth,
            "add_generation_comment": self.add_generation_comment,
            "java_package": self.java_package,
            "java_class_name": self.java_class_name,
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
