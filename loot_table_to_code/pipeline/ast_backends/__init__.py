"""
AST backends for code generation.

Renders the typed loot-table model to target-language source code.
"""

from __future__ import annotations

from .java_serializer import JavaSerializer

__all__ = [
    "JavaSerializer",
]
