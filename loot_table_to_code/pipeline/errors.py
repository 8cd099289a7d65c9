"""
Exceptions raised by the loot table pipeline.

Every failure aborts the whole run: a generation run either produces the
complete output file or nothing.
"""

from __future__ import annotations


class LootTableError(Exception):
    """Base class for all loot table generation errors."""

    pass


class LootTableDecodeError(LootTableError):
    """Raised when a loot-table document does not match the expected grammar.

    This can happen when:
    - A required field is missing
    - A field is present but has the wrong type
    - An integer field holds a non-integral number
    - A pool has no entries
    """

    def __init__(self, message: str, path: str = "#", table_name: str = ""):
        self.path = path
        self.table_name = table_name
        location = f"{table_name} {path}" if table_name else path
        super().__init__(f"{location}: {message}")


class UnsupportedFunctionError(LootTableDecodeError):
    """Raised for a function (or set_count distribution) the model does not know.

    The model has to be extended before such a document can be converted.
    """

    def __init__(self, kind: str, path: str = "#", table_name: str = ""):
        self.kind = kind
        super().__init__(f"unsupported loot function: {kind!r}", path, table_name)


class SourceReadError(LootTableError):
    """Raised when a source document cannot be read or is not valid JSON."""

    pass


class OutputExistsError(LootTableError):
    """Raised when the output file exists and overwriting is not allowed."""

    pass


class OutputValidationError(LootTableError):
    """Raised when generated code fails the pre-write sanity checks."""

    pass
