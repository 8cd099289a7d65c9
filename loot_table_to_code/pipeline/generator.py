"""
Pipeline generator.

Runs the whole conversion of a directory of loot-table documents:

1. Discover the JSON documents under the source directory
2. Parse each document into a LootTable (all documents, before rendering)
3. Serialize the collection to Java declarations
4. Wrap the declarations with the prefix/suffix templates
5. Write the result atomically
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from .. import __version__
from ..utils import table_name_from_path
from .ast_backends import JavaSerializer
from .atomic_writer import AtomicWriter
from .config import CodeGeneratorConfig, OutputMode
from .errors import SourceReadError
from .schema_ast import LootTableCollection, LootTableParser

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "java"


class PipelineGenerator:
    """Converts a directory of loot-table documents to one Java source blob."""

    def __init__(self, source_dir: Path | str, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            source_dir: Directory searched for loot-table documents
            config: Code generation configuration
        """
        self.source_dir = Path(source_dir)
        self.config = config or CodeGeneratorConfig()
        self.parser = LootTableParser()
        self.serializer = JavaSerializer(item_namespace=self.config.item_namespace)
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.java.jinja2")
        self.suffix_template = self.jinja_env.get_template("suffix.java.jinja2")

    def discover_sources(self) -> list[Path]:
        """Find the .json files under the source directory, in a stable order."""
        if not self.source_dir.is_dir():
            raise SourceReadError(f"Source directory not found: {self.source_dir}")

        sources = [
            path
            for path in self.source_dir.rglob("*.json")
            if path.is_file() and len(path.relative_to(self.source_dir).parts) <= self.config.max_depth
        ]
        sources.sort(key=lambda path: path.relative_to(self.source_dir).as_posix())
        logger.info("Found %d loot table(s) in %s", len(sources), self.source_dir)
        return sources

    def load_document(self, path: Path) -> Any:
        """Read and parse one JSON document."""
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise SourceReadError(f"Could not read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SourceReadError(f"{path} is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise SourceReadError(f"Invalid JSON in {path}: {e}") from e

    def load_tables(self) -> LootTableCollection:
        """Parse every discovered document. Fails on the first bad document."""
        tables = []
        for path in self.discover_sources():
            name = table_name_from_path(path, self.config.table_name_suffix)
            tables.append(self.parser.parse(self.load_document(path), name))
        return LootTableCollection(tables=tuple(tables))

    def generate(self) -> str:
        """Generate the complete output file content."""
        body = self.serializer.serialize(self.load_tables())

        context = {
            "generation_comment": self._generate_command_comment(),
            "package": self.config.java_package,
            "class_name": self.config.java_class_name,
        }
        prefix = self.prefix_template.render(context)
        suffix = self.suffix_template.render(context)
        return f"{prefix}{body}\n{suffix}"

    def write(self, output_path: Path | str) -> str:
        """Generate and write the output file.

        Nothing is written unless every document decodes.

        Returns:
            The written content
        """
        output_path = Path(output_path)
        content = self.generate()

        if self.config.output.mode == OutputMode.ERROR_IF_EXISTS:
            AtomicWriter().write_if_not_exists(output_path, content)
        elif self.config.output.atomic_write:
            AtomicWriter().write(output_path, content)
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")

        logger.info("Wrote %s", output_path)
        return content

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Imported here: the CLI module imports this package
        from ..loot_table_to_code import loot_table_to_code, reconstruct_command_line

        command_line = reconstruct_command_line(loot_table_to_code)

        return f"// Generated by loot_table_to_code v{__version__} : {command_line}"
