#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from loot_table_to_code.loot_table_to_code import loot_table_to_code, reconstruct_command_line

LOOT_DIR = Path(__file__).parent / "test_data" / "loot"


def _small_table(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    document = {"pools": [{"rolls": 1, "entries": [{"type": "minecraft:empty", "weight": 5}]}]}
    (directory / "small.json").write_text(json.dumps(document), encoding="utf-8")


class TestCommandLine:
    """Test cases for command line reconstruction"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        assert reconstruct_command_line(loot_table_to_code) == "loot_table_to_code"

    def test_reconstruct_command_line_in_context(self, tmp_path):
        """Arguments first, existing paths shortened, default options omitted"""
        source = tmp_path / "loot"
        source.mkdir()
        ctx = loot_table_to_code.make_context(
            "loot_table_to_code", [str(source), str(tmp_path / "out.txt"), "-n", "MCLootTables", "--generation-comment"]
        )
        with ctx:
            command_line = reconstruct_command_line(loot_table_to_code)
        assert command_line.startswith("loot_table_to_code loot ")
        assert command_line.endswith(" --class-name MCLootTables --generation-comment")
        assert "--verbose" not in command_line


class TestCommand:
    def test_generates_output(self, tmp_path):
        output = tmp_path / "loot_tables_output.txt"
        result = CliRunner().invoke(loot_table_to_code, [str(LOOT_DIR), str(output)])
        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert "VILLAGE_WEAPONSMITH_CHEST" in content
        assert "SIMPLE_DUNGEON_CHEST" in content

    def test_class_and_package_options(self, tmp_path):
        _small_table(tmp_path / "loot")
        output = tmp_path / "MCLootTables.java"
        result = CliRunner().invoke(
            loot_table_to_code,
            [str(tmp_path / "loot"), str(output), "--class-name", "MCLootTables", "-p", "com.example.loot"],
        )
        assert result.exit_code == 0, result.output
        content = output.read_text(encoding="utf-8")
        assert content.startswith("package com.example.loot;\n\npublic class MCLootTables {\n")

    def test_config_file(self, tmp_path):
        _small_table(tmp_path / "loot")
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"table_name_suffix": "_LOOT"}), encoding="utf-8")
        output = tmp_path / "out.txt"
        result = CliRunner().invoke(loot_table_to_code, ["-c", str(config_path), str(tmp_path / "loot"), str(output)])
        assert result.exit_code == 0, result.output
        assert "SMALL_LOOT" in output.read_text(encoding="utf-8")

    def test_generation_comment_contains_command_line(self, tmp_path):
        _small_table(tmp_path / "loot")
        output = tmp_path / "out.txt"
        result = CliRunner().invoke(loot_table_to_code, [str(tmp_path / "loot"), str(output), "--generation-comment"])
        assert result.exit_code == 0, result.output
        first_line = output.read_text(encoding="utf-8").split("\n")[0]
        assert first_line.startswith("// Generated by loot_table_to_code v")
        assert "loot_table_to_code loot " in first_line
        assert first_line.endswith(" --generation-comment")

    def test_generation_comment_with_brackets_in_path(self, tmp_path):
        _small_table(tmp_path / "loot (old")
        output = tmp_path / "out.txt"
        result = CliRunner().invoke(loot_table_to_code, [str(tmp_path / "loot (old"), str(output), "--generation-comment"])
        assert result.exit_code == 0, result.output
        first_line = output.read_text(encoding="utf-8").split("\n")[0]
        assert " loot (old " in first_line
        assert "SMALL_CHEST" in output.read_text(encoding="utf-8")

    def test_unsupported_function_fails_without_output(self, tmp_path):
        source = tmp_path / "loot"
        source.mkdir()
        entry = {"type": "minecraft:item", "name": "minecraft:stone", "functions": [{"function": "minecraft:looting_enchant"}]}
        (source / "bad.json").write_text(json.dumps({"pools": [{"rolls": 1, "entries": [entry]}]}), encoding="utf-8")
        output = tmp_path / "out.txt"

        result = CliRunner().invoke(loot_table_to_code, [str(source), str(output)])

        assert result.exit_code != 0
        assert "minecraft:looting_enchant" in result.output
        assert not output.exists()

    def test_no_overwrite(self, tmp_path):
        _small_table(tmp_path / "loot")
        output = tmp_path / "out.txt"
        output.write_text("previous", encoding="utf-8")
        result = CliRunner().invoke(loot_table_to_code, [str(tmp_path / "loot"), str(output), "--no-overwrite"])
        assert result.exit_code != 0
        assert "already exists" in result.output
        assert output.read_text(encoding="utf-8") == "previous"


if __name__ == "__main__":
    pytest.main([__file__])
