from loot_table_to_code.pipeline import CodeGeneratorConfig, OutputMode


def test_defaults():
    config = CodeGeneratorConfig()
    assert config.table_name_suffix == "_CHEST"
    assert config.item_namespace == "minecraft"
    assert config.max_depth == 3
    assert config.add_generation_comment is False
    assert config.output.mode == OutputMode.FORCE
    assert config.output.atomic_write is True


def test_from_dict():
    config = CodeGeneratorConfig.from_dict(
        {
            "table_name_suffix": "_LOOT",
            "java_class_name": "MCLootTables",
            "java_package": "kaptainwutax.featureutils.loot",
            "output": {"mode": "error", "atomic_write": False},
            "unknown_option": 1,
        }
    )
    assert config.table_name_suffix == "_LOOT"
    assert config.java_class_name == "MCLootTables"
    assert config.java_package == "kaptainwutax.featureutils.loot"
    assert config.output.mode == OutputMode.ERROR_IF_EXISTS
    assert config.output.atomic_write is False
    assert not hasattr(config, "unknown_option")


def test_to_dict_roundtrip():
    config = CodeGeneratorConfig.from_dict({"max_depth": 5, "output": {"mode": "error"}})
    data = config.to_dict()
    assert data["max_depth"] == 5
    assert data["output"] == {"mode": "error", "atomic_write": True}
    assert CodeGeneratorConfig.from_dict(data) == config
