"""Tests for configuration loading."""

from pathlib import Path

import pytest

from catalog_reflection.config import Config, SelectionConfig, load_config


def _write(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return str(path)


def test_load_full_config(tmp_path):
    path = _write(tmp_path, """
datasource:
  name: shop
  host: db.internal
  port: 6543
  database: shop
  user: reader
  password: secret
  options:
    sslmode: require
selection:
  including:
    public: ["^orders$", "^customers$"]
  excluding:
    public: ["^tmp_"]
  with_views: true
logging:
  level: DEBUG
  structured: true
""")

    config = load_config(path)

    assert config.datasource.host == "db.internal"
    assert config.datasource.port == 6543
    assert config.datasource.as_dict()["options"] == {"sslmode": "require"}
    assert config.selection.including == {"public": ["^orders$", "^customers$"]}
    assert list(config.selection.including) == ["public"]
    assert config.selection.excluding == {"public": ["^tmp_"]}
    assert config.selection.with_views is True
    assert config.selection.variant == "pgdg"
    assert config.logging.level == "DEBUG"
    assert config.logging.structured is True


def test_load_minimal_config(tmp_path):
    """Test loading minimal configuration with defaults."""
    path = _write(tmp_path, """
datasource:
  database: app
""")

    config = load_config(path)

    assert config.datasource.database == "app"
    assert config.datasource.port == 5432
    assert config.selection.table is None
    assert config.selection.including is None
    assert config.logging.level == "INFO"


def test_empty_file_gives_defaults(tmp_path):
    config = load_config(_write(tmp_path, ""))
    assert isinstance(config, Config)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/config.yaml")


def test_table_and_including_conflict():
    with pytest.raises(ValueError):
        SelectionConfig(table="orders", including={"public": ["^a$"]})


def test_unknown_variant():
    with pytest.raises(ValueError, match="variant"):
        SelectionConfig(variant="oracle")


def test_patterns_must_be_lists(tmp_path):
    path = _write(tmp_path, """
selection:
  excluding:
    public: "^tmp_"
""")

    with pytest.raises(ValueError, match="excluding.public"):
        load_config(path)


def test_empty_section_takes_defaults(tmp_path):
    path = _write(tmp_path, """
datasource:
  database: app
selection:
logging:
""")

    config = load_config(path)

    assert config.selection == SelectionConfig()
    assert config.logging.level == "INFO"


def test_unknown_key_is_rejected(tmp_path):
    path = _write(tmp_path, """
selection:
  tables: orders
""")

    with pytest.raises(ValueError, match="Unknown key\\(s\\) in 'selection': tables"):
        load_config(path)


def test_section_must_be_a_mapping(tmp_path):
    path = _write(tmp_path, """
logging: DEBUG
""")

    with pytest.raises(ValueError, match="'logging' must be a mapping"):
        load_config(path)


def test_load_example_config():
    """Test loading the example configuration."""
    config_path = Path(__file__).parent.parent / "config" / "example_config.yaml"

    if not config_path.exists():
        pytest.skip("Example config not found")

    config = load_config(str(config_path))

    assert config.datasource.database == "shop"
    assert config.selection.table is None
    assert list(config.selection.including["public"]) == ["^orders$", "^customers$", "^order_items$"]
    assert config.selection.variant == "pgdg"
