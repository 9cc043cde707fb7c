"""
Tests for configuration loading and saving.

Run with: pytest tests/test_config.py -v
"""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from tritium_core.config import (
    TritiumConfig,
    PathConfig,
    ClassConfig,
    load_config,
    save_config,
    get_default_config,
)


@pytest.fixture
def custom_config():
    """Config with every section changed from its default."""
    config = TritiumConfig()
    config.paths.image_dir = "static/img/"
    config.paths.body_prefix = "/html/body/main//"
    config.classes.create_missing = True
    return config


class TestDefaults:
    """Tests for default configuration values."""

    def test_default_paths(self):
        """Default prefixes match the path builders' defaults."""
        config = get_default_config()
        assert config.paths.image_dir == "images/"
        assert config.paths.body_prefix == "/html/body//"

    def test_default_classes(self):
        """Absent class attributes are not created by default."""
        assert get_default_config().classes.create_missing is False

    def test_from_empty_dict(self):
        """An empty dictionary gives the default config."""
        assert TritiumConfig.from_dict({}) == TritiumConfig()


class TestRoundTrip:
    """Tests for save_config() followed by load_config()."""

    @pytest.mark.parametrize("name", ["tritium.json", "tritium.yaml", "tritium.yml"])
    def test_round_trip(self, tmp_path, custom_config, name):
        """Saving then loading gives the same config."""
        path = tmp_path / "nested" / name
        save_config(custom_config, path)
        assert load_config(path) == custom_config

    def test_partial_json(self, tmp_path):
        """Missing sections and fields fall back to defaults."""
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"paths": {"image_dir": "img/"}}), encoding="utf-8")
        config = load_config(path)
        assert config.paths == PathConfig(image_dir="img/")
        assert config.classes == ClassConfig()

    def test_empty_yaml(self, tmp_path):
        """An empty YAML file gives the default config."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == TritiumConfig()

    def test_unknown_sections_ignored(self, tmp_path, caplog):
        """Unknown top-level sections are skipped with a warning."""
        path = tmp_path / "legacy.json"
        path.write_text(json.dumps({"log_level": "DEBUG", "classes": {"create_missing": True}}),
                        encoding="utf-8")
        with caplog.at_level("WARNING"):
            config = load_config(path)
        assert config.classes.create_missing is True
        assert "log_level" in caplog.text

    def test_string_paths(self, tmp_path):
        """Paths may be passed as strings."""
        path = str(tmp_path / "tritium.yaml")
        save_config(TritiumConfig(), path)
        assert load_config(path) == TritiumConfig()

    def test_to_dict_sections(self):
        """Serialization holds exactly the helper sections."""
        assert set(TritiumConfig().to_dict()) == {"paths", "classes"}


class TestErrors:
    """Tests for config error handling."""

    def test_missing_file(self, tmp_path):
        """Loading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_unsupported_load_format(self, tmp_path):
        """Loading an unknown extension raises ValueError."""
        path = tmp_path / "config.ini"
        path.write_text("[paths]", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)

    def test_unsupported_save_format(self, tmp_path):
        """Saving to an unknown extension raises before writing."""
        with pytest.raises(ValueError):
            save_config(TritiumConfig(), tmp_path / "config.ini")
        assert not (tmp_path / "config.ini").exists()
