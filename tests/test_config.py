"""Tests for YAML configuration."""

import pytest
import yaml

from cmd_palette import ConfigError, PaletteConfig
from cmd_palette import config


class TestPaths:
    def test_xdg_config_home(self, isolated_config):
        assert config.get_config_path() == isolated_config

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CMD_PALETTE_CONFIG", str(tmp_path / "custom.yaml"))
        assert config.get_config_path() == tmp_path / "custom.yaml"


class TestLoadConfig:
    def test_defaults_when_missing(self, isolated_config):
        cfg = config.load_config()
        assert cfg.max_visible_items == 10
        assert cfg.trigger_characters == frozenset({" ", "\t"})
        assert cfg.submenu_indicator == "»"
        assert cfg.close_on_empty is False
        assert cfg.registry_path is None

    def test_partial_override(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("max_visible_items: 5\nclose_on_empty: true\n")
        cfg = config.load_config(path)
        assert cfg.max_visible_items == 5
        assert cfg.close_on_empty is True
        assert cfg.submenu_indicator == "»"

    def test_trigger_characters(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("trigger_characters: ['/', ';']\n")
        assert config.load_config(path).trigger_characters == frozenset({"/", ";"})

    def test_invalid_yaml_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("max_visible_items: [oops\n")
        assert config.load_config(path).max_visible_items == 10

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- 1\n- 2\n")
        assert config.load_config(path) == PaletteConfig()

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("max_visible_items: 0\n")
        with pytest.raises(ConfigError):
            config.load_config(path)

    def test_registry_path_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        path = tmp_path / "config.yaml"
        path.write_text("registry_path: ~/reg.yaml\n")
        assert config.load_config(path).registry_path == tmp_path / "reg.yaml"


class TestPaletteConfig:
    def test_rejects_non_integer(self):
        with pytest.raises(ConfigError):
            PaletteConfig(max_visible_items="10")

    def test_rejects_bool(self):
        with pytest.raises(ConfigError):
            PaletteConfig(max_visible_items=True)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            PaletteConfig(max_visible_items=-1)


class TestSaveConfig:
    def test_round_trip(self, isolated_config):
        cfg = PaletteConfig(max_visible_items=7, submenu_indicator="›", close_on_empty=True)
        config.save_config(cfg)
        assert isolated_config.exists()
        assert config.load_config() == cfg

    def test_writes_yaml(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        config.save_config(PaletteConfig(), path)
        data = yaml.safe_load(path.read_text())
        assert data["max_visible_items"] == 10
        assert data["trigger_characters"] == ["\t", " "]
