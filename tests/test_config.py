"""Tests for the layered settings (defaults, config file, env vars)."""

import json
from pathlib import Path

import pytest

from threadchain.config import (
    SearchConfig,
    ThreadchainConfig,
    configure,
    get_config,
    parse_bool,
    reset_config,
)


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "true", "Yes", " ON "])
    def test_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_false(self, value):
        assert parse_bool(value) is False

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")


class TestLoad:
    def test_defaults(self):
        config = ThreadchainConfig.load()
        assert config.search.allow_direct is False
        assert config.display.max_chains == 0
        assert config.defaults.inventory_path == ""
        assert config.inventory_path is None

    def test_config_file(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps(
                {
                    "search": {"allow_direct": True},
                    "display": {"max_chains": 5},
                    "defaults": {"inventory_path": "/gear/bag.yaml"},
                }
            )
        )
        config = ThreadchainConfig.load()
        assert config.search.allow_direct is True
        assert config.display.max_chains == 5
        assert config.inventory_path == Path("/gear/bag.yaml")

    def test_env_overrides_file(self, isolated_config, monkeypatch):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"display": {"max_chains": 5}}))
        monkeypatch.setenv("THREADCHAIN_MAX_CHAINS", "2")
        monkeypatch.setenv("THREADCHAIN_ALLOW_DIRECT", "yes")
        monkeypatch.setenv("THREADCHAIN_INVENTORY", "/tmp/other.yaml")

        config = ThreadchainConfig.load()
        assert config.display.max_chains == 2
        assert config.search.allow_direct is True
        assert config.defaults.inventory_path == "/tmp/other.yaml"

    def test_invalid_env_values_are_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("THREADCHAIN_MAX_CHAINS", "lots")
        monkeypatch.setenv("THREADCHAIN_ALLOW_DIRECT", "maybe")
        with caplog.at_level("WARNING", logger="threadchain.config"):
            config = ThreadchainConfig.load()
        assert config.display.max_chains == 0
        assert config.search.allow_direct is False
        assert "THREADCHAIN_MAX_CHAINS" in caplog.text
        assert "THREADCHAIN_ALLOW_DIRECT" in caplog.text

    def test_negative_env_max_chains_is_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv("THREADCHAIN_MAX_CHAINS", "-1")
        with caplog.at_level("WARNING", logger="threadchain.config"):
            config = ThreadchainConfig.load()
        assert config.display.max_chains == 0
        assert "THREADCHAIN_MAX_CHAINS" in caplog.text

    def test_negative_file_max_chains_is_ignored(self, isolated_config, caplog):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(
            json.dumps({"search": {"allow_direct": True}, "display": {"max_chains": -3}})
        )
        with caplog.at_level("WARNING", logger="threadchain.config"):
            config = ThreadchainConfig.load()
        assert config.display.max_chains == 0
        # The rest of the file still applies
        assert config.search.allow_direct is True
        assert "max_chains" in caplog.text

    def test_malformed_file_falls_back_to_defaults(self, isolated_config, caplog):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json")
        with caplog.at_level("WARNING", logger="threadchain.config"):
            config = ThreadchainConfig.load()
        assert config.display.max_chains == 0
        assert "Failed to load config" in caplog.text

    def test_inventory_path_expands_user(self):
        config = ThreadchainConfig()
        config.defaults.inventory_path = "~/bag.yaml"
        assert config.inventory_path == Path.home() / "bag.yaml"


class TestSave:
    def test_save_round_trip(self, isolated_config):
        config = ThreadchainConfig()
        config.display.max_chains = 3
        config.save()

        assert json.loads(isolated_config.read_text()) == config.to_dict()
        assert ThreadchainConfig.load().display.max_chains == 3

    def test_to_dict(self):
        assert ThreadchainConfig().to_dict() == {
            "search": {"allow_direct": False},
            "display": {"max_chains": 0},
            "defaults": {"inventory_path": ""},
        }


class TestSingleton:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_configure_and_reset(self):
        custom = ThreadchainConfig(search=SearchConfig(allow_direct=True))
        configure(custom)
        assert get_config() is custom
        reset_config()
        assert get_config() is not custom
        assert get_config().search.allow_direct is False
