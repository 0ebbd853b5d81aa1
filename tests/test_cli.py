"""CLI smoke tests using typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from threadchain import __version__
from threadchain.cli.app import app

runner = CliRunner()


@pytest.fixture
def two_route_file(tmp_path):
    """F(A) reaches M(B) directly through 'step' or via 'extension' first."""
    path = tmp_path / "routes.yaml"
    path.write_text(
        "name: routes\n"
        "adapters:\n"
        '  - ends: ["A(M)", "A(F)"]\n'
        "    label: extension\n"
        '  - ends: ["A(M)", "B(F)"]\n'
        "    label: step\n",
        encoding="utf-8",
    )
    return path


class TestChainCommand:
    """Tests for the chain command."""

    def test_chain_found(self, inventory_file):
        result = runner.invoke(app, ["chain", "A(F)", "C(M)", "-i", str(inventory_file)])
        assert result.exit_code == 0
        assert "[start: A(F)] [A(M) -> B(F)] [extension] [end: C(M)]" in result.output
        assert "Found 1 chains" in result.output

    def test_chain_json(self, inventory_file):
        result = runner.invoke(
            app, ["--json", "chain", "A(F)", "C(M)", "-i", str(inventory_file)]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["status"] == "success"
        assert data["count"] == 1
        assert data["inventory"] == "test bag"
        assert data["chains"][0]["adapters"] == [
            "start: A(F)",
            "A(M) -> B(F)",
            "extension",
            "end: C(M)",
        ]

    def test_no_chains_is_a_warning(self, inventory_file):
        result = runner.invoke(app, ["chain", "A(F)", "C(F)", "-i", str(inventory_file)])
        assert result.exit_code == 0
        assert "No chains connect A(F) to C(F)" in result.output

    def test_no_chains_json(self, inventory_file):
        result = runner.invoke(
            app, ["--json", "chain", "A(F)", "C(F)", "-i", str(inventory_file)]
        )
        data = json.loads(result.stdout)
        assert data["count"] == 0
        assert data["chains"] == []
        assert data["warnings"]

    def test_invalid_thread(self, inventory_file):
        result = runner.invoke(app, ["chain", "EF", "C(M)", "-i", str(inventory_file)])
        assert result.exit_code == 1

    def test_missing_inventory(self, tmp_path):
        result = runner.invoke(
            app, ["chain", "A(F)", "C(M)", "-i", str(tmp_path / "missing.yaml")]
        )
        assert result.exit_code == 3
        assert "not found" in result.output

    def test_extra_adapter(self, inventory_file):
        result = runner.invoke(
            app,
            [
                "chain",
                "A(F)",
                "D(M)",
                "-i",
                str(inventory_file),
                "--add",
                "spare: C(M) -> D(F)",
            ],
        )
        assert result.exit_code == 0
        assert "[spare]" in result.output
        assert "Found 1 chains" in result.output

    def test_invalid_extra_adapter(self, inventory_file):
        result = runner.invoke(
            app, ["chain", "A(F)", "C(M)", "-i", str(inventory_file), "--add", "C(M)"]
        )
        assert result.exit_code == 1

    def test_limit(self, two_route_file):
        result = runner.invoke(
            app, ["chain", "A(F)", "B(M)", "-i", str(two_route_file), "--limit", "1"]
        )
        assert result.exit_code == 0
        assert "1 more" in result.output
        assert "Found 2 chains" in result.output

    def test_direct_match_needs_an_adapter_by_default(self, inventory_file):
        result = runner.invoke(app, ["chain", "A(F)", "A(M)", "-i", str(inventory_file)])
        assert result.exit_code == 0
        assert "No chains connect" in result.output

    def test_direct_flag_reports_marker_only_chain(self, inventory_file):
        result = runner.invoke(
            app, ["chain", "A(F)", "A(M)", "-i", str(inventory_file), "--direct"]
        )
        assert result.exit_code == 0
        assert "[start: A(F)] [end: A(M)]" in result.output
        assert "Found 1 chains" in result.output

    def test_direct_from_config(self, inventory_file, monkeypatch):
        monkeypatch.setenv("THREADCHAIN_ALLOW_DIRECT", "true")
        result = runner.invoke(app, ["chain", "A(F)", "A(M)", "-i", str(inventory_file)])
        assert "[start: A(F)] [end: A(M)]" in result.output

    def test_negative_max_chains_from_env_shows_all(self, two_route_file, monkeypatch):
        monkeypatch.setenv("THREADCHAIN_MAX_CHAINS", "-1")
        result = runner.invoke(app, ["chain", "A(F)", "B(M)", "-i", str(two_route_file)])
        assert result.exit_code == 0
        assert "more" not in result.output
        assert "[step]" in result.output
        assert "[extension] [step]" in result.output
        assert "Found 2 chains" in result.output

    def test_inventory_from_env(self, inventory_file, monkeypatch):
        monkeypatch.setenv("THREADCHAIN_INVENTORY", str(inventory_file))
        result = runner.invoke(app, ["--json", "chain", "A(F)", "C(M)"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["inventory"] == "test bag"

    def test_bundled_sample_by_default(self):
        result = runner.invoke(app, ["--json", "chain", "EF(F)", "52(M)"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["inventory"] == "camera bag"
        assert data["count"] >= 1


class TestAdditionsCommand:
    """Tests for the additions command."""

    def test_additions_json(self, inventory_file):
        result = runner.invoke(app, ["--json", "additions", "-i", str(inventory_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["candidates"] == 10
        counts = [entry["count"] for entry in data["additions"]]
        assert counts == sorted(counts)

    def test_additions_top(self, inventory_file):
        result = runner.invoke(
            app, ["--json", "additions", "-i", str(inventory_file), "--top", "3"]
        )
        data = json.loads(result.stdout)
        assert len(data["additions"]) == 3
        assert data["candidates"] == 10

    def test_additions_human(self, inventory_file):
        result = runner.invoke(app, ["additions", "-i", str(inventory_file)])
        assert result.exit_code == 0
        assert "new chains" in result.output
        assert "Scored 10 candidate adapters" in result.output


class TestInventoryCommand:
    """Tests for the inventory command."""

    def test_inventory_table(self, inventory_file):
        result = runner.invoke(app, ["inventory", "-i", str(inventory_file)])
        assert result.exit_code == 0
        assert "test bag" in result.output
        assert "Inventory: test bag" in result.output
        assert "Thread ends" in result.output
        assert "Connectable threads" in result.output
        assert "Loaded 2 adapters" in result.output

    def test_inventory_json(self, inventory_file):
        result = runner.invoke(app, ["--json", "inventory", "-i", str(inventory_file)])
        data = json.loads(result.stdout)
        assert data["count"] == 2
        assert data["adapters"][1]["Label"] == "extension"
        assert data["connectable_threads"] == ["B(M)", "C(M)", "A(F)", "B(F)"]
        assert data["threads"] == ["A(M)", "B(M)", "B(F)", "C(F)"]

    def test_invalid_inventory(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text('adapters:\n  - ends: ["A", "B(F)"]\n', encoding="utf-8")
        result = runner.invoke(app, ["inventory", "-i", str(path)])
        assert result.exit_code == 1


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Search" in result.output
        assert "Defaults" in result.output

    def test_config_set_and_show(self, isolated_config):
        result = runner.invoke(app, ["config", "set", "search.allow_direct", "true"])
        assert result.exit_code == 0
        assert isolated_config.exists()

        result = runner.invoke(app, ["config", "show"])
        assert "allow_direct   = True" in result.output

    def test_config_inventory_path_used_by_chain(self, inventory_file):
        runner.invoke(
            app, ["config", "set", "defaults.inventory_path", str(inventory_file)]
        )
        result = runner.invoke(app, ["--json", "chain", "A(F)", "C(M)"])
        assert json.loads(result.stdout)["inventory"] == "test bag"

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_int_value(self):
        result = runner.invoke(app, ["config", "set", "display.max_chains", "abc"])
        assert result.exit_code == 1
        assert "Invalid integer" in result.output

    def test_config_set_negative_int_value(self):
        result = runner.invoke(app, ["config", "set", "display.max_chains", "--", "-1"])
        assert result.exit_code == 1
        assert "Value must be >= 0" in result.output

    def test_config_set_invalid_bool_value(self):
        result = runner.invoke(app, ["config", "set", "search.allow_direct", "maybe"])
        assert result.exit_code == 1
        assert "Invalid boolean" in result.output

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_reset(self, isolated_config):
        runner.invoke(app, ["config", "set", "display.max_chains", "3"])
        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not isolated_config.exists()

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output


class TestVersionFlag:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"threadchain {__version__}" in result.output
