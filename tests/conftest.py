"""Shared fixtures: keep every test away from the user's real config."""

import pytest

import threadchain.config as config_module
from threadchain.cli.commands import config_cmd
from threadchain.core.models import Adapter, female, male

_ENV_VARS = (
    "THREADCHAIN_INVENTORY",
    "THREADCHAIN_ALLOW_DIRECT",
    "THREADCHAIN_MAX_CHAINS",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()


@pytest.fixture
def two_step_inventory():
    """A(M)-B(F) then B(M)-C(F): F(A) reaches M(C) through both pieces."""
    return [
        Adapter(male("A"), female("B")),
        Adapter(male("B"), female("C")),
    ]


@pytest.fixture
def inventory_file(tmp_path):
    path = tmp_path / "bag.yaml"
    path.write_text(
        "name: test bag\n"
        "adapters:\n"
        '  - ends: ["A(M)", "B(F)"]\n'
        '  - ends: ["B(M)", "C(F)"]\n'
        "    label: extension\n",
        encoding="utf-8",
    )
    return path
