"""Configuration management for threadchain.

Config resolution order (highest priority first):
1. Programmatic (ThreadchainConfig constructed in code)
2. Environment variables (THREADCHAIN_INVENTORY, etc.)
3. Config file (~/.config/threadchain/config.json, managed by `threadchain config`)
4. Hardcoded defaults

Only settings live here. Inventories are read from their own YAML files
and are never written by threadchain.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "threadchain"
CONFIG_FILE = CONFIG_DIR / "config.json"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean setting string.

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid boolean: {value!r}. Expected one of: "
        f"{', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}"
    )


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class SearchConfig:
    """Chain search behavior.

    - allow_direct: also report the marker-only chain when start already
      mates with end (off: only chains through at least one adapter)
    """

    allow_direct: bool = False


@dataclass
class DisplayConfig:
    """Output settings."""

    max_chains: int = 0  # 0 = print every chain


@dataclass
class DefaultsConfig:
    """Default inputs."""

    inventory_path: str = ""  # empty = bundled sample inventory


# =============================================================================
# Main config class
# =============================================================================


@dataclass
class ThreadchainConfig:
    """Top-level threadchain configuration.

    Examples:
        # Package use, no files needed
        config = ThreadchainConfig(search=SearchConfig(allow_direct=True))

        # CLI use, loads from ~/.config/threadchain/config.json
        config = ThreadchainConfig.load()
    """

    search: SearchConfig = field(default_factory=SearchConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls) -> "ThreadchainConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                _apply_dict(config, data)
            except (json.JSONDecodeError, OSError, ValueError, TypeError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)
                config = cls()

        # Layer 2: Env var overrides
        if val := os.environ.get("THREADCHAIN_INVENTORY"):
            config.defaults.inventory_path = val
        if val := os.environ.get("THREADCHAIN_ALLOW_DIRECT"):
            try:
                config.search.allow_direct = parse_bool(val)
            except ValueError:
                logger.warning("Invalid THREADCHAIN_ALLOW_DIRECT=%r, ignoring", val)
        if val := os.environ.get("THREADCHAIN_MAX_CHAINS"):
            try:
                max_chains = int(val)
            except ValueError:
                logger.warning("Invalid THREADCHAIN_MAX_CHAINS=%r, ignoring", val)
            else:
                if max_chains < 0:
                    logger.warning("Negative THREADCHAIN_MAX_CHAINS=%r, ignoring", val)
                else:
                    config.display.max_chains = max_chains

        return config

    def save(self) -> None:
        """Save config to ~/.config/threadchain/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "search": asdict(self.search),
            "display": asdict(self.display),
            "defaults": asdict(self.defaults),
        }

    @property
    def inventory_path(self) -> Path | None:
        """Configured inventory file, or None for the bundled sample."""
        if not self.defaults.inventory_path:
            return None
        return Path(self.defaults.inventory_path).expanduser()


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: ThreadchainConfig, data: dict) -> None:
    """Apply a dict of values onto a ThreadchainConfig."""
    if not isinstance(data, dict):
        raise ValueError("config file must contain a JSON object")
    if isinstance(data.get("search"), dict):
        if "allow_direct" in data["search"]:
            value = data["search"]["allow_direct"]
            if isinstance(value, str):
                value = parse_bool(value)
            config.search.allow_direct = bool(value)
    if isinstance(data.get("display"), dict):
        if "max_chains" in data["display"]:
            max_chains = int(data["display"]["max_chains"])
            if max_chains < 0:
                logger.warning(
                    "Negative display.max_chains=%d in config file, ignoring", max_chains
                )
            else:
                config.display.max_chains = max_chains
    if isinstance(data.get("defaults"), dict):
        if "inventory_path" in data["defaults"]:
            config.defaults.inventory_path = str(data["defaults"]["inventory_path"])


# =============================================================================
# Global config singleton
# =============================================================================

_config: ThreadchainConfig | None = None


def get_config() -> ThreadchainConfig:
    """Get the global ThreadchainConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = ThreadchainConfig.load()
    return _config


def configure(config: ThreadchainConfig) -> None:
    """Set the global ThreadchainConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
