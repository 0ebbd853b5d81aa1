"""Inventory models and YAML loading.

An inventory is the set of adapter pieces a search may draw from. On disk
it is a YAML document:

    name: camera bag
    adapters:
      - ends: ["EF(M)", "58(F)"]
      - ends: ["LTM(M)", "40.5(F)"]
        label: Rodenstock Rodagon 50mm f/2.8

Inventories are read-only input; nothing here writes them back.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..errors import InventoryError, InventoryNotFoundError
from .adapter import Adapter
from .thread import Thread, parse_thread

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parents[2] / "data"
SAMPLE_INVENTORY_PATH = _DATA_DIR / "sample_inventory.yaml"


class AdapterEntry(BaseModel):
    """One adapter as written in an inventory file."""

    ends: tuple[str, str] = Field(description="Both thread ends, e.g. ['EF(M)', '58(F)']")
    label: str = Field(default="", description="Optional human-readable name")

    @field_validator("ends")
    @classmethod
    def _validate_ends(cls, value: tuple[str, str]) -> tuple[str, str]:
        for end in value:
            parse_thread(end)
        return value

    def to_adapter(self) -> Adapter:
        a, b = (parse_thread(end) for end in self.ends)
        return Adapter(a, b, self.label)


class InventorySpec(BaseModel):
    """A named collection of adapter pieces."""

    name: str = "inventory"
    description: str | None = None
    adapters: list[AdapterEntry] = Field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "InventorySpec":
        """Load an inventory from a YAML file."""
        path = Path(path)

        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.model_validate(data or {})

    def to_adapters(self) -> list[Adapter]:
        return [entry.to_adapter() for entry in self.adapters]

    def threads(self) -> list[Thread]:
        """All distinct thread ends present in the inventory, canonically ordered."""
        seen = {thread for adapter in self.to_adapters() for thread in adapter.ends}
        return sorted(seen, key=Thread.sort_key)

    def summary(self) -> str:
        lines = [f"Inventory: {self.name}"]
        if self.description:
            lines.append(self.description)
        lines.append(f"Adapters: {len(self.adapters)}")
        lines.append(f"Threads: {len(self.threads())}")
        return "\n".join(lines)


def load_inventory(path: Path | str | None = None) -> InventorySpec:
    """Load an inventory file, or the bundled sample when no path is given.

    Raises:
        InventoryError: If the file is missing, is not valid YAML, or does
            not describe a valid inventory.
    """
    path = Path(path) if path else SAMPLE_INVENTORY_PATH

    if not path.exists():
        raise InventoryNotFoundError(f"Inventory file not found: {path}", path=str(path))

    try:
        spec = InventorySpec.from_yaml(path)
    except yaml.YAMLError as exc:
        raise InventoryError(f"Invalid YAML in {path}: {exc}", path=str(path)) from exc
    except ValidationError as exc:
        raise InventoryError(f"Invalid inventory {path}: {exc}", path=str(path)) from exc

    logger.info("Loaded inventory %r from %s (%d adapters)", spec.name, path, len(spec.adapters))
    return spec
