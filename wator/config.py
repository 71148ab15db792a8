"""
Simulation parameters. Fixed once a World is built.

Defaults reproduce the reference run: a 640x480 torus seeded with 12000 fish
and 4000 sharks.
"""
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import CapacityExceededError


@dataclass(frozen=True)
class WorldConfig:
    width: int = 640
    height: int = 480
    n_fish: int = 12000
    n_sharks: int = 4000
    fish_breed: int = 60
    shark_breed: int = 35
    shark_starve: int = 30
    seed: Optional[int] = None

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def validate(self) -> "WorldConfig":
        for name in ("width", "height", "fish_breed", "shark_breed", "shark_starve"):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("n_fish", "n_sharks"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")
        requested = self.n_fish + self.n_sharks
        if requested > self.capacity:
            raise CapacityExceededError(requested, self.capacity)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WorldConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**d)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path=None) -> WorldConfig:
    """Read a JSON object of WorldConfig fields. A missing file gives defaults."""
    if path is None:
        return WorldConfig()
    config_path = Path(path)
    if not config_path.exists():
        return WorldConfig()
    with open(config_path) as file:
        return WorldConfig.from_dict(json.load(file))
