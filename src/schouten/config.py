"""Engine and CLI configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict


@dataclass
class EngineConfig:
    """Settings shared by the engine, renderer and CLI.

    Attributes:
        cache_size: Sieve cache entry limit (0 = disabled, None = unbounded).
        spiral_count: Default number of spiral points to generate.
        figure_dpi: Resolution used when saving rendered figures.
    """
    cache_size: int | None = 128
    spiral_count: int = 25
    figure_dpi: int = 150

    def __post_init__(self):
        if self.cache_size is not None and self.cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {self.cache_size}")
        if self.spiral_count < 1:
            raise ValueError(f"spiral_count must be >= 1, got {self.spiral_count}")
        if self.figure_dpi < 1:
            raise ValueError(f"figure_dpi must be >= 1, got {self.figure_dpi}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'EngineConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


def load_config(path: str | Path) -> EngineConfig:
    """Load configuration from a JSON file."""
    with open(path) as f:
        return EngineConfig.from_dict(json.load(f))


def save_config(config: EngineConfig, path: str | Path) -> None:
    """Write configuration to a JSON file."""
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
