"""Render configuration.

A RenderConfig can be built in code, loaded from a JSON file, or assembled by
the CLI from a file plus command-line overrides.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ulam_spiral.errors import ConfigError

Color = Tuple[int, int, int]

CENTER_COLOR: Color = (0, 0, 0)
PRIME_COLOR: Color = (171, 52, 175)
COMPOSITE_COLOR: Color = (52, 64, 175)

_COLOR_FIELDS = ("center_color", "prime_color", "composite_color")


def _validate_color(name: str, value: Any) -> Color:
    try:
        channels = tuple(int(c) for c in value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be three integers, got {value!r}") from e

    if len(channels) != 3 or not all(0 <= c <= 255 for c in channels):
        raise ConfigError(f"{name} must be three integers in 0..255, got {value!r}")
    return channels


@dataclass
class RenderConfig:
    """Settings for rendering a spiral to an image."""
    dimension: int = 501
    output_path: Optional[str] = None
    center_color: Color = CENTER_COLOR
    prime_color: Color = PRIME_COLOR
    composite_color: Color = COMPOSITE_COLOR

    def __post_init__(self):
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int):
            raise ConfigError(f"dimension must be an integer, got {self.dimension!r}")
        if self.output_path is not None and not isinstance(self.output_path, str):
            raise ConfigError(f"output_path must be a string, got {self.output_path!r}")
        for name in _COLOR_FIELDS:
            setattr(self, name, _validate_color(name, getattr(self, name)))

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for name in _COLOR_FIELDS:
            d[name] = list(d[name])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'RenderConfig':
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})

    @classmethod
    def load(cls, path: str | Path) -> 'RenderConfig':
        """Load a configuration from a JSON file.

        Raises:
            ConfigError: If the file is missing or not a JSON object.
        """
        path = Path(path)
        try:
            with open(path) as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config in {path} must be a JSON object")
        return cls.from_dict(data)

    def save(self, path: str | Path) -> None:
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def with_overrides(self, **overrides: Any) -> 'RenderConfig':
        """Return a copy with every non-None override applied."""
        d = self.to_dict()
        d.update({k: v for k, v in overrides.items() if v is not None})
        return RenderConfig.from_dict(d)
