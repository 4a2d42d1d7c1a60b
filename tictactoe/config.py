"""Console configuration loaded from YAML.

Example ``configs/play.yaml``::

    console:
      x_glyph: "x"
      o_glyph: "o"
      empty_glyph: "▢"
      prompt: "Enter move (e.g. 1A): "
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

import yaml

from tictactoe.game.board import EMPTY_GLYPH


@dataclass
class ConsoleConfig:
    x_glyph: str = "x"
    o_glyph: str = "o"
    empty_glyph: str = EMPTY_GLYPH
    prompt: str = "Enter move (e.g. 1A): "

    @property
    def glyphs(self) -> dict[str, str]:
        return {"x": self.x_glyph, "o": self.o_glyph}


def config_from_dict(data: Optional[dict]) -> ConsoleConfig:
    """Build a ConsoleConfig from the top-level config mapping.

    Keys missing from the ``console`` section keep their defaults.

    Raises:
        ValueError: Unknown keys or invalid glyph values.
    """
    section = (data or {}).get("console") or {}
    if not isinstance(section, dict):
        raise ValueError("'console' section must be a mapping")

    known = {f.name for f in fields(ConsoleConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown console config keys: {', '.join(unknown)}")

    for key, value in section.items():
        if not isinstance(value, str) or not value:
            raise ValueError(f"console.{key} must be a non-empty string, got {value!r}")
        if key.endswith("_glyph") and len(value) != 1:
            raise ValueError(f"console.{key} must be a single character, got {value!r}")

    return ConsoleConfig(**section)


def load_config(path: Optional[str] = None) -> ConsoleConfig:
    """Load console configuration from a YAML file, or defaults if path is None."""
    if path is None:
        return ConsoleConfig()
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level")
    return config_from_dict(data)
