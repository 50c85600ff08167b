"""User settings: default location, candle-lighting offset, range limit.

Stored as JSON. Lookup order for the file: explicit path, ``$LUACH_CONFIG``,
``$XDG_CONFIG_HOME/luach/config.json`` (``~/.config`` when unset).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.errors import ConfigError, LuachError
from .core.types import GeoLocation

logger = logging.getLogger(__name__)

ENV_VAR = "LUACH_CONFIG"


@dataclass(frozen=True)
class LuachConfig:
    default_location: Optional[GeoLocation] = field(default_factory=GeoLocation.jerusalem)
    candle_lighting_offset_minutes: int = 18
    max_range_days: int = 366

    def __post_init__(self):
        if self.candle_lighting_offset_minutes < 0:
            raise ConfigError("candle_lighting_offset_minutes must be >= 0")
        if self.max_range_days < 1:
            raise ConfigError("max_range_days must be >= 1")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "default_location": None if self.default_location is None else self.default_location.to_dict(),
            "candle_lighting_offset_minutes": self.candle_lighting_offset_minutes,
            "max_range_days": self.max_range_days,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LuachConfig":
        defaults = cls()
        loc = d.get("default_location", defaults.default_location)
        if isinstance(loc, dict):
            loc = GeoLocation.from_dict(loc)
        return cls(
            default_location=loc,
            candle_lighting_offset_minutes=int(d.get("candle_lighting_offset_minutes", defaults.candle_lighting_offset_minutes)),
            max_range_days=int(d.get("max_range_days", defaults.max_range_days)),
        )


def config_path(path: Union[str, Path, None] = None) -> Path:
    if path is not None:
        return Path(path)
    env = os.environ.get(ENV_VAR, "").strip()
    if env:
        return Path(env).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "luach" / "config.json"


def load_config(path: Union[str, Path, None] = None) -> LuachConfig:
    p = config_path(path)
    if not p.exists():
        logger.debug("no config at %s, using defaults", p)
        return LuachConfig()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a JSON object")
    try:
        cfg = LuachConfig.from_dict(data)
    except ConfigError:
        raise
    except (LuachError, KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"{p}: {e}") from e
    logger.debug("loaded config from %s", p)
    return cfg


def save_config(config: LuachConfig, path: Union[str, Path, None] = None) -> Path:
    p = config_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("saved config to %s", p)
    return p
