from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from delve.errors import ConfigError

Color = Tuple[int, int, int]

CONFIG_ENV_VAR = "DELVE_CONFIG"


@dataclass
class GameConfig:
    # screen, in cells
    screen_width: int = 80
    screen_height: int = 50
    tile_size: int = 16
    font_name: str = "consolas"
    limit_fps: int = 20

    # map
    map_width: int = 80
    map_height: int = 45
    room_min_size: int = 10
    room_max_size: int = 10
    max_rooms: int = 40
    max_room_monsters: int = 3
    seed: Optional[int] = None  # None -> fresh random dungeon every run

    # fov
    fov_algorithm: str = "basic"
    fov_light_walls: bool = True
    torch_radius: int = 10

    # player
    player_hp: int = 30
    player_defense: int = 2
    player_power: int = 5

    # message panel below the map
    log_capacity: int = 50

    # palette
    color_dark_wall: Color = (0, 0, 100)
    color_light_wall: Color = (0, 0, 100)
    color_dark_ground: Color = (50, 50, 150)
    color_light_ground: Color = (200, 180, 50)
    color_message: Color = (220, 230, 240)

    @property
    def room_size(self) -> Tuple[int, int]:
        return (self.room_min_size, self.room_max_size)

    @property
    def panel_rows(self) -> int:
        return max(0, self.screen_height - self.map_height)


def _coerce(name: str, value: Any, current: Any) -> Any:
    # YAML has no tuples; colours come back as lists.
    if isinstance(current, tuple):
        if not isinstance(value, (list, tuple)) or len(value) != len(current):
            raise ConfigError(f"Config key '{name}' expects {len(current)} values, got {value!r}")
        return tuple(int(v) for v in value)
    return value


def config_from_mapping(data: Dict[str, Any], base: Optional[GameConfig] = None) -> GameConfig:
    """Return a GameConfig with ``data`` applied over ``base`` (or the defaults)."""
    cfg = base or GameConfig()
    known = {f.name for f in dataclasses.fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    overrides = {k: _coerce(k, v, getattr(cfg, k)) for k, v in data.items()}
    cfg = dataclasses.replace(cfg, **overrides)
    if cfg.room_min_size > cfg.room_max_size:
        raise ConfigError("room_min_size must not exceed room_max_size")
    return cfg


def load_config(path: Path | str | None = None) -> GameConfig:
    """Load a GameConfig from a YAML file.

    With no path, ``$DELVE_CONFIG`` is consulted; if that is unset too the
    defaults are returned.
    """
    if path is None:
        path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        return GameConfig()
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {path}: {exc}") from exc
    if data is None:
        return GameConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file malformed (expected a mapping): {path}")
    return config_from_mapping(data)
