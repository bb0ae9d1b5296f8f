from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import yaml

from delve.errors import ConfigError
from delve.rng import RandomSource

log = logging.getLogger(__name__)

DEFAULT_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "content" / "monsters.yaml"


@dataclass(frozen=True)
class MonsterTemplate:
    id: str
    name: str
    glyph: str
    color: Tuple[int, int, int]
    hp: int
    defense: int
    power: int
    weight: int = 1


MONSTER_TEMPLATES: Dict[str, MonsterTemplate] = {}


def _build_template(entry: dict) -> MonsterTemplate:
    try:
        return MonsterTemplate(
            id=entry["id"],
            name=entry.get("name", entry["id"]),
            glyph=entry["glyph"],
            color=tuple(entry["color"]),
            hp=int(entry["hp"]),
            defense=int(entry.get("defense", 0)),
            power=int(entry["power"]),
            weight=int(entry.get("weight", 1)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Bad monster template entry {entry!r}: {exc}") from exc


def load_monster_templates(path: Path | str | None = None) -> Dict[str, MonsterTemplate]:
    """Load monster templates from YAML and populate MONSTER_TEMPLATES."""
    if path is None:
        path = DEFAULT_TEMPLATE_PATH
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Monster template file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Monster template file is not valid YAML: {path}: {exc}") from exc
    if not isinstance(data, list) or not data:
        raise ConfigError(f"Monster template file malformed: {path}")
    loaded = [_build_template(entry) for entry in data]
    MONSTER_TEMPLATES.clear()
    for tmpl in loaded:
        MONSTER_TEMPLATES[tmpl.id] = tmpl
    log.debug("loaded %d monster templates from %s: %s", len(MONSTER_TEMPLATES), path, list(MONSTER_TEMPLATES))
    return MONSTER_TEMPLATES


def default_templates() -> List[MonsterTemplate]:
    if not MONSTER_TEMPLATES:
        load_monster_templates()
    return list(MONSTER_TEMPLATES.values())


def choose_template(rng: RandomSource, templates: Sequence[MonsterTemplate]) -> MonsterTemplate:
    """Pick a species with a single ``random()`` roll against the weights.

    With the packaged table (orc 80, troll 20) a roll below 0.8 is an orc.
    """
    if not templates:
        raise ValueError("choose_template() needs at least one template")
    total = sum(t.weight for t in templates)
    threshold = rng.random() * total
    cumulative = 0
    for tmpl in templates:
        cumulative += tmpl.weight
        if threshold < cumulative:
            return tmpl
    return templates[-1]
