"""Monster templates and factories."""

from .templates import MonsterTemplate, MONSTER_TEMPLATES, load_monster_templates, choose_template, default_templates
from .factory import spawn_monster

__all__ = [
    "MonsterTemplate",
    "MONSTER_TEMPLATES",
    "load_monster_templates",
    "choose_template",
    "default_templates",
    "spawn_monster",
]
