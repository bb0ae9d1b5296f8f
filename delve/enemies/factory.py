from __future__ import annotations

from typing import Tuple

from delve.enemies.templates import MonsterTemplate
from delve.state.actors import Ai, DeathPolicy, Fighter
from delve.state.entities import Entity


def spawn_monster(tmpl: MonsterTemplate, pos: Tuple[int, int]) -> Entity:
    """Create a blocking, AI-driven monster Entity from a template."""
    return Entity(
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        color=tmpl.color,
        blocks=True,
        alive=True,
        fighter=Fighter.fresh(tmpl.hp, tmpl.defense, tmpl.power, DeathPolicy.MONSTER),
        ai=Ai(),
    )
