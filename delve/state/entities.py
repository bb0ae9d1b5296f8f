# delve/state/entities.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from delve.state.actors import Ai, Fighter

Pos = Tuple[int, int]
Color = Tuple[int, int, int]

# Draw order hints; corpses go under anything still standing.
LAYER_CORPSE = 0
LAYER_ACTOR = 2


@dataclass
class Entity:
    """Anything that stands on a map cell: the player, monsters, corpses.

    Capabilities are optional records. Systems ask ``entity.fighter is not
    None`` rather than checking what kind of thing the entity is.
    """
    name: str
    pos: Pos

    # Visuals
    glyph: str = "?"
    color: Color = (255, 255, 255)
    render_layer: int = LAYER_ACTOR

    # Collision
    blocks: bool = False

    alive: bool = True
    fighter: Optional[Fighter] = None
    ai: Optional[Ai] = None

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    def distance_to(self, other: "Entity") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)
