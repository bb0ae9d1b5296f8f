"""Visibility: the protocol the core consumes, a tcod-backed implementation,
and the per-frame cache that decides when to recompute.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol, Tuple

import numpy as np
import tcod.constants
import tcod.map

from delve.state.world import World

log = logging.getLogger(__name__)

Pos = Tuple[int, int]

FOV_ALGORITHMS: Dict[str, int] = {
    "basic": tcod.constants.FOV_BASIC,
    "diamond": tcod.constants.FOV_DIAMOND,
    "shadow": tcod.constants.FOV_SHADOW,
    "restrictive": tcod.constants.FOV_RESTRICTIVE,
    "symmetric_shadowcast": tcod.constants.FOV_SYMMETRIC_SHADOWCAST,
}


def resolve_algorithm(name: str) -> int:
    try:
        return FOV_ALGORITHMS[name]
    except KeyError as exc:
        known = ", ".join(sorted(FOV_ALGORITHMS))
        raise ValueError(f"Unknown FOV algorithm '{name}'. Known algorithms: {known}") from exc


class Visibility(Protocol):
    def rebuild(self, world: World) -> None: ...

    def compute_fov(self, x: int, y: int, radius: int, light_walls: bool, algorithm: str) -> None: ...

    def is_in_fov(self, x: int, y: int) -> bool: ...


class TcodVisibility:
    """Visibility backed by ``tcod.map.compute_fov``.

    Arrays are indexed ``[x, y]`` so a world position doubles as the pov.
    """

    def __init__(self, world: Optional[World] = None) -> None:
        self.transparent = np.zeros((0, 0), dtype=bool)
        self.walkable = np.zeros((0, 0), dtype=bool)
        self.visible = np.zeros((0, 0), dtype=bool)
        if world is not None:
            self.rebuild(world)

    def rebuild(self, world: World) -> None:
        shape = (world.width, world.height)
        self.transparent = np.zeros(shape, dtype=bool, order="F")
        self.walkable = np.zeros(shape, dtype=bool, order="F")
        for x, y in world.cells():
            tile = world.tile(x, y)
            self.transparent[x, y] = not tile.block_sight
            self.walkable[x, y] = not tile.blocked
        self.visible = np.zeros(shape, dtype=bool, order="F")

    def compute_fov(self, x: int, y: int, radius: int, light_walls: bool, algorithm: str) -> None:
        self.visible = tcod.map.compute_fov(
            self.transparent,
            (x, y),
            radius=radius,
            light_walls=light_walls,
            algorithm=resolve_algorithm(algorithm),
        )

    def is_in_fov(self, x: int, y: int) -> bool:
        width, height = self.visible.shape
        if not (0 <= x < width and 0 <= y < height):
            return False
        return bool(self.visible[x, y])


class FovCache:
    """Recompute FOV only when the viewer has moved since the last frame.

    ``invalidate()`` forces the next refresh; call it after rebuilding the
    visibility grid from a new world.
    """

    def __init__(self, visibility: Visibility, radius: int, light_walls: bool, algorithm: str) -> None:
        self.visibility = visibility
        self.radius = radius
        self.light_walls = light_walls
        self.algorithm = algorithm
        self.last_origin: Optional[Pos] = None

    def invalidate(self) -> None:
        self.last_origin = None

    def refresh(self, origin: Pos, world: World) -> bool:
        """Recompute if needed. Returns True when a recompute happened."""
        if origin == self.last_origin:
            return False
        x, y = origin
        self.visibility.compute_fov(x, y, self.radius, self.light_walls, self.algorithm)
        self.last_origin = origin
        world.mark_explored(c for c in world.cells() if self.visibility.is_in_fov(*c))
        log.debug("fov recomputed from %s", origin)
        return True
