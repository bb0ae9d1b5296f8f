from __future__ import annotations

import math
from typing import Iterable

from delve.state.entities import Entity
from delve.state.registry import EntityId, EntityRegistry
from delve.state.world import World


def is_blocked(x: int, y: int, world: World, entities: Iterable[Entity]) -> bool:
    """True if a wall or any blocking entity occupies (x, y).

    Both the player and monsters go through this; nothing else decides
    whether a cell can be stood on.
    """
    if world.is_blocked(x, y):
        return True
    return any(e.blocks and e.pos == (x, y) for e in entities)


def move_by(entities: EntityRegistry, entity_id: EntityId, dx: int, dy: int, world: World) -> bool:
    """Step an entity by (dx, dy) unless the destination is blocked.

    A blocked move is dropped without sliding or error. Returns whether the
    entity actually moved.
    """
    entity = entities[entity_id]
    nx, ny = entity.x + dx, entity.y + dy
    if is_blocked(nx, ny, world, entities):
        return False
    entity.pos = (nx, ny)
    return True


def step_towards(dx: int, dy: int) -> tuple[int, int]:
    """Normalise a vector to one step per axis; (0, 0) for a zero vector."""
    distance = math.hypot(dx, dy)
    if distance == 0:
        return 0, 0
    return int(round(dx / distance)), int(round(dy / distance))


def move_towards(
    entities: EntityRegistry,
    entity_id: EntityId,
    target_x: int,
    target_y: int,
    world: World,
) -> bool:
    """One greedy step toward a target.

    No obstacle avoidance: a wall straight between the entity and the target
    simply stops it.
    """
    entity = entities[entity_id]
    dx, dy = step_towards(target_x - entity.x, target_y - entity.y)
    if dx == 0 and dy == 0:
        return False
    return move_by(entities, entity_id, dx, dy, world)
