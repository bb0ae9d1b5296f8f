from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from delve.enemies import MonsterTemplate, choose_template, default_templates, spawn_monster
from delve.rng import RandomSource
from delve.state.entities import Entity
from delve.state.world import World

log = logging.getLogger(__name__)

Pos = Tuple[int, int]

DEFAULT_START: Pos = (0, 0)


@dataclass(frozen=True)
class Room:
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Room":
        return cls(x, y, x + w, y + h)

    def center(self) -> Pos:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Room") -> bool:
        # inclusive: rooms that only share a border still intersect
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> List[Pos]:
        return [(x, y) for y in range(self.y1 + 1, self.y2) for x in range(self.x1 + 1, self.x2)]


@dataclass
class Dungeon:
    """Output of generate(): the carved world plus initial placements."""

    world: World
    rooms: List[Room] = field(default_factory=list)
    player_start: Pos = DEFAULT_START
    monsters: List[Entity] = field(default_factory=list)


def carve_room(world: World, room: Room) -> None:
    # the room's outer ring stays wall
    for x, y in room.interior():
        world.carve(x, y)


def carve_h_tunnel(world: World, x1: int, x2: int, y: int) -> None:
    for xx in range(min(x1, x2), max(x1, x2) + 1):
        world.carve(xx, y)


def carve_v_tunnel(world: World, y1: int, y2: int, x: int) -> None:
    for yy in range(min(y1, y2), max(y1, y2) + 1):
        world.carve(x, yy)


def connect_rooms(world: World, prev: Room, new: Room, rng: RandomSource) -> None:
    """L-shaped tunnel between two room centers; the coin picks the elbow."""
    prev_x, prev_y = prev.center()
    new_x, new_y = new.center()
    if rng.random() < 0.5:
        carve_h_tunnel(world, prev_x, new_x, prev_y)
        carve_v_tunnel(world, prev_y, new_y, new_x)
    else:
        carve_v_tunnel(world, prev_y, new_y, prev_x)
        carve_h_tunnel(world, prev_x, new_x, new_y)


def place_monsters(
    room: Room,
    rng: RandomSource,
    max_room_monsters: int,
    templates: Sequence[MonsterTemplate],
) -> List[Entity]:
    monsters = []
    count = rng.randint(0, max_room_monsters)
    for _ in range(count):
        x = rng.randint(room.x1 + 1, room.x2 - 1)
        y = rng.randint(room.y1 + 1, room.y2 - 1)
        tmpl = choose_template(rng, templates)
        monsters.append(spawn_monster(tmpl, (x, y)))
    return monsters


def generate(
    rng: RandomSource,
    width: int,
    height: int,
    room_size: Tuple[int, int],
    max_rooms: int,
    max_room_monsters: int,
    templates: Optional[Sequence[MonsterTemplate]] = None,
) -> Dungeon:
    """Rectangular rooms chained by L-shaped tunnels, with monsters.

    Each of the ``max_rooms`` attempts either lands a room that touches no
    earlier room or is thrown away, so the final count is random. Every room
    after the first is tunnelled to the one accepted just before it. The
    player starts at the first room's center; if no room is ever accepted the
    start stays at DEFAULT_START and the map is solid wall.
    """
    min_size, max_size = room_size
    if templates is None:
        templates = default_templates()

    dungeon = Dungeon(world=World(width, height))
    world = dungeon.world
    rooms = dungeon.rooms

    for _ in range(max_rooms):
        w = rng.randint(min_size, max_size)
        h = rng.randint(min_size, max_size)
        # keep x2/y2 inside the map
        x = rng.randint(0, width - w - 1)
        y = rng.randint(0, height - h - 1)
        new_room = Room.new(x, y, w, h)

        if any(new_room.intersects(other) for other in rooms):
            continue

        carve_room(world, new_room)
        if not rooms:
            dungeon.player_start = new_room.center()
        else:
            connect_rooms(world, rooms[-1], new_room, rng)
            dungeon.monsters.extend(place_monsters(new_room, rng, max_room_monsters, templates))
        rooms.append(new_room)

    log.debug(
        "generated %dx%d map: %d/%d rooms accepted, %d monsters, start=%s",
        width, height, len(rooms), max_rooms, len(dungeon.monsters), dungeon.player_start,
    )
    return dungeon
