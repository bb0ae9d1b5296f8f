from collections import deque
from typing import Iterable, List, Optional, Set, Tuple

import pytest

from delve.config import GameConfig
from delve.enemies.templates import MonsterTemplate
from delve.game import Game, make_player
from delve.state.actors import Ai, DeathPolicy, Fighter
from delve.state.entities import Entity
from delve.state.registry import EntityRegistry
from delve.state.world import World

ORC = MonsterTemplate(id="orc", name="orc", glyph="o", color=(63, 127, 63), hp=10, defense=0, power=3, weight=80)
TROLL = MonsterTemplate(id="troll", name="troll", glyph="T", color=(0, 127, 0), hp=16, defense=1, power=4, weight=20)


class ScriptedRng:
    """Hands out pre-recorded draws so generation can be driven step by step."""

    def __init__(self, ints: Iterable[int] = (), floats: Iterable[float] = ()) -> None:
        self.ints = deque(ints)
        self.floats = deque(floats)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.popleft()
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def random(self) -> float:
        return self.floats.popleft()


class FakeVisibility:
    def __init__(self, visible: Optional[Set[Tuple[int, int]]] = None, everything: bool = False) -> None:
        self.visible = set(visible or ())
        self.everything = everything
        self.computed: List[Tuple[int, int]] = []
        self.rebuilds = 0

    def rebuild(self, world: World) -> None:
        self.rebuilds += 1

    def compute_fov(self, x, y, radius, light_walls, algorithm) -> None:
        self.computed.append((x, y))

    def is_in_fov(self, x: int, y: int) -> bool:
        return self.everything or (x, y) in self.visible


class RecordingDisplay:
    def __init__(self) -> None:
        self.backgrounds = {}
        self.glyphs: List[Tuple[int, int, str, tuple]] = []
        self.presented = 0
        self.toggles = 0

    def set_background(self, x, y, color) -> None:
        self.backgrounds[(x, y)] = color

    def draw_glyph(self, x, y, char, color) -> None:
        self.glyphs.append((x, y, char, color))

    def present(self) -> None:
        self.presented += 1

    def toggle_fullscreen(self) -> None:
        self.toggles += 1


def open_world(width: int = 12, height: int = 8) -> World:
    """Walls around the edge, floor everywhere inside."""
    world = World(width, height)
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            world.carve(x, y)
    return world


def make_monster(pos, name="orc", hp=10, defense=0, power=3) -> Entity:
    return Entity(
        name=name,
        pos=pos,
        glyph=name[0],
        blocks=True,
        fighter=Fighter.fresh(hp, defense, power, DeathPolicy.MONSTER),
        ai=Ai(),
    )


def build_game(player_pos=(2, 2), monsters=(), world=None, visibility=None, cfg=None) -> Game:
    cfg = cfg or GameConfig(map_width=12, map_height=8, screen_width=12, screen_height=10)
    world = world or open_world(cfg.map_width, cfg.map_height)
    entities = EntityRegistry()
    entities.add_player(make_player(cfg, player_pos))
    for monster in monsters:
        entities.add(monster)
    return Game(cfg, world, entities, visibility or FakeVisibility(everything=True))


@pytest.fixture
def templates():
    return [ORC, TROLL]
