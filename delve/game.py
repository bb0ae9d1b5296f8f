from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Sequence

from delve import config, mapgen
from delve.enemies import MonsterTemplate
from delve.rng import RandomSource, new_rng
from delve.state.actors import DeathPolicy, Fighter
from delve.state.entities import Entity, Pos
from delve.state.registry import EntityRegistry
from delve.state.world import World
from delve.systems.combat import AttackResult
from delve.systems.fov import FovCache, TcodVisibility, Visibility

log = logging.getLogger(__name__)


@dataclass
class MessageLog:
    capacity: int = 50
    messages: Deque[str] = field(init=False)

    def __post_init__(self) -> None:
        # bounded history; the oldest line drops off
        self.messages = deque(maxlen=self.capacity)

    def add(self, text: str) -> None:
        self.messages.append(text)

    def tail(self, n: int) -> List[str]:
        if n <= 0:
            return []
        return list(self.messages)[-n:]


class GameStatus(Enum):
    PLAYING = "playing"
    PLAYER_DEAD = "player_dead"


def make_player(cfg: config.GameConfig, pos: Pos) -> Entity:
    return Entity(
        name="player",
        pos=pos,
        glyph="@",
        color=(255, 255, 255),
        blocks=True,
        alive=True,
        fighter=Fighter.fresh(cfg.player_hp, cfg.player_defense, cfg.player_power, DeathPolicy.PLAYER),
    )


class Game:
    """Everything one run of the dungeon needs, held in one place.

    The player is reached through ``entities.player_id``, fixed when the
    player is registered; nothing indexes the registry by convention.
    """

    def __init__(
        self,
        cfg: config.GameConfig,
        world: World,
        entities: EntityRegistry,
        visibility: Visibility,
        rooms: Optional[Sequence[mapgen.Room]] = None,
    ) -> None:
        self.cfg = cfg
        self.world = world
        self.rooms: List[mapgen.Room] = list(rooms or [])
        self.entities = entities
        self.log = MessageLog(capacity=cfg.log_capacity)
        self.visibility = visibility
        self.fov = FovCache(visibility, cfg.torch_radius, cfg.fov_light_walls, cfg.fov_algorithm)
        self.visibility.rebuild(world)

    # --- player helpers ---

    @property
    def player_id(self) -> int:
        return self.entities.player_id

    @property
    def player(self) -> Entity:
        return self.entities.player

    @property
    def player_alive(self) -> bool:
        return self.player.alive

    @property
    def game_over(self) -> bool:
        return not self.player_alive

    @property
    def status(self) -> GameStatus:
        if self.game_over:
            return GameStatus.PLAYER_DEAD
        return GameStatus.PLAYING

    # --- visibility ---

    def refresh_fov(self) -> bool:
        return self.fov.refresh(self.player.pos, self.world)

    def rebuild_visibility(self) -> None:
        """Rebuild the visibility grid wholesale after the world changed."""
        self.visibility.rebuild(self.world)
        self.fov.invalidate()

    def is_visible(self, x: int, y: int) -> bool:
        return self.visibility.is_in_fov(x, y)

    # --- combat bookkeeping ---

    def resolve_attack(self, result: AttackResult) -> AttackResult:
        for line in result.messages():
            self.log.add(line)
            log.info(line)
        return result


def new_game(
    cfg: config.GameConfig,
    rng: Optional[RandomSource] = None,
    visibility: Optional[Visibility] = None,
    templates: Optional[Sequence[MonsterTemplate]] = None,
) -> Game:
    """Generate a dungeon and populate it: the player first, then monsters."""
    if rng is None:
        rng = new_rng(cfg.seed)
    dungeon = mapgen.generate(
        rng,
        cfg.map_width,
        cfg.map_height,
        room_size=cfg.room_size,
        max_rooms=cfg.max_rooms,
        max_room_monsters=cfg.max_room_monsters,
        templates=templates,
    )
    entities = EntityRegistry()
    entities.add_player(make_player(cfg, dungeon.player_start))
    for monster in dungeon.monsters:
        entities.add(monster)
    log.info(
        "new game: %d rooms, %d monsters, player at %s",
        len(dungeon.rooms), len(dungeon.monsters), dungeon.player_start,
    )
    return Game(
        cfg,
        dungeon.world,
        entities,
        visibility if visibility is not None else TcodVisibility(),
        rooms=dungeon.rooms,
    )
