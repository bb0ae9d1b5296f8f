"""What gets drawn each frame, independent of how it is drawn."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, Tuple

from delve.state.entities import Entity

if TYPE_CHECKING:
    from delve.game import Game

Color = Tuple[int, int, int]


class Display(Protocol):
    def set_background(self, x: int, y: int, color: Color) -> None: ...

    def draw_glyph(self, x: int, y: int, char: str, color: Color) -> None: ...

    def present(self) -> None: ...

    def toggle_fullscreen(self) -> None: ...


def tile_color(game: "Game", visible: bool, wall: bool) -> Color:
    cfg = game.cfg
    if visible:
        return cfg.color_light_wall if wall else cfg.color_light_ground
    return cfg.color_dark_wall if wall else cfg.color_dark_ground


def entities_to_draw(game: "Game") -> List[Entity]:
    """Entities in FOV, non-blocking ones first so actors draw over corpses."""
    to_draw = [e for e in game.entities if game.is_visible(e.x, e.y)]
    # sorted() is stable, so registration order breaks ties
    return sorted(to_draw, key=lambda e: (e.blocks, e.render_layer))


def draw_map(display: Display, game: "Game") -> None:
    world = game.world
    for x, y in world.cells():
        tile = world.tile(x, y)
        # tiles never seen stay black
        if not tile.explored:
            continue
        visible = game.is_visible(x, y)
        display.set_background(x, y, tile_color(game, visible, tile.is_wall))


def draw_messages(display: Display, game: "Game") -> None:
    cfg = game.cfg
    rows = cfg.panel_rows
    for row, line in enumerate(game.log.tail(rows)):
        y = cfg.map_height + row
        for col, ch in enumerate(line[: cfg.screen_width]):
            display.draw_glyph(col, y, ch, cfg.color_message)


def render_all(display: Display, game: "Game") -> None:
    game.refresh_fov()
    draw_map(display, game)
    for entity in entities_to_draw(game):
        display.draw_glyph(entity.x, entity.y, entity.glyph, entity.color)
    draw_messages(display, game)
    display.present()
