from __future__ import annotations

"""
Engine entry point: owns the outer loop.

One iteration draws the frame, blocks for a single key press, and hands the
mapped command to the TurnEngine. The loop ends when the engine reports
EXIT (Escape, or closing the window).
"""

import logging

from delve import config
from delve.game import Game, new_game
from delve.game_input import map_key
from delve.render.ascii import AsciiRenderer
from delve.render.frame import render_all
from delve.rng import new_rng
from delve.systems.turns import Command, PlayerAction, TurnEngine

log = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.GameConfig) -> None:
        self.cfg = cfg
        self.renderer = AsciiRenderer(cfg)
        self.game: Game = new_game(cfg, new_rng(cfg.seed))
        self.turns = TurnEngine(self.game, display=self.renderer)

    def step(self) -> PlayerAction:
        render_all(self.renderer, self.game)
        press = self.renderer.wait_for_key()
        command = Command.QUIT if press is None else map_key(press.key, press.mods)
        was_alive = self.game.player_alive
        outcome = self.turns.handle(command)
        if was_alive and not self.game.player_alive:
            log.info("game over after %d turns", self.turns.turns_taken)
        return outcome

    def run(self) -> None:
        try:
            while self.step() is not PlayerAction.EXIT:
                pass
        finally:
            self.renderer.teardown()
