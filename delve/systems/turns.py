from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Protocol, Tuple

from delve.errors import EngineExited
from delve.systems import ai, combat
from delve.systems.movement import move_by

if TYPE_CHECKING:
    from delve.game import Game

log = logging.getLogger(__name__)


class Command(Enum):
    """Everything one input event can ask the game to do."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    TOGGLE_DISPLAY_MODE = "toggle_display_mode"
    QUIT = "quit"


class PlayerAction(Enum):
    TOOK_TURN = "took_turn"
    DIDNT_TAKE_TURN = "didnt_take_turn"
    EXIT = "exit"


class EngineState(Enum):
    AWAITING_INPUT = "awaiting_input"
    RESOLVING_PLAYER_ACTION = "resolving_player_action"
    RESOLVING_AI_PHASE = "resolving_ai_phase"
    EXITED = "exited"


MOVE_DELTAS: Dict[Command, Tuple[int, int]] = {
    Command.MOVE_UP: (0, -1),
    Command.MOVE_DOWN: (0, 1),
    Command.MOVE_LEFT: (-1, 0),
    Command.MOVE_RIGHT: (1, 0),
}


class DisplayToggle(Protocol):
    def toggle_fullscreen(self) -> None: ...


class TurnEngine:
    """Runs one turn per command: the player's action, then every AI once.

    Monsters only act when the player is alive and actually spent a turn;
    toggling the display or pressing an unbound key is free.
    """

    def __init__(self, game: "Game", display: Optional[DisplayToggle] = None) -> None:
        self.game = game
        self.display = display
        self.state = EngineState.AWAITING_INPUT
        self.turns_taken = 0

    @property
    def exited(self) -> bool:
        return self.state is EngineState.EXITED

    def handle(self, command: Optional[Command]) -> PlayerAction:
        if self.exited:
            raise EngineExited("TurnEngine.handle() called after the engine exited")

        self.state = EngineState.RESOLVING_PLAYER_ACTION
        outcome = self._resolve_player_action(command)

        if outcome is PlayerAction.EXIT:
            self.state = EngineState.EXITED
            log.debug("engine exited")
            return outcome

        if outcome is PlayerAction.TOOK_TURN:
            self.turns_taken += 1
            if self.game.player_alive:
                self.state = EngineState.RESOLVING_AI_PHASE
                self._run_ai_phase()

        self.state = EngineState.AWAITING_INPUT
        return outcome

    # --- player phase ---

    def _resolve_player_action(self, command: Optional[Command]) -> PlayerAction:
        if command is Command.QUIT:
            return PlayerAction.EXIT
        if command is Command.TOGGLE_DISPLAY_MODE:
            if self.display is not None:
                self.display.toggle_fullscreen()
            return PlayerAction.DIDNT_TAKE_TURN
        if command in MOVE_DELTAS:
            # a dead player can still quit or toggle, but not act
            if not self.game.player_alive:
                return PlayerAction.DIDNT_TAKE_TURN
            dx, dy = MOVE_DELTAS[command]
            self.player_move_or_attack(dx, dy)
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    def player_move_or_attack(self, dx: int, dy: int) -> None:
        """Attack whatever fighter stands at the destination, else walk there."""
        game = self.game
        player = game.player
        target_id = game.entities.fighter_at((player.x + dx, player.y + dy))
        if target_id is not None:
            attacker, target = game.entities.pair(game.player_id, target_id)
            game.resolve_attack(combat.attack(attacker, target))
            return
        move_by(game.entities, game.player_id, dx, dy, game.world)

    # --- monster phase ---

    def _run_ai_phase(self) -> None:
        game = self.game
        # one pass in registration order; anything killed earlier in the pass
        # has no ai left and is skipped
        for entity_id, entity in game.entities.items():
            if entity.ai is not None:
                ai.take_turn(game, entity_id)
