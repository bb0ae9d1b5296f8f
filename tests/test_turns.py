import pytest

from delve.errors import EngineExited
from delve.systems.turns import Command, EngineState, PlayerAction, TurnEngine

from conftest import RecordingDisplay, build_game, make_monster


def test_toggle_is_free():
    game = build_game(player_pos=(2, 2), monsters=[make_monster((8, 5))])
    display = RecordingDisplay()
    engine = TurnEngine(game, display=display)

    assert engine.handle(Command.TOGGLE_DISPLAY_MODE) is PlayerAction.DIDNT_TAKE_TURN
    assert display.toggles == 1
    assert game.entities[1].pos == (8, 5)
    assert engine.turns_taken == 0
    assert engine.state is EngineState.AWAITING_INPUT


def test_toggle_without_display():
    engine = TurnEngine(build_game())
    assert engine.handle(Command.TOGGLE_DISPLAY_MODE) is PlayerAction.DIDNT_TAKE_TURN


def test_quit_is_terminal():
    engine = TurnEngine(build_game())
    assert engine.handle(Command.QUIT) is PlayerAction.EXIT
    assert engine.state is EngineState.EXITED
    assert engine.exited
    with pytest.raises(EngineExited):
        engine.handle(Command.MOVE_UP)


def test_unbound_input_is_ignored():
    game = build_game(monsters=[make_monster((8, 5))])
    engine = TurnEngine(game)
    assert engine.handle(None) is PlayerAction.DIDNT_TAKE_TURN
    assert game.entities[1].pos == (8, 5)


def test_move_then_monsters_act():
    game = build_game(player_pos=(2, 2), monsters=[make_monster((8, 5))])
    engine = TurnEngine(game)

    assert engine.handle(Command.MOVE_RIGHT) is PlayerAction.TOOK_TURN
    assert game.player.pos == (3, 2)
    assert game.entities[1].pos == (7, 4)
    assert engine.turns_taken == 1
    assert engine.state is EngineState.AWAITING_INPUT


def test_bump_into_wall_still_spends_the_turn():
    game = build_game(player_pos=(1, 2), monsters=[make_monster((8, 2))])
    engine = TurnEngine(game)
    assert engine.handle(Command.MOVE_LEFT) is PlayerAction.TOOK_TURN
    assert game.player.pos == (1, 2)
    assert game.entities[1].pos == (7, 2)


def test_moving_into_a_monster_attacks_it():
    game = build_game(player_pos=(2, 2), monsters=[make_monster((3, 2))])
    engine = TurnEngine(game)

    engine.handle(Command.MOVE_RIGHT)

    assert game.player.pos == (2, 2)
    assert game.entities[1].fighter.hp == 5
    assert game.player.fighter.hp == 29
    assert list(game.log.messages) == ["player attacks orc for 5 hp", "orc attacks player for 1 hp"]


def test_kill_then_walk_over_the_corpse():
    game = build_game(player_pos=(2, 2), monsters=[make_monster((3, 2), hp=5)])
    engine = TurnEngine(game)

    engine.handle(Command.MOVE_RIGHT)
    corpse = game.entities[1]
    assert corpse.name == "corpse of orc"
    assert game.player.pos == (2, 2)
    assert list(game.log.messages) == ["player attacks orc for 5 hp", "orc is dead!"]

    engine.handle(Command.MOVE_RIGHT)
    assert game.player.pos == corpse.pos == (3, 2)


def test_monsters_act_in_registration_order():
    # the first orc steps out of the second one's way
    game = build_game(player_pos=(1, 2), monsters=[make_monster((4, 2)), make_monster((5, 2))])
    engine = TurnEngine(game)
    engine.handle(Command.MOVE_LEFT)
    assert game.entities[1].pos == (3, 2)
    assert game.entities[2].pos == (4, 2)


def test_player_killed_mid_phase():
    game = build_game(player_pos=(2, 1), monsters=[make_monster((1, 1)), make_monster((3, 1))])
    game.player.fighter.hp = 1
    engine = TurnEngine(game)

    engine.handle(Command.MOVE_UP)  # into the wall

    assert game.game_over
    assert not game.player_alive
    assert list(game.log.messages) == ["orc attacks player for 1 hp", "You died!"]


def test_dead_player_cannot_act():
    game = build_game(player_pos=(2, 2), monsters=[make_monster((8, 5))])
    game.player.alive = False
    engine = TurnEngine(game)

    assert engine.handle(Command.MOVE_RIGHT) is PlayerAction.DIDNT_TAKE_TURN
    assert game.player.pos == (2, 2)
    assert game.entities[1].pos == (8, 5)
    assert engine.turns_taken == 0
    # quitting still works
    assert engine.handle(Command.QUIT) is PlayerAction.EXIT
