import logging

from delve.config import GameConfig
from delve.game import GameStatus, MessageLog, new_game
from delve.rng import new_rng
from delve.state.actors import DeathPolicy
from delve.systems.combat import AttackResult

from conftest import FakeVisibility, build_game


def test_new_game_registers_the_player_first(templates):
    cfg = GameConfig(seed=3)
    fake = FakeVisibility()
    game = new_game(cfg, new_rng(cfg.seed), visibility=fake, templates=templates)

    assert game.player_id == 0
    player = game.entities[0]
    assert player is game.player
    assert player.glyph == "@"
    assert player.pos == game.rooms[0].center()
    fighter = player.fighter
    assert (fighter.max_hp, fighter.hp, fighter.defense, fighter.power) == (30, 30, 2, 5)
    assert fighter.on_death is DeathPolicy.PLAYER
    assert player.ai is None

    for entity_id in list(game.entities.ids())[1:]:
        assert game.entities[entity_id].ai is not None
    assert fake.rebuilds == 1
    assert game.status is GameStatus.PLAYING
    assert game.world.width == 80 and game.world.height == 45


def test_new_game_is_reproducible(templates):
    cfg = GameConfig()
    a = new_game(cfg, new_rng(21), visibility=FakeVisibility(), templates=templates)
    b = new_game(cfg, new_rng(21), visibility=FakeVisibility(), templates=templates)
    assert a.rooms == b.rooms
    assert [e.pos for e in a.entities] == [e.pos for e in b.entities]


def test_message_log_keeps_the_newest():
    log = MessageLog(capacity=3)
    for i in range(5):
        log.add(f"m{i}")
    assert list(log.messages) == ["m2", "m3", "m4"]
    assert log.tail(2) == ["m3", "m4"]
    assert log.tail(10) == ["m2", "m3", "m4"]
    assert log.tail(0) == []


def test_resolve_attack_writes_the_log(caplog):
    game = build_game()
    result = AttackResult(attacker="orc", target="player", damage=0)
    with caplog.at_level(logging.INFO, logger="delve.game"):
        assert game.resolve_attack(result) is result
    assert list(game.log.messages) == ["orc attacks player but it has no effect!"]
    assert "no effect" in caplog.text
    assert not game.game_over
