"""Reflex AI: the memoryless brain every monster runs once per turn."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from delve.errors import MissingCapability
from delve.state.registry import EntityId
from delve.systems import combat
from delve.systems.combat import AttackResult
from delve.systems.movement import move_towards

if TYPE_CHECKING:
    from delve.game import Game

# Anything closer than this is adjacent (diagonals are ~1.41).
ATTACK_RANGE = 2.0


def take_turn(game: "Game", monster_id: EntityId) -> Optional[AttackResult]:
    """A basic monster takes its turn. If you can see it, it can see you.

    Out of sight it does nothing. In sight and far away it steps toward the
    player; adjacent it attacks while the player still has hp.
    """
    monster = game.entities[monster_id]
    if monster.ai is None:
        raise MissingCapability(f"{monster.name} has no AI to take a turn with")
    if not game.is_visible(monster.x, monster.y):
        return None

    player = game.player
    if monster.distance_to(player) >= ATTACK_RANGE:
        move_towards(game.entities, monster_id, player.x, player.y, game.world)
        return None

    if player.fighter is not None and player.fighter.hp > 0:
        attacker, target = game.entities.pair(monster_id, game.player_id)
        return game.resolve_attack(combat.attack(attacker, target))
    return None
