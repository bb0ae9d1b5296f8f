from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from delve.errors import MissingCapability
from delve.state.actors import DeathPolicy
from delve.state.entities import LAYER_CORPSE, Entity

log = logging.getLogger(__name__)

CORPSE_GLYPH = "%"
CORPSE_COLOR = (127, 0, 0)  # dark red


@dataclass
class AttackResult:
    """What happened when one entity swung at another.

    ``damage`` is the raw formula value and may be zero or negative; only
    ``effective`` results changed the target's hp.
    """

    attacker: str
    target: str
    damage: int
    death: Optional[DeathPolicy] = None

    @property
    def effective(self) -> bool:
        return self.damage > 0

    @property
    def killed(self) -> bool:
        return self.death is not None

    def messages(self) -> List[str]:
        if self.effective:
            lines = [f"{self.attacker} attacks {self.target} for {self.damage} hp"]
        else:
            lines = [f"{self.attacker} attacks {self.target} but it has no effect!"]
        if self.death is DeathPolicy.PLAYER:
            lines.append("You died!")
        elif self.death is DeathPolicy.MONSTER:
            lines.append(f"{self.target} is dead!")
        return lines


def attack(attacker: Entity, target: Entity) -> AttackResult:
    """Resolve a melee attack: ``power - defense`` when positive, else nothing.

    The target must carry a Fighter. An attacker without one hits with 0
    power.
    """
    if target.fighter is None:
        raise MissingCapability(f"{target.name} has no Fighter and can't be attacked")
    power = attacker.fighter.power if attacker.fighter is not None else 0
    damage = power - target.fighter.defense
    # capture the name before a death transform renames the target
    result = AttackResult(attacker=attacker.name, target=target.name, damage=damage)
    if damage > 0:
        result.death = take_damage(target, damage)
    return result


def take_damage(entity: Entity, damage: int) -> Optional[DeathPolicy]:
    """Apply damage; run the death transform the first time hp reaches 0.

    Returns the policy that fired, or None. Entities without a Fighter (a
    corpse, say) are left alone.
    """
    fighter = entity.fighter
    if fighter is None:
        return None
    if damage > 0:
        fighter.hp -= damage
    if fighter.hp <= 0 and entity.alive:
        entity.alive = False
        policy = fighter.on_death
        apply_death_policy(entity, policy)
        return policy
    return None


def apply_death_policy(entity: Entity, policy: DeathPolicy) -> None:
    if policy is DeathPolicy.PLAYER:
        _player_death(entity)
    elif policy is DeathPolicy.MONSTER:
        _monster_death(entity)
    else:
        raise ValueError(f"Unknown death policy {policy!r}")


def _player_death(player: Entity) -> None:
    # the game ends; the caller records it
    log.info("player %s died at %s", player.name, player.pos)
    player.glyph = CORPSE_GLYPH
    player.color = CORPSE_COLOR


def _monster_death(monster: Entity) -> None:
    # corpses can't be attacked, don't act and don't block
    log.debug("%s died at %s", monster.name, monster.pos)
    monster.glyph = CORPSE_GLYPH
    monster.color = CORPSE_COLOR
    monster.blocks = False
    monster.fighter = None
    monster.ai = None
    monster.render_layer = LAYER_CORPSE
    monster.name = f"corpse of {monster.name}"
