from dataclasses import dataclass
from enum import Enum


class DeathPolicy(Enum):
    """Which one-shot transform runs when a Fighter's hp drops to zero."""

    PLAYER = "player"
    MONSTER = "monster"


@dataclass
class Fighter:
    max_hp: int
    hp: int
    defense: int
    power: int
    on_death: DeathPolicy = DeathPolicy.MONSTER

    @classmethod
    def fresh(cls, hp: int, defense: int, power: int, on_death: DeathPolicy) -> "Fighter":
        return cls(max_hp=hp, hp=hp, defense=defense, power=power, on_death=on_death)


@dataclass
class Ai:
    """Marker for entities driven by the reflex AI each turn.

    Carries no state between turns.
    """
