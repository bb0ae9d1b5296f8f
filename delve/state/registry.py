from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from delve.errors import AliasedAccess, InvalidEntity
from delve.state.entities import Entity, Pos

EntityId = int


class EntityRegistry:
    """Ordered arena of every entity in the level.

    Entities are appended and never removed, so an id handed out once stays
    valid for the whole run (a dead monster keeps its slot as a corpse).
    The player's id is recorded once, when the player is registered.
    """

    def __init__(self) -> None:
        self._entities: List[Entity] = []
        self._player_id: Optional[EntityId] = None

    # ---- arena -------------------------------------------------------

    def add(self, entity: Entity) -> EntityId:
        self._entities.append(entity)
        return len(self._entities) - 1

    def add_player(self, entity: Entity) -> EntityId:
        if self._player_id is not None:
            raise ValueError("A player is already registered")
        self._player_id = self.add(entity)
        return self._player_id

    def __getitem__(self, entity_id: EntityId) -> Entity:
        if not 0 <= entity_id < len(self._entities):
            raise InvalidEntity(f"No entity with id {entity_id} (registry holds {len(self._entities)})")
        return self._entities[entity_id]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def ids(self) -> range:
        return range(len(self._entities))

    def items(self) -> Iterator[Tuple[EntityId, Entity]]:
        return enumerate(self._entities)

    def pair(self, first_id: EntityId, second_id: EntityId) -> Tuple[Entity, Entity]:
        """Return two distinct entities for an operation that mutates both."""
        if first_id == second_id:
            raise AliasedAccess(f"pair() needs two different entities, got {first_id} twice")
        return self[first_id], self[second_id]

    # ---- player handle -----------------------------------------------

    @property
    def player_id(self) -> EntityId:
        if self._player_id is None:
            raise InvalidEntity("No player has been registered")
        return self._player_id

    @property
    def player(self) -> Entity:
        return self[self.player_id]

    # ---- spatial queries ---------------------------------------------

    def fighter_at(self, pos: Pos) -> Optional[EntityId]:
        """First entity (in registration order) with a Fighter standing at pos."""
        for entity_id, entity in enumerate(self._entities):
            if entity.fighter is not None and entity.pos == pos:
                return entity_id
        return None
