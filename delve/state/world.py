from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from delve.errors import OutOfBounds

Pos = Tuple[int, int]


@dataclass
class Tile:
    blocked: bool = False
    block_sight: bool = False
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @property
    def is_wall(self) -> bool:
        return self.block_sight


@dataclass
class World:
    """Fixed-size tile grid stored as one row-major list.

    Every accessor is bounds-checked; reading or writing outside the grid is a
    programming error and raises OutOfBounds.
    """

    width: int
    height: int
    tiles: List[Tile] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World needs positive dimensions, got {self.width}x{self.height}")
        self.tiles = [Tile.wall() for _ in range(self.width * self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside the {self.width}x{self.height} map")
        return y * self.width + x

    def tile(self, x: int, y: int) -> Tile:
        return self.tiles[self._index(x, y)]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self.tiles[self._index(x, y)] = tile

    def carve(self, x: int, y: int) -> None:
        self.set_tile(x, y, Tile.floor())

    def is_blocked(self, x: int, y: int) -> bool:
        return self.tile(x, y).blocked

    def mark_explored(self, cells: Iterable[Pos]) -> None:
        # explored only ever goes False -> True
        for x, y in cells:
            self.tile(x, y).explored = True

    def cells(self) -> Iterator[Pos]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def floor_cells(self) -> List[Pos]:
        return [(x, y) for x, y in self.cells() if not self.tile(x, y).blocked]
