"""Cell states, compass directions and traversal nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple

Position = Tuple[int, int]


class CellState(IntEnum):
    WALL = 0
    OPEN = 1
    START = 2
    END = 3
    VISITED = 4
    FRONTIER = 5
    PATH = 6

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellState":
        try:
            return _STATES_BY_SYMBOL[symbol]
        except KeyError as exc:
            raise ValueError(f"Unknown cell symbol {symbol!r}") from exc


_SYMBOLS: Dict[CellState, str] = {
    CellState.WALL: "#",
    CellState.OPEN: " ",
    CellState.START: "S",
    CellState.END: "E",
    CellState.VISITED: ".",
    CellState.FRONTIER: ",",
    CellState.PATH: "*",
}
_STATES_BY_SYMBOL: Dict[str, CellState] = {symbol: state for state, symbol in _SYMBOLS.items()}

# Cells a solver may step onto.
PASSABLE = frozenset({CellState.OPEN, CellState.END})


class Direction(Enum):
    """Compass directions in the fixed order solvers try them."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def offset(self) -> Position:
        return self.value

    def step(self, position: Position, distance: int = 1) -> Position:
        dr, dc = self.value
        return position[0] + dr * distance, position[1] + dc * distance


DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True)
class Node:
    """A grid coordinate plus the node it was discovered from."""

    row: int
    col: int
    parent: Optional["Node"] = None

    @property
    def position(self) -> Position:
        return self.row, self.col

    def between(self) -> Position:
        """Return the cell midway between this node and its parent.

        For two-step generation moves this is the wall that gets carved to
        connect the two node-cells. Nodes without a parent return their own
        position.
        """

        if self.parent is None:
            return self.position
        return (self.row + self.parent.row) // 2, (self.col + self.parent.col) // 2


__all__ = [
    "CellState",
    "Direction",
    "DIRECTIONS",
    "Node",
    "PASSABLE",
    "Position",
]
