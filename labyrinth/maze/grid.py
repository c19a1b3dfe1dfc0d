"""Rectangular cell-state grid shared by generators and solvers."""

from __future__ import annotations

from typing import Callable, Collection, Iterable, Iterator, List, Tuple, Union

import numpy as np

from ..exceptions import MazeConfigurationError
from .cells import DIRECTIONS, CellState, Node, Position

StateFilter = Union[CellState, Collection[CellState], Callable[[CellState], bool]]


def _as_predicate(accept: StateFilter) -> Callable[[CellState], bool]:
    if isinstance(accept, CellState):
        return lambda state: state == accept
    if callable(accept):
        return accept
    accepted = frozenset(accept)
    return lambda state: state in accepted


class Maze:
    """A rows x cols grid of :class:`CellState` values.

    Dimensions are forced odd so that node-cells sit on the even row / even
    column lattice and every two-step move lands on another node-cell.
    """

    def __init__(self, rows: int, cols: int, *, force_odd: bool = True) -> None:
        if force_odd:
            rows = rows if rows % 2 == 1 else rows - 1
            cols = cols if cols % 2 == 1 else cols - 1
        if rows < 1 or cols < 1:
            raise MazeConfigurationError(
                "maze dimensions must be positive", {"rows": rows, "cols": cols}
            )
        self._cells = np.full((rows, cols), int(CellState.WALL), dtype=np.int8)

    @classmethod
    def from_rows(cls, lines: Iterable[str]) -> "Maze":
        """Build a maze from one string per row, one symbol per cell."""

        rows = list(lines)
        if not rows:
            raise MazeConfigurationError("a maze needs at least one row")
        width = len(rows[0])
        if any(len(line) != width for line in rows):
            raise MazeConfigurationError(
                "all maze rows must have the same length",
                {"lengths": [len(line) for line in rows]},
            )
        maze = cls(len(rows), width, force_odd=False)
        for r, line in enumerate(rows):
            for c, symbol in enumerate(line):
                try:
                    maze.set(r, c, CellState.from_symbol(symbol))
                except ValueError as exc:
                    raise MazeConfigurationError(str(exc), {"row": r, "col": c}) from exc
        return maze

    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self._cells.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.is_valid(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} maze")

    def at(self, row: int, col: int) -> CellState:
        self._check(row, col)
        return CellState(int(self._cells[row, col]))

    def set(self, row: int, col: int, state: CellState) -> None:
        self._check(row, col)
        self._cells[row, col] = int(state)

    def __getitem__(self, position: Position) -> CellState:
        return self.at(*position)

    def __setitem__(self, position: Position, state: CellState) -> None:
        self.set(position[0], position[1], state)

    def neighbors(
        self,
        node: Node,
        accept: StateFilter = CellState.WALL,
        *,
        step: int = 2,
    ) -> Iterator[Node]:
        """Yield in-bounds cells ``step`` away from ``node`` whose state passes ``accept``.

        Directions are examined north, east, south, west. Each yielded node
        has ``node`` as its parent. Generators walk the node lattice with
        ``step=2``; solvers move cell by cell with ``step=1``.
        """

        predicate = _as_predicate(accept)
        for direction in DIRECTIONS:
            row, col = direction.step(node.position, step)
            if self.is_valid(row, col) and predicate(self.at(row, col)):
                yield Node(row, col, node)

    # ------------------------------------------------------------------

    def find(self, state: CellState) -> List[Position]:
        rows, cols = np.nonzero(self._cells == int(state))
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self._cells == int(state)))

    def clear_search_marks(self) -> None:
        """Turn VISITED, FRONTIER and PATH cells back into OPEN cells."""

        marks = [int(CellState.VISITED), int(CellState.FRONTIER), int(CellState.PATH)]
        self._cells[np.isin(self._cells, marks)] = int(CellState.OPEN)

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def to_rows(self) -> List[str]:
        return ["".join(CellState(int(value)).symbol for value in row) for row in self._cells]

    def copy(self) -> "Maze":
        clone = Maze.__new__(Maze)
        clone._cells = self._cells.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __str__(self) -> str:
        return "\n".join(self.to_rows())

    def __repr__(self) -> str:
        return f"Maze(rows={self.rows}, cols={self.cols})"


__all__ = ["Maze", "StateFilter"]
