"""Maze solving by backtracking and by breadth- or depth-first frontier search."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional, Tuple

from ..base import DEFAULT_DRAW_DELAY, AnimatedMazeAlgorithm, Renderer
from ..exceptions import MazeConfigurationError, MazeInvariantError
from .arena import ROOT, NodeArena
from .cells import DIRECTIONS, PASSABLE, CellState, Node, Position
from .grid import Maze

logger = logging.getLogger(__name__)

SOLVED_MESSAGE = "Solved! Press any key to continue..."
UNSOLVED_MESSAGE = "No path found. Press any key to continue..."


class SolveStrategy(str, Enum):
    BACKTRACK = "backtrack"
    BFS = "bfs"
    DFS = "dfs"


@dataclass
class SolveResult:
    strategy: SolveStrategy
    solved: bool
    path: List[Position] = field(default_factory=list)
    expanded: int = 0
    nodes_allocated: int = 0
    nodes_released: int = 0

    @property
    def length(self) -> int:
        """Number of moves along the path, or -1 when no path was found."""

        return len(self.path) - 1 if self.solved else -1

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy.value,
            "solved": self.solved,
            "path": [list(cell) for cell in self.path],
            "length": self.length,
            "expanded": self.expanded,
            "nodes_allocated": self.nodes_allocated,
            "nodes_released": self.nodes_released,
        }


@dataclass
class _Frame:
    position: Position
    next_direction: int = 0


class MazeSolver(AnimatedMazeAlgorithm):
    """Find a path from START to END, marking progress in the maze grid."""

    def __init__(
        self,
        maze: Maze,
        *,
        renderer: Optional[Renderer] = None,
        draw_delay: float = DEFAULT_DRAW_DELAY,
    ) -> None:
        super().__init__(renderer=renderer, draw_delay=draw_delay)
        self.maze = maze
        self._start, self._end = self.locate()

    @property
    def start(self) -> Position:
        return self._start

    @property
    def end(self) -> Position:
        return self._end

    def locate(self) -> Tuple[Position, Position]:
        """Scan the grid for the unique START and END cells."""

        starts = self.maze.find(CellState.START)
        ends = self.maze.find(CellState.END)
        if len(starts) != 1 or len(ends) != 1:
            raise MazeInvariantError(
                "maze must contain exactly one start and one end cell",
                {"starts": starts, "ends": ends},
            )
        return starts[0], ends[0]

    def solve(self, strategy: SolveStrategy = SolveStrategy.BFS, animate: bool = False) -> SolveResult:
        try:
            strategy = SolveStrategy(strategy)
        except ValueError as exc:
            raise MazeConfigurationError("unknown solve strategy", {"strategy": strategy}) from exc

        logger.debug("Solving %r from %s to %s with %s", self.maze, self._start, self._end, strategy.value)
        with self._session(animate):
            if strategy is SolveStrategy.BACKTRACK:
                result = self._backtrack()
            else:
                result = self._frontier_search(strategy)
            self._acknowledge(SOLVED_MESSAGE if result.solved else UNSOLVED_MESSAGE)

        if result.solved:
            logger.info("%s found a path of length %d", strategy.value, result.length)
        else:
            logger.info("%s exhausted the maze without reaching the end", strategy.value)
        return result

    # ------------------------------------------------------------------

    def _mark(self, position: Position, state: CellState) -> None:
        self.maze[position] = state
        self._draw(self.maze)

    def _passable(self, position: Position) -> bool:
        return self.maze.is_valid(*position) and self.maze[position] in PASSABLE

    def _backtrack(self) -> SolveResult:
        """Depth-first walk with undo, using an explicit stack of frames.

        Each frame remembers which compass direction to try next. Cells on
        the current walk are VISITED so they cannot be re-entered; a cell
        whose subtree fails is flashed and restored to OPEN.
        """

        stack: List[_Frame] = [_Frame(self._start)]
        expanded = 0
        while stack:
            frame = stack[-1]
            if frame.next_direction == len(DIRECTIONS):
                stack.pop()
                if stack:
                    self._mark(frame.position, CellState.PATH)
                    self.maze[frame.position] = CellState.OPEN
                continue

            direction = DIRECTIONS[frame.next_direction]
            frame.next_direction += 1
            neighbor = direction.step(frame.position)
            if not self._passable(neighbor):
                continue
            if self.maze[neighbor] == CellState.END:
                path = [entry.position for entry in stack] + [neighbor]
                for entry in reversed(stack[1:]):
                    self._mark(entry.position, CellState.PATH)
                return SolveResult(SolveStrategy.BACKTRACK, True, path, expanded)

            expanded += 1
            self._mark(neighbor, CellState.VISITED)
            stack.append(_Frame(neighbor))

        return SolveResult(SolveStrategy.BACKTRACK, False, [], expanded)

    def _frontier_search(self, strategy: SolveStrategy) -> SolveResult:
        arena = NodeArena()
        frontier: Deque[int] = deque([arena.add(self._start, ROOT)])
        expanded = 0
        goal: Optional[int] = None

        while frontier:
            current = frontier.popleft() if strategy is SolveStrategy.BFS else frontier.pop()
            position = arena.position(current)
            if position == self._end:
                goal = current
                break

            expanded += 1
            if self.maze[position] != CellState.START:
                self._mark(position, CellState.VISITED)
            for neighbor in self.maze.neighbors(Node(*position), PASSABLE, step=1):
                if self.maze[neighbor.position] != CellState.END:
                    self._mark(neighbor.position, CellState.FRONTIER)
                frontier.append(arena.add(neighbor.position, current))

        path: List[Position] = []
        if goal is not None:
            path = arena.path_to(goal)
            for cell in reversed(path):
                if self.maze[cell] == CellState.VISITED:
                    self.maze[cell] = CellState.PATH
                self._draw(self.maze)

        frontier.clear()
        arena.release_all()
        return SolveResult(
            strategy,
            goal is not None,
            path,
            expanded,
            nodes_allocated=arena.allocated,
            nodes_released=arena.released,
        )


__all__ = [
    "MazeSolver",
    "SOLVED_MESSAGE",
    "SolveResult",
    "SolveStrategy",
    "UNSOLVED_MESSAGE",
]
