"""Perfect-maze generation by randomized DFS, Prim's and Kruskal's carving."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..base import DEFAULT_DRAW_DELAY, AnimatedMazeAlgorithm, Renderer
from ..exceptions import MazeConfigurationError
from .cells import CellState, Node, Position
from .grid import Maze
from .union_find import UnionFind

logger = logging.getLogger(__name__)

FINISHED_MESSAGE = "Finished generation. Press any key to continue..."


class GenerationAlgorithm(str, Enum):
    DFS = "dfs"
    PRIMS = "prims"
    KRUSKALS = "kruskals"


class MazeGenerator(AnimatedMazeAlgorithm):
    """Carve perfect mazes into an odd-sized grid of walls.

    Node-cells live on the even row / even column lattice. Every algorithm
    connects all node-cells into a spanning tree by carving the wall cell
    between two adjacent node-cells, then marks START at the top-left corner
    and END at the bottom-right corner.
    """

    def __init__(
        self,
        rows: int = 15,
        cols: int = 15,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        renderer: Optional[Renderer] = None,
        draw_delay: float = DEFAULT_DRAW_DELAY,
    ) -> None:
        super().__init__(renderer=renderer, draw_delay=draw_delay)
        self.rows = rows if rows % 2 == 1 else rows - 1
        self.cols = cols if cols % 2 == 1 else cols - 1
        if self.rows < 1 or self.cols < 1 or (self.rows, self.cols) == (1, 1):
            raise MazeConfigurationError(
                "maze is too small to hold distinct start and end cells",
                {"rows": rows, "cols": cols},
            )
        self._rng = rng if rng is not None else random.Random(seed)
        self._algorithms: Dict[GenerationAlgorithm, Callable[[Maze], None]] = {
            GenerationAlgorithm.DFS: self._dfs,
            GenerationAlgorithm.PRIMS: self._prims,
            GenerationAlgorithm.KRUSKALS: self._kruskals,
        }

    @property
    def start(self) -> Position:
        return 0, 0

    @property
    def end(self) -> Position:
        return self.rows - 1, self.cols - 1

    def generate(
        self,
        algorithm: GenerationAlgorithm = GenerationAlgorithm.DFS,
        animate: bool = False,
    ) -> Maze:
        try:
            algorithm = GenerationAlgorithm(algorithm)
        except ValueError as exc:
            raise MazeConfigurationError(
                "unknown generation algorithm", {"algorithm": algorithm}
            ) from exc

        logger.debug("Generating %dx%d maze with %s", self.rows, self.cols, algorithm.value)
        maze = Maze(self.rows, self.cols)
        with self._session(animate):
            self._algorithms[algorithm](maze)
            maze[self.start] = CellState.START
            maze[self.end] = CellState.END
            self._draw(maze, pause=False)
            self._acknowledge(FINISHED_MESSAGE)
        logger.info(
            "Generated %dx%d maze with %s (%d open cells)",
            self.rows,
            self.cols,
            algorithm.value,
            self.rows * self.cols - maze.count(CellState.WALL),
        )
        return maze

    # ------------------------------------------------------------------

    def _carve(self, maze: Maze, *cells: Position) -> None:
        """Open ``cells``, showing them as in-progress for one frame when animating."""

        if self._animating:
            for cell in cells:
                if maze[cell] == CellState.WALL:
                    maze[cell] = CellState.FRONTIER
            self._draw(maze)
        for cell in cells:
            if maze[cell] in (CellState.WALL, CellState.FRONTIER):
                maze[cell] = CellState.OPEN

    def _shuffled_neighbors(self, maze: Maze, node: Node) -> List[Node]:
        neighbors = list(maze.neighbors(node, CellState.WALL))
        self._rng.shuffle(neighbors)
        return neighbors

    def _dfs(self, maze: Maze) -> None:
        start = Node(*self.start)
        maze[self.start] = CellState.START
        self._draw(maze)

        stack: List[Node] = self._shuffled_neighbors(maze, start)
        while stack:
            candidate = stack.pop()
            if maze[candidate.position] != CellState.WALL:
                continue
            self._carve(maze, candidate.between(), candidate.position)
            stack.extend(self._shuffled_neighbors(maze, candidate))

    def _prims(self, maze: Maze) -> None:
        start = Node(*self.start)
        maze[self.start] = CellState.START

        frontier: List[Node] = list(maze.neighbors(start, CellState.WALL))
        while frontier:
            index = self._rng.randrange(len(frontier))
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            candidate = frontier.pop()
            if maze[candidate.position] != CellState.WALL:
                continue
            self._carve(maze, candidate.between(), candidate.position)
            frontier.extend(maze.neighbors(candidate, CellState.WALL))

    def _kruskals(self, maze: Maze) -> None:
        nodes: List[Position] = [
            (r, c) for r in range(0, self.rows, 2) for c in range(0, self.cols, 2)
        ]
        edges: List[Tuple[Position, Position]] = []
        for r, c in nodes:
            if c + 2 < self.cols:
                edges.append(((r, c), (r, c + 2)))
            if r + 2 < self.rows:
                edges.append(((r, c), (r + 2, c)))
        self._rng.shuffle(edges)

        sets = UnionFind(nodes)
        accepted = 0
        while accepted < len(nodes) - 1:
            first, second = edges.pop()
            if not sets.union(first, second):
                continue
            wall = ((first[0] + second[0]) // 2, (first[1] + second[1]) // 2)
            self._carve(maze, first, wall, second)
            accepted += 1
        logger.debug("Kruskal's accepted %d edges over %d nodes", accepted, len(nodes))


__all__ = ["FINISHED_MESSAGE", "GenerationAlgorithm", "MazeGenerator"]
