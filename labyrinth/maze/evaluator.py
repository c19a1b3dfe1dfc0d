"""Structural checks for generated mazes and solver paths."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Sequence, Set

import numpy as np

from .cells import CellState, Position
from .grid import Maze


@dataclass
class TreeCheckResult:
    open_cells: int
    edges: int
    components: int
    is_perfect: bool
    message: str

    def to_dict(self) -> dict:
        return {
            "open_cells": self.open_cells,
            "edges": self.edges,
            "components": self.components,
            "is_perfect": self.is_perfect,
            "message": self.message,
        }


@dataclass
class PathCheckResult:
    connected: bool
    touches_goal: bool
    stray_in_walls: bool
    length: int
    message: str

    @property
    def is_valid(self) -> bool:
        return self.connected and self.touches_goal and not self.stray_in_walls

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "touches_goal": self.touches_goal,
            "stray_in_walls": self.stray_in_walls,
            "length": self.length,
            "message": self.message,
        }


class MazeEvaluator:
    """Evaluate whether a maze is perfect and whether a path solves it.

    Any non-WALL cell counts as open, so solver marks do not change the
    verdict on a maze that has already been solved.
    """

    def __init__(self, maze: Maze) -> None:
        self.maze = maze

    def _open_mask(self) -> np.ndarray:
        return self.maze.to_array() != int(CellState.WALL)

    def check_tree(self) -> TreeCheckResult:
        mask = self._open_mask()
        open_cells = int(mask.sum())
        # Each 4-adjacency between open cells is counted once via right and down pairs.
        edges = int(np.logical_and(mask[:, :-1], mask[:, 1:]).sum())
        edges += int(np.logical_and(mask[:-1, :], mask[1:, :]).sum())
        components = self._count_components(mask)

        is_perfect = open_cells > 0 and components == 1 and edges == open_cells - 1
        if open_cells == 0:
            message = "Maze has no open cells."
        elif components > 1:
            message = f"Open cells split into {components} disconnected regions."
        elif edges != open_cells - 1:
            message = f"Open cells contain {edges - open_cells + 1} cycle(s)."
        else:
            message = "Open cells form a spanning tree."
        return TreeCheckResult(
            open_cells=open_cells,
            edges=edges,
            components=components,
            is_perfect=is_perfect,
            message=message,
        )

    def check_path(self, path: Sequence[Position]) -> PathCheckResult:
        cells: List[Position] = [tuple(map(int, cell)) for cell in path]
        if not cells:
            return PathCheckResult(False, False, False, -1, "No path provided.")

        stray_in_walls = any(
            not self.maze.is_valid(*cell) or self.maze[cell] == CellState.WALL for cell in cells
        )
        touches_goal = self.maze.is_valid(*cells[-1]) and self.maze[cells[-1]] == CellState.END
        starts_at_start = self.maze.is_valid(*cells[0]) and self.maze[cells[0]] == CellState.START
        adjacent = all(
            abs(r1 - r2) + abs(c1 - c2) == 1 for (r1, c1), (r2, c2) in zip(cells, cells[1:])
        )
        connected = starts_at_start and adjacent

        if stray_in_walls:
            message = "Path crosses walls or leaves the maze."
        elif not starts_at_start:
            message = "Path does not begin at the start cell."
        elif not adjacent:
            message = "Path is not continuous."
        elif not touches_goal:
            message = "Path does not reach the end cell."
        else:
            message = "Path successfully connects start to end."
        return PathCheckResult(
            connected=connected,
            touches_goal=touches_goal,
            stray_in_walls=stray_in_walls,
            length=len(cells) - 1,
            message=message,
        )

    @staticmethod
    def _count_components(mask: np.ndarray) -> int:
        rows, cols = mask.shape
        seen: Set[Position] = set()
        components = 0
        for r, c in zip(*np.nonzero(mask)):
            origin = (int(r), int(c))
            if origin in seen:
                continue
            components += 1
            seen.add(origin)
            queue = deque([origin])
            while queue:
                cr, cc = queue.popleft()
                for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
                    nr, nc = cr + dr, cc + dc
                    if 0 <= nr < rows and 0 <= nc < cols and mask[nr, nc] and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        queue.append((nr, nc))
        return components


__all__ = ["MazeEvaluator", "PathCheckResult", "TreeCheckResult"]
