"""Maze generation and solving toolkit."""

__all__ = [
    "AnimatedMazeAlgorithm",
    "Renderer",
    "MazeError",
    "MazeConfigurationError",
    "MazeInvariantError",
    "CellState",
    "Maze",
    "MazeGenerator",
    "GenerationAlgorithm",
    "MazeSolver",
    "SolveStrategy",
    "SolveResult",
    "MazeEvaluator",
    "UnionFind",
]

from .base import AnimatedMazeAlgorithm, Renderer
from .exceptions import MazeError, MazeConfigurationError, MazeInvariantError
from .maze import (
    CellState,
    Maze,
    MazeGenerator,
    GenerationAlgorithm,
    MazeSolver,
    SolveStrategy,
    SolveResult,
    MazeEvaluator,
    UnionFind,
)
