"""Maze grid, generators, solvers and renderers."""

__all__ = [
    "CellState",
    "Direction",
    "Node",
    "Maze",
    "NodeArena",
    "UnionFind",
    "MazeGenerator",
    "GenerationAlgorithm",
    "MazeSolver",
    "SolveStrategy",
    "SolveResult",
    "MazeEvaluator",
    "PathCheckResult",
    "TreeCheckResult",
    "TextRenderer",
    "ImageRenderer",
    "RecordingRenderer",
]

from .cells import CellState, Direction, Node
from .grid import Maze
from .arena import NodeArena
from .union_find import UnionFind
from .generator import MazeGenerator, GenerationAlgorithm
from .solver import MazeSolver, SolveStrategy, SolveResult
from .evaluator import MazeEvaluator, PathCheckResult, TreeCheckResult
from .render import TextRenderer, ImageRenderer, RecordingRenderer
