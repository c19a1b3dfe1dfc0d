"""Renderer implementations for terminals, images and headless recording."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import IO, List, Optional, Tuple

import numpy as np
from PIL import Image

from ..base import PathLike, Renderer
from .cells import CellState
from .grid import Maze

CLEAR_SCREEN = "\x1b[2J\x1b[H"

WALL_COLOR = (0, 0, 0)
OPEN_COLOR = (255, 255, 255)
START_COLOR = (220, 30, 30)
END_COLOR = (40, 180, 80)
VISITED_COLOR = (170, 170, 190)
FRONTIER_COLOR = (240, 200, 60)
PATH_COLOR = (60, 110, 230)

PALETTE = np.array(
    [
        WALL_COLOR,
        OPEN_COLOR,
        START_COLOR,
        END_COLOR,
        VISITED_COLOR,
        FRONTIER_COLOR,
        PATH_COLOR,
    ],
    dtype=np.uint8,
)


class TextRenderer(Renderer):
    """Draw the maze as one symbol per cell on a text stream."""

    def __init__(
        self,
        stream: Optional[IO[str]] = None,
        keys: Optional[IO[str]] = None,
        *,
        clear: bool = True,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.keys = keys if keys is not None else sys.stdin
        self.clear = clear

    def init(self) -> None:
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
            self.stream.flush()

    def teardown(self) -> None:
        self.stream.write("\n")
        self.stream.flush()

    def draw(self, maze: Maze, delay: Optional[float] = None) -> None:
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(str(maze))
        self.stream.write("\n")
        self.stream.flush()
        if delay:
            time.sleep(delay)

    def message(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

    def await_key(self) -> None:
        self.keys.readline()


class ImageRenderer(Renderer):
    """Collect every drawn frame as a Pillow image."""

    def __init__(self, cell_size: int = 16) -> None:
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1")
        self.cell_size = cell_size
        self.frames: List[Image.Image] = []
        self.durations: List[float] = []
        self.messages: List[str] = []

    def init(self) -> None:
        self.frames.clear()
        self.durations.clear()
        self.messages.clear()

    def render(self, maze: Maze) -> Image.Image:
        pixels = PALETTE[maze.to_array()]
        if self.cell_size > 1:
            pixels = np.repeat(np.repeat(pixels, self.cell_size, axis=0), self.cell_size, axis=1)
        return Image.fromarray(pixels)

    def draw(self, maze: Maze, delay: Optional[float] = None) -> None:
        self.frames.append(self.render(maze))
        self.durations.append(delay or 0.0)

    def message(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last_frame(self) -> Optional[Image.Image]:
        return self.frames[-1] if self.frames else None

    def save_animation(self, path: PathLike, *, min_duration_ms: int = 20) -> None:
        """Write the collected frames as an animated GIF."""

        if not self.frames:
            raise ValueError("No frames have been drawn")
        durations = [max(min_duration_ms, int(round(d * 1000))) for d in self.durations]
        first, *rest = self.frames
        first.save(path, save_all=True, append_images=rest, duration=durations, loop=0)


@dataclass
class RecordedFrame:
    rows: Tuple[str, ...]
    delay: Optional[float]


class RecordingRenderer(Renderer):
    """Keep symbol snapshots of every call for headless runs and tests."""

    def __init__(self) -> None:
        self.frames: List[RecordedFrame] = []
        self.messages: List[str] = []
        self.sessions = 0
        self.active = False
        self.keys_awaited = 0

    def init(self) -> None:
        self.sessions += 1
        self.active = True

    def teardown(self) -> None:
        self.active = False

    def draw(self, maze: Maze, delay: Optional[float] = None) -> None:
        self.frames.append(RecordedFrame(tuple(maze.to_rows()), delay))

    def message(self, text: str) -> None:
        self.messages.append(text)

    def await_key(self) -> None:
        self.keys_awaited += 1

    def states_seen(self) -> set:
        seen = set()
        for frame in self.frames:
            for row in frame.rows:
                seen.update(CellState.from_symbol(symbol) for symbol in row)
        return seen


__all__ = [
    "ImageRenderer",
    "PALETTE",
    "RecordedFrame",
    "RecordingRenderer",
    "TextRenderer",
]
