"""Rendering capability and shared scaffolding for animated maze algorithms."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Union

from .exceptions import MazeConfigurationError

if TYPE_CHECKING:
    from .maze.grid import Maze

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_DRAW_DELAY = 0.02


class Renderer(ABC):
    """Display surface that generators and solvers draw into while animating."""

    def init(self) -> None:
        """Prepare the display for a rendering session."""

    def teardown(self) -> None:
        """Restore the display once a session ends."""

    @abstractmethod
    def draw(self, maze: "Maze", delay: Optional[float] = None) -> None:
        """Render the current grid and pause for ``delay`` seconds if given."""

    def message(self, text: str) -> None:
        """Show a short status line."""

    def await_key(self) -> None:
        """Block until the user acknowledges with a keystroke."""

    def __enter__(self) -> "Renderer":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


class AnimatedMazeAlgorithm(ABC):
    """Base class for algorithms that mutate a maze and optionally animate it."""

    def __init__(
        self,
        *,
        renderer: Optional[Renderer] = None,
        draw_delay: float = DEFAULT_DRAW_DELAY,
    ) -> None:
        if draw_delay < 0:
            raise MazeConfigurationError("draw_delay must not be negative", {"draw_delay": draw_delay})
        self.renderer = renderer
        self.draw_delay = draw_delay
        self._animating = False

    def _resolve_renderer(self) -> Renderer:
        if self.renderer is None:
            from .maze.render import TextRenderer

            self.renderer = TextRenderer()
        return self.renderer

    @contextmanager
    def _session(self, animate: bool) -> Iterator[None]:
        """Bracket one run with renderer setup and teardown when animating."""

        if not animate:
            yield
            return
        renderer = self._resolve_renderer()
        renderer.init()
        self._animating = True
        try:
            yield
        finally:
            self._animating = False
            renderer.teardown()

    def _draw(self, maze: "Maze", *, pause: bool = True) -> None:
        if not self._animating or self.renderer is None:
            return
        self.renderer.draw(maze, self.draw_delay if pause else None)

    def _acknowledge(self, text: str) -> None:
        if not self._animating or self.renderer is None:
            return
        logger.debug("Waiting for acknowledgement: %s", text)
        self.renderer.message(text)
        self.renderer.await_key()


__all__ = [
    "AnimatedMazeAlgorithm",
    "DEFAULT_DRAW_DELAY",
    "PathLike",
    "Renderer",
]
