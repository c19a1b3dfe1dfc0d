"""Index-addressed storage for search nodes and their parent links."""

from __future__ import annotations

from typing import List, Optional

from .cells import Position

ROOT = -1


class NodeArena:
    """Search nodes stored by index, each remembering its parent's index.

    Path reconstruction walks parent indices back to :data:`ROOT`, so a node
    stays addressable for as long as the arena holds it regardless of which
    frontier container references its index. Entries are released together
    once a run is resolved.
    """

    def __init__(self) -> None:
        self._positions: List[Position] = []
        self._parents: List[int] = []
        self.allocated = 0
        self.released = 0

    def add(self, position: Position, parent: int = ROOT) -> int:
        if parent != ROOT and not 0 <= parent < len(self._positions):
            raise IndexError(f"Parent index {parent} is not a live node")
        self._positions.append(position)
        self._parents.append(parent)
        self.allocated += 1
        return len(self._positions) - 1

    def position(self, index: int) -> Position:
        return self._positions[index]

    def parent(self, index: int) -> Optional[int]:
        parent = self._parents[index]
        return None if parent == ROOT else parent

    def path_to(self, index: int) -> List[Position]:
        """Return positions from the root down to ``index``."""

        path: List[Position] = []
        current = index
        while current != ROOT:
            path.append(self._positions[current])
            current = self._parents[current]
        path.reverse()
        return path

    def release_all(self) -> int:
        """Release every live entry exactly once; return how many were freed."""

        if not self._positions:
            return 0
        freed = len(self._positions)
        self._positions.clear()
        self._parents.clear()
        self.released += freed
        return freed

    @property
    def outstanding(self) -> int:
        return self.allocated - self.released

    def __len__(self) -> int:
        return len(self._positions)


__all__ = ["NodeArena", "ROOT"]
