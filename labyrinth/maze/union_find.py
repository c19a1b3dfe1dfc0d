"""Disjoint-set forest used by Kruskal's carving to reject cycle-forming edges."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable


class UnionFind:
    """Disjoint sets over hashable elements.

    ``find`` compresses paths as it walks. ``union`` attaches the second root
    under the first without balancing; correctness only needs ``find`` to
    return one consistent representative per set.
    """

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._set_count = 0
        for element in elements:
            self.make_set(element)

    def make_set(self, element: Hashable) -> None:
        if element in self._parent:
            return
        self._parent[element] = element
        self._set_count += 1

    def find(self, element: Hashable) -> Hashable:
        if element not in self._parent:
            raise KeyError(f"{element!r} is not a member of any set")
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding ``a`` and ``b``; return False if already joined."""

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        self._set_count -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    @property
    def set_count(self) -> int:
        return self._set_count

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def __len__(self) -> int:
        return len(self._parent)


__all__ = ["UnionFind"]
