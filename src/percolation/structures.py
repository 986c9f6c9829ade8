"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DisjointSet:
    """Weighted union-find with path halving.

    Not safe for concurrent use: ``find`` rewrites parent links even when
    called from a read-only query such as ``connected``.
    """

    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("count must be positive")
        self.parent = list(range(self.count))
        self.size = [1] * self.count
        self._components = self.count

    @property
    def component_count(self) -> int:
        return self._components

    def find(self, index: int) -> int:
        self._check(index)
        parent = self.parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def component_size(self, index: int) -> int:
        return self.size[self.find(index)]

    def union(self, left: int, right: int) -> bool:
        """Merge the components of `left` and `right`; return False if already joined."""

        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        # equal sizes keep the left root on top
        if self.size[root_left] < self.size[root_right]:
            root_left, root_right = root_right, root_left
        self.parent[root_right] = root_left
        self.size[root_left] += self.size[root_right]
        self._components -= 1
        return True

    def _check(self, index: int) -> None:
        if not 0 <= index < self.count:
            raise IndexError(f"element {index} out of range [0, {self.count})")
