from __future__ import annotations

from typing import Dict, FrozenSet, Generic, Hashable, Iterable, List, TypeVar

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """
    Partition of items into disjoint sets (union-find).

    Starts with one singleton set per item. ``find`` compresses paths as it
    walks to the root; ``union`` attaches the smaller tree under the larger.
    Every item belongs to exactly one set at all times.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._parent: Dict[T, T] = {}
        self._size: Dict[T, int] = {}
        self._num_sets = 0
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        """Add ``item`` as a new singleton set. Existing items are left alone."""
        if item in self._parent:
            return
        self._parent[item] = item
        self._size[item] = 1
        self._num_sets += 1

    def find(self, item: T) -> T:
        """
        Return the representative of the set containing ``item``.

        Raises:
            KeyError: If ``item`` was never added.
        """
        parent = self._parent
        if item not in parent:
            raise KeyError(f"Item '{item}' is not in the partition.")

        root = item
        while parent[root] != root:
            root = parent[root]

        # Point every node on the walked chain straight at the root
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: T, b: T) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two distinct sets were merged, False if they were already one.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size.pop(root_b)
        self._num_sets -= 1
        return True

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def set_size(self, item: T) -> int:
        """Return the number of items in the set containing ``item``."""
        return self._size[self.find(item)]

    @property
    def num_sets(self) -> int:
        return self._num_sets

    def groups(self) -> List[FrozenSet[T]]:
        """Return the current sets, ordered by first-added member."""
        members: Dict[T, List[T]] = {}
        for item in self._parent:
            members.setdefault(self.find(item), []).append(item)
        return [frozenset(group) for group in members.values()]

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)
