"""Path: an ordered walk of arcs with running cost.

A ``Path`` stores its arcs in a tuple and its visited nodes in a frozenset,
both replaced (never mutated) on ``append``. Copies therefore share no mutable
state, and a search frontier can extend many candidates from a common prefix
without one branch disturbing another.
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Iterator, Optional, Tuple

from pathgraph.config import ENGINE_CONFIG, EngineConfig
from pathgraph.graph import Arc
from pathgraph.types import Cost, NodeName


class Path:
    """Represents a walk through the graph as a sequence of arcs.

    Attributes:
        arcs: Arcs in walk order. For i > 0, ``arcs[i].start == arcs[i-1].finish``.
        total_cost: Sum of arc costs (0 for an empty path).
    """

    __slots__ = ("_arcs", "_nodes", "_cost")

    def __init__(self, arcs: Iterable[Arc] = ()) -> None:
        self._arcs: Tuple[Arc, ...] = ()
        self._nodes: FrozenSet[NodeName] = frozenset()
        self._cost: Cost = 0
        for arc in arcs:
            self.append(arc)

    def append(self, arc: Arc) -> None:
        """Extend the walk by one arc.

        On an empty path the arc's start becomes the origin.

        Args:
            arc: Arc whose start is the current endpoint.

        Raises:
            ValueError: If the arc does not continue the walk.
        """
        if self._arcs:
            if arc.start != self._arcs[-1].finish:
                raise ValueError(
                    f"Arc {arc} does not start at path endpoint "
                    f"'{self._arcs[-1].finish}'."
                )
            self._nodes = self._nodes | {arc.finish}
        else:
            self._nodes = frozenset((arc.start, arc.finish))
        self._arcs = self._arcs + (arc,)
        self._cost = self._cost + arc.cost

    def extended(self, arc: Arc) -> Path:
        """Return a copy of this path with ``arc`` appended."""
        new_path = self.copy()
        new_path.append(arc)
        return new_path

    def copy(self) -> Path:
        new_path = Path.__new__(Path)
        new_path._arcs = self._arcs
        new_path._nodes = self._nodes
        new_path._cost = self._cost
        return new_path

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Path:
        # Arcs are frozen values, so a shallow copy is already independent
        return self.copy()

    @property
    def arcs(self) -> Tuple[Arc, ...]:
        return self._arcs

    @property
    def total_cost(self) -> Cost:
        return self._cost

    @property
    def origin(self) -> Optional[NodeName]:
        """First node of the walk, or None for an empty path."""
        return self._arcs[0].start if self._arcs else None

    @property
    def endpoint(self) -> Optional[NodeName]:
        """Last node of the walk, or None for an empty path."""
        return self._arcs[-1].finish if self._arcs else None

    @property
    def nodes_seq(self) -> Tuple[NodeName, ...]:
        """Node names in walk order, origin first."""
        if not self._arcs:
            return ()
        return (self._arcs[0].start,) + tuple(arc.finish for arc in self._arcs)

    def visited_nodes(self) -> FrozenSet[NodeName]:
        """Return the set of nodes touched by the walk."""
        return self._nodes

    def size(self) -> int:
        return len(self._arcs)

    def is_empty(self) -> bool:
        return not self._arcs

    def arc_at(self, index: int) -> Arc:
        """Return the arc at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``[0, size())``.
        """
        if not 0 <= index < len(self._arcs):
            raise IndexError(
                f"Arc index {index} out of range for path of size {len(self._arcs)}."
            )
        return self._arcs[index]

    def render(self, config: Optional[EngineConfig] = None) -> str:
        """Return one ``"start -> finish (cost)"`` line per arc.

        Each line ends with a newline; an empty path renders as "".
        """
        cfg = config or ENGINE_CONFIG
        return "".join(
            f"{arc.start} -> {arc.finish} ({cfg.format_cost(arc.cost)})\n"
            for arc in self._arcs
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Path({list(self.nodes_seq)}, cost={self._cost})"

    def __getitem__(self, idx: int) -> Arc:
        return self.arc_at(idx)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self._arcs)

    def __len__(self) -> int:
        return len(self._arcs)

    def __bool__(self) -> bool:
        return bool(self._arcs)

    def __lt__(self, other: Any) -> bool:
        """Order by total cost only.

        Equality compares the arc sequence, so two different walks of the
        same cost are neither ``<`` nor ``==`` each other. Use
        ``sorted(paths)`` for cost ranking, not for deduplication.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self._cost < other._cost

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._arcs == other._arcs

    def __hash__(self) -> int:
        return hash(self._arcs)
