"""Shared type aliases for pathgraph."""

from typing import Tuple, Union

#: Numeric arc cost (distance, travel time, etc.). Must be non-negative.
Cost = Union[int, float]

#: Nodes are keyed by their unique name.
NodeName = str

#: Opaque 2-D location carried for external consumers.
Location = Tuple[float, float]
