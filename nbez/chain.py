"""
Flat sequences of anchor/control nodes forming chains of cubic segments.

A chain of k cubic segments is stored as 3k + 1 nodes; consecutive segments
share their end anchor:

    A C C A C C A
    [ seg 0 ]
          [ seg 1 ]
"""

import warnings
from dataclasses import dataclass
from enum import Enum

from .exceptions import BadNodePattern, InvalidLength
from .fixed import Bez3o2d
from .point import Point2d
from .utils import check_t_bounds


class NodeKind(Enum):
    ANCHOR = "anchor"  # On-curve segment endpoint
    CONTROL = "control"  # Off-curve handle


@dataclass(frozen=True)
class BezNode:
    """An (x, y) node tagged as anchor or control.

    Args:
        x: X coordinate.
        y: Y coordinate.
        kind: Role of the node in the chain.
    """

    x: float
    y: float
    kind: NodeKind = NodeKind.ANCHOR

    @classmethod
    def anchor(cls, x, y):
        return cls(x, y, NodeKind.ANCHOR)

    @classmethod
    def control(cls, x, y):
        return cls(x, y, NodeKind.CONTROL)

    @property
    def is_anchor(self):
        return self.kind is NodeKind.ANCHOR

    @property
    def is_control(self):
        return self.kind is NodeKind.CONTROL

    def as_tuple(self):
        return (self.x, self.y)

    def as_point(self, dtype=None):
        return Point2d(self.x, self.y, dtype=dtype)


class BezCubeChain:
    """A node sequence known to decompose into cubic Bézier segments.

    Build it with from_container, which validates the node pattern, or with
    from_container_unchecked when the caller already guarantees it.
    """

    __slots__ = ('_container',)

    def __init__(self, container):
        self._container = container

    @classmethod
    def from_container(cls, container):
        """
        Validate and wrap a node sequence.

        Args:
            container: Indexable sequence of BezNode

        Returns:
            BezCubeChain wrapping container (not copied)

        Raises:
            InvalidLength: If len(container) is not 3k + 1
            BadNodePattern: If a segment is not anchor, control, control, anchor
        """
        length = len(container)
        if length % 3 != 1:
            raise InvalidLength(length)

        for i in range(length // 3):
            a, c1, c2, b = (container[i*3 + j] for j in range(4))
            if not (a.is_anchor and c1.is_control and c2.is_control and b.is_anchor):
                raise BadNodePattern(i)

        if length == 1:
            warnings.warn("chain has a single node and no segments")

        return cls(container)

    @classmethod
    def from_container_unchecked(cls, container):
        """
        Wrap a node sequence without validation.

        The caller guarantees the 3k + 1 anchor/control pattern; segment
        access on a container that breaks it is undefined behaviour.
        """
        return cls(container)

    @property
    def container(self):
        return self._container

    def unwrap(self):
        return self._container

    def __len__(self):
        return len(self._container)

    @property
    def segment_count(self):
        return len(self._container) // 3

    def segments(self):
        """Yield the (anchor, control, control, anchor) node groups."""
        for i in range(self.segment_count):
            yield self.segment(i)

    def segment(self, index):
        """Nodes (anchor, control, control, anchor) of one segment."""
        if not 0 <= index < self.segment_count:
            raise IndexError(f"segment index {index} out of range")
        return tuple(self._container[index*3 + j] for j in range(4))

    def curve(self, index, dtype=None):
        """2D cubic Bez3o2d of one segment."""
        return Bez3o2d(*(node.as_point(dtype) for node in self.segment(index)))

    def curves(self, dtype=None):
        """Yield one 2D cubic Bez3o2d per segment."""
        for i in range(self.segment_count):
            yield self.curve(i, dtype)

    def interp(self, t):
        """
        Evaluate the chain at t in [0, 1], mapped uniformly onto its segments.

        Raises:
            DomainError: If t is outside [0, 1]
            ValueError: If the chain has no segments
        """
        check_t_bounds(t)
        count = self.segment_count
        if count == 0:
            raise ValueError("cannot evaluate a chain without segments")

        index = min(int(t * count), count - 1)
        return self.curve(index).interp_unbounded(t * count - index)

    def __repr__(self):
        return f"BezCubeChain(segments={self.segment_count})"
