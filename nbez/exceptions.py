"""Errors raised by curve construction, validation and evaluation."""


class BezierError(Exception):
    """Base class for nbez errors."""


class ChainError(BezierError, ValueError):
    """A flat node sequence is not a valid chain of cubic segments."""


class InvalidLength(ChainError):
    """Chain length is not of the form 3k + 1."""

    def __init__(self, length):
        self.length = length
        super().__init__(f"chain length {length} is not of the form 3k + 1")


class BadNodePattern(ChainError):
    """A segment is not tagged anchor, control, control, anchor."""

    def __init__(self, segment):
        self.segment = segment
        super().__init__(
            f"segment {segment} is not tagged anchor, control, control, anchor"
        )


class DomainError(BezierError, ValueError):
    """Curve parameter outside [0, 1] passed to a bounds-checked query."""

    def __init__(self, t):
        self.t = t
        super().__init__(f"curve parameter t={t!r} is outside [0, 1]")


class OrderOverflow(BezierError, OverflowError):
    """Curve order too large for exact uint64 combinatorics."""

    def __init__(self, order, message=None):
        self.order = order
        if message is None:
            message = f"cannot create Bézier curves of order {order}; decrease curve order"
        super().__init__(message)
