"""
Fixed-shape Bézier types for the common low orders and dimensions.

For every order in FIXED_ORDERS a single-axis polynomial class BezPoly{n}o is
generated at import time, with one slot per control value and its Bernstein
and derivative weights stored as class constants. For every (order, dimension)
pair a composite class Bez{n}o{d}d bundles Point{d}d control points and
evaluates one BezPoly per axis at the same t.

Field names follow the control point roles:

    order 2:  start, ctrl, end
    order n:  start, ctrl1, ..., ctrl{n-1}, end

These types hold no cache, so sharing them between threads is safe.
"""

from operator import attrgetter

import numpy as np

from .bezier import NBez
from .cache import binomial_row
from .constants import AXES, FIXED_DIMENSIONS, FIXED_ORDERS
from .point import POINT_TYPES, VECTOR_TYPES, Point
from .utils import check_t_bounds, resolve_dtype


def field_names(order):
    """Control point field names of a curve of the given order."""
    names = []
    for k in range(order + 1):
        if k == 0:
            names.append('start')
        elif k == order:
            names.append('end')
        elif order == 2:
            names.append('ctrl')
        else:
            names.append(f'ctrl{k}')
    return tuple(names)


def _bind(cls, values, named):
    """Match positional and keyword arguments to cls.FIELDS."""
    fields = cls.FIELDS
    if len(values) > len(fields):
        raise TypeError(f"{cls.__name__} takes {len(fields)} control values, got {len(values)}")

    bound = dict(zip(fields, values))
    for name, value in named.items():
        if name not in fields:
            raise TypeError(f"{cls.__name__} has no field {name!r}")
        if name in bound:
            raise TypeError(f"{cls.__name__} got multiple values for field {name!r}")
        bound[name] = value

    missing = [name for name in fields if name not in bound]
    if missing:
        raise TypeError(f"{cls.__name__} is missing fields: {', '.join(missing)}")
    return [bound[name] for name in fields]


class _FieldSequence:
    """Sequence access over the generated fields."""

    __slots__ = ()

    FIELDS = ()

    def _values(self):
        return self._GET(self)

    def __len__(self):
        return len(self.FIELDS)

    def __getitem__(self, index):
        return self._values()[index]

    def __setitem__(self, index, value):
        setattr(self, self.FIELDS[index], self._coerce(value))

    def __iter__(self):
        return iter(self._values())

    def _coerce(self, value):
        return value

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    __hash__ = None

    def __repr__(self):
        fields = ', '.join(f"{name}={value!r}" for name, value in zip(self.FIELDS, self._values()))
        return f"{type(self).__name__}({fields})"


class BezPoly(_FieldSequence):
    """
    Base class of the generated single-axis Bézier polynomials.

    Subclasses define ORDER, FIELDS, WEIGHTS = (C(n, k)) and
    DWEIGHTS = (C(n-1, k)).
    """

    __slots__ = ()

    ORDER = None
    WEIGHTS = ()
    DWEIGHTS = ()

    def __init__(self, *values, **named):
        for name, value in zip(self.FIELDS, _bind(type(self), values, named)):
            setattr(self, name, value)

    def interp(self, t):
        check_t_bounds(t)
        return self.interp_unbounded(t)

    def interp_unbounded(self, t):
        n = self.ORDER
        t1 = 1 - t
        acc = 0
        for k, (value, weight) in enumerate(zip(self._values(), self.WEIGHTS)):
            acc = acc + t1 ** (n - k) * t ** k * value * weight
        return acc

    def slope(self, t):
        check_t_bounds(t)
        return self.slope_unbounded(t)

    def slope_unbounded(self, t):
        n = self.ORDER
        t1 = 1 - t
        values = self._values()
        acc = 0
        for k, weight in enumerate(self.DWEIGHTS):
            acc = acc + t1 ** (n - 1 - k) * t ** k * (values[k + 1] - values[k]) * (weight * n)
        return acc


class BezComposite(_FieldSequence):
    """
    Base class of the generated multi-axis Bézier curves.

    Subclasses define ORDER, DIMENSION, FIELDS, AXES and the POLY, POINT and
    VECTOR types used for evaluation.
    """

    __slots__ = ()

    ORDER = None
    DIMENSION = None
    AXES = ()
    POLY = None
    POINT = None
    VECTOR = None

    def __init__(self, *points, **named):
        for name, value in zip(self.FIELDS, _bind(type(self), points, named)):
            setattr(self, name, self._coerce(value))

    def _coerce(self, value):
        if isinstance(value, self.POINT):
            return value
        if isinstance(value, Point):
            value = value.as_array()
        return self.POINT.from_array(value)

    @classmethod
    def new(cls, *coords, dtype=None):
        """
        Build a curve from per-axis control values.

        Args:
            coords: x_start, x_ctrl.., x_end, y_start, ..., one run per axis
            dtype: Floating dtype (None infers one)
        """
        expected = cls.DIMENSION * (cls.ORDER + 1)
        if len(coords) != expected:
            raise TypeError(f"{cls.__name__}.new takes {expected} values, got {len(coords)}")

        rows = np.array(coords, dtype=resolve_dtype(coords, dtype))
        rows = rows.reshape(cls.DIMENSION, cls.ORDER + 1).T
        return cls(*(cls.POINT.from_array(row) for row in rows))

    @property
    def points(self):
        return self._values()

    @property
    def dtype(self):
        return self.start.dtype

    def axis(self, name):
        """Single-axis polynomial of the named axis ('x', 'y', ...)."""
        try:
            index = self.AXES.index(name)
        except ValueError:
            raise KeyError(f"{type(self).__name__} has no axis {name!r}") from None
        return self.POLY(*(point[index] for point in self._values()))

    def polys(self):
        """One single-axis polynomial per axis, in axis order."""
        values = self.as_array()
        return tuple(self.POLY(*column) for column in values.T)

    def interp(self, t):
        check_t_bounds(t)
        return self.interp_unbounded(t)

    def interp_unbounded(self, t):
        coords = [poly.interp_unbounded(t) for poly in self.polys()]
        return self.POINT.from_array(coords, dtype=self.dtype)

    def slope(self, t):
        check_t_bounds(t)
        return self.slope_unbounded(t)

    def slope_unbounded(self, t):
        coords = [poly.slope_unbounded(t) for poly in self.polys()]
        return self.VECTOR.from_array(coords, dtype=self.dtype)

    def as_array(self):
        """(ORDER+1, DIMENSION) array of every control value."""
        return np.stack([point.as_array() for point in self._values()])

    def to_nbez(self):
        """Generic evaluator over the same control points."""
        return NBez(self.as_array())


def _make_poly(order):
    fields = field_names(order)
    name = f"BezPoly{order}o"
    namespace = {
        '__slots__': fields,
        '__doc__': f"Single-axis Bézier polynomial of order {order}: {', '.join(fields)}.",
        '__module__': __name__,
        '__qualname__': name,
        'ORDER': order,
        'FIELDS': fields,
        'WEIGHTS': binomial_row(order),
        'DWEIGHTS': binomial_row(order - 1),
        '_GET': attrgetter(*fields),
    }
    return type(name, (BezPoly,), namespace)


def _make_composite(order, dimension):
    fields = field_names(order)
    name = f"Bez{order}o{dimension}d"
    namespace = {
        '__slots__': fields,
        '__doc__': f"{dimension}D Bézier curve of order {order}: {', '.join(fields)}.",
        '__module__': __name__,
        '__qualname__': name,
        'ORDER': order,
        'DIMENSION': dimension,
        'FIELDS': fields,
        'AXES': AXES[:dimension],
        'POLY': POLY_TYPES[order],
        'POINT': POINT_TYPES[dimension],
        'VECTOR': VECTOR_TYPES[dimension],
        '_GET': attrgetter(*fields),
    }
    return type(name, (BezComposite,), namespace)


POLY_TYPES = {order: _make_poly(order) for order in FIXED_ORDERS}

COMPOSITE_TYPES = {
    (order, dimension): _make_composite(order, dimension)
    for dimension in FIXED_DIMENSIONS
    for order in FIXED_ORDERS
}


def poly_type(order):
    """Generated BezPoly class of the given order."""
    try:
        return POLY_TYPES[order]
    except KeyError:
        raise KeyError(f"no fixed-shape polynomial of order {order}; available: {FIXED_ORDERS}") from None


def fixed_type(order, dimension):
    """Generated composite class of the given order and dimension."""
    try:
        return COMPOSITE_TYPES[order, dimension]
    except KeyError:
        raise KeyError(
            f"no fixed-shape curve of order {order} in {dimension}D; "
            f"available orders {FIXED_ORDERS}, dimensions {FIXED_DIMENSIONS}"
        ) from None


BezPoly2o, BezPoly3o, BezPoly4o, BezPoly5o, BezPoly6o = (POLY_TYPES[order] for order in FIXED_ORDERS)

Bez2o2d, Bez3o2d, Bez4o2d, Bez5o2d, Bez6o2d = (COMPOSITE_TYPES[order, 2] for order in FIXED_ORDERS)
Bez2o3d, Bez3o3d, Bez4o3d, Bez5o3d, Bez6o3d = (COMPOSITE_TYPES[order, 3] for order in FIXED_ORDERS)
Bez2o4d, Bez3o4d, Bez4o4d, Bez5o4d, Bez6o4d = (COMPOSITE_TYPES[order, 4] for order in FIXED_ORDERS)
