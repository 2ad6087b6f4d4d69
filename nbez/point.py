"""
Point and vector value types.

Points are affine positions and vectors are displacements. Both wrap a
read-only numpy array, but only the affine operations are defined between
them: a point plus a vector is a point, the difference of two points is a
vector, and adding two points raises TypeError.
"""

import numbers

import numpy as np

from .constants import AXES
from .utils import resolve_dtype


class _Coords:
    """Shared storage and sequence protocol for Point and Vector."""

    __slots__ = ('_data',)

    # Let numpy scalars defer to our reflected operators
    __array_ufunc__ = None

    DIMENSION = None  # Fixed by the sized subclasses

    def __init__(self, *coords, dtype=None):
        self._init(np.array(coords, dtype=resolve_dtype(coords, dtype)))

    @classmethod
    def from_array(cls, array, dtype=None):
        """
        Build a value from any 1-D array-like.

        Args:
            array: Components, shape (n,)
            dtype: Floating dtype (None infers one, integers become float64)
        """
        obj = cls.__new__(cls)
        obj._init(np.array(array, dtype=resolve_dtype(array, dtype)))
        return obj

    def _init(self, data):
        if data.ndim != 1 or data.size == 0:
            raise ValueError(f"{type(self).__name__} needs a non-empty 1-D component array, got shape {data.shape}")
        if self.DIMENSION is not None and data.size != self.DIMENSION:
            raise ValueError(f"{type(self).__name__} needs {self.DIMENSION} components, got {data.size}")
        data.setflags(write=False)
        object.__setattr__(self, '_data', data)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _check_shape(self, other):
        if self._data.shape != other._data.shape:
            raise ValueError(
                f"dimension mismatch: {self.dimension}D {type(self).__name__} "
                f"and {other.dimension}D {type(other).__name__}"
            )
        return other._data

    @property
    def dimension(self):
        return self._data.size

    @property
    def dtype(self):
        return self._data.dtype

    def as_array(self):
        """Return a writable copy of the components."""
        return self._data.copy()

    def __len__(self):
        return self._data.size

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if not isinstance(other, _Coords):
            return NotImplemented
        if _family(self) is not _family(other):
            return False
        return self._data.shape == other._data.shape and bool(np.all(self._data == other._data))

    def __hash__(self):
        return hash((_family(self), tuple(self._data.tolist())))

    def __repr__(self):
        name = type(self).__name__
        if self.DIMENSION is not None:
            fields = ', '.join(f"{axis}={value!r}" for axis, value in zip(AXES, self._data.tolist()))
        else:
            fields = ', '.join(repr(value) for value in self._data.tolist())
        return f"{name}({fields})"

    def __getstate__(self):
        return self._data

    def __setstate__(self, data):
        self._init(np.array(data))


class Point(_Coords):
    """An affine position in F^n."""

    __slots__ = ()

    @classmethod
    def origin(cls, dimension, dtype=None):
        return make_point(np.zeros(dimension, dtype=resolve_dtype(0.0, dtype)), copy=False)

    def __add__(self, other):
        if isinstance(other, Vector):
            return make_point(self._data + self._check_shape(other), copy=False)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Vector):
            return make_point(self._data - self._check_shape(other), copy=False)
        if isinstance(other, Point):
            return make_vector(self._data - self._check_shape(other), copy=False)
        return NotImplemented

    def to_vector(self):
        """Position vector of this point relative to the origin."""
        return make_vector(self._data, copy=False)


class Vector(_Coords):
    """A displacement in F^n."""

    __slots__ = ()

    @classmethod
    def zero(cls, dimension, dtype=None):
        return make_vector(np.zeros(dimension, dtype=resolve_dtype(0.0, dtype)), copy=False)

    def __add__(self, other):
        if isinstance(other, Vector):
            return make_vector(self._data + self._check_shape(other), copy=False)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return make_vector(self._data - self._check_shape(other), copy=False)
        return NotImplemented

    def __mul__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return make_vector(self._data * scalar, copy=False)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, numbers.Real):
            return make_vector(self._data / scalar, copy=False)
        return NotImplemented

    def __neg__(self):
        return make_vector(-self._data, copy=False)

    def dot(self, other):
        return self._data @ self._check_shape(other)

    def length(self):
        """Euclidean length."""
        return np.linalg.norm(self._data)

    def normalize(self):
        """
        Unit vector with the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length
        """
        length = self.length()
        if length == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        return make_vector(self._data / length, copy=False)

    def to_point(self):
        """Point reached by displacing the origin by this vector."""
        return make_point(self._data, copy=False)


def _axis(index):
    def getter(self):
        return self._data[index]
    getter.__doc__ = f"Component along the {AXES[index]} axis."
    return property(getter)


class Point2d(Point):
    __slots__ = ()
    DIMENSION = 2
    x, y = _axis(0), _axis(1)


class Point3d(Point):
    __slots__ = ()
    DIMENSION = 3
    x, y, z = _axis(0), _axis(1), _axis(2)


class Point4d(Point):
    __slots__ = ()
    DIMENSION = 4
    x, y, z, w = _axis(0), _axis(1), _axis(2), _axis(3)


class Vector2d(Vector):
    __slots__ = ()
    DIMENSION = 2
    x, y = _axis(0), _axis(1)


class Vector3d(Vector):
    __slots__ = ()
    DIMENSION = 3
    x, y, z = _axis(0), _axis(1), _axis(2)


class Vector4d(Vector):
    __slots__ = ()
    DIMENSION = 4
    x, y, z, w = _axis(0), _axis(1), _axis(2), _axis(3)


POINT_TYPES = {2: Point2d, 3: Point3d, 4: Point4d}
VECTOR_TYPES = {2: Vector2d, 3: Vector3d, 4: Vector4d}


def _family(value):
    return Point if isinstance(value, Point) else Vector


def _wrap(cls, data):
    obj = cls.__new__(cls)
    obj._init(data)
    return obj


def make_point(data, copy=True):
    """
    Wrap a 1-D array as the sized Point class for its dimension.

    Args:
        data: Components, shape (n,)
        copy: Pass False only for freshly computed arrays nobody else holds
    """
    data = np.array(data) if copy else np.asarray(data)
    return _wrap(POINT_TYPES.get(data.size, Point), data)


def make_vector(data, copy=True):
    """Wrap a 1-D array as the sized Vector class for its dimension."""
    data = np.array(data) if copy else np.asarray(data)
    return _wrap(VECTOR_TYPES.get(data.size, Vector), data)


def lerp(a, b, f):
    """Linear interpolation from a (f=0) to b (f=1) for points or vectors."""
    return a + (b - a) * f
