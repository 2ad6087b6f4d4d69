"""
Generic n-order Bézier curve with D/E matrices for derivatives and elevation.
"""

from functools import lru_cache

import numpy as np

from .cache import CoefficientCache, check_order
from .de_casteljau import segment_matrices_equal_params, split_points
from .point import Point, Vector, make_point, make_vector
from .utils import check_t_array_bounds, check_t_bounds, resolve_dtype


@lru_cache(maxsize=128)
def _cached_D_matrix(N, dtype):
    D = np.zeros((N, N+1), dtype=dtype)
    for i in range(N):
        D[i, i] = -N
        D[i, i+1] = N
    D.setflags(write=False)
    return D


@lru_cache(maxsize=128)
def _cached_E_matrix(N, dtype):
    E = np.zeros((N+2, N+1), dtype=dtype)

    # Endpoints are kept
    E[0, 0] = 1.0
    E[N+1, N] = 1.0

    # Q_j = (j/(N+1)) * P_{j-1} + ((N+1-j)/(N+1)) * P_j
    for j in range(1, N+1):
        E[j, j-1] = j / (N + 1)
        E[j, j] = (N + 1 - j) / (N + 1)
    E.setflags(write=False)
    return E


def get_D_matrix(N, dtype=float):
    """
    Compute derivative matrix D for Bézier curve of degree N.

    [D]_i,j = N × { -1 if j=i, 1 if j=i+1, 0 otherwise }, so D @ P holds the
    control points of the hodograph, N * (P_{i+1} - P_i).

    Args:
        N: Degree of Bézier curve
        dtype: Floating dtype of the matrix

    Returns:
        D: (N, N+1) read-only matrix
    """
    return _cached_D_matrix(N, np.dtype(dtype))


def get_E_matrix(N, dtype=float):
    """
    Compute elevation matrix E for Bézier curve of degree N.
    Elevates degree from N to N+1.

    Args:
        N: Original degree
        dtype: Floating dtype of the matrix

    Returns:
        E: (N+2, N+1) read-only matrix
    """
    return _cached_E_matrix(N, np.dtype(dtype))


def _control_array(points, dtype=None):
    """Turn Points or an array-like into an (N+1, dim) float array."""
    if not isinstance(points, np.ndarray):
        points = [p.as_array() if isinstance(p, Point) else p for p in points]
    if len(points) == 0:
        raise ValueError("cannot create a Bézier curve from an empty sequence of control points")

    P = np.asarray(points, dtype=resolve_dtype(points, dtype))
    if P.ndim == 1:
        P = P.reshape(-1, 1)
    if P.ndim != 2:
        raise ValueError(f"control_points must be (N+1, dim), got shape {P.shape}")
    return P


class NBez:
    """
    Bézier curve of any order up to MAX_ORDER over points of any dimension.

    The control points live in an (N+1, dim) numpy array whose dtype is the
    float type used for every evaluation. Bernstein weights come from a
    CoefficientCache owned by the curve; the cache is lock-guarded, so a
    curve may be shared between threads, and it never takes part in
    equality.
    """

    def __init__(self, points, dtype=None):
        """
        Args:
            points: Sequence of Point, or array-like (N+1, dim). A float
                ndarray of the requested dtype is used in place, not copied.
            dtype: Floating dtype (None infers one, integers become float64)

        Raises:
            ValueError: If points is empty or badly shaped
            OrderOverflow: If the implied order exceeds MAX_ORDER
        """
        P = _control_array(points, dtype)
        check_order(P.shape[0] - 1)
        self._points = P
        self._cache = CoefficientCache()

    @classmethod
    def from_container(cls, points, dtype=None):
        return cls(points, dtype)

    # -- Shape --

    def order(self):
        return self._points.shape[0] - 1

    @property
    def dimension(self):
        return self._points.shape[1]

    @property
    def dtype(self):
        return self._points.dtype

    @property
    def points(self):
        """Writable (N+1, dim) view of the control points."""
        return self._points

    def unwrap(self):
        return self._points

    # -- Evaluation --

    def interp(self, t):
        """
        Evaluate the curve at t.

        Raises:
            DomainError: If t is outside [0, 1]
        """
        check_t_bounds(t)
        return self.interp_unbounded(t)

    def interp_unbounded(self, t):
        """Bernstein sum Σ C(n,k) t^k (1-t)^(n-k) P_k, without bounds check."""
        P = self._points
        n = P.shape[0] - 1
        factors, _ = self._cache.ensure(n)

        t = P.dtype.type(t)
        k = np.arange(n + 1, dtype=P.dtype)
        basis = factors.astype(P.dtype) * t ** k * (1 - t) ** (n - k)
        return make_point(basis @ P, copy=False)

    def slope(self, t):
        """
        Evaluate the first derivative at t.

        Raises:
            DomainError: If t is outside [0, 1]
        """
        check_t_bounds(t)
        return self.slope_unbounded(t)

    def slope_unbounded(self, t):
        """Σ C(n-1,k) t^k (1-t)^(n-1-k) n (P_{k+1} - P_k), without bounds check."""
        P = self._points
        n = P.shape[0] - 1
        _, dfactors = self._cache.ensure(n)
        if n == 0:
            return Vector.zero(self.dimension, dtype=P.dtype)

        t = P.dtype.type(t)
        k = np.arange(n, dtype=P.dtype)
        basis = dfactors.astype(P.dtype) * t ** k * (1 - t) ** (n - 1 - k)
        return make_vector(basis @ (get_D_matrix(n, P.dtype) @ P), copy=False)

    def _basis_matrix(self, ts, factors, n):
        ts = np.atleast_1d(np.asarray(ts, dtype=self.dtype)).reshape(-1, 1)
        k = np.arange(n + 1, dtype=self.dtype)
        return factors.astype(self.dtype) * ts ** k * (1 - ts) ** (n - k)

    def interp_array(self, ts):
        """
        Evaluate the curve at many parameters.

        Args:
            ts: Parameters in [0, 1]

        Returns:
            (len(ts), dim) array of positions
        """
        check_t_array_bounds(ts)
        n = self.order()
        factors, _ = self._cache.ensure(n)
        return self._basis_matrix(ts, factors, n) @ self._points

    def slope_array(self, ts):
        """Evaluate the first derivative at many parameters; (len(ts), dim) array."""
        check_t_array_bounds(ts)
        n = self.order()
        _, dfactors = self._cache.ensure(n)
        if n == 0:
            return np.zeros((np.size(ts), self.dimension), dtype=self.dtype)
        return self._basis_matrix(ts, dfactors, n - 1) @ (get_D_matrix(n, self.dtype) @ self._points)

    # -- Derived curves --

    def elevate(self):
        """
        Degree elevation (N → N+1) tracing the same curve.

        Raises:
            OrderOverflow: If the elevated order exceeds MAX_ORDER
        """
        return NBez(get_E_matrix(self.order(), self.dtype) @ self._points)

    def elevate_by(self, steps):
        """Elevate the degree several times."""
        if steps < 0:
            raise ValueError("elevation steps cannot be negative")

        result = self
        for _ in range(steps):
            result = result.elevate()
        return result

    def split(self, t):
        """
        Split the curve at t into two curves of the same order.

        Raises:
            DomainError: If t is outside [0, 1]
        """
        check_t_bounds(t)
        return self.split_unbounded(t)

    def split_unbounded(self, t):
        """De Casteljau subdivision at t, without bounds check."""
        left, right = split_points(self._points, t)
        return NBez(left), NBez(right)

    def subdivide(self, n_seg):
        """Split into n_seg curves over equal parameter intervals."""
        mats = segment_matrices_equal_params(self.order(), n_seg, dtype=self.dtype)
        return [NBez(A @ self._points) for A in mats]

    # -- Control point access --

    def __len__(self):
        return self._points.shape[0]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [make_point(row) for row in self._points[index]]
        return make_point(self._points[index])

    def __setitem__(self, index, value):
        if isinstance(value, Point):
            value = value.as_array()
        self._points[index] = value

    def __iter__(self):
        return (make_point(row) for row in self._points)

    def copy(self):
        return NBez(self._points.copy())

    def __copy__(self):
        return NBez(self._points)

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, NBez):
            return NotImplemented
        return self.dtype == other.dtype and np.array_equal(self._points, other._points)

    __hash__ = None

    def __repr__(self):
        return f"NBez(order={self.order()}, dimension={self.dimension}, dtype={self.dtype})"
