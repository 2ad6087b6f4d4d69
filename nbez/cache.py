"""
Binomial coefficient tables for Bernstein evaluation.

The per-curve CoefficientCache keeps the factors of the last order it was
asked for and refills them in place when the order changes. Every cache holds
a lock, so a single curve may be evaluated from several threads; the module
level row memo is shared by all curves.
"""

import threading
from functools import lru_cache

import numpy as np
from scipy.special import comb

from .constants import MAX_ORDER, UINT64_MAX
from .exceptions import OrderOverflow


@lru_cache(maxsize=1024)
def combination(n: int, k: int) -> int:
    """
    Exact binomial coefficient C(n, k).

    Args:
        n: Set size
        k: Subset size

    Returns:
        int: C(n, k), or 0 when k is outside [0, n]

    Raises:
        OrderOverflow: If the coefficient does not fit in uint64
    """
    if k < 0 or k > n:
        return 0
    result = int(comb(n, k, exact=True))
    if result > UINT64_MAX:
        raise OrderOverflow(n, f"C({n}, {k}) overflows uint64; decrease curve order")
    return result


def factorial(n: int) -> int:
    """
    Exact n!, checked against the uint64 range.

    Raises:
        OrderOverflow: If n! does not fit in uint64 (n > 20)
    """
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    accumulator = 1
    while n > 0:
        accumulator *= n
        if accumulator > UINT64_MAX:
            raise OrderOverflow(n, "factorial overflows uint64; decrease curve order")
        n -= 1
    return accumulator


def check_order(order: int) -> int:
    """
    Validate a curve order against the combinatorics limit.

    Raises:
        ValueError: If order is negative
        OrderOverflow: If order > MAX_ORDER
    """
    if order < 0:
        raise ValueError(f"curve order must be non-negative, got {order}")
    if order > MAX_ORDER:
        raise OrderOverflow(order, f"cannot create Bézier curves with an order > {MAX_ORDER} (got {order})")
    return order


@lru_cache(maxsize=None)
def binomial_row(n: int) -> tuple:
    """Row n of Pascal's triangle: (C(n, 0), ..., C(n, n))."""
    return tuple(combination(n, k) for k in range(n + 1))


class CoefficientCache:
    """
    Bernstein weights of one curve order.

    factors[k] = C(order, k) for k = 0..order and dfactors[k] = C(order-1, k)
    for k = 0..order-1 share one uint64 buffer that grows but never shrinks.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._buffer = np.zeros(0, dtype=np.uint64)
        self._order = None
        self._factors = self._buffer
        self._dfactors = self._buffer

    def ensure(self, order):
        """
        Make factors and dfactors valid for order.

        Returns:
            tuple: (factors, dfactors) read-only views, valid until the cache
                is asked for a different order
        """
        with self._lock:
            if self._order != order:
                self._refill(check_order(order))
            return self._factors, self._dfactors

    def _refill(self, order):
        needed = 2 * order + 1
        if self._buffer.size < needed:
            self._buffer = np.zeros(needed, dtype=np.uint64)

        self._buffer[:order + 1] = binomial_row(order)
        if order > 0:
            self._buffer[order + 1:needed] = binomial_row(order - 1)

        factors = self._buffer[:order + 1]
        dfactors = self._buffer[order + 1:needed]
        factors.setflags(write=False)
        dfactors.setflags(write=False)

        self._factors, self._dfactors = factors, dfactors
        self._order = order

    @property
    def order(self):
        """Order the tables currently describe, or None before first use."""
        return self._order

    @property
    def factors(self):
        return self._factors

    @property
    def dfactors(self):
        return self._dfactors

    @property
    def capacity(self):
        """Length of the backing buffer."""
        return self._buffer.size

    def clear(self):
        """Forget the cached order; the buffer is kept."""
        with self._lock:
            self._order = None
            self._factors = self._dfactors = self._buffer[:0]

    def __repr__(self):
        return f"CoefficientCache(order={self._order}, capacity={self.capacity})"


def precompute_coefficients(max_order=MAX_ORDER, verbose=False):
    """
    Fill the shared Pascal row memo up to max_order.

    Args:
        max_order: Highest order to precompute
        verbose: Print progress
    """
    check_order(max_order)
    if verbose:
        print(f"Precomputing binomial rows... (max order: {max_order})")

    for order in range(max_order + 1):
        binomial_row(order)

    if verbose:
        print(f"Done: {binomial_row.cache_info().currsize} rows cached")


def get_cache_info() -> dict:
    """Return statistics of the shared coefficient memos."""
    return {
        'binomial_rows': binomial_row.cache_info()._asdict(),
        'combinations': combination.cache_info()._asdict(),
    }


def clear_coefficient_cache():
    """Clear the shared coefficient memos."""
    binomial_row.cache_clear()
    combination.cache_clear()
