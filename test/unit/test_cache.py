"""Binomial combinatorics and CoefficientCache tests."""

import threading

import numpy as np
import pytest

from nbez.bezier import NBez
from nbez.cache import (
    CoefficientCache,
    binomial_row,
    check_order,
    clear_coefficient_cache,
    combination,
    factorial,
    get_cache_info,
    precompute_coefficients,
)
from nbez.constants import MAX_ORDER
from nbez.exceptions import OrderOverflow


class TestCombination:
    @pytest.mark.parametrize("n", range(MAX_ORDER + 1))
    def test_symmetry(self, n):
        for k in range(n + 1):
            assert combination(n, k) == combination(n, n - k)

    @pytest.mark.parametrize(
        "n, k, expected",
        [
            (0, 0, 1),
            (5, 2, 10),
            (6, 3, 20),
            (21, 10, 352716),
        ],
    )
    def test_values(self, n, k, expected):
        assert combination(n, k) == expected

    def test_out_of_range_is_zero(self):
        assert combination(4, 5) == 0
        assert combination(4, -1) == 0

    def test_pascal_rule(self):
        for n in range(1, 15):
            for k in range(1, n):
                assert combination(n, k) == combination(n - 1, k - 1) + combination(n - 1, k)

    def test_uint64_overflow(self):
        with pytest.raises(OrderOverflow):
            combination(70, 35)

    def test_binomial_row(self):
        assert binomial_row(4) == (1, 4, 6, 4, 1)
        assert binomial_row(0) == (1,)


class TestFactorial:
    def test_values(self):
        assert factorial(0) == 1
        assert factorial(5) == 120
        assert factorial(20) == 2432902008176640000

    def test_overflow(self):
        with pytest.raises(OrderOverflow):
            factorial(21)

    def test_negative(self):
        with pytest.raises(ValueError):
            factorial(-1)


class TestCheckOrder:
    def test_limit(self):
        assert check_order(MAX_ORDER) == MAX_ORDER

    def test_above_limit(self):
        with pytest.raises(OrderOverflow) as exc_info:
            check_order(MAX_ORDER + 1)
        assert exc_info.value.order == MAX_ORDER + 1

    def test_negative(self):
        with pytest.raises(ValueError):
            check_order(-1)


class TestCoefficientCache:
    def test_starts_empty(self):
        cache = CoefficientCache()
        assert cache.order is None
        assert cache.capacity == 0

    def test_ensure_fills_tables(self):
        cache = CoefficientCache()
        factors, dfactors = cache.ensure(3)
        assert factors.tolist() == [1, 3, 3, 1]
        assert dfactors.tolist() == [1, 2, 1]
        assert factors.dtype == np.uint64
        assert cache.order == 3

    def test_order_zero(self):
        factors, dfactors = CoefficientCache().ensure(0)
        assert factors.tolist() == [1]
        assert dfactors.size == 0

    def test_same_order_is_noop(self):
        cache = CoefficientCache()
        first = cache.ensure(4)
        second = cache.ensure(4)
        assert first[0] is second[0]
        assert first[1] is second[1]

    def test_buffer_grows_and_never_shrinks(self):
        cache = CoefficientCache()
        cache.ensure(5)
        assert cache.capacity == 11
        factors, dfactors = cache.ensure(2)
        assert cache.capacity == 11
        assert factors.tolist() == [1, 2, 1]
        assert dfactors.tolist() == [1, 1]
        cache.ensure(7)
        assert cache.capacity == 15

    def test_tables_are_read_only(self):
        factors, _ = CoefficientCache().ensure(3)
        with pytest.raises(ValueError):
            factors[0] = 7

    def test_overflow(self):
        with pytest.raises(OrderOverflow):
            CoefficientCache().ensure(MAX_ORDER + 1)

    def test_clear_keeps_capacity(self):
        cache = CoefficientCache()
        cache.ensure(4)
        cache.clear()
        assert cache.order is None
        assert cache.capacity == 9
        assert cache.ensure(4)[0].tolist() == [1, 4, 6, 4, 1]


class TestSharedMemo:
    def test_precompute_verbose(self, capsys):
        precompute_coefficients(6, verbose=True)
        out = capsys.readouterr().out
        assert "max order: 6" in out

    def test_precompute_rejects_overflow(self):
        with pytest.raises(OrderOverflow):
            precompute_coefficients(MAX_ORDER + 1)

    def test_cache_info_and_clear(self):
        binomial_row(3)
        assert get_cache_info()['binomial_rows']['currsize'] >= 1
        clear_coefficient_cache()
        assert get_cache_info()['binomial_rows']['currsize'] == 0
        assert binomial_row(3) == (1, 3, 3, 1)


class TestThreadSafety:
    def test_shared_curve_across_threads(self, random_curve):
        curve = random_curve(7, 3)
        ts = np.linspace(0.0, 1.0, 50)
        expected = curve.interp_array(ts)
        errors = []

        def worker():
            for i, t in enumerate(ts):
                if not np.allclose(curve.interp(t).as_array(), expected[i]):
                    errors.append(t)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert errors == []

    def test_fresh_curve_per_thread(self):
        curve = NBez([[0.0, 0.0], [1.0, 1.0]])
        results = []

        def worker():
            results.append(curve.copy().interp(0.5).as_array().tolist())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()

        assert results == [[0.5, 0.5]] * 4
