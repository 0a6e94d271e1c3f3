import io
import math
import sys

import pytest

from mnlib.nonlinear import (
    RootFindingError,
    add_unique,
    bisection,
    find_intervals,
    min_abs_error,
    newton,
    secant,
)


def square_minus_two(x):
    return x * x - 2.0


def square_minus_two_prime(x):
    return 2.0 * x


def test_bisection_finds_root():
    root = bisection(square_minus_two, 0.0, 2.0, 1e-10, 200)
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-8)


def test_bisection_same_sign_raises():
    with pytest.raises(RootFindingError):
        bisection(square_minus_two, 2.0, 3.0, 1e-10, 100)


def test_bisection_logs_steps():
    out = io.StringIO()
    bisection(square_minus_two, 0.0, 2.0, 1e-6, 100, out, "f")
    lines = out.getvalue().splitlines()
    assert lines[0] == "f,Bisekcja,1,0,2,1"
    assert all(line.startswith("f,Bisekcja,") for line in lines)


def test_bisection_respects_max_iter():
    out = io.StringIO()
    bisection(square_minus_two, 0.0, 2.0, 1e-15, 5, out, "g")
    assert len(out.getvalue().splitlines()) == 5


def test_newton_finds_root():
    root = newton(square_minus_two, square_minus_two_prime, 1.0, 1e-12, 50)
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-10)


def test_newton_zero_derivative_raises():
    with pytest.raises(RootFindingError):
        newton(square_minus_two, square_minus_two_prime, 0.0, 1e-12, 50)


def test_newton_logs_start_point():
    out = io.StringIO()
    newton(square_minus_two, square_minus_two_prime, 1.0, 1e-12, 50, out, "h")
    lines = out.getvalue().splitlines()
    assert lines[0] == "h,Newton,1,1,,1"
    assert all(line.split(",")[3] == "1" for line in lines)


def test_newton_zero_iterations_returns_start():
    assert newton(square_minus_two, square_minus_two_prime, 1.5, 1e-12, 0) == 1.5


def test_secant_finds_root():
    root = secant(square_minus_two, 1.0, 2.0, 1e-12, 100)
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-10)


def test_secant_flat_raises():
    with pytest.raises(RootFindingError):
        secant(lambda x: 5.0, 1.0, 2.0, 1e-12, 100)


def test_secant_logs_steps():
    out = io.StringIO()
    secant(square_minus_two, 1.0, 2.0, 1e-12, 100, out, "s")
    lines = out.getvalue().splitlines()
    assert lines[0] == "s,Sieczne,1,1,2,2"
    assert len(lines) >= 2


def test_find_intervals_brackets_roots():
    intervals = find_intervals(lambda x: x * x - 1.0, -2.0, 2.0, 0.5)
    assert intervals
    for lo, hi in intervals:
        assert lo < hi
        assert lo <= 1.0 <= hi or lo <= -1.0 <= hi


def test_find_intervals_skips_large_values():
    assert find_intervals(lambda x: 1e7 * x, -1.0, 1.0, 0.5) == []
    assert find_intervals(lambda x: x, -1.0, 1.0, 0.5) != []


def test_find_intervals_skips_non_finite():
    assert find_intervals(lambda x: math.inf if x < 0 else -math.inf, -1.0, 1.0, 0.5) == []


def test_find_intervals_rejects_bad_step():
    with pytest.raises(ValueError):
        find_intervals(lambda x: x, 0.0, 1.0, 0.0)


def test_add_unique_skips_near_duplicates():
    roots = [1.0]
    assert add_unique(roots, 1.0 + 1e-8) is False
    assert roots == [1.0]
    assert add_unique(roots, 2.0) is True
    assert roots == [1.0, 2.0]


def test_add_unique_custom_eps():
    roots = [0.0]
    assert add_unique(roots, 0.05, eps=0.01) is False
    assert add_unique(roots, 0.2, eps=0.01) is True
    assert len(roots) == 2


def test_min_abs_error_picks_nearest():
    assert min_abs_error([1.0, 4.0, -2.0], 3.5) == pytest.approx(0.5)


def test_min_abs_error_empty_reference():
    assert min_abs_error([], 3.0) == sys.float_info.max