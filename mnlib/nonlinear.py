"""Root finding for scalar nonlinear equations."""

from __future__ import annotations

import math
import sys
from typing import Callable, Iterable, MutableSequence, Optional, TextIO

Function = Callable[[float], float]

_DERIVATIVE_TOL = 1e-12
_MAGNITUDE_LIMIT = 1e6


class RootFindingError(ArithmeticError):
    """Raised when a method cannot produce a root."""


def bisection(
    f: Function,
    a: float,
    b: float,
    eps: float,
    max_iter: int,
    log: Optional[TextIO] = None,
    name: str = "",
) -> float:
    """Find a root of ``f`` in ``[a, b]`` by interval halving."""
    if f(a) * f(b) >= 0:
        raise RootFindingError("f(a) and f(b) must have opposite signs")
    if max_iter < 1:
        raise ValueError("max_iter must be at least 1")
    c = a
    for i in range(1, max_iter + 1):
        c = (a + b) / 2.0
        if log is not None:
            log.write(f"{name},Bisekcja,{i},{a:g},{b:g},{c:g}\n")
        if abs(f(c)) < eps or abs(b - a) < eps:
            return c
        if f(a) * f(c) < 0:
            b = c
        else:
            a = c
    return c


def newton(
    f: Function,
    df: Function,
    x0: float,
    eps: float,
    max_iter: int,
    log: Optional[TextIO] = None,
    name: str = "",
) -> float:
    """Find a root of ``f`` with Newton's method starting from ``x0``."""
    x = x0
    for i in range(1, max_iter + 1):
        fx = f(x)
        dfx = df(x)
        if log is not None:
            log.write(f"{name},Newton,{i},{x0:g},,{x:g}\n")
        if abs(dfx) < _DERIVATIVE_TOL:
            raise RootFindingError(f"derivative vanishes at x={x:g}")
        x1 = x - fx / dfx
        if abs(x1 - x) < eps:
            return x1
        x = x1
    return x


def secant(
    f: Function,
    x0: float,
    x1: float,
    eps: float,
    max_iter: int,
    log: Optional[TextIO] = None,
    name: str = "",
) -> float:
    """Find a root of ``f`` with the secant method from ``x0`` and ``x1``."""
    f0, f1 = f(x0), f(x1)
    for i in range(1, max_iter + 1):
        if log is not None:
            log.write(f"{name},Sieczne,{i},{x0:g},{x1:g},{x1:g}\n")
        if abs(f1 - f0) < _DERIVATIVE_TOL:
            raise RootFindingError("secant slope vanishes")
        x2 = x1 - f1 * (x1 - x0) / (f1 - f0)
        if abs(x2 - x1) < eps:
            return x2
        x0, f0 = x1, f1
        x1 = x2
        f1 = f(x1)
    return x1


def find_intervals(
    f: Function, a: float, b: float, step: float
) -> list[tuple[float, float]]:
    """Scan ``[a, b]`` in steps and return subintervals where ``f`` changes sign."""
    if step <= 0:
        raise ValueError("step must be positive")
    intervals: list[tuple[float, float]] = []
    x1, x2 = a, a + step
    while x2 <= b:
        y1, y2 = f(x1), f(x2)
        bounded = all(
            math.isfinite(y) and abs(y) < _MAGNITUDE_LIMIT for y in (y1, y2)
        )
        if bounded and (y1 * y2 < 0 or y1 == 0 or y2 == 0):
            intervals.append((x1, x2))
        x1 = x2
        x2 += step
    return intervals


def add_unique(roots: MutableSequence[float], x: float, eps: float = 1e-7) -> bool:
    """Append ``x`` to ``roots`` unless a root within ``10 * eps`` is already there.

    Returns whether ``x`` was added.
    """
    if any(abs(x - r) < 10 * eps for r in roots):
        return False
    roots.append(x)
    return True


def min_abs_error(reference: Iterable[float], x: float) -> float:
    """Distance from ``x`` to the nearest reference value."""
    return min((abs(x - r) for r in reference), default=sys.float_info.max)