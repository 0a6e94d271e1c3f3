"""Explicit solvers for the cooling equation dT/dt = -k * T**4."""

from __future__ import annotations

import math
from typing import Callable

K = 7e-12

_Step = Callable[[float, float], float]


def equation(T: float) -> float:
    """Right-hand side of the cooling equation at temperature ``T``."""
    return -K * T**4


def _cbrt(x: float) -> float:
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def _integrate(step: _Step, T0: float, dt: float, t: float) -> float:
    if dt == 0:
        raise ValueError("time step dt must be non-zero")
    T = T0
    for _ in range(int(t / dt)):
        T += step(T, dt)
        if T < 0:
            return 0.0
    return T


def _euler_step(T: float, dt: float) -> float:
    return dt * equation(T)


def _heun_step(T: float, dt: float) -> float:
    k1 = equation(T)
    k2 = equation(T + dt * k1)
    return (dt / 2.0) * (k1 + k2)


def _midpoint_step(T: float, dt: float) -> float:
    k1 = equation(T)
    k2 = equation(T + (dt / 2.0) * k1)
    return dt * k2


def _runge_kutta_step(T: float, dt: float) -> float:
    k1 = equation(T)
    k2 = equation(T + (dt / 2.0) * k1)
    k3 = equation(T + (dt / 2.0) * k2)
    k4 = equation(T + dt * k3)
    return (dt / 6.0) * (k1 + 2 * k2 + 2 * k3 + k4)


def euler(T0: float, dt: float, t: float) -> float:
    """Integrate from ``T0`` up to time ``t`` with Euler's method."""
    return _integrate(_euler_step, T0, dt, t)


def heun(T0: float, dt: float, t: float) -> float:
    """Integrate from ``T0`` up to time ``t`` with Heun's method."""
    return _integrate(_heun_step, T0, dt, t)


def midpoint(T0: float, dt: float, t: float) -> float:
    """Integrate from ``T0`` up to time ``t`` with the midpoint method."""
    return _integrate(_midpoint_step, T0, dt, t)


def runge_kutta(T0: float, dt: float, t: float) -> float:
    """Integrate from ``T0`` up to time ``t`` with classic fourth-order Runge-Kutta."""
    return _integrate(_runge_kutta_step, T0, dt, t)


def analytical_solution(T: float) -> float:
    """Exact solution at time ``T`` for the initial temperature 970."""
    return 970000 / _cbrt(19166133 * T + 1000000000)