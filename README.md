# mnlib

A small collection of numerical methods in plain Python, with no third-party
dependencies. It has two modules: fixed-step integrators for one ordinary
differential equation, and root finders for scalar nonlinear equations.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Ordinary differential equations: `mnlib.differential`

The module integrates the radiative cooling model

    dT/dt = -k * T**4,   k = 7e-12   (the module constant K)

with four fixed-step methods. Each takes an initial temperature `T0`, a time
step `dt` and a total time `t`, performs `int(t / dt)` steps and returns the
final temperature. If a step takes the temperature below zero, the result is
`0.0` and integration stops there. A `dt` of zero raises `ValueError`.

| Function | Method |
| --- | --- |
| `euler(T0, dt, t)` | explicit Euler |
| `heun(T0, dt, t)` | Heun (improved Euler) |
| `midpoint(T0, dt, t)` | midpoint method |
| `runge_kutta(T0, dt, t)` | classical fourth-order Runge–Kutta |

`equation(T)` evaluates the right-hand side `-K * T**4`, and
`analytical_solution(T)` gives the exact solution at time `T` for an initial
temperature of 970.

```python
from mnlib.differential import runge_kutta, analytical_solution

approx = runge_kutta(970.0, 10.0, 1000.0)
exact = analytical_solution(1000.0)
print(approx, exact, abs(approx - exact))
```

## Nonlinear equations: `mnlib.nonlinear`

Root finders for a function of one real variable:

- `bisection(f, a, b, eps, max_iter, log=None, name="")` halves the interval
  `[a, b]`. It raises `RootFindingError` unless `f(a) * f(b) < 0`, and
  `ValueError` if `max_iter` is less than 1. It returns the midpoint once
  `|f(c)| < eps` or the interval width is below `eps`.
- `newton(f, df, x0, eps, max_iter, log=None, name="")` runs Newton's method
  from `x0` with the derivative `df`. It raises `RootFindingError` when
  `|df(x)| < 1e-12`.
- `secant(f, x0, x1, eps, max_iter, log=None, name="")` runs the secant method
  from two starting points. It raises `RootFindingError` when the two
  function values differ by less than `1e-12`.

Newton and secant stop once a step is smaller than `eps`. All three return
their last estimate after `max_iter` iterations without convergence.

When `log` is a writable text stream, every iteration writes one CSV line to
it, beginning with `name`:

- bisection: `name,Bisekcja,<i>,<a>,<b>,<midpoint>`
- Newton: `name,Newton,<i>,<x0>,,<x>`
- secant: `name,Sieczne,<i>,<x0>,<x1>,<x1>`

Helpers:

- `find_intervals(f, a, b, step)` scans `[a, b]` in steps of `step` and
  returns the sub-intervals `(x1, x2)` on which `f` changes sign or is zero at
  an end, skipping pairs where a value is not finite or has magnitude of
  `1e6` or more. A non-positive `step` raises `ValueError`.
- `add_unique(roots, x, eps=1e-7)` appends `x` to the list `roots` unless it
  already holds a value within `10 * eps` of it, and returns whether `x` was
  added.
- `min_abs_error(reference, x)` returns the smallest distance from `x` to any
  value in `reference`, or `sys.float_info.max` if `reference` is empty.

```python
import math
import sys

from mnlib.nonlinear import (
    RootFindingError, bisection, find_intervals, add_unique, min_abs_error,
)

def f(x):
    return math.cos(x) - x

roots = []
for a, b in find_intervals(f, -2.0, 2.0, 0.1):
    try:
        add_unique(roots, bisection(f, a, b, 1e-10, 100, log=sys.stdout, name="cos"))
    except RootFindingError:
        pass

print(roots)
print(min_abs_error(roots, 0.739085))
```

## What the package does not do

It covers only the two modules above. There is no numerical integration
(quadrature), interpolation, function approximation or linear-algebra
solver, the differential-equation solvers handle only the built-in cooling
equation, and there is no command-line program.