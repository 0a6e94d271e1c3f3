"""Numerical methods: cooling-equation ODE integrators and nonlinear root finders."""

__version__ = "0.1.0"
__all__ = ["differential", "nonlinear"]