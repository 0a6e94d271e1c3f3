[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mnlib"
version = "0.1.0"
description = "Numerical methods: fixed-step ODE integrators for a radiative cooling model and root finders for nonlinear equations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "ode",
    "euler",
    "heun",
    "runge-kutta",
    "root-finding",
    "bisection",
    "newton",
    "secant",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mnlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
