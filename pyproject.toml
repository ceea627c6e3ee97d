[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avoidkit"
version = "0.1.0"
description = "Geometry, Bezier curves, path measures, A* search and polar-matrix helpers for obstacle-avoidance planning"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["path planning", "obstacle avoidance", "a-star", "bezier", "polar histogram", "robotics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["avoidkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
