"""Nodes of the look-ahead search tree."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike


def _vector(value: ArrayLike) -> np.ndarray:
    return np.array(value, dtype=float)


@dataclass(eq=False)
class TreeNode:
    """A tree node with its origin index, position, velocity and costs."""

    origin: int = 0
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    total_cost: float = 0.0
    heuristic: float = 0.0
    closed: bool = False
    depth: int = 0

    def __post_init__(self) -> None:
        self.position = _vector(self.position)
        self.velocity = _vector(self.velocity)

    def set_costs(self, h: float, c: float) -> None:
        """Set the heuristic and the total cost."""
        self.heuristic = h
        self.total_cost = c