"""Geometry, Bezier curves, path measures, A* search and polar-matrix helpers for obstacle avoidance."""

__version__ = "0.1.0"

__all__ = ["geometry", "bezier", "paths", "search", "polar_matrix", "tree_node"]