"""A* search over planner nodes, search visitors and path simplification."""

from __future__ import annotations

import heapq
import itertools
import math
import time
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Protocol


class SearchNode(Protocol):
    """A hashable search state: a cell reached from a parent cell."""

    cell: Hashable
    parent: Hashable

    def neighbors(self) -> Iterable[SearchNode]: ...

    def __hash__(self) -> int: ...

    def __eq__(self, other: object) -> bool: ...


class Goal(Protocol):
    def within_plan_radius(self, cell: Hashable) -> bool: ...


class Planner(Protocol):
    def is_legal(self, node: Any) -> bool: ...

    def get_edge_cost(self, u: Any, v: Any) -> float: ...

    def get_heuristic(self, node: Any, goal: Any) -> float: ...


class _Edge(NamedTuple):
    """A move into ``cell`` coming from ``parent``."""

    cell: Hashable
    parent: Hashable


@dataclass
class SearchInfo:
    """Outcome of a search: whether a path was found, its cells and the effort."""

    found_path: bool = False
    num_iter: int = 0
    search_time: float = 0.0  # microseconds
    path: list[Hashable] = field(default_factory=list)


@dataclass
class SearchVisitor:
    """Records which cells a search reached, how often, and how many nodes it popped."""

    seen: set[Hashable] = field(default_factory=set)
    seen_count: dict[Hashable, float] = field(default_factory=dict)
    num_popped: int = 0

    def init(self) -> None:
        self.seen.clear()
        self.seen_count.clear()
        self.num_popped = 0

    def pop_node(self, u: SearchNode) -> None:
        self.num_popped += 1

    def per_neighbor(self, u: SearchNode, v: SearchNode) -> None:
        self.seen_count[v.cell] = 1.0 + self.seen_count.get(v.cell, 0.0)
        self.seen.add(v.cell)


@dataclass
class NullVisitor:
    """A visitor that keeps no cells, only counts of popped and relaxed nodes."""

    num_popped: int = 0
    num_relaxed: int = 0

    def init(self) -> None:
        self.num_popped = 0
        self.num_relaxed = 0

    def pop_node(self, u: SearchNode) -> None:
        self.num_popped += 1

    def per_neighbor(self, u: SearchNode, v: SearchNode) -> None:
        self.num_relaxed += 1


def simplify_path(
    planner: Planner,
    path: Sequence[Hashable],
    simplify_margin: float = 1.01,
    max_iter: int = 100,
    decelerate_at_end: bool = True,
) -> list[Hashable]:
    """Drop vertices whose removal raises the cost by no more than simplify_margin.

    With decelerate_at_end the last cell is doubled so the path ends in a stop.
    """
    if len(path) < 3:
        return list(path)

    curr_path = list(path)
    for _ in range(max_iter):
        # The first two vertices cannot be removed.
        simple_path = curr_path[:2]
        for i in range(3, len(curr_path), 2):
            parent = _Edge(curr_path[i - 2], curr_path[i - 3])
            u = _Edge(curr_path[i - 1], curr_path[i - 2])
            v = _Edge(curr_path[i], curr_path[i - 1])
            w = _Edge(curr_path[i], curr_path[i - 2])
            curr_cost = planner.get_edge_cost(parent, u) + planner.get_edge_cost(u, v)
            new_cost = planner.get_edge_cost(parent, w)
            if new_cost > simplify_margin * curr_cost:
                simple_path.append(curr_path[i - 1])
            simple_path.append(curr_path[i])

        if len(curr_path) % 2 == 1:
            simple_path.append(curr_path[-1])

        if len(simple_path) == len(curr_path):
            break
        curr_path = simple_path

    if decelerate_at_end:
        curr_path.append(curr_path[-1])
    return curr_path


def find_smooth_path(
    planner: Planner,
    start: SearchNode,
    goal: Goal,
    max_iterations: int = 2000,
    visitor: SearchVisitor | NullVisitor | None = None,
) -> SearchInfo:
    """Run A* from start until a node within the goal's plan radius is popped.

    The returned path runs from the start node's parent cell to the goal cell.
    """
    if visitor is None:
        visitor = NullVisitor()
    visitor.init()

    seen: set[SearchNode] = set()
    parent: dict[SearchNode, SearchNode] = {}
    dist: dict[SearchNode, float] = {start: 0.0}
    counter = itertools.count()
    queue: list[tuple[float, int, SearchNode]] = [(0.0, next(counter), start)]
    num_iter = 0
    best_goal_node: SearchNode | None = None

    start_time = time.process_time()
    while queue and num_iter < max_iterations:
        _, _, u = heapq.heappop(queue)
        if u in seen:
            continue
        seen.add(u)
        visitor.pop_node(u)

        if goal.within_plan_radius(u.cell):
            best_goal_node = u
            break
        num_iter += 1

        for v in u.neighbors():
            if not planner.is_legal(v):
                continue
            new_dist = dist[u] + planner.get_edge_cost(u, v)
            if new_dist < dist.get(v, math.inf):
                parent[v] = u
                dist[v] = new_dist
                priority = new_dist + planner.get_heuristic(v, goal)
                heapq.heappush(queue, (priority, next(counter), v))
                visitor.per_neighbor(u, v)
    total_time = (time.process_time() - start_time) * 1_000_000

    if best_goal_node is None:
        return SearchInfo(False, num_iter, total_time)

    path: list[Hashable] = []
    walker = best_goal_node
    while walker is not start:
        path.append(walker.cell)
        walker = parent[walker]
    path.append(start.cell)
    path.append(start.parent)
    path.reverse()
    return SearchInfo(True, num_iter, total_time, path)