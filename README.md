# avoidkit

Building blocks for obstacle-avoidance path planning. The package covers 3D
point geometry and quadratic Bezier curves. It has measures and smoothing
for paths made of poses, and an A* search in which you supply the nodes and
the costs. It also has helpers for the polar matrices that local planners
use.

## Installation

```
pip install avoidkit
```

The only runtime dependency is `numpy`.

## Modules

### `avoidkit.geometry`

- `Point` is a frozen `(x, y, z)` dataclass. It supports `+`, `-`, unary
  `-`, multiplication by a scalar, division by a scalar, and iteration.
- `Color` is a frozen RGBA dataclass.
- Point helpers: `squared`, `interpolate` (on floats), `interpolate_points`,
  `middle_point`, `add_points`, `subtract_points`, `scale_point`, `norm`,
  `point_norm` and `distance`. They accept any object with `x`, `y` and `z`
  attributes.
- `angle_to_range(angle)` wraps an angle into `[-pi, pi]`.
- `posterior(p, prior)` combines two independent probabilities of the same
  event.
- `spectral_color(hue, alpha=1.0)` gives red at `0.0`, green at `0.5` and
  blue at `1.0`.

### `avoidkit.bezier`

- `quadratic_bezier(p0, p1, p2, t)` and `quadratic_bezier_acc(p0, p1, p2, duration=1.0)`
  work on floats or `Point`s.
- `three_point_bezier(p0, p1, p2, num_steps=10)` returns `num_steps + 1`
  points that run from `p0` to `p2`.
- `bezier_from_two_points(start, end, acc, max_vel)` returns three
  `BezierSegment`s: accelerate, cruise, and decelerate.
- `bezier_from_two_speeds(start, end, start_speed, end_speed)` returns one
  segment. It raises `ValueError` if the speeds sum to zero.
- `get_duration(p0, p1, acc)` and
  `get_acceleration_magnitude(p0, p1, p2, duration)`.

### `avoidkit.paths`

- `Pose` holds a `position`, an `orientation` (`Quaternion`) and a
  `frame_id`.
- Measures: `pose_distance`, `path_length`, `path_energy(poses, up_penalty)`
  and `path_kinetic_energy`.
- `has_same_yaw_and_altitude(a, b)`.
- `filter_path_corners(poses)` keeps the first pose, the last pose, and
  every pose where the path turns.
- `smooth_path(poses)` replaces each corner with a Bezier curve.
- `three_point_bezier_path(poses, num_steps=10)` turns a path of exactly
  three poses into a Bezier curve. It raises `ValueError` for any other
  length.

### `avoidkit.search`

`find_smooth_path(planner, start, goal, max_iterations=2000, visitor=None)`
runs an A* search. It stops when it pops a node for which
`goal.within_plan_radius(node.cell)` is true. It returns a `SearchInfo`
with these fields:

- `found_path`
- `num_iter`
- `search_time` (in microseconds of CPU time)
- `path`, which runs from the start node's `parent` cell to the goal cell

The package does not provide nodes or a planner, so you supply them:

- A node is hashable. It has `cell` and `parent` attributes and a
  `neighbors()` method.
- The planner has these methods:
  - `is_legal(node)`
  - `get_edge_cost(u, v)`
  - `get_heuristic(node, goal)`

To observe a search, pass a `SearchVisitor` or a `NullVisitor`:

- `SearchVisitor` records the cells it reached (`seen`), how often each was
  reached (`seen_count`), and `num_popped`.
- `NullVisitor` only counts `num_popped` and `num_relaxed`.

`simplify_path(planner, path, simplify_margin=1.01, max_iter=100, decelerate_at_end=True)`
drops vertices when removing them raises the edge cost by no more than
`simplify_margin`. It passes edges to `planner.get_edge_cost` as objects
with `cell` and `parent` attributes. With `decelerate_at_end`, it doubles
the last cell.

```python
from dataclasses import dataclass
from avoidkit.search import find_smooth_path

@dataclass(frozen=True)
class Step:
    cell: tuple
    parent: tuple

    def neighbors(self):
        x, y = self.cell
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            yield Step((x + dx, y + dy), self.cell)

class Goal:
    cell = (3, 0)

    def within_plan_radius(self, cell):
        return cell == self.cell

class Grid:
    walls = {(1, 0), (1, 1)}

    def is_legal(self, node):
        return node.cell not in self.walls

    def get_edge_cost(self, u, v):
        return 1.0

    def get_heuristic(self, node, goal):
        return abs(node.cell[0] - goal.cell[0]) + abs(node.cell[1] - goal.cell[1])

info = find_smooth_path(Grid(), Step((0, 0), (0, 0)), Goal())
print(info.found_path)   # True
print(info.path[-1])     # (3, 0)
```

### `avoidkit.polar_matrix`

- `get_conic_kernel(radius)` returns a cone of length `2 * radius + 1` that
  peaks at 1.
- `pad_polar_matrix(matrix, n_lines_padding)` pads a matrix:
  - Rows past the poles are mirrored and shifted by half a turn.
  - Columns wrap around.
  - It raises `ValueError` for an odd column count or for padding larger
    than the matrix.
- `smooth_polar_matrix(matrix, smoothing_radius)` returns a smoothed copy.
- `generate_cost_image(cost_matrix, distance_matrix)` returns RGB8 bytes.
  Red holds the distance cost and green holds the other costs. Rows run from
  the highest elevation index down.
- `color_image_index(e_ind, z_ind, color, grid_length_e, grid_length_z)`
  gives the byte offset of a channel in that image.
- `get_setpoint_from_path(path, path_generation_time, velocity, current_time)`
  returns the point reached by travelling along the path at `velocity`. The
  path is stored goal first. The function returns `None` if the path is too
  short or has already been travelled past.

```python
import numpy as np
from avoidkit.polar_matrix import smooth_polar_matrix

matrix = np.zeros((30, 60))
matrix[15, 30] = 1.0
smoothed = smooth_polar_matrix(matrix, 2)
```

### `avoidkit.tree_node`

`TreeNode` is one node of a look-ahead tree. It holds these fields:

- `origin`
- `position`
- `velocity`
- `total_cost`
- `heuristic`
- `closed`
- `depth`

`set_costs(h, c)` sets the heuristic and the total cost.

## What the package does not do

These are building blocks, not a running planner. The package has none of
the following:

- A map or occupancy model.
- A risk or cost model for grid cells.
- Grid cell or node types.
- Point-cloud processing or polar histogram generation.
- Cost-matrix construction.
- A tree-building planner loop.
- Messaging, visualization, or a command-line program.

The search and simplification functions expect you to provide the nodes and
the costs.

## Running the tests

```
pip install -e ".[test]"
pytest
```