# jellysim

A small 2D soft-body simulation. Each body is a grid of point masses held
together by damped springs. There are structural springs, shear springs and two
long corner-to-corner braces. The bodies fall under gravity and stop at the
floor. Nodes that enter another body's outline get pushed back and stopped.
Nodes of the same body that come within a few pixels of each other repel.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Running the demo

```
jellysim
```

This opens a 1280×720 window with six coloured 5×20 jelly blocks stacked in a
pyramid. Each body is drawn as its outline, and the floor is a grey line along
the bottom edge. Close the window to quit.

To stop on its own after a fixed number of frames:

```
jellysim --frames 300
```

`--frames` must be a positive integer. If the window cannot be opened, the
command prints `SDL INIT FAILED` and exits with status 1.

## Using the library

```python
from jellysim.body import Color, Softbody
from jellysim.world import World, default_world

world = World()
world.add(Softbody.grid(5, 20, 20, 50, 600, 0.7, 1.0, Color(255, 255, 100)))
world.add(Softbody.grid(5, 20, 20, 450, 600, 0.7, 1.0, Color(255, 100, 255)))

for _ in range(500):
    world.step()

for body in world.bodies:
    print(body.edge_points()[:3])
```

`default_world()` builds the same six-body scene that the demo shows.

Modules:

- `jellysim.vector`: `Vec2`, an immutable 2D vector. It supports `+`, `-`,
  scalar `*` and negation, and has `distance_to`, `magnitude`, `normalized`
  and `dot`. `normalized` returns `(1, 0)` for a vector shorter than
  `MIN_DIF`.
- `jellysim.body`: `Node`, `Spring`, `Color` and `Softbody`. It also has
  `build_nodes`, `build_springs` and `edge_indexes`, which lay out a
  rectangular grid body. A grid needs at least 2 rows and 2 columns, otherwise
  `ValueError` is raised. `Softbody.grid` builds a whole body.
  `Softbody.update_bounds` recomputes its bounding box.
  `Softbody.overlaps` tests two bounding boxes for overlap.
- `jellysim.physics`: the forces for one step and the simulation constants
  (screen size, gravity, floor, stiffness, damping, friction, repulsion).
  - `apply_spring_forces` applies the spring forces.
  - `integrate` handles gravity, friction and the floor, and leaves fixed
    nodes alone.
  - `point_inside` tests whether a point is inside a body's outline.
  - `softbody_collision` handles collisions between bodies.
  - `self_collision` handles collisions within one body.
- `jellysim.world`: `World` holds bodies and advances them one frame at a time
  with `step`. `default_world` builds the demo scene.
- `jellysim.app`: `draw` renders a world onto a pygame surface, and `main`
  runs the interactive window.

## What it does not do

The window only displays the simulation. You cannot drag or add bodies with the
mouse or keyboard. The command line sets no scene options other than
`--frames`. There is no way to save or load a scene. Nodes are drawn only as
body outlines. Springs and individual nodes are not shown.

## Tests

```
pip install .[test]
pytest
```