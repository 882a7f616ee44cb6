# fanburst

An interactive particle toy. Click anywhere in the window and five particles
burst from the pointer. Each one is a filled triangle fan in a random colour,
whose outline is a ring of 25 to 50 points at random distances from its
centre. Every particle may spin, shrinks slowly, drifts sideways and falls
under gravity. After five seconds it disappears.

All the motion comes from plain 2D matrix transforms: rotation, scaling and
translation.

## Install

```
pip install .
```

pygame is the only runtime dependency.

## Run

```
fanburst
```

Left-click to spawn particles. Press Escape or close the window to quit.

Options:

- `--width` and `--height` set the window size in pixels (default 1920 x 1080).
- `--seed` seeds the random generator so that bursts repeat from run to run.

## Use as a library

The matrix types live in `fanburst.matrices`:

```python
import math
from fanburst.matrices import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix

points = Matrix(2, 3)
points[0, 0] = 1.0                      # (x, y) pairs are stored as columns
rotated = RotationMatrix(math.pi / 2) * points
shifted = TranslationMatrix(10, 5, 3) + rotated
halved = ScalingMatrix(0.5) * shifted
print(halved)
```

A `Matrix` is created filled with zeros. It uses `(row, col)` indexing, has
`rows` and `cols` properties and a `copy()` method, and compares equal to
another matrix of the same size with the same values. An index outside the
matrix raises `IndexError`. Adding or multiplying matrices whose sizes do not
match raises `ValueError`.

Particles live in `fanburst.particle` and can be driven without a window.
Pass in the size of the drawing target and, optionally, a random generator:

```python
import random
from fanburst.particle import Particle

p = Particle((1920, 1080), 30, (960, 540), random.Random(1))
p.update(1 / 60)
print(p.ttl, p.alive, p.pixel_points()[:3])
```

A particle keeps its centre and points in a Cartesian plane whose origin is
the middle of the target, with y pointing up; `pixel_points()` maps them back
to pixels, centre first. `rotate`, `scale` and `translate` move the shape
directly. The helpers `map_pixel_to_coords` and `map_coords_to_pixel` do the
same mapping for single points.

`fanburst.engine.Engine(size, rng)` manages a set of particles: `spawn(position)`
adds a burst of five at a pixel position, `update(dt)` drops expired particles
and advances the rest, `draw(surface)` clears a pygame surface and paints them,
and `run()` opens the interactive window.

## Tests

```
pip install .[test]
pytest
```