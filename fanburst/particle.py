"""Star-shaped particles that spin, shrink and fall under gravity."""

from __future__ import annotations

import math
import random

from fanburst.matrices import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix

G = 1000.0
TTL = 5.0
SCALE = 0.999
WHITE = (255, 255, 255)

Color = tuple[int, int, int]
Point = tuple[float, float]


def rand_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a random integer in the inclusive range ``[low, high]``."""
    return (rng or random).randint(low, high)


def random_color(rng: random.Random | None = None) -> Color:
    """Return a random opaque RGB colour."""
    return (rand_int(0, 255, rng), rand_int(0, 255, rng), rand_int(0, 255, rng))


def almost_equal(a: float, b: float, eps: float = 0.0001) -> bool:
    return abs(a - b) < eps


def map_pixel_to_coords(pixel: tuple[int, int], target_size: tuple[int, int]) -> Point:
    """Map a pixel to the Cartesian plane centred on the target, y pointing up."""
    width, height = target_size
    return (pixel[0] - width / 2, height / 2 - pixel[1])


def map_coords_to_pixel(point: Point, target_size: tuple[int, int]) -> tuple[int, int]:
    """Map a Cartesian point back to integer pixel coordinates."""
    width, height = target_size
    return (int(point[0] + width / 2), int(height / 2 - point[1]))


class Particle:
    """A polygon of random radii around a centre that moves under gravity."""

    def __init__(
        self,
        target_size: tuple[int, int],
        num_points: int,
        click_position: tuple[int, int],
        rng: random.Random | None = None,
    ) -> None:
        if num_points < 1:
            raise ValueError(f"a particle needs at least one point, got {num_points}")
        self.target_size = (int(target_size[0]), int(target_size[1]))
        self.ttl = TTL
        self.num_points = num_points
        self.radians_per_sec = rand_int(0, 1, rng) * math.pi
        self.vx = float(rand_int(100, 500, rng))
        self.vy = float(rand_int(100, 500, rng))
        self.color1: Color = WHITE
        self.color2: Color = random_color(rng)
        self.center: Point = map_pixel_to_coords(click_position, self.target_size)

        theta = rand_int(0, 1, rng) * math.pi / 2
        d_theta = 2 * math.pi / (num_points - 1) if num_points > 1 else 0.0
        cx, cy = self.center
        self.points = Matrix(2, num_points)
        for i in range(num_points):
            r = rand_int(20, 80, rng)
            self.points[0, i] = cx + r * math.cos(theta)
            self.points[1, i] = cy + r * math.sin(theta)
            theta += d_theta

    @property
    def alive(self) -> bool:
        return self.ttl > 0.0

    def update(self, dt: float) -> None:
        """Advance the particle by ``dt`` seconds."""
        self.ttl -= dt
        self.rotate(dt * self.radians_per_sec)
        self.scale(SCALE)
        dx = self.vx * dt
        self.vy -= G * dt
        dy = self.vy * dt
        self.translate(dx, dy)

    def _about_center(self, transform: Matrix) -> None:
        cx, cy = self.center
        self.translate(-cx, -cy)
        self.points = transform * self.points
        self.translate(cx, cy)

    def rotate(self, theta: float) -> None:
        """Rotate counter-clockwise by ``theta`` radians about the centre."""
        self._about_center(RotationMatrix(theta))

    def scale(self, factor: float) -> None:
        """Scale the shape by ``factor`` about the centre."""
        self._about_center(ScalingMatrix(factor))

    def translate(self, x_shift: float, y_shift: float) -> None:
        """Shift the shape and its centre by ``(x_shift, y_shift)``."""
        self.points = TranslationMatrix(x_shift, y_shift, self.num_points) + self.points
        self.center = (self.center[0] + x_shift, self.center[1] + y_shift)

    def pixel_points(self) -> list[tuple[int, int]]:
        """Triangle-fan vertices in pixel coordinates, centre first."""
        vertices = [map_coords_to_pixel(self.center, self.target_size)]
        vertices.extend(
            map_coords_to_pixel((self.points[0, j], self.points[1, j]), self.target_size)
            for j in range(self.num_points)
        )
        return vertices