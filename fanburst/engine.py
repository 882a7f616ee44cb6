"""Window loop that spawns bursts of particles where the mouse is clicked."""

from __future__ import annotations

import argparse
import random

import pygame

from fanburst.particle import Particle, rand_int

DEFAULT_SIZE = (1920, 1080)
PARTICLES_PER_CLICK = 5
MIN_POINTS = 25
MAX_POINTS = 50
BACKGROUND = (0, 0, 0)
TITLE = "Particles"


class Engine:
    """Owns the live particles and drives input, update and drawing."""

    def __init__(
        self,
        size: tuple[int, int] = DEFAULT_SIZE,
        rng: random.Random | None = None,
    ) -> None:
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"window size must be positive, got {width}x{height}")
        self.size = (int(width), int(height))
        self.rng = rng
        self.particles: list[Particle] = []

    def spawn(self, position: tuple[int, int]) -> list[Particle]:
        """Add a burst of particles centred on a pixel position and return them."""
        burst = [
            Particle(
                self.size,
                rand_int(MIN_POINTS, MAX_POINTS, self.rng),
                position,
                self.rng,
            )
            for _ in range(PARTICLES_PER_CLICK)
        ]
        self.particles.extend(burst)
        return burst

    def update(self, dt: float) -> None:
        """Drop expired particles and advance the rest by ``dt`` seconds."""
        survivors = [particle for particle in self.particles if particle.alive]
        for particle in survivors:
            particle.update(dt)
        self.particles = survivors

    def draw(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` and draw every particle as a filled triangle fan."""
        surface.fill(BACKGROUND)
        for particle in self.particles:
            center, *rim = particle.pixel_points()
            for a, b in zip(rim, rim[1:]):
                pygame.draw.polygon(surface, particle.color2, (center, a, b))

    def run(self) -> None:
        """Open a window and run until it is closed or Escape is pressed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                dt = clock.tick() / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.spawn(event.pos)
                if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                    running = False
                if not running:
                    break
                self.update(dt)
                self.draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Click to release bursts of particles.")
    parser.add_argument("--width", type=int, default=DEFAULT_SIZE[0])
    parser.add_argument("--height", type=int, default=DEFAULT_SIZE[1])
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    Engine((args.width, args.height), rng).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())