import random

import pygame
import pytest

from fanburst.engine import MAX_POINTS, MIN_POINTS, PARTICLES_PER_CLICK, Engine, main
from fanburst.particle import TTL, map_pixel_to_coords


def make_engine(seed=1, size=(200, 200)):
    return Engine(size, random.Random(seed))


def test_spawn_adds_a_burst_at_the_click():
    engine = make_engine()
    burst = engine.spawn((100, 100))
    assert len(burst) == PARTICLES_PER_CLICK
    assert engine.particles == burst
    expected = map_pixel_to_coords((100, 100), engine.size)
    for particle in burst:
        assert particle.center == expected
        assert MIN_POINTS <= particle.num_points <= MAX_POINTS
        assert particle.ttl == TTL


def test_spawn_accumulates():
    engine = make_engine()
    engine.spawn((10, 10))
    engine.spawn((50, 60))
    assert len(engine.particles) == 2 * PARTICLES_PER_CLICK


def test_update_advances_live_particles():
    engine = make_engine()
    engine.spawn((100, 100))
    engine.update(0.1)
    assert len(engine.particles) == PARTICLES_PER_CLICK
    for particle in engine.particles:
        assert particle.ttl == pytest.approx(TTL - 0.1)


def test_update_drops_expired_particles():
    engine = make_engine()
    engine.spawn((100, 100))
    engine.particles[0].ttl = 0.0
    engine.update(0.01)
    assert len(engine.particles) == PARTICLES_PER_CLICK - 1
    assert all(p.ttl > 0.0 for p in engine.particles)


def test_particle_expiring_during_update_is_removed_on_next_update():
    engine = make_engine()
    engine.spawn((100, 100))
    for particle in engine.particles:
        particle.ttl = 0.05
    engine.update(0.1)
    assert len(engine.particles) == PARTICLES_PER_CLICK
    engine.update(0.1)
    assert engine.particles == []


def test_draw_clears_surface_without_particles():
    engine = make_engine()
    surface = pygame.Surface(engine.size)
    surface.fill((10, 20, 30))
    engine.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((199, 199)))[:3] == (0, 0, 0)


def test_draw_paints_particle_colour():
    engine = make_engine(seed=7)
    engine.spawn((100, 100))
    surface = pygame.Surface(engine.size)
    engine.draw(surface)
    colours = {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(engine.size[0])
        for y in range(engine.size[1])
    }
    assert engine.particles[-1].color2 in colours


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Engine((0, 100))


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["--width", "wide"])