"""Pytest configuration for ray tracer tests.

Shared fixtures build the small scenes most test modules need: a matte
material, a unit floor factory and a single-sphere world lit by one light.
"""

import pytest

from core.color import Color
from core.vector import Vector3
from geometry.background import Background
from geometry.floor import Floor
from geometry.light import Light
from geometry.sphere import Sphere
from geometry.world import World
from materials.material import Material


BASE_COLOR = Color(200, 100, 50)


@pytest.fixture
def matte_material():
    """Fully diffuse material, neither reflective nor transparent."""
    return Material(BASE_COLOR, (1.0, 1.0, 0.0))


@pytest.fixture
def make_floor():
    """Factory for an axis aligned square floor facing -Z at the given depth."""

    def _make(z, material, half_size=1.0, checker_material=None, subdivisions=8):
        return Floor(
            Vector3(-half_size, -half_size, z),
            Vector3(-half_size, half_size, z),
            Vector3(half_size, half_size, z),
            Vector3(half_size, -half_size, z),
            material,
            checker_material,
            subdivisions,
        )

    return _make


@pytest.fixture
def sphere_world(matte_material):
    """One matte sphere at (0, 0, 1) with radius 0.5, one white light."""
    world = World(Background(Color(0, 0, 0)))
    world.add(Sphere(Vector3(0, 0, 1), 0.5, matte_material))
    world.add_light(Light(Vector3(2, 3, -4), Color(255, 255, 255)))
    return world
