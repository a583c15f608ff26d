"""Unit tests for nearest-hit selection and the World container."""

import math

import pytest

from core.color import Color
from core.ray import Ray
from core.vector import Vector3
from geometry.background import Background
from geometry.light import Light
from geometry.sphere import Sphere
from geometry.world import World, select
from materials.material import Material

FORWARD = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))


@pytest.fixture
def two_floors(make_floor):
    """Floors at distance 1 and 2 along +Z."""
    near = make_floor(1.0, Material(Color(255, 0, 0)))
    far = make_floor(2.0, Material(Color(0, 255, 0)))
    return near, far


class TestSelect:
    """Tests for the scene selector."""

    def test_closest_is_selected(self, two_floors):
        """With no exclusion the nearest hit wins."""
        rec = select(FORWARD, list(two_floors))
        assert rec.distance == pytest.approx(1.0)
        assert rec.shape == 0

    def test_order_does_not_matter(self, two_floors):
        """The nearest hit wins whatever the shape order."""
        near, far = two_floors
        rec = select(FORWARD, [far, near])
        assert rec.distance == pytest.approx(1.0)
        assert rec.shape == 1

    def test_exclude_farther_shape(self, two_floors):
        """Excluding a shape that isn't closest changes nothing."""
        rec = select(FORWARD, list(two_floors), exclude=1)
        assert rec.distance == pytest.approx(1.0)

    def test_exclude_closest_shape(self, two_floors):
        """Excluding the closest shape selects the next one."""
        rec = select(FORWARD, list(two_floors), exclude=0)
        assert rec.distance == pytest.approx(2.0)
        assert rec.shape == 1

    def test_exclude_only_shape(self, two_floors):
        """Excluding the only shape leaves nothing to hit."""
        near, _ = two_floors
        assert select(FORWARD, [near], exclude=0) is None

    def test_nothing_hit(self, two_floors):
        """Rays that miss everything select nothing."""
        backward = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert select(backward, list(two_floors)) is None
        assert select(FORWARD, []) is None

    def test_identical_shapes_are_distinct(self, make_floor, matte_material):
        """Handles tell apart shapes with the same geometry."""
        twin = make_floor(1.0, matte_material)
        rec = select(FORWARD, [twin, make_floor(1.0, matte_material)], exclude=0)
        assert rec is not None
        assert rec.shape == 1


class TestWorld:
    """Tests for the World container."""

    def test_handles(self, matte_material):
        """add() returns consecutive handles."""
        world = World()
        assert world.add(Sphere(Vector3(0, 0, 3), 1.0, matte_material)) == 0
        assert world.add(Sphere(Vector3(0, 0, 6), 1.0, matte_material)) == 1
        assert len(world) == 2

    def test_select(self, matte_material):
        """World.select forwards to the selector with exclusion."""
        world = World()
        world.add(Sphere(Vector3(0, 0, 3), 1.0, matte_material))
        world.add(Sphere(Vector3(0, 0, 6), 1.0, matte_material))
        assert world.select(FORWARD).distance == pytest.approx(2.0)
        assert world.select(FORWARD, exclude=0).distance == pytest.approx(5.0)

    def test_background_is_not_a_shape(self):
        """The background cannot be added as an occluder."""
        world = World()
        with pytest.raises(ValueError):
            world.add(Background(Color(1, 2, 3)))

    def test_default_background_and_lights(self):
        """An empty world has a black background and no lights."""
        world = World()
        assert world.background.color == Color(0, 0, 0)
        world.add_light(Light(Vector3(0, 1, 0)))
        assert len(world.lights) == 1
        world.clear()
        assert world.lights == []


class TestBackground:
    """Tests for the background shape."""

    def test_hits_at_infinity(self):
        """The background is hit at an infinite distance with no geometry."""
        background = Background(Color(0, 175, 215))
        rec = background.intersect(FORWARD)
        assert math.isinf(rec.distance)
        assert rec.point is None
        assert rec.normal is None
        assert background.color == Color(0, 175, 215)
