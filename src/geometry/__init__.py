# geometry/__init__.py
from geometry.hittable import EPSILON, Intersect, Shape
from geometry.sphere import Sphere
from geometry.floor import Floor
from geometry.background import Background
from geometry.light import Light
from geometry.world import World, select

__all__ = [
    "EPSILON",
    "Intersect",
    "Shape",
    "Sphere",
    "Floor",
    "Background",
    "Light",
    "World",
    "select",
]
