# geometry/background.py
import math
from core.color import Color
from core.ray import Ray
from geometry.hittable import Intersect, Shape

class Background(Shape):
    """
    Flat color seen wherever a ray escapes the scene.

    It "hits" every ray at an infinite distance with no point, normal or
    material, so it is only ever used as the fallback when nothing else is
    hit and never takes part in selection or shadowing.
    """
    def __init__(self, color: Color):
        self.color = color

    def intersect(self, ray: Ray) -> Intersect:
        return Intersect(math.inf)

    def translate(self, offset) -> "Background":
        return self

    def __repr__(self) -> str:
        return f"Background({self.color})"
