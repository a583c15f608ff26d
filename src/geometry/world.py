# geometry/world.py
from typing import List, Optional, Sequence
from core.color import Color
from core.ray import Ray
from geometry.background import Background
from geometry.hittable import Intersect, Shape
from geometry.light import Light

def select(ray: Ray, shapes: Sequence[Shape], exclude: Optional[int] = None) -> Optional[Intersect]:
    """
    Of all shapes that intersect with this ray, select the closest one that's
    in front of the starting point.

    Shapes are identified by their index in `shapes`; the shape at index
    `exclude` (usually the surface a secondary ray starts from) is skipped.
    The returned intersect carries that index in its `shape` field.
    """
    closest = None
    for handle, shape in enumerate(shapes):
        if handle == exclude:
            continue
        rec = shape.intersect(ray)
        if rec is None or not rec.distance >= 0:
            continue
        if closest is None or rec.distance < closest.distance:
            rec.shape = handle
            closest = rec
    return closest

class World:
    """
    The scene: shapes, point lights and the background behind them.

    Shapes are addressed by the handle returned from add(), which is
    their position in `shapes`.
    """
    def __init__(self, background: Optional[Background] = None):
        self.shapes: List[Shape] = []
        self.lights: List[Light] = []
        self.background = background if background is not None else Background(Color(0, 0, 0))

    def add(self, shape: Shape) -> int:
        if isinstance(shape, Background):
            raise ValueError("The background is set on the world, not added as a shape")
        self.shapes.append(shape)
        return len(self.shapes) - 1

    def add_light(self, light: Light):
        self.lights.append(light)

    def clear(self):
        self.shapes.clear()
        self.lights.clear()

    def select(self, ray: Ray, exclude: Optional[int] = None) -> Optional[Intersect]:
        return select(ray, self.shapes, exclude)

    def __len__(self) -> int:
        return len(self.shapes)
