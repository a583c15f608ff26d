# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

# Hits closer than this are treated as the ray's own starting surface
EPSILON = 1e-9

class Intersect:
    """
    Records details of a ray-shape intersection.
    """
    __slots__ = ("distance", "point", "normal", "material", "shape")

    def __init__(self, distance: float, point: Optional[Vector3] = None,
                 normal: Optional[Vector3] = None, material=None,
                 shape: Optional[int] = None):
        self.distance = distance  # Distance from the ray origin
        self.point = point        # Intersection point
        self.normal = normal      # Unit surface normal, pointing out of the shape
        self.material = material
        self.shape = shape        # Handle of the hit shape, set by select()

    def __repr__(self) -> str:
        return (f"Intersect(distance={self.distance}, point={self.point}, "
                f"normal={self.normal}, shape={self.shape})")

class Shape:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, ray: Ray) -> Optional[Intersect]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def translate(self, offset: Vector3) -> "Shape":
        raise NotImplementedError("translate() must be implemented by subclasses.")
