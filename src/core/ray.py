# core/ray.py
from core.vector import Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.

    The direction is normalized when the ray is constructed and is only
    exposed through a read-only property, so its magnitude is always 1.0
    (a zero direction stays zero and never produces a valid hit).
    """
    __slots__ = ("origin", "_direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        self.origin = origin
        self._direction = direction.normalize()

    @property
    def direction(self) -> Vector3:
        return self._direction

    def extend(self, distance: float) -> Vector3:
        """
        Returns the point along the ray at the given distance from the origin.
        """
        return self.origin + self._direction * distance

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self._direction})"
