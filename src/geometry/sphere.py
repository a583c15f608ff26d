# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core import utils
from geometry.hittable import EPSILON, Intersect, Shape
from materials.material import Material

class Sphere(Shape):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material: Material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Intersect]:
        if ray.direction.length_squared() == 0:
            return None

        # |O + tD - C|^2 = r^2 with |D| = 1, so the quadratic term is 1
        oc = ray.origin - self.center
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        near = (-b - sqrt_disc) / 2.0
        far = (-b + sqrt_disc) / 2.0

        # Take the nearer surface unless it lies behind the ray
        if near > EPSILON:
            distance = near
        elif far > EPSILON:
            distance = far
        else:
            return None

        point = ray.extend(distance)
        normal = (point - self.center).normalize()
        return Intersect(distance, point, normal, self.material)

    def translate(self, offset: Vector3) -> "Sphere":
        return Sphere(self.center + offset, self.radius, self.material)

    def rotate_x(self, degrees: float) -> "Sphere":
        return Sphere(utils.rotate_x(self.center, degrees), self.radius, self.material)

    def rotate_y(self, degrees: float) -> "Sphere":
        return Sphere(utils.rotate_y(self.center, degrees), self.radius, self.material)

    def rotate_z(self, degrees: float) -> "Sphere":
        return Sphere(utils.rotate_z(self.center, degrees), self.radius, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center}, {self.radius})"
