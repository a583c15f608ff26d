# geometry/floor.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core import utils
from geometry.hittable import EPSILON, Intersect, Shape
from materials.material import Material

DEFAULT_SUBDIVISIONS = 8

# Slack for hits that land exactly on an edge of the quad
EDGE_TOLERANCE = 1e-9

class Floor(Shape):
    """
    A bounded rectangular plane defined by its four corners.

    The floor carries either one material or two, in which case the
    materials alternate in a checkerboard of subdivisions x subdivisions
    cells laid out along the bottom and left edges.
    """
    def __init__(self, bottom_left: Vector3, top_left: Vector3,
                 top_right: Vector3, bottom_right: Vector3,
                 material: Material, checker_material: Optional[Material] = None,
                 subdivisions: int = DEFAULT_SUBDIVISIONS):
        if subdivisions <= 0:
            raise ValueError(f"Subdivisions must be positive, got {subdivisions}")

        self.bottom_left = bottom_left
        self.top_left = top_left
        self.top_right = top_right
        self.bottom_right = bottom_right
        self.material = material
        self.checker_material = checker_material
        self.subdivisions = subdivisions

        # Given 3 of the corners, calculate the normal and F
        a = bottom_left - top_left
        b = bottom_left - bottom_right
        normal = a.cross(b)
        if normal.length_squared() == 0:
            raise ValueError("Floor corners must not be collinear")
        self.normal = normal.normalize()
        self.f = -self.normal.dot(bottom_left)

        # Local axes along the bottom and left edges
        x_edge = bottom_right - bottom_left
        y_edge = top_left - bottom_left
        self.width = x_edge.length()
        self.height = y_edge.length()
        self._x_axis = x_edge.normalize()
        self._y_axis = y_edge.normalize()

    def intersect(self, ray: Ray) -> Optional[Intersect]:
        # t = -(N . O + F) / (N . D)
        denominator = self.normal.dot(ray.direction)
        if denominator == 0:
            return None

        distance = -(self.normal.dot(ray.origin) + self.f) / denominator
        if not distance > EPSILON:
            return None

        point = ray.extend(distance)
        x, y = self.local_coordinates(point)
        if not (-EDGE_TOLERANCE <= x <= self.width + EDGE_TOLERANCE and
                -EDGE_TOLERANCE <= y <= self.height + EDGE_TOLERANCE):
            return None

        return Intersect(distance, point, self.normal, self.material_at(x, y))

    def local_coordinates(self, point: Vector3) -> Tuple[float, float]:
        """
        Coordinates of a point on the plane along the bottom (x) and
        left (y) edges, measured from the bottom left corner.
        """
        offset = point - self.bottom_left
        return offset.dot(self._x_axis), offset.dot(self._y_axis)

    def material_at(self, x: float, y: float) -> Material:
        if self.checker_material is None:
            return self.material

        cell_x = int(x / (self.width / self.subdivisions)) % 2
        cell_y = int(y / (self.height / self.subdivisions)) % 2
        return self.material if cell_x == cell_y else self.checker_material

    def _transformed(self, transform) -> "Floor":
        return Floor(
            transform(self.bottom_left),
            transform(self.top_left),
            transform(self.top_right),
            transform(self.bottom_right),
            self.material,
            self.checker_material,
            self.subdivisions
        )

    def translate(self, offset: Vector3) -> "Floor":
        return self._transformed(lambda v: v + offset)

    def rotate_x(self, degrees: float) -> "Floor":
        return self._transformed(lambda v: utils.rotate_x(v, degrees))

    def rotate_y(self, degrees: float) -> "Floor":
        return self._transformed(lambda v: utils.rotate_y(v, degrees))

    def rotate_z(self, degrees: float) -> "Floor":
        return self._transformed(lambda v: utils.rotate_z(v, degrees))

    def __repr__(self) -> str:
        return (f"Floor({self.bottom_left}, {self.top_left}, "
                f"{self.top_right}, {self.bottom_right})")
