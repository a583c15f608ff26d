# geometry/light.py
from core.color import Color, WHITE
from core.vector import Vector3

class Light:
    """
    A point light placed within the scene.
    """
    __slots__ = ("position", "color")

    def __init__(self, position: Vector3, color: Color = WHITE):
        self.position = position
        self.color = color

    def __repr__(self) -> str:
        return f"Light({self.position}, {self.color})"
