# core/color.py
from typing import Tuple, Union

def _clamp(value) -> int:
    return int(min(255, max(0, value)))

class Color:
    """
    An 8-bit RGB color with saturating arithmetic.

    Every channel stays in [0, 255]: addition and scaling clamp instead of
    wrapping, and multiplication treats both operands as fractions of full
    intensity, so (255, 255, 255) is the identity.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r, g, b):
        object.__setattr__(self, "r", _clamp(r))
        object.__setattr__(self, "g", _clamp(g))
        object.__setattr__(self, "b", _clamp(b))

    def __setattr__(self, name, value):
        raise AttributeError("Color is immutable")

    @classmethod
    def from_tuple(cls, rgb: Tuple[int, int, int]) -> "Color":
        return cls(rgb[0], rgb[1], rgb[2])

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union["Color", float, int]) -> "Color":
        if isinstance(other, Color):
            return Color(
                self.r * other.r // 255,
                self.g * other.g // 255,
                self.b * other.b // 255
            )
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
