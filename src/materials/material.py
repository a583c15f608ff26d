# materials/material.py
from typing import Tuple
from core.color import Color, WHITE
from core.config import AMBIENT_FACTOR, SHININESS

SPECULAR_COLOR = WHITE

class Material:
    """
    Optical properties of a shape for Phong shading.

    The ambient, diffuse and specular colors are all derived from a single
    base color. The Phong weights scale the three local terms, while
    k_r and k_t weight the recursively traced reflection and transmission.
    Materials are never modified after construction; shapes that are
    translated or rotated share the same instance.
    """
    def __init__(self, color: Color, phong: Tuple[float, float, float] = (1.0, 1.0, 1.0),
                 k_r: float = 0.0, k_t: float = 0.0, refraction_index: float = 1.0):
        if not 0.0 <= k_r <= 1.0:
            raise ValueError(f"Reflection weight must be within [0, 1], got {k_r}")
        if not 0.0 <= k_t <= 1.0:
            raise ValueError(f"Transmission weight must be within [0, 1], got {k_t}")
        if refraction_index <= 0:
            raise ValueError(f"Refraction index must be positive, got {refraction_index}")

        self._ambient = color * AMBIENT_FACTOR
        self._diffuse = color
        self._specular = SPECULAR_COLOR
        self._k_a, self._k_d, self._k_s = phong
        self._k_r = k_r
        self._k_t = k_t
        self._refraction_index = refraction_index

    @property
    def ambient(self) -> Color:
        return self._ambient

    @property
    def diffuse(self) -> Color:
        return self._diffuse

    @property
    def specular(self) -> Color:
        return self._specular

    @property
    def k_a(self) -> float:
        return self._k_a

    @property
    def k_d(self) -> float:
        return self._k_d

    @property
    def k_s(self) -> float:
        return self._k_s

    @property
    def k_r(self) -> float:
        return self._k_r

    @property
    def k_t(self) -> float:
        return self._k_t

    @property
    def reflection(self) -> float:
        return self._k_r

    @property
    def transmission(self) -> float:
        return self._k_t

    @property
    def refraction_index(self) -> float:
        return self._refraction_index

    @property
    def shininess(self) -> float:
        return SHININESS

    def __repr__(self) -> str:
        return (f"Material({self._diffuse}, phong=({self._k_a}, {self._k_d}, {self._k_s}), "
                f"k_r={self._k_r}, k_t={self._k_t}, refraction_index={self._refraction_index})")
