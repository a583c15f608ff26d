"""Unit tests for Material and the material presets."""

import pytest

from core.color import WHITE, Color
from core.config import SHININESS
from materials.material import Material
from materials.presets import ColorPresets, MaterialPresets


class TestMaterial:
    """Tests for derived colors and coefficients."""

    def test_derived_colors(self):
        """Ambient is the base color dimmed, specular is white."""
        material = Material(Color(255, 0, 100))
        assert material.diffuse == Color(255, 0, 100)
        assert material.ambient == Color(76, 0, 30)
        assert material.specular == WHITE

    def test_coefficients(self):
        """Phong weights, reflection and transmission are exposed read-only."""
        material = Material(Color(1, 2, 3), (0.1, 0.2, 0.3), k_r=0.4, k_t=0.5, refraction_index=1.5)
        assert (material.k_a, material.k_d, material.k_s) == (0.1, 0.2, 0.3)
        assert material.reflection == material.k_r == 0.4
        assert material.transmission == material.k_t == 0.5
        assert material.refraction_index == 1.5
        assert material.shininess == SHININESS
        with pytest.raises(AttributeError):
            material.k_r = 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"k_r": -0.1},
            {"k_r": 1.5},
            {"k_t": 2.0},
            {"refraction_index": 0.0},
        ],
    )
    def test_invalid_coefficients(self, kwargs):
        """Out of range weights and indices are rejected."""
        with pytest.raises(ValueError):
            Material(Color(1, 2, 3), **kwargs)


class TestMaterialPresets:
    """Tests for the preset materials."""

    def test_matte(self):
        """Matte materials have no global terms."""
        material = MaterialPresets.matte(ColorPresets.RED)
        assert material.k_r == 0.0
        assert material.k_t == 0.0

    def test_glass(self):
        """Glass is mostly transmissive and denser than air."""
        material = MaterialPresets.glass()
        assert material.k_t > 0.5
        assert material.refraction_index > 1.0
        assert MaterialPresets.water().refraction_index == pytest.approx(1.33)

    def test_mirror(self):
        """Mirrors reflect and do not transmit."""
        material = MaterialPresets.mirror()
        assert material.k_r > 0.0
        assert material.k_t == 0.0
