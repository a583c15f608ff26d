# materials/presets.py
from core.color import Color
from materials.material import Material

class ColorPresets:
    """Common color presets for materials."""

    RED = Color(255, 0, 0)
    YELLOW = Color(255, 255, 0)
    GREY = Color(179, 179, 179)
    WHITE = Color(255, 255, 255)
    SKY = Color(0, 175, 215)

class MaterialPresets:
    """Predefined materials for scene authoring."""

    @staticmethod
    def matte(color: Color) -> Material:
        """Fully diffuse, neither reflective nor transparent."""
        return Material(color, (1.0, 1.0, 1.0))

    @staticmethod
    def mirror(color: Color = ColorPresets.GREY, k_r: float = 0.75) -> Material:
        return Material(color, (0.15, 0.25, 1.0), k_r=k_r)

    @staticmethod
    def glass(color: Color = ColorPresets.WHITE, refraction_index: float = 1.52) -> Material:
        return Material(color, (0.075, 0.075, 0.2), k_r=0.01, k_t=0.85,
                        refraction_index=refraction_index)

    @staticmethod
    def water() -> Material:
        return MaterialPresets.glass(refraction_index=1.33)
