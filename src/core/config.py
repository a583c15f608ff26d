# core/config.py

# Default shading constants
AMBIENT_FACTOR = 0.3
SHININESS = 12.0
MAX_DEPTH = 5
MAX_SHADOW_DEPTH = 5
AIR_REFRACTION_INDEX = 1.0

class TracerConfig:
    """
    Shading constants for the illumination engine.

    One instance is threaded through every call of the tracer instead of
    reading module globals, so a render can be tuned (for instance a
    shallower recursion for previews) without touching shared state.
    """
    def __init__(self, ambient_factor: float = AMBIENT_FACTOR,
                 shininess: float = SHININESS,
                 max_depth: int = MAX_DEPTH,
                 max_shadow_depth: int = MAX_SHADOW_DEPTH,
                 air_refraction_index: float = AIR_REFRACTION_INDEX):
        if max_depth < 0 or max_shadow_depth < 0:
            raise ValueError("Recursion depths must be non-negative")
        if air_refraction_index <= 0:
            raise ValueError("Refraction index of air must be positive")
        self.ambient_factor = ambient_factor
        self.shininess = shininess
        self.max_depth = max_depth
        self.max_shadow_depth = max_shadow_depth
        self.air_refraction_index = air_refraction_index

    def __repr__(self) -> str:
        return (f"TracerConfig(ambient_factor={self.ambient_factor}, "
                f"shininess={self.shininess}, max_depth={self.max_depth}, "
                f"max_shadow_depth={self.max_shadow_depth}, "
                f"air_refraction_index={self.air_refraction_index})")


DEFAULT_CONFIG = TracerConfig()
