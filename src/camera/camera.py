# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera. With zero yaw and pitch it looks down +Z with +Y up
    and +X to the right; the default 90 degree field of view places a unit
    viewport half a unit in front of the camera.
    """
    def __init__(self, position: Vector3 = Vector3(0, 0, 0), yaw: float = 0.0,
                 pitch: float = 0.0, fov: float = math.pi / 2, aspect_ratio: float = 1.0):
        if not 0 < fov < math.pi:
            raise ValueError(f"Field of view must be within (0, pi), got {fov}")
        self.position = position
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        global_up = Vector3(0, 1, 0)

        # Compute forward vector
        self.forward = Vector3(
            math.sin(self.yaw) * math.cos(self.pitch),
            math.sin(self.pitch),
            math.cos(self.yaw) * math.cos(self.pitch)
        ).normalize()

        # Compute right and up vectors
        self.right = global_up.cross(self.forward).normalize()
        self.up = self.forward.cross(self.right).normalize()

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(self.fov / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.horizontal = self.right * viewport_width
        self.vertical = self.up * viewport_height

        self.lower_left_corner = (self.position +
                                  self.forward -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Ray through the viewport point at fractions (u, v) of its width and
        height, measured from the lower left corner.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.position)
        return Ray(self.position, direction)
