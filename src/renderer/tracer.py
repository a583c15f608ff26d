# renderer/tracer.py
"""
Recursive illumination: Phong shading at the nearest hit, hard shadows
attenuated by transparent occluders, mirror reflection and refraction.

Every function is a pure function of the ray and a read-only scene, so
pixels can be traced concurrently without locking.
"""
import math
from typing import Optional, Sequence
from core.color import BLACK, WHITE, Color
from core.config import DEFAULT_CONFIG, TracerConfig
from core.ray import Ray
from core.utils import reflect
from core.vector import Vector3
from geometry.background import Background
from geometry.hittable import Intersect, Shape
from geometry.light import Light
from geometry.world import World, select

class MissingExitPointError(RuntimeError):
    """
    Raised when a ray travelling through a transmissive shape never leaves
    it again, which means the shape is not closed or its material is
    misconfigured.
    """

def transmit(direction: Vector3, normal: Vector3, refraction_index: float,
             air_refraction_index: float = 1.0) -> Vector3:
    """
    Direction of a ray refracted through a surface by Snell's law.

    Whether the ray is entering or leaving the medium is decided by which
    side of the surface it arrives from. When the refraction has no
    solution (total internal reflection) the mirror reflection is returned.
    """
    cos_i = -direction.dot(normal)
    if cos_i > 0:
        n = normal
        ratio = air_refraction_index / refraction_index
    else:
        n = -normal
        ratio = refraction_index / air_refraction_index
        cos_i = -cos_i

    discriminant = 1.0 + ratio * ratio * (cos_i * cos_i - 1.0)
    if discriminant < 0:
        return reflect(direction, normal)
    return direction * ratio + n * (ratio * cos_i - math.sqrt(discriminant))

def shadow_color(point: Vector3, origin_shape: Optional[int], shapes: Sequence[Shape],
                 light: Light, shadow_depth: int, config: TracerConfig = DEFAULT_CONFIG) -> Color:
    """
    Color of the light that reaches `point` from `light`.

    Opaque occluders block the light entirely. Transparent ones tint it
    towards their diffuse color and pass on k_t of it, following the ray
    through the occluder for up to config.max_shadow_depth occluders.
    A shadow ray that is totally reflected where it meets an occluder
    carries no light.
    """
    to_light = light.position - point
    ray = Ray(point, to_light)
    blocking = select(ray, shapes, origin_shape)
    if blocking is None or blocking.distance >= to_light.length():
        return light.color

    material = blocking.material
    if material.k_t == 0:
        return BLACK

    attenuation = WHITE - (WHITE - material.diffuse) * material.k_d
    if shadow_depth >= config.max_shadow_depth:
        return attenuation * material.k_t

    refracted = transmit(ray.direction, blocking.normal,
                         material.refraction_index, config.air_refraction_index)
    # Totally reflected at entry: nothing passes into the occluder
    if refracted.dot(blocking.normal) * ray.direction.dot(blocking.normal) <= 0:
        return BLACK

    inside = Ray(blocking.point, refracted)
    exit_point = shapes[blocking.shape].intersect(inside)
    if exit_point is None:
        raise MissingExitPointError(
            f"Shadow ray entered {shapes[blocking.shape]!r} at {blocking.point} "
            f"but never left it"
        )

    through = shadow_color(exit_point.point, blocking.shape, shapes, light,
                           shadow_depth + 1, config)
    return attenuation * through * material.k_t

def phong(ray: Ray, intersect: Intersect, shapes: Sequence[Shape], lights: Sequence[Light],
          config: TracerConfig = DEFAULT_CONFIG) -> Color:
    """
    Local Phong color at an intersection: ambient plus the diffuse and
    specular contribution of every light that is not fully shadowed.
    """
    material = intersect.material
    n = intersect.normal
    color = material.ambient * config.ambient_factor * material.k_a

    for light in lights:
        s = (light.position - intersect.point).normalize()
        # Mirror image of s through the surface; it points into the surface,
        # so it lines up with the incoming ray direction rather than the
        # direction back to the viewer.
        r = (s - n * (2.0 * s.dot(n) / n.length_squared())).normalize()

        light_color = shadow_color(intersect.point, intersect.shape, shapes, light, 0, config)
        if light_color == BLACK:
            continue

        s_dot_n = s.dot(n)
        if s_dot_n > 0:
            color = color + material.diffuse * light_color * s_dot_n * material.k_d

        r_dot_v = r.dot(ray.direction)
        if r_dot_v > 0:
            color = color + (material.specular * light_color
                             * r_dot_v ** config.shininess * material.k_s)

    return color

def illuminate(ray: Ray, shapes: Sequence[Shape], lights: Sequence[Light],
               background: Background, excluded: Optional[int], depth: int,
               config: TracerConfig = DEFAULT_CONFIG) -> Color:
    """
    Fires the ray into the scene and returns the color it observes.

    `excluded` is the handle of the shape the ray starts on, if any.
    Reflected and transmitted rays are traced recursively with depth + 1
    until config.max_depth, past which those terms are left out.
    """
    intersect = select(ray, shapes, excluded)
    if intersect is None:
        return background.color

    color = phong(ray, intersect, shapes, lights, config)
    if depth >= config.max_depth:
        return color

    material = intersect.material
    if material.k_r > 0:
        reflected = Ray(intersect.point, reflect(ray.direction, intersect.normal))
        color = color + illuminate(reflected, shapes, lights, background,
                                   intersect.shape, depth + 1, config) * material.k_r

    if material.k_t > 0:
        transmitted = Ray(intersect.point, transmit(ray.direction, intersect.normal,
                                                    material.refraction_index,
                                                    config.air_refraction_index))
        color = color + illuminate(transmitted, shapes, lights, background,
                                   intersect.shape, depth + 1, config) * material.k_t

    return color

def trace(ray: Ray, world: World, config: TracerConfig = DEFAULT_CONFIG) -> Color:
    """
    Traces a primary ray through the world.
    """
    return illuminate(ray, world.shapes, world.lights, world.background, None, 0, config)
