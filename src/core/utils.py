# core/utils.py
import math
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def rotate_x(v: Vector3, degrees: float) -> Vector3:
    theta = math.radians(degrees)
    return Vector3(
        v.x,
        v.y * math.cos(theta) - v.z * math.sin(theta),
        v.y * math.sin(theta) + v.z * math.cos(theta)
    )

def rotate_y(v: Vector3, degrees: float) -> Vector3:
    theta = math.radians(degrees)
    return Vector3(
        v.x * math.cos(theta) + v.z * math.sin(theta),
        v.y,
        -v.x * math.sin(theta) + v.z * math.cos(theta)
    )

def rotate_z(v: Vector3, degrees: float) -> Vector3:
    theta = math.radians(degrees)
    return Vector3(
        v.x * math.cos(theta) - v.y * math.sin(theta),
        v.x * math.sin(theta) + v.y * math.cos(theta),
        v.z
    )
