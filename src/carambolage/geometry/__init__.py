"""
Geometry module - Homogeneous transform math used by cars and cameras.

This module contains:
- Translation and Euler rotation matrices
- Point and direction conversion to and from homogeneous coordinates
"""

from carambolage.geometry.transforms import (
    translation,
    euler_rotation,
    rotation_from_orientation,
    to_homogeneous,
    direction_from_homogeneous,
    point_from_homogeneous,
    rotate_direction,
    transform_point,
)

__all__ = [
    "translation",
    "euler_rotation",
    "rotation_from_orientation",
    "to_homogeneous",
    "direction_from_homogeneous",
    "point_from_homogeneous",
    "rotate_direction",
    "transform_point",
]
