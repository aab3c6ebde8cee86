"""
Transforms - 4x4 homogeneous transform helpers.

Provides:
- Translation and Euler rotation matrices
- Conversion to and from homogeneous coordinates
- Rotation of directions (w = 0) as opposed to points (w = 1)

All matrices are column-vector convention: ``transformed = matrix @ vector``.
"""

import numpy as np

from carambolage.errors import HomogeneousCoordinateError


def translation(offset: np.ndarray) -> np.ndarray:
    """Build a translation transform.

    Args:
        offset: Translation vector [x, y, z]

    Returns:
        4x4 transform matrix
    """
    matrix = np.eye(4)
    matrix[:3, 3] = np.asarray(offset, dtype=float)[:3]
    return matrix


def rotation_x(angle: float) -> np.ndarray:
    """Rotation about the X axis (roll)."""
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, cos_a, -sin_a, 0.0],
        [0.0, sin_a, cos_a, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation about the Y axis (pitch)."""
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array([
        [cos_a, 0.0, sin_a, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-sin_a, 0.0, cos_a, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(angle: float) -> np.ndarray:
    """Rotation about the Z axis (yaw)."""
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array([
        [cos_a, -sin_a, 0.0, 0.0],
        [sin_a, cos_a, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def euler_rotation(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Build a rotation transform from Euler angles.

    The rotations are applied roll first, then pitch, then yaw.

    Args:
        roll: Rotation about X in radians
        pitch: Rotation about Y in radians
        yaw: Rotation about Z in radians

    Returns:
        4x4 rotation matrix
    """
    return rotation_z(yaw) @ rotation_y(pitch) @ rotation_x(roll)


def rotation_from_orientation(orientation: np.ndarray) -> np.ndarray:
    """Build a rotation transform from an [roll, pitch, yaw] vector."""
    roll, pitch, yaw = (float(a) for a in orientation[:3])
    return euler_rotation(roll, pitch, yaw)


def to_homogeneous(vector: np.ndarray, w: float = 0.0) -> np.ndarray:
    """Append a homogeneous coordinate to a 3-vector.

    Args:
        vector: Vector [x, y, z]
        w: 0 for directions, 1 for points

    Returns:
        4-vector [x, y, z, w]
    """
    return np.append(np.asarray(vector, dtype=float)[:3], w)


def direction_from_homogeneous(vector: np.ndarray) -> np.ndarray:
    """Project a homogeneous direction back to 3D.

    Args:
        vector: 4-vector whose last component must be zero

    Returns:
        3-vector

    Raises:
        HomogeneousCoordinateError: If the last component is not zero
    """
    if vector[3] != 0.0:
        raise HomogeneousCoordinateError(
            f"Direction must have w == 0, got w = {vector[3]}"
        )
    return np.array(vector[:3], dtype=float)


def point_from_homogeneous(vector: np.ndarray) -> np.ndarray:
    """Project a homogeneous point back to 3D by dividing through by w.

    Raises:
        HomogeneousCoordinateError: If w is zero
    """
    if vector[3] == 0.0:
        raise HomogeneousCoordinateError("Point must have w != 0")
    return np.array(vector[:3], dtype=float) / vector[3]


def rotate_direction(rotation: np.ndarray, direction: np.ndarray) -> np.ndarray:
    """Rotate a direction with a 4x4 transform.

    The direction is embedded with w = 0, rotated, and w is forced back to
    exactly zero before projecting to 3D, so translation and rounding in
    the bottom row never leak into the result.

    Args:
        rotation: 4x4 transform
        direction: Direction vector [x, y, z]

    Returns:
        Rotated direction [x, y, z]
    """
    rotated = rotation @ to_homogeneous(direction, 0.0)
    rotated[3] = 0.0
    return direction_from_homogeneous(rotated)


def transform_point(transform: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Apply a 4x4 transform to a point (w = 1)."""
    return point_from_homogeneous(transform @ to_homogeneous(point, 1.0))
