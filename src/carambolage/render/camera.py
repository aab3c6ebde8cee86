"""
Camera - View and projection matrices for drawing cars.

Provides:
- Look-at view matrix
- OpenGL-style perspective projection
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class CameraConfig:
    """Camera placement and lens settings.

    Defaults look straight down at the origin from 50 m, with +Y up on
    screen, which suits a top-down arena.
    """
    eye: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 50.0]))
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    up: np.ndarray = field(default_factory=lambda: np.array([0.0, 1.0, 0.0]))

    fov_y_deg: float = 45.0
    aspect: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 1000.0

    def __post_init__(self):
        """Validate and normalize configuration."""
        self.eye = np.asarray(self.eye, dtype=float)
        self.target = np.asarray(self.target, dtype=float)
        self.up = np.asarray(self.up, dtype=float)
        if not 0.0 < self.near < self.far:
            raise ValueError(
                f"Clip planes must satisfy 0 < near < far, got {self.near}, {self.far}"
            )
        if self.aspect <= 0.0:
            raise ValueError(f"Aspect ratio must be positive, got {self.aspect}")


class Camera:
    """Pinhole camera producing view and projection matrices."""

    def __init__(self, config: CameraConfig | None = None):
        """Initialize camera.

        Args:
            config: Camera configuration. Uses a top-down view if None.
        """
        self.config = config or CameraConfig()

    def follow(self, target: np.ndarray, height: float = 50.0) -> None:
        """Move the camera above a target point, looking down at it.

        Args:
            target: Point to look at [x, y, z]
            height: Distance above the target along +Z
        """
        target = np.asarray(target, dtype=float)
        self.config.target = target.copy()
        self.config.eye = target + np.array([0.0, 0.0, height])

    def view_matrix(self) -> np.ndarray:
        """Build the look-at view matrix.

        Returns:
            4x4 matrix transforming world to camera space
        """
        eye = self.config.eye
        forward = self.config.target - eye
        forward = forward / np.linalg.norm(forward)
        side = np.cross(forward, self.config.up)
        side = side / np.linalg.norm(side)
        up = np.cross(side, forward)

        view = np.eye(4)
        view[0, :3] = side
        view[1, :3] = up
        view[2, :3] = -forward
        view[:3, 3] = -view[:3, :3] @ eye
        return view

    def projection_matrix(self) -> np.ndarray:
        """Build the perspective projection matrix.

        Returns:
            4x4 matrix transforming camera space to clip space
        """
        near, far = self.config.near, self.config.far
        f = 1.0 / np.tan(np.radians(self.config.fov_y_deg) / 2.0)

        projection = np.zeros((4, 4))
        projection[0, 0] = f / self.config.aspect
        projection[1, 1] = f
        projection[2, 2] = (far + near) / (near - far)
        projection[2, 3] = 2.0 * far * near / (near - far)
        projection[3, 2] = -1.0
        return projection

    def get_state(self) -> dict:
        """Get camera state for telemetry."""
        return {
            "eye": self.config.eye.tolist(),
            "target": self.config.target.tolist(),
            "fov_y_deg": self.config.fov_y_deg,
        }
