"""
Kinematic steering car - Player-driven car that turns and accelerates.

The car has no persisted velocity. Each tick the throttle sets how far the
car moves along its current forward direction, and the steering input,
scaled by throttle, sets how far it turns.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, Optional

import numpy as np

from carambolage.car.base import Pose, VehicleModel, resolve_mass
from carambolage.controls import ControlSample
from carambolage.geometry.transforms import (
    euler_rotation,
    rotate_direction,
    rotation_from_orientation,
    translation,
)
from carambolage.render.model import Model, NullModel
from carambolage.simulation.physics import PhysicsEngine

# Forward in the car's local frame.
FORWARD = np.array([0.0, 1.0, 0.0])


@dataclass
class KinematicConfig:
    """Configuration for the kinematic steering car."""
    # Yaw rate gain (rad/s per unit of throttle-scaled steer)
    turn_rate_gain: float = 3.5
    # Speed gain (m/s per unit of throttle)
    speed_gain: float = 10.0

    # Mass policy: anything not above min_mass_kg falls back to default_mass_kg
    default_mass_kg: float = 1.0
    min_mass_kg: float = 1.0

    # Axle distances from the center of mass (m). Not used by the update
    # yet; reserved for a bicycle model rotating about the rear axle.
    dist_front_axle_m: float = 1.0
    dist_rear_axle_m: float = 1.0

    def __post_init__(self):
        """Validate configuration."""
        if self.default_mass_kg <= 0.0:
            raise ValueError(f"default_mass_kg must be positive, got {self.default_mass_kg}")


class KinematicSteeringModel(VehicleModel):
    """Car steered and accelerated directly by player input.

    The car does not rotate around its center of mass in reality, but this
    model treats it as if it did.

    Malformed inputs (NaN deltas or axes) are not guarded against and end
    up in the pose.

    Usage:
        car = KinematicSteeringModel(np.zeros(3), mass=1200.0)
        car.advance(timedelta(milliseconds=16), ControlSample(0.2, 1.0))
        car.render(view, projection)
    """

    def __init__(
        self,
        center_of_mass: np.ndarray | None = None,
        mass: float = 1.0,
        model: Model | None = None,
        config: KinematicConfig | None = None,
        physics: PhysicsEngine | None = None,
    ):
        """Initialize car.

        Args:
            center_of_mass: Starting position [x, y, z]. Origin if None.
            mass: Mass in kg. Falls back to the configured default when not
                above the configured minimum.
            model: Draw collaborator. Draws nothing if None.
            config: Car configuration. Uses defaults if None.
            physics: Shared physics helpers. Uses defaults if None.

        Raises:
            ValueError: If center_of_mass is not a 3-vector
        """
        self.config = config or KinematicConfig()
        self.physics = physics or PhysicsEngine()
        self.model = model if model is not None else NullModel()

        self.mass = resolve_mass(
            mass, self.config.min_mass_kg, fallback=self.config.default_mass_kg
        )
        self.dist_front_axle = self.config.dist_front_axle_m
        self.dist_rear_axle = self.config.dist_rear_axle_m

        if center_of_mass is None:
            center_of_mass = np.zeros(3)
        self._initial_position = np.array(center_of_mass, dtype=float)
        if self._initial_position.shape != (3,):
            raise ValueError(
                f"Expected a 3D position, got shape {self._initial_position.shape}"
            )
        self.center_of_mass = self._initial_position.copy()
        self.orientation = np.zeros(3)

    @property
    def pose(self) -> Pose:
        """Current pose snapshot."""
        return Pose(self.center_of_mass.copy(), self.orientation.copy())

    @property
    def yaw(self) -> float:
        """Current yaw in radians."""
        return float(self.orientation[2])

    def forward(self) -> np.ndarray:
        """Current forward direction in world coordinates.

        The rotation is rebuilt from the full orientation on every call.
        """
        rotation = rotation_from_orientation(self.orientation)
        return rotate_direction(rotation, FORWARD)

    def advance(
        self,
        delta_time: timedelta | float,
        control: Optional[ControlSample] = None,
    ) -> Pose:
        """Update the car position and orientation for one tick.

        Without a control sample the car keeps its pose exactly.

        Args:
            delta_time: Tick duration, a timedelta or seconds
            control: Driver input for this tick

        Returns:
            Updated pose
        """
        if control is None:
            return self.pose

        dt = self.physics.to_seconds(delta_time)

        # 1.0 pedal to the metal, -1.0 emergency brake
        throttle = control.throttle
        # Scaled by throttle so a car standing still cannot turn.
        steer = control.steer * throttle

        self.orientation[2] -= steer * dt * self.config.turn_rate_gain

        forward = self.forward()
        self.center_of_mass += forward * throttle * dt * self.config.speed_gain

        return self.pose

    def model_matrix(self) -> np.ndarray:
        """Model transform: translate to position, then yaw.

        Roll and pitch are fixed to zero. No rollovers.
        """
        rotation = euler_rotation(0.0, 0.0, self.orientation[2])
        return translation(self.center_of_mass) @ rotation

    def render(self, view: np.ndarray, projection: np.ndarray) -> None:
        """Draw the car.

        Args:
            view: 4x4 view matrix
            projection: 4x4 projection matrix
        """
        mvp = projection @ view @ self.model_matrix()
        self.model.draw(mvp)

    def reset(self) -> None:
        """Put the car back at its starting position, facing +Y."""
        self.center_of_mass = self._initial_position.copy()
        self.orientation = np.zeros(3)

    def get_state(self) -> Dict[str, Any]:
        """Get current car state for telemetry.

        Returns:
            Dictionary containing car state values
        """
        return {
            "model": "kinematic",
            "x": float(self.center_of_mass[0]),
            "y": float(self.center_of_mass[1]),
            "z": float(self.center_of_mass[2]),
            "yaw_rad": self.yaw,
            "yaw_deg": float(np.degrees(self.yaw)),
            "mass_kg": self.mass,
        }


Car = KinematicSteeringModel
