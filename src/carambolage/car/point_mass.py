"""
Point mass car - Newtonian constant-force model.

An earlier, simpler take on the car: a 2D point mass pushed by a force that
is fixed when the car is built. It has no steering and draws nothing.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, Optional

import numpy as np

from carambolage.car.base import Pose, VehicleModel, resolve_mass
from carambolage.controls import ControlSample
from carambolage.render.model import Model, NullModel
from carambolage.simulation.physics import PhysicsEngine

logger = logging.getLogger(__name__)


class NewtonianPointMassModel(VehicleModel):
    """2D point mass under a constant applied force.

    Usage:
        car = NewtonianPointMassModel([0.0, 0.0], mass=1.0, force=[1.0, 0.0])
        car.advance(2.0)
        car.position  # array([2., 0.])
    """

    def __init__(
        self,
        position: np.ndarray | None = None,
        mass: float = 1.0,
        velocity: np.ndarray | None = None,
        force: np.ndarray | None = None,
        model: Model | None = None,
        physics: PhysicsEngine | None = None,
    ):
        """Initialize point mass.

        Args:
            position: Starting position [x, y]. Origin if None.
            mass: Mass in kg, must be positive
            velocity: Starting velocity [vx, vy]. At rest if None.
            force: Constant applied force [Fx, Fy]. None means no force.
            model: Draw collaborator, kept for parity with other cars
            physics: Shared physics helpers. Uses defaults if None.

        Raises:
            InvalidMassError: If mass is not positive
        """
        self.mass = resolve_mass(mass, 0.0)
        self.physics = physics or PhysicsEngine()
        self.model = model if model is not None else NullModel()

        self._initial_position = self._vector2(position)
        self._initial_velocity = self._vector2(velocity)
        self.force = self._vector2(force)

        self.position = self._initial_position.copy()
        self.velocity = self._initial_velocity.copy()
        # Never updated; the force has no torque component.
        self.rotation = 0.0

    @staticmethod
    def _vector2(value: np.ndarray | None) -> np.ndarray:
        if value is None:
            return np.zeros(2)
        vector = np.array(value, dtype=float)
        if vector.shape != (2,):
            raise ValueError(f"Expected a 2D vector, got shape {vector.shape}")
        return vector

    @property
    def pose(self) -> Pose:
        """Current pose snapshot. Yaw is the (constant) rotation."""
        return Pose(self.position.copy(), np.array([0.0, 0.0, self.rotation]))

    def advance(
        self,
        time_step: timedelta | float,
        control: Optional[ControlSample] = None,
    ) -> Pose:
        """Integrate position and velocity over one time step.

        Position uses the velocity from before the step. Zero and negative
        steps are accepted. The force is fixed, so ``control`` is ignored.

        Args:
            time_step: Step length, seconds or a timedelta
            control: Unused

        Returns:
            Updated pose
        """
        dt = self.physics.to_seconds(time_step)
        self.position, self.velocity = self.physics.integrate_constant_force(
            self.position, self.velocity, self.force, self.mass, dt
        )
        return self.pose

    def render(
        self,
        view: np.ndarray,
        projection: np.ndarray,
        target: Model | None = None,
    ) -> None:
        """Accept camera matrices and draw nothing.

        This car has no geometry yet.
        """
        logger.debug("Point mass car has no geometry to draw")

    def reset(self) -> None:
        """Restore the starting position and velocity."""
        self.position = self._initial_position.copy()
        self.velocity = self._initial_velocity.copy()

    def get_state(self) -> Dict[str, Any]:
        """Get current car state for telemetry.

        Returns:
            Dictionary containing car state values
        """
        return {
            "model": "point_mass",
            "x": float(self.position[0]),
            "y": float(self.position[1]),
            "velocity_x": float(self.velocity[0]),
            "velocity_y": float(self.velocity[1]),
            "speed_mps": float(np.hypot(*self.velocity)),
            "force_x": float(self.force[0]),
            "force_y": float(self.force[1]),
            "mass_kg": self.mass,
        }
