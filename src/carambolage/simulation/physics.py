"""
Physics engine - Core integration helpers shared by the vehicle models.

Provides:
- Force to acceleration conversion
- Semi-implicit constant-force integration
- Duration to seconds conversion for tick deltas
"""

from dataclasses import dataclass
from datetime import timedelta
import numbers

import numpy as np


@dataclass
class PhysicsConfig:
    """Physics integration configuration."""
    # Resolution used when converting a timedelta tick into seconds.
    # Anything finer is truncated toward zero.
    time_resolution_s: float = 0.001

    def __post_init__(self):
        if self.time_resolution_s <= 0.0:
            raise ValueError(
                f"time_resolution_s must be positive, got {self.time_resolution_s}"
            )


class PhysicsEngine:
    """Stateless physics helpers.

    Kept separate from the vehicle models so every model integrates the
    same way.
    """

    def __init__(self, config: PhysicsConfig | None = None):
        """Initialize physics engine.

        Args:
            config: Physics configuration. Uses defaults if None.
        """
        self.config = config or PhysicsConfig()

    def to_seconds(self, delta_time: timedelta | float) -> float:
        """Convert a tick delta to seconds.

        A ``timedelta`` is counted in whole units of ``time_resolution_s``
        (milliseconds by default), truncated toward zero. Plain numbers are
        already seconds and pass through unchanged.

        Args:
            delta_time: Tick duration

        Returns:
            Duration in seconds
        """
        if isinstance(delta_time, timedelta):
            resolution = timedelta(seconds=self.config.time_resolution_s)
            whole_units = int(delta_time / resolution)
            return whole_units / (1.0 / self.config.time_resolution_s)
        if isinstance(delta_time, numbers.Real):
            return float(delta_time)
        raise TypeError(
            f"delta_time must be a timedelta or a number, got {type(delta_time).__name__}"
        )

    def calculate_acceleration(
        self,
        force: np.ndarray,
        mass: float,
    ) -> np.ndarray:
        """Calculate acceleration from force.

        Args:
            force: Force vector in Newtons
            mass: Mass in kg

        Returns:
            Acceleration vector in m/s^2
        """
        return force / mass

    def integrate_constant_force(
        self,
        position: np.ndarray,
        velocity: np.ndarray,
        force: np.ndarray,
        mass: float,
        dt: float,
    ) -> tuple[np.ndarray, np.ndarray]:
        """Advance a point mass under a constant force.

        The position step uses the velocity from before this step:

            position += velocity * dt + force / (2 * mass) * dt^2
            velocity += force / mass * dt

        Zero and negative steps are not rejected.

        Args:
            position: Current position
            velocity: Current velocity
            force: Applied force
            mass: Mass in kg
            dt: Time step in seconds

        Returns:
            Tuple of (new position, new velocity)
        """
        new_position = position + velocity * dt + force / (2.0 * mass) * dt**2
        new_velocity = velocity + self.calculate_acceleration(force, mass) * dt
        return new_position, new_velocity
