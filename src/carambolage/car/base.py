"""
Vehicle base - Shared contract for car models.

Defines:
- Pose: immutable snapshot of position and orientation
- VehicleModel: the advance/render capability every car model provides
- resolve_mass: the single mass validation policy used by all models
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
import logging
from typing import Any, Dict, Optional

import numpy as np

from carambolage.controls import ControlSample
from carambolage.errors import InvalidMassError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Pose:
    """Position and orientation of a car at an instant.

    Arrays are copies; mutating them does not affect the car. Poses compare
    element-wise and are not hashable.
    """
    position: np.ndarray
    orientation: np.ndarray  # [roll, pitch, yaw] in radians

    __hash__ = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pose):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.orientation, other.orientation)
        )

    @property
    def yaw(self) -> float:
        """Rotation about the vertical axis in radians."""
        return float(self.orientation[2])


def resolve_mass(
    mass: float,
    minimum: float,
    fallback: float | None = None,
) -> float:
    """Validate a requested mass.

    A mass strictly greater than ``minimum`` is accepted as is. Otherwise
    the ``fallback`` is substituted when one is given, and construction
    fails when none is. NaN never passes the check.

    Args:
        mass: Requested mass in kg
        minimum: Exclusive lower bound
        fallback: Replacement mass for rejected values

    Returns:
        Mass to use

    Raises:
        InvalidMassError: If the mass is rejected and there is no fallback
    """
    if mass > minimum:
        return float(mass)
    if fallback is None:
        raise InvalidMassError(mass, minimum)
    logger.debug("Mass %s not above %s, using %s", mass, minimum, fallback)
    return float(fallback)


class VehicleModel(ABC):
    """A car that can be advanced one tick and drawn.

    Each instance owns its state exclusively and is only mutated by its
    own ``advance``. Nothing here is thread-safe; the caller drives every
    car from a single game loop.
    """

    mass: float

    @property
    @abstractmethod
    def pose(self) -> Pose:
        """Current pose snapshot."""

    @abstractmethod
    def advance(
        self,
        delta_time: timedelta | float,
        control: Optional[ControlSample] = None,
    ) -> Pose:
        """Advance the car by one tick and return the new pose.

        Models that are not driven by input ignore ``control``.
        """

    @abstractmethod
    def render(self, view: np.ndarray, projection: np.ndarray) -> None:
        """Draw the car with the given camera matrices."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the state the car was constructed with."""

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """Get current car state for telemetry."""
