"""
World - Container ticking and drawing every car.

Manages:
- Cars in the simulation, keyed by id
- Global time and frame count
- Per-tick dispatch of control samples
"""

from dataclasses import dataclass
import logging
from typing import Dict, List, Mapping, Optional

from carambolage.car.base import VehicleModel
from carambolage.controls import ControlSample
from carambolage.errors import UnknownCarError
from carambolage.render.camera import Camera

logger = logging.getLogger(__name__)


@dataclass
class WorldConfig:
    """World configuration."""
    fixed_dt: float = 1.0 / 60.0  # Tick length in seconds (60 Hz)
    max_time: float = 0.0         # Stop ticking after this many seconds (0 = never)

    def __post_init__(self):
        """Validate configuration."""
        if self.fixed_dt <= 0.0:
            raise ValueError(f"fixed_dt must be positive, got {self.fixed_dt}")
        if self.max_time < 0.0:
            raise ValueError(f"max_time must be >= 0, got {self.max_time}")


class World:
    """World state container.

    Each car is advanced exactly once per ``step`` and drawn exactly once
    per ``render``. Cars never interact.

    Usage:
        world = World()
        car_id = world.add_car(KinematicSteeringModel())
        world.step({car_id: ControlSample(throttle=1.0)})
        world.render(camera)
    """

    def __init__(self, config: WorldConfig | None = None):
        """Initialize world.

        Args:
            config: World configuration. Uses defaults if None.
        """
        self.config = config or WorldConfig()

        self._cars: Dict[int, VehicleModel] = {}
        self._next_car_id: int = 0

        self._time: float = 0.0
        self._frame: int = 0

    @property
    def time(self) -> float:
        """Current simulation time in seconds."""
        return self._time

    @property
    def frame(self) -> int:
        """Number of ticks taken."""
        return self._frame

    @property
    def cars(self) -> List[VehicleModel]:
        """List of all cars."""
        return list(self._cars.values())

    @property
    def car_count(self) -> int:
        """Number of cars in the world."""
        return len(self._cars)

    @property
    def is_finished(self) -> bool:
        """True once max_time has been reached."""
        return self.config.max_time > 0.0 and self._time >= self.config.max_time

    def add_car(self, car: VehicleModel) -> int:
        """Add a car to the world.

        Args:
            car: Car to add

        Returns:
            Car ID
        """
        car_id = self._next_car_id
        self._next_car_id += 1
        self._cars[car_id] = car
        logger.debug("Added %s as car %d", type(car).__name__, car_id)
        return car_id

    def remove_car(self, car_id: int) -> bool:
        """Remove a car from the world.

        Args:
            car_id: ID of car to remove

        Returns:
            True if car was removed
        """
        if car_id not in self._cars:
            return False
        del self._cars[car_id]
        return True

    def get_car(self, car_id: int) -> Optional[VehicleModel]:
        """Get car by ID.

        Args:
            car_id: Car ID

        Returns:
            Car if found, None otherwise
        """
        return self._cars.get(car_id)

    def step(
        self,
        controls: Mapping[int, Optional[ControlSample]] | None = None,
        dt: float | None = None,
    ) -> Dict[int, dict]:
        """Advance every car by one tick.

        Every car receives its control sample, or None when the mapping
        has none for it. Cars without steering ignore the sample.

        Args:
            controls: Mapping of car ID to control sample
            dt: Tick length in seconds (uses fixed_dt if None)

        Returns:
            Mapping of car ID to car state after the tick

        Raises:
            UnknownCarError: If controls name a car not in the world
        """
        controls = controls or {}
        unknown = set(controls) - set(self._cars)
        if unknown:
            raise UnknownCarError(sorted(unknown))

        dt = self.config.fixed_dt if dt is None else dt

        states = {}
        for car_id, car in self._cars.items():
            car.advance(dt, controls.get(car_id))
            states[car_id] = car.get_state()

        self._time += dt
        self._frame += 1
        return states

    def render(self, camera: Camera) -> None:
        """Draw every car from the camera's point of view.

        Args:
            camera: Camera providing view and projection matrices
        """
        view = camera.view_matrix()
        projection = camera.projection_matrix()
        for car in self._cars.values():
            car.render(view, projection)

    def reset(self, keep_cars: bool = True) -> None:
        """Reset world time.

        Args:
            keep_cars: Keep cars and reset them to their start, else remove them
        """
        if keep_cars:
            for car in self._cars.values():
                car.reset()
        else:
            self._cars.clear()
            self._next_car_id = 0
        self._time = 0.0
        self._frame = 0

    def get_state(self) -> dict:
        """Get world state for serialization.

        Returns:
            Dictionary containing world state
        """
        return {
            "time": self._time,
            "frame": self._frame,
            "car_count": self.car_count,
            "cars": {car_id: car.get_state() for car_id, car in self._cars.items()},
        }
