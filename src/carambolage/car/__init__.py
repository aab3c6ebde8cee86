"""
Car module - Vehicle models driven once per simulation tick.

This module contains:
- VehicleModel: Shared advance/render contract
- KinematicSteeringModel (Car): Throttle and steer driven car
- NewtonianPointMassModel: Constant-force point mass
- Pose: Position and orientation snapshot
"""

from carambolage.car.base import Pose, VehicleModel, resolve_mass
from carambolage.car.kinematic import Car, KinematicConfig, KinematicSteeringModel
from carambolage.car.point_mass import NewtonianPointMassModel

__all__ = [
    "Pose",
    "VehicleModel",
    "resolve_mass",
    "Car",
    "KinematicConfig",
    "KinematicSteeringModel",
    "NewtonianPointMassModel",
]
