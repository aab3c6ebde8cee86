"""
Carambolage - Car pose simulation core for a top-down driving game.

This package provides:
- A kinematic steering car driven by throttle and steer input
- A Newtonian point mass car pushed by a constant force
- Homogeneous transform helpers and camera matrices for drawing
- A world container ticking and drawing every car
"""

__version__ = "0.1.0"

from carambolage.car.kinematic import Car, KinematicSteeringModel
from carambolage.car.point_mass import NewtonianPointMassModel
from carambolage.controls import ControlSample
from carambolage.simulation.world import World

__all__ = [
    "Car",
    "KinematicSteeringModel",
    "NewtonianPointMassModel",
    "ControlSample",
    "World",
    "__version__",
]
