"""
Simulation module - Tick integration and world management.

This module contains:
- PhysicsEngine: Integration helpers shared by car models
- World: Container ticking and drawing every car
"""

from carambolage.simulation.physics import PhysicsConfig, PhysicsEngine
from carambolage.simulation.world import World, WorldConfig

__all__ = [
    "PhysicsConfig",
    "PhysicsEngine",
    "World",
    "WorldConfig",
]
