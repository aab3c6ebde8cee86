"""
Errors - Exception types raised by the vehicle core.

Provides:
- A common base class for package errors
- Mass validation failures
- Homogeneous coordinate conversion failures
- Unknown car lookups in the world
"""


class CarambolageError(Exception):
    """Base class for all errors raised by carambolage."""


class InvalidMassError(CarambolageError, ValueError):
    """Raised when a car is built with a mass the model cannot accept."""

    def __init__(self, mass: float, minimum: float):
        self.mass = mass
        self.minimum = minimum
        super().__init__(f"Mass must be greater than {minimum}, got {mass}")


class HomogeneousCoordinateError(CarambolageError, ValueError):
    """Raised when a homogeneous vector cannot be projected back to 3D."""


class UnknownCarError(CarambolageError, KeyError):
    """Raised when the world is asked about a car id it does not hold."""
