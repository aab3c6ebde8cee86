"""Integration tests for multi-tick car motion."""

import numpy as np

from carambolage.car.kinematic import KinematicSteeringModel
from carambolage.car.point_mass import NewtonianPointMassModel
from carambolage.controls import ControlSample


def _drive(car: KinematicSteeringModel, control: ControlSample, dt: float, duration: float):
    for _ in range(int(round(duration / dt))):
        car.advance(dt, control)
    return car


def test_full_turn_returns_to_start():
    """Constant steer and throttle trace a closed circle."""
    steps = 1000
    dt = 2 * np.pi / 3.5 / steps
    car = KinematicSteeringModel()
    control = ControlSample(steer=1.0, throttle=1.0)

    for _ in range(steps):
        car.advance(dt, control)

    assert np.allclose(car.center_of_mass, np.zeros(3), atol=1e-6)
    assert np.isclose(car.yaw, -2 * np.pi)


def test_turn_radius_matches_gains():
    """Turn radius is speed gain over turn rate gain."""
    car = _drive(KinematicSteeringModel(), ControlSample(steer=1.0, throttle=1.0),
                 dt=0.001, duration=np.pi / 3.5)

    # Half a circle: the car sits one diameter to the right.
    radius = 10.0 / 3.5
    assert np.isclose(car.center_of_mass[0], 2 * radius, atol=0.02)
    assert abs(car.center_of_mass[1]) < 0.02


def test_trajectory_stable_across_timesteps():
    """Trajectory is consistent across tick lengths."""
    control = ControlSample(steer=0.4, throttle=0.8)
    car_fine = _drive(KinematicSteeringModel(), control, dt=0.005, duration=2.0)
    car_coarse = _drive(KinematicSteeringModel(), control, dt=0.02, duration=2.0)

    displacement = np.linalg.norm(car_fine.center_of_mass - car_coarse.center_of_mass)
    assert displacement < 0.5
    assert np.isclose(car_fine.yaw, car_coarse.yaw)


def test_point_mass_steps_compose():
    """Many small constant-force steps equal one long step."""
    kwargs = dict(mass=3.0, velocity=[1.0, -2.0], force=[6.0, 1.5])
    stepped = NewtonianPointMassModel([0.0, 0.0], **kwargs)
    single = NewtonianPointMassModel([0.0, 0.0], **kwargs)

    for _ in range(100):
        stepped.advance(0.01)
    single.advance(1.0)

    assert np.allclose(stepped.position, single.position)
    assert np.allclose(stepped.velocity, single.velocity)


def test_point_mass_matches_closed_form():
    """Position follows x0 + v0 t + a t^2 / 2."""
    car = NewtonianPointMassModel([1.0, 2.0], mass=2.0, velocity=[0.5, 0.0], force=[0.0, -4.0])

    for _ in range(50):
        car.advance(0.1)

    t = 5.0
    accel = np.array([0.0, -2.0])
    expected = np.array([1.0, 2.0]) + np.array([0.5, 0.0]) * t + 0.5 * accel * t**2
    assert np.allclose(car.position, expected)
    assert np.allclose(car.velocity, np.array([0.5, 0.0]) + accel * t)
