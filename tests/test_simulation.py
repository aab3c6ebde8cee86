"""Basic tests for the carambolage simulation module."""

from datetime import timedelta
import logging

import pytest
import numpy as np

from carambolage.car.kinematic import KinematicSteeringModel
from carambolage.car.point_mass import NewtonianPointMassModel
from carambolage.controls import ControlSample, ScriptedInput
from carambolage.errors import UnknownCarError
from carambolage.geometry.transforms import to_homogeneous, transform_point
from carambolage.logging_setup import setup_logging
from carambolage.render.camera import Camera, CameraConfig
from carambolage.render.model import RecordingModel
from carambolage.simulation.physics import PhysicsConfig, PhysicsEngine
from carambolage.simulation.world import World, WorldConfig


class TestPhysicsEngine:
    """Test physics engine."""

    def test_acceleration_calculation(self):
        """Test force to acceleration conversion."""
        physics = PhysicsEngine()

        accel = physics.calculate_acceleration(np.array([1000.0, 0.0]), 1000.0)

        assert np.allclose(accel, [1.0, 0.0])

    def test_integrate_constant_force(self):
        """Test semi-implicit integration order."""
        physics = PhysicsEngine()

        position, velocity = physics.integrate_constant_force(
            np.zeros(2), np.array([1.0, 0.0]), np.array([0.0, 2.0]), 2.0, 1.0
        )

        assert np.allclose(position, [1.0, 0.5])
        assert np.allclose(velocity, [1.0, 1.0])

    def test_to_seconds_float(self):
        """Test plain numbers are seconds."""
        assert PhysicsEngine().to_seconds(0.25) == 0.25
        assert PhysicsEngine().to_seconds(2) == 2.0

    def test_to_seconds_timedelta(self):
        """Test timedeltas are counted in whole milliseconds."""
        physics = PhysicsEngine()

        assert physics.to_seconds(timedelta(milliseconds=16)) == pytest.approx(0.016)
        assert physics.to_seconds(timedelta(microseconds=999)) == 0.0

    def test_to_seconds_negative_truncates_toward_zero(self):
        """Test negative durations truncate toward zero."""
        physics = PhysicsEngine()

        assert physics.to_seconds(timedelta(microseconds=-1500)) == pytest.approx(-0.001)

    def test_to_seconds_rejects_other_types(self):
        """Test non-numeric deltas raise TypeError."""
        with pytest.raises(TypeError):
            PhysicsEngine().to_seconds("16ms")

    def test_invalid_resolution(self):
        """Test config rejects non-positive resolution."""
        with pytest.raises(ValueError):
            PhysicsConfig(time_resolution_s=0.0)


class TestControls:
    """Test control samples and scripted input."""

    def test_from_keys(self):
        """Test digital keys map to axes."""
        assert ControlSample.from_keys(up=True, right=True) == ControlSample(1.0, 1.0)
        assert ControlSample.from_keys(down=True, left=True) == ControlSample(-1.0, -1.0)
        assert ControlSample.from_keys(up=True, down=True) == ControlSample(0.0, 0.0)

    def test_clamped(self):
        """Test clamping keeps axes in range."""
        sample = ControlSample(steer=3.0, throttle=-1.5).clamped()

        assert sample == ControlSample(steer=1.0, throttle=-1.0)

    def test_scripted_input(self):
        """Test script replays segments then returns None."""
        go = ControlSample(throttle=1.0)
        script = ScriptedInput([(2, go), (1, None), (1, go)])

        polled = [script.poll() for _ in range(6)]

        assert polled == [go, go, None, go, None, None]
        assert script.total_ticks == 4

    def test_scripted_input_reset(self):
        """Test reset rewinds the script."""
        go = ControlSample(throttle=1.0)
        script = ScriptedInput([(1, go)])
        script.poll()

        script.reset()

        assert script.poll() == go

    def test_scripted_input_rejects_negative_ticks(self):
        """Test negative segment length raises."""
        with pytest.raises(ValueError):
            ScriptedInput([(-1, None)])


class TestCamera:
    """Test camera matrices."""

    def test_view_moves_eye_to_origin(self):
        """Test the eye sits at the camera-space origin."""
        camera = Camera(CameraConfig(eye=[3.0, -8.0, 12.0], target=[1.0, 2.0, 0.0]))

        eye_in_view = transform_point(camera.view_matrix(), camera.config.eye)

        assert np.allclose(eye_in_view, np.zeros(3))

    def test_view_looks_down_negative_z(self):
        """Test the target lies on the camera's -Z axis."""
        camera = Camera()

        target_in_view = transform_point(camera.view_matrix(), camera.config.target)

        assert np.allclose(target_in_view[:2], [0.0, 0.0])
        assert target_in_view[2] < 0

    def test_projection_near_plane(self):
        """Test points on the near plane map to NDC depth -1."""
        camera = Camera()
        near = camera.config.near

        clip = camera.projection_matrix() @ to_homogeneous([0.0, 0.0, -near], 1.0)

        assert clip[2] / clip[3] == pytest.approx(-1.0)

    def test_follow(self):
        """Test follow places the camera above the target."""
        camera = Camera()

        camera.follow(np.array([5.0, 6.0, 0.0]), height=20.0)

        assert np.allclose(camera.config.eye, [5.0, 6.0, 20.0])
        assert np.allclose(camera.config.target, [5.0, 6.0, 0.0])

    def test_invalid_clip_planes(self):
        """Test config rejects inverted clip planes."""
        with pytest.raises(ValueError):
            CameraConfig(near=10.0, far=1.0)


class TestWorld:
    """Test world state management."""

    def test_world_creation(self):
        """Test world initializes correctly."""
        world = World()

        assert world.car_count == 0
        assert world.time == 0.0
        assert world.frame == 0

    def test_add_and_remove_car(self):
        """Test car bookkeeping."""
        world = World()
        car_id = world.add_car(KinematicSteeringModel())

        assert world.get_car(car_id) is not None
        assert world.remove_car(car_id)
        assert not world.remove_car(car_id)
        assert world.get_car(car_id) is None

    def test_step_advances_every_car(self):
        """Test every car is ticked once per step."""
        world = World(WorldConfig(fixed_dt=0.5))
        steering_id = world.add_car(KinematicSteeringModel())
        point_mass_id = world.add_car(NewtonianPointMassModel(velocity=[2.0, 0.0]))

        states = world.step({steering_id: ControlSample(throttle=1.0)})

        assert states[steering_id]["y"] == pytest.approx(5.0)
        assert states[point_mass_id]["x"] == pytest.approx(1.0)
        assert world.time == 0.5
        assert world.frame == 1

    def test_point_mass_ignores_control(self):
        """Test a point mass car given a sample still integrates normally."""
        world = World(WorldConfig(fixed_dt=1.0))
        car_id = world.add_car(NewtonianPointMassModel(force=[2.0, 0.0]))

        states = world.step({car_id: ControlSample(steer=1.0, throttle=1.0)})

        assert states[car_id]["x"] == pytest.approx(1.0)
        assert states[car_id]["velocity_x"] == pytest.approx(2.0)

    def test_missing_control_coasts(self):
        """Test cars without a sample keep their pose."""
        world = World()
        car = KinematicSteeringModel(np.array([1.0, 1.0, 0.0]))
        world.add_car(car)

        world.step()

        assert np.array_equal(car.center_of_mass, [1.0, 1.0, 0.0])

    def test_explicit_dt(self):
        """Test explicit dt overrides fixed_dt."""
        world = World()
        world.add_car(NewtonianPointMassModel(velocity=[1.0, 0.0]))

        world.step(dt=2.0)

        assert world.time == 2.0
        assert world.cars[0].position[0] == pytest.approx(2.0)

    def test_unknown_car_control(self):
        """Test controls for unknown cars raise."""
        world = World()

        with pytest.raises(UnknownCarError):
            world.step({42: ControlSample(throttle=1.0)})

        with pytest.raises(KeyError):
            world.step({42: None})

    def test_render_draws_each_car_once(self):
        """Test render issues one draw per steering car."""
        world = World()
        models = [RecordingModel(), RecordingModel()]
        for model in models:
            world.add_car(KinematicSteeringModel(model=model))
        world.add_car(NewtonianPointMassModel())

        world.render(Camera())

        assert [m.draw_count for m in models] == [1, 1]

    def test_is_finished(self):
        """Test max_time ends the run."""
        world = World(WorldConfig(fixed_dt=0.5, max_time=1.0))

        world.step()
        assert not world.is_finished
        world.step()
        assert world.is_finished

    def test_reset_keeps_cars(self):
        """Test reset rewinds time and cars."""
        world = World()
        car_id = world.add_car(NewtonianPointMassModel(velocity=[1.0, 0.0]))
        for _ in range(10):
            world.step()

        world.reset()

        assert world.time == 0.0
        assert world.frame == 0
        assert np.array_equal(world.get_car(car_id).position, [0.0, 0.0])

    def test_reset_drops_cars(self):
        """Test reset can clear the world."""
        world = World()
        world.add_car(KinematicSteeringModel())

        world.reset(keep_cars=False)

        assert world.car_count == 0

    def test_world_state(self):
        """Test world state dictionary."""
        world = World()
        world.add_car(KinematicSteeringModel())
        state = world.get_state()

        assert state["car_count"] == 1
        assert 0 in state["cars"]

    def test_invalid_config(self):
        """Test config rejects non-positive tick length."""
        with pytest.raises(ValueError):
            WorldConfig(fixed_dt=0.0)


class TestLoggingSetup:
    """Test logging configuration."""

    def test_setup_logging_with_file(self, tmp_path):
        """Test level name and log file are applied."""
        log_file = tmp_path / "sim.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            setup_logging("DEBUG", log_file)
            logging.getLogger("carambolage.test").debug("hello")

            assert root.level == logging.DEBUG
            assert log_file.exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
