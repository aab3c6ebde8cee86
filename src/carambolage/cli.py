"""
Headless demo runner.

Drives one steering car with a scripted input and one point mass car under
a constant force, printing their poses as the world ticks.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from carambolage.car.kinematic import KinematicSteeringModel
from carambolage.car.point_mass import NewtonianPointMassModel
from carambolage.controls import ControlSample, ScriptedInput
from carambolage.logging_setup import setup_logging
from carambolage.render.camera import Camera
from carambolage.render.model import RecordingModel
from carambolage.simulation.world import World, WorldConfig

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Carambolage headless car simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Run the default 5 second demo at 60 Hz
    carambolage-demo

    # Longer run, reporting every second
    carambolage-demo --steps 600 --report-every 60

    # Verbose logging to a file
    carambolage-demo --log-level DEBUG --log-file demo.log
        """
    )

    parser.add_argument(
        "--steps",
        type=int,
        default=300,
        help="Number of ticks to simulate (default: 300)",
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=1.0 / 60.0,
        help="Tick length in seconds (default: 1/60)",
    )
    parser.add_argument(
        "--report-every",
        type=int,
        default=60,
        help="Print poses every N ticks (default: 60)",
    )
    parser.add_argument(
        "--mass",
        type=float,
        default=1200.0,
        help="Mass of both cars in kg (default: 1200)",
    )
    parser.add_argument(
        "--force",
        type=float,
        nargs=2,
        default=[600.0, 0.0],
        metavar=("FX", "FY"),
        help="Force on the point mass car in N (default: 600 0)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    args = parser.parse_args(argv)
    if args.steps < 0:
        parser.error("--steps must be >= 0")
    if args.dt <= 0.0:
        parser.error("--dt must be positive")
    if args.report_every <= 0:
        parser.error("--report-every must be positive")
    return args


def demo_script() -> ScriptedInput:
    """Accelerate, turn right, coast, then reverse while turning."""
    return ScriptedInput([
        (60, ControlSample(steer=0.0, throttle=1.0)),
        (90, ControlSample(steer=0.5, throttle=0.8)),
        (30, None),
        (120, ControlSample(steer=-0.3, throttle=-0.5)),
    ])


def run(args: argparse.Namespace) -> World:
    """Run the demo world for the requested number of ticks.

    Returns:
        The world after the last tick
    """
    world = World(WorldConfig(fixed_dt=args.dt))
    camera = Camera()

    steering_car = KinematicSteeringModel(
        np.zeros(3), mass=args.mass, model=RecordingModel()
    )
    point_mass_car = NewtonianPointMassModel(
        [0.0, -20.0], mass=args.mass, force=args.force
    )
    steering_id = world.add_car(steering_car)
    point_mass_id = world.add_car(point_mass_car)

    script = demo_script()
    logger.info("Running %d ticks at dt=%.4f s", args.steps, args.dt)

    for tick in range(1, args.steps + 1):
        states = world.step({steering_id: script.poll()})
        camera.follow(steering_car.center_of_mass)
        world.render(camera)

        if tick % args.report_every == 0:
            steering = states[steering_id]
            point_mass = states[point_mass_id]
            print(f"   t = {world.time:6.2f}s: "
                  f"steering car ({steering['x']:7.2f}, {steering['y']:7.2f}) "
                  f"yaw {steering['yaw_deg']:7.1f} deg | "
                  f"point mass ({point_mass['x']:7.2f}, {point_mass['y']:7.2f}) "
                  f"{point_mass['speed_mps']:5.2f} m/s")

    logger.info("Submitted %d draw calls", steering_car.model.draw_count)
    return world


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    print("=" * 60)
    print("Carambolage Headless Simulation")
    print("=" * 60)
    run(args)
    return 0
