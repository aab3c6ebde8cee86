#!/usr/bin/env python3
"""
Basic Simulation Example

This example demonstrates how to:
1. Create a steering car and a point mass car
2. Drive the steering car with keyboard-style input
3. Run a world loop and draw every car each frame
4. Read car state after the run

Run with: python run_simulation.py
"""

from datetime import timedelta

import numpy as np

from carambolage import ControlSample, KinematicSteeringModel, NewtonianPointMassModel, World
from carambolage.render import Camera, RecordingModel


def main():
    print("=" * 60)
    print("Carambolage Basic Simulation Example")
    print("=" * 60)

    # Step 1: Create cars
    print("\n1. Creating cars...")
    steering_car = KinematicSteeringModel(np.zeros(3), mass=1200.0, model=RecordingModel())
    point_mass_car = NewtonianPointMassModel([0.0, -10.0], mass=1200.0, force=[1200.0, 0.0])
    print(f"   Steering car mass: {steering_car.mass:.0f} kg")
    print(f"   Point mass car force: {point_mass_car.force}")

    # Step 2: A single tick driven by a timedelta, as a frame clock would supply
    print("\n2. One 16 ms tick with the accelerator held...")
    pose = steering_car.advance(timedelta(milliseconds=16), ControlSample.from_keys(up=True))
    print(f"   Position: ({pose.position[0]:.3f}, {pose.position[1]:.3f})")

    # Step 3: Run the world loop
    print("\n3. Running world (300 ticks at 60 Hz = 5 seconds)...")
    world = World()
    camera = Camera()
    steering_id = world.add_car(steering_car)
    world.add_car(point_mass_car)

    for step in range(300):
        if step < 100:
            control = ControlSample.from_keys(up=True)
        elif step < 200:
            control = ControlSample.from_keys(up=True, right=True)
        else:
            # Hands off: the steering car stops dead
            control = None

        states = world.step({steering_id: control})
        world.render(camera)

        if (step + 1) % 100 == 0:
            state = states[steering_id]
            print(f"   Step {step + 1}: Position = ({state['x']:.1f}, {state['y']:.1f}), "
                  f"Yaw = {state['yaw_deg']:.1f} deg")

    # Step 4: Final state
    print("\n4. Final state:")
    for car_id, state in world.get_state()["cars"].items():
        print(f"   Car {car_id} ({state['model']}): ({state['x']:.1f}, {state['y']:.1f})")
    print(f"   Draw calls: {steering_car.model.draw_count}")

    print("\n" + "=" * 60)
    print("Simulation complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
