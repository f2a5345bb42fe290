#!/usr/bin/env python
"""Scripted lunar descent example.

Demonstrates the host side of the update loop:
1. Decide which directions are held (here a simple scripted pilot)
2. Tick the simulator at a fixed rate
3. Read the craft snapshot and altitude label
4. Decide when the descent is over (the core has no terminal condition)

The pilot first cancels the initial 30 degree tilt with the right thruster,
then fires the main engine whenever the sink rate exceeds a limit.

Usage:
    python lander/examples/descent.py [output_dir]
"""

import logging
import sys
from pathlib import Path

from lander.dynamics import InputSnapshot
from lander.environment import CelestialBody, EnvironmentConstants
from lander.plotting import plot_descent
from lander.readout import AltitudeLabel, sprite_frame
from lander.simulation import CraftView, SimulationResult, Simulator

FPS = 60
DT = 1.0 / FPS
MAX_SINK_RATE = 40.0  # [world units/s]
MAX_TIME = 120.0  # [s]


def pilot(view: CraftView) -> InputSnapshot:
    """Level the craft, then hold the sink rate below MAX_SINK_RATE."""
    if view.orientation > 0.01:
        return InputSnapshot(rotate_right=True)
    if view.orientation < -0.01:
        return InputSnapshot(rotate_left=True)
    return InputSnapshot(boost_up=bool(view.velocity[1] < -MAX_SINK_RATE))


def run_descent(body: CelestialBody = CelestialBody.MOON) -> Simulator:
    """Fly from the start position down to zero altitude."""
    env = EnvironmentConstants.for_body(body)
    label = AltitudeLabel(precision=1)
    sim = Simulator.from_start(env=env, sink=label)

    print("=" * 60)
    print(f"LANDER DESCENT: {body.name}")
    print("=" * 60)
    print(f"  Gravity:           {env.gravity:.2f}")
    print(f"  Starting altitude: {sim.altitude:.1f}")

    view = sim.get_state()
    while view.altitude > 0.0 and sim.time < MAX_TIME:
        inputs = pilot(view)
        view = sim.tick(inputs, DT)

        if sim.ticks % FPS == 0:
            frame = sprite_frame(view.thruster, inputs.boost_up)
            print(f"  t={sim.time:6.1f}s  {label.text:<18} vy={view.velocity[1]:7.2f}  frame={frame}")

    print(f"\n  Descent ended at t={sim.time:.2f}s")
    print(f"  Touchdown speed: {abs(view.velocity[1]):.2f}")
    return sim


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("outputs") / "descent"
    output_dir.mkdir(parents=True, exist_ok=True)

    sim = run_descent()
    result = SimulationResult.from_simulator(sim)

    result.to_dataframe().write_csv(output_dir / "descent.csv")
    fig = plot_descent(result)
    fig.savefig(output_dir / "descent.png", dpi=150, bbox_inches="tight")

    print(f"\n  Outputs written to {output_dir}")


if __name__ == "__main__":
    main()
