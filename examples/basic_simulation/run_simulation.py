#!/usr/bin/env python3
"""
Basic Simulation Example

This example demonstrates how to:
1. Build a simulator on the stock checkpoint course
2. Drive it headlessly with a simple steering input source
3. Follow checkpoint events as they happen
4. Read the run result and telemetry summary

Run with: python run_simulation.py
"""

import math

from trackday import Simulator
from trackday.interfaces import (
    Control,
    InputEvent,
    ManualClock,
    RecordingRenderer,
    StaticAssetLoader,
    Texture,
)
from trackday.log import setup_logging
from trackday.simulation import SimulatorConfig

FRAME_MS = 16  # ~60 Hz


class SeekingInput:
    """Input source that steers towards the next expected checkpoint.

    Only emits press/release transitions, like a keyboard would.
    """

    def __init__(self, cruise_speed: float = 12.0, deadband: float = 0.05):
        self.sim: Simulator | None = None
        self.cruise_speed = cruise_speed
        self.deadband = deadband
        self._held: set[Control] = set()

    def _want(self) -> set[Control]:
        target = self.sim.run_state.next_checkpoint
        if target is None:
            return set()

        vehicle = self.sim.vehicle
        cx, cy = vehicle.collider.center
        tx, ty = target.center
        error = math.atan2(ty - cy, tx - cx) - vehicle.heading
        error = math.atan2(math.sin(error), math.cos(error))

        want = set()
        if vehicle.speed < self.cruise_speed:
            want.add(Control.ACCELERATE)
        if error > self.deadband:
            want.add(Control.TURN_RIGHT)
        elif error < -self.deadband:
            want.add(Control.TURN_LEFT)
        return want

    def poll(self):
        want = self._want()
        events = [InputEvent.release(c) for c in self._held - want]
        events += [InputEvent.press(c) for c in want - self._held]
        self._held = want
        return events


def main():
    setup_logging("INFO")

    print("=" * 60)
    print("trackday Basic Simulation Example")
    print("=" * 60)

    # Step 1: Wire up headless collaborators
    clock = ManualClock()
    driver = SeekingInput()
    loader = StaticAssetLoader({
        "car.bmp": Texture("car", 128, 64),
        "background.png": Texture("background", 4000, 2000),
    })
    renderer = RecordingRenderer()

    sim = Simulator(
        config=SimulatorConfig(max_frames=20000, stop_on_complete=True),
        clock=clock,
        input_source=driver,
        renderer=renderer,
        asset_loader=loader,
    )
    driver.sim = sim

    sim.add_checkpoint_callback(
        lambda e: print(f"   Checkpoint {e.index}: {e.elapsed_seconds:.3f} s")
    )

    # Step 2: Run
    print("\n1. Running...")
    if not sim.load_assets():
        print("Failed to load media!")
        return
    sim.start()
    while sim.is_running:
        sim.step()
        clock.advance(FRAME_MS)

    # Step 3: Results
    print("\n2. Result:")
    run = sim.run_state
    print(f"   Phase: {run.phase.value} ({run.next_index}/{run.num_checkpoints})")
    if run.final_time_ms is not None:
        print(f"   Final time: {run.final_time_ms / 1000:.3f} s")
    print(f"   Frames: {sim.frame}, rendered: {len(renderer.frames)}")

    summary = sim.telemetry.get_summary()
    print(f"   Top speed: {summary['top_speed']:.2f} units/step")
    print(f"   Frames against a wall: {summary['containment_frames']}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
