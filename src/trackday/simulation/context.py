"""
Simulation context - Per-run mutable state threaded through each step.

Holds everything the frame loop mutates that does not belong to a single
component: held inputs, viewport offset, frame counter, the containment
chosen this frame and the quit request.
"""

from dataclasses import dataclass, field

from trackday.car.vehicle import VehicleInputs
from trackday.track.course import Containment


@dataclass
class SimulationContext:
    """Mutable state owned by the simulator for one run."""
    inputs: VehicleInputs = field(default_factory=VehicleInputs)
    offset_x: float = 0.0
    offset_y: float = 0.0
    frame: int = 0
    containment: Containment = Containment.NONE
    quit: bool = False

    def get_state(self) -> dict:
        """Get context state for serialization."""
        return {
            "frame": self.frame,
            "offset": (self.offset_x, self.offset_y),
            "containment": self.containment.value,
            "quit": self.quit,
            "inputs": {
                "accelerate": self.inputs.accelerate,
                "brake": self.inputs.brake,
                "turn_left": self.inputs.turn_left,
                "turn_right": self.inputs.turn_right,
            },
        }
