"""
trackday - A top-down checkpoint time-trial simulation core.

This package provides:
- Arcade vehicle kinematics with speed-scaled turning
- Axis-aligned box collision for walls and checkpoints
- An ordered checkpoint run with a pausable timer
- A frame loop that talks to input, clock, renderer and asset
  collaborators through narrow interfaces
"""

__version__ = "0.1.0"

from trackday.simulation.simulator import Simulator
from trackday.car.vehicle import Vehicle
from trackday.track.course import Course

__all__ = ["Simulator", "Vehicle", "Course", "__version__"]
