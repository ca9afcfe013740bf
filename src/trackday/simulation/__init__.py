"""
Simulation module - Frame loop orchestration.

This module contains:
- Simulator: Main per-frame loop
- SimulationContext: Explicit per-run mutable state
- Camera: Viewport offset with edge dead zones
"""

from trackday.simulation.simulator import Simulator, SimulatorConfig
from trackday.simulation.context import SimulationContext
from trackday.simulation.camera import Camera

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "SimulationContext",
    "Camera",
]
