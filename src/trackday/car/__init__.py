"""
Car module - Top-down vehicle kinematics.

This module contains:
- Vehicle: Position, heading and speed integrated once per step
- VehicleConfig: Size, speed limits, acceleration and turn rate
- VehicleInputs: Held directional controls
- VehicleState: Pose and speed snapshot
"""

from trackday.car.vehicle import Vehicle, VehicleConfig, VehicleInputs, VehicleState

__all__ = [
    "Vehicle",
    "VehicleConfig",
    "VehicleInputs",
    "VehicleState",
]
