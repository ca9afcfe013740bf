"""
Telemetry module - In-memory run data collection.

This module contains:
- TelemetryRecorder: Records vehicle state and checkpoint crossings
- TelemetryChannel: Individual data channel
"""

from trackday.telemetry.recorder import TelemetryRecorder
from trackday.telemetry.channel import TelemetryChannel

__all__ = [
    "TelemetryRecorder",
    "TelemetryChannel",
]
