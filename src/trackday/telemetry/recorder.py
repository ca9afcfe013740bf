"""
Telemetry recorder - Per-frame vehicle samples and checkpoint splits.

Everything is kept in memory for the current run only.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from trackday.car.vehicle import Vehicle
from trackday.scoring.run_state import CheckpointEvent
from trackday.telemetry.channel import ChannelConfig, TelemetryChannel
from trackday.track.course import Containment


STANDARD_CHANNELS = {
    "x": ChannelConfig("x", "units", 1),
    "y": ChannelConfig("y", "units", 1),
    "speed": ChannelConfig("speed", "units/step", 3),
    "heading_deg": ChannelConfig("heading_deg", "deg", 1),
    "contained": ChannelConfig("contained", "", 0),  # 1 while held against a wall
}


@dataclass
class RecorderConfig:
    """Recorder configuration."""
    sample_every: int = 1        # Record every Nth frame
    buffer_size: int = 100000    # Per-channel buffer size


class TelemetryRecorder:
    """Records vehicle telemetry and checkpoint crossings for one run."""

    def __init__(self, config: RecorderConfig | None = None):
        """Initialize recorder.

        Args:
            config: Recorder configuration
        """
        self.config = config or RecorderConfig()
        if self.config.sample_every < 1:
            raise ValueError("sample_every must be at least 1")

        self._channels: Dict[str, TelemetryChannel] = {}
        for name, base in STANDARD_CHANNELS.items():
            cfg = ChannelConfig(base.name, base.unit, base.precision, self.config.buffer_size)
            self._channels[name] = TelemetryChannel(cfg)

        self._checkpoints: List[CheckpointEvent] = []
        self._containment_frames: int = 0

    @property
    def channels(self) -> Dict[str, TelemetryChannel]:
        return self._channels

    @property
    def checkpoints(self) -> List[CheckpointEvent]:
        return list(self._checkpoints)

    def get_channel(self, name: str) -> Optional[TelemetryChannel]:
        return self._channels.get(name)

    def record(self, frame: int, vehicle: Vehicle, containment: Containment) -> bool:
        """Sample the vehicle.

        Args:
            frame: Current frame number
            vehicle: Vehicle to sample
            containment: Containment applied this frame

        Returns:
            True if a sample was recorded
        """
        contained = containment != Containment.NONE
        if contained:
            self._containment_frames += 1

        if frame % self.config.sample_every != 0:
            return False

        telemetry = vehicle.get_telemetry()
        values = {
            "x": telemetry["x"],
            "y": telemetry["y"],
            "speed": telemetry["speed"],
            "heading_deg": telemetry["heading_deg"],
            "contained": float(contained),
        }
        for name, value in values.items():
            self._channels[name].record(frame, value)
        return True

    def record_checkpoint(self, event: CheckpointEvent) -> None:
        """Store a checkpoint crossing."""
        self._checkpoints.append(event)

    def get_current_values(self) -> Dict[str, float]:
        """Most recent value from each channel."""
        return {name: ch.last_value for name, ch in self._channels.items()}

    def clear(self) -> None:
        """Clear all recorded data."""
        for channel in self._channels.values():
            channel.clear()
        self._checkpoints = []
        self._containment_frames = 0

    def get_summary(self) -> Dict[str, Any]:
        """Get run summary.

        Returns:
            Dictionary with channel statistics and checkpoint times
        """
        return {
            "samples": self._channels["x"].count,
            "containment_frames": self._containment_frames,
            "top_speed": self._channels["speed"].max_value,
            "checkpoints": [
                {"index": e.index, "elapsed_ms": e.elapsed_ms} for e in self._checkpoints
            ],
            "channels": {name: ch.get_state() for name, ch in self._channels.items()},
        }
