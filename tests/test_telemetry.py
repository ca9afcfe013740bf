"""Tests for the trackday telemetry module."""

import pytest
import numpy as np

from trackday.car.vehicle import Vehicle, VehicleInputs
from trackday.scoring.run_state import CheckpointEvent
from trackday.telemetry.channel import ChannelConfig, TelemetryChannel
from trackday.telemetry.recorder import RecorderConfig, TelemetryRecorder
from trackday.track.course import Containment


class TestTelemetryChannel:
    """Test single telemetry channel."""

    def test_statistics(self):
        """Test running statistics."""
        channel = TelemetryChannel(name="speed")
        for frame, value in enumerate([1.0, 3.0, 2.0]):
            channel.record(frame, value)

        assert channel.count == 3
        assert channel.min_value == 1.0
        assert channel.max_value == 3.0
        assert channel.mean == pytest.approx(2.0)
        assert channel.last_value == 2.0

    def test_empty(self):
        """Test an empty channel reports zeros."""
        channel = TelemetryChannel()

        assert channel.count == 0
        assert channel.mean == 0.0
        assert channel.get_state()["min"] is None

    def test_buffer_bounded(self):
        """Test old samples are evicted past the buffer size."""
        channel = TelemetryChannel(ChannelConfig(name="x", buffer_size=3))
        for frame in range(5):
            channel.record(frame, float(frame))

        assert np.array_equal(channel.get_values(), [2.0, 3.0, 4.0])
        assert np.array_equal(channel.get_frames(), [2, 3, 4])
        assert channel.count == 5

    def test_last_n(self):
        """Test tail access."""
        channel = TelemetryChannel()
        for frame in range(4):
            channel.record(frame, float(frame))

        assert np.array_equal(channel.get_last_n(2), [2.0, 3.0])
        assert channel.get_last_n(0).size == 0

    def test_clear(self):
        """Test clearing resets data and statistics."""
        channel = TelemetryChannel()
        channel.record(0, 5.0)
        channel.clear()

        assert channel.count == 0
        assert channel.get_values().size == 0


class TestTelemetryRecorder:
    """Test run recorder."""

    def test_record_vehicle(self):
        """Test vehicle samples land in each channel."""
        recorder = TelemetryRecorder()
        vehicle = Vehicle()
        for frame in range(5):
            vehicle.step(VehicleInputs(accelerate=True))
            recorder.record(frame, vehicle, Containment.NONE)

        values = recorder.get_current_values()
        assert values["x"] == vehicle.state.x
        assert values["speed"] == pytest.approx(0.5)
        assert recorder.get_channel("speed").count == 5

    def test_sample_every(self):
        """Test decimated recording."""
        recorder = TelemetryRecorder(RecorderConfig(sample_every=2))
        vehicle = Vehicle()
        recorded = [recorder.record(frame, vehicle, Containment.NONE) for frame in range(6)]

        assert recorded == [True, False, True, False, True, False]
        assert recorder.get_channel("x").count == 3

    def test_invalid_sample_every(self):
        """Test sample interval must be positive."""
        with pytest.raises(ValueError):
            TelemetryRecorder(RecorderConfig(sample_every=0))

    def test_containment_counted(self):
        """Test frames held against a wall are counted."""
        recorder = TelemetryRecorder()
        vehicle = Vehicle()
        recorder.record(0, vehicle, Containment.LEFT)
        recorder.record(1, vehicle, Containment.NONE)

        summary = recorder.get_summary()
        assert summary["containment_frames"] == 1
        assert recorder.get_channel("contained").max_value == 1.0

    def test_checkpoints(self):
        """Test checkpoint events appear in the summary."""
        recorder = TelemetryRecorder()
        recorder.record_checkpoint(CheckpointEvent(1, 0))
        recorder.record_checkpoint(CheckpointEvent(2, 1500))

        summary = recorder.get_summary()
        assert summary["checkpoints"] == [
            {"index": 1, "elapsed_ms": 0},
            {"index": 2, "elapsed_ms": 1500},
        ]

    def test_clear(self):
        """Test clearing the recorder."""
        recorder = TelemetryRecorder()
        recorder.record(0, Vehicle(), Containment.TOP)
        recorder.record_checkpoint(CheckpointEvent(1, 0))
        recorder.clear()

        summary = recorder.get_summary()
        assert summary["samples"] == 0
        assert summary["checkpoints"] == []
        assert summary["containment_frames"] == 0
