"""
Telemetry channel - Single in-memory time series.

Provides:
- Bounded sample buffer
- Running min/max/mean
- Numpy access to recorded data
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque
import numpy as np


@dataclass
class ChannelConfig:
    """Configuration for a telemetry channel."""
    name: str = "unnamed"
    unit: str = ""
    precision: int = 3
    buffer_size: int = 10000


class TelemetryChannel:
    """Single telemetry data channel.

    Samples are keyed by frame number. Statistics cover every sample ever
    recorded, even those evicted from the buffer.
    """

    def __init__(self, config: ChannelConfig | None = None, name: str = "channel"):
        """Initialize channel.

        Args:
            config: Channel configuration
            name: Channel name (used if config not provided)
        """
        if config is None:
            config = ChannelConfig(name=name)
        self.config = config

        self._frames: Deque[int] = deque(maxlen=config.buffer_size)
        self._values: Deque[float] = deque(maxlen=config.buffer_size)

        self._min: float = float('inf')
        self._max: float = float('-inf')
        self._sum: float = 0.0
        self._count: int = 0

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def count(self) -> int:
        """Number of samples recorded over the channel's lifetime."""
        return self._count

    @property
    def min_value(self) -> float:
        return self._min if self._count > 0 else 0.0

    @property
    def max_value(self) -> float:
        return self._max if self._count > 0 else 0.0

    @property
    def mean(self) -> float:
        return self._sum / self._count if self._count > 0 else 0.0

    @property
    def last_value(self) -> float:
        return self._values[-1] if self._values else 0.0

    def record(self, frame: int, value: float) -> None:
        """Record a new value.

        Args:
            frame: Frame number
            value: Value to record
        """
        value = float(value)
        self._frames.append(frame)
        self._values.append(value)

        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._sum += value
        self._count += 1

    def get_values(self) -> np.ndarray:
        return np.array(self._values, dtype=float)

    def get_frames(self) -> np.ndarray:
        return np.array(self._frames, dtype=np.int64)

    def get_last_n(self, n: int) -> np.ndarray:
        """Get the last n buffered values."""
        if n <= 0:
            return np.array([], dtype=float)
        return self.get_values()[-n:]

    def clear(self) -> None:
        """Clear all recorded data."""
        self._frames.clear()
        self._values.clear()
        self._min = float('inf')
        self._max = float('-inf')
        self._sum = 0.0
        self._count = 0

    def get_state(self) -> dict:
        """Get channel summary.

        Returns:
            Dictionary with channel statistics
        """
        has_data = self._count > 0
        precision = self.config.precision
        return {
            "name": self.config.name,
            "unit": self.config.unit,
            "count": self._count,
            "min": round(self._min, precision) if has_data else None,
            "max": round(self._max, precision) if has_data else None,
            "mean": round(self.mean, precision) if has_data else None,
            "last": round(self.last_value, precision) if has_data else None,
        }
