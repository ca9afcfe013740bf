"""
Run state - Ordered checkpoint progress and run timing.

Provides:
- Next-checkpoint tracking (no skipping possible)
- Timer gating: start at the first checkpoint, freeze at the last
- Checkpoint events with elapsed time
- Split times between checkpoints
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from trackday.scoring.timer import Timer
from trackday.track.geometry import Rect, intersects

logger = logging.getLogger(__name__)


class RunPhase(Enum):
    """Phase of a checkpoint run."""
    IDLE = "idle"          # No checkpoint reached yet
    RUNNING = "running"    # Timer counting, checkpoints remaining
    COMPLETE = "complete"  # All checkpoints reached, time frozen


@dataclass(frozen=True)
class CheckpointEvent:
    """Emitted each time the next expected checkpoint is reached."""
    index: int        # Number of checkpoints reached so far (1..N)
    elapsed_ms: int   # Run timer reading at the moment of crossing

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0


class RunState:
    """Checkpoint/run state machine.

    Only the single next expected checkpoint is ever tested, so driving
    through a later checkpoint early does nothing. Once every checkpoint
    has been reached the run is complete and no further transitions occur.
    """

    def __init__(self, checkpoints: Sequence[Rect], timer: Timer | None = None):
        """Initialize run state.

        Args:
            checkpoints: Checkpoint regions in required order
            timer: Run timer. A fresh Timer is created if None.
        """
        if not checkpoints:
            raise ValueError("Run needs at least one checkpoint")

        self.checkpoints: Tuple[Rect, ...] = tuple(checkpoints)
        self.timer = timer or Timer()

        self._next_index: int = 0
        self._events: List[CheckpointEvent] = []

    @property
    def next_index(self) -> int:
        """Index of the next expected checkpoint (N once complete)."""
        return self._next_index

    @property
    def num_checkpoints(self) -> int:
        return len(self.checkpoints)

    @property
    def phase(self) -> RunPhase:
        if self._next_index == 0:
            return RunPhase.IDLE
        if self._next_index >= self.num_checkpoints:
            return RunPhase.COMPLETE
        return RunPhase.RUNNING

    @property
    def is_complete(self) -> bool:
        return self._next_index >= self.num_checkpoints

    @property
    def next_checkpoint(self) -> Optional[Rect]:
        """Region that must be crossed next, None once complete."""
        if self.is_complete:
            return None
        return self.checkpoints[self._next_index]

    @property
    def progress(self) -> float:
        """Fraction of checkpoints reached (0-1)."""
        return self._next_index / self.num_checkpoints

    @property
    def events(self) -> Tuple[CheckpointEvent, ...]:
        return tuple(self._events)

    @property
    def final_time_ms(self) -> Optional[int]:
        """Frozen run time, None until complete."""
        if not self.is_complete:
            return None
        return self.timer.elapsed_ms()

    def update(self, collider: Rect) -> Optional[CheckpointEvent]:
        """Test the collider against the next expected checkpoint.

        Args:
            collider: Vehicle collider for this step

        Returns:
            CheckpointEvent if a checkpoint was reached, None otherwise
        """
        if self.is_complete:
            return None
        if not intersects(collider, self.checkpoints[self._next_index]):
            return None

        self._next_index += 1

        if self._next_index == 1:
            self.timer.start()
        if self._next_index == self.num_checkpoints:
            self.timer.pause()

        event = CheckpointEvent(index=self._next_index, elapsed_ms=self.timer.elapsed_ms())
        self._events.append(event)

        logger.info(
            "Checkpoint %d/%d reached at %.3f s",
            event.index, self.num_checkpoints, event.elapsed_seconds,
        )
        if self.is_complete:
            logger.info("Run complete in %.3f s", event.elapsed_seconds)

        return event

    def splits_ms(self) -> List[int]:
        """Time between consecutive checkpoint events.

        Returns:
            One split per event after the first (the first event starts the
            timer and always reads 0)
        """
        if len(self._events) < 2:
            return []
        times = np.array([e.elapsed_ms for e in self._events], dtype=np.int64)
        return [int(d) for d in np.diff(times)]

    def reset(self) -> None:
        """Return to the idle phase with the timer stopped."""
        self._next_index = 0
        self._events = []
        self.timer.stop()

    def get_state(self) -> dict:
        """Get run state.

        Returns:
            Dictionary with run state
        """
        return {
            "phase": self.phase.value,
            "next_index": self._next_index,
            "num_checkpoints": self.num_checkpoints,
            "progress": self.progress,
            "elapsed_ms": self.timer.elapsed_ms(),
            "final_time_ms": self.final_time_ms,
            "splits_ms": self.splits_ms(),
        }
