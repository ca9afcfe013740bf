"""
Scoring module - Run timing and checkpoint progress.

This module contains:
- Timer: Start/stop/pause stopwatch on an injected clock
- RunState: Ordered checkpoint state machine gating the timer
- CheckpointEvent: (index, elapsed) record emitted per checkpoint
"""

from trackday.scoring.timer import Timer
from trackday.scoring.run_state import RunState, RunPhase, CheckpointEvent

__all__ = [
    "Timer",
    "RunState",
    "RunPhase",
    "CheckpointEvent",
]
