"""
Timer - Start/stop/pause stopwatch on an injected clock.

Provides:
- Millisecond elapsed time
- Pause that freezes the reading without losing it
- Resume that continues seamlessly from the frozen reading
"""

from trackday.interfaces import Clock, MonotonicClock


class Timer:
    """Stopwatch driven by a Clock.

    The timer is always in exactly one of three states: idle, running or
    paused. Calls that make no sense in the current state are ignored.

    Usage:
        timer = Timer(clock)
        timer.start()
        ...
        timer.pause()
        final_ms = timer.elapsed_ms()
    """

    def __init__(self, clock: Clock | None = None):
        """Initialize timer in the idle state.

        Args:
            clock: Tick source. Uses a MonotonicClock if None.
        """
        self.clock = clock or MonotonicClock()

        self._start_ticks: int = 0
        self._paused_ticks: int = 0
        self._started: bool = False
        self._paused: bool = False

    @property
    def is_started(self) -> bool:
        """True while running or paused."""
        return self._started

    @property
    def is_paused(self) -> bool:
        """True only while started and paused."""
        return self._started and self._paused

    @property
    def is_running(self) -> bool:
        """True while started and counting."""
        return self._started and not self._paused

    def start(self) -> None:
        """Start (or restart) counting from zero."""
        self._started = True
        self._paused = False
        self._start_ticks = self.clock.ticks_ms()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Return to idle and forget all captured ticks."""
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the elapsed reading. No-op unless running."""
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = self.clock.ticks_ms() - self._start_ticks
            self._start_ticks = 0

    def unpause(self) -> None:
        """Resume counting from the frozen reading. No-op unless paused."""
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = self.clock.ticks_ms() - self._paused_ticks
            self._paused_ticks = 0

    def elapsed_ms(self) -> int:
        """Get elapsed time.

        Returns:
            Milliseconds since start, the frozen value while paused, or 0
            when idle
        """
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return self.clock.ticks_ms() - self._start_ticks

    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return self.elapsed_ms() / 1000.0

    def get_state(self) -> dict:
        """Get timer state.

        Returns:
            Dictionary with timer state
        """
        return {
            "started": self.is_started,
            "paused": self.is_paused,
            "elapsed_ms": self.elapsed_ms(),
        }
