"""
Interfaces - Narrow seams to the outside world.

The simulation core never touches a window, the OS event queue or image
files directly. It talks to these collaborators instead:
- Clock: monotonic millisecond counter
- InputSource: per-frame press/release/quit events
- Renderer: textured quad drawing and frame presentation
- AssetLoader: texture handles with pixel dimensions

Headless implementations are provided for tests and scripted runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence
import time


class Clock(Protocol):
    """Monotonic millisecond clock."""

    def ticks_ms(self) -> int:
        ...


class MonotonicClock:
    """Wall clock backed by time.monotonic()."""

    def __init__(self):
        self._origin = time.monotonic()

    def ticks_ms(self) -> int:
        return int((time.monotonic() - self._origin) * 1000)


class ManualClock:
    """Clock that only moves when told to.

    Usage:
        clock = ManualClock()
        timer = Timer(clock)
        timer.start()
        clock.advance(500)
    """

    def __init__(self, start: int = 0):
        self._ticks = int(start)

    def ticks_ms(self) -> int:
        return self._ticks

    def advance(self, ms: int) -> int:
        """Move the clock forward.

        Args:
            ms: Milliseconds to advance (negative values are ignored)

        Returns:
            New tick value
        """
        if ms > 0:
            self._ticks += int(ms)
        return self._ticks


class Control(Enum):
    """Directional controls."""
    ACCELERATE = "accelerate"
    BRAKE = "brake"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


class EventKind(Enum):
    """Input event types."""
    PRESS = "press"
    RELEASE = "release"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """Single input event from the platform layer."""
    kind: EventKind
    control: Control | None = None
    repeat: bool = False  # Auto-repeat from a held key

    @classmethod
    def press(cls, control: Control, repeat: bool = False) -> "InputEvent":
        return cls(EventKind.PRESS, control, repeat)

    @classmethod
    def release(cls, control: Control) -> "InputEvent":
        return cls(EventKind.RELEASE, control)

    @classmethod
    def quit(cls) -> "InputEvent":
        return cls(EventKind.QUIT)


class InputSource(Protocol):
    """Per-frame event queue."""

    def poll(self) -> Iterable[InputEvent]:
        ...


class ScriptedInputSource:
    """Input source that replays a fixed list of frames.

    Each poll() returns the next frame's events; once the script is
    exhausted every poll returns nothing.
    """

    def __init__(self, frames: Sequence[Sequence[InputEvent]] = ()):
        self._frames: List[List[InputEvent]] = [list(f) for f in frames]
        self._cursor: int = 0

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._frames)

    def extend(self, frames: Sequence[Sequence[InputEvent]]) -> None:
        """Append more frames to the script."""
        self._frames.extend(list(f) for f in frames)

    def poll(self) -> List[InputEvent]:
        if self.exhausted:
            return []
        events = self._frames[self._cursor]
        self._cursor += 1
        return events


@dataclass(frozen=True)
class Texture:
    """Opaque texture handle plus its pixel size."""
    handle: Any
    width: int
    height: int


class AssetLoader(Protocol):
    """Loads textures by path."""

    def load(self, path: str) -> Optional[Texture]:
        ...


class StaticAssetLoader:
    """Asset loader backed by an in-memory mapping of path -> Texture."""

    def __init__(self, textures: Mapping[str, Texture] | None = None):
        self._textures: Dict[str, Texture] = dict(textures or {})

    def add(self, path: str, texture: Texture) -> None:
        self._textures[path] = texture

    def load(self, path: str) -> Optional[Texture]:
        return self._textures.get(path)


class Renderer(Protocol):
    """Frame presentation layer."""

    def draw(self, texture: Texture, x: float, y: float, rotation_degrees: float = 0.0) -> None:
        ...

    def present(self) -> None:
        ...


@dataclass(frozen=True)
class DrawCall:
    """One recorded draw() invocation."""
    texture: Texture
    x: float
    y: float
    rotation_degrees: float


@dataclass
class RecordingRenderer:
    """Renderer that records draw calls instead of drawing.

    Calls made since the last present() are in `pending`; every presented
    frame is appended to `frames`.
    """
    pending: List[DrawCall] = field(default_factory=list)
    frames: List[List[DrawCall]] = field(default_factory=list)

    def draw(self, texture: Texture, x: float, y: float, rotation_degrees: float = 0.0) -> None:
        self.pending.append(DrawCall(texture, x, y, rotation_degrees))

    def present(self) -> None:
        self.frames.append(self.pending)
        self.pending = []

    @property
    def last_frame(self) -> List[DrawCall]:
        return self.frames[-1] if self.frames else []
