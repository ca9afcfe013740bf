"""
Course - World boundaries and checkpoint layout.

Defines:
- Boundary walls around the playable world
- Containment resolution against those walls
- Ordered checkpoint regions
- The stock checkpoint course
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from trackday.track.geometry import Rect, intersects


class Containment(Enum):
    """Which boundary the vehicle is being held against this step."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class ContainmentLimits:
    """Coordinates the vehicle is clamped to when touching a wall."""
    left: float = 1.0      # x when held against the left wall
    right: float = 3871.0  # x when held against the right wall
    top: float = 1.0       # y when held against the top wall
    bottom: float = 1921.0  # y when held against the bottom wall

    @classmethod
    def for_world(
        cls,
        world_width: float,
        world_height: float,
        vehicle_width: float,
        vehicle_height: float,
        margin: float = 1.0,
    ) -> "ContainmentLimits":
        """Derive limits that keep a vehicle of the given size inside the world.

        Args:
            world_width: Playable world width
            world_height: Playable world height
            vehicle_width: Vehicle collider width
            vehicle_height: Vehicle collider height
            margin: Gap left between vehicle and wall

        Returns:
            Containment limits
        """
        return cls(
            left=margin,
            right=world_width - vehicle_width - margin,
            top=margin,
            bottom=world_height - vehicle_height - margin,
        )

    def fits(
        self,
        world_width: float,
        world_height: float,
        vehicle_width: float,
        vehicle_height: float,
    ) -> bool:
        """Check a vehicle clamped to these limits stays clear of every wall.

        Edge contact with a wall does not count as overlap.
        """
        return (
            self.left >= 0
            and self.top >= 0
            and self.right + vehicle_width <= world_width
            and self.bottom + vehicle_height <= world_height
        )


@dataclass(frozen=True)
class WallSet:
    """Four static walls framing the world."""
    left: Rect
    right: Rect
    top: Rect
    bottom: Rect

    @classmethod
    def around(cls, world_width: float, world_height: float, thickness: float = 40.0) -> "WallSet":
        """Build walls just outside a world of the given size.

        Args:
            world_width: Playable world width
            world_height: Playable world height
            thickness: Wall thickness

        Returns:
            Wall set enclosing (0, 0) - (world_width, world_height)
        """
        t = thickness
        return cls(
            left=Rect(-t, -t, t, world_height + 2 * t),
            right=Rect(world_width, -t, t, world_height + 2 * t),
            top=Rect(-t, -t, world_width + 2 * t, t),
            bottom=Rect(-t, world_height, world_width + 2 * t, t),
        )

    def ordered(self) -> Iterator[Tuple[Containment, Rect]]:
        """Walls in resolution priority order: left, right, top, bottom."""
        yield Containment.LEFT, self.left
        yield Containment.RIGHT, self.right
        yield Containment.TOP, self.top
        yield Containment.BOTTOM, self.bottom


def resolve_containment(collider: Rect, walls: WallSet) -> Containment:
    """Pick the containment rule for this step.

    Walls are tested in fixed priority order and the first hit wins, so a
    collider wedged into a corner only gets the higher-priority wall's rule.

    Args:
        collider: Vehicle collider
        walls: World walls

    Returns:
        Containment for the first wall hit, or Containment.NONE
    """
    for containment, wall in walls.ordered():
        if intersects(wall, collider):
            return containment
    return Containment.NONE


@dataclass
class CourseConfig:
    """Course configuration."""
    name: str = "Checkpoint Course"
    world_width: float = 4000.0
    world_height: float = 2000.0
    wall_thickness: float = 40.0
    limits: ContainmentLimits = field(default_factory=ContainmentLimits)


class Course:
    """Bounded world with an ordered list of checkpoints.

    The checkpoint order is the required traversal order.
    """

    def __init__(
        self,
        checkpoints: Sequence[Rect],
        config: CourseConfig | None = None,
    ):
        """Initialize course.

        Args:
            checkpoints: Checkpoint regions in traversal order
            config: Course configuration. Uses defaults if None.
        """
        self.config = config or CourseConfig()
        if self.config.world_width <= 0 or self.config.world_height <= 0:
            raise ValueError("World dimensions must be positive")
        if not checkpoints:
            raise ValueError("Course needs at least one checkpoint")

        self.checkpoints: Tuple[Rect, ...] = tuple(checkpoints)
        self.walls = WallSet.around(
            self.config.world_width,
            self.config.world_height,
            self.config.wall_thickness,
        )

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def limits(self) -> ContainmentLimits:
        return self.config.limits

    @property
    def world_width(self) -> float:
        return self.config.world_width

    @property
    def world_height(self) -> float:
        return self.config.world_height

    @property
    def num_checkpoints(self) -> int:
        return len(self.checkpoints)

    @property
    def bounds(self) -> Rect:
        """Playable area."""
        return Rect(0.0, 0.0, self.config.world_width, self.config.world_height)

    def get_state(self) -> dict:
        """Get course state for serialization."""
        return {
            "name": self.config.name,
            "world_width": self.config.world_width,
            "world_height": self.config.world_height,
            "num_checkpoints": self.num_checkpoints,
            "checkpoints": [cp.get_state() for cp in self.checkpoints],
        }


# Stock course: nine gates laid out as one loop of a 4000x2000 world.
_DEFAULT_CHECKPOINTS: List[Rect] = [
    Rect(2371, 229, 40, 200),
    Rect(3282, 90, 40, 200),
    Rect(3425, 508, 40, 200),
    Rect(2960, 962, 200, 40),
    Rect(1980, 838, 40, 200),
    Rect(1880, 1440, 200, 40),
    Rect(760, 1150, 40, 200),
    Rect(720, 720, 40, 200),
    Rect(1500, 500, 40, 200),
]


def default_course() -> Course:
    """Build the stock nine-checkpoint course."""
    return Course(_DEFAULT_CHECKPOINTS)
