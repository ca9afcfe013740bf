"""
Geometry - Axis-aligned rectangles and overlap testing.

Provides:
- Rect: immutable axis-aligned box in world coordinates
- intersects: half-open AABB overlap test
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.

    (x, y) is the top-left corner; y grows downwards as in screen space.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative (got {self.width}x{self.height})"
            )

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Center point (x, y)."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    def moved_to(self, x: float, y: float) -> "Rect":
        """Return a rect of the same size with its corner at (x, y)."""
        return replace(self, x=x, y=y)

    def get_state(self) -> dict:
        """Get rect for serialization."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


def intersects(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles overlap with positive area.

    Edges are half-open: rectangles that only share a boundary do not
    intersect, and a zero-area rectangle never intersects anything.

    Args:
        a: First rectangle
        b: Second rectangle

    Returns:
        True if the rectangles overlap
    """
    if a.area == 0 or b.area == 0:
        return False
    if a.bottom <= b.top:
        return False
    if a.top >= b.bottom:
        return False
    if a.right <= b.left:
        return False
    if a.left >= b.right:
        return False
    return True
