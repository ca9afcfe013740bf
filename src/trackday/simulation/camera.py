"""
Camera - Viewport offset following the vehicle.

The viewport stays centered on the vehicle except inside the dead zone
near each world edge, where the offset is pinned so the view never shows
anything outside the world.
"""

from dataclasses import dataclass
import numpy as np


@dataclass
class Camera:
    """Viewport tracking a point in world space."""
    viewport_width: float = 1280.0
    viewport_height: float = 760.0
    world_width: float = 4000.0
    world_height: float = 2000.0

    offset_x: float = 0.0
    offset_y: float = 0.0

    @property
    def max_offset_x(self) -> float:
        return max(0.0, self.world_width - self.viewport_width)

    @property
    def max_offset_y(self) -> float:
        return max(0.0, self.world_height - self.viewport_height)

    def update(self, x: float, y: float) -> tuple[float, float]:
        """Recenter the viewport on (x, y).

        Args:
            x: Tracked world X
            y: Tracked world Y

        Returns:
            New (offset_x, offset_y)
        """
        self.offset_x = float(np.clip(x - self.viewport_width / 2, 0.0, self.max_offset_x))
        self.offset_y = float(np.clip(y - self.viewport_height / 2, 0.0, self.max_offset_y))
        return (self.offset_x, self.offset_y)

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Convert a world position to screen coordinates."""
        return (x - self.offset_x, y - self.offset_y)

    def reset(self) -> None:
        self.offset_x = 0.0
        self.offset_y = 0.0
