"""
Track module - World geometry, walls and checkpoints.

This module contains:
- Rect: Axis-aligned rectangle with half-open overlap test
- WallSet: Static walls framing the world
- Course: World bounds plus ordered checkpoints
- resolve_containment: Fixed-priority wall resolution
"""

from trackday.track.geometry import Rect, intersects
from trackday.track.course import (
    Containment,
    ContainmentLimits,
    Course,
    CourseConfig,
    WallSet,
    default_course,
    resolve_containment,
)

__all__ = [
    "Rect",
    "intersects",
    "Containment",
    "ContainmentLimits",
    "Course",
    "CourseConfig",
    "WallSet",
    "default_course",
    "resolve_containment",
]
