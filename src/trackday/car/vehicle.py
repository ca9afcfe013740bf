"""
Vehicle - Arcade kinematics for a single top-down car.

Integrates:
- Longitudinal speed (acceleration, braking, coasting decay)
- Speed-scaled turning
- Heading-based displacement with wall containment
- Collider kept in sync with position
"""

from dataclasses import dataclass, replace
from typing import Dict, Any
import numpy as np

from trackday.interfaces import Control, EventKind, InputEvent
from trackday.track.course import Containment, ContainmentLimits
from trackday.track.geometry import Rect


@dataclass
class VehicleConfig:
    """Vehicle configuration.

    Speeds are in world units per step, turn rate in radians per step.
    """
    width: float = 128.0
    height: float = 64.0

    max_speed: float = 50.0
    acceleration: float = 0.1   # Speed gained per step under power
    deceleration: float = 0.2   # Speed shed per step when braking or coasting
    turn_rate: float = 0.08     # Heading change per step at max speed

    # Spawn pose
    start_x: float = 1384.0
    start_y: float = 580.0
    start_heading: float = 0.0

    def __post_init__(self):
        if self.max_speed <= 0:
            raise ValueError("max_speed must be positive")
        if self.acceleration < 0 or self.deceleration < 0 or self.turn_rate < 0:
            raise ValueError("acceleration, deceleration and turn_rate must be non-negative")
        if self.width < 0 or self.height < 0:
            raise ValueError("Vehicle size must be non-negative")


@dataclass
class VehicleInputs:
    """Held directional controls.

    Flags change only on press/release transitions; auto-repeat events
    from a held key are ignored.
    """
    accelerate: bool = False
    brake: bool = False
    turn_left: bool = False
    turn_right: bool = False

    def apply(self, event: InputEvent) -> None:
        """Update flags from a platform input event.

        Args:
            event: Press/release event (quit and repeat events are ignored)
        """
        if event.repeat or event.control is None:
            return
        if event.kind == EventKind.PRESS:
            pressed = True
        elif event.kind == EventKind.RELEASE:
            pressed = False
        else:
            return

        if event.control == Control.ACCELERATE:
            self.accelerate = pressed
        elif event.control == Control.BRAKE:
            self.brake = pressed
        elif event.control == Control.TURN_LEFT:
            self.turn_left = pressed
        elif event.control == Control.TURN_RIGHT:
            self.turn_right = pressed

    def clear(self) -> None:
        """Release everything."""
        self.accelerate = False
        self.brake = False
        self.turn_left = False
        self.turn_right = False


@dataclass
class VehicleState:
    """Current vehicle pose and speed."""
    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0   # Radians, 0 = +X, positive turns towards +Y
    speed: float = 0.0     # Signed, negative when reversing


class Vehicle:
    """Single controllable vehicle.

    The vehicle owns its position, heading and speed. Each step consumes
    the held inputs plus the containment decided for this frame.

    Usage:
        vehicle = Vehicle()
        vehicle.step(VehicleInputs(accelerate=True))
        box = vehicle.collider
    """

    def __init__(self, config: VehicleConfig | None = None):
        """Initialize vehicle at its configured spawn pose.

        Args:
            config: Vehicle configuration. Uses defaults if None.
        """
        self.config = config or VehicleConfig()
        self.state = VehicleState()
        self.reset()

    def reset(
        self,
        x: float | None = None,
        y: float | None = None,
        heading: float | None = None,
    ) -> None:
        """Reset to rest at the given pose (spawn pose by default).

        Args:
            x: Starting X position
            y: Starting Y position
            heading: Starting heading in radians
        """
        self.state = VehicleState(
            x=self.config.start_x if x is None else x,
            y=self.config.start_y if y is None else y,
            heading=self.config.start_heading if heading is None else heading,
        )

    def resize(self, width: float, height: float) -> None:
        """Change the collider size, keeping the current pose."""
        self.config = replace(self.config, width=float(width), height=float(height))

    @property
    def speed(self) -> float:
        return self.state.speed

    @property
    def heading(self) -> float:
        return self.state.heading

    @property
    def position(self) -> tuple[float, float]:
        """Current (x, y) position."""
        return (self.state.x, self.state.y)

    @property
    def rotation_degrees(self) -> float:
        """Heading in degrees, as renderers expect it."""
        return float(np.degrees(self.state.heading))

    @property
    def collider(self) -> Rect:
        """Bounding box at the current position."""
        return Rect(self.state.x, self.state.y, self.config.width, self.config.height)

    def _update_speed(self, inputs: VehicleInputs) -> float:
        speed = self.state.speed
        max_speed = self.config.max_speed
        acc = self.config.acceleration
        dec = self.config.deceleration

        if inputs.accelerate and speed < max_speed:
            # Braking force applies while still rolling backwards
            speed = min(speed + (dec if speed < 0 else acc), max_speed)

        if inputs.brake and speed > -max_speed:
            speed = max(speed - (dec if speed > 0 else acc), -max_speed)

        if not inputs.accelerate and not inputs.brake:
            if speed - dec > 0:
                speed -= dec
            elif speed + dec < 0:
                speed += dec
            else:
                speed = 0.0

        return speed

    def _update_heading(self, inputs: VehicleInputs, speed: float) -> float:
        heading = self.state.heading
        if speed == 0:
            return heading

        turn = self.config.turn_rate * speed / self.config.max_speed
        if inputs.turn_right:
            heading += turn
        if inputs.turn_left:
            heading -= turn

        # Keep heading in [-pi, pi]
        while heading > np.pi:
            heading -= 2 * np.pi
        while heading < -np.pi:
            heading += 2 * np.pi
        return heading

    def step(
        self,
        inputs: VehicleInputs,
        containment: Containment = Containment.NONE,
        limits: ContainmentLimits | None = None,
    ) -> VehicleState:
        """Advance vehicle by one simulation step.

        Args:
            inputs: Held directional controls
            containment: Wall the vehicle is held against this step
            limits: Clamp coordinates for each wall

        Returns:
            Updated vehicle state
        """
        limits = limits or ContainmentLimits()

        speed = self._update_speed(inputs)
        heading = self._update_heading(inputs, speed)

        dx = float(np.cos(heading)) * speed
        dy = float(np.sin(heading)) * speed
        x = self.state.x + dx
        y = self.state.y + dy

        if containment == Containment.LEFT:
            x = limits.left
        elif containment == Containment.RIGHT:
            x = limits.right
        elif containment == Containment.TOP:
            y = limits.top
        elif containment == Containment.BOTTOM:
            y = limits.bottom

        self.state = VehicleState(x=x, y=y, heading=float(heading), speed=float(speed))
        return self.state

    def get_telemetry(self) -> Dict[str, Any]:
        """Get vehicle telemetry.

        Returns:
            Dictionary containing vehicle state
        """
        return {
            "x": self.state.x,
            "y": self.state.y,
            "heading_rad": self.state.heading,
            "heading_deg": self.rotation_degrees,
            "speed": self.state.speed,
            "speed_fraction": self.state.speed / self.config.max_speed,
        }

    def get_observation(self) -> np.ndarray:
        """Get vehicle state as a flat vector.

        Returns:
            Numpy array [x, y, heading, speed / max_speed]
        """
        return np.array([
            self.state.x,
            self.state.y,
            self.state.heading,
            self.state.speed / self.config.max_speed,
        ], dtype=np.float32)
