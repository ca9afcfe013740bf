"""
Simulator - Frame loop tying input, kinematics, collision and timing together.

Provides:
- One-step-per-frame orchestration
- Wall containment resolution
- Checkpoint run tracking and callbacks
- Rendering hand-off to an external renderer
- Telemetry collection
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from trackday.car.vehicle import Vehicle
from trackday.interfaces import (
    AssetLoader,
    Clock,
    EventKind,
    InputSource,
    MonotonicClock,
    Renderer,
    Texture,
)
from trackday.scoring.run_state import CheckpointEvent, RunState
from trackday.scoring.timer import Timer
from trackday.simulation.camera import Camera
from trackday.simulation.context import SimulationContext
from trackday.telemetry.recorder import TelemetryRecorder
from trackday.track.course import (
    ContainmentLimits,
    Course,
    default_course,
    resolve_containment,
)

logger = logging.getLogger(__name__)


@dataclass
class SimulatorConfig:
    """Simulator configuration."""
    # Viewport
    viewport_width: int = 1280
    viewport_height: int = 760

    # Simulation limits
    max_frames: int = 0              # Stop after this many frames (0 = unlimited)
    stop_on_complete: bool = False   # Stop once every checkpoint is reached

    # Assets
    car_texture: str = "car.bmp"
    background_texture: str = "background.png"

    enable_telemetry: bool = True


class Simulator:
    """Single-vehicle checkpoint simulator.

    Each call to step() is one frame: poll input, resolve wall containment,
    move the vehicle, follow it with the camera, test the next checkpoint,
    then hand draw calls to the renderer.

    Usage:
        sim = Simulator(input_source=source, renderer=renderer,
                        asset_loader=loader, clock=clock)
        if not sim.run():
            ...  # assets failed to load
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        course: Course | None = None,
        vehicle: Vehicle | None = None,
        clock: Clock | None = None,
        input_source: InputSource | None = None,
        renderer: Renderer | None = None,
        asset_loader: AssetLoader | None = None,
    ):
        """Initialize simulator.

        Args:
            config: Simulator configuration. Uses defaults if None.
            course: Walls and checkpoints. Uses the stock course if None.
            vehicle: Vehicle to drive. A default vehicle is created if None.
            clock: Clock for the run timer
            input_source: Per-frame input events (no input if None)
            renderer: Draw target (headless if None)
            asset_loader: Texture source (rendering disabled if None)
        """
        self.config = config or SimulatorConfig()
        self.course = course or default_course()
        self.vehicle = vehicle or Vehicle()
        self.clock = clock or MonotonicClock()

        self.input_source = input_source
        self.renderer = renderer
        self.asset_loader = asset_loader

        self.camera = Camera(
            viewport_width=self.config.viewport_width,
            viewport_height=self.config.viewport_height,
            world_width=self.course.world_width,
            world_height=self.course.world_height,
        )
        self.run_state = RunState(self.course.checkpoints, Timer(self.clock))
        self.telemetry = TelemetryRecorder()
        self.limits = self._fit_limits()

        # State
        self._context = SimulationContext()
        self._running: bool = False
        self._textures: Dict[str, Texture] = {}

        self._checkpoint_callbacks: List[Callable[[CheckpointEvent], None]] = []

    @property
    def context(self) -> SimulationContext:
        return self._context

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def frame(self) -> int:
        return self._context.frame

    @property
    def assets_loaded(self) -> bool:
        return bool(self._textures)

    def add_checkpoint_callback(self, callback: Callable[[CheckpointEvent], None]) -> None:
        """Add callback called whenever a checkpoint is reached.

        Args:
            callback: Function taking the CheckpointEvent
        """
        self._checkpoint_callbacks.append(callback)

    def _fit_limits(self) -> ContainmentLimits:
        """Course clamp limits, or limits derived from the vehicle size if
        the course ones would leave the vehicle overlapping a wall."""
        width, height = self.vehicle.config.width, self.vehicle.config.height
        limits = self.course.limits
        if limits.fits(self.course.world_width, self.course.world_height, width, height):
            return limits

        logger.warning(
            "Course limits do not fit a %gx%g vehicle, deriving them from the world size",
            width, height,
        )
        return ContainmentLimits.for_world(
            self.course.world_width, self.course.world_height, width, height,
        )

    def load_assets(self) -> bool:
        """Load the car and background textures.

        The vehicle collider takes the pixel size of the car texture.

        Returns:
            True if every texture loaded
        """
        if self.asset_loader is None:
            logger.error("No asset loader configured")
            return False

        textures = {}
        success = True
        for key, path in (
            ("car", self.config.car_texture),
            ("background", self.config.background_texture),
        ):
            texture = self.asset_loader.load(path)
            if texture is None:
                logger.error("Failed to load %s texture from %s", key, path)
                success = False
            else:
                textures[key] = texture

        if success:
            self._textures = textures
            car = textures["car"]
            if (car.width, car.height) != (self.vehicle.config.width, self.vehicle.config.height):
                logger.info("Sizing vehicle collider to car texture (%dx%d)", car.width, car.height)
                self.vehicle.resize(car.width, car.height)
                self.limits = self._fit_limits()
        return success

    def start(self) -> None:
        """Start a fresh run.

        If frames were already stepped, everything is reset first so the
        new run begins from the spawn pose with no checkpoints reached.
        """
        if self._context.frame > 0:
            self.reset()
        self._context = SimulationContext()
        self._running = True
        logger.info(
            "Run started on '%s' with %d checkpoints",
            self.course.name, self.course.num_checkpoints,
        )

    def stop(self) -> None:
        """Stop the simulation."""
        if self._running:
            logger.info("Simulation stopped at frame %d", self._context.frame)
        self._running = False

    def _handle_input(self) -> None:
        if self.input_source is None:
            return
        for event in self.input_source.poll():
            if event.kind == EventKind.QUIT:
                self._context.quit = True
            else:
                self._context.inputs.apply(event)

    def _render(self) -> None:
        if self.renderer is None or not self._textures:
            return
        ctx = self._context
        self.renderer.draw(self._textures["background"], -ctx.offset_x, -ctx.offset_y, 0.0)
        screen_x, screen_y = self.camera.world_to_screen(self.vehicle.state.x, self.vehicle.state.y)
        self.renderer.draw(self._textures["car"], screen_x, screen_y, self.vehicle.rotation_degrees)
        self.renderer.present()

    def step(self) -> Optional[CheckpointEvent]:
        """Advance simulation by one frame.

        Returns:
            CheckpointEvent if a checkpoint was reached this frame
        """
        if not self._running:
            return None

        ctx = self._context

        self._handle_input()
        if ctx.quit:
            logger.info("Quit requested")
            self.stop()
            return None

        containment = resolve_containment(self.vehicle.collider, self.course.walls)
        if containment != ctx.containment:
            logger.debug("Containment %s -> %s", ctx.containment.value, containment.value)
        ctx.containment = containment

        self.vehicle.step(ctx.inputs, containment, self.limits)

        ctx.offset_x, ctx.offset_y = self.camera.update(self.vehicle.state.x, self.vehicle.state.y)

        event = self.run_state.update(self.vehicle.collider)
        if event is not None:
            if self.config.enable_telemetry:
                self.telemetry.record_checkpoint(event)
            for callback in self._checkpoint_callbacks:
                callback(event)

        self._render()

        if self.config.enable_telemetry:
            self.telemetry.record(ctx.frame, self.vehicle, containment)

        ctx.frame += 1

        if self.config.max_frames and ctx.frame >= self.config.max_frames:
            self.stop()
        elif self.config.stop_on_complete and self.run_state.is_complete:
            self.stop()

        return event

    def run(self) -> bool:
        """Load assets and run frames until stopped.

        Returns:
            False if assets failed to load (the loop is never entered),
            True once the loop ends
        """
        if not self.load_assets():
            logger.error("Failed to load media, aborting run")
            return False

        self.start()
        while self._running:
            self.step()
        return True

    def reset(self) -> None:
        """Reset vehicle, run progress, camera and telemetry."""
        self.vehicle.reset()
        self.run_state.reset()
        self.camera.reset()
        self.telemetry.clear()
        self._context = SimulationContext()
        self._running = False

    def get_state(self) -> Dict[str, Any]:
        """Get complete simulation state.

        Returns:
            Dictionary containing simulation state
        """
        return {
            "running": self._running,
            "context": self._context.get_state(),
            "vehicle": self.vehicle.get_telemetry(),
            "run": self.run_state.get_state(),
            "course": self.course.get_state(),
        }
