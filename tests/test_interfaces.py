"""Tests for the headless collaborator implementations."""

from trackday.interfaces import (
    Control,
    EventKind,
    InputEvent,
    ManualClock,
    MonotonicClock,
    RecordingRenderer,
    ScriptedInputSource,
    StaticAssetLoader,
    Texture,
)


class TestClocks:
    """Test clock implementations."""

    def test_manual_clock(self):
        """Test manual clock only moves forward on demand."""
        clock = ManualClock(100)
        assert clock.ticks_ms() == 100

        assert clock.advance(50) == 150
        assert clock.advance(-20) == 150

    def test_monotonic_clock(self):
        """Test monotonic clock never goes backwards."""
        clock = MonotonicClock()
        first = clock.ticks_ms()
        second = clock.ticks_ms()

        assert first >= 0
        assert second >= first


class TestScriptedInput:
    """Test scripted input source."""

    def test_replays_frames(self):
        """Test one frame of events per poll, then nothing."""
        source = ScriptedInputSource([
            [InputEvent.press(Control.ACCELERATE)],
            [],
            [InputEvent.quit()],
        ])

        assert source.poll() == [InputEvent.press(Control.ACCELERATE)]
        assert source.poll() == []
        assert source.poll()[0].kind == EventKind.QUIT
        assert source.exhausted
        assert source.poll() == []

    def test_extend(self):
        """Test appending frames."""
        source = ScriptedInputSource()
        assert source.exhausted

        source.extend([[InputEvent.release(Control.BRAKE)]])
        assert not source.exhausted
        assert source.poll()[0].control == Control.BRAKE


class TestAssetsAndRenderer:
    """Test asset loader and renderer."""

    def test_static_loader(self):
        """Test known paths load and unknown paths fail."""
        texture = Texture("car", 128, 64)
        loader = StaticAssetLoader({"car.bmp": texture})

        assert loader.load("car.bmp") == texture
        assert loader.load("missing.png") is None

        loader.add("bg.png", Texture("bg", 10, 10))
        assert loader.load("bg.png").width == 10

    def test_recording_renderer(self):
        """Test draw calls are grouped by presented frame."""
        renderer = RecordingRenderer()
        texture = Texture("car", 128, 64)

        renderer.draw(texture, 1, 2, 90.0)
        assert renderer.frames == []
        renderer.present()
        renderer.draw(texture, 3, 4)
        renderer.present()

        assert len(renderer.frames) == 2
        assert renderer.frames[0][0].rotation_degrees == 90.0
        assert (renderer.last_frame[0].x, renderer.last_frame[0].y) == (3, 4)
