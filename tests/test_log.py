"""Tests for logging setup and log output."""

import logging

from trackday.interfaces import ManualClock
from trackday.log import setup_logging
from trackday.scoring.run_state import RunState
from trackday.scoring.timer import Timer
from trackday.track.geometry import Rect


def test_setup_logging_writes_file(tmp_path):
    """Test setup mirrors log output into a file."""
    log_file = tmp_path / "run.log"
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        setup_logging("DEBUG", log_file)
        logging.getLogger("trackday.test").info("hello from the run")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert "hello from the run" in log_file.read_text()
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_checkpoint_events_logged(caplog):
    """Test checkpoint crossings and completion are logged at INFO."""
    run = RunState([Rect(0, 0, 10, 10)], Timer(ManualClock()))

    with caplog.at_level(logging.INFO, logger="trackday.scoring.run_state"):
        run.update(Rect(5, 5, 10, 10))

    messages = [r.getMessage() for r in caplog.records]
    assert any("Checkpoint 1/1" in m for m in messages)
    assert any("Run complete" in m for m in messages)
