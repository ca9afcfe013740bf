"""Logging setup for scripts driving a simulation."""

from pathlib import Path
import logging
import sys


def setup_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Configure root logging.

    Args:
        level: Level name, e.g. "INFO" or "DEBUG"
        log_file: Optional file to mirror log output into
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(Path(log_file)))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
