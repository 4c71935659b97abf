"""Logging configuration for branchsweep."""

import logging
import sys

import typer

LEVEL_COLORS = {
    "DEBUG": typer.colors.CYAN,
    "INFO": typer.colors.GREEN,
    "WARNING": typer.colors.YELLOW,
    "ERROR": typer.colors.RED,
    "CRITICAL": typer.colors.MAGENTA,
}


class LevelColorFormatter(logging.Formatter):
    """Formatter that colors the level name when stderr is a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelname)
        if color and sys.stderr.isatty():
            message = message.replace(record.levelname, typer.style(record.levelname, fg=color), 1)
        return message


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure the root logger for one run.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages with timestamps
    """
    if debug:
        level = logging.DEBUG
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s [%(name)s] %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(LevelColorFormatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)

    # GitPython logs every command it runs at DEBUG
    logging.getLogger("git").setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module.

    The full dotted name is kept so module loggers never collide with library
    loggers such as GitPython's ``git``.
    """
    return logging.getLogger(name)
