import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level_name: str | None) -> int:
    """
    Maps a level name such as "debug" or "INFO" onto a logging level.
    Unknown or missing names resolve to WARNING.
    """
    if not level_name:
        return logging.WARNING
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def setup_logging(level: str | None = None) -> None:
    """
    Configures the root logger for command line use.
    Records go to stderr so stdout only carries program output.
    """
    logging.basicConfig(
        level=resolve_level(level or os.getenv("CALCULATOR_LOG_LEVEL")),
        stream=sys.stderr,
        format=LOG_FORMAT,
    )
