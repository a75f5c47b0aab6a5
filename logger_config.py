import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configures the shared logger for SEI Mate.

    Args:
        level: The logging level to use, as a number or a name like "DEBUG"
            (default: logging.INFO).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

def get_logger(name: str) -> logging.Logger:
    """Gets a logger instance for a specific module.

    Args:
        name: The name of the module, usually __name__.

    Returns:
        A configured logging.Logger instance.
    """
    return logging.getLogger(name)
