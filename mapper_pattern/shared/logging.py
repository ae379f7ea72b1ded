"""
Logging setup for the address pipeline.

Every layer logs through a module-level logger. Records go to stderr:
stdout belongs to the address view and carries nothing but the
rendered address. The default level keeps a normal run silent.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Route every layer's log records to one stream.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        stream: Destination stream. Defaults to stderr.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
