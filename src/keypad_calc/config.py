"""Runtime configuration read from the environment."""

import logging
import os
from typing import Optional, Union

HOST = os.environ.get("KEYPAD_CALC_HOST", "0.0.0.0")
PORT = int(os.environ.get("KEYPAD_CALC_PORT", "5000"))
LOG_LEVEL = os.environ.get("KEYPAD_CALC_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging for the CLI and web shells.

    Args:
        level: Level name or number; defaults to KEYPAD_CALC_LOG_LEVEL
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
