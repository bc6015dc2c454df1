"""
Logging setup for scripts.

The library modules only create named loggers; configuring handlers is
left to whatever process embeds them.
"""

import logging
from typing import Optional

from athlete_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger (level defaults to ``settings.LOG_LEVEL``)."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
