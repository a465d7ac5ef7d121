"""
Utility functions for pymat3.
"""

import os
import logging


logger = logging.getLogger("pymat3")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("PYMAT3_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid pymat3 log level: {level}")


_set_log_level()
