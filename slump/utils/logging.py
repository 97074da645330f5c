"""
Logging for slump.

Everything slump logs goes under the ``slump`` logger. Rendering reports at
DEBUG: text returned unchanged because no values were set, renderers built
for a new delimiter pair, and parse or execution failures before they are
wrapped. Configuration loading reports at INFO and WARNING. The default
level is WARNING, so a library user sees nothing unless they turn it up
with ``SLUMP_LOG_LEVEL`` or the ``logging`` section of the config file.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    (Re)configure the ``slump`` logger.

    Replaces any handlers a previous call installed, so it is safe to call
    again after loading a config file (see ``SlumpConfig.apply_logging``).

    Args:
        level: Level name; ``SLUMP_LOG_LEVEL`` or WARNING when None, WARNING when unknown
        log_file: Also write records to this file
    """
    if level is None:
        level = os.environ.get("SLUMP_LOG_LEVEL", "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("slump")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Keep render debug output out of the host application's root handlers
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a slump module.

    Module ``__name__`` values (``slump.message``) are used as-is; bare
    names get the ``slump.`` prefix.
    """
    if name == "slump" or name.startswith("slump."):
        return logging.getLogger(name)
    return logging.getLogger(f"slump.{name}")


setup_logging()
