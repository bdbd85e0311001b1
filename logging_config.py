"""
Logging Configuration
Sets up the logger of the 'anise' namespace.

The library itself never calls this: applications opt in.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from anise.config import AniseConfig


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'anise' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also save logs to a file.
    """
    logger = logging.getLogger("anise")
    logger.setLevel(level)

    # Avoid duplicate handlers (and leaked files) when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def setup_logging_from_config(config: "AniseConfig", log_file: Optional[str] = None) -> logging.Logger:
    """Configures the 'anise' logger at the level of `config` (see `AniseConfig.from_env`)."""
    return setup_logging(config.log_level, log_file)
