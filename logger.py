"""Logging configuration for Teller.

Sets up logging to console and, optionally, to a file with date-based naming.
"""

import logging
from datetime import date
from config import Config


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with console and optional file handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("teller")
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if config.log_to_file:
        config.log_dir.mkdir(parents=True, exist_ok=True)

        # File handler - logs to teller-{date}.log
        log_file_path = config.log_dir / f"teller-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(config.log_level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The teller logger instance.
    """
    return logging.getLogger("teller")
