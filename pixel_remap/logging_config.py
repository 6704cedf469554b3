import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(log_path=None, level=logging.INFO):
    """Configures logging for the whole package to stdout and, optionally, a file."""
    logger = logging.getLogger()
    if logger.hasHandlers():
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_path:
        handlers.append(logging.FileHandler(log_path, mode="w"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
