"""Process-wide logging setup. Called once from the startup hook."""

import logging
import os

from bowling_league.core.config import get_log_file, get_log_level

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)

    log_file = get_log_file()
    if not log_file:
        return
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    root.addHandler(file_handler)
    logging.getLogger(__name__).info("Logging anche su file: %s", log_file)
