import logging
import sys
from pathlib import Path

LOGGER_NAME = "EditorSidebar"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logger(log_file_name="editor_sidebar.log", log_dir=None):
    """
    Setups the initial logger.
    param: log_file_name: filename to be used for the logfile.
    param: log_dir: directory for the logfile, defaults to the app config dir.
    return: logger instance created.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Check if the logger has already been configured
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        if log_dir is None:
            from .config import get_app_config_dir
            log_dir = get_app_config_dir()
        log_file_path = Path(log_dir) / log_file_name

        # Create handlers
        console_handler = logging.StreamHandler(sys.stdout)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")

        # Create formatter and add it to handlers
        log_format = logging.Formatter(LOG_FORMAT)
        console_handler.setFormatter(log_format)
        file_handler.setFormatter(log_format)

        # Add handlers to the logger
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get the application logger or one of its children.
    @param: name: optional child name, e.g. "visibility".
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
