"""Logging configuration: brief console output plus an optional rotating file"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(log_file: Optional[str] = None, console_level: int = logging.INFO, file_level: int = logging.DEBUG):
    """
    Configure the root logger.

    - Console: brief logs on stderr (INFO by default), kept off stdout so
      search results stay readable
    - File: detailed logs (DEBUG by default), rotated at 5MB, only when
      log_file is given

    Args:
        log_file: Path to the detailed log file, or None for console only
        console_level: Console logging level
        file_level: File logging level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates on repeated setup
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, "
        f"file={log_file or 'disabled'}"
    )
