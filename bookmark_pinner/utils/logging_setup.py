"""
Logging configuration for Bookmark Pinner.

The console only shows warnings unless running verbose, since the terminal
is also the form. Everything is written to a timestamped log file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path("~/.config/bookmark-pinner/logs").expanduser()


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> Path:
    """
    Set up logging configuration.

    Args:
        verbose: Also log INFO and DEBUG records to the console
        log_file: Optional log file name override
        log_dir: Directory for log files

    Returns:
        Path of the log file in use
    """
    if log_file is None:
        log_file = "bookmark_pinner.log"

    log_dir = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = log_dir / f"{Path(log_file).stem}_{timestamp}.log"

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers.append(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers.append(console_handler)

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    logger.info(f"Bookmark Pinner starting - Log file: {log_path}")

    # Reduce noise from some libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    return log_path
