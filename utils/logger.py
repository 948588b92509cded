import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_DIR = Path.home() / ".whales_widget" / "logs"


def setup_logger(level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Configure the root logger once: console plus a daily log file."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    try:
        folder = log_dir or LOG_DIR
        folder.mkdir(parents=True, exist_ok=True)
        log_file = folder / f"widget-{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not setup file logging: {e}")

    return logger
