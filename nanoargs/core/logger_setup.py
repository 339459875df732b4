# nanoargs/core/logger_setup.py

import logging
from pathlib import Path
from typing import Optional
from datetime import datetime
import sys
from rich.logging import RichHandler
from rich.console import Console
from logging.handlers import RotatingFileHandler
from .config_manager import ConfigManager

def get_default_log_dir() -> Path:
    appdata_dir = ConfigManager.get_appdata_dir()
    return appdata_dir / "logs"

def _add_file_handler(logger: logging.Logger, log_dir: Path, log_level: int,
                      log_file_rotation: int, log_file_max_size: int) -> Optional[Path]:
    """Attach a rotating file handler, returning the log file path or None on failure"""
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as os_err:
        print(f"Could not create log directory {log_dir}: {os_err}", file=sys.stderr)
        return None

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_file = log_dir / f'nanoargs_{timestamp}.log'
    try:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=log_file_max_size * 1024 * 1024,
            backupCount=log_file_rotation,
            encoding='utf-8'
        )
    except OSError as os_err:
        print(f"Could not create log file {log_file}: {os_err}", file=sys.stderr)
        return None

    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logger.addHandler(file_handler)
    return log_file

def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: int = logging.WARNING,
    log_format: str = '%(message)s',  # Simplified format for Rich
    console_level: Optional[int] = None,
    log_to_file: bool = False,
    log_file_rotation: int = 5,       # Number of backup log files
    log_file_max_size: int = 10       # Size in MB
) -> logging.Logger:
    """Setup root logging for the nanoargs tools with Rich console output."""
    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.handlers.clear()

    log_file = None
    if log_to_file:
        if log_dir is None:
            log_dir = get_default_log_dir()
        log_file = _add_file_handler(logger, log_dir, log_level, log_file_rotation, log_file_max_size)

    handler_level = console_level if console_level is not None else log_level
    try:
        rich_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            enable_link_path=False,
            markup=False,
            rich_tracebacks=True,
            level=handler_level
        )
        rich_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(rich_handler)
    except Exception as rich_err:
        print(f"Error setting up Rich handler: {rich_err}", file=sys.stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(handler_level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    if log_file is not None:
        logger.info(f"Log file created at: {log_file}")
    logger.debug(f"Logging level: {logging.getLevelName(log_level)}")

    return logger
