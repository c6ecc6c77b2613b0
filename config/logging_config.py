"""
Unified logging configuration for the TrialEligibility service
"""

import inspect
import logging
import os
from datetime import datetime
from typing import Optional
from config.settings import config

def _caller_name(depth: int = 2) -> str:
    frame = inspect.currentframe()
    for _ in range(depth):
        frame = frame.f_back
    name = frame.f_globals.get('__name__', 'unknown')
    if name == '__main__':
        # Use the script filename
        name = os.path.basename(frame.f_code.co_filename).replace('.py', '')
    return name

def setup_logging(
    level: int = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    add_timestamp: bool = True
) -> logging.Logger:
    """
    Setup unified logging configuration using environment variables

    Args:
        level: Logging level (default: from config)
        log_file: Log file path (default: auto-generated)
        format_string: Custom format string (default: from config)
        add_timestamp: Whether to add timestamp to log filename

    Returns:
        Configured logger instance
    """
    caller_name = _caller_name()

    if level is None:
        level = config.get_log_level()

    if format_string is None:
        format_string = config.LOG_FORMAT

    # Auto-generate log file name if not provided
    if log_file is None and config.LOG_TO_FILE:
        os.makedirs(config.LOG_DIRECTORY, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S') if add_timestamp else ''
        log_file = os.path.join(config.LOG_DIRECTORY, f"{caller_name}{'_' + timestamp if timestamp else ''}.log")

    handlers = []

    if config.LOG_TO_CONSOLE:
        handlers.append(logging.StreamHandler())

    if config.LOG_TO_FILE and log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=handlers,
        force=True  # Override existing configuration
    )

    return logging.getLogger(caller_name)

def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance (default name: calling module)"""
    if name is None:
        name = _caller_name()
    return logging.getLogger(name)

def quick_setup(script_name: str, level: int = None) -> logging.Logger:
    """
    Quick setup for entry points (API, scripts, tests) with a per-script log file

    Args:
        script_name: Name of the script (used for log file naming)
        level: Logging level (default: from config)

    Returns:
        Configured logger
    """
    log_file = None
    if config.LOG_TO_FILE:
        os.makedirs(config.LOG_DIRECTORY, exist_ok=True)
        log_file = os.path.join(config.LOG_DIRECTORY, f"{script_name}.log")

    setup_logging(
        level=level,
        log_file=log_file,
        format_string=config.LOG_FORMAT
    )
    return logging.getLogger(script_name)
