"""
Logging Configuration
=====================

Unified console/file logging for the mandala core.

Log line format: [HH:MM:SS] LEVEL | SRC  | message
Sources are abbreviated per package (SERV, CONF, MODL, UTIL).

@author lycosa9527
@made_by MindSpring Team
"""

import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler
from typing import Optional


class UnifiedFormatter(logging.Formatter):
    """Unified logging formatter with ANSI color support."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARN': '\033[33m',     # Yellow
        'ERROR': '\033[31m',    # Red
        'CRIT': '\033[35m',     # Magenta
        'RESET': '\033[0m',     # Reset
        'BOLD': '\033[1m',      # Bold
    }

    LEVEL_MAP = {
        'DEBUG': 'DEBUG',
        'INFO': 'INFO',
        'WARNING': 'WARN',
        'ERROR': 'ERROR',
        'CRITICAL': 'CRIT'
    }

    SOURCE_MAP = {
        'services': 'SERV',
        'config': 'CONF',
        'models': 'MODL',
        'utils': 'UTIL',
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def _abbreviate_source(self, name: str) -> str:
        if name == '__main__':
            return 'MAIN'
        package = name.split('.', 1)[0]
        if package in self.SOURCE_MAP:
            return self.SOURCE_MAP[package]
        return name[:4].upper()

    def format(self, record):
        timestamp = self.formatTime(record, '%H:%M:%S')
        level_name = self.LEVEL_MAP.get(record.levelname, record.levelname)

        if self.use_colors:
            color = self.COLORS.get(level_name, '')
            reset = self.COLORS['RESET']
            if level_name == 'CRIT':
                level = f"{self.COLORS['BOLD']}{color}{level_name.ljust(5)}{reset}"
            else:
                level = f"{color}{level_name.ljust(5)}{reset}"
        else:
            level = level_name.ljust(5)

        source = self._abbreviate_source(record.name).ljust(4)
        message = f"[{timestamp}] {level} | {source} | {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def resolve_log_level(level_name: Optional[str] = None, verbose: bool = False) -> int:
    """Map a level name to a logging constant; verbose forces DEBUG."""
    if verbose:
        return logging.DEBUG
    return getattr(logging, (level_name or 'INFO').upper(), logging.INFO)


def setup_logging(
    level_name: Optional[str] = None,
    verbose: Optional[bool] = None,
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure root logging with the unified formatter.

    Arguments left as None are read from config.settings. The effective
    configuration is logged once the handlers are in place.

    Args:
        level_name: Logging level name (e.g. 'INFO')
        verbose: Force DEBUG level
        log_dir: Directory for a daily-rotated mandala.log file

    Returns:
        The configured root logger
    """
    from config.settings import config

    if level_name is None:
        level_name = config.LOG_LEVEL
    if verbose is None:
        verbose = config.VERBOSE_LOGGING
    if log_dir is None:
        log_dir = config.LOG_DIR

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(UnifiedFormatter(use_colors=sys.stdout.isatty()))
    handlers = [console_handler]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "mandala.log"),
            when="midnight",
            backupCount=10,
            encoding="utf-8"
        )
        file_handler.setFormatter(UnifiedFormatter(use_colors=False))
        handlers.append(file_handler)

    logging.basicConfig(
        level=resolve_log_level(level_name, verbose),
        handlers=handlers,
        force=True
    )

    if not config.validate_numeric_config():
        logging.getLogger(__name__).warning("[Logging] Some numeric settings are invalid, defaults are in use")
    config.print_config_summary()
    return logging.getLogger()
