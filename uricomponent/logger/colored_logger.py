#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Coloured console logger for uricomponent

• One shared `logger` instance for the whole package
• Extra SUCCESS level (between INFO and WARNING)
• Verbosity 0–5 mapped onto logging levels via set_level()
"""

from __future__ import annotations

import logging
import sys

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LEVEL_COLORS = {
    logging.DEBUG: Fore.CYAN,
    logging.INFO: Fore.GREEN,
    SUCCESS: Fore.GREEN + Style.BRIGHT,
    logging.WARNING: Fore.YELLOW,
    logging.ERROR: Fore.RED,
    logging.CRITICAL: Fore.RED + Style.BRIGHT,
}

# verbosity -> logging level
VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: logging.INFO,
    2: logging.DEBUG,
    3: logging.DEBUG,
    4: logging.DEBUG,
    5: logging.DEBUG,
}


class ColoredFormatter(logging.Formatter):
    """Prefix each record with a coloured, bracketed level name"""

    def __init__(self, use_color: bool = True):
        super().__init__("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if not self.use_color:
            return line
        color = LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{line}{Style.RESET_ALL}"


class UriLogger(logging.Logger):
    def success(self, msg, *args, **kwargs) -> None:
        if self.isEnabledFor(SUCCESS):
            self._log(SUCCESS, msg, args, **kwargs)


def _build_logger(name: str = "uricomponent") -> UriLogger:
    previous = logging.getLoggerClass()
    logging.setLoggerClass(UriLogger)
    try:
        log = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)

    if not log.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColoredFormatter(use_color=sys.stderr.isatty()))
        log.addHandler(handler)
    log.setLevel(logging.INFO)
    log.propagate = False
    return log


logger: UriLogger = _build_logger()


def set_level(verbosity: int) -> int:
    """Apply a 0–5 verbosity to the shared logger, return the logging level used"""
    verbosity = max(0, min(verbosity, max(VERBOSITY_LEVELS)))
    level = VERBOSITY_LEVELS[verbosity]
    logger.setLevel(level)
    return level
