#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
uricomponent runtime configuration (config.py)

• dataclass with field defaults
• Normalization of out-of-range values happens in __post_init__
• Module-level singleton `conf` shared by the helpers and the CLI
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from uricomponent.common.lib import DEFAULT_TEXT_ERRORS, MAX_VERBOSITY


@dataclass
class EncoderConfig:
    """Central configuration container for uricomponent runtime behavior"""

    # ── Text conversion ─────────────────────────────────────────────────────────
    text_errors: str = DEFAULT_TEXT_ERRORS   # codec error handler for str -> UTF-8

    # ── CLI output ──────────────────────────────────────────────────────────────
    newline: bool = True
    verbose: int = 1

    def __post_init__(self):
        self.text_errors = self._checked_errors(self.text_errors)
        self.verbose = self._checked_verbosity(self.verbose)

    @staticmethod
    def _checked_errors(name: str) -> str:
        try:
            codecs.lookup_error(name)
        except LookupError:
            from uricomponent.logger.colored_logger import logger
            logger.warning(
                f"Unknown codec error handler {name!r}, using {DEFAULT_TEXT_ERRORS!r}"
            )
            return DEFAULT_TEXT_ERRORS
        return name

    @staticmethod
    def _checked_verbosity(verbose: int) -> int:
        if 0 <= verbose <= MAX_VERBOSITY:
            return verbose
        clamped = max(0, min(verbose, MAX_VERBOSITY))
        from uricomponent.logger.colored_logger import logger
        logger.warning(f"Verbosity clamped to {clamped} (requested: {verbose})")
        return clamped

    def update(self, **kwargs) -> None:
        """Set several options at once, re-running normalization"""
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown option: {key}")
            setattr(self, key, value)
        self.__post_init__()

    def reset(self) -> None:
        """Restore every option to its default"""
        defaults = EncoderConfig()
        self.__dict__.update(defaults.__dict__)


# Global singleton instance
conf = EncoderConfig()
