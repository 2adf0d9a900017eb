"""Logging configuration for the attendance tracker."""

from __future__ import annotations

import logging
import logging.config

from pythonjsonlogger.json import JsonFormatter


def build_logging_config(level: str = "INFO", *, json_format: bool = False) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
            "json": {
                "()": JsonFormatter,
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_format else "standard",
            },
        },
        "loggers": {
            "attendance_tracker": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = "INFO", *, json_format: bool = False) -> logging.Logger:
    """Configure application logging"""
    logging.config.dictConfig(build_logging_config(level, json_format=json_format))
    logger = logging.getLogger("attendance_tracker")
    logger.debug("Logging initialized with level: %s", level)
    return logger
