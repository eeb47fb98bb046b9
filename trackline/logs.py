# -*- coding: utf-8 -*-
# Trackline/trackline/logs.py

"""
Logging conventions for the library: a NullHandler on the package logger (installed by
trackline/__init__.py) and a one-call driver setup matching the format used by scripts.
"""

import logging

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_logging(level=logging.INFO) -> logging.Logger:
    """Configure root logging for scripts and return the package logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    log = logging.getLogger("trackline")
    log.setLevel(level)
    return log
