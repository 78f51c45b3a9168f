# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/utils/__init__.py
---------------------------------------------------
Shared helpers (logging). No ROS imports.
"""

from .logging import (
    LoggerAdapter,
    RateLimitedLogger,
    get_logger_adapter,
    format_kv,
    format_exception,
    log_exception,
)

__all__ = [
    "LoggerAdapter",
    "RateLimitedLogger",
    "get_logger_adapter",
    "format_kv",
    "format_exception",
    "log_exception",
]
