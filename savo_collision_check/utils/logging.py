#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/utils/logging.py
--------------------------------------------------
Logging helpers for `savo_collision_check` (ROS2 Jazzy friendly).

Purpose
-------
The safety gate and oracle log through one small adapter, whether they run:
- inside the collision checker node (`rclpy` logger available), or
- in unit tests / plain Python (stdlib logger)

The gate needs throttled messages (missing robot pose every 3 s, collision
reports every 1 s), which `RateLimitedLogger` provides per key.

Typical usage
-------------
from savo_collision_check.utils.logging import get_logger_adapter, RateLimitedLogger

logger = get_logger_adapter(self)   # self can be a ROS2 node
rl = RateLimitedLogger(logger, period_s=3.0)
rl.warn("no_robot_pose", "Cannot get robot pose ...")
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


# =============================================================================
# Internal constants
# =============================================================================

_LEVEL_DEBUG = "DEBUG"
_LEVEL_INFO = "INFO"
_LEVEL_WARN = "WARN"
_LEVEL_ERROR = "ERROR"

DEFAULT_LOGGER_NAME = "savo_collision_check"


# =============================================================================
# Stdlib fallback logger setup
# =============================================================================

def _ensure_std_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Return a configured stdlib logger (idempotent).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


# =============================================================================
# Logger adapter (ROS2 logger or stdlib logger)
# =============================================================================

@dataclass
class LoggerAdapter:
    """
    Hides whether the underlying logger is an rclpy logger or a stdlib
    `logging.Logger`. Methods follow ROS logger naming:
      debug(), info(), warn(), error()
    """
    target: Any = None
    name: str = DEFAULT_LOGGER_NAME

    def __post_init__(self) -> None:
        if self.target is None:
            self.target = _ensure_std_logger(self.name)

    @property
    def is_std_logger(self) -> bool:
        return isinstance(self.target, logging.Logger)

    @property
    def is_ros_logger(self) -> bool:
        t = self.target
        if self.is_std_logger:
            return False
        return all(hasattr(t, m) for m in ("debug", "info", "warn", "error"))

    def _emit(self, level: str, msg: Any) -> None:
        text = str(msg)

        if self.is_ros_logger:
            if level == _LEVEL_DEBUG:
                self.target.debug(text)
            elif level == _LEVEL_INFO:
                self.target.info(text)
            elif level == _LEVEL_WARN:
                self.target.warn(text)
            else:
                self.target.error(text)
            return

        std_logger = self.target if self.is_std_logger else _ensure_std_logger(self.name)
        if level == _LEVEL_DEBUG:
            std_logger.debug(text)
        elif level == _LEVEL_INFO:
            std_logger.info(text)
        elif level == _LEVEL_WARN:
            std_logger.warning(text)
        else:
            std_logger.error(text)

    def debug(self, msg: Any) -> None:
        self._emit(_LEVEL_DEBUG, msg)

    def info(self, msg: Any) -> None:
        self._emit(_LEVEL_INFO, msg)

    def warn(self, msg: Any) -> None:
        self._emit(_LEVEL_WARN, msg)

    def error(self, msg: Any) -> None:
        self._emit(_LEVEL_ERROR, msg)


def get_logger_adapter(source: Any = None, *, name: str = DEFAULT_LOGGER_NAME) -> LoggerAdapter:
    """
    Create a LoggerAdapter from a source object.

    Supported sources
    -----------------
    - LoggerAdapter (returned as-is)
    - ROS2 Node (`source.get_logger()`)
    - ROS2 logger directly
    - stdlib logging.Logger
    - None (creates stdlib fallback logger)
    """
    if isinstance(source, LoggerAdapter):
        return source
    if source is None:
        return LoggerAdapter(target=_ensure_std_logger(name), name=name)
    if hasattr(source, "get_logger") and callable(source.get_logger):
        return LoggerAdapter(target=source.get_logger(), name=name)
    return LoggerAdapter(target=source, name=name)


# =============================================================================
# Structured logging helpers
# =============================================================================

def format_kv(**kwargs: Any) -> str:
    """
    format_kv(step=3, contacts=12) -> "step=3 contacts=12"
    """
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


def format_exception(
    exc: BaseException,
    *,
    message: str = "Unhandled exception",
    component: Optional[str] = None,
) -> str:
    """
    format_exception(err, message="Dropped robot pose", component="robot_pose")
    -> "[robot_pose] Dropped robot pose | PoseValidationError: ..."
    """
    exc_text = f"{exc.__class__.__name__}: {exc}"
    if component:
        return f"[{component}] {message} | {exc_text}"
    return f"{message} | {exc_text}"


def log_exception(
    logger: LoggerAdapter,
    exc: BaseException,
    *,
    message: str = "Unhandled exception",
    component: Optional[str] = None,
) -> None:
    """
    Emit a compact exception line (no traceback; outer layers decide that).
    """
    logger.error(format_exception(exc, message=message, component=component))


# =============================================================================
# Rate-limited logging helper
# =============================================================================

@dataclass
class RateLimitedLogger:
    """
    Per-key rate limiter for repeated warnings/info lines.

    The first message for a key is always emitted; later ones only once
    `period_s` has elapsed on `clock` since the last emitted one.

    Example
    -------
    rl = RateLimitedLogger(get_logger_adapter(self), period_s=3.0)
    rl.warn("no_robot_pose", "Forwarding velocity command without safety check!")
    """
    logger: LoggerAdapter
    period_s: float = 1.0
    clock: Callable[[], float] = time.monotonic
    _last_emit: Dict[str, float] = field(default_factory=dict)

    def _can_emit(self, key: str) -> bool:
        now = float(self.clock())
        last = self._last_emit.get(str(key))
        if last is None or (now - last) >= max(0.0, float(self.period_s)):
            self._last_emit[str(key)] = now
            return True
        return False

    def reset(self, key: Optional[str] = None) -> None:
        if key is None:
            self._last_emit.clear()
        else:
            self._last_emit.pop(str(key), None)

    def debug(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.debug(msg)
            return True
        return False

    def info(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.info(msg)
            return True
        return False

    def warn(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.warn(msg)
            return True
        return False

    def error(self, key: str, msg: Any) -> bool:
        if self._can_emit(key):
            self.logger.error(msg)
            return True
        return False


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "LoggerAdapter",
    "RateLimitedLogger",
    "get_logger_adapter",
    "format_kv",
    "format_exception",
    "log_exception",
]
