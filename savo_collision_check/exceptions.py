#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/exceptions.py
-----------------------------------------------
Exception hierarchy for the navigation collision checker.

What raises what
----------------
- ConfigValidationError : rollout parameters rejected at the configuration
                          boundary (ConfigStore.update / ROS param callback)
- PoseValidationError   : non-finite pose values or a zero-norm quaternion
- OracleConfigError     : a collision backend built with unusable settings

Things that are deliberately NOT exceptions
-------------------------------------------
- No robot pose yet: handled by the safety gate's fail-open branch.
- Yaw rate crossing zero: handled by the integrator's straight-line branch.
- Oracle failures at query time are not wrapped here; they propagate to the
  caller unchanged.

No ROS dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


# =============================================================================
# Structured context
# =============================================================================
@dataclass(frozen=True)
class ErrorContext:
    """
    Optional structured context attached to collision-checker exceptions.

    Common fields (examples):
    - component="config_store"
    - field_name="roll_out_step_time"
    - value=-0.1
    """
    component: Optional[str] = None
    field_name: Optional[str] = None
    value: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.component is not None:
            out["component"] = self.component
        if self.field_name is not None:
            out["field"] = self.field_name
        if self.value is not None:
            out["value"] = self.value
        if self.extra:
            out["extra"] = dict(self.extra)
        return out

    def format_compact(self) -> str:
        parts = []
        if self.component is not None:
            parts.append(f"component={self.component}")
        if self.field_name is not None:
            parts.append(f"field={self.field_name}")
        if self.value is not None:
            parts.append(f"value={self.value}")
        if self.extra:
            parts.append(f"extra={self.extra}")
        return ", ".join(parts)


class CollisionCheckError(RuntimeError):
    """
    Base exception for all `savo_collision_check` failures.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[ErrorContext] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.message = str(message)
        self.context = context
        self.cause = cause
        super().__init__(self.__str__())

        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        ctx = self.context.format_compact()
        if not ctx:
            return self.message
        return f"{self.message} [{ctx}]"

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.__class__.__name__,
            "message": self.message,
        }
        if self.context is not None:
            out["context"] = self.context.to_dict()
        if self.cause is not None:
            out["cause_type"] = self.cause.__class__.__name__
            out["cause_message"] = str(self.cause)
        return out


# =============================================================================
# Configuration / validation errors
# =============================================================================
class ConfigValidationError(CollisionCheckError, ValueError):
    """
    Invalid rollout configuration (step_time <= 0, step_count < 0, wrong types).
    """


class PoseValidationError(CollisionCheckError, ValueError):
    """
    Pose with non-finite components or an orientation that cannot be normalized.
    """


class OracleConfigError(CollisionCheckError):
    """
    Collision backend constructed with unusable settings.
    """


def config_error(field_name: str, value: Any, message: str) -> ConfigValidationError:
    """Shorthand used by the config store validators."""
    return ConfigValidationError(
        message,
        context=ErrorContext(component="config_store", field_name=field_name, value=value),
    )


__all__ = [
    "ErrorContext",
    "CollisionCheckError",
    "ConfigValidationError",
    "PoseValidationError",
    "OracleConfigError",
    "config_error",
]
