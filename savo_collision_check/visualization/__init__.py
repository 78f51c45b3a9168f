# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/visualization/__init__.py
-----------------------------------------------------------
Rollout visualization builders (ROS-agnostic).
"""

from .rollout_markers import (
    MARKER_TYPE_ARROW,
    MARKER_ACTION_ADD,
    MarkerSpec,
    build_rollout_markers,
)

__all__ = [
    "MARKER_TYPE_ARROW",
    "MARKER_ACTION_ADD",
    "MarkerSpec",
    "build_rollout_markers",
]
