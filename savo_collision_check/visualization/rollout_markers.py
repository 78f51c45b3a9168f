#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/visualization/rollout_markers.py
------------------------------------------------------------------
One RViz arrow per predicted rollout pose.

`MarkerSpec` mirrors the visualization_msgs/Marker fields the checker sets,
without importing ROS; `ros.adapters.marker_specs_to_marker_array` turns the
list into a MarkerArray. The list is rebuilt from scratch for every command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from savo_collision_check.constants import (
    MARKER_COLOR_RGBA,
    MARKER_FRAME_ID,
    MARKER_NAMESPACE,
    MARKER_SCALE_XYZ,
)
from savo_collision_check.models.pose import Pose3D
from savo_collision_check.models.rollout import RolloutStep

# visualization_msgs/Marker constants
MARKER_TYPE_ARROW = 0
MARKER_ACTION_ADD = 0


@dataclass(frozen=True)
class MarkerSpec:
    ns: str
    id: int
    frame_id: str
    pose: Pose3D
    type: int = MARKER_TYPE_ARROW
    action: int = MARKER_ACTION_ADD
    scale: Tuple[float, float, float] = MARKER_SCALE_XYZ
    color_rgba: Tuple[float, float, float, float] = MARKER_COLOR_RGBA


def build_rollout_markers(
    steps: Iterable[RolloutStep],
    *,
    frame_id: str = MARKER_FRAME_ID,
    ns: str = MARKER_NAMESPACE,
) -> List[MarkerSpec]:
    """Marker id equals the rollout step index."""
    return [
        MarkerSpec(ns=ns, id=int(step.index), frame_id=frame_id, pose=step.pose)
        for step in steps
    ]


__all__ = [
    "MARKER_TYPE_ARROW",
    "MARKER_ACTION_ADD",
    "MarkerSpec",
    "build_rollout_markers",
]
