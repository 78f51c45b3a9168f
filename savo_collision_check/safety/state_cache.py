#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/state_cache.py
-------------------------------------------------------
Most recent robot pose and joint configuration, as seen by the safety gate.

Notes
-----
- Last writer wins; values are overwritten in place and never expire. There is
  no staleness check: an old pose is still used.
- `robot_pose` stays None until the first pose update, which is what sends the
  gate down its fail-open branch.
- Written by subscription callbacks and read by the velocity callback on the
  same single-threaded executor, so no locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D


@dataclass
class StateCache:
    robot_pose: Optional[Pose3D] = None
    joint_state: JointState = field(default_factory=JointState)

    pose_update_count: int = 0
    joint_state_update_count: int = 0
    environment_update_count: int = 0

    @property
    def has_robot_pose(self) -> bool:
        return self.robot_pose is not None

    def update_robot_pose(self, pose: Pose3D) -> None:
        self.robot_pose = pose
        self.pose_update_count += 1

    def update_joint_state(self, joint_state: JointState) -> None:
        self.joint_state = joint_state
        self.joint_state_update_count += 1

    def note_environment_update(self) -> None:
        self.environment_update_count += 1

    def to_dict(self) -> Dict[str, Any]:
        pose = self.robot_pose
        return {
            "has_robot_pose": self.has_robot_pose,
            "robot_pose_xy_yaw": None if pose is None else (pose.x, pose.y, pose.yaw),
            "joint_count": len(self.joint_state),
            "pose_update_count": self.pose_update_count,
            "joint_state_update_count": self.joint_state_update_count,
            "environment_update_count": self.environment_update_count,
        }


__all__ = ["StateCache"]
