# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/models/__init__.py
----------------------------------------------------
Public exports for the ROS-agnostic data models.
"""

from .pose import (
    Vector3,
    Quaternion,
    Pose3D,
    compose,
    wrap_to_pi,
    yaw_to_quaternion,
    quaternion_to_yaw,
)
from .twist import Twist
from .joint_state import JointState
from .rollout import (
    RolloutStep,
    SafetyDecision,
    CollidingConfiguration,
    GateReason,
    GateOutput,
)

__all__ = [
    # pose algebra
    "Vector3",
    "Quaternion",
    "Pose3D",
    "compose",
    "wrap_to_pi",
    "yaw_to_quaternion",
    "quaternion_to_yaw",
    # commands / robot shape
    "Twist",
    "JointState",
    # rollout results
    "RolloutStep",
    "SafetyDecision",
    "CollidingConfiguration",
    "GateReason",
    "GateOutput",
]
