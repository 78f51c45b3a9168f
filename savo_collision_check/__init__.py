# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/__init__.py
---------------------------------------------
Package root exports for `savo_collision_check`.

Design notes
------------
- Keep imports lightweight: no rclpy or message packages here.
- ROS integration lives in `savo_collision_check.ros` and
  `savo_collision_check.nodes`; import those explicitly.
"""

from __future__ import annotations

from .version import (
    __version__,
    VERSION,
    PACKAGE_NAME,
    ROBOT_NAME,
    get_version,
    get_package_version_info,
)
from .exceptions import (
    CollisionCheckError,
    ConfigValidationError,
    OracleConfigError,
    PoseValidationError,
)
from .kinematics import integrate_twist
from .models import (
    GateOutput,
    GateReason,
    JointState,
    Pose3D,
    RolloutStep,
    SafetyDecision,
    Twist,
)
from .safety import (
    CollisionCheckConfig,
    CollisionOracle,
    ConfigStore,
    DiskFootprintOracle,
    SafetyGate,
    StateCache,
    evaluate_rollout,
)
from .visualization import MarkerSpec, build_rollout_markers

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "ROBOT_NAME",
    "get_version",
    "get_package_version_info",
    "CollisionCheckError",
    "ConfigValidationError",
    "OracleConfigError",
    "PoseValidationError",
    "integrate_twist",
    "GateOutput",
    "GateReason",
    "JointState",
    "Pose3D",
    "RolloutStep",
    "SafetyDecision",
    "Twist",
    "CollisionCheckConfig",
    "CollisionOracle",
    "ConfigStore",
    "DiskFootprintOracle",
    "SafetyGate",
    "StateCache",
    "evaluate_rollout",
    "MarkerSpec",
    "build_rollout_markers",
]
