# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/constants.py
----------------------------------------------
Centralized package-wide constants for `savo_collision_check`.

Notes
-----
- Dependency-free (no ROS imports).
- These are *code defaults* only. ROS parameters / YAML override them at
  runtime (see `config/collision_check.yaml`).
"""

from __future__ import annotations

from typing import Final, Tuple


# =============================================================================
# Package / Identity
# =============================================================================
NODE_NAME_COLLISION_CHECKER: Final[str] = "navigation_collision_checker_node"


# =============================================================================
# Topic Names (code defaults)
# =============================================================================
TOPIC_ENVIRONMENT_POINTS: Final[str] = "environment_points"
TOPIC_ROBOT_POSE: Final[str] = "robot_pose"
TOPIC_JOINT_STATES: Final[str] = "joint_states"
TOPIC_CMD_VEL_RAW: Final[str] = "cmd_vel_raw"
TOPIC_CMD_VEL_SAFE: Final[str] = "cmd_vel_safe"

# Private (node-relative) outputs
TOPIC_MARKERS: Final[str] = "~/nav_collision_check_markers"
TOPIC_IN_COLLISION_STATE: Final[str] = "~/in_collision_state"
TOPIC_STATE: Final[str] = "~/state"


# =============================================================================
# QoS depths (match the inbound queue sizes of the collision checker)
# =============================================================================
QOS_DEPTH_ENVIRONMENT: Final[int] = 2
QOS_DEPTH_ROBOT_POSE: Final[int] = 1
QOS_DEPTH_JOINT_STATES: Final[int] = 5
QOS_DEPTH_CMD_VEL: Final[int] = 1
QOS_DEPTH_MARKERS: Final[int] = 1
QOS_DEPTH_STATE: Final[int] = 1


# =============================================================================
# Rollout defaults (live-tunable via ROS parameters)
# =============================================================================
PARAM_ROLL_OUT_STEP_TIME: Final[str] = "roll_out_step_time"
PARAM_ROLL_OUT_STEPS: Final[str] = "roll_out_steps"
PARAM_PASS_THROUGH: Final[str] = "pass_through"

ROLL_OUT_STEP_TIME_S_DEFAULT: Final[float] = 0.1
ROLL_OUT_STEPS_DEFAULT: Final[int] = 10
PASS_THROUGH_DEFAULT: Final[bool] = False

# Below this yaw rate the twist is integrated as a straight line
ANGULAR_EPSILON_RADPS: Final[float] = 1e-4


# =============================================================================
# Reference oracle (disk footprint) defaults
# =============================================================================
FOOTPRINT_RADIUS_M_DEFAULT: Final[float] = 0.30
FOOTPRINT_MIN_Z_M_DEFAULT: Final[float] = 0.02
FOOTPRINT_MAX_Z_M_DEFAULT: Final[float] = 1.20


# =============================================================================
# Logging throttles
# =============================================================================
MISSING_POSE_WARN_PERIOD_S: Final[float] = 3.0
COLLISION_INFO_PERIOD_S: Final[float] = 1.0
# Malformed pose / cloud / joint state messages (per topic)
INBOUND_ERROR_LOG_PERIOD_S: Final[float] = 5.0
STATE_PUBLISH_HZ_DEFAULT: Final[float] = 1.0


# =============================================================================
# Visualization (rollout arrows)
# =============================================================================
MARKER_FRAME_ID: Final[str] = "world"
MARKER_NAMESPACE: Final[str] = "nav_coll_check"
MARKER_SCALE_XYZ: Final[Tuple[float, float, float]] = (0.1, 0.025, 0.025)
MARKER_COLOR_RGBA: Final[Tuple[float, float, float, float]] = (0.0, 0.0, 1.0, 1.0)


# =============================================================================
# Virtual base joint (floating base expressed as named joint positions)
# =============================================================================
VIRTUAL_JOINT_PREFIX: Final[str] = "world_virtual_joint"
VIRTUAL_JOINT_NAMES: Final[Tuple[str, ...]] = (
    f"{VIRTUAL_JOINT_PREFIX}/trans_x",
    f"{VIRTUAL_JOINT_PREFIX}/trans_y",
    f"{VIRTUAL_JOINT_PREFIX}/trans_z",
    f"{VIRTUAL_JOINT_PREFIX}/rot_x",
    f"{VIRTUAL_JOINT_PREFIX}/rot_y",
    f"{VIRTUAL_JOINT_PREFIX}/rot_z",
    f"{VIRTUAL_JOINT_PREFIX}/rot_w",
)


__all__ = [
    "NODE_NAME_COLLISION_CHECKER",
    "TOPIC_ENVIRONMENT_POINTS",
    "TOPIC_ROBOT_POSE",
    "TOPIC_JOINT_STATES",
    "TOPIC_CMD_VEL_RAW",
    "TOPIC_CMD_VEL_SAFE",
    "TOPIC_MARKERS",
    "TOPIC_IN_COLLISION_STATE",
    "TOPIC_STATE",
    "QOS_DEPTH_ENVIRONMENT",
    "QOS_DEPTH_ROBOT_POSE",
    "QOS_DEPTH_JOINT_STATES",
    "QOS_DEPTH_CMD_VEL",
    "QOS_DEPTH_MARKERS",
    "QOS_DEPTH_STATE",
    "PARAM_ROLL_OUT_STEP_TIME",
    "PARAM_ROLL_OUT_STEPS",
    "PARAM_PASS_THROUGH",
    "ROLL_OUT_STEP_TIME_S_DEFAULT",
    "ROLL_OUT_STEPS_DEFAULT",
    "PASS_THROUGH_DEFAULT",
    "ANGULAR_EPSILON_RADPS",
    "FOOTPRINT_RADIUS_M_DEFAULT",
    "FOOTPRINT_MIN_Z_M_DEFAULT",
    "FOOTPRINT_MAX_Z_M_DEFAULT",
    "MISSING_POSE_WARN_PERIOD_S",
    "COLLISION_INFO_PERIOD_S",
    "INBOUND_ERROR_LOG_PERIOD_S",
    "STATE_PUBLISH_HZ_DEFAULT",
    "MARKER_FRAME_ID",
    "MARKER_NAMESPACE",
    "MARKER_SCALE_XYZ",
    "MARKER_COLOR_RGBA",
    "VIRTUAL_JOINT_PREFIX",
    "VIRTUAL_JOINT_NAMES",
]
