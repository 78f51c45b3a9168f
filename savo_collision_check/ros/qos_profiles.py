#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/ros/qos_profiles.py
-----------------------------------------------------
Named QoS profiles for the navigation collision checker.

Queue depths
------------
- velocity commands in/out, robot pose : 1  (only the latest matters)
- joint states                         : 5
- environment points                   : 2  (large messages, keep the newest)
- markers / colliding state / status   : 1
"""

from __future__ import annotations

from rclpy.qos import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QoSProfile,
    ReliabilityPolicy,
)

from savo_collision_check.constants import (
    QOS_DEPTH_CMD_VEL,
    QOS_DEPTH_ENVIRONMENT,
    QOS_DEPTH_JOINT_STATES,
    QOS_DEPTH_MARKERS,
    QOS_DEPTH_ROBOT_POSE,
    QOS_DEPTH_STATE,
)


# =============================================================================
# Low-level builders
# =============================================================================
def make_qos(
    *,
    depth: int,
    reliability: ReliabilityPolicy,
    durability: DurabilityPolicy = DurabilityPolicy.VOLATILE,
    history: HistoryPolicy = HistoryPolicy.KEEP_LAST,
    liveliness: LivelinessPolicy = LivelinessPolicy.AUTOMATIC,
) -> QoSProfile:
    """
    Build a QoSProfile with consistent explicit fields (depth floored at 1).
    """
    return QoSProfile(
        history=history,
        depth=max(1, int(depth)),
        reliability=reliability,
        durability=durability,
        liveliness=liveliness,
    )


# =============================================================================
# Named QoS profiles
# =============================================================================
# Command path (cmd_vel_raw -> checker -> cmd_vel_safe)
QOS_CMD_VEL = make_qos(depth=QOS_DEPTH_CMD_VEL, reliability=ReliabilityPolicy.RELIABLE)

# Localization pose feeding the rollout start
QOS_ROBOT_POSE = make_qos(depth=QOS_DEPTH_ROBOT_POSE, reliability=ReliabilityPolicy.RELIABLE)

QOS_JOINT_STATES = make_qos(depth=QOS_DEPTH_JOINT_STATES, reliability=ReliabilityPolicy.RELIABLE)

# Obstacle clouds usually come from sensor pipelines publishing BEST_EFFORT
QOS_ENVIRONMENT = make_qos(depth=QOS_DEPTH_ENVIRONMENT, reliability=ReliabilityPolicy.BEST_EFFORT)

QOS_MARKERS = make_qos(depth=QOS_DEPTH_MARKERS, reliability=ReliabilityPolicy.RELIABLE)

QOS_STATE_STRING = make_qos(depth=QOS_DEPTH_STATE, reliability=ReliabilityPolicy.RELIABLE)


__all__ = [
    "make_qos",
    "QOS_CMD_VEL",
    "QOS_ROBOT_POSE",
    "QOS_JOINT_STATES",
    "QOS_ENVIRONMENT",
    "QOS_MARKERS",
    "QOS_STATE_STRING",
]
