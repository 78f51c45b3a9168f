#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/ros/adapters.py
-------------------------------------------------
Conversions between ROS messages and the ROS-agnostic models.

- geometry_msgs/Twist          <-> models.Twist
- geometry_msgs/Pose(Stamped)  <-> models.Pose3D
- sensor_msgs/JointState       <-> models.JointState
- sensor_msgs/PointCloud2       -> numpy (N, 3) obstacle points
- MarkerSpec list               -> visualization_msgs/MarkerArray
- JSON helpers for the state topic

No node initialization and no publishing here.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional

import numpy as np

from geometry_msgs.msg import Pose, PoseStamped
from geometry_msgs.msg import Twist as TwistMsg
from sensor_msgs.msg import JointState as JointStateMsg
from sensor_msgs.msg import PointCloud2
from sensor_msgs_py import point_cloud2
from visualization_msgs.msg import Marker, MarkerArray

from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D, Quaternion, Vector3
from savo_collision_check.models.rollout import CollidingConfiguration
from savo_collision_check.models.twist import Twist
from savo_collision_check.visualization.rollout_markers import MarkerSpec


# =============================================================================
# JSON helpers
# =============================================================================
def compact_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"), default=str)


def pretty_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2, default=str)


# =============================================================================
# Twist
# =============================================================================
def twist_msg_to_model(msg: TwistMsg) -> Twist:
    return Twist(
        linear=Vector3(float(msg.linear.x), float(msg.linear.y), float(msg.linear.z)),
        angular=Vector3(float(msg.angular.x), float(msg.angular.y), float(msg.angular.z)),
    )


def twist_model_to_msg(twist: Twist) -> TwistMsg:
    msg = TwistMsg()
    msg.linear.x, msg.linear.y, msg.linear.z = twist.linear.as_tuple()
    msg.angular.x, msg.angular.y, msg.angular.z = twist.angular.as_tuple()
    return msg


# =============================================================================
# Pose
# =============================================================================
def pose_msg_to_model(msg: Pose) -> Pose3D:
    """Raises PoseValidationError for NaN positions or a zero quaternion."""
    return Pose3D(
        position=Vector3(float(msg.position.x), float(msg.position.y), float(msg.position.z)),
        orientation=Quaternion(
            float(msg.orientation.x),
            float(msg.orientation.y),
            float(msg.orientation.z),
            float(msg.orientation.w),
        ),
    )


def pose_stamped_to_model(msg: PoseStamped) -> Pose3D:
    return pose_msg_to_model(msg.pose)


def pose_model_to_msg(pose: Pose3D) -> Pose:
    msg = Pose()
    msg.position.x, msg.position.y, msg.position.z = pose.position.as_tuple()
    (
        msg.orientation.x,
        msg.orientation.y,
        msg.orientation.z,
        msg.orientation.w,
    ) = pose.orientation.as_tuple()
    return msg


# =============================================================================
# Joint state
# =============================================================================
def joint_state_msg_to_model(msg: JointStateMsg) -> JointState:
    return JointState.from_names_positions(msg.name, msg.position)


def joint_state_model_to_msg(joint_state: JointState, *, stamp: Optional[Any] = None) -> JointStateMsg:
    msg = JointStateMsg()
    if stamp is not None:
        msg.header.stamp = stamp
    msg.name = list(joint_state.names)
    msg.position = [float(joint_state.positions[n]) for n in msg.name]
    return msg


def colliding_configuration_to_msg(
    config: CollidingConfiguration,
    *,
    frame_id: str,
    stamp: Optional[Any] = None,
) -> JointStateMsg:
    """Colliding robot configuration (virtual base joint included)."""
    msg = joint_state_model_to_msg(config.joint_state, stamp=stamp)
    msg.header.frame_id = frame_id
    return msg


# =============================================================================
# Environment
# =============================================================================
def point_cloud_to_xyz(msg: PointCloud2) -> np.ndarray:
    """(N, 3) float64 array of the finite x/y/z points in the cloud."""
    pts = point_cloud2.read_points_numpy(msg, field_names=("x", "y", "z"), skip_nans=True)
    return np.asarray(pts, dtype=np.float64).reshape(-1, 3)


# =============================================================================
# Markers
# =============================================================================
def marker_spec_to_msg(spec: MarkerSpec, *, stamp: Optional[Any] = None) -> Marker:
    marker = Marker()
    marker.header.frame_id = spec.frame_id
    if stamp is not None:
        marker.header.stamp = stamp
    marker.ns = spec.ns
    marker.id = int(spec.id)
    marker.type = int(spec.type)
    marker.action = int(spec.action)
    marker.pose = pose_model_to_msg(spec.pose)
    marker.scale.x, marker.scale.y, marker.scale.z = spec.scale
    marker.color.r, marker.color.g, marker.color.b, marker.color.a = spec.color_rgba
    return marker


def marker_specs_to_marker_array(specs: Iterable[MarkerSpec], *, stamp: Optional[Any] = None) -> MarkerArray:
    msg = MarkerArray()
    msg.markers = [marker_spec_to_msg(s, stamp=stamp) for s in specs]
    return msg


__all__ = [
    "compact_json",
    "pretty_json",
    "twist_msg_to_model",
    "twist_model_to_msg",
    "pose_msg_to_model",
    "pose_stamped_to_model",
    "pose_model_to_msg",
    "joint_state_msg_to_model",
    "joint_state_model_to_msg",
    "colliding_configuration_to_msg",
    "point_cloud_to_xyz",
    "marker_spec_to_msg",
    "marker_specs_to_marker_array",
]
