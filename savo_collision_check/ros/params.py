#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/ros/params.py
-----------------------------------------------
ROS2 Jazzy parameter helpers for the navigation collision checker.

Purpose
-------
- declare/read the node's parameters with type coercion and bounds
- bundle topic names and footprint settings into dataclasses
- validate live rollout updates (`ros2 param set ...`) before they reach the
  ConfigStore; an invalid set is rejected as a whole

Live parameters
---------------
- roll_out_step_time (float, s, > 0)
- roll_out_steps     (int, >= 0)
- pass_through       (bool)

Everything else is read once at startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from rcl_interfaces.msg import SetParametersResult
from rclpy.node import Node
from rclpy.parameter import Parameter

from savo_collision_check.constants import (
    FOOTPRINT_MAX_Z_M_DEFAULT,
    FOOTPRINT_MIN_Z_M_DEFAULT,
    FOOTPRINT_RADIUS_M_DEFAULT,
    MARKER_FRAME_ID,
    PARAM_PASS_THROUGH,
    PARAM_ROLL_OUT_STEP_TIME,
    PARAM_ROLL_OUT_STEPS,
    PASS_THROUGH_DEFAULT,
    ROLL_OUT_STEP_TIME_S_DEFAULT,
    ROLL_OUT_STEPS_DEFAULT,
    STATE_PUBLISH_HZ_DEFAULT,
    TOPIC_CMD_VEL_RAW,
    TOPIC_CMD_VEL_SAFE,
    TOPIC_ENVIRONMENT_POINTS,
    TOPIC_IN_COLLISION_STATE,
    TOPIC_JOINT_STATES,
    TOPIC_MARKERS,
    TOPIC_ROBOT_POSE,
    TOPIC_STATE,
)
from savo_collision_check.exceptions import ConfigValidationError
from savo_collision_check.safety.config_store import (
    CollisionCheckConfig,
    ConfigStore,
    config_from_mapping,
)
from savo_collision_check.utils.logging import LoggerAdapter


LIVE_PARAMETERS = (PARAM_ROLL_OUT_STEP_TIME, PARAM_ROLL_OUT_STEPS, PARAM_PASS_THROUGH)


# =============================================================================
# Generic low-level helpers
# =============================================================================
def declare_if_missing(node: Node, name: str, default_value: Any) -> None:
    """
    Declare a parameter only if it has not already been declared.
    """
    if not node.has_parameter(name):
        node.declare_parameter(name, default_value)


def get_param(node: Node, name: str, default: Any = None) -> Any:
    if not node.has_parameter(name):
        return default
    value = node.get_parameter(name).value
    return default if value is None else value


def get_str(node: Node, name: str, default: str = "") -> str:
    return str(get_param(node, name, default))


def get_bool(node: Node, name: str, default: bool = False) -> bool:
    return bool(get_param(node, name, default))


def get_float(
    node: Node,
    name: str,
    default: float = 0.0,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    out = float(get_param(node, name, default))
    if min_value is not None and out < min_value:
        out = min_value
    if max_value is not None and out > max_value:
        out = max_value
    return out


# =============================================================================
# Declaration groups
# =============================================================================
def declare_rollout_params(node: Node) -> None:
    declare_if_missing(node, PARAM_ROLL_OUT_STEP_TIME, ROLL_OUT_STEP_TIME_S_DEFAULT)
    declare_if_missing(node, PARAM_ROLL_OUT_STEPS, ROLL_OUT_STEPS_DEFAULT)
    declare_if_missing(node, PARAM_PASS_THROUGH, PASS_THROUGH_DEFAULT)


def declare_topic_params(node: Node) -> None:
    declare_if_missing(node, "topics.environment_points", TOPIC_ENVIRONMENT_POINTS)
    declare_if_missing(node, "topics.robot_pose", TOPIC_ROBOT_POSE)
    declare_if_missing(node, "topics.joint_states", TOPIC_JOINT_STATES)
    declare_if_missing(node, "topics.cmd_vel_raw", TOPIC_CMD_VEL_RAW)
    declare_if_missing(node, "topics.cmd_vel_safe", TOPIC_CMD_VEL_SAFE)
    declare_if_missing(node, "topics.markers", TOPIC_MARKERS)
    declare_if_missing(node, "topics.in_collision_state", TOPIC_IN_COLLISION_STATE)
    declare_if_missing(node, "topics.state", TOPIC_STATE)


def declare_footprint_params(node: Node) -> None:
    declare_if_missing(node, "footprint.radius_m", FOOTPRINT_RADIUS_M_DEFAULT)
    declare_if_missing(node, "footprint.min_z_m", FOOTPRINT_MIN_Z_M_DEFAULT)
    declare_if_missing(node, "footprint.max_z_m", FOOTPRINT_MAX_Z_M_DEFAULT)


def declare_misc_params(node: Node) -> None:
    declare_if_missing(node, "frame_id", MARKER_FRAME_ID)
    declare_if_missing(node, "state_publish_hz", STATE_PUBLISH_HZ_DEFAULT)
    declare_if_missing(node, "pretty_json", False)


def declare_all_params(node: Node) -> None:
    declare_rollout_params(node)
    declare_topic_params(node)
    declare_footprint_params(node)
    declare_misc_params(node)


# =============================================================================
# Dataclass parameter bundles
# =============================================================================
@dataclass
class TopicParams:
    environment_points: str = TOPIC_ENVIRONMENT_POINTS
    robot_pose: str = TOPIC_ROBOT_POSE
    joint_states: str = TOPIC_JOINT_STATES
    cmd_vel_raw: str = TOPIC_CMD_VEL_RAW
    cmd_vel_safe: str = TOPIC_CMD_VEL_SAFE
    markers: str = TOPIC_MARKERS
    in_collision_state: str = TOPIC_IN_COLLISION_STATE
    state: str = TOPIC_STATE


@dataclass
class FootprintParams:
    radius_m: float = FOOTPRINT_RADIUS_M_DEFAULT
    min_z_m: float = FOOTPRINT_MIN_Z_M_DEFAULT
    max_z_m: float = FOOTPRINT_MAX_Z_M_DEFAULT


def read_topic_params(node: Node) -> TopicParams:
    return TopicParams(
        environment_points=get_str(node, "topics.environment_points", TOPIC_ENVIRONMENT_POINTS),
        robot_pose=get_str(node, "topics.robot_pose", TOPIC_ROBOT_POSE),
        joint_states=get_str(node, "topics.joint_states", TOPIC_JOINT_STATES),
        cmd_vel_raw=get_str(node, "topics.cmd_vel_raw", TOPIC_CMD_VEL_RAW),
        cmd_vel_safe=get_str(node, "topics.cmd_vel_safe", TOPIC_CMD_VEL_SAFE),
        markers=get_str(node, "topics.markers", TOPIC_MARKERS),
        in_collision_state=get_str(node, "topics.in_collision_state", TOPIC_IN_COLLISION_STATE),
        state=get_str(node, "topics.state", TOPIC_STATE),
    )


def read_footprint_params(node: Node) -> FootprintParams:
    return FootprintParams(
        radius_m=get_float(node, "footprint.radius_m", FOOTPRINT_RADIUS_M_DEFAULT),
        min_z_m=get_float(node, "footprint.min_z_m", FOOTPRINT_MIN_Z_M_DEFAULT),
        max_z_m=get_float(node, "footprint.max_z_m", FOOTPRINT_MAX_Z_M_DEFAULT),
    )


def read_rollout_config(node: Node) -> CollisionCheckConfig:
    """
    Startup config. Raises ConfigValidationError if the YAML/overrides are
    invalid, so a misconfigured checker refuses to start.
    """
    return config_from_mapping({name: get_param(node, name) for name in LIVE_PARAMETERS})


# =============================================================================
# Live updates
# =============================================================================
def parameters_to_mapping(params: Iterable[Parameter]) -> Dict[str, Any]:
    return {p.name: p.value for p in params if p.name in LIVE_PARAMETERS}


def make_rollout_param_callback(
    store: ConfigStore,
    logger: LoggerAdapter,
) -> Callable[[List[Parameter]], SetParametersResult]:
    """
    Build an `add_on_set_parameters_callback` handler that applies rollout
    parameter changes to `store`, or rejects the whole set if invalid.
    """

    def _on_set_parameters(params: List[Parameter]) -> SetParametersResult:
        mapping = parameters_to_mapping(params)
        if not mapping:
            return SetParametersResult(successful=True)
        try:
            cfg = store.apply_parameters(mapping)
        except ConfigValidationError as exc:
            logger.warn(f"Rejected rollout parameter update: {exc}")
            return SetParametersResult(successful=False, reason=str(exc))
        logger.info(
            "Rollout config updated | "
            f"step_time={cfg.step_time:.3f}s steps={cfg.step_count} pass_through={cfg.pass_through}"
        )
        return SetParametersResult(successful=True)

    return _on_set_parameters


__all__ = [
    "LIVE_PARAMETERS",
    "declare_if_missing",
    "get_param",
    "get_str",
    "get_bool",
    "get_float",
    "declare_rollout_params",
    "declare_topic_params",
    "declare_footprint_params",
    "declare_misc_params",
    "declare_all_params",
    "TopicParams",
    "FootprintParams",
    "read_topic_params",
    "read_footprint_params",
    "read_rollout_config",
    "parameters_to_mapping",
    "make_rollout_param_callback",
]
