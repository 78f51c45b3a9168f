#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/nodes/collision_checker_node.py
-----------------------------------------------------------------
ROS 2 Jazzy navigation collision checker for Robot Savo.

Purpose
-------
Sits between the navigation/teleop command source and the base driver. Every
velocity command is rolled out over a short horizon from the latest robot pose
and checked against the current environment model. If any predicted pose
collides, an all-zero command is forwarded instead.

Data flow
---------
Subscribe:
- environment_points   (sensor_msgs/PointCloud2)  obstacle points, world frame
- robot_pose           (geometry_msgs/PoseStamped) robot base pose, world frame
- joint_states         (sensor_msgs/JointState)
- cmd_vel_raw          (geometry_msgs/Twist)

Publish:
- cmd_vel_safe                       (geometry_msgs/Twist)
- ~/nav_collision_check_markers      (visualization_msgs/MarkerArray)
- ~/in_collision_state               (sensor_msgs/JointState) only while
                                     someone is subscribed
- ~/state                            (std_msgs/String, JSON)

Live parameters
---------------
`roll_out_step_time`, `roll_out_steps` and `pass_through` can be changed with
`ros2 param set`; an invalid update is rejected and the previous config stays
in effect. Each command uses one consistent snapshot.

Important
---------
Until the first robot pose arrives, commands are forwarded UNCHECKED with a
throttled warning (fail-open). Run the localization source before relying on
this node for protection.

Malformed inbound messages (zero quaternion, badly shaped cloud) are dropped
with a throttled warning; the last good pose, obstacles and joint state stay
in use.

All callbacks run on the default single-threaded executor, so environment
updates and rollouts never interleave.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import rclpy
from rclpy.node import Node

from geometry_msgs.msg import PoseStamped
from geometry_msgs.msg import Twist as TwistMsg
from sensor_msgs.msg import JointState as JointStateMsg
from sensor_msgs.msg import PointCloud2
from std_msgs.msg import String
from visualization_msgs.msg import MarkerArray

from savo_collision_check.constants import INBOUND_ERROR_LOG_PERIOD_S, NODE_NAME_COLLISION_CHECKER
from savo_collision_check.exceptions import CollisionCheckError
from savo_collision_check.models.rollout import CollidingConfiguration
from savo_collision_check.ros.adapters import (
    colliding_configuration_to_msg,
    compact_json,
    joint_state_msg_to_model,
    marker_specs_to_marker_array,
    point_cloud_to_xyz,
    pose_stamped_to_model,
    pretty_json,
    twist_model_to_msg,
    twist_msg_to_model,
)
from savo_collision_check.ros.params import (
    declare_all_params,
    get_bool,
    get_float,
    get_str,
    make_rollout_param_callback,
    read_footprint_params,
    read_rollout_config,
    read_topic_params,
)
from savo_collision_check.ros.qos_profiles import (
    QOS_CMD_VEL,
    QOS_ENVIRONMENT,
    QOS_JOINT_STATES,
    QOS_MARKERS,
    QOS_ROBOT_POSE,
    QOS_STATE_STRING,
)
from savo_collision_check.safety.collision_oracle import DiskFootprintOracle
from savo_collision_check.safety.config_store import ConfigStore
from savo_collision_check.safety.safety_gate import SafetyGate
from savo_collision_check.safety.state_cache import StateCache
from savo_collision_check.utils.logging import (
    LoggerAdapter,
    RateLimitedLogger,
    format_exception,
    format_kv,
    get_logger_adapter,
    log_exception,
)
from savo_collision_check.version import get_package_version_info
from savo_collision_check.visualization.rollout_markers import build_rollout_markers


class CollisionCheckerNode(Node):
    """Velocity command safety filter (rollout + collision oracle)."""

    def __init__(self) -> None:
        super().__init__(NODE_NAME_COLLISION_CHECKER)

        # ---------------------------------------------------------------------
        # Parameters
        # ---------------------------------------------------------------------
        declare_all_params(self)
        self.topics = read_topic_params(self)
        footprint = read_footprint_params(self)
        self.frame_id = get_str(self, "frame_id", "world")
        self.state_publish_hz = get_float(self, "state_publish_hz", 1.0, min_value=0.1, max_value=50.0)
        self.pretty_json = get_bool(self, "pretty_json", False)

        self.log = LoggerAdapter(self.get_logger())
        self._inbound_rl = RateLimitedLogger(self.log, period_s=INBOUND_ERROR_LOG_PERIOD_S)

        # ---------------------------------------------------------------------
        # Core (ROS-agnostic)
        # ---------------------------------------------------------------------
        self.config_store = ConfigStore(read_rollout_config(self))
        self.state_cache = StateCache()
        self.oracle = DiskFootprintOracle(
            footprint.radius_m,
            min_z_m=footprint.min_z_m,
            max_z_m=footprint.max_z_m,
        )
        self.gate = SafetyGate(
            self.config_store,
            self.state_cache,
            self.oracle,
            logger=self.log,
            collision_observer=self._on_collision,
        )
        self._last_environment_update_ms: Optional[float] = None
        self.dropped_messages: Dict[str, int] = {}

        # ---------------------------------------------------------------------
        # Publishers
        # ---------------------------------------------------------------------
        self.pub_cmd_safe = self.create_publisher(TwistMsg, self.topics.cmd_vel_safe, QOS_CMD_VEL)
        self.pub_markers = self.create_publisher(MarkerArray, self.topics.markers, QOS_MARKERS)
        self.pub_in_collision = self.create_publisher(
            JointStateMsg, self.topics.in_collision_state, QOS_MARKERS
        )
        self.pub_state = self.create_publisher(String, self.topics.state, QOS_STATE_STRING)

        # ---------------------------------------------------------------------
        # Subscriptions
        # ---------------------------------------------------------------------
        self.sub_environment = self.create_subscription(
            PointCloud2, self.topics.environment_points, self._on_environment, QOS_ENVIRONMENT
        )
        self.sub_pose = self.create_subscription(
            PoseStamped, self.topics.robot_pose, self._on_robot_pose, QOS_ROBOT_POSE
        )
        self.sub_joint_states = self.create_subscription(
            JointStateMsg, self.topics.joint_states, self._on_joint_states, QOS_JOINT_STATES
        )
        self.sub_cmd = self.create_subscription(
            TwistMsg, self.topics.cmd_vel_raw, self._on_cmd_vel, QOS_CMD_VEL
        )

        self.add_on_set_parameters_callback(make_rollout_param_callback(self.config_store, self.log))
        self.state_timer = self.create_timer(1.0 / self.state_publish_hz, self._publish_state)

        cfg = self.config_store.snapshot()
        self.get_logger().info(
            f"{get_package_version_info().banner()} | {NODE_NAME_COLLISION_CHECKER} started | "
            f"in={self.topics.cmd_vel_raw} out={self.topics.cmd_vel_safe} "
            f"env={self.topics.environment_points} pose={self.topics.robot_pose} | "
            f"step_time={cfg.step_time:.3f}s steps={cfg.step_count} pass_through={cfg.pass_through} | "
            f"footprint r={footprint.radius_m:.2f}m z=[{footprint.min_z_m:.2f},{footprint.max_z_m:.2f}]"
        )

    # =========================================================================
    # Callbacks
    # =========================================================================
    def _on_environment(self, msg: PointCloud2) -> None:
        t0 = time.monotonic()
        try:
            points = point_cloud_to_xyz(msg)
            self.oracle.update_environment(points)
        except (CollisionCheckError, KeyError, ValueError) as e:
            self._drop_inbound("environment", "Dropped environment update, keeping previous obstacles", e)
            return
        self.state_cache.note_environment_update()
        self._last_environment_update_ms = (time.monotonic() - t0) * 1000.0
        self.log.debug(
            "Environment updated | "
            + format_kv(points=self.oracle.point_count, ms=f"{self._last_environment_update_ms:.2f}")
        )

    def _on_robot_pose(self, msg: PoseStamped) -> None:
        try:
            pose = pose_stamped_to_model(msg)
        except (CollisionCheckError, ValueError) as e:
            self._drop_inbound("robot_pose", "Dropped robot pose, keeping previous pose", e)
            return
        self.state_cache.update_robot_pose(pose)

    def _on_joint_states(self, msg: JointStateMsg) -> None:
        try:
            joint_state = joint_state_msg_to_model(msg)
        except (TypeError, ValueError) as e:
            self._drop_inbound("joint_states", "Dropped joint state, keeping previous joint state", e)
            return
        self.state_cache.update_joint_state(joint_state)

    def _on_cmd_vel(self, msg: TwistMsg) -> None:
        command, steps = self.gate.filter(twist_msg_to_model(msg))

        if steps:
            self.pub_markers.publish(
                marker_specs_to_marker_array(
                    build_rollout_markers(steps, frame_id=self.frame_id),
                    stamp=self.get_clock().now().to_msg(),
                )
            )
        self.pub_cmd_safe.publish(twist_model_to_msg(command))

    def _drop_inbound(self, topic: str, message: str, exc: BaseException) -> None:
        self.dropped_messages[topic] = self.dropped_messages.get(topic, 0) + 1
        self._inbound_rl.warn(
            topic,
            format_exception(exc, message=f"{message}. This message is throttled.", component=topic),
        )

    def _on_collision(self, config: CollidingConfiguration) -> None:
        if self.pub_in_collision.get_subscription_count() == 0:
            return
        self.pub_in_collision.publish(
            colliding_configuration_to_msg(
                config,
                frame_id=self.frame_id,
                stamp=self.get_clock().now().to_msg(),
            )
        )

    # =========================================================================
    # State publishing
    # =========================================================================
    def _build_state(self) -> Dict[str, Any]:
        return {
            "node": NODE_NAME_COLLISION_CHECKER,
            "version": get_package_version_info().to_dict(),
            "gate": self.gate.to_dict(),
            "cache": self.state_cache.to_dict(),
            "dropped_messages": dict(self.dropped_messages),
            "environment": {
                "points": self.oracle.point_count,
                "last_update_ms": self._last_environment_update_ms,
            },
            "topics": {
                "cmd_vel_raw": self.topics.cmd_vel_raw,
                "cmd_vel_safe": self.topics.cmd_vel_safe,
                "environment_points": self.topics.environment_points,
                "robot_pose": self.topics.robot_pose,
            },
        }

    def _publish_state(self) -> None:
        payload = self._build_state()
        msg = String()
        msg.data = pretty_json(payload) if self.pretty_json else compact_json(payload)
        self.pub_state.publish(msg)

    # =========================================================================
    # Shutdown
    # =========================================================================
    def destroy_node(self) -> bool:
        self.get_logger().info(
            f"Shutting down {NODE_NAME_COLLISION_CHECKER} | " + format_kv(**self.gate.stats.to_dict())
        )
        return super().destroy_node()


# =============================================================================
# Entry point
# =============================================================================
def main(args=None) -> None:
    rclpy.init(args=args)
    node: Optional[CollisionCheckerNode] = None
    try:
        node = CollisionCheckerNode()
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        log_exception(get_logger_adapter(node), e, message="Fatal error", component=NODE_NAME_COLLISION_CHECKER)
        raise
    finally:
        if node is not None:
            node.destroy_node()
        rclpy.try_shutdown()


if __name__ == "__main__":
    main()
