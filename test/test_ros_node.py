"""Collision checker node callbacks; skipped when no ROS 2 environment is sourced."""

import math

import pytest

rclpy = pytest.importorskip("rclpy")
pytest.importorskip("geometry_msgs")
pytest.importorskip("sensor_msgs_py")
pytest.importorskip("visualization_msgs")

from geometry_msgs.msg import PoseStamped  # noqa: E402
from geometry_msgs.msg import Twist as TwistMsg  # noqa: E402

from savo_collision_check.models import GateReason  # noqa: E402
from savo_collision_check.nodes.collision_checker_node import CollisionCheckerNode  # noqa: E402


@pytest.fixture
def node():
    rclpy.init()
    n = CollisionCheckerNode()
    try:
        yield n
    finally:
        n.destroy_node()
        rclpy.try_shutdown()


def make_pose_msg(x, y, qw=1.0):
    msg = PoseStamped()
    msg.header.frame_id = "world"
    msg.pose.position.x = x
    msg.pose.position.y = y
    msg.pose.orientation.x = 0.0
    msg.pose.orientation.y = 0.0
    msg.pose.orientation.z = 0.0
    msg.pose.orientation.w = qw
    return msg


class TestMalformedInbound:
    def test_zero_quaternion_pose_keeps_previous(self, node):
        node._on_robot_pose(make_pose_msg(1.0, 2.0))
        node._on_robot_pose(make_pose_msg(5.0, 5.0, qw=0.0))

        pose = node.state_cache.robot_pose
        assert (pose.x, pose.y) == (1.0, 2.0)
        assert node.dropped_messages == {"robot_pose": 1}
        assert node._build_state()["dropped_messages"] == {"robot_pose": 1}

    def test_drops_counted_per_topic(self, node):
        for _ in range(3):
            node._on_robot_pose(make_pose_msg(0.0, 0.0, qw=0.0))
        assert node.dropped_messages["robot_pose"] == 3


class TestCommandHandling:
    def test_non_finite_command_zeroed(self, node):
        node._on_robot_pose(make_pose_msg(0.0, 0.0))
        msg = TwistMsg()
        msg.linear.x = math.nan

        node._on_cmd_vel(msg)

        assert node.gate.last_output.reason is GateReason.INVALID_COMMAND
        assert node.gate.last_output.command.is_zero()

    def test_command_forwarded_without_pose(self, node):
        msg = TwistMsg()
        msg.linear.x = 0.2

        node._on_cmd_vel(msg)

        assert node.gate.last_output.reason is GateReason.NO_ROBOT_POSE
        assert node.gate.last_output.command.linear.x == pytest.approx(0.2)
