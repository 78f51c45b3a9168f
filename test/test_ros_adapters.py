"""Message conversions; skipped when no ROS 2 environment is sourced."""

import pytest

pytest.importorskip("rclpy")
point_cloud2 = pytest.importorskip("sensor_msgs_py.point_cloud2")

from geometry_msgs.msg import PoseStamped  # noqa: E402
from geometry_msgs.msg import Twist as TwistMsg  # noqa: E402
from sensor_msgs.msg import JointState as JointStateMsg  # noqa: E402
from std_msgs.msg import Header  # noqa: E402

from savo_collision_check.models import CollidingConfiguration, JointState, Pose3D, RolloutStep  # noqa: E402
from savo_collision_check.ros.adapters import (  # noqa: E402
    colliding_configuration_to_msg,
    joint_state_msg_to_model,
    marker_specs_to_marker_array,
    point_cloud_to_xyz,
    pose_stamped_to_model,
    twist_model_to_msg,
    twist_msg_to_model,
)
from savo_collision_check.visualization import build_rollout_markers  # noqa: E402


def test_twist_fields_preserved():
    msg = TwistMsg()
    msg.linear.x, msg.linear.y = 0.4, 0.1
    msg.angular.z = -0.3
    out = twist_model_to_msg(twist_msg_to_model(msg))
    assert (out.linear.x, out.linear.y, out.angular.z) == (0.4, 0.1, -0.3)


def test_pose_stamped_quaternion_normalized():
    msg = PoseStamped()
    msg.pose.position.x = 1.0
    msg.pose.orientation.z = 2.0
    msg.pose.orientation.w = 2.0
    pose = pose_stamped_to_model(msg)
    assert pose.x == 1.0
    assert pose.orientation.norm() == pytest.approx(1.0)


def test_joint_state_names_and_positions():
    msg = JointStateMsg()
    msg.name = ["pan", "tilt"]
    msg.position = [0.1, -0.2]
    assert joint_state_msg_to_model(msg).positions == {"pan": 0.1, "tilt": -0.2}


def test_colliding_configuration_message():
    pose = Pose3D.from_xyz_yaw(0.15, 0.0)
    config = CollidingConfiguration(2, pose, JointState().with_virtual_base(pose))
    msg = colliding_configuration_to_msg(config, frame_id="world")
    assert msg.header.frame_id == "world"
    assert msg.name[0] == "world_virtual_joint/trans_x"
    assert msg.position[0] == pytest.approx(0.15)


def test_point_cloud_to_xyz():
    header = Header(frame_id="world")
    cloud = point_cloud2.create_cloud_xyz32(header, [[0.1, 0.2, 0.3], [1.0, 2.0, 3.0]])
    pts = point_cloud_to_xyz(cloud)
    assert pts.shape == (2, 3)
    assert pts[1].tolist() == pytest.approx([1.0, 2.0, 3.0])


def test_marker_array():
    steps = [RolloutStep(i, Pose3D.from_xyz_yaw(0.1 * i, 0.0)) for i in range(3)]
    msg = marker_specs_to_marker_array(build_rollout_markers(steps))
    assert [m.id for m in msg.markers] == [0, 1, 2]
    assert msg.markers[0].ns == "nav_coll_check"
    assert msg.markers[0].header.frame_id == "world"
    assert msg.markers[2].color.b == 1.0
