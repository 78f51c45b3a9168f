import pytest

from savo_collision_check.constants import VIRTUAL_JOINT_NAMES
from savo_collision_check.models import JointState, Pose3D, Twist


def test_from_parallel_sequences():
    js = JointState.from_names_positions(["a", "b", "c"], [0.1, 0.2])
    assert js.positions == {"a": 0.1, "b": 0.2}


def test_with_virtual_base_sets_seven_coordinates():
    pose = Pose3D.from_xyz_yaw(1.0, 2.0, z=0.1, yaw=0.0)
    js = JointState({"wheel": 0.5}).with_virtual_base(pose)

    assert len(js) == 8
    values = [js.get(n) for n in VIRTUAL_JOINT_NAMES]
    assert values == pytest.approx([1.0, 2.0, 0.1, 0.0, 0.0, 0.0, 1.0])
    assert js.get("wheel") == 0.5


def test_virtual_joint_names():
    assert VIRTUAL_JOINT_NAMES[0] == "world_virtual_joint/trans_x"
    assert VIRTUAL_JOINT_NAMES[-1] == "world_virtual_joint/rot_w"


def test_finite_checks():
    assert JointState({"a": 1.0}).is_finite()
    assert not JointState({"a": float("nan")}).is_finite()
    assert Twist.from_planar(0.1, 0.2).is_finite()
    assert not Twist.from_planar(float("inf"), 0.0).is_finite()
