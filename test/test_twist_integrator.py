"""Closed-form unicycle integration of one rollout step."""

import math

import pytest

from savo_collision_check.constants import ANGULAR_EPSILON_RADPS
from savo_collision_check.kinematics import integrate_twist, planar_delta
from savo_collision_check.models import Pose3D, Twist, Vector3


class TestStraightBranch:
    def test_pure_forward(self):
        dx, dy, dyaw = planar_delta(Twist.from_planar(0.5, 0.0), 0.1)
        assert dx == pytest.approx(0.05)
        assert dy == 0.0
        assert dyaw == 0.0

    def test_tiny_yaw_rate_treated_as_straight(self):
        dx, dy, dyaw = planar_delta(Twist.from_planar(1.0, 0.5 * ANGULAR_EPSILON_RADPS), 1.0)
        assert (dx, dy, dyaw) == (1.0, 0.0, 0.0)

    def test_zero_twist_is_identity(self):
        assert integrate_twist(Twist.zero(), 0.1).is_close(Pose3D.identity())

    def test_reverse(self):
        delta = integrate_twist(Twist.from_planar(-0.2, 0.0), 0.5)
        assert delta.x == pytest.approx(-0.1)
        assert delta.y == 0.0


class TestArcBranch:
    def test_unit_arc(self):
        delta = integrate_twist(Twist.from_planar(1.0, 1.0), 1.0)
        assert delta.x == pytest.approx(math.sin(1.0), abs=1e-4)
        assert delta.y == pytest.approx(1.0 - math.cos(1.0), abs=1e-4)
        assert delta.yaw == pytest.approx(1.0)
        assert delta.x == pytest.approx(0.8415, abs=1e-4)
        assert delta.y == pytest.approx(0.4597, abs=1e-4)

    def test_negative_yaw_rate_turns_right(self):
        delta = integrate_twist(Twist.from_planar(1.0, -1.0), 1.0)
        assert delta.y == pytest.approx(-(1.0 - math.cos(1.0)))
        assert delta.yaw == pytest.approx(-1.0)

    def test_rotation_in_place(self):
        delta = integrate_twist(Twist.from_planar(0.0, 0.8), 0.5)
        assert delta.x == pytest.approx(0.0)
        assert delta.y == pytest.approx(0.0)
        assert delta.yaw == pytest.approx(0.4)

    @pytest.mark.parametrize("sign", [1.0, -1.0])
    def test_branches_agree_at_threshold(self, sign):
        straight = planar_delta(Twist.from_planar(1.0, sign * 0.999 * ANGULAR_EPSILON_RADPS), 1.0)
        arc = planar_delta(Twist.from_planar(1.0, sign * ANGULAR_EPSILON_RADPS), 1.0)
        assert straight == (1.0, 0.0, 0.0)
        assert arc[2] == pytest.approx(sign * ANGULAR_EPSILON_RADPS)
        for a, b in zip(straight, arc):
            assert a == pytest.approx(b, abs=1e-3)

    def test_four_quarter_turns_close_the_circle(self):
        delta = integrate_twist(Twist.from_planar(1.0, math.pi / 2), 1.0)
        pose = Pose3D.identity()
        for _ in range(4):
            pose = pose * delta
        assert pose.is_close(Pose3D.identity(), tol=1e-9)

    def test_lateral_and_vertical_components_ignored(self):
        twist = Twist(linear=Vector3(0.5, 0.3, 0.2), angular=Vector3(0.1, 0.2, 0.0))
        delta = integrate_twist(twist, 0.1)
        assert delta.y == 0.0
        assert delta.z == 0.0
        assert delta.x == pytest.approx(0.05)


class TestMultiStepArc:
    def test_arc_from_rotated_start(self):
        # v = 1 m/s, w = 0.5 rad/s -> circle of radius 2 m; start facing +y
        start = Pose3D.from_xyz_yaw(1.0, 2.0, yaw=math.pi / 2)
        delta = integrate_twist(Twist.from_planar(1.0, 0.5), 0.1)

        pose = start
        for _ in range(10):
            pose = pose * delta

        theta = 0.5 * 1.0
        radius = 2.0
        # local arc displacement, rotated by the start yaw
        local_x = radius * math.sin(theta)
        local_y = radius * (1.0 - math.cos(theta))
        assert pose.x == pytest.approx(1.0 - local_y)
        assert pose.y == pytest.approx(2.0 + local_x)
        assert pose.yaw == pytest.approx(math.pi / 2 + theta)

    def test_steps_stay_on_circle(self):
        # turning left from the origin: centre of rotation at (0, r)
        radius = 0.4 / 0.8
        delta = integrate_twist(Twist.from_planar(0.4, 0.8), 0.25)
        pose = Pose3D.identity()
        for _ in range(12):
            pose = pose * delta
            assert math.hypot(pose.x, pose.y - radius) == pytest.approx(radius)
