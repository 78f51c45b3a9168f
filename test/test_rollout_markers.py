import pytest

from savo_collision_check.models import Pose3D, RolloutStep
from savo_collision_check.visualization import MARKER_TYPE_ARROW, build_rollout_markers


def _steps(n):
    return [RolloutStep(i, Pose3D.from_xyz_yaw(0.05 * (i + 1), 0.0)) for i in range(n)]


def test_one_arrow_per_step():
    markers = build_rollout_markers(_steps(3))

    assert [m.id for m in markers] == [0, 1, 2]
    assert [m.pose.x for m in markers] == pytest.approx([0.05, 0.10, 0.15])
    for m in markers:
        assert m.ns == "nav_coll_check"
        assert m.frame_id == "world"
        assert m.type == MARKER_TYPE_ARROW
        assert m.scale == (0.1, 0.025, 0.025)
        assert m.color_rgba == (0.0, 0.0, 1.0, 1.0)


def test_no_steps_no_markers():
    assert build_rollout_markers([]) == []


def test_custom_frame():
    markers = build_rollout_markers(_steps(1), frame_id="map", ns="test")
    assert markers[0].frame_id == "map"
    assert markers[0].ns == "test"
