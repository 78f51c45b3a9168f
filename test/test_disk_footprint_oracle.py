"""Reference cylinder-footprint oracle over obstacle points."""

import numpy as np
import pytest

from savo_collision_check.exceptions import OracleConfigError
from savo_collision_check.models import JointState, Pose3D
from savo_collision_check.safety import DiskFootprintOracle


@pytest.fixture
def oracle():
    return DiskFootprintOracle(0.3, min_z_m=0.02, max_z_m=1.2)


class TestEnvironment:
    def test_empty_world_never_collides(self, oracle):
        assert oracle.collides(Pose3D.identity(), JointState()) is False
        assert oracle.last_contact_count == 0

    def test_update_replaces_points(self, oracle):
        oracle.update_environment([[0.1, 0.0, 0.5]])
        oracle.update_environment([[5.0, 5.0, 0.5], [6.0, 6.0, 0.5]])
        assert oracle.point_count == 2
        assert oracle.collides(Pose3D.identity(), JointState()) is False

    def test_empty_update_clears(self, oracle):
        oracle.update_environment([[0.1, 0.0, 0.5]])
        oracle.update_environment(np.zeros((0, 3)))
        assert oracle.point_count == 0

    def test_non_finite_rows_dropped(self, oracle):
        oracle.update_environment([[0.1, 0.0, np.nan], [3.0, 0.0, 0.5]])
        assert oracle.point_count == 1

    def test_bad_shape_rejected(self, oracle):
        with pytest.raises(ValueError):
            oracle.update_environment([[1.0, 2.0]])


class TestQuery:
    def test_point_inside_radius(self, oracle):
        oracle.update_environment([[0.2, 0.1, 0.5]])
        assert oracle.collides(Pose3D.identity(), JointState()) is True
        assert oracle.last_contact_count == 1

    def test_point_outside_radius(self, oracle):
        oracle.update_environment([[0.31, 0.0, 0.5]])
        assert oracle.collides(Pose3D.identity(), JointState()) is False

    def test_floor_and_overhang_ignored(self, oracle):
        oracle.update_environment([[0.0, 0.0, 0.0], [0.0, 0.0, 1.5]])
        assert oracle.collides(Pose3D.identity(), JointState()) is False

    def test_height_band_follows_pose(self, oracle):
        oracle.update_environment([[0.0, 0.0, 2.5]])
        assert oracle.collides(Pose3D.from_xyz_yaw(0.0, 0.0, z=2.0), JointState()) is True

    def test_query_counter(self, oracle):
        for _ in range(3):
            oracle.collides(Pose3D.identity(), JointState())
        assert oracle.query_count == 3


class TestConstruction:
    @pytest.mark.parametrize("radius", [0.0, -0.1, float("nan")])
    def test_bad_radius(self, radius):
        with pytest.raises(OracleConfigError):
            DiskFootprintOracle(radius)

    def test_inverted_band(self):
        with pytest.raises(OracleConfigError):
            DiskFootprintOracle(0.3, min_z_m=1.0, max_z_m=0.5)
