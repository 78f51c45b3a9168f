#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/collision_oracle.py
------------------------------------------------------------
Collision query interface used by the rollout evaluator, plus a reference
backend for robots whose shape is well approximated by a cylinder.

Interface
---------
    oracle.collides(pose, joint_state) -> bool

The rollout evaluator depends on nothing else. Any object with that method
works (a full mesh/octree collision engine, a costmap lookup, a test double).

Backends that own an environment representation also implement
`update_environment(update)`; the node forwards environment messages to it
and never interprets them itself.

Failure policy
--------------
Exceptions raised inside `collides()` are not caught anywhere in this package.
There is no "safe default" verdict, so a failing query fails the command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import numpy as np

from savo_collision_check.constants import (
    FOOTPRINT_MAX_Z_M_DEFAULT,
    FOOTPRINT_MIN_Z_M_DEFAULT,
    FOOTPRINT_RADIUS_M_DEFAULT,
)
from savo_collision_check.exceptions import ErrorContext, OracleConfigError
from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D


# =============================================================================
# Interfaces
# =============================================================================
class CollisionOracle(ABC):
    """Answers "is the robot, at this pose and joint configuration, in collision?"."""

    @abstractmethod
    def collides(self, pose: Pose3D, joint_state: JointState) -> bool:
        raise NotImplementedError


class EnvironmentModel(ABC):
    """Backend that keeps its own environment representation."""

    @abstractmethod
    def update_environment(self, update: Any) -> None:
        raise NotImplementedError


# =============================================================================
# Reference backend: cylinder footprint vs. obstacle points
# =============================================================================
class DiskFootprintOracle(CollisionOracle, EnvironmentModel):
    """
    Robot approximated as an upright cylinder around the base pose.

    - radius_m : planar footprint radius
    - min_z_m / max_z_m : height band relative to the base pose; points
      outside it (floor returns, overhangs above the robot) are ignored

    Environment: `N x 3` obstacle points in the same world frame as the robot
    pose. Every update replaces the previous cloud. Until the first update the
    oracle sees an empty world.

    The joint state is accepted for interface compatibility; a cylinder does
    not change shape with joint positions.
    """

    def __init__(
        self,
        radius_m: float = FOOTPRINT_RADIUS_M_DEFAULT,
        *,
        min_z_m: float = FOOTPRINT_MIN_Z_M_DEFAULT,
        max_z_m: float = FOOTPRINT_MAX_Z_M_DEFAULT,
    ) -> None:
        if not np.isfinite(radius_m) or radius_m <= 0.0:
            raise OracleConfigError(
                "Footprint radius must be finite and > 0",
                context=ErrorContext(component="disk_footprint_oracle", field_name="radius_m", value=radius_m),
            )
        if not (np.isfinite(min_z_m) and np.isfinite(max_z_m)) or min_z_m > max_z_m:
            raise OracleConfigError(
                "Footprint height band must be finite with min_z_m <= max_z_m",
                context=ErrorContext(
                    component="disk_footprint_oracle",
                    field_name="min_z_m/max_z_m",
                    value=(min_z_m, max_z_m),
                ),
            )

        self.radius_m = float(radius_m)
        self.min_z_m = float(min_z_m)
        self.max_z_m = float(max_z_m)

        self._points = np.zeros((0, 3), dtype=np.float64)
        self.last_contact_count: Optional[int] = None
        self.query_count = 0

    # ---- Environment -------------------------------------------------------

    @property
    def point_count(self) -> int:
        return int(self._points.shape[0])

    def update_environment(self, update: Any) -> None:
        """
        Replace the obstacle cloud. Accepts anything array-like of shape
        (N, 3); rows with non-finite values are dropped.
        """
        pts = np.asarray(update, dtype=np.float64)
        if pts.size == 0:
            self._points = np.zeros((0, 3), dtype=np.float64)
            return
        if pts.ndim != 2 or pts.shape[1] != 3:
            raise ValueError(f"Obstacle points must have shape (N, 3), got {pts.shape}")
        self._points = pts[np.all(np.isfinite(pts), axis=1)]

    # ---- Query -------------------------------------------------------------

    def contact_count(self, pose: Pose3D) -> int:
        """Number of obstacle points inside the footprint at `pose`."""
        if self._points.shape[0] == 0:
            return 0
        rel_z = self._points[:, 2] - pose.z
        in_band = (rel_z >= self.min_z_m) & (rel_z <= self.max_z_m)
        dx = self._points[:, 0] - pose.x
        dy = self._points[:, 1] - pose.y
        inside = (dx * dx + dy * dy) < (self.radius_m * self.radius_m)
        return int(np.count_nonzero(in_band & inside))

    def collides(self, pose: Pose3D, joint_state: JointState) -> bool:
        self.query_count += 1
        self.last_contact_count = self.contact_count(pose)
        return self.last_contact_count > 0


__all__ = [
    "CollisionOracle",
    "EnvironmentModel",
    "DiskFootprintOracle",
]
