#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/kinematics/twist_integrator.py
----------------------------------------------------------------
Closed-form unicycle integration of a velocity command over one step.

Model
-----
Only forward speed `v = linear.x` and yaw rate `w = angular.z` are used
(z, roll and pitch of the command are ignored).

- |w| < 1e-4 (straight line):
    dx = v*dt, dy = 0, dyaw = 0
- otherwise (circular arc of radius r = v/w):
    dyaw = w*dt
    dx   = sin(dyaw) * r
    dy   = r - cos(dyaw) * r

The delta is returned as a Pose3D whose translation is (dx, dy, 0) in the
frame the step starts from and whose rotation is `dyaw` about +Z. Composing
the current pose with it (`pose * delta`) advances the robot by one step.

Both branches agree as w -> 0 (sin(wt)/w -> t, (1 - cos(wt))/w -> 0), so the
threshold only guards the division.
"""

from __future__ import annotations

import math
from typing import Tuple

from savo_collision_check.constants import ANGULAR_EPSILON_RADPS
from savo_collision_check.models.pose import Pose3D, Vector3, yaw_to_quaternion
from savo_collision_check.models.twist import Twist


def planar_delta(twist: Twist, step_time: float) -> Tuple[float, float, float]:
    """
    Return (dx, dy, dyaw) travelled during `step_time` seconds.
    """
    v = float(twist.linear.x)
    w = float(twist.angular.z)

    if abs(w) < ANGULAR_EPSILON_RADPS:
        return v * step_time, 0.0, 0.0

    dist_change = v * step_time
    angle_change = w * step_time
    arc_radius = dist_change / angle_change

    dx = math.sin(angle_change) * arc_radius
    dy = arc_radius - math.cos(angle_change) * arc_radius
    return dx, dy, angle_change


def integrate_twist(twist: Twist, step_time: float) -> Pose3D:
    """
    Relative pose after applying `twist` for `step_time` seconds.

    Pure function; no side effects.
    """
    dx, dy, dyaw = planar_delta(twist, step_time)
    return Pose3D(Vector3(dx, dy, 0.0), yaw_to_quaternion(dyaw))


__all__ = [
    "planar_delta",
    "integrate_twist",
]
