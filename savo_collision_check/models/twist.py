#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/models/twist.py
-------------------------------------------------
Velocity command model (ROS-agnostic mirror of geometry_msgs/Twist).

Only `linear.x` and `angular.z` drive the rollout. The other four fields are
carried through untouched when a command is forwarded and are zeroed together
with the rest when a command is stopped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from savo_collision_check.models.pose import Vector3


@dataclass(frozen=True)
class Twist:
    """Desired body velocity: linear (m/s) and angular (rad/s)."""
    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)

    @classmethod
    def zero(cls) -> "Twist":
        return cls()

    @classmethod
    def from_planar(cls, vx: float, wz: float, vy: float = 0.0) -> "Twist":
        return cls(
            linear=Vector3(float(vx), float(vy), 0.0),
            angular=Vector3(0.0, 0.0, float(wz)),
        )

    @property
    def vx(self) -> float:
        return self.linear.x

    @property
    def wz(self) -> float:
        return self.angular.z

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return self.linear.as_tuple() + self.angular.as_tuple()

    def is_zero(self) -> bool:
        return all(v == 0.0 for v in self.as_tuple())

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.as_tuple())


__all__ = ["Twist"]
