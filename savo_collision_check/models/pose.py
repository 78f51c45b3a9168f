#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/models/pose.py
------------------------------------------------
Rigid-transform algebra (translation + unit quaternion) used by the rollout.

Conventions
-----------
- Quaternions are stored (x, y, z, w), same field order as geometry_msgs.
- `a * b` composes transforms: the pose `b`, expressed in frame `a`, mapped
  into the parent frame of `a`.
- Yaw is the rotation about +Z, wrapped to (-pi, pi].

ROS-agnostic on purpose so the integrator and evaluator can be unit tested
without rclpy.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from savo_collision_check.exceptions import ErrorContext, PoseValidationError


# ---------------------------
# Basic helpers
# ---------------------------

def wrap_to_pi(angle_rad: float) -> float:
    """Wrap angle to (-pi, pi]."""
    a = (angle_rad + math.pi) % (2.0 * math.pi) - math.pi
    if a <= -math.pi:
        a += 2.0 * math.pi
    return a


def _is_finite(*values: float) -> bool:
    return all(math.isfinite(float(v)) for v in values)


# ---------------------------
# Core data structures
# ---------------------------

@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)


# ---------------------------
# Quaternion helpers
# ---------------------------

def quat_normalize(q: Quaternion) -> Quaternion:
    """
    Return the unit quaternion for `q`.

    Raises PoseValidationError for zero-norm or non-finite input.
    """
    if not _is_finite(*q.as_tuple()):
        raise PoseValidationError(
            "Quaternion has non-finite components",
            context=ErrorContext(component="pose", field_name="orientation", value=q.as_tuple()),
        )
    n = q.norm()
    if n < 1e-12:
        raise PoseValidationError(
            "Quaternion has zero norm",
            context=ErrorContext(component="pose", field_name="orientation", value=q.as_tuple()),
        )
    if abs(n - 1.0) < 1e-15:
        return q
    return Quaternion(q.x / n, q.y / n, q.z / n, q.w / n)


def quat_multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product a (x) b."""
    return Quaternion(
        x=a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
        y=a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
        z=a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        w=a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
    )


def quat_rotate(q: Quaternion, v: Vector3) -> Vector3:
    """Rotate vector `v` by unit quaternion `q`."""
    # t = 2 * (q_vec x v); v' = v + w*t + q_vec x t
    tx = 2.0 * (q.y * v.z - q.z * v.y)
    ty = 2.0 * (q.z * v.x - q.x * v.z)
    tz = 2.0 * (q.x * v.y - q.y * v.x)
    return Vector3(
        v.x + q.w * tx + (q.y * tz - q.z * ty),
        v.y + q.w * ty + (q.z * tx - q.x * tz),
        v.z + q.w * tz + (q.x * ty - q.y * tx),
    )


def yaw_to_quaternion(yaw_rad: float) -> Quaternion:
    """Quaternion for a pure rotation about +Z (roll = pitch = 0)."""
    half = 0.5 * yaw_rad
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


def quaternion_to_yaw(q: Quaternion) -> float:
    """Yaw (rad) of a quaternion; intended for planar motion."""
    siny_cosp = 2.0 * (q.w * q.z + q.x * q.y)
    cosy_cosp = 1.0 - 2.0 * (q.y * q.y + q.z * q.z)
    return wrap_to_pi(math.atan2(siny_cosp, cosy_cosp))


# ---------------------------
# Pose
# ---------------------------

@dataclass(frozen=True)
class Pose3D:
    """
    Rigid transform: position + unit quaternion orientation.

    The orientation is normalized on construction, so every Pose3D in the
    system carries a unit quaternion.
    """
    position: Vector3 = field(default_factory=Vector3)
    orientation: Quaternion = field(default_factory=Quaternion)

    def __post_init__(self) -> None:
        if not _is_finite(*self.position.as_tuple()):
            raise PoseValidationError(
                "Pose position has non-finite components",
                context=ErrorContext(component="pose", field_name="position", value=self.position.as_tuple()),
            )
        object.__setattr__(self, "orientation", quat_normalize(self.orientation))

    # ---- Constructors ------------------------------------------------------

    @classmethod
    def identity(cls) -> "Pose3D":
        return cls()

    @classmethod
    def from_xyz_yaw(cls, x: float, y: float, z: float = 0.0, yaw: float = 0.0) -> "Pose3D":
        return cls(Vector3(float(x), float(y), float(z)), yaw_to_quaternion(float(yaw)))

    # ---- Accessors ---------------------------------------------------------

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    @property
    def z(self) -> float:
        return self.position.z

    @property
    def yaw(self) -> float:
        return quaternion_to_yaw(self.orientation)

    # ---- Algebra -----------------------------------------------------------

    def rotate_vector(self, v: Vector3) -> Vector3:
        return quat_rotate(self.orientation, v)

    def compose(self, other: "Pose3D") -> "Pose3D":
        """Return self * other."""
        return Pose3D(
            position=self.position + self.rotate_vector(other.position),
            orientation=quat_multiply(self.orientation, other.orientation),
        )

    def __mul__(self, other: "Pose3D") -> "Pose3D":
        if not isinstance(other, Pose3D):
            return NotImplemented
        return self.compose(other)

    def inverse(self) -> "Pose3D":
        q_inv = self.orientation.conjugate()
        p = quat_rotate(q_inv, self.position)
        return Pose3D(Vector3(-p.x, -p.y, -p.z), q_inv)

    def is_close(self, other: "Pose3D", tol: float = 1e-9) -> bool:
        """
        Position within `tol` and orientation within `tol` (q and -q are the
        same rotation).
        """
        dp = max(abs(a - b) for a, b in zip(self.position.as_tuple(), other.position.as_tuple()))
        if dp > tol:
            return False
        qa = self.orientation.as_tuple()
        qb = other.orientation.as_tuple()
        dq_same = max(abs(a - b) for a, b in zip(qa, qb))
        dq_flip = max(abs(a + b) for a, b in zip(qa, qb))
        return min(dq_same, dq_flip) <= tol


def compose(a: Pose3D, b: Pose3D) -> Pose3D:
    """Functional form of `a * b`."""
    return a.compose(b)


__all__ = [
    "Vector3",
    "Quaternion",
    "Pose3D",
    "compose",
    "wrap_to_pi",
    "quat_normalize",
    "quat_multiply",
    "quat_rotate",
    "yaw_to_quaternion",
    "quaternion_to_yaw",
]
