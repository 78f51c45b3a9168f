#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/models/joint_state.py
-------------------------------------------------------
Named joint positions describing the robot's articulated configuration.

The collision oracle receives this mapping together with every predicted base
pose so it evaluates the right robot shape (arm stowed vs. extended, flipper
angles, ...).

Floating base
-------------
The base pose can itself be written as seven named coordinates of a virtual
world joint (`world_virtual_joint/trans_x` .. `rot_w`). `with_virtual_base()`
fills those in, which is the form reported to collision-state observers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple

from savo_collision_check.constants import VIRTUAL_JOINT_NAMES
from savo_collision_check.models.pose import Pose3D


@dataclass(frozen=True)
class JointState:
    positions: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_names_positions(
        cls,
        names: Iterable[str],
        positions: Iterable[float],
    ) -> "JointState":
        """
        Build from parallel name/position sequences (sensor_msgs/JointState
        layout). Extra names without a position are ignored.
        """
        return cls({str(n): float(p) for n, p in zip(names, positions)})

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, name: object) -> bool:
        return name in self.positions

    def get(self, name: str, default: Optional[float] = None) -> Optional[float]:
        return self.positions.get(name, default)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.positions.keys())

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self.positions.values())

    def merged(self, updates: Mapping[str, float]) -> "JointState":
        out = dict(self.positions)
        out.update({str(k): float(v) for k, v in updates.items()})
        return JointState(out)

    def with_virtual_base(self, pose: Pose3D) -> "JointState":
        """Copy with the virtual world joint set to `pose`."""
        values = pose.position.as_tuple() + pose.orientation.as_tuple()
        return self.merged(dict(zip(VIRTUAL_JOINT_NAMES, values)))


__all__ = ["JointState"]
