#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/models/rollout.py
---------------------------------------------------
Result records produced by one rollout evaluation / safety gate call.

All of these are transient: built per inbound velocity command and dropped
afterwards (no rollout history is kept).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D
from savo_collision_check.models.twist import Twist


@dataclass(frozen=True)
class RolloutStep:
    index: int
    pose: Pose3D


@dataclass(frozen=True)
class SafetyDecision:
    collided: bool = False
    collision_step_index: Optional[int] = None

    @classmethod
    def clear(cls) -> "SafetyDecision":
        return cls(collided=False, collision_step_index=None)

    @classmethod
    def collision_at(cls, index: int) -> "SafetyDecision":
        return cls(collided=True, collision_step_index=int(index))


@dataclass(frozen=True)
class CollidingConfiguration:
    """Robot configuration found in collision, as handed to observers."""
    step_index: int
    pose: Pose3D
    joint_state: JointState


class GateReason(str, Enum):
    PASS_THROUGH = "pass_through"
    INVALID_COMMAND = "invalid_command"
    NO_ROBOT_POSE = "no_robot_pose"
    CLEAR = "clear"
    COLLISION = "collision"


@dataclass(frozen=True)
class GateOutput:
    """
    Result of one SafetyGate.filter() call.

    Unpacks as `(command, steps)`:

        command, steps = gate.filter(twist)
    """
    command: Twist
    steps: List[RolloutStep] = field(default_factory=list)
    decision: SafetyDecision = field(default_factory=SafetyDecision.clear)
    reason: GateReason = GateReason.CLEAR

    def __iter__(self) -> Iterator[Any]:
        yield self.command
        yield self.steps

    @property
    def stopped(self) -> bool:
        return self.decision.collided

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reason": self.reason.value,
            "collided": self.decision.collided,
            "collision_step_index": self.decision.collision_step_index,
            "steps": len(self.steps),
            "command": self.command.as_tuple(),
        }


__all__ = [
    "RolloutStep",
    "SafetyDecision",
    "CollidingConfiguration",
    "GateReason",
    "GateOutput",
]
