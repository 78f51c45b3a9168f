#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/rollout_evaluator.py
-------------------------------------------------------------
Simulate-and-check loop over a short horizon.

Starting at the robot's pose, the evaluator advances a cursor by one
integrated twist step at a time and asks the collision oracle about every
predicted pose. The first colliding step ends the rollout.

Guarantees
----------
- at most `config.step_count` oracle queries; none when `step_count == 0`
- on collision at step i: `SafetyDecision(collided=True, collision_step_index=i)`
  and steps 0..i (inclusive)
- otherwise: `SafetyDecision(collided=False)` and all `step_count` steps
- oracle exceptions propagate unchanged

This module only computes. Logging, visualization and publishing happen in
the safety gate / node.
"""

from __future__ import annotations

from typing import List, Tuple

from savo_collision_check.kinematics.twist_integrator import integrate_twist
from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D
from savo_collision_check.models.rollout import RolloutStep, SafetyDecision
from savo_collision_check.models.twist import Twist
from savo_collision_check.safety.collision_oracle import CollisionOracle
from savo_collision_check.safety.config_store import CollisionCheckConfig


def evaluate_rollout(
    start_pose: Pose3D,
    twist: Twist,
    config: CollisionCheckConfig,
    joint_state: JointState,
    oracle: CollisionOracle,
) -> Tuple[SafetyDecision, List[RolloutStep]]:
    steps: List[RolloutStep] = []
    if config.step_count <= 0:
        return SafetyDecision.clear(), steps

    pose_change = integrate_twist(twist, config.step_time)
    cursor = start_pose

    for i in range(config.step_count):
        cursor = cursor * pose_change
        steps.append(RolloutStep(index=i, pose=cursor))
        if oracle.collides(cursor, joint_state):
            return SafetyDecision.collision_at(i), steps

    return SafetyDecision.clear(), steps


class RolloutEvaluator:
    """
    Stateful wrapper around `evaluate_rollout` that counts work done, for the
    node's state topic.
    """

    def __init__(self, oracle: CollisionOracle) -> None:
        self.oracle = oracle
        self.evaluation_count = 0
        self.query_count = 0

    def evaluate(
        self,
        start_pose: Pose3D,
        twist: Twist,
        config: CollisionCheckConfig,
        joint_state: JointState,
    ) -> Tuple[SafetyDecision, List[RolloutStep]]:
        self.evaluation_count += 1
        decision, steps = evaluate_rollout(start_pose, twist, config, joint_state, self.oracle)
        # one query per recorded step
        self.query_count += len(steps)
        return decision, steps


__all__ = [
    "evaluate_rollout",
    "RolloutEvaluator",
]
