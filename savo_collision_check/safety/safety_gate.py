#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/safety_gate.py
-------------------------------------------------------
Stop-or-go decision for every inbound velocity command.

Decision policy (checked in this order)
---------------------------------------
1) pass_through enabled   -> forward command unchanged, no rollout
2) NaN/Inf in the command -> all-zero command, throttled warning
3) no robot pose received -> forward command unchanged (FAIL-OPEN), throttled
                             warning so operators know checking is inactive
4) otherwise              -> roll the command out from the cached pose;
                             collision anywhere on the horizon -> all-zero
                             command, else forward unchanged

Fail-open on a missing pose favours availability over safety: until the
localization source publishes its first pose, nothing is filtered.

Side channels
-------------
- `collision_observer(CollidingConfiguration)` is called once per detected
  collision when set (the node publishes it only if someone listens).
- Counters in `GateStats` feed the node's JSON state topic.

ROS-agnostic: the node converts messages and publishes the results.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional

from savo_collision_check.constants import (
    COLLISION_INFO_PERIOD_S,
    MISSING_POSE_WARN_PERIOD_S,
)
from savo_collision_check.models.joint_state import JointState
from savo_collision_check.models.pose import Pose3D
from savo_collision_check.models.rollout import (
    CollidingConfiguration,
    GateOutput,
    GateReason,
    SafetyDecision,
)
from savo_collision_check.models.twist import Twist
from savo_collision_check.safety.collision_oracle import CollisionOracle
from savo_collision_check.safety.config_store import ConfigStore
from savo_collision_check.safety.rollout_evaluator import RolloutEvaluator
from savo_collision_check.safety.state_cache import StateCache
from savo_collision_check.utils.logging import (
    LoggerAdapter,
    RateLimitedLogger,
    format_kv,
    get_logger_adapter,
)


CollisionObserver = Callable[[CollidingConfiguration], None]

MISSING_POSE_MESSAGE = (
    "Cannot get robot pose. Forwarding velocity command without safety check! "
    "This message is throttled."
)

INVALID_COMMAND_MESSAGE = (
    "Velocity command has non-finite components. Forwarding zero velocity! "
    "This message is throttled."
)


@dataclass
class GateStats:
    commands: int = 0
    pass_through: int = 0
    invalid: int = 0
    fail_open: int = 0
    clear: int = 0
    stopped: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class SafetyGate:
    """
    Filters velocity commands against predicted collisions.

        gate = SafetyGate(ConfigStore(), StateCache(), oracle)
        command, steps = gate.filter(twist)
    """

    def __init__(
        self,
        config_store: ConfigStore,
        state_cache: StateCache,
        oracle: CollisionOracle,
        *,
        logger: Any = None,
        collision_observer: Optional[CollisionObserver] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.config_store = config_store
        self.state_cache = state_cache
        self.evaluator = RolloutEvaluator(oracle)
        self.collision_observer = collision_observer

        self.logger: LoggerAdapter = get_logger_adapter(logger)
        clock_fn = clock or time.monotonic
        self._warn_rl = RateLimitedLogger(self.logger, period_s=MISSING_POSE_WARN_PERIOD_S, clock=clock_fn)
        self._info_rl = RateLimitedLogger(self.logger, period_s=COLLISION_INFO_PERIOD_S, clock=clock_fn)

        self.stats = GateStats()
        self.last_output: Optional[GateOutput] = None

    @property
    def oracle(self) -> CollisionOracle:
        return self.evaluator.oracle

    # -------------------------------------------------------------------------
    # Evaluation
    # -------------------------------------------------------------------------
    def filter(self, twist: Twist) -> GateOutput:
        config = self.config_store.snapshot()
        self.stats.commands += 1

        if config.pass_through:
            self.stats.pass_through += 1
            return self._finish(GateOutput(command=twist, reason=GateReason.PASS_THROUGH))

        if not twist.is_finite():
            self.stats.invalid += 1
            self._warn_rl.warn("invalid_command", INVALID_COMMAND_MESSAGE)
            return self._finish(GateOutput(command=Twist.zero(), reason=GateReason.INVALID_COMMAND))

        start_pose = self.state_cache.robot_pose
        if start_pose is None:
            self.stats.fail_open += 1
            self._warn_rl.warn("no_robot_pose", MISSING_POSE_MESSAGE)
            return self._finish(GateOutput(command=twist, reason=GateReason.NO_ROBOT_POSE))

        joint_state = self.state_cache.joint_state
        decision, steps = self.evaluator.evaluate(start_pose, twist, config, joint_state)

        if not decision.collided:
            self.stats.clear += 1
            return self._finish(
                GateOutput(command=twist, steps=steps, decision=decision, reason=GateReason.CLEAR)
            )

        self.stats.stopped += 1
        colliding_pose = steps[-1].pose
        self._report_collision(decision, colliding_pose, joint_state)
        return self._finish(
            GateOutput(command=Twist.zero(), steps=steps, decision=decision, reason=GateReason.COLLISION)
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _report_collision(self, decision: SafetyDecision, pose: Pose3D, joint_state: JointState) -> None:
        details: Dict[str, Any] = {
            "step": decision.collision_step_index,
            "x": f"{pose.x:.3f}",
            "y": f"{pose.y:.3f}",
            "yaw": f"{pose.yaw:.3f}",
        }
        contacts = getattr(self.oracle, "last_contact_count", None)
        if contacts is not None:
            details["contacts"] = contacts
        self._info_rl.info(
            "collision",
            f"Predicted collision, stopping robot. {format_kv(**details)} This message is throttled.",
        )

        if self.collision_observer is not None:
            self.collision_observer(
                CollidingConfiguration(
                    step_index=int(decision.collision_step_index),
                    pose=pose,
                    joint_state=joint_state.with_virtual_base(pose),
                )
            )

    def _finish(self, output: GateOutput) -> GateOutput:
        self.last_output = output
        return output

    def to_dict(self) -> Dict[str, Any]:
        return {
            "config": self.config_store.snapshot().to_dict(),
            "stats": self.stats.to_dict(),
            "evaluations": self.evaluator.evaluation_count,
            "oracle_queries": self.evaluator.query_count,
            "last_output": None if self.last_output is None else self.last_output.to_dict(),
        }


__all__ = [
    "CollisionObserver",
    "GateStats",
    "INVALID_COMMAND_MESSAGE",
    "MISSING_POSE_MESSAGE",
    "SafetyGate",
]
