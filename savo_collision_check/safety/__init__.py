#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/__init__.py
----------------------------------------------------
Public exports for the `savo_collision_check.safety` package.

Typical usage
-------------
from savo_collision_check.safety import (
    ConfigStore,
    StateCache,
    DiskFootprintOracle,
    SafetyGate,
)
"""

from .config_store import CollisionCheckConfig, ConfigStore, config_from_mapping
from .state_cache import StateCache
from .collision_oracle import CollisionOracle, EnvironmentModel, DiskFootprintOracle
from .rollout_evaluator import RolloutEvaluator, evaluate_rollout
from .safety_gate import GateStats, SafetyGate

__all__ = [
    # configuration
    "CollisionCheckConfig",
    "ConfigStore",
    "config_from_mapping",

    # cached robot state
    "StateCache",

    # collision backends
    "CollisionOracle",
    "EnvironmentModel",
    "DiskFootprintOracle",

    # rollout + decision
    "RolloutEvaluator",
    "evaluate_rollout",
    "GateStats",
    "SafetyGate",
]
