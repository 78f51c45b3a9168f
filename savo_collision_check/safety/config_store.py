#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - savo_collision_check/safety/config_store.py
--------------------------------------------------------
Live-tunable rollout configuration.

Parameters
----------
- roll_out_step_time : seconds per rollout step (> 0)
- roll_out_steps     : number of rollout steps (>= 0)
- pass_through       : disable collision checking entirely

Semantics
---------
- `CollisionCheckConfig` is immutable; the store swaps whole snapshots.
- The safety gate reads `snapshot()` once at the start of each call, so an
  update arriving mid-evaluation never changes an in-flight rollout.
- `update()` is the configuration boundary: the merged result is validated
  and rejected as a whole on any invalid field (store left unchanged).
- Last writer wins. Updates and reads are expected on the node's single
  dispatch thread, so no locking is done here.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from savo_collision_check.constants import (
    PARAM_PASS_THROUGH,
    PARAM_ROLL_OUT_STEP_TIME,
    PARAM_ROLL_OUT_STEPS,
    PASS_THROUGH_DEFAULT,
    ROLL_OUT_STEP_TIME_S_DEFAULT,
    ROLL_OUT_STEPS_DEFAULT,
)
from savo_collision_check.exceptions import config_error


# =============================================================================
# Config snapshot
# =============================================================================
@dataclass(frozen=True)
class CollisionCheckConfig:
    step_time: float = ROLL_OUT_STEP_TIME_S_DEFAULT
    step_count: int = ROLL_OUT_STEPS_DEFAULT
    pass_through: bool = PASS_THROUGH_DEFAULT

    def validate(self) -> "CollisionCheckConfig":
        if isinstance(self.step_time, bool) or not isinstance(self.step_time, (int, float)):
            raise config_error(PARAM_ROLL_OUT_STEP_TIME, self.step_time, "step_time must be a number")
        if not math.isfinite(float(self.step_time)) or float(self.step_time) <= 0.0:
            raise config_error(PARAM_ROLL_OUT_STEP_TIME, self.step_time, "step_time must be finite and > 0")

        if isinstance(self.step_count, bool) or not isinstance(self.step_count, int):
            raise config_error(PARAM_ROLL_OUT_STEPS, self.step_count, "step_count must be an int")
        if self.step_count < 0:
            raise config_error(PARAM_ROLL_OUT_STEPS, self.step_count, "step_count must be >= 0")

        if not isinstance(self.pass_through, bool):
            raise config_error(PARAM_PASS_THROUGH, self.pass_through, "pass_through must be bool")
        return self

    @property
    def horizon_s(self) -> float:
        """Total predicted time covered by one rollout."""
        return float(self.step_time) * int(self.step_count)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# Parameter-name mapping
# =============================================================================
_PARAM_TO_FIELD: Dict[str, str] = {
    PARAM_ROLL_OUT_STEP_TIME: "step_time",
    PARAM_ROLL_OUT_STEPS: "step_count",
    PARAM_PASS_THROUGH: "pass_through",
}


def config_from_mapping(
    mapping: Mapping[str, Any],
    base: Optional[CollisionCheckConfig] = None,
) -> CollisionCheckConfig:
    """
    Build a validated config from a flat parameter mapping.

    Keys use the ROS parameter names (`roll_out_step_time`, `roll_out_steps`,
    `pass_through`); unknown keys are ignored and missing keys keep the value
    from `base` (or the code defaults). Integral floats are accepted for
    `roll_out_steps` and ints for `roll_out_step_time`.
    """
    changes: Dict[str, Any] = {}
    for name, value in mapping.items():
        field_name = _PARAM_TO_FIELD.get(name)
        if field_name is None:
            continue
        if field_name == "step_time" and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if field_name == "step_count" and isinstance(value, float) and value.is_integer():
            value = int(value)
        changes[field_name] = value

    cfg = replace(base or CollisionCheckConfig(), **changes)
    return cfg.validate()


# =============================================================================
# Store
# =============================================================================
class ConfigStore:
    """
    Holds the current CollisionCheckConfig snapshot.

        store = ConfigStore()
        store.update(step_count=20)
        cfg = store.snapshot()
    """

    def __init__(self, initial: Optional[CollisionCheckConfig] = None) -> None:
        self._config = (initial or CollisionCheckConfig()).validate()
        self._update_count = 0

    def snapshot(self) -> CollisionCheckConfig:
        return self._config

    @property
    def update_count(self) -> int:
        return self._update_count

    def update(self, **changes: Any) -> CollisionCheckConfig:
        """
        Apply field changes (`step_time`, `step_count`, `pass_through`).

        Raises ConfigValidationError (store unchanged) on invalid values and
        TypeError on unknown field names.
        """
        candidate = replace(self._config, **changes).validate()
        self._config = candidate
        self._update_count += 1
        return candidate

    def replace_config(self, config: CollisionCheckConfig) -> CollisionCheckConfig:
        self._config = config.validate()
        self._update_count += 1
        return self._config

    def apply_parameters(self, mapping: Mapping[str, Any]) -> CollisionCheckConfig:
        """Apply a flat ROS-parameter mapping on top of the current snapshot."""
        return self.replace_config(config_from_mapping(mapping, base=self._config))


__all__ = [
    "CollisionCheckConfig",
    "ConfigStore",
    "config_from_mapping",
]
