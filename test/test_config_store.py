"""Rollout configuration snapshots and validation at the update boundary."""

import math

import pytest

from savo_collision_check.exceptions import ConfigValidationError
from savo_collision_check.safety import CollisionCheckConfig, ConfigStore, config_from_mapping


class TestDefaults:
    def test_code_defaults(self):
        cfg = ConfigStore().snapshot()
        assert cfg.step_time == 0.1
        assert cfg.step_count == 10
        assert cfg.pass_through is False
        assert cfg.horizon_s == pytest.approx(1.0)

    def test_invalid_initial_config_rejected(self):
        with pytest.raises(ConfigValidationError):
            ConfigStore(CollisionCheckConfig(step_time=0.0))


class TestUpdate:
    def test_update_replaces_snapshot(self):
        store = ConfigStore()
        before = store.snapshot()
        after = store.update(step_count=3)

        assert store.snapshot() is after
        assert after.step_count == 3
        # previously taken snapshots are immutable
        assert before.step_count == 10
        assert store.update_count == 1

    @pytest.mark.parametrize(
        "changes",
        [
            {"step_time": 0.0},
            {"step_time": -0.1},
            {"step_time": math.nan},
            {"step_time": math.inf},
            {"step_time": "0.1"},
            {"step_count": -1},
            {"step_count": 2.5},
            {"step_count": True},
            {"pass_through": 1},
        ],
    )
    def test_rejected_update_leaves_store_unchanged(self, changes):
        store = ConfigStore()
        before = store.snapshot()
        with pytest.raises(ConfigValidationError):
            store.update(**changes)
        assert store.snapshot() is before
        assert store.update_count == 0

    def test_error_names_the_parameter(self):
        with pytest.raises(ConfigValidationError) as info:
            ConfigStore().update(step_count=-4)
        assert info.value.context.field_name == "roll_out_steps"
        assert "roll_out_steps" in str(info.value)

    def test_unknown_field_is_type_error(self):
        with pytest.raises(TypeError):
            ConfigStore().update(horizon=3.0)

    def test_zero_steps_allowed(self):
        assert ConfigStore().update(step_count=0).step_count == 0


class TestParameterMapping:
    def test_ros_names_are_mapped(self):
        cfg = config_from_mapping(
            {"roll_out_step_time": 0.2, "roll_out_steps": 4, "pass_through": True}
        )
        assert cfg == CollisionCheckConfig(step_time=0.2, step_count=4, pass_through=True)

    def test_missing_keys_keep_base(self):
        base = CollisionCheckConfig(step_time=0.05, step_count=20)
        cfg = config_from_mapping({"pass_through": True}, base=base)
        assert cfg.step_time == 0.05
        assert cfg.step_count == 20
        assert cfg.pass_through is True

    def test_numeric_coercions(self):
        cfg = config_from_mapping({"roll_out_step_time": 1, "roll_out_steps": 6.0})
        assert cfg.step_time == 1.0 and isinstance(cfg.step_time, float)
        assert cfg.step_count == 6 and isinstance(cfg.step_count, int)

    def test_unknown_keys_ignored(self):
        assert config_from_mapping({"footprint.radius_m": 0.5}) == CollisionCheckConfig()

    def test_apply_parameters_rejects_whole_set(self):
        store = ConfigStore()
        with pytest.raises(ConfigValidationError):
            store.apply_parameters({"roll_out_steps": 3, "roll_out_step_time": -1.0})
        assert store.snapshot().step_count == 10


def test_error_to_dict_carries_context():
    with pytest.raises(ConfigValidationError) as info:
        ConfigStore().update(step_time=-1.0)
    payload = info.value.to_dict()
    assert payload["type"] == "ConfigValidationError"
    assert payload["context"] == {"component": "config_store", "field": "roll_out_step_time", "value": -1.0}
