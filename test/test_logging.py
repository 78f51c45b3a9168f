"""Logger adapter and per-key rate limiting."""

import logging

from conftest import FakeClock, RecordingRosLogger
from savo_collision_check.exceptions import ConfigValidationError
from savo_collision_check.utils import (
    LoggerAdapter,
    RateLimitedLogger,
    format_exception,
    format_kv,
    get_logger_adapter,
    log_exception,
)


class FakeNode:
    def __init__(self):
        self.logger = RecordingRosLogger()

    def get_logger(self):
        return self.logger


class TestLoggerAdapter:
    def test_ros_logger_dispatch(self, ros_logger):
        log = LoggerAdapter(ros_logger)
        log.debug("d")
        log.warn("w")
        assert ros_logger.records == [("debug", "d"), ("warn", "w")]
        assert log.is_ros_logger

    def test_std_logger_not_treated_as_ros(self):
        log = LoggerAdapter(logging.getLogger("savo_collision_check.test"))
        assert log.is_std_logger
        assert not log.is_ros_logger

    def test_from_node(self):
        node = FakeNode()
        get_logger_adapter(node).info("hello")
        assert node.logger.records == [("info", "hello")]

    def test_adapter_passthrough(self, logger):
        assert get_logger_adapter(logger) is logger

    def test_default_is_std_logger(self):
        assert get_logger_adapter(None).is_std_logger


class TestFormatting:
    def test_format_kv(self):
        assert format_kv(step=3, contacts=12) == "step=3 contacts=12"

    def test_format_exception(self):
        line = format_exception(ValueError("bad cloud"), message="Dropped environment", component="environment")
        assert line == "[environment] Dropped environment | ValueError: bad cloud"

    def test_log_exception(self, logger, ros_logger):
        log_exception(logger, ConfigValidationError("bad"), component="params")
        assert ros_logger.messages("error") == ["[params] Unhandled exception | ConfigValidationError: bad"]


class TestRateLimitedLogger:
    def test_first_message_always_emitted(self, logger, ros_logger):
        rl = RateLimitedLogger(logger, period_s=3.0, clock=FakeClock(0.0))
        assert rl.warn("k", "first") is True
        assert ros_logger.messages("warn") == ["first"]

    def test_throttles_per_key(self, logger, ros_logger):
        clock = FakeClock(0.0)
        rl = RateLimitedLogger(logger, period_s=1.0, clock=clock)
        rl.info("a", "a1")
        rl.info("b", "b1")
        clock.advance(0.5)
        assert rl.info("a", "a2") is False
        clock.advance(0.5)
        assert rl.info("a", "a3") is True
        assert ros_logger.messages("info") == ["a1", "b1", "a3"]

    def test_reset(self, logger, ros_logger):
        rl = RateLimitedLogger(logger, period_s=10.0, clock=FakeClock(0.0))
        rl.error("k", "one")
        rl.reset("k")
        rl.error("k", "two")
        assert ros_logger.messages("error") == ["one", "two"]
