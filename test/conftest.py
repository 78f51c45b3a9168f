"""Shared fixtures for the ROS-free collision checker tests."""

from typing import Iterable, List, Tuple

import pytest

from savo_collision_check.models import JointState, Pose3D
from savo_collision_check.safety import CollisionOracle
from savo_collision_check.utils import LoggerAdapter


class RecordingRosLogger:
    """Stands in for an rclpy logger: debug/info/warn/error taking one string."""

    def __init__(self):
        self.records: List[Tuple[str, str]] = []

    def debug(self, msg):
        self.records.append(("debug", msg))

    def info(self, msg):
        self.records.append(("info", msg))

    def warn(self, msg):
        self.records.append(("warn", msg))

    def error(self, msg):
        self.records.append(("error", msg))

    def messages(self, level):
        return [m for lvl, m in self.records if lvl == level]


class ScriptedOracle(CollisionOracle):
    """Reports a collision on the listed query numbers (0-based, per oracle)."""

    def __init__(self, colliding_queries: Iterable[int] = ()):
        self.colliding_queries = set(colliding_queries)
        self.queries: List[Tuple[Pose3D, JointState]] = []

    def collides(self, pose, joint_state):
        n = len(self.queries)
        self.queries.append((pose, joint_state))
        return n in self.colliding_queries


class FailingOracle(CollisionOracle):
    def collides(self, pose, joint_state):
        raise RuntimeError("planning scene unavailable")


class FakeClock:
    def __init__(self, t=0.0):
        self.t = float(t)

    def __call__(self):
        return self.t

    def advance(self, dt):
        self.t += dt


@pytest.fixture
def ros_logger():
    return RecordingRosLogger()


@pytest.fixture
def logger(ros_logger):
    return LoggerAdapter(ros_logger)


@pytest.fixture
def clock():
    return FakeClock(100.0)
