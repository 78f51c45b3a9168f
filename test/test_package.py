"""The package imports cleanly without a ROS environment."""

import importlib

import pytest

import savo_collision_check


def test_version_exported():
    assert savo_collision_check.__version__ == savo_collision_check.get_version()
    assert savo_collision_check.get_package_version_info().package_name == "savo_collision_check"


@pytest.mark.parametrize("name", savo_collision_check.__all__)
def test_public_names_resolve(name):
    assert getattr(savo_collision_check, name) is not None


@pytest.mark.parametrize(
    "module",
    [
        "savo_collision_check.constants",
        "savo_collision_check.exceptions",
        "savo_collision_check.models",
        "savo_collision_check.kinematics",
        "savo_collision_check.safety",
        "savo_collision_check.utils",
        "savo_collision_check.visualization",
    ],
)
def test_ros_free_modules_import(module):
    importlib.import_module(module)


def test_error_context_defaults():
    from savo_collision_check.exceptions import ErrorContext

    ctx = ErrorContext(component="pose", field_name="orientation")
    assert ctx.extra == {}
    assert ctx.format_compact() == "component=pose, field=orientation"
