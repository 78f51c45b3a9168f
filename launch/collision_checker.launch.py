#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - Navigation Collision Checker Launch (savo_collision_check)
-----------------------------------------------------------------------
Starts `navigation_collision_checker_node` between the command source and the
base driver.

Recommended usage
-----------------
# Defaults (config/collision_check.yaml)
ros2 launch savo_collision_check collision_checker.launch.py

# Bench test without filtering
ros2 launch savo_collision_check collision_checker.launch.py pass_through:=true

# Custom parameter file
ros2 launch savo_collision_check collision_checker.launch.py params_file:=/abs/path.yaml
"""

from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument, LogInfo
from launch.substitutions import LaunchConfiguration, PathJoinSubstitution
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue
from launch_ros.substitutions import FindPackageShare


def generate_launch_description() -> LaunchDescription:
    pkg_share = FindPackageShare("savo_collision_check")

    # -------------------------------------------------------------------------
    # Launch args
    # -------------------------------------------------------------------------
    params_file = LaunchConfiguration("params_file")
    pass_through = LaunchConfiguration("pass_through")
    output = LaunchConfiguration("output")
    log_level = LaunchConfiguration("log_level")

    declare_args = [
        DeclareLaunchArgument(
            "params_file",
            default_value=PathJoinSubstitution([pkg_share, "config", "collision_check.yaml"]),
            description="Parameter YAML for the collision checker",
        ),
        DeclareLaunchArgument(
            "pass_through",
            default_value="false",
            description="Forward commands unchecked (true/false)",
        ),
        DeclareLaunchArgument("output", default_value="screen"),
        DeclareLaunchArgument("log_level", default_value="info"),
    ]

    collision_checker_node = Node(
        package="savo_collision_check",
        executable="navigation_collision_checker_node",
        name="navigation_collision_checker_node",
        output=output,
        parameters=[
            params_file,
            {"pass_through": ParameterValue(pass_through, value_type=bool)},
        ],
        arguments=["--ros-args", "--log-level", log_level],
    )

    return LaunchDescription(
        declare_args
        + [
            LogInfo(msg=["[savo_collision_check] params_file: ", params_file]),
            collision_checker_node,
        ]
    )
