# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/ros/__init__.py
-------------------------------------------------
ROS2 integration helpers (adapters, params, QoS).

Submodules import rclpy and message packages; import them explicitly, e.g.
`from savo_collision_check.ros.adapters import twist_msg_to_model`, so the
ROS-agnostic core stays importable without a ROS environment.
"""
