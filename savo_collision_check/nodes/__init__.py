# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/nodes/__init__.py
---------------------------------------------------
ROS2 executables (entry points are registered in setup.py).
"""
