# -*- coding: utf-8 -*-
"""
Robot SAVO - savo_collision_check/kinematics/__init__.py
--------------------------------------------------------
Motion prediction helpers (unicycle twist integration).
"""

from .twist_integrator import integrate_twist, planar_delta

__all__ = [
    "integrate_twist",
    "planar_delta",
]
