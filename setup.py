#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Robot SAVO - setup.py (ROS 2 Jazzy, ament_python package)
---------------------------------------------------------
Purpose:
- Package the Python modules under `savo_collision_check/`
- Install launch/ and config/ into share/ so `ros2 launch` can find them
- Register `navigation_collision_checker_node` for `ros2 run`

The ROS-agnostic core (models, kinematics, safety, visualization) has no
ROS imports, so `pip install -e .[test]` plus `pytest` works without a
sourced ROS environment.
"""

from glob import glob

from setuptools import find_packages, setup

package_name = "savo_collision_check"

setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(exclude=("test", "test.*")),
    include_package_data=True,
    data_files=[
        # ament index resource (required for ROS 2 package discovery)
        ("share/ament_index/resource_index/packages", [f"resource/{package_name}"]),
        # package manifest
        (f"share/{package_name}", ["package.xml"]),
        (f"share/{package_name}/launch", glob("launch/*.launch.py")),
        (f"share/{package_name}/config", glob("config/*.yaml")),
    ],
    install_requires=[
        "setuptools",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=False,
    maintainer="Ahnaf Tahmid",
    maintainer_email="tahmidahnaf998@gmail.com",
    description=(
        "Robot SAVO navigation collision checker: rolls velocity commands out "
        "over a short horizon and stops the base on a predicted collision "
        "(ROS 2 Jazzy)."
    ),
    license="Proprietary",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": [
            "navigation_collision_checker_node = savo_collision_check.nodes.collision_checker_node:main",
        ],
    },
)
