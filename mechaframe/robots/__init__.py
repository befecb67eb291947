"""
mechaframe Robots Layer

Provides the robot composition root.
"""

from mechaframe.robots.base import Robot

__all__ = [
    "Robot",
]
