"""
mechaframe Motors Layer

Provides moving components and their ordered collection.
"""

from mechaframe.motors.base import Motor
from mechaframe.motors.moving_group import MovingGroup

__all__ = [
    "Motor",
    "MovingGroup",
]
