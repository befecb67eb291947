"""
mechaframe Sensors Layer

Provides state provider base classes and implementations.
"""

from mechaframe.sensors.base import Sensor, SensorWithFrame
from mechaframe.sensors.force_torque import ForceTorqueSensor
from mechaframe.sensors.joint_state import JointStateSensor

__all__ = [
    "Sensor",
    "SensorWithFrame",
    "ForceTorqueSensor",
    "JointStateSensor",
]
