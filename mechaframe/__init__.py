"""
mechaframe - Component registry and lifecycle protocol for robots
"""

__version__ = "0.1.0"

from mechaframe.robots import Robot
from mechaframe.model import JointStateModel
from mechaframe.sensors import ForceTorqueSensor, JointStateSensor
from mechaframe.motors import Motor

__all__ = [
    "Robot",
    "JointStateModel",
    "ForceTorqueSensor",
    "JointStateSensor",
    "Motor",
    "__version__",
]
