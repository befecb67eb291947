"""
mechaframe Model Layer

Contract and reference implementation of the joint-state model.
"""

from mechaframe.model.base import ModelBase, Frame
from mechaframe.model.joint_state_model import JointStateModel

__all__ = [
    "ModelBase",
    "Frame",
    "JointStateModel",
]
