"""
Numpy-backed joint-state model.

Reference implementation of ModelBase. Joint data comes from an optional
state reader (a driver, a simulator hook) and is copied into fixed storage,
so views handed out by get_positions()/get_velocities() always show the
most recent refresh.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple
import logging

import numpy as np

from mechaframe.core.base import read_only_view
from mechaframe.model.base import Frame, ModelBase

logger = logging.getLogger(__name__)

StateReader = Callable[[], Tuple[np.ndarray, np.ndarray]]


class JointStateModel(ModelBase):
    """
    Joint-state storage for a mechanism with named joints.

    Example:
        >>> model = JointStateModel(["hip", "knee"], state_reader=driver.read)
        >>> q = model.get_positions()
        >>> model.update_joint_states()  # q now shows the new sample
    """

    def __init__(
        self,
        joint_names: Sequence[str] = (),
        state_reader: Optional[StateReader] = None,
    ):
        """
        Args:
            joint_names: Joint names ordered by dof index
            state_reader: Callable returning (positions, velocities)
        """
        self._joint_names = tuple(joint_names)
        if len(set(self._joint_names)) != len(self._joint_names):
            raise ValueError(f"Joint names must be unique, got {self._joint_names}")
        n = len(self._joint_names)
        self._q = np.zeros(n, dtype=np.float64)
        self._v = np.zeros(n, dtype=np.float64)
        self._state_reader = state_reader
        self._frames: Dict[str, Frame] = {}

    @property
    def num_dofs(self) -> int:
        return self._q.shape[0]

    @property
    def joint_names(self) -> Tuple[str, ...]:
        return self._joint_names

    def get_dof_index(self, joint_name: str) -> int:
        """
        Get the dof index of a joint.

        Raises:
            KeyError: If the joint does not exist
        """
        try:
            return self._joint_names.index(joint_name)
        except ValueError:
            raise KeyError(
                f"Joint '{joint_name}' not found. Available: {list(self._joint_names)}"
            ) from None

    def update_joint_states(self) -> None:
        """Pull one sample from the state reader, if any."""
        if self._state_reader is None:
            return
        q, v = self._state_reader()
        self.set_state(q, v)

    def set_state(self, positions: np.ndarray, velocities: np.ndarray) -> None:
        """
        Overwrite joint state in place.

        Raises:
            ValueError: If either vector is not of shape (num_dofs,)
        """
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        for label, arr in (("positions", positions), ("velocities", velocities)):
            if arr.shape != self._q.shape:
                raise ValueError(
                    f"{label}: expected shape {self._q.shape}, got {arr.shape}"
                )
        self._q[:] = positions
        self._v[:] = velocities

    def get_positions(self) -> np.ndarray:
        return read_only_view(self._q)

    def get_velocities(self) -> np.ndarray:
        return read_only_view(self._v)

    def add_frame(self, name: str, joint_name: Optional[str] = None) -> Frame:
        """
        Create a named frame, optionally attached to a joint.

        Raises:
            KeyError: If a frame with this name exists or the joint is unknown
        """
        if name in self._frames:
            raise KeyError(f"Frame '{name}' already exists.")
        dof_index = self.get_dof_index(joint_name) if joint_name is not None else None
        frame = Frame(name, self, dof_index)
        self._frames[name] = frame
        logger.debug(f"Added frame '{name}' (dof_index={dof_index})")
        return frame

    def get_frame(self, name: str) -> Frame:
        if name not in self._frames:
            raise KeyError(
                f"Frame '{name}' not found. Available: {list(self._frames.keys())}"
            )
        return self._frames[name]

    def __repr__(self) -> str:
        return f"JointStateModel(num_dofs={self.num_dofs}, frames={list(self._frames.keys())})"
