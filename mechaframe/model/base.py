"""
Model Abstract Base Class

Defines the contract of the model collaborator: storage of generalized
positions and velocities, a refresh operation, and named frames.
The model is owned exclusively by a Robot; everything else holds
non-owning references to it.
"""

from abc import ABC, abstractmethod
from typing import Optional
import weakref

import numpy as np


class Frame:
    """
    Named reference frame on a model.

    Holds a weak back-reference to the model so that sensors bound to the
    frame never keep the model alive.
    """

    def __init__(self, name: str, model: "ModelBase", dof_index: Optional[int] = None):
        """
        Args:
            name: Frame name, unique within the model
            model: Owning model
            dof_index: Dof of the joint the frame is attached to, if any
        """
        self.name = name
        self.dof_index = dof_index
        self._model_ref = weakref.ref(model)

    @property
    def model(self) -> "ModelBase":
        """
        Get the owning model.

        Raises:
            RuntimeError: If the model no longer exists
        """
        model = self._model_ref()
        if model is None:
            raise RuntimeError(f"Frame '{self.name}': owning model no longer exists.")
        return model

    @property
    def is_valid(self) -> bool:
        return self._model_ref() is not None

    def __repr__(self) -> str:
        return f"Frame(name={self.name!r}, dof_index={self.dof_index})"


class ModelBase(ABC):
    """
    Abstract base class for the joint-state model.

    Responsibilities:
    - Own generalized position and velocity vectors
    - Refresh them from the underlying source on request
    - Expose read-only views and named frames
    """

    @property
    @abstractmethod
    def num_dofs(self) -> int:
        """Number of degrees of freedom."""
        pass

    @abstractmethod
    def update_joint_states(self) -> None:
        """
        Refresh positions and velocities.

        Must update storage in place so previously returned views stay valid.
        """
        pass

    @abstractmethod
    def get_positions(self) -> np.ndarray:
        """
        Get generalized positions.

        Returns:
            Read-only view into model storage. Shape: (num_dofs,)
        """
        pass

    @abstractmethod
    def get_velocities(self) -> np.ndarray:
        """
        Get generalized velocities.

        Returns:
            Read-only view into model storage. Shape: (num_dofs,)
        """
        pass

    @abstractmethod
    def get_dof_index(self, joint_name: str) -> int:
        """
        Get the dof index of a named joint.

        Raises:
            KeyError: If the joint does not exist
        """
        pass

    @abstractmethod
    def get_frame(self, name: str) -> Frame:
        """
        Get a frame by name.

        Raises:
            KeyError: If the frame does not exist
        """
        pass
