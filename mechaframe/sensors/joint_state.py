"""
Joint State Provider

Reports [position, velocity] of one dof. Nothing is cached: every read goes
to the model, which the robot refreshes once per update.
"""

from typing import Optional, TYPE_CHECKING
import weakref

import numpy as np
from omegaconf import DictConfig

from mechaframe.core.base import GenericComponent, StateProvider
from mechaframe.core.registry import SENSOR_REGISTRY
from mechaframe.core.types import ProviderKind

if TYPE_CHECKING:
    from mechaframe.core.registry import BuildContext
    from mechaframe.model.base import ModelBase


@SENSOR_REGISTRY.register("joint_state", kind=ProviderKind.JOINT)
class JointStateSensor(GenericComponent, StateProvider):
    """
    Joint state provider delegating to the model.

    Config example:
        type: joint_state
        name: knee_encoder
        joint: knee        # or dof_index: 1
    """

    SENSOR_TYPE = "joint_state"

    def __init__(
        self,
        cfg: DictConfig,
        model: Optional["ModelBase"] = None,
        context: Optional["BuildContext"] = None,
    ):
        GenericComponent.__init__(self, cfg)
        StateProvider.__init__(self, cfg.get("name", self.SENSOR_TYPE))
        if model is None and context is not None:
            model = context.model
        if model is None:
            raise ValueError(f"JointStateSensor '{self.name}' requires a model.")

        if cfg.get("dof_index", None) is not None:
            dof_index = int(cfg.dof_index)
        elif cfg.get("joint", None) is not None:
            dof_index = model.get_dof_index(cfg.joint)
        else:
            raise KeyError(
                f"JointStateSensor '{self.name}': config needs 'joint' or 'dof_index'."
            )
        if not 0 <= dof_index < model.num_dofs:
            raise IndexError(
                f"JointStateSensor '{self.name}': dof_index {dof_index} out of range "
                f"for model with {model.num_dofs} dofs."
            )
        self.dof_index = dof_index
        self._model_ref = weakref.ref(model)

    @property
    def model(self) -> "ModelBase":
        model = self._model_ref()
        if model is None:
            raise RuntimeError(f"JointStateSensor '{self.name}': model no longer exists.")
        return model

    def request_state_update(self) -> None:
        # Joint data is refreshed by the model, not per provider.
        pass

    def get_value(self) -> np.ndarray:
        model = self.model
        return np.array(
            [model.get_positions()[self.dof_index], model.get_velocities()[self.dof_index]]
        )
