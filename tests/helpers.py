"""Recording components shared by the test suite."""

import numpy as np
from omegaconf import OmegaConf

from mechaframe.core.base import GenericComponent, StateProvider
from mechaframe.model.joint_state_model import JointStateModel
from mechaframe.motors.base import Motor
from mechaframe.sensors.base import Sensor


class RecordingSensor(Sensor):
    """Non-joint sensor that logs lifecycle calls and sample requests."""

    def __init__(self, name: str, log: list, shape=(3,)):
        super().__init__(OmegaConf.create({"name": name}), shape)
        self.log = log
        self.num_samples = 0

    def _read_sample(self):
        self.num_samples += 1
        return np.full(self.shape, float(self.num_samples))

    def request_state_update(self):
        self.log.append((self.name, "request_state_update"))
        super().request_state_update()

    def _on_initialize(self):
        self.log.append((self.name, "initialize"))

    def _on_set_up(self):
        self.log.append((self.name, "set_up"))

    def _on_terminate(self):
        self.log.append((self.name, "terminate"))


class PlainProvider(StateProvider):
    """State provider without lifecycle capability."""

    def __init__(self, name: str, log: list = None):
        super().__init__(name)
        self.log = log if log is not None else []
        self._value = np.zeros(2)

    def request_state_update(self):
        self.log.append((self.name, "request_state_update"))
        self._value = self._value + 1.0

    def get_value(self):
        return self._value


class RecordingMotor(Motor):
    """Motor that logs lifecycle calls."""

    def __init__(self, name: str, log: list):
        super().__init__(OmegaConf.create({"name": name}))
        self.log = log

    def _on_initialize(self):
        self.log.append((self.name, "initialize"))

    def _on_set_up(self):
        self.log.append((self.name, "set_up"))

    def _on_terminate(self):
        super()._on_terminate()
        self.log.append((self.name, "terminate"))


class ActuatedJoint(GenericComponent, StateProvider):
    """Moving component that also reports its own joint state."""

    def __init__(self, name: str, log: list):
        GenericComponent.__init__(self)
        StateProvider.__init__(self, name)
        self.log = log

    def request_state_update(self):
        self.log.append((self.name, "request_state_update"))

    def get_value(self):
        return np.zeros(2)

    def _on_initialize(self):
        self.log.append((self.name, "initialize"))

    def _on_set_up(self):
        self.log.append((self.name, "set_up"))

    def _on_terminate(self):
        self.log.append((self.name, "terminate"))


class PlainActuator:
    """Moving component without lifecycle capability."""

    def __init__(self, name: str):
        self.name = name


class RecordingModel(JointStateModel):
    """JointStateModel that logs refreshes and serves scripted samples."""

    def __init__(self, log: list, joint_names=("hip", "knee", "ankle")):
        self.log = log
        self.num_updates = 0
        super().__init__(joint_names, state_reader=self._next_sample)

    def _next_sample(self):
        self.num_updates += 1
        q = np.arange(self.num_dofs, dtype=np.float64) + self.num_updates
        return q, -q

    def update_joint_states(self):
        self.log.append(("model", "update_joint_states"))
        super().update_joint_states()
