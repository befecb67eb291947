"""
Motor Base Class

A motor is a moving component with a lifecycle that accepts a scalar command
for one joint. Concrete drivers override _apply_command().
"""

from typing import Optional, TYPE_CHECKING

from omegaconf import DictConfig

from mechaframe.core.base import GenericComponent
from mechaframe.core.lifecycle import LifecycleState
from mechaframe.core.registry import MOTOR_REGISTRY

if TYPE_CHECKING:
    from mechaframe.core.registry import BuildContext


@MOTOR_REGISTRY.register("motor")
class Motor(GenericComponent):
    """
    Actuated joint.

    Motors live in the moving group and are addressed by name or position
    there; they are not given a registry index.

    Config example:
        type: motor
        name: knee_motor
        joint: knee
    """

    MOTOR_TYPE = "motor"

    def __init__(self, cfg: DictConfig, context: Optional["BuildContext"] = None):
        GenericComponent.__init__(self, cfg)
        self.name: str = cfg.get("name", self.MOTOR_TYPE)
        self.joint: Optional[str] = cfg.get("joint", None)
        self._command: float = 0.0

    @property
    def command(self) -> float:
        """Last accepted command."""
        return self._command

    def set_command(self, value: float) -> None:
        """
        Send a command to the motor.

        Raises:
            RuntimeError: If the motor is not ACTIVE
        """
        if self._state != LifecycleState.ACTIVE:
            raise RuntimeError(
                f"Motor '{self.name}' cannot accept commands in state {self._state.name}; "
                f"ACTIVE is required."
            )
        self._command = float(value)
        self._apply_command(self._command)

    def _apply_command(self, value: float) -> None:
        pass

    def _on_terminate(self) -> None:
        self._command = 0.0
