"""
Force/Torque Sensor Implementation

Measures a 6-dim wrench [fx, fy, fz, tx, ty, tz] expressed in one frame.
The raw wrench is cached unmodified; the sign convention is applied on read.
"""

from typing import Callable, Optional, TYPE_CHECKING

import numpy as np
from omegaconf import DictConfig

from mechaframe.core.base import read_only_view
from mechaframe.core.registry import SENSOR_REGISTRY
from mechaframe.core.types import WRENCH_DIM, ProviderKind
from mechaframe.sensors.base import SensorWithFrame

if TYPE_CHECKING:
    from mechaframe.core.registry import BuildContext
    from mechaframe.model.base import Frame


@SENSOR_REGISTRY.register("force_torque", kind=ProviderKind.NON_JOINT)
class ForceTorqueSensor(SensorWithFrame):
    """
    6-axis force/torque sensor.

    Drivers either subclass and override _get_wrench_raw(), or pass a
    wrench_source callable.

    Config example:
        type: force_torque
        name: wrist_ft
        frame: wrist
        reverse_wrench_direction: false
    """

    SENSOR_TYPE = "force_torque"

    def __init__(
        self,
        cfg: DictConfig,
        frame: Optional["Frame"] = None,
        wrench_source: Optional[Callable[[], np.ndarray]] = None,
        context: Optional["BuildContext"] = None,
    ):
        """
        Args:
            cfg: Sensor configuration
            frame: Frame the wrench is expressed in
            wrench_source: Callable returning one raw wrench sample
            context: Build context (frame lookup by cfg.frame)
        """
        super().__init__(cfg, (WRENCH_DIM,), frame=frame, context=context)
        self.reverse_wrench_direction: bool = bool(cfg.get("reverse_wrench_direction", False))
        self._wrench_source = wrench_source

    @property
    def raw_wrench(self) -> np.ndarray:
        """Last captured wrench, without sign convention."""
        return read_only_view(self._value)

    def set_wrench_source(self, wrench_source: Callable[[], np.ndarray]) -> None:
        """Bind the callable that provides raw wrench samples."""
        self._wrench_source = wrench_source

    def _get_wrench_raw(self) -> np.ndarray:
        if self._wrench_source is None:
            raise RuntimeError(
                f"ForceTorqueSensor '{self.name}' has no wrench source. "
                f"Pass wrench_source or override _get_wrench_raw()."
            )
        return self._wrench_source()

    def _read_sample(self) -> np.ndarray:
        return self._get_wrench_raw()

    def get_value(self) -> np.ndarray:
        if self.reverse_wrench_direction:
            return read_only_view(-self._value)
        return read_only_view(self._value)
