"""
Sensor Base Classes

Design principles:
1. A Sensor is a non-joint state provider: it caches one sample of fixed shape
2. request_state_update() is the only place a new sample is captured
3. Frame-bound sensors hold non-owning references into the model
"""

from abc import abstractmethod
from typing import Optional, Tuple, TYPE_CHECKING
import weakref

import numpy as np
from omegaconf import DictConfig

from mechaframe.core.base import GenericComponent, StateProvider, read_only_view

if TYPE_CHECKING:
    from mechaframe.core.registry import BuildContext
    from mechaframe.model.base import Frame


class Sensor(GenericComponent, StateProvider):
    """
    Abstract base class for sensors backed by an external reading.

    Lifecycle:
        1. __init__: Store configuration, allocate the cache (zeros)
        2. registration with a robot, initialize(), set_up()
        3. request_state_update(): capture one sample into the cache
        4. get_value() / get_new_state(): read the cache (read-only)
    """

    # Sensor type identifier (for registration)
    SENSOR_TYPE: str = ""

    def __init__(self, cfg: DictConfig, shape: Tuple[int, ...]):
        """
        Initialize sensor.

        Args:
            cfg: Sensor configuration, 'name' defaults to SENSOR_TYPE
            shape: Shape of the cached state
        """
        GenericComponent.__init__(self, cfg)
        StateProvider.__init__(self, cfg.get("name", self.SENSOR_TYPE or type(self).__name__))
        self._shape = tuple(shape)
        self._value = np.zeros(self._shape, dtype=np.float64)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @abstractmethod
    def _read_sample(self) -> np.ndarray:
        """Read one raw sample from the underlying device."""
        pass

    def request_state_update(self) -> None:
        sample = np.array(self._read_sample(), dtype=np.float64)
        if sample.shape != self._shape:
            raise ValueError(
                f"{self.name}: expected sample of shape {self._shape}, got {sample.shape}"
            )
        self._value = sample

    def get_value(self) -> np.ndarray:
        """Read-only view of the cached sample."""
        return read_only_view(self._value)


class SensorWithFrame(Sensor):
    """
    Sensor whose measurement is expressed in a named model frame.

    The frame is either passed directly or resolved from cfg.frame through
    the model in the build context.
    """

    def __init__(
        self,
        cfg: DictConfig,
        shape: Tuple[int, ...],
        frame: Optional["Frame"] = None,
        context: Optional["BuildContext"] = None,
    ):
        super().__init__(cfg, shape)
        if frame is None and context is not None and context.model is not None:
            frame_name = cfg.get("frame", None)
            if frame_name is not None:
                frame = context.model.get_frame(frame_name)
        self._frame_name: Optional[str] = frame.name if frame is not None else cfg.get("frame", None)
        self._frame_ref = weakref.ref(frame) if frame is not None else None

    @property
    def frame_name(self) -> Optional[str]:
        return self._frame_name

    @property
    def frame(self) -> "Frame":
        """
        Get the bound frame.

        Raises:
            RuntimeError: If no frame was bound or it no longer exists
        """
        if self._frame_ref is None:
            raise RuntimeError(f"Sensor '{self.name}' is not bound to a frame.")
        frame = self._frame_ref()
        if frame is None or not frame.is_valid:
            raise RuntimeError(
                f"Sensor '{self.name}': frame '{self._frame_name}' no longer exists."
            )
        return frame
