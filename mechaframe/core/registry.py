"""
Component Type Registry for mechaframe

Maps configuration type names to component classes so robots can be
assembled from OmegaConf configuration. Sensor types also record the
provider category a robot files them under unless the configuration
overrides it.

Instance registration (indices, name lookup) lives on Robot.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, TYPE_CHECKING
import logging

from omegaconf import DictConfig

from mechaframe.core.errors import DuplicateNameError
from mechaframe.core.types import ProviderKind

if TYPE_CHECKING:
    from mechaframe.model.base import ModelBase
    from mechaframe.robots.base import Robot

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class BuildContext:
    """
    Construction context handed to every component built from configuration.
    """

    model: Optional["ModelBase"] = None
    """Model the component reads frames or joint data from."""

    robot: Optional["Robot"] = None
    """Robot the component is being built for."""

    extra: dict = field(default_factory=dict)
    """Driver handles and other inputs for custom components."""


@dataclass(frozen=True)
class ComponentType:
    """One registered component class and its default provider category."""

    type_name: str
    cls: Type
    kind: Optional[ProviderKind] = None


class Registry:
    """
    Type-name registry for component classes.

    Example:
        >>> SENSOR_REGISTRY = Registry("sensor")
        >>> @SENSOR_REGISTRY.register("force_torque", kind=ProviderKind.NON_JOINT)
        ... class ForceTorqueSensor(SensorWithFrame):
        ...     pass
        >>> SENSOR_REGISTRY.kind_of("force_torque")
        <ProviderKind.NON_JOINT: ...>
        >>> sensor = SENSOR_REGISTRY.build(cfg, BuildContext(model=model))
    """

    def __init__(self, category: str):
        """
        Args:
            category: What the registry holds (for error messages)
        """
        self._category = category
        self._types: Dict[str, ComponentType] = {}

    @property
    def category(self) -> str:
        return self._category

    @property
    def type_names(self) -> List[str]:
        """Registered type names in registration order."""
        return list(self._types.keys())

    def register(
        self, type_name: str, kind: Optional[ProviderKind] = None
    ) -> Callable[[Type[T]], Type[T]]:
        """
        Class decorator recording a component class under a type name.

        Args:
            type_name: Value of cfg.type that selects the class
            kind: Provider category used when a robot registers instances

        Raises:
            DuplicateNameError: If the type name is already taken
        """
        def decorator(cls: Type[T]) -> Type[T]:
            if type_name in self._types:
                raise DuplicateNameError(
                    f"{self._category} type '{type_name}' is already registered "
                    f"to {self._types[type_name].cls.__name__}."
                )
            self._types[type_name] = ComponentType(type_name, cls, kind)
            logger.debug(f"{self._category} registry: '{type_name}' -> {cls.__name__}")
            return cls
        return decorator

    def lookup(self, type_name: str) -> ComponentType:
        """
        Get the record for a type name.

        Raises:
            KeyError: If the type name is not registered
        """
        record = self._types.get(type_name)
        if record is None:
            raise KeyError(
                f"Unknown {self._category} type '{type_name}'. "
                f"Available: {self.type_names}"
            )
        return record

    def kind_of(self, type_name: str) -> Optional[ProviderKind]:
        """Provider category recorded for a type name, None if not declared."""
        return self.lookup(type_name).kind

    def build(self, cfg: DictConfig, context: Optional[BuildContext] = None) -> Any:
        """
        Instantiate the class selected by cfg.type as cls(cfg, context=context).

        Raises:
            KeyError: If cfg has no 'type' or the type is not registered
        """
        if "type" not in cfg:
            raise KeyError(
                f"{self._category} config needs a 'type' field. "
                f"Got keys: {list(cfg.keys())}"
            )
        record = self.lookup(cfg.type)
        return record.cls(cfg, context=context)

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._types

    def __repr__(self) -> str:
        return f"Registry(category={self._category!r}, types={self.type_names})"


SENSOR_REGISTRY = Registry("sensor")
"""State provider types (force/torque, joint state, ...)"""

MOTOR_REGISTRY = Registry("motor")
"""Moving component types"""
