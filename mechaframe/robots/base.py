"""
Robot Composition Root

Owns the joint-state model and the registry of every motor and state
provider, drives the lifecycle sweeps and sequences state updates.

Sweep order (initialize, set_up, terminate):
    1. moving components   2. non-joint providers   3. joint providers
each in registration order. Items without a lifecycle are skipped, and a
component filed under several categories runs once per phase.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
import logging

import numpy as np
from omegaconf import DictConfig

from mechaframe.core.base import GenericComponent, StateProvider, make_entry
from mechaframe.core.errors import (
    DuplicateNameError,
    RegistrationError,
    UnknownComponentError,
)
from mechaframe.core.registry import BuildContext, MOTOR_REGISTRY, SENSOR_REGISTRY
from mechaframe.core.types import ComponentEntry, Index, ProviderKind
from mechaframe.model.base import ModelBase
from mechaframe.model.joint_state_model import JointStateModel
from mechaframe.motors.moving_group import MovingGroup

logger = logging.getLogger(__name__)


class Robot(GenericComponent, MovingGroup):
    """
    Composition root for a robot.

    The model passed in (or created by default) is owned by the robot;
    sensors and frames only hold weak references to it. Components returned
    by get_component() are borrowed and must not outlive the robot.

    Example:
        >>> robot = Robot(model=JointStateModel(["hip", "knee"], reader))
        >>> robot.register_state_provider(ft_sensor, is_joint=False)
        >>> robot.initialize(); robot.set_up()
        >>> robot.update_all_states()
        >>> q = robot.get_joint_positions()
    """

    ROBOT_TYPE: str = "robot"

    def __init__(self, cfg: Optional[DictConfig] = None, model: Optional[ModelBase] = None):
        """
        Initialize robot.

        Args:
            cfg: Robot configuration (name, allow_duplicate_names, joint_names)
            model: Model to take ownership of. A JointStateModel over
                cfg.joint_names is created if omitted.
        """
        GenericComponent.__init__(self, cfg)
        MovingGroup.__init__(self)
        self.name: str = self.cfg.get("name", self.ROBOT_TYPE)
        self._allow_duplicate_names = bool(self.cfg.get("allow_duplicate_names", False))
        if model is None:
            model = JointStateModel(list(self.cfg.get("joint_names", [])))
        self._model = model

        self._entries: List[ComponentEntry] = []
        self._name_to_index: Dict[str, Index] = {}
        self._joint_entries: List[ComponentEntry] = []
        self._non_joint_entries: List[ComponentEntry] = []

    @classmethod
    def from_config(cls, cfg: DictConfig) -> "Robot":
        """
        Assemble a robot from configuration.

        Config example:
            name: arm
            joint_names: [shoulder, elbow]
            frames:
              - {name: wrist, joint: elbow}
            motors:
              - {type: motor, name: elbow_motor, joint: elbow}
            sensors:
              - {type: force_torque, name: wrist_ft, frame: wrist}
              - {type: joint_state, name: elbow_enc, joint: elbow}
        """
        robot = cls(cfg)
        model = robot.model
        for frame_cfg in cfg.get("frames", []):
            model.add_frame(frame_cfg.name, frame_cfg.get("joint", None))
        robot.add_motors(cfg.get("motors", []))
        robot.add_sensors(cfg.get("sensors", []))
        return robot

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_state_provider(self, state_provider: StateProvider, is_joint: bool) -> None:
        """
        Register a state provider and assign its index.

        Args:
            state_provider: Provider to register
            is_joint: True if its data is delegated to the model

        Raises:
            TypeError: If the object is not a StateProvider
            RegistrationError: If the provider is already registered
            DuplicateNameError: If the name is taken and duplicates are not allowed
        """
        if not isinstance(state_provider, StateProvider):
            raise TypeError(
                f"Expected a StateProvider, got {type(state_provider).__name__}"
            )
        if state_provider.is_registered:
            raise RegistrationError(
                f"State provider '{state_provider.name}' is already registered "
                f"(index {state_provider.index})."
            )
        name = state_provider.name
        if name in self._name_to_index:
            if not self._allow_duplicate_names:
                raise DuplicateNameError(
                    f"A component named '{name}' is already registered on robot "
                    f"'{self.name}' at index {self._name_to_index[name]}."
                )
            logger.warning(
                f"Robot '{self.name}': '{name}' shadows the component at index "
                f"{self._name_to_index[name]}; it stays reachable by index only."
            )

        index = len(self._entries)
        entry = make_entry(state_provider, index, ProviderKind.from_flag(is_joint))
        if is_joint:
            self._joint_entries.append(entry)
        else:
            self._non_joint_entries.append(entry)
        self._entries.append(entry)
        self._name_to_index[name] = index
        state_provider.set_index(index)
        if entry.lifecycle is not None:
            entry.lifecycle.mark_registered()
        logger.debug(f"Robot '{self.name}': registered '{name}' at index {index} ({entry.kind.name})")

    def add_sensors(self, sensor_cfgs: List[DictConfig]) -> List[StateProvider]:
        """
        Build state providers from configuration and register them.

        The category comes from cfg.joint_provider, defaulting to the kind
        recorded for cfg.type in SENSOR_REGISTRY (non-joint if none).
        """
        context = BuildContext(model=self._model, robot=self)
        sensors = []
        for sensor_cfg in sensor_cfgs:
            sensor = SENSOR_REGISTRY.build(sensor_cfg, context=context)
            kind = SENSOR_REGISTRY.kind_of(sensor_cfg.type) or ProviderKind.NON_JOINT
            is_joint = sensor_cfg.get("joint_provider", kind is ProviderKind.JOINT)
            self.register_state_provider(sensor, bool(is_joint))
            sensors.append(sensor)
        return sensors

    def add_motors(self, motor_cfgs: List[DictConfig]) -> List[Any]:
        """Build moving components from configuration and add them in order."""
        context = BuildContext(model=self._model, robot=self)
        motors = []
        for motor_cfg in motor_cfgs:
            motor = MOTOR_REGISTRY.build(motor_cfg, context=context)
            self.add_moving_component(motor)
            motors.append(motor)
        return motors

    # -------------------------------------------------------------------------
    # Lifecycle sweeps
    # -------------------------------------------------------------------------

    def _sweep_order(self) -> Iterator[ComponentEntry]:
        yield from self._moving_entries
        yield from self._non_joint_entries
        yield from self._joint_entries

    def _sweep(self, phase: str) -> None:
        # A component in several categories runs each phase at its first position.
        visited = set()
        for entry in self._sweep_order():
            if entry.lifecycle is None or id(entry.lifecycle) in visited:
                continue
            visited.add(id(entry.lifecycle))
            getattr(entry.lifecycle, phase)()
        logger.info(f"Robot '{self.name}': {phase} done on {len(visited)} components")

    def _on_initialize(self) -> None:
        self._sweep("initialize")

    def _on_set_up(self) -> None:
        self._sweep("set_up")

    def _on_terminate(self) -> None:
        self._sweep("terminate")

    # -------------------------------------------------------------------------
    # State updates
    # -------------------------------------------------------------------------

    def update_all_states(self) -> None:
        """Sample every non-joint provider in order, then refresh the model once."""
        for entry in self._non_joint_entries:
            entry.provider.request_state_update()
        self._model.update_joint_states()

    def update_joint_states(self) -> None:
        """Refresh the model only."""
        self._model.update_joint_states()

    def get_joint_positions(self) -> np.ndarray:
        """Read-only view of model positions. Shape: (num_dofs,)"""
        return self._model.get_positions()

    def get_joint_velocities(self) -> np.ndarray:
        """Read-only view of model velocities. Shape: (num_dofs,)"""
        return self._model.get_velocities()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_component(self, key: Union[str, Index]) -> Any:
        """
        Look up a registered component.

        Args:
            key: Component name, or registry index. Indices are not validated.

        Raises:
            UnknownComponentError: If a name is not registered
        """
        if isinstance(key, str):
            if key not in self._name_to_index:
                raise UnknownComponentError(
                    f"'{key}' is not registered on robot '{self.name}'. "
                    f"Available: {list(self._name_to_index.keys())}"
                )
            return self._entries[self._name_to_index[key]].component
        return self._entries[key].component

    def find_component(self, name: str) -> Optional[Any]:
        """Look up a component by name, returning None if absent."""
        index = self._name_to_index.get(name)
        if index is None:
            return None
        return self._entries[index].component

    def get_entry(self, index: Index) -> ComponentEntry:
        """Registry entry (with resolved capabilities) at an index."""
        return self._entries[index]

    @property
    def model(self) -> ModelBase:
        """Borrowed reference to the owned model."""
        return self._model

    @property
    def num_components(self) -> int:
        return len(self._entries)

    @property
    def joint_state_providers(self) -> Tuple[StateProvider, ...]:
        return tuple(entry.provider for entry in self._joint_entries)

    @property
    def non_joint_state_providers(self) -> Tuple[StateProvider, ...]:
        return tuple(entry.provider for entry in self._non_joint_entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._name_to_index

    def __repr__(self) -> str:
        return (
            f"Robot(name={self.name!r}, components={list(self._name_to_index.keys())}, "
            f"moving={self.num_moving_components})"
        )
