"""
Component Capability Base Classes

Defines the three capabilities a robot part may expose:
- Indexable: holds the registry index assigned once by a robot
- StateProvider: refreshes and reports a state vector
- GenericComponent: three-phase lifecycle (initialize, set_up, terminate)

Concrete parts combine them through multiple inheritance, e.g.
    class Sensor(GenericComponent, StateProvider): ...
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

import numpy as np
from omegaconf import DictConfig, OmegaConf

from mechaframe.core.errors import RegistrationError
from mechaframe.core.lifecycle import LifecycleMixin, LifecycleState
from mechaframe.core.types import Capability, ComponentEntry, Index, ProviderKind

logger = logging.getLogger(__name__)


def read_only_view(array: np.ndarray) -> np.ndarray:
    """Non-writeable view sharing memory with array."""
    view = array.view()
    view.flags.writeable = False
    return view


class Indexable:
    """
    Named item addressable by a registry index.

    The index is assigned exactly once, by the robot that registers the item.
    """

    def __init__(self, name: str):
        self._name = name
        self._index: Optional[Index] = None

    @property
    def name(self) -> str:
        """Component name."""
        return self._name

    @property
    def index(self) -> Optional[Index]:
        """Registry index, or None before registration."""
        return self._index

    @property
    def is_registered(self) -> bool:
        return self._index is not None

    def set_index(self, index: Index) -> None:
        """
        Assign the registry index.

        Args:
            index: Position in the owning registry

        Raises:
            RegistrationError: If an index was already assigned
        """
        if self._index is not None:
            raise RegistrationError(
                f"Component '{self._name}' is already registered at index {self._index}."
            )
        self._index = index
        logger.debug(f"{self._name}: assigned index {index}")


class StateProvider(Indexable, ABC):
    """
    Abstract capability for anything that reports a state vector on demand.

    Whether the provider is a joint or non-joint provider is decided when it
    is registered with a robot.
    """

    @abstractmethod
    def request_state_update(self) -> None:
        """Pull exactly one fresh sample into internal storage."""
        pass

    @abstractmethod
    def get_value(self) -> np.ndarray:
        """Return the current state value."""
        pass

    def get_new_state(self, new_state: np.ndarray) -> None:
        """
        Write the current state value into a caller-supplied buffer.

        Args:
            new_state: Destination array, same shape as get_value()

        Raises:
            ValueError: If the buffer shape does not match
        """
        value = self.get_value()
        if new_state.shape != value.shape:
            raise ValueError(
                f"{self.name}: expected buffer of shape {value.shape}, "
                f"got {new_state.shape}"
            )
        new_state[...] = value


class GenericComponent(LifecycleMixin, ABC):
    """
    Abstract base class for components with a three-phase lifecycle.

    Subclasses override the _on_* hooks; the public methods validate and
    record the state transition.
    """

    def __init__(self, cfg: Optional[DictConfig] = None):
        """
        Initialize component.

        Args:
            cfg: Component configuration
        """
        self._state = LifecycleState.CONSTRUCTED
        self.cfg = cfg if cfg is not None else OmegaConf.create({})

    def mark_registered(self) -> None:
        """Record that a robot has registered this component."""
        if self._state == LifecycleState.CONSTRUCTED:
            self._transition_to(LifecycleState.REGISTERED)

    def initialize(self) -> None:
        """Acquire resources. First lifecycle phase."""
        self._check_transition(LifecycleState.INITIALIZED)
        self._on_initialize()
        self._transition_to(LifecycleState.INITIALIZED)

    def set_up(self) -> None:
        """Bring the component into its active state."""
        self._require_state(LifecycleState.INITIALIZED, "set_up")
        self._check_transition(LifecycleState.ACTIVE)
        self._on_set_up()
        self._transition_to(LifecycleState.ACTIVE)

    def terminate(self) -> None:
        """Release resources. No further transitions are possible."""
        self._check_transition(LifecycleState.TERMINATED)
        self._on_terminate()
        self._transition_to(LifecycleState.TERMINATED)

    def _on_initialize(self) -> None:
        pass

    def _on_set_up(self) -> None:
        pass

    def _on_terminate(self) -> None:
        pass


def make_entry(
    component: Any,
    index: Optional[Index] = None,
    kind: Optional[ProviderKind] = None,
) -> ComponentEntry:
    """
    Resolve the capabilities of a component into a registry entry.

    Args:
        component: Object being added to a robot
        index: Registry index, if the component is indexed
        kind: Provider category, if registered as a state provider

    Returns:
        ComponentEntry with typed capability references
    """
    capabilities = Capability.NONE
    lifecycle = None
    provider = None
    if isinstance(component, GenericComponent):
        capabilities |= Capability.LIFECYCLE
        lifecycle = component
    if isinstance(component, StateProvider):
        capabilities |= Capability.STATE_PROVIDER
        provider = component
    return ComponentEntry(
        component=component,
        index=index,
        capabilities=capabilities,
        lifecycle=lifecycle,
        provider=provider,
        kind=kind if provider is not None else None,
    )
