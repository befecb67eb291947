"""
mechaframe Core Layer

Provides component capabilities, lifecycle management, the type registry
and shared data types.
"""

from mechaframe.core.base import (
    Indexable,
    StateProvider,
    GenericComponent,
    make_entry,
    read_only_view,
)
from mechaframe.core.errors import (
    RegistrationError,
    DuplicateNameError,
    UnknownComponentError,
)
from mechaframe.core.lifecycle import LifecycleState, LifecycleMixin
from mechaframe.core.registry import (
    Registry,
    BuildContext,
    ComponentType,
    SENSOR_REGISTRY,
    MOTOR_REGISTRY,
)
from mechaframe.core.types import (
    Index,
    ProviderKind,
    Capability,
    ComponentEntry,
    WRENCH_DIM,
)

__all__ = [
    # Capabilities
    "Indexable",
    "StateProvider",
    "GenericComponent",
    "make_entry",
    "read_only_view",
    # Errors
    "RegistrationError",
    "DuplicateNameError",
    "UnknownComponentError",
    # Lifecycle
    "LifecycleState",
    "LifecycleMixin",
    # Registry
    "Registry",
    "BuildContext",
    "ComponentType",
    "SENSOR_REGISTRY",
    "MOTOR_REGISTRY",
    # Data types
    "Index",
    "ProviderKind",
    "Capability",
    "ComponentEntry",
    "WRENCH_DIM",
]
