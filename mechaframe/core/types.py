"""
Core Data Types for mechaframe

Shared enums and descriptors used across the registry, sensors and robot layers.
Centralized here to avoid circular imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from mechaframe.core.base import GenericComponent, StateProvider


Index = int
"""Position of a component in the robot registry."""

WRENCH_DIM = 6
"""Force (3) + torque (3)."""


# =============================================================================
# Provider Kind
# =============================================================================

class ProviderKind(Enum):
    """
    Category of a state provider.

    JOINT providers delegate their data to the shared model.
    NON_JOINT providers cache a locally sensed value.
    """

    JOINT = auto()
    NON_JOINT = auto()

    @classmethod
    def from_flag(cls, is_joint: bool) -> "ProviderKind":
        return cls.JOINT if is_joint else cls.NON_JOINT


# =============================================================================
# Capabilities
# =============================================================================

class Capability(Flag):
    """Optional capabilities a registered item may expose."""

    NONE = 0
    LIFECYCLE = auto()
    STATE_PROVIDER = auto()


# =============================================================================
# Registry Entry
# =============================================================================

@dataclass(frozen=True)
class ComponentEntry:
    """
    Registry record for one component.

    Capabilities are resolved once when the entry is created, so sweeps use
    the typed references below instead of probing the component's type.
    """

    component: Any
    """The registered object."""

    index: Optional[Index]
    """Registry index, None for moving components outside the registry."""

    capabilities: Capability
    """Resolved capability set."""

    lifecycle: Optional["GenericComponent"] = None
    """Same object as `component` when it supports the lifecycle, else None."""

    provider: Optional["StateProvider"] = None
    """Same object as `component` when it is a state provider, else None."""

    kind: Optional[ProviderKind] = None
    """Provider category, None for non-providers."""

    @property
    def name(self) -> str:
        return getattr(self.component, "name", type(self.component).__name__)
