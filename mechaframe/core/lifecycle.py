"""
Component Lifecycle State Machine for mechaframe

Provides a mixin for components that track a strict, forward-only lifecycle.
Backward transitions raise with a clear error message.

Lifecycle order:
    CONSTRUCTED → [register] → REGISTERED → initialize() → INITIALIZED
    → set_up() → ACTIVE → terminate() → TERMINATED (final)

Usage:
    class MyMotor(LifecycleMixin):
        def set_up(self):
            self._require_state(LifecycleState.INITIALIZED, "set_up")
            # ... do work ...
            self._transition_to(LifecycleState.ACTIVE)
"""

from __future__ import annotations

import logging
from enum import IntEnum, auto

logger = logging.getLogger(__name__)

LIFECYCLE_HINT = (
    "Lifecycle: CONSTRUCTED → [register] → REGISTERED → initialize() → "
    "INITIALIZED → set_up() → ACTIVE → terminate() → TERMINATED"
)


# =============================================================================
# Lifecycle States
# =============================================================================

class LifecycleState(IntEnum):
    """
    Ordered lifecycle states for components.

    Uses IntEnum so states can be compared with < > operators:
        LifecycleState.CONSTRUCTED < LifecycleState.ACTIVE  →  True
    """

    CONSTRUCTED = auto()
    """Component created via __init__(), not yet known to a robot."""

    REGISTERED = auto()
    """Component registered with a robot (index assigned)."""

    INITIALIZED = auto()
    """initialize() called."""

    ACTIVE = auto()
    """set_up() called, component running."""

    TERMINATED = auto()
    """terminate() called. Final state."""


# =============================================================================
# Lifecycle Mixin
# =============================================================================

class LifecycleMixin:
    """
    Mixin that adds lifecycle state tracking to components.

    Provides:
    - _state: current lifecycle state
    - _require_state(): guard that raises if state is too low
    - _transition_to(): advance to a new state with validation
    """

    _state: LifecycleState = LifecycleState.CONSTRUCTED

    @property
    def lifecycle_state(self) -> LifecycleState:
        """Get current lifecycle state."""
        return self._state

    @property
    def is_terminated(self) -> bool:
        return self._state == LifecycleState.TERMINATED

    def _require_state(self, min_state: LifecycleState, action: str = "") -> None:
        """
        Assert that the component is at least in the given state.

        Args:
            min_state: Minimum required state
            action: Name of the action being attempted (for error messages)

        Raises:
            RuntimeError: If current state is below min_state
        """
        if self._state < min_state:
            action_str = f" '{action}'" if action else ""
            raise RuntimeError(
                f"Cannot perform{action_str}: component '{type(self).__name__}' "
                f"is in state {self._state.name}, but {min_state.name} is required.\n"
                f"{LIFECYCLE_HINT}"
            )

    def _check_transition(self, new_state: LifecycleState) -> None:
        """
        Raise if moving to new_state would not go forward.

        Raises:
            RuntimeError: If transition is invalid
        """
        if new_state <= self._state:
            raise RuntimeError(
                f"Invalid lifecycle transition for '{type(self).__name__}': "
                f"{self._state.name} → {new_state.name}. "
                f"Transitions must go forward."
            )

    def _transition_to(self, new_state: LifecycleState) -> None:
        """
        Transition to a new lifecycle state.

        Only forward transitions are valid. TERMINATED is final.

        Args:
            new_state: Target state

        Raises:
            RuntimeError: If transition is invalid
        """
        self._check_transition(new_state)

        old_state = self._state
        self._state = new_state
        logger.debug(
            f"{type(self).__name__}: {old_state.name} → {new_state.name}"
        )
