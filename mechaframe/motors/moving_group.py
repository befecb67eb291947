"""
Moving Group

Ordered collection of actuated components (motors, joints).
"""

from typing import Any, List, Tuple
import logging

from mechaframe.core.base import make_entry
from mechaframe.core.types import ComponentEntry

logger = logging.getLogger(__name__)


class MovingGroup:
    """
    Ordered collection of moving components.

    Insertion order is preserved and is the order lifecycle sweeps use.
    Capabilities are resolved when a component is added.
    """

    def __init__(self):
        self._moving_entries: List[ComponentEntry] = []

    def add_moving_component(self, component: Any) -> None:
        """
        Append an actuated component.

        Args:
            component: Motor or any object commanding motion
        """
        if any(entry.component is component for entry in self._moving_entries):
            raise ValueError(
                f"Moving component '{getattr(component, 'name', component)}' already added."
            )
        entry = make_entry(component)
        self._moving_entries.append(entry)
        logger.debug(
            f"Added moving component '{entry.name}' (capabilities={entry.capabilities})"
        )

    @property
    def moving_components(self) -> Tuple[Any, ...]:
        return tuple(entry.component for entry in self._moving_entries)

    @property
    def num_moving_components(self) -> int:
        return len(self._moving_entries)
