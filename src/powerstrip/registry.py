"""Outlet registry keyed by menu choice.

This module maps numbered menu choices to labelled outlets and dispatches
plug_in() calls to them.

Classes:
    - OutletSlot: A registered outlet with its menu choice and label
    - OutletRegistry: Registry of outlets with lookup and dispatch

Example:
    registry = OutletRegistry()
    registry.register(1, "Laptop", LaptopAdapter(Laptop()))
    registry.dispatch(1)  # "Laptop is charging."
"""

from dataclasses import dataclass

import structlog

from powerstrip.errors import OutletError, OutletErrorCode
from powerstrip.outlet import Outlet

logger = structlog.get_logger()


@dataclass(frozen=True)
class OutletSlot:
    """A single entry on the power strip.

    Attributes:
        choice: Menu number that selects this outlet.
        label: Human-readable name shown in the menu.
        outlet: The outlet to plug in when selected.
    """

    choice: int
    label: str
    outlet: Outlet


class OutletRegistry:
    """Registry of outlets addressed by menu choice.

    Attributes:
        _slots: Internal dictionary mapping choice to OutletSlot.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._slots: dict[int, OutletSlot] = {}

    def register(self, choice: int, label: str, outlet: Outlet) -> OutletSlot:
        """Register an outlet under a menu choice.

        Args:
            choice: The menu number that selects the outlet.
            label: Label displayed next to the number in the menu.
            outlet: The outlet to dispatch to.

        Returns:
            The newly created OutletSlot.

        Raises:
            OutletError: If the choice is already taken.
        """
        if choice in self._slots:
            raise OutletError(
                code=OutletErrorCode.DUPLICATE_CHOICE,
                message=f"Choice already assigned to {self._slots[choice].label}",
                choice=choice,
            )

        slot = OutletSlot(choice=choice, label=label, outlet=outlet)
        self._slots[choice] = slot
        logger.debug("outlet_registered", choice=choice, label=label)
        return slot

    def get(self, choice: int) -> OutletSlot | None:
        """Look up a slot by menu choice.

        Returns:
            The OutletSlot if registered, None otherwise.
        """
        return self._slots.get(choice)

    def dispatch(self, choice: int) -> str:
        """Plug in the outlet registered under a choice.

        Args:
            choice: The menu number to dispatch.

        Returns:
            The status string returned by the outlet.

        Raises:
            OutletError: If no outlet is registered under the choice.
        """
        slot = self._slots.get(choice)
        if slot is None:
            raise OutletError(
                code=OutletErrorCode.UNKNOWN_OUTLET,
                message="No outlet registered",
                choice=choice,
            )

        status = slot.outlet.plug_in()
        logger.info("outlet_dispatched", choice=choice, label=slot.label)
        return status

    def list_slots(self) -> list[OutletSlot]:
        """List all registered slots in ascending choice order.

        Returns:
            A snapshot of the registered slots.
        """
        return [self._slots[choice] for choice in sorted(self._slots)]

    def __len__(self) -> int:
        """Return the number of registered outlets."""
        return len(self._slots)

    def __contains__(self, choice: object) -> bool:
        """Check if a choice is registered."""
        return choice in self._slots
