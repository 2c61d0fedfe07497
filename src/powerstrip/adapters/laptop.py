"""Outlet adapter for laptops."""

import structlog

from powerstrip.devices import Laptop
from powerstrip.outlet import Outlet

logger = structlog.get_logger()


class LaptopAdapter(Outlet):
    """Adapter that charges a laptop when plugged in.

    Attributes:
        _laptop: The wrapped laptop, fixed for the adapter's lifetime.

    Example:
        adapter = LaptopAdapter(Laptop())
        adapter.plug_in()  # "Laptop is charging."
    """

    def __init__(self, laptop: Laptop) -> None:
        self._laptop = laptop

    @property
    def device(self) -> Laptop:
        """Return the wrapped laptop."""
        return self._laptop

    def plug_in(self) -> str:
        """Charge the wrapped laptop and return its status."""
        status = self._laptop.charge()
        logger.debug("outlet_plugged_in", device="laptop", status=status)
        return status
