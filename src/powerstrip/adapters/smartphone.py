"""Outlet adapter for smartphone chargers."""

import structlog

from powerstrip.devices import SmartphoneCharger
from powerstrip.outlet import Outlet

logger = structlog.get_logger()


class SmartphoneAdapter(Outlet):
    """Adapter that charges a smartphone when plugged in.

    The charger's own operation is charge_phone(); this adapter renames it
    to plug_in() without touching the returned text.
    """

    def __init__(self, charger: SmartphoneCharger) -> None:
        self._charger = charger

    @property
    def device(self) -> SmartphoneCharger:
        """Return the wrapped smartphone charger."""
        return self._charger

    def plug_in(self) -> str:
        status = self._charger.charge_phone()
        logger.debug("outlet_plugged_in", device="smartphone", status=status)
        return status
